"""Rule-based morphological analysis of Nepali words."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .core import Lexicon
from .morphology import decompose

__all__ = [
    "VyakaranError",
    "Gender",
    "Number",
    "Case",
    "Person",
    "Tense",
    "Features",
    "MorphAnalysis",
    "RuleBasedAnalyzer",
    "transform_negative",
]


class VyakaranError(ValueError):
    """Error raised by morphological analysis."""


class Gender(Enum):
    """Grammatical gender (लिंग)."""

    MASCULINE = "masculine"
    FEMININE = "feminine"
    NEUTER = "neuter"


class Number(Enum):
    """Grammatical number (वचन)."""

    SINGULAR = "singular"
    PLURAL = "plural"


class Case(Enum):
    """Grammatical case (कारक)."""

    NOMINATIVE = "nominative"
    ACCUSATIVE = "accusative"
    INSTRUMENTAL = "instrumental"
    DATIVE = "dative"
    ABLATIVE = "ablative"
    GENITIVE = "genitive"
    LOCATIVE = "locative"
    VOCATIVE = "vocative"


class Person(Enum):
    """Grammatical person (पुरुष)."""

    FIRST = "first"
    SECOND = "second"
    THIRD = "third"


class Tense(Enum):
    """Verb tense or aspect (काल/पक्ष)."""

    PRESENT = "present"
    PAST = "past"
    FUTURE = "future"
    UNKNOWN = "unknown"


@dataclass
class Features:
    """Grammatical features of a word; ``None`` where undetermined."""

    gender: Gender | None = None
    number: Number | None = None
    case: Case | None = None
    tense: Tense | None = None
    person: Person | None = None


@dataclass
class MorphAnalysis:
    """One morphological reading of a word."""

    lemma: str
    prefix: str | None = None
    suffix: str | None = None
    features: Features = field(default_factory=Features)


_CASE_SUFFIXES = (
    ("देखि", Case.ABLATIVE),
    ("बाट", Case.ABLATIVE),
    ("सँग", Case.INSTRUMENTAL),
    ("लाई", Case.DATIVE),
    ("तिर", Case.LOCATIVE),
    ("का", Case.GENITIVE),
    ("की", Case.GENITIVE),
    ("को", Case.GENITIVE),
    ("ले", Case.INSTRUMENTAL),
    ("मा", Case.LOCATIVE),
)

_PLURAL_SUFFIXES = ("हरू", "हरु")

_NONFINITE_VERB_ENDINGS = ("उन्जेल", "दै", "दा", "एर", "नु", "ई")

_DERIVATIONAL_SUFFIXES = ("उन्जेल", "आत", "अट")

_PRESENT_PERSON_ENDINGS = (
    ("छन्", Person.THIRD),
    ("छौं", Person.FIRST),
    ("छु", Person.FIRST),
    ("छौ", Person.SECOND),
    ("छ", Person.THIRD),
)

_PRESENT_POS_TO_NEG_ENDINGS = (
    ("छन्", "दैनन्"),
    ("छौं", "दैनौं"),
    ("छौ", "दैनौ"),
    ("छु", "दिन"),
    ("छ", "दैन"),
)

_PRESENT_NEGATIVE_ENDINGS = (
    ("दैनन्", Person.THIRD),
    ("दैनौं", Person.FIRST),
    ("दैनौ", Person.SECOND),
    ("दिन", Person.FIRST),
    ("दैन", Person.THIRD),
)

_FUTURE_PERSON_ENDINGS = (
    ("नेछन्", Person.THIRD),
    ("नेछौं", Person.FIRST),
    ("नेछु", Person.FIRST),
    ("नेछौ", Person.SECOND),
    ("नेछ", Person.THIRD),
)

_PAST_POSITIVE_ENDINGS = (
    ("यौ", Person.SECOND),
    ("एँ", Person.FIRST),
    ("यो", Person.THIRD),
)

_NEGATIVE_PREFIX = "न"


def transform_negative(word: str) -> str | None:
    """Negative form of a present or simple past verb, or ``None``."""
    for positive, negative in _PRESENT_POS_TO_NEG_ENDINGS:
        if word.endswith(positive):
            stem = word[: -len(positive)]
            if stem:
                return stem + negative
    if word.endswith("यो"):
        stem = word[:-2]
        if stem:
            return stem + "एन"
    return None


def _find_ending(
    word: str, endings: tuple[tuple[str, Person], ...]
) -> tuple[str, Person] | None:
    return next(((e, p) for e, p in endings if word.endswith(e)), None)


def _nonfinite_suffix(word: str) -> str | None:
    return next(
        (e for e in _NONFINITE_VERB_ENDINGS if word.endswith(e) and len(word) > len(e)),
        None,
    )


def _verbal(
    lemma: str,
    suffix: str | None,
    tense: Tense,
    person: Person | None = None,
    prefix: str | None = None,
) -> MorphAnalysis:
    return MorphAnalysis(
        lemma=lemma,
        prefix=prefix,
        suffix=suffix,
        features=Features(tense=tense, person=person),
    )


class RuleBasedAnalyzer:
    """Suffix-driven analyzer for nominal, verbal and derivational forms."""

    def __init__(self, lexicon: Lexicon | None = None) -> None:
        self.lexicon = lexicon if lexicon is not None else Lexicon()

    def analyze(self, word: str) -> list[MorphAnalysis]:
        """All readings of ``word``; the bare word when no rule matches."""
        if not word:
            return []
        analyses = [
            analysis
            for analysis in (
                self._analyze_nominal(word),
                self._analyze_verbal(word),
                self._analyze_derivational(word),
            )
            if analysis is not None
        ]
        return analyses or [MorphAnalysis(lemma=word)]

    def _analyze_nominal(self, word: str) -> MorphAnalysis | None:
        stem = word
        parts: list[str] = []
        features = Features(number=Number.SINGULAR, case=Case.NOMINATIVE)

        for suffix, case in _CASE_SUFFIXES:
            if stem.endswith(suffix):
                rest = stem[: -len(suffix)]
                if rest:
                    stem = rest
                    parts.append(suffix)
                    features.case = case
                break

        for plural in _PLURAL_SUFFIXES:
            if stem.endswith(plural):
                rest = stem[: -len(plural)]
                if rest:
                    stem = rest
                    parts.append(plural)
                    features.number = Number.PLURAL
                break

        if stem == word:
            return None

        return MorphAnalysis(
            lemma=self._nominal_lemma(stem, features.case),
            suffix="".join(reversed(parts)) or None,
            features=features,
        )

    def _nominal_lemma(self, stem: str, case: Case | None) -> str:
        # Oblique ा recovers a lexical ो lemma: केटा(लाई) → केटो.
        if case is not None and case is not Case.NOMINATIVE and stem.endswith("ा"):
            candidate = stem[:-1] + "ो"
            if candidate in self.lexicon:
                return candidate
        if stem in self.lexicon:
            return stem
        return decompose(stem, self.lexicon).root

    @staticmethod
    def _analyze_derivational(word: str) -> MorphAnalysis | None:
        for suffix in _DERIVATIONAL_SUFFIXES:
            if word.endswith(suffix) and len(word) > len(suffix):
                return MorphAnalysis(lemma=word[: -len(suffix)], suffix=suffix)
        return None

    @staticmethod
    def _analyze_verbal(word: str) -> MorphAnalysis | None:
        if word.startswith(_NEGATIVE_PREFIX):
            stem = word[len(_NEGATIVE_PREFIX):]
            if stem:
                found = _find_ending(stem, _FUTURE_PERSON_ENDINGS)
                if found is not None:
                    ending, person = found
                    return _verbal(stem, ending, Tense.FUTURE, person, _NEGATIVE_PREFIX)
                found = _find_ending(stem, _PRESENT_PERSON_ENDINGS)
                if found is not None:
                    ending, person = found
                    return _verbal(stem, ending, Tense.PRESENT, person, _NEGATIVE_PREFIX)
                if _nonfinite_suffix(stem) is not None:
                    return _verbal(stem, None, Tense.UNKNOWN, prefix=_NEGATIVE_PREFIX)

        ending = _nonfinite_suffix(word)
        if ending is not None:
            return _verbal(word, ending, Tense.UNKNOWN)

        if word.endswith("नु") and len(word) > 2:
            return _verbal(word, "नु", Tense.UNKNOWN)

        # Progressive: ...दै + present ending.
        if "दै" in word:
            found = _find_ending(word, _PRESENT_PERSON_ENDINGS)
            if found is not None:
                return _verbal(word, found[0], Tense.PRESENT, found[1])

        found = _find_ending(word, _FUTURE_PERSON_ENDINGS)
        if found is not None:
            return _verbal(word, found[0], Tense.FUTURE, found[1])

        found = _find_ending(word, _PRESENT_NEGATIVE_ENDINGS)
        if found is not None:
            return _verbal(word, found[0], Tense.PRESENT, found[1])

        if word.endswith("छैन"):
            return _verbal(word, "छैन", Tense.PRESENT)

        if word.endswith("एन"):
            return _verbal(word, "एन", Tense.PAST)

        found = _find_ending(word, _PAST_POSITIVE_ENDINGS)
        if found is not None:
            return _verbal(word, found[0], Tense.PAST, found[1])

        return None