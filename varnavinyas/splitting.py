"""Reverse sandhi: find the morpheme pairs that join to form a word."""

from __future__ import annotations

from collections.abc import Iterable

from .core import Lexicon, Origin
from .sandhi import HALANTA, VISARGA, SandhiError, SandhiResult, SandhiType, apply

__all__ = ["split_aksharas", "valid_split_parts", "split"]

# Conservative list of one-akshara upasargas accepted as left parts, so that
# noisy splits such as रा + आम for राम are not produced.
ONE_AKSHARA_UPASARGAS = frozenset({"प्र", "वि", "सु", "नि", "आ"})
DIRECT_JOIN_UPASARGAS = frozenset({"प्र", "वि"})

_VOWELS = ("अ", "आ", "इ", "ई", "उ", "ऊ", "ए", "ऐ", "ओ", "औ", "ऋ")

# Sibilant that a visarga becomes before each group of stops.
_SIBILANT_STOPS = (("श", "चछ"), ("ष", "टठ"), ("स", "तथ"))

# Matra left on the preceding consonant → vowels that may have produced it.
_MATRA_SOURCES = {
    "ा": ("अ", "आ"),
    "े": ("इ", "ई"),
    "ो": ("उ", "ऊ"),
    "ै": ("ए", "ऐ"),
    "ौ": ("ओ", "औ"),
}

_DIRECT_JOIN_CITATION = "उपसर्ग संयोग: direct prefix-stem concatenation"

Split = tuple[str, str, SandhiResult]


def _is_consonant(ch: str) -> bool:
    return "\u0915" <= ch <= "\u0939" or "\u0958" <= ch <= "\u095f" or "\u0978" <= ch <= "\u097f"


def _is_combining(ch: str) -> bool:
    return (
        "\u0900" <= ch <= "\u0903"
        or ch == "\u093a"
        or ch == "\u093b"
        or ch == "\u093c"
        or "\u093e" <= ch <= "\u094f"
        or "\u0951" <= ch <= "\u0957"
        or "\u0962" <= ch <= "\u0963"
        or ch in "\u200c\u200d"
    )


def split_aksharas(word: str) -> list[str]:
    """Split a Devanagari word into aksharas (orthographic syllables).

    A consonant joined to the previous one by halanta forms a conjunct, and
    matras and other signs attach to the akshara before them.
    """
    aksharas: list[str] = []
    for ch in word:
        joins = _is_combining(ch) or (_is_consonant(ch) and aksharas and aksharas[-1].endswith(HALANTA))
        if aksharas and joins:
            aksharas[-1] += ch
        else:
            aksharas.append(ch)
    return aksharas


def valid_split_parts(left: str, right: str) -> bool:
    """Whether both parts are long enough to be real morphemes."""
    valid_left = len(split_aksharas(left)) >= 2 or left in ONE_AKSHARA_UPASARGAS
    return valid_left and len(split_aksharas(right)) >= 2


def split(word: str, lexicon: Lexicon) -> list[Split]:
    """Find ``(left, right, result)`` pairs that join by sandhi into ``word``.

    Pass the morphological root, after case and plural markers are removed.
    Both parts must be in ``lexicon``. Results are sorted by ``(left, right)``
    with duplicates removed.
    """
    if len(split_aksharas(word)) < 3:
        return []

    is_tatsam_word = lexicon.origin_of(word) is Origin.TATSAM
    results: list[Split] = []

    def attempt(left: str, right: str) -> None:
        try:
            result = apply(left, right)
        except SandhiError:
            return
        if result.output == word:
            results.append((left, right, result))

    def attempt_with_vowels(lefts: Iterable[str], raw_right: str) -> None:
        for left in lefts:
            if left not in lexicon:
                continue
            for vowel in _VOWELS:
                right = vowel + raw_right
                if right in lexicon:
                    attempt(left, right)

    for boundary in range(1, len(word)):
        raw_left, raw_right = word[:boundary], word[boundary:]

        # Upasarga joined to a stem without any change: प्र + गति → प्रगति.
        if (
            raw_left in DIRECT_JOIN_UPASARGAS
            and raw_left in lexicon
            and raw_right in lexicon
            and is_tatsam_word
            and lexicon.origin_of(raw_right) is Origin.TATSAM
        ):
            results.append(
                (raw_left, raw_right, SandhiResult(word, SandhiType.CONSONANT, _DIRECT_JOIN_CITATION))
            )

        # Both halves are words already (visarga retained, or no change).
        if raw_left in lexicon and raw_right in lexicon:
            attempt(raw_left, raw_right)

        # A vowel was absorbed at the start of the right part.
        for vowel in _VOWELS:
            candidate_right = vowel + raw_right
            if candidate_right not in lexicon:
                continue
            if raw_left in lexicon:
                attempt(raw_left, candidate_right)
            for suffix in ("ा", VISARGA):
                left = raw_left + suffix
                if left in lexicon:
                    attempt(left, candidate_right)

        # Yan sandhi: इ/ई → य, उ/ऊ → व.
        if raw_left.endswith(HALANTA + "य"):
            base = raw_left[:-2]
            attempt_with_vowels((base + "ि", base + "ी"), raw_right)
        if raw_left.endswith(HALANTA + "व"):
            base = raw_left[:-2]
            attempt_with_vowels((base + "ु", base + "ू"), raw_right)

        # Visarga became र before a vowel (अ absorbed into र).
        if raw_right.startswith("र"):
            left = raw_left + VISARGA
            right = "अ" + raw_right[1:]
            if left in lexicon and right in lexicon:
                attempt(left, right)

        # Visarga became र् before a voiced consonant.
        if raw_right.startswith("र" + HALANTA):
            left = raw_left + VISARGA
            right = raw_right[2:]
            if left in lexicon and right in lexicon:
                attempt(left, right)

        # Visarga became a sibilant before a stop of the same place.
        for sibilant, stops in _SIBILANT_STOPS:
            ending = sibilant + HALANTA
            if raw_left.endswith(ending) and raw_right[0] in stops:
                left = raw_left[: -len(ending)] + VISARGA
                if left in lexicon and raw_right in lexicon:
                    attempt(left, raw_right)

        # Ayadi sandhi: ऐ → आय, ए → अय, औ → आव, ओ → अव.
        if raw_left.endswith("ाय"):
            base = raw_left[:-2]
            attempt_with_vowels((base + "ै", base + "ऐ"), raw_right)
        elif raw_left.endswith("य"):
            base = raw_left[:-1]
            attempt_with_vowels((base + "े", base + "ए"), raw_right)
        if raw_left.endswith("ाव"):
            base = raw_left[:-2]
            attempt_with_vowels((base + "ौ", base + "औ"), raw_right)
        elif raw_left.endswith("व"):
            base = raw_left[:-1]
            attempt_with_vowels((base + "ो", base + "ओ"), raw_right)

        # Guna/vriddhi left a matra on the preceding consonant.
        sources = _MATRA_SOURCES.get(raw_right[0])
        if sources is not None:
            remainder = raw_right[1:]
            lefts = [raw_left] + [raw_left + suffix for suffix in ("ा", VISARGA)]
            for left in lefts:
                if left not in lexicon:
                    continue
                for vowel in sources:
                    candidate_right = vowel + remainder
                    if candidate_right in lexicon:
                        attempt(left, candidate_right)

    def keep(candidate: Split) -> bool:
        left, right, _ = candidate
        if not valid_split_parts(left, right):
            return False
        if len(split_aksharas(left)) < 2:
            return is_tatsam_word and lexicon.origin_of(right) is Origin.TATSAM
        return True

    unique: dict[tuple[str, str], Split] = {}
    for candidate in sorted(filter(keep, results), key=lambda item: (item[0], item[1])):
        unique.setdefault((candidate[0], candidate[1]), candidate)
    return list(unique.values())