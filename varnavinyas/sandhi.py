"""Sandhi rules for joining two Nepali morphemes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "SandhiType",
    "SandhiResult",
    "SandhiError",
    "EmptyInputError",
    "NoRuleAppliesError",
    "apply",
    "apply_vowel_sandhi",
    "apply_visarga_sandhi",
    "apply_consonant_sandhi",
]

HALANTA = "्"
VISARGA = "ः"


class SandhiType(Enum):
    """Categories of sandhi rules."""

    VOWEL = "vowel"
    VISARGA = "visarga"
    CONSONANT = "consonant"


@dataclass(frozen=True)
class SandhiResult:
    """Outcome of joining two morphemes."""

    output: str
    sandhi_type: SandhiType
    rule_citation: str


class SandhiError(ValueError):
    """Base class for sandhi errors."""


class EmptyInputError(SandhiError):
    """One of the morphemes is empty."""

    def __init__(self) -> None:
        super().__init__("empty input")


class NoRuleAppliesError(SandhiError):
    """No sandhi rule joins the two morphemes."""

    def __init__(self, first: str, second: str) -> None:
        super().__init__(f"no sandhi rule applies for '{first}' + '{second}'")
        self.first = first
        self.second = second


# --- Devanagari phonology -------------------------------------------------

_SVAR_TO_MATRA = {
    "आ": "ा", "इ": "ि", "ई": "ी", "उ": "ु", "ऊ": "ू", "ऋ": "ृ",
    "ॠ": "ॄ", "ऌ": "ॢ", "ॡ": "ॣ", "ए": "े", "ऐ": "ै", "ओ": "ो", "औ": "ौ",
}
_SVARS = frozenset("अ") | frozenset(_SVAR_TO_MATRA)
_MATRAS = frozenset(_SVAR_TO_MATRA.values())

# Each varga (stop class): voiceless, aspirated voiceless, voiced,
# aspirated voiced, nasal.
_VARGAS = ("कखगघङ", "चछजझञ", "टठडढण", "तथदधन", "पफबभम")
_VARGA_OF = {c: index for index, row in enumerate(_VARGAS) for c in row}
_PANCHHAM = frozenset(row[4] for row in _VARGAS)
_VOICED_COUNTERPART = {
    row[i]: row[i + 2] for row in _VARGAS for i in (0, 1)
}
_VOICELESS = frozenset(_VOICED_COUNTERPART) | frozenset("शषस")
_VOICED = frozenset(c for row in _VARGAS for c in row[2:]) | frozenset("यरलवह")


def _is_svar(c: str) -> bool:
    return c in _SVARS


def _is_matra(c: str) -> bool:
    return c in _MATRAS


def _is_vyanjan(c: str) -> bool:
    return "\u0915" <= c <= "\u0939" or "\u0958" <= c <= "\u095f"


# --- Vowel sandhi ---------------------------------------------------------

_A_CLASS = frozenset("अआा")


def _emit_a_sandhi(first: str, inherent: bool, rest: str, full_vowel: str, matra: str) -> str:
    if inherent:
        return f"{first}{matra}{rest}"
    prefix = first[:-1]
    if not prefix:
        return f"{full_vowel}{rest}"
    return f"{prefix}{matra}{rest}"


def _vowel(output: str, citation: str) -> SandhiResult:
    return SandhiResult(output, SandhiType.VOWEL, citation)


def apply_vowel_sandhi(first: str, second: str) -> SandhiResult | None:
    """Join two morphemes by vowel sandhi, or return ``None``.

    A first morpheme ending in a bare consonant carries an inherent अ.
    """
    if not first or not second:
        return None

    last_char = first[-1]
    inherent = _is_vyanjan(last_char)
    last = "अ" if inherent else last_char
    head = second[0]
    prefix = first[:-1]
    rest = second[1:]

    if last in "इईिी" and head in "इई":
        vowel = "ई" if not prefix or _is_svar(prefix[-1]) else "ी"
        return _vowel(f"{prefix}{vowel}{rest}", "दीर्घ सन्धि: इ/ई + इ/ई → ई")

    if last in "उऊुू" and head in "उऊ":
        vowel = "ऊ" if not prefix or _is_svar(prefix[-1]) else "ू"
        return _vowel(f"{prefix}{vowel}{rest}", "दीर्घ सन्धि: उ/ऊ + उ/ऊ → ऊ")

    if last in "िीइई" and _is_svar(head):
        remainder = rest if head == "अ" else second
        ya_form = HALANTA + "य" if _is_matra(last) else "य"
        return _vowel(f"{prefix}{ya_form}{remainder}", "यण् सन्धि: इ/ई + स्वर → य")

    if last in "ुूउऊ" and _is_svar(head):
        remainder = rest if head == "अ" else second
        va_form = HALANTA + "व" if _is_matra(last) else "व"
        return _vowel(f"{prefix}{va_form}{remainder}", "यण् सन्धि: उ/ऊ + स्वर → व")

    if last in _A_CLASS:
        for heads, full_vowel, matra, citation in _A_CLASS_RULES:
            if head in heads:
                output = _emit_a_sandhi(first, inherent, rest, full_vowel, matra)
                return _vowel(output, citation)

    if _is_svar(head):
        for lasts, joiner, citation in _AYADI_RULES:
            if last in lasts:
                return _vowel(f"{prefix}{joiner}{second}", citation)

    return None


_A_CLASS_RULES = (
    ("अआ", "आ", "ा", "दीर्घ सन्धि: अ/आ + अ/आ → आ"),
    ("इई", "ए", "े", "गुण सन्धि: अ/आ + इ/ई → ए"),
    ("उऊ", "ओ", "ो", "गुण सन्धि: अ/आ + उ/ऊ → ओ"),
    ("ऋ", "अर्", "र्", "गुण सन्धि: अ/आ + ऋ → अर्"),
    ("एऐ", "ऐ", "ै", "वृद्धि सन्धि: अ/आ + ए/ऐ → ऐ"),
    ("ओऔ", "औ", "ौ", "वृद्धि सन्धि: अ/आ + ओ/औ → औ"),
)

_AYADI_RULES = (
    ("एे", "य", "अयादि सन्धि: ए + स्वर → अय्"),
    ("ऐै", "ाय", "अयादि सन्धि: ऐ + स्वर → आय्"),
    ("ओो", "व", "अयादि सन्धि: ओ + स्वर → अव्"),
    ("औौ", "ाव", "अयादि सन्धि: औ + स्वर → आव्"),
)


# --- Visarga sandhi -------------------------------------------------------

_VOICED_CONSONANTS = frozenset("गघङजझञडढणदधनबभमयरलवह")
_VISARGA_SIBILANTS = (
    ("चछ", "श", "विसर्ग सन्धि: ः → श् before palatal (च/छ)"),
    ("टठ", "ष", "विसर्ग सन्धि: ः → ष् before retroflex (ट/ठ)"),
    ("तथ", "स", "विसर्ग सन्धि: ः → स् before dental (त/थ)"),
)


def _visarga(output: str, citation: str) -> SandhiResult:
    return SandhiResult(output, SandhiType.VISARGA, citation)


def apply_visarga_sandhi(first: str, second: str) -> SandhiResult | None:
    """Join two morphemes when the first ends in visarga, or return ``None``."""
    if not first.endswith(VISARGA):
        return None
    prefix = first[:-1]
    if not prefix or not second:
        return None
    head = second[0]

    for stops, sibilant, citation in _VISARGA_SIBILANTS:
        if head in stops:
            return _visarga(f"{prefix}{sibilant}{HALANTA}{second}", citation)

    if head in "सशषकखपफ":
        return _visarga(
            f"{first}{second}",
            "विसर्ग सन्धि: विसर्ग retained before स/श/ष/guttural/labial stops",
        )

    if _is_svar(head):
        ra_form = "र" if head == "अ" else "र" + _SVAR_TO_MATRA.get(head, head)
        return _visarga(f"{prefix}{ra_form}{second[1:]}", "विसर्ग सन्धि: विसर्ग → र before vowel")

    if head in _VOICED_CONSONANTS:
        before = prefix[-1]
        implicit_a = not _is_matra(before) and not _is_svar(before) and before != HALANTA
        if implicit_a and prefix not in ("पुन", "अन्त"):
            return _visarga(f"{prefix}ो{second}", "विसर्ग सन्धि: अः + घोष वर्ण → ओ")
        return _visarga(f"{prefix}र{second}", "विसर्ग सन्धि: विसर्ग → र before voiced consonant")

    return None


# --- Consonant sandhi -----------------------------------------------------

_CONSONANT_ASSIMILATIONS = (
    ("उत्", "ल", "उल्ल", "व्यञ्जन सन्धि: उत् + ल → उल्ल (assimilation)"),
    ("उत्", "च", "उच्च", "व्यञ्जन सन्धि: उत् + च → उच्च (assimilation)"),
    ("उत्", "न", "उन्न", "व्यञ्जन सन्धि: उत् + न → उन्न (assimilation)"),
    ("उत्", "स", "उत्स", "व्यञ्जन सन्धि: उत् + स → उत्स"),
    ("उत्", "थ", "उत्थ", "व्यञ्जन सन्धि: उत् + थ → उत्थ"),
    ("उत्", "प", "उत्प", "व्यञ्जन सन्धि: उत् + प → उत्प"),
    ("सम्", "क", "सङ्क", "व्यञ्जन सन्धि: सम् + क → सङ्क (panchham assimilation)"),
    ("सम्", "ख", "सङ्ख", "व्यञ्जन सन्धि: सम् + ख → सङ्ख (panchham assimilation)"),
    ("सम्", "ग", "सङ्ग", "व्यञ्जन सन्धि: सम् + ग → सङ्ग (panchham assimilation)"),
    ("सम्", "घ", "सङ्घ", "व्यञ्जन सन्धि: सम् + घ → सङ्घ (panchham assimilation)"),
    ("निस्", "च", "निश्च", "व्यञ्जन सन्धि: निस् + च → निश्च (satva)"),
    ("निस्", "छ", "निश्छ", "व्यञ्जन सन्धि: निस् + छ → निश्छ (satva)"),
    ("दुस्", "च", "दुश्च", "व्यञ्जन सन्धि: दुस् + च → दुश्च (satva)"),
    ("दुस्", "छ", "दुश्छ", "व्यञ्जन सन्धि: दुस् + छ → दुश्छ (satva)"),
)


def _consonant(output: str, citation: str) -> SandhiResult:
    return SandhiResult(output, SandhiType.CONSONANT, citation)


def apply_consonant_sandhi(first: str, second: str) -> SandhiResult | None:
    """Join two morphemes by consonant sandhi, or return ``None``."""
    for prefix, second_start, merged, citation in _CONSONANT_ASSIMILATIONS:
        if first == prefix and second.startswith(second_start):
            return _consonant(f"{merged}{second[len(second_start):]}", citation)

    if not first.endswith(HALANTA) or len(first) < 2 or not second:
        return None

    base = first[-2]
    stem = first[:-2]
    head = second[0]

    if head == base:
        return _consonant(
            f"{stem}{base}{HALANTA}{second}",
            "व्यञ्जन सन्धि: gemination (same consonant doubling)",
        )

    # Must precede voicing: म is both voiced and nasal.
    if head in _PANCHHAM and base in _VARGA_OF:
        nasal = _VARGAS[_VARGA_OF[base]][4]
        return _consonant(
            f"{stem}{nasal}{HALANTA}{second}",
            "व्यञ्जन सन्धि: stop→nasal before nasal (panchham assimilation)",
        )

    if base in _VOICELESS and head in _VOICED:
        voiced = _VOICED_COUNTERPART.get(base)
        if voiced is not None:
            return _consonant(
                f"{stem}{voiced}{HALANTA}{second}",
                "व्यञ्जन सन्धि: voiceless→voiced before voiced consonant",
            )

    return None


# --- Entry point ----------------------------------------------------------


def apply(first: str, second: str) -> SandhiResult:
    """Join two morphemes, trying visarga, consonant and vowel sandhi in turn.

    Raises ``EmptyInputError`` for an empty morpheme and
    ``NoRuleAppliesError`` when no rule joins them.
    """
    if not first or not second:
        raise EmptyInputError()
    for rule in (apply_visarga_sandhi, apply_consonant_sandhi, apply_vowel_sandhi):
        result = rule(first, second)
        if result is not None:
            return result
    raise NoRuleAppliesError(first, second)