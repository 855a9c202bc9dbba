"""Word-origin classification with provenance."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .core import Lexicon, Origin
from .tables import lookup_origin

__all__ = [
    "ShabdaError",
    "OriginSource",
    "OriginDecision",
    "classify",
    "classify_with_provenance",
    "source_language",
]


class ShabdaError(ValueError):
    """Error raised by word-analysis operations."""


class OriginSource(Enum):
    """Where an origin decision came from."""

    OVERRIDE = "override"
    KOSHA = "kosha"
    HEURISTIC = "heuristic"


@dataclass(frozen=True)
class OriginDecision:
    """An origin classification with its provenance and confidence."""

    origin: Origin
    source: OriginSource
    confidence: float


_TATSAM_CLUSTERS = ("क्ष", "ज्ञ", "क्त", "त्म", "त्र", "त्त", "द्ध", "द्य", "द्व")
_NUKTA = "\u093c"


def _has_aagantuk_markers(word: str) -> bool:
    if any("\u0958" <= c <= "\u095f" for c in word):
        return True
    return _NUKTA in word[1:]


def _has_tatsam_markers(word: str) -> bool:
    if any(c in word for c in "ऋृषः"):
        return True
    return any(cluster in word for cluster in _TATSAM_CLUSTERS)


def _has_tadbhav_markers(word: str) -> bool:
    if word.endswith(("नु", "ने", "को")):
        return True
    return len(word) >= 2 and word[-1] in "ोा" and word[-2] in "ठडढ"


def _classify_heuristic(word: str) -> Origin:
    if _has_aagantuk_markers(word):
        return Origin.AAGANTUK
    if _has_tatsam_markers(word):
        return Origin.TATSAM
    if _has_tadbhav_markers(word):
        return Origin.TADBHAV
    return Origin.DESHAJ


def classify_with_provenance(word: str, lexicon: Lexicon | None = None) -> OriginDecision:
    """Classify ``word`` by origin, reporting which tier decided.

    Tiers, in order: the override table, the lexicon's origin tags, and
    phonological heuristics.
    """
    if not word:
        return OriginDecision(Origin.DESHAJ, OriginSource.HEURISTIC, 0.0)

    origin = lookup_origin(word)
    if origin is not None:
        return OriginDecision(origin, OriginSource.OVERRIDE, 1.0)

    if lexicon is not None:
        origin = lexicon.origin_of(word)
        if origin is not None:
            return OriginDecision(origin, OriginSource.KOSHA, 0.95)

    return OriginDecision(_classify_heuristic(word), OriginSource.HEURISTIC, 0.65)


def classify(word: str, lexicon: Lexicon | None = None) -> Origin:
    """Origin class of ``word``."""
    return classify_with_provenance(word, lexicon).origin


def source_language(word: str, lexicon: Lexicon | None = None) -> str | None:
    """Source language recorded for ``word`` in ``lexicon``, or ``None``."""
    if lexicon is None:
        return None
    return lexicon.source_language_of(word)