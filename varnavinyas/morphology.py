"""Morphological decomposition into prefixes, root and suffixes."""

from __future__ import annotations

from dataclasses import dataclass, field

from .classify import classify
from .core import Lexicon, Origin
from .tables import CASE_MARKERS, PLURAL_MARKERS, PREFIX_FORMS, SUFFIXES

__all__ = ["Morpheme", "decompose"]


@dataclass
class Morpheme:
    """A word split into its root, prefixes and suffixes."""

    root: str
    prefixes: list[str] = field(default_factory=list)
    suffixes: list[str] = field(default_factory=list)
    origin: Origin = Origin.DESHAJ


def _strip_prefix(word: str, lexicon: Lexicon) -> tuple[str | None, str]:
    for prefix, surface, _ in PREFIX_FORMS:
        if not word.startswith(surface):
            continue
        rest = word[len(surface):]
        # One-letter prefixes such as अ or आ need longer roots (आगो ≠ आ + गो).
        min_root = 4 if len(surface) <= 1 else 2
        if len(rest) >= min_root and rest in lexicon:
            return prefix, rest
    return None, word


def _strip_derivational(word: str, lexicon: Lexicon, min_root: int) -> tuple[str | None, str]:
    for suffix in SUFFIXES:
        if word.endswith(suffix):
            rest = word[: -len(suffix)]
            if len(rest) >= min_root and rest in lexicon:
                return suffix, rest
    return None, word


def _strip_marker(word: str, markers: tuple[str, ...], min_root: int) -> tuple[str | None, str]:
    for marker in markers:
        if word.endswith(marker):
            rest = word[: -len(marker)]
            if len(rest) >= min_root:
                return marker, rest
    return None, word


def decompose(word: str, lexicon: Lexicon | None = None, iterative: bool = False) -> Morpheme:
    """Decompose ``word`` into prefix, root and suffixes.

    At most one prefix is stripped, and only when the rest is in
    ``lexicon``. By default at most one derivational suffix follows. With
    ``iterative`` set, stacked case markers and a plural marker are removed
    first, and suffixes are listed from innermost to outermost.
    """
    if not word:
        return Morpheme(root="", origin=Origin.DESHAJ)

    lexicon = lexicon if lexicon is not None else Lexicon()
    origin = classify(word, lexicon)
    prefixes: list[str] = []
    suffixes: list[str] = []

    prefix, remaining = _strip_prefix(word, lexicon)
    if prefix is not None:
        prefixes.append(prefix)

    # After a prefix the root must stay long (उल्लिखित keeps लिखित, not लिख).
    min_root = 4 if prefixes else 1

    if iterative:
        while True:
            marker, remaining = _strip_marker(remaining, CASE_MARKERS, min_root)
            if marker is None:
                break
            suffixes.append(marker)
        marker, remaining = _strip_marker(remaining, PLURAL_MARKERS, min_root)
        if marker is not None:
            suffixes.append(marker)
        if not (suffixes and remaining in lexicon):
            suffix, remaining = _strip_derivational(remaining, lexicon, min_root)
            if suffix is not None:
                suffixes.append(suffix)
        suffixes.reverse()
    else:
        suffix, remaining = _strip_derivational(remaining, lexicon, min_root)
        if suffix is not None:
            suffixes.append(suffix)

    return Morpheme(root=remaining, prefixes=prefixes, suffixes=suffixes, origin=origin)