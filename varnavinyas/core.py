"""Shared domain types: word origin classes and an in-memory lexicon."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from enum import Enum

__all__ = ["Origin", "Lexicon"]


class Origin(Enum):
    """Word-origin classes (शब्दउत्पत्ति)."""

    TATSAM = "tatsam"
    TADBHAV = "tadbhav"
    DESHAJ = "deshaj"
    AAGANTUK = "aagantuk"

    def nepali_label(self) -> str:
        """Standard Nepali name of the origin class."""
        return _NEPALI_LABELS[self]

    def transliterated_label(self) -> str:
        """Standard transliterated name of the origin class."""
        return self.value

    def bilingual_label(self) -> str:
        """Nepali name followed by its transliteration in parentheses."""
        return f"{self.nepali_label()} ({self.transliterated_label()})"


_NEPALI_LABELS = {
    Origin.TATSAM: "तत्सम",
    Origin.TADBHAV: "तद्भव",
    Origin.DESHAJ: "देशज",
    Origin.AAGANTUK: "आगन्तुक",
}


class Lexicon:
    """A word list with optional origin tags and source-language names.

    ``entries`` is either a mapping from word to ``Origin`` (or ``None`` when
    the origin is unknown) or a plain iterable of words.
    """

    def __init__(
        self,
        entries: Mapping[str, Origin | None] | Iterable[str] | None = None,
        source_languages: Mapping[str, str] | None = None,
    ) -> None:
        self._origins: dict[str, Origin | None] = {}
        self._languages: dict[str, str] = {}
        if entries is not None:
            if isinstance(entries, Mapping):
                self._origins.update(entries)
            else:
                self._origins.update(dict.fromkeys(entries))
        for word, language in (source_languages or {}).items():
            self._origins.setdefault(word, None)
            self._languages[word] = language

    def __contains__(self, word: object) -> bool:
        return word in self._origins

    def __len__(self) -> int:
        return len(self._origins)

    def __iter__(self) -> Iterator[str]:
        return iter(self._origins)

    def add(
        self,
        word: str,
        origin: Origin | None = None,
        source_language: str | None = None,
    ) -> None:
        """Add or update a word; ``None`` keeps any tag already recorded."""
        if origin is not None or word not in self._origins:
            self._origins[word] = origin
        if source_language is not None:
            self._languages[word] = source_language

    def origin_of(self, word: str) -> Origin | None:
        """Origin tag of ``word``, or ``None`` if absent or untagged."""
        return self._origins.get(word)

    def source_language_of(self, word: str) -> str | None:
        """Source language recorded for ``word``, or ``None``."""
        return self._languages.get(word)