"""Nepali orthography toolkit: sandhi, splitting, origin classification and morphology."""

__version__ = "0.1.0"

__all__ = ["classify", "core", "morphology", "sandhi", "splitting", "tables", "vyakaran"]