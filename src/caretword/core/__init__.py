"""Core value types shared by the scanner and its text sources."""

from .ranges import TextRange, WordRange, WordRangeError

__all__ = ["TextRange", "WordRange", "WordRangeError"]
