"""Structured helpers for representing spans around the caret."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class WordRangeError(IndexError):
    """Raised when a :class:`WordRange` is built with a negative offset."""


@dataclass(slots=True, frozen=True)
class TextRange:
    """Absolute ``[start, end)`` span inside a text field."""

    start: int
    end: int

    def __post_init__(self) -> None:
        start = self._coerce_index(self.start, "start")
        end = self._coerce_index(self.end, "end")
        if end < start:
            start, end = end, start
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", end)

    @staticmethod
    def _coerce_index(value: Any, label: str) -> int:
        if isinstance(value, bool):
            raise ValueError(f"TextRange {label} must be an integer")
        try:
            number = int(value)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"TextRange {label} must be an integer") from exc
        if number < 0:
            return 0
        return number

    def to_dict(self) -> dict[str, int]:
        return {"start": self.start, "end": self.end}


@dataclass(slots=True, frozen=True)
class WordRange:
    """Text surrounding the caret, expressed relative to the caret position.

    ``chars_before`` counts characters consumed backward from the caret and
    ``chars_after`` counts characters consumed forward, including at most one
    trailing word separator. ``word`` is the text of both parts, unmodified.
    """

    chars_before: int
    chars_after: int
    word: str

    def __post_init__(self) -> None:
        if self.chars_before < 0 or self.chars_after < 0:
            raise WordRangeError(
                f"WordRange offsets must be non-negative (before={self.chars_before}, after={self.chars_after})"
            )

    def span(self, cursor: int) -> TextRange:
        """Return the absolute span covered when the caret sits at ``cursor``."""

        return TextRange(cursor - self.chars_before, cursor + self.chars_after)

    def to_dict(self) -> dict[str, Any]:
        return {
            "chars_before": self.chars_before,
            "chars_after": self.chars_after,
            "word": self.word,
        }


__all__ = ["TextRange", "WordRange", "WordRangeError"]
