"""Text source protocol and an in-memory implementation.

A text source is the scanner's only view of the text field: bounded windows of
text on each side of the caret plus the absolute caret position. Any call may
return ``None`` when the underlying connection cannot answer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

__all__ = [
    "TextSource",
    "ExtractedText",
    "BufferTextSource",
    "DEFAULT_CURSOR_MARKER",
    "check_window",
]

DEFAULT_CURSOR_MARKER = "|"


class TextSource(Protocol):
    """Read-only connection to a live text field."""

    def text_before_cursor(self, max_chars: int) -> str | None:
        ...

    def text_after_cursor(self, max_chars: int) -> str | None:
        ...

    def cursor_position(self) -> int | None:
        ...


@dataclass(slots=True, frozen=True)
class ExtractedText:
    """Snapshot of (part of) a text field along with its selection.

    ``start_offset`` is where ``text`` begins inside the full field, so the
    absolute caret lives at ``start_offset + selection_start``.
    """

    text: str
    start_offset: int = 0
    selection_start: int = 0
    selection_end: int = 0

    @property
    def cursor_position(self) -> int:
        return self.start_offset + self.selection_start


@dataclass(slots=True)
class BufferTextSource:
    """Text source over a plain string, used by tests and headless callers."""

    text: str = ""
    selection_start: int = 0
    selection_end: int | None = None
    start_offset: int = 0
    available: bool = True

    def __post_init__(self) -> None:
        length = len(self.text)
        start = max(0, min(int(self.selection_start), length))
        end = start if self.selection_end is None else max(0, min(int(self.selection_end), length))
        if end < start:
            start, end = end, start
        self.selection_start = start
        self.selection_end = end

    @classmethod
    def from_marked(cls, marked: str, *, marker: str = DEFAULT_CURSOR_MARKER) -> "BufferTextSource":
        """Build a source from ``marked`` text where ``marker`` shows the caret.

        A second marker, when present, closes a selection.
        """

        if not marker:
            raise ValueError("Cursor marker must be a non-empty string")
        first = marked.find(marker)
        if first < 0:
            raise ValueError(f"Text does not contain the cursor marker {marker!r}")
        remainder = marked[first + len(marker) :]
        second = remainder.find(marker)
        if second < 0:
            return cls(text=marked[:first] + remainder, selection_start=first)
        text = marked[:first] + remainder[:second] + remainder[second + len(marker) :]
        return cls(text=text, selection_start=first, selection_end=first + second)

    def extract(self) -> ExtractedText | None:
        if not self.available:
            return None
        return ExtractedText(
            text=self.text,
            start_offset=self.start_offset,
            selection_start=self.selection_start,
            selection_end=self._selection_end(),
        )

    def text_before_cursor(self, max_chars: int) -> str | None:
        check_window(max_chars)
        if not self.available:
            return None
        start = max(0, self.selection_start - max_chars)
        return self.text[start : self.selection_start]

    def text_after_cursor(self, max_chars: int) -> str | None:
        check_window(max_chars)
        if not self.available:
            return None
        end = self._selection_end()
        return self.text[end : end + max_chars]

    def cursor_position(self) -> int | None:
        extracted = self.extract()
        if extracted is None:
            return None
        return extracted.cursor_position

    def _selection_end(self) -> int:
        return self.selection_start if self.selection_end is None else self.selection_end


def check_window(max_chars: int) -> None:
    """Reject negative window sizes passed to a text source."""

    if max_chars < 0:
        raise ValueError(f"max_chars must be non-negative, got {max_chars}")
