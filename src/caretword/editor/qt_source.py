"""Text source backed by a PySide6 text widget."""

from __future__ import annotations

from typing import Any

from PySide6.QtGui import QTextCursor

from .text_source import check_window

__all__ = ["QtTextSource"]

_PARAGRAPH_SEPARATOR = "\u2029"
_LINE_SEPARATOR = "\u2028"


class QtTextSource:
    """Read caret context from a ``QPlainTextEdit`` or ``QTextEdit``.

    Only the requested window is copied out of the document. Like Qt itself,
    ``max_chars`` and :meth:`cursor_position` count UTF-16 code units, so a
    window holding astral characters is shorter as a Python string.
    """

    def __init__(self, widget: Any) -> None:
        self._widget = widget

    @property
    def widget(self) -> Any:
        return self._widget

    def text_before_cursor(self, max_chars: int) -> str | None:
        check_window(max_chars)
        if self._widget is None:
            return None
        position = self._widget.textCursor().selectionStart()
        return self._slice(max(0, position - max_chars), position)

    def text_after_cursor(self, max_chars: int) -> str | None:
        check_window(max_chars)
        if self._widget is None:
            return None
        document = self._widget.document()
        position = self._widget.textCursor().selectionEnd()
        # characterCount() includes the trailing paragraph separator.
        last = max(position, document.characterCount() - 1)
        return self._slice(position, min(last, position + max_chars))

    def cursor_position(self) -> int | None:
        if self._widget is None:
            return None
        return self._widget.textCursor().selectionStart()

    def _slice(self, start: int, end: int) -> str:
        if end <= start:
            return ""
        document = self._widget.document()
        if _splits_pair(document, start):
            start += 1
        if _splits_pair(document, end):
            end -= 1
        if end <= start:
            return ""
        cursor = QTextCursor(document)
        cursor.setPosition(start, QTextCursor.MoveMode.MoveAnchor)
        cursor.setPosition(end, QTextCursor.MoveMode.KeepAnchor)
        text = cursor.selectedText()
        return text.replace(_PARAGRAPH_SEPARATOR, "\n").replace(_LINE_SEPARATOR, "\n")


def _splits_pair(document: Any, position: int) -> bool:
    # True when position falls between the halves of a surrogate pair.
    if position <= 0:
        return False
    char = document.characterAt(position)
    return bool(char) and 0xDC00 <= ord(char[0]) <= 0xDFFF
