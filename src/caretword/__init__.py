"""Word context around the caret of an input method's text field."""

from .core.ranges import TextRange, WordRange, WordRangeError
from .editor.text_source import BufferTextSource, ExtractedText, TextSource
from .editor.word_context import (
    get_previous_word,
    get_this_word,
    get_word_at_cursor,
    get_word_range_at_cursor,
    is_separator,
    previous_word,
    split_on_whitespace,
    this_word,
)
from .services.settings import ScannerSettings, load_settings

__version__ = "0.1.0"

__all__ = [
    "BufferTextSource",
    "ExtractedText",
    "ScannerSettings",
    "TextRange",
    "TextSource",
    "WordRange",
    "WordRangeError",
    "get_previous_word",
    "get_this_word",
    "get_word_at_cursor",
    "get_word_range_at_cursor",
    "is_separator",
    "load_settings",
    "previous_word",
    "split_on_whitespace",
    "this_word",
]
