"""Word context around the caret of a live text field.

The scanner answers three questions for prediction and correction code:

* which word the caret is in (``get_word_at_cursor`` / ``get_word_range_at_cursor``),
  including at most one trailing separator and optionally extended backwards by
  a number of preceding words;
* which word sits immediately before the caret (``this_word``);
* which word precedes that one (``previous_word``).

Every function is stateless. Text is fetched fresh from the text source on each
call and bounded by the configured window sizes. An unavailable source, a
missing window or inconsistent caret arithmetic all produce ``None``.
"""

from __future__ import annotations

import logging

from ..core.codepoints import codepoint_at, codepoint_before
from ..core.ranges import WordRange
from ..services.settings import load_settings
from .text_source import TextSource

__all__ = [
    "get_word_at_cursor",
    "get_word_range_at_cursor",
    "is_separator",
    "split_on_whitespace",
    "previous_word",
    "this_word",
    "get_previous_word",
    "get_this_word",
]

LOGGER = logging.getLogger(__name__)


def is_separator(code_point: int | str, separators: str) -> bool:
    """Return ``True`` when ``code_point`` is one of the characters in ``separators``."""

    if isinstance(code_point, str):
        return len(code_point) == 1 and code_point in separators
    return chr(code_point) in separators


def get_word_at_cursor(source: TextSource | None, separators: str | None) -> str | None:
    """Return the word surrounding the caret, including up to one trailing separator.

    With ``"he|llo world"`` and a space separator the result is ``"hello "``.
    """

    word_range = get_word_range_at_cursor(source, separators, 0)
    return None if word_range is None else word_range.word


def get_word_range_at_cursor(
    source: TextSource | None,
    separators: str | None,
    additional_preceding_words_count: int = 0,
    *,
    window: int | None = None,
) -> WordRange | None:
    """Return the text surrounding the caret as a :class:`WordRange`.

    ``additional_preceding_words_count`` widens the backward part of the range
    by that many extra words. ``window`` bounds how many characters are read
    on each side of the caret and defaults to the configured range window.
    """

    if source is None or separators is None:
        return None
    if additional_preceding_words_count < 0:
        raise ValueError(
            f"additional_preceding_words_count must be non-negative, got {additional_preceding_words_count}"
        )
    if window is None:
        window = load_settings().range_window

    before = source.text_before_cursor(window)
    after = source.text_after_cursor(window)
    if before is None or after is None:
        LOGGER.debug("Word range unavailable: text source returned no window")
        return None

    start = _scan_backward(before, separators, additional_preceding_words_count)
    end = _scan_forward(after, separators)

    cursor = source.cursor_position()
    if cursor is None:
        LOGGER.debug("Word range unavailable: cursor position unknown")
        return None
    # The before window must fit between the document start and the caret.
    # The forward extent is measured from the same origin and can never pass
    # the end of the after window, so this is the only check that can fail.
    if cursor < len(before):
        LOGGER.debug(
            "Word range rejected: cursor=%d precedes a before window of %d characters",
            cursor,
            len(before),
        )
        return None

    return WordRange(len(before) - start, end, before[start:] + after[:end])


def _scan_backward(before: str, separators: str, additional_preceding_words_count: int) -> int:
    # Alternate between skipping word characters and skipping separators. The
    # count only drops on the whitespace-stopping phase, which runs every other
    # pass, so the loop ends after 2 * (count + 1) phases at most.
    start = len(before)
    remaining = additional_preceding_words_count
    stopping_at_whitespace = True
    while True:
        while start > 0:
            code_point, width = codepoint_before(before, start)
            if stopping_at_whitespace == is_separator(code_point, separators):
                break
            start -= width
        if stopping_at_whitespace:
            remaining -= 1
            if remaining < 0:
                return start
        stopping_at_whitespace = not stopping_at_whitespace


def _scan_forward(after: str, separators: str) -> int:
    end = 0
    while end < len(after):
        code_point, width = codepoint_at(after, end)
        end += width
        if is_separator(code_point, separators):
            break
    return end


def split_on_whitespace(text: str) -> list[str]:
    """Split ``text`` on runs of whitespace, returning only non-empty tokens."""

    tokens: list[str] = []
    token_start: int | None = None
    for index, char in enumerate(text):
        if char.isspace():
            if token_start is not None:
                tokens.append(text[token_start:index])
                token_start = None
        elif token_start is None:
            token_start = index
    if token_start is not None:
        tokens.append(text[token_start:])
    return tokens


def previous_word(text: str | None, sentence_separators: str) -> str | None:
    """Return the word before the word preceding the caret.

    Words ending in a sentence separator are not returned::

        "abc def"     -> "abc"
        "abc def "    -> "abc"
        "abc def. "   -> "abc"
        "abc def . "  -> "def"
        "abc"         -> None
        "abc. def"    -> None
    """

    if text is None:
        return None
    tokens = split_on_whitespace(text)
    if len(tokens) < 2:
        return None
    return _accept_token(tokens[-2], sentence_separators)


def this_word(text: str | None, sentence_separators: str) -> str | None:
    """Return the word immediately before the caret, ignoring trailing whitespace.

    ``"abc def "`` gives ``"def"`` while ``"abc def. "`` gives ``None``.
    """

    if text is None:
        return None
    tokens = split_on_whitespace(text)
    if not tokens:
        return None
    return _accept_token(tokens[-1], sentence_separators)


def get_previous_word(
    source: TextSource | None,
    sentence_separators: str,
    *,
    window: int | None = None,
) -> str | None:
    """Fetch the lookback window from ``source`` and apply :func:`previous_word`."""

    text = _lookback_text(source, window)
    return previous_word(text, sentence_separators)


def get_this_word(
    source: TextSource | None,
    sentence_separators: str,
    *,
    window: int | None = None,
) -> str | None:
    """Fetch the lookback window from ``source`` and apply :func:`this_word`."""

    text = _lookback_text(source, window)
    return this_word(text, sentence_separators)


def _lookback_text(source: TextSource | None, window: int | None) -> str | None:
    if source is None:
        return None
    if window is None:
        window = load_settings().lookback_window
    return source.text_before_cursor(window)


def _accept_token(token: str, sentence_separators: str) -> str | None:
    # Only the last character is checked, so "..." is rejected because of its
    # final period rather than for being all punctuation.
    if not token:
        return None
    if token[-1] in sentence_separators:
        return None
    return token
