"""Tests for the in-memory text source."""

from __future__ import annotations

import pytest

from caretword.editor.text_source import BufferTextSource, ExtractedText


def test_from_marked_places_caret() -> None:
    source = BufferTextSource.from_marked("he|llo")

    assert source.text == "hello"
    assert source.selection_start == 2
    assert source.selection_end == 2
    assert source.cursor_position() == 2


def test_from_marked_second_marker_closes_selection() -> None:
    source = BufferTextSource.from_marked("ab|cd|ef")

    assert source.text == "abcdef"
    assert (source.selection_start, source.selection_end) == (2, 4)
    assert source.text_before_cursor(10) == "ab"
    assert source.text_after_cursor(10) == "ef"


def test_from_marked_custom_marker() -> None:
    source = BufferTextSource.from_marked("a|b<>c", marker="<>")

    assert source.text == "a|bc"
    assert source.selection_start == 3


@pytest.mark.parametrize("marked,marker", [("no caret", "|"), ("abc", "")])
def test_from_marked_rejects_bad_input(marked: str, marker: str) -> None:
    with pytest.raises(ValueError):
        BufferTextSource.from_marked(marked, marker=marker)


def test_windows_are_bounded() -> None:
    source = BufferTextSource(text="hello world", selection_start=5)

    assert source.text_before_cursor(3) == "llo"
    assert source.text_before_cursor(100) == "hello"
    assert source.text_after_cursor(3) == " wo"
    assert source.text_after_cursor(0) == ""


def test_negative_window_is_rejected() -> None:
    source = BufferTextSource(text="hello", selection_start=1)

    with pytest.raises(ValueError, match="non-negative"):
        source.text_before_cursor(-1)
    with pytest.raises(ValueError, match="non-negative"):
        source.text_after_cursor(-5)


def test_selection_is_clamped_and_ordered() -> None:
    source = BufferTextSource(text="abc", selection_start=10, selection_end=-4)

    assert (source.selection_start, source.selection_end) == (0, 3)


def test_start_offset_shifts_absolute_cursor() -> None:
    source = BufferTextSource(text="partial", selection_start=3, start_offset=40)

    assert source.cursor_position() == 43
    assert source.extract() == ExtractedText(text="partial", start_offset=40, selection_start=3, selection_end=3)


def test_unavailable_source_returns_none() -> None:
    source = BufferTextSource(text="hello", selection_start=2, available=False)

    assert source.text_before_cursor(10) is None
    assert source.text_after_cursor(10) is None
    assert source.cursor_position() is None
    assert source.extract() is None


def test_extracted_text_cursor_position() -> None:
    assert ExtractedText(text="abc", start_offset=7, selection_start=2, selection_end=3).cursor_position == 9
