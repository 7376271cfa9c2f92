"""CLI helper to inspect the word context around a marked caret."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

from ..editor.text_source import DEFAULT_CURSOR_MARKER, BufferTextSource
from ..editor.word_context import get_previous_word, get_this_word, get_word_range_at_cursor
from ..services.settings import ScannerSettings, load_settings
from ..utils.logging import configure_logging

_DEFAULT_SEPARATORS = " \t\n.,;:!?"
_DEFAULT_SENTENCE_SEPARATORS = ".!?"


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Show the word context around a caret marked in the input text.")
    parser.add_argument("--text", help="Inline text containing the caret marker. Overrides --file when provided.")
    parser.add_argument(
        "--file",
        type=Path,
        help="Optional file containing the marked text. Reads stdin when omitted and --text not provided.",
    )
    parser.add_argument("--marker", default=DEFAULT_CURSOR_MARKER, help="Character sequence marking the caret.")
    parser.add_argument("--separators", default=_DEFAULT_SEPARATORS, help="Characters that separate words.")
    parser.add_argument(
        "--sentence-separators",
        default=_DEFAULT_SENTENCE_SEPARATORS,
        help="Characters that end a sentence for the previous/this word lookups.",
    )
    parser.add_argument("--extra", type=int, default=0, help="Additional preceding words to include in the range.")
    parser.add_argument("--range-window", type=int, help="Characters read on each side of the caret.")
    parser.add_argument("--lookback-window", type=int, help="Characters read for the previous/this word lookups.")
    parser.add_argument("--json", action="store_true", help="Emit a JSON object instead of plain text.")
    parser.add_argument("--log-dir", type=Path, help="Directory for the rotating log file.")
    parser.add_argument("--verbose", action="store_true", help="Log scanner decisions at DEBUG level.")
    args = parser.parse_args(argv)

    if args.verbose:
        configure_logging(logging.DEBUG, log_dir=args.log_dir)
    if args.extra < 0:
        print("--extra must be non-negative.", file=sys.stderr)
        return 1

    payload = _load_text(args.text, args.file)
    if not payload:
        print("No input text provided.", file=sys.stderr)
        return 1
    try:
        source = BufferTextSource.from_marked(payload, marker=args.marker)
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    overrides = {
        key: value
        for key, value in (("range_window", args.range_window), ("lookback_override", args.lookback_window))
        if value is not None
    }
    settings = load_settings(overrides)
    report = _build_report(source, settings, args.separators, args.sentence_separators, args.extra)
    if args.json:
        print(json.dumps(report, ensure_ascii=False))
        return 0
    for key, value in report.items():
        print(f"{key}: {value!r}")
    return 0


def _build_report(
    source: BufferTextSource,
    settings: ScannerSettings,
    separators: str,
    sentence_separators: str,
    extra: int,
) -> dict[str, Any]:
    word_range = get_word_range_at_cursor(source, separators, extra, window=settings.range_window)
    cursor = source.cursor_position()
    report: dict[str, Any] = {
        "cursor": cursor,
        "word": None if word_range is None else word_range.word,
        "chars_before": None if word_range is None else word_range.chars_before,
        "chars_after": None if word_range is None else word_range.chars_after,
        "this_word": get_this_word(source, sentence_separators, window=settings.lookback_window),
        "previous_word": get_previous_word(source, sentence_separators, window=settings.lookback_window),
    }
    if word_range is not None and cursor is not None:
        report["span"] = word_range.span(cursor).to_dict()
    return report


def _load_text(inline: str | None, path: Path | None) -> str:
    if inline:
        return inline
    if path:
        return path.read_text(encoding="utf-8")
    data = sys.stdin.read()
    return data.rstrip("\n")


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
