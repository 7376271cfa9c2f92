"""Shared pytest fixtures."""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

_SCANNER_ENV = (
    "CARETWORD_RANGE_WINDOW",
    "CARETWORD_MAX_WORD_LENGTH",
    "CARETWORD_LOOKBACK_WINDOW",
    "CARETWORD_LOG_DIR",
)


@pytest.fixture(autouse=True)
def _clean_scanner_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _SCANNER_ENV:
        monkeypatch.delenv(name, raising=False)
