"""Tests for scanner window settings."""

from __future__ import annotations

import logging

import pytest

from caretword.services.settings import (
    DEFAULT_MAX_WORD_LENGTH,
    DEFAULT_RANGE_WINDOW,
    ScannerSettings,
    load_settings,
)


def test_defaults() -> None:
    settings = ScannerSettings()

    assert settings.range_window == DEFAULT_RANGE_WINDOW == 1000
    assert settings.max_word_length == DEFAULT_MAX_WORD_LENGTH
    assert settings.lookback_window == DEFAULT_MAX_WORD_LENGTH * 2 + 1


def test_lookback_follows_max_word_length() -> None:
    assert ScannerSettings(max_word_length=10).lookback_window == 21


def test_lookback_override_wins() -> None:
    assert ScannerSettings(max_word_length=10, lookback_override=5).lookback_window == 5


@pytest.mark.parametrize(
    "kwargs",
    [{"range_window": 0}, {"max_word_length": -1}, {"lookback_override": 0}],
)
def test_non_positive_values_are_rejected(kwargs: dict) -> None:
    with pytest.raises(ValueError, match="must be positive"):
        ScannerSettings(**kwargs)


@pytest.mark.parametrize(
    "kwargs",
    [{"range_window": "10"}, {"max_word_length": 4.5}, {"lookback_override": True}],
)
def test_non_integer_values_are_rejected(kwargs: dict) -> None:
    with pytest.raises(ValueError, match="must be an integer"):
        ScannerSettings(**kwargs)


def test_load_settings_applies_environment() -> None:
    settings = load_settings(
        environ={
            "CARETWORD_RANGE_WINDOW": "250",
            "CARETWORD_MAX_WORD_LENGTH": "32",
        }
    )

    assert settings.range_window == 250
    assert settings.lookback_window == 65


def test_load_settings_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CARETWORD_LOOKBACK_WINDOW", "12")

    assert load_settings().lookback_window == 12


def test_invalid_environment_value_is_ignored(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="caretword.services.settings"):
        settings = load_settings(environ={"CARETWORD_RANGE_WINDOW": "lots"})

    assert settings.range_window == DEFAULT_RANGE_WINDOW
    assert "not a valid integer" in caplog.text


def test_out_of_range_environment_value_is_ignored(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="caretword.services.settings"):
        settings = load_settings(environ={"CARETWORD_RANGE_WINDOW": "0"})

    assert settings == ScannerSettings()
    assert "Ignoring environment overrides" in caplog.text


def test_explicit_overrides_apply_after_environment() -> None:
    settings = load_settings({"range_window": 9}, environ={"CARETWORD_RANGE_WINDOW": "250"})

    assert settings.range_window == 9


def test_invalid_override_types_keep_previous_settings(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="caretword.services.settings"):
        settings = load_settings({"range_window": "wide"}, environ={})

    assert settings == ScannerSettings()
    assert "Ignoring explicit overrides" in caplog.text
