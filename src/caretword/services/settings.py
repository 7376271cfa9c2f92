"""Scanner window settings and environment overrides."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping

__all__ = [
    "ScannerSettings",
    "load_settings",
    "DEFAULT_RANGE_WINDOW",
    "DEFAULT_MAX_WORD_LENGTH",
]

LOGGER = logging.getLogger(__name__)

DEFAULT_RANGE_WINDOW = 1000
DEFAULT_MAX_WORD_LENGTH = 48
_INT_ENV_OVERRIDES: Mapping[str, str] = {
    "CARETWORD_RANGE_WINDOW": "range_window",
    "CARETWORD_MAX_WORD_LENGTH": "max_word_length",
    "CARETWORD_LOOKBACK_WINDOW": "lookback_override",
}


@dataclass(slots=True, frozen=True)
class ScannerSettings:
    """Bounds on how much text the scanner requests from a text source."""

    range_window: int = DEFAULT_RANGE_WINDOW
    max_word_length: int = DEFAULT_MAX_WORD_LENGTH
    lookback_override: int | None = None

    def __post_init__(self) -> None:
        for name in ("range_window", "max_word_length", "lookback_override"):
            value = getattr(self, name)
            if value is None and name == "lookback_override":
                continue
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value < 1:
                raise ValueError(f"{name} must be positive, got {value}")

    @property
    def lookback_window(self) -> int:
        """Characters fetched for previous/this word queries.

        Room for a pair of maximal words and the separator between them.
        """

        if self.lookback_override is not None:
            return self.lookback_override
        return self.max_word_length * 2 + 1


def load_settings(
    overrides: Mapping[str, Any] | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> ScannerSettings:
    """Return settings with environment then explicit overrides applied."""

    settings = ScannerSettings()
    env_values = _read_env_overrides(os.environ if environ is None else environ)
    if env_values:
        settings = _apply_overrides(settings, env_values, source="environment")
    if overrides:
        settings = _apply_overrides(settings, dict(overrides), source="explicit")
    return settings


def _read_env_overrides(environ: Mapping[str, str]) -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    for env_name, field_name in _INT_ENV_OVERRIDES.items():
        value = environ.get(env_name)
        if value is None:
            continue
        try:
            values[field_name] = int(value, 10)
        except ValueError:
            LOGGER.warning("Environment override %s=%s is not a valid integer", env_name, value)
    return values


def _apply_overrides(settings: ScannerSettings, overrides: Dict[str, Any], *, source: str) -> ScannerSettings:
    allowed = {field.name for field in fields(ScannerSettings)}
    filtered = {key: value for key, value in overrides.items() if key in allowed}
    if not filtered:
        return settings
    try:
        updated = replace(settings, **filtered)
    except (TypeError, ValueError) as exc:
        LOGGER.warning("Ignoring %s overrides %s: %s", source, sorted(filtered), exc)
        return settings
    LOGGER.debug("Applied %s overrides: %s", source, sorted(filtered))
    return updated
