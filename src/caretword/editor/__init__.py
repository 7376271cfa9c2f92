"""Caret scanning over text sources."""

from importlib import import_module
from typing import Any

from . import text_source, word_context

__all__ = ["text_source", "word_context"]


def __getattr__(name: str) -> Any:
	if name == "qt_source":
		module = import_module(f"{__name__}.{name}")
		globals()[name] = module
		return module
	raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
