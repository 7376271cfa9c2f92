"""Service layer helpers (configuration)."""

from .settings import ScannerSettings, load_settings

__all__ = ["ScannerSettings", "load_settings"]
