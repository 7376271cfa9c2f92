"""Logging setup for the ``caretword`` command line tools."""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path
from typing import TextIO

__all__ = ["configure_logging", "LOG_FORMAT"]

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_PACKAGE_LOGGER = "caretword"
_LOG_DIR_ENV = "CARETWORD_LOG_DIR"


def configure_logging(
    level: int = logging.INFO,
    *,
    log_dir: Path | str | None = None,
    stream: TextIO | None = None,
    max_bytes: int = 1_000_000,
    backup_count: int = 3,
) -> Path | None:
    """Send ``caretword`` log records to stderr and, optionally, a rotating file.

    Handlers installed by an earlier call are replaced. The file is written
    only when ``log_dir`` or ``CARETWORD_LOG_DIR`` names a directory; its path
    is returned.
    """

    logger = logging.getLogger(_PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    console_handler = logging.StreamHandler(stream)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    target = log_dir or os.environ.get(_LOG_DIR_ENV)
    if not target:
        return None
    target_dir = Path(target).expanduser()
    target_dir.mkdir(parents=True, exist_ok=True)
    log_path = target_dir / "caretword.log"
    file_handler = logging.handlers.RotatingFileHandler(
        log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)
    return log_path
