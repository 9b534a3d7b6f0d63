"""Logging setup. The screen belongs to the editor, so logs go to a file."""

from __future__ import annotations

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(log_file: Path | None = None, verbose: bool = False) -> logging.Logger:
    """
    Send ``term_edit`` log records to ``log_file``.

    Without a file the package logger keeps only its NullHandler.
    """
    logger = logging.getLogger("term_edit")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    if log_file is not None:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
