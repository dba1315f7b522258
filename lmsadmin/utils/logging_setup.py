"""Logging configuration for the TUI.

Textual owns the terminal while the app runs, so records are routed to the
Textual devtools console and, optionally, to a log file instead of stderr.
"""

from __future__ import annotations

import logging
from pathlib import Path

from textual.logging import TextualHandler

from lmsadmin.constants.values import LOG_FORMAT

_HANDLER_MARKER = "_lmsadmin_handler"


def configure_logging(level: str | int = "INFO", log_file: Path | None = None) -> None:
    """Install package log handlers on the ``lmsadmin`` logger.

    Safe to call more than once: handlers installed by a previous call are
    replaced.

    Args:
        level: Level name or number for the ``lmsadmin`` logger.
        log_file: Optional file that receives all records at ``level``.
    """
    root = logging.getLogger("lmsadmin")
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            root.removeHandler(handler)
            handler.close()

    resolved_level = logging.getLevelName(level.upper()) if isinstance(level, str) else level
    if not isinstance(resolved_level, int):
        resolved_level = logging.INFO
    root.setLevel(resolved_level)

    formatter = logging.Formatter(LOG_FORMAT)

    textual_handler = TextualHandler()
    textual_handler.setFormatter(formatter)
    setattr(textual_handler, _HANDLER_MARKER, True)
    root.addHandler(textual_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        setattr(file_handler, _HANDLER_MARKER, True)
        root.addHandler(file_handler)


__all__ = ["configure_logging"]
