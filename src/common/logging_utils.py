"""Centralized logging setup and structured debug helpers."""
from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

from constants import Constants

_CONFIGURED_MARKER = "_javadoclinks_handler"


def _resolve_level(level: Optional[str]) -> int:
    name = (level or os.environ.get(Constants.ENV_LOG_LEVEL) or "INFO").upper()
    value = getattr(logging, name, None)
    return value if isinstance(value, int) else logging.INFO


def configure_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """Configure the root logger once.

    The level comes from ``level`` when given, otherwise from the
    JAVADOCLINKS_LOG_LEVEL environment variable, otherwise INFO. Calling this
    again only updates the level and adds a file handler for a log file that
    has none yet.

    Raises:
        OSError: If the log file cannot be opened.
    """
    root = logging.getLogger()
    root.setLevel(_resolve_level(level))

    if not any(
        getattr(h, _CONFIGURED_MARKER, False) and not isinstance(h, logging.FileHandler)
        for h in root.handlers
    ):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(Constants.LOG_FORMAT))
        setattr(handler, _CONFIGURED_MARKER, True)
        root.addHandler(handler)

    if log_file:
        target = os.path.abspath(log_file)
        if any(getattr(h, "baseFilename", None) == target for h in root.handlers):
            return
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(Constants.LOG_FILE_FORMAT))
        setattr(file_handler, _CONFIGURED_MARKER, True)
        root.addHandler(file_handler)


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True when ``logger`` would emit DEBUG records."""
    return logger.isEnabledFor(logging.DEBUG)


def extra_context(**fields: Any) -> Dict[str, Any]:
    """Build an ``extra=`` mapping for structured debug records.

    None values are dropped so records stay compact.
    """
    return {k: v for k, v in fields.items() if v is not None}
