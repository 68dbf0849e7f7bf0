"""Centralized logging helpers for DepCycle.

All entry points call :func:`configure_logging` once; modules obtain their
logger with ``logging.getLogger(__name__)`` and attach structured fields to
debug records through :func:`extra_context`.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, Dict, Optional

from constants import Constants

_HANDLER_MARKER = "_depcycle_handler"


def _resolve_level(default: int = logging.INFO) -> int:
    """Return the numeric level named by the environment, or ``default``."""
    name = os.environ.get(Constants.ENV_LOG_LEVEL, "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


def configure_logging(log_file: Optional[str] = None) -> None:
    """Configure the root logger.

    Console output goes to stderr so that stdout only carries report lines.
    Calling this more than once replaces previously installed handlers.

    Args:
        log_file: Optional path of a file that receives a copy of all records.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            root.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(Constants.LOG_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    setattr(console, _HANDLER_MARKER, True)
    root.addHandler(console)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
        except OSError as e:
            root.warning("Could not open log file %s: %s", log_file, e)
        else:
            file_handler.setFormatter(formatter)
            setattr(file_handler, _HANDLER_MARKER, True)
            root.addHandler(file_handler)

    root.setLevel(_resolve_level())


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True when ``logger`` would emit DEBUG records."""
    return logger.isEnabledFor(logging.DEBUG)


def extra_context(**fields: Any) -> Dict[str, Any]:
    """Build an ``extra=`` mapping for structured log records.

    ``None`` values are dropped so callers can pass optional fields freely.
    """
    return {k: v for k, v in fields.items() if v is not None}
