"""Configuration file support for the CLI.

Settings come from, in order of precedence:
1. CLI flags
2. An explicit ``--config`` file, or the first default location that exists
3. Built-in defaults from ``Constants``

Configuration problems are logged and never break the CLI.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional

import yaml

from constants import Constants

logger = logging.getLogger(__name__)

# config key -> (args attribute, built-in default)
_SETTINGS = {
    "github": ("GITHUB", False),
    "lockfile_name": ("LOCKFILE_NAME", Constants.LOCKFILE_NAME),
    "output": ("OUTPUT", None),
    "format": ("OUTPUT_FORMAT", None),
    "loglevel": ("LOG_LEVEL", None),
    "logfile": ("LOG_FILE", None),
}


_TRUE_STRINGS = ("true", "yes", "on", "1")
_FALSE_STRINGS = ("false", "no", "off", "0")


def _coerce_bool(value: Any, default: bool) -> bool:
    """Interpret a config value as a boolean, keeping ``default`` when unclear."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
    logger.warning("Expected a boolean in config, got %r; using %s", value, default)
    return default


def _read_config_file(path: str) -> Dict[str, Any]:
    """Parse a YAML or JSON config file, returning {} on any problem."""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            if path.lower().endswith(".json"):
                cfg = json.load(fh)
            else:
                cfg = yaml.safe_load(fh)
    except OSError as e:
        logger.warning("Config file could not be read: %s", e)
        return {}
    except (ValueError, yaml.YAMLError) as e:
        logger.warning("Config file %s is invalid: %s", path, e)
        return {}
    if not isinstance(cfg, dict):
        if cfg is not None:
            logger.warning("Config file %s must contain a mapping, ignoring it", path)
        return {}
    return cfg


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load user configuration.

    Args:
        path: Explicit config path. When omitted, ``Constants.CONFIG_LOCATIONS``
            are tried in order.

    Returns:
        dict: The ``depcycle`` section if present, else the whole mapping.
    """
    if isinstance(path, str) and path.strip():
        cfg = _read_config_file(path)
    else:
        cfg = {}
        for candidate in Constants.CONFIG_LOCATIONS:
            if os.path.isfile(candidate):
                logger.debug("Using config file %s", candidate)
                cfg = _read_config_file(candidate)
                break
    section = cfg.get("depcycle")
    if isinstance(section, dict):
        return section
    return cfg


def apply_config(args, cfg: Dict[str, Any]) -> None:
    """Fill unset CLI values from ``cfg``, then from built-in defaults."""
    for key, (attr, default) in _SETTINGS.items():
        if getattr(args, attr, None) is not None:
            continue
        value = cfg.get(key, default)
        if key == "github":
            value = _coerce_bool(value, default)
        elif key == "format" and value is not None:
            value = str(value).lower()
            if value not in Constants.SUPPORTED_FORMATS:
                logger.warning("Unsupported output format in config: %s", value)
                value = None
        elif key == "loglevel" and value is not None:
            # unset leaves the level to DEPCYCLE_LOG_LEVEL or INFO
            value = str(value).upper()
            if value not in Constants.LOG_LEVELS:
                logger.warning("Unsupported log level in config: %s", value)
                value = default
        setattr(args, attr, value)
