"""Lock file discovery and loading.

Reads a TOML lock file (Cargo.lock layout) and returns the raw entries of its
``[[package]]`` array. Record-level validation is left to the graph builder.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List

from constants import Constants

try:
    import tomllib as toml  # type: ignore
except ImportError:  # Python < 3.11
    import tomli as toml  # type: ignore

logger = logging.getLogger(__name__)


class LockfileError(Exception):
    """Base class for fatal lock file problems."""


class LockfileReadError(LockfileError):
    """The lock file is missing or cannot be read."""


class LockfileParseError(LockfileError):
    """The lock file is not valid TOML."""


class LockfileShapeError(LockfileError):
    """The document does not have the expected ``[[package]]`` layout."""


def resolve_lockfile_path(path: str, default_name: str = Constants.LOCKFILE_NAME) -> str:
    """Return the lock file location for a user supplied path.

    Args:
        path: Lock file path or a directory containing the lock file.
        default_name: File name appended when ``path`` is a directory.

    Returns:
        str: Path of the lock file to read.
    """
    if os.path.isdir(path):
        return os.path.join(path, default_name)
    return path


def load_lockfile(lockfile_path: str) -> Dict[str, Any]:
    """Read and parse a TOML lock file.

    Raises:
        LockfileReadError: If the file is missing or unreadable.
        LockfileParseError: If the content is not valid TOML.
    """
    try:
        with open(lockfile_path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise LockfileReadError(f"Cannot read {lockfile_path}: {e}") from e

    try:
        text = data.decode("utf-8")
        return toml.loads(text)
    except (UnicodeDecodeError, toml.TOMLDecodeError) as e:
        raise LockfileParseError(f"Invalid TOML in {lockfile_path}: {e}") from e


def extract_package_records(document: Any, section: str = Constants.PACKAGE_SECTION) -> List[Any]:
    """Return the entries of the document's package array.

    Raises:
        LockfileShapeError: If the root is not a table, or ``section`` is
            missing or not an array.
    """
    if not isinstance(document, dict):
        raise LockfileShapeError("Invalid lock file: root is not a table")
    if section not in document:
        raise LockfileShapeError(f"No [[{section}]] section found")
    packages = document[section]
    if not isinstance(packages, list):
        raise LockfileShapeError(f"Parsing [[{section}]] failed: not an array of tables")
    return packages


def read_package_records(path: str, default_name: str = Constants.LOCKFILE_NAME) -> List[Any]:
    """Locate, load and validate a lock file in one step."""
    lockfile_path = resolve_lockfile_path(path, default_name)
    logger.debug("Reading lock file %s", lockfile_path)
    records = extract_package_records(load_lockfile(lockfile_path))
    logger.debug("Found %d package records in %s", len(records), lockfile_path)
    return records
