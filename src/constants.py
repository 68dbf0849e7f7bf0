"""Constants used in the project."""

import os
from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    CYCLES_FOUND = 3


class OutputFormats(Enum):
    """Export formats supported by the program.

    Args:
        Enum (string): Export formats supported by the program.
    """

    JSON = "json"
    CSV = "csv"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    LOCKFILE_NAME = "Cargo.lock"
    PACKAGE_SECTION = "package"
    SUPPORTED_FORMATS = [
        OutputFormats.JSON.value,
        OutputFormats.CSV.value,
    ]
    LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    ENV_LOG_LEVEL = "DEPCYCLE_LOG_LEVEL"
    CYCLE_ARROW = " -> "
    MARKDOWN_CHECKBOX = "- [ ] "

    # Default configuration file locations, first match wins
    CONFIG_LOCATIONS = [
        "depcycle.yml",
        "depcycle.yaml",
        os.path.join(os.path.expanduser("~"), ".config", "depcycle", "depcycle.yml"),
    ]
