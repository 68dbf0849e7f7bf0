"""Argument parsing functionality for DepCycle."""

import argparse
from constants import Constants

def parse_args(argv=None):
    """Parses the arguments passed to the program.

    Flags left unset are ``None`` so configuration files can fill them in.
    """
    parser = argparse.ArgumentParser(
        prog="depcycle",
        description="DepCycle - Detect dependency cycles in your Cargo.lock",
        add_help=True,
    )

    parser.add_argument("lock_path",
                        metavar="LOCK_PATH",
                        help=f"Lock file, or a directory containing {Constants.LOCKFILE_NAME}",
                        type=str)
    parser.add_argument("-g", "--github",
                        dest="GITHUB",
                        help="Display result in GitHub flavored markdown",
                        action="store_true",
                        default=None)
    parser.add_argument("--lockfile-name",
                        dest="LOCKFILE_NAME",
                        help=f"Lock file name used when LOCK_PATH is a directory (default: {Constants.LOCKFILE_NAME})",
                        action="store",
                        type=str)

    parser.add_argument("-o", "--output",
                        dest="OUTPUT",
                        help="Path to output file (JSON or CSV)",
                        action="store",
                        type=str)
    parser.add_argument("-f", "--format",
                        dest="OUTPUT_FORMAT",
                        help="Output format (json or csv). If not specified, inferred from --output extension; defaults to json.",
                        action="store",
                        type=str.lower,
                        choices=Constants.SUPPORTED_FORMATS)

    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level (default: INFO)",
                        action="store",
                        type=str.upper,
                        choices=Constants.LOG_LEVELS)
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)

    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML, YML, or JSON)",
                        action="store",
                        type=str)

    return parser.parse_args(argv)
