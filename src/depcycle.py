"""DepCycle - Detect dependency cycles in a resolved lock file

    Returns:
        int: Exit code
"""
import logging
import os
import sys

from constants import ExitCodes, Constants
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from args import parse_args
from cli_config import apply_config, load_config
from cycles import build_graph, build_report, CycleDetector
from export import export_report
from loader import LockfileError, LockfileReadError, read_package_records


def setup_logging(args):
    """Configure logging from the parsed (and config-completed) arguments."""
    # Honor --loglevel by passing it to the centralized logger via env
    if getattr(args, "LOG_LEVEL", None):
        os.environ[Constants.ENV_LOG_LEVEL] = str(args.LOG_LEVEL).upper()
    configure_logging(getattr(args, "LOG_FILE", None))


def run(args):
    """Run the analysis for already parsed arguments.

    Args:
        args (argparse.Namespace): Parsed and config-completed arguments.

    Returns:
        int: Exit code
    """
    logger = logging.getLogger(__name__)

    try:
        records = read_package_records(args.lock_path, args.LOCKFILE_NAME)
    except LockfileReadError as e:
        logging.error("File error: %s, aborting", e.__cause__ or e)
        return ExitCodes.FILE_ERROR.value
    except LockfileError as e:
        logging.error("%s, aborting", e)
        return ExitCodes.FILE_ERROR.value

    graph = build_graph(records)
    logger.debug("Loaded %d packages from lock file", len(graph))

    detector = CycleDetector(graph)
    table = detector.detect()
    report = build_report(table, markdown=bool(args.GITHUB))

    if is_debug_enabled(logger):
        logger.debug(
            "Report built",
            extra=extra_context(
                event="decision",
                component="cli",
                action="build_report",
                outcome="success" if report.ok else "cycles",
                count=report.count,
            )
        )

    if not report.ok:
        for line in report.lines:
            print(line)
        sys.stdout.flush()
        sys.stderr.write(report.failure_message + "\n")

    exported = True
    if getattr(args, "OUTPUT", None):
        exported = export_report(report, args.OUTPUT, getattr(args, "OUTPUT_FORMAT", None))

    if not report.ok:
        return ExitCodes.CYCLES_FOUND.value
    if not exported:
        return ExitCodes.FILE_ERROR.value
    return ExitCodes.SUCCESS.value


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    apply_config(args, load_config(getattr(args, "CONFIG", None)))
    setup_logging(args)

    logger = logging.getLogger(__name__)
    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(event="function_entry", component="cli", action="main")
        )

    sys.exit(run(args))

if __name__ == "__main__":
    main()
