"""Export detected cycles to JSON or CSV files.

Exporters log write failures and return False; they never exit the process.
"""

import csv
import json
import logging

from constants import OutputFormats
from cycles.reporter import CycleReport, format_chain


def export_json(report: CycleReport, path):
    """Exports the cyclic packages to a JSON file.

    Args:
        report (CycleReport): Result of the cycle detection.
        path (str): File path to export the JSON.

    Returns:
        bool: True when the file was written.
    """
    data = {
        "ok": report.ok,
        "count": report.count,
        "cycles": [
            {
                "name": pkg.name,
                "version": pkg.version,
                "cycle": [{"name": p.name, "version": p.version} for p in cycle],
            }
            for pkg, cycle in report.cycles
        ],
    }
    try:
        with open(path, 'w', encoding='utf-8') as file:
            json.dump(data, file, ensure_ascii=False, indent=4)
        logging.info("JSON file has been successfully exported at: %s", path)
        return True
    except OSError as e:
        logging.error("JSON file couldn't be written to disk: %s", e)
        return False


def export_csv(report: CycleReport, path):
    """Exports the cyclic packages to a CSV file.

    Args:
        report (CycleReport): Result of the cycle detection.
        path (str): File path to export the CSV.

    Returns:
        bool: True when the file was written.
    """
    rows = [["Package Name", "Version", "Cycle Length", "Cycle"]]
    for pkg, cycle in report.cycles:
        # closed path repeats its first node
        rows.append([pkg.name, pkg.version, max(len(cycle) - 1, 0), format_chain(cycle)])
    try:
        with open(path, 'w', newline='', encoding='utf-8') as file:
            export = csv.writer(file)
            export.writerows(rows)
        logging.info("CSV file has been successfully exported at: %s", path)
        return True
    except (OSError, csv.Error) as e:
        logging.error("CSV file couldn't be written to disk: %s", e)
        return False


def resolve_format(path, fmt=None):
    """Pick the export format from an explicit value or the file extension."""
    if fmt:
        return fmt.lower()
    if path.lower().endswith(".csv"):
        return OutputFormats.CSV.value
    return OutputFormats.JSON.value


def export_report(report: CycleReport, path, fmt=None):
    """Write ``report`` to ``path`` in the requested format.

    Returns:
        bool: True when the file was written.
    """
    if resolve_format(path, fmt) == OutputFormats.CSV.value:
        return export_csv(report, path)
    return export_json(report, path)
