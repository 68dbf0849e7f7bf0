"""Render cycle detection results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from constants import Constants
from cycles.models import CycleRecord, PackageId, ResolutionTable


@dataclass
class CycleReport:
    """Outcome of a run: the sorted cyclic packages and their rendered lines."""
    cycles: List[Tuple[PackageId, CycleRecord]] = field(default_factory=list)
    lines: List[str] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.cycles)

    @property
    def ok(self) -> bool:
        return not self.cycles

    @property
    def failure_message(self) -> str:
        return f"{self.count} cyclic dependencies found"


def format_chain(cycle: CycleRecord) -> str:
    """Render a closed cycle as ``a(1.0) -> b(1.0) -> a(1.0)``."""
    return Constants.CYCLE_ARROW.join(str(pkg) for pkg in cycle)


def format_line(pkg: PackageId, cycle: CycleRecord, markdown: bool = False) -> str:
    """Render one cyclic package.

    Args:
        pkg: Package the cycle is attributed to.
        cycle: Closed cycle path through ``pkg``.
        markdown: Emit a GitHub flavored markdown checklist item.
    """
    chain = format_chain(cycle)
    if markdown:
        return f"{Constants.MARKDOWN_CHECKBOX}`{pkg.name}` (`{pkg.version}`): Cycle through {chain}"
    return f"{pkg.name} ({pkg.version}): Cycle through {chain}"


def cyclic_entries(table: ResolutionTable) -> List[Tuple[PackageId, CycleRecord]]:
    """Return the cyclic entries of ``table`` sorted by name, then version."""
    return sorted(
        (pkg, res.cycle or ()) for pkg, res in table.items() if res.cyclic
    )


def build_report(table: ResolutionTable, markdown: bool = False) -> CycleReport:
    """Collect and render every cyclic package of ``table``."""
    cycles = cyclic_entries(table)
    lines = [format_line(pkg, cycle, markdown) for pkg, cycle in cycles]
    return CycleReport(cycles=cycles, lines=lines)
