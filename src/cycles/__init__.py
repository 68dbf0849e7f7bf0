"""Dependency graph construction, cycle detection and reporting."""

from cycles.builder import build_graph, parse_dependency_spec
from cycles.detector import CycleDetector, detect_cycles
from cycles.models import ACYCLIC, CycleRecord, Graph, PackageId, Resolution, ResolutionTable
from cycles.reporter import CycleReport, build_report, format_chain, format_line

__all__ = [
    "ACYCLIC",
    "CycleDetector",
    "CycleRecord",
    "CycleReport",
    "Graph",
    "PackageId",
    "Resolution",
    "ResolutionTable",
    "build_graph",
    "build_report",
    "detect_cycles",
    "format_chain",
    "format_line",
    "parse_dependency_spec",
]
