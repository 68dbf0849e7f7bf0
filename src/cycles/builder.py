"""Build the dependency graph from lock file package records."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from cycles.models import Graph, PackageId

logger = logging.getLogger(__name__)


def parse_dependency_spec(spec: Any) -> Optional[PackageId]:
    """Turn a dependency specifier into the package it points at.

    Accepted forms are ``"<name> <version>"`` and
    ``"<name> <version> <source>"``; the source token is ignored.

    Args:
        spec: Raw entry of a ``dependencies`` array.

    Returns:
        The target PackageId, or None when the entry is not usable.
    """
    if not isinstance(spec, str):
        return None
    parts = spec.split()
    if len(parts) not in (2, 3):
        return None
    return PackageId(parts[0], parts[1])


def _record_fields(record: Any) -> Optional[Tuple[str, str, List[Any]]]:
    """Return (name, version, dependencies) for a well-formed record."""
    if not isinstance(record, dict):
        return None
    name = record.get("name")
    version = record.get("version")
    deps = record.get("dependencies")
    if not isinstance(name, str) or not isinstance(version, str):
        return None
    if not isinstance(deps, list):
        return None
    return name, version, deps


def build_graph(records: Iterable[Any]) -> Graph:
    """Build a Graph from parsed ``[[package]]`` records.

    Records lacking ``name``, ``version`` or ``dependencies`` are skipped.
    A later record with the same name and version replaces the earlier one.
    Edge targets are not checked against the set of known packages.

    Args:
        records: Entries of the lock file's package array.

    Returns:
        Graph: Adjacency in declaration order.
    """
    adjacency: Dict[PackageId, Tuple[PackageId, ...]] = {}
    skipped_records = 0
    dropped_edges = 0

    for record in records:
        fields = _record_fields(record)
        if fields is None:
            skipped_records += 1
            continue
        name, version, deps = fields
        edges = []
        for spec in deps:
            target = parse_dependency_spec(spec)
            if target is None:
                dropped_edges += 1
                logger.debug("Dropping dependency %r of %s %s", spec, name, version)
                continue
            edges.append(target)
        adjacency[PackageId(name, version)] = tuple(edges)

    graph = Graph(adjacency)
    logger.debug(
        "Built graph with %d packages and %d edges (%d records skipped, %d edges dropped)",
        len(graph),
        graph.edge_count,
        skipped_records,
        dropped_edges,
    )
    return graph
