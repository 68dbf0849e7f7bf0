"""Cycle detection over the dependency graph.

Depth-first search from every package in declaration order, sharing one
resolution table across all roots. Once a package has an entry in the table
it is never explored again, so shared subgraphs are walked a single time and
the total work stays proportional to nodes plus edges.

The search keeps its own frame stack instead of recursing, so arbitrarily
long dependency chains cannot exhaust the interpreter's call stack.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Tuple

from common.logging_utils import extra_context, is_debug_enabled
from cycles.models import ACYCLIC, Graph, PackageId, Resolution, ResolutionTable

logger = logging.getLogger(__name__)


class _Frame:
    """One entry of the explicit DFS stack: a node and its next dependency."""

    __slots__ = ("node", "deps", "index")

    def __init__(self, node: PackageId, deps: Tuple[PackageId, ...]):
        self.node = node
        self.deps = deps
        self.index = 0


class CycleDetector:
    """Classify every package reachable from the graph as cyclic or acyclic.

    Only the first cycle found through a package is kept, and it is keyed by
    the package that closes it (the first repeated node on the path).
    """

    def __init__(self, graph: Graph):
        self.graph = graph
        self.visits = 0

    def detect(self) -> ResolutionTable:
        """Run the search and return a fresh resolution table."""
        table: ResolutionTable = {}
        self.visits = 0
        for root in self.graph:
            if root in table:
                continue
            self._walk(root, table)

        if is_debug_enabled(logger):
            logger.debug(
                "Cycle detection finished",
                extra=extra_context(
                    event="function_exit",
                    component="detector",
                    action="detect",
                    count=sum(1 for r in table.values() if r.cyclic),
                    visits=self.visits,
                ),
            )
        return table

    def _walk(self, root: PackageId, table: ResolutionTable) -> None:
        """Explore everything reachable from ``root`` that is still unresolved."""
        path: List[PackageId] = [root]
        position: Dict[PackageId, int] = {root: 0}
        stack: List[_Frame] = [_Frame(root, self.graph.dependencies(root))]
        self.visits += 1

        while stack:
            frame = stack[-1]
            if frame.index >= len(frame.deps):
                stack.pop()
                if stack:
                    path.pop()
                    del position[frame.node]
                    # no cycle closed on this node while it was on the path
                    table.setdefault(frame.node, ACYCLIC)
                continue

            cur = frame.deps[frame.index]
            frame.index += 1

            if cur in table:
                continue

            pos = position.get(cur)
            if pos is not None:
                table[cur] = Resolution(cyclic=True, cycle=tuple(path[pos:]) + (cur,))
                logger.debug("Cycle closed at %s", cur)
                continue

            position[cur] = len(path)
            path.append(cur)
            stack.append(_Frame(cur, self.graph.dependencies(cur)))
            self.visits += 1


def detect_cycles(graph: Graph) -> ResolutionTable:
    """Convenience wrapper returning the resolution table for ``graph``."""
    return CycleDetector(graph).detect()
