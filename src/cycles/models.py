"""Data models for the dependency graph and cycle resolution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Tuple


@dataclass(frozen=True, order=True)
class PackageId:
    """Identity of a resolved package instance.

    Equality, hashing and ordering use ``name`` first and ``version`` second.
    """
    name: str
    version: str

    def __str__(self) -> str:
        return f"{self.name}({self.version})"


# Closed cycle path, e.g. (a, b, a).
CycleRecord = Tuple[PackageId, ...]


@dataclass(frozen=True)
class Resolution:
    """Final classification of a node."""
    cyclic: bool
    cycle: Optional[CycleRecord] = None


ACYCLIC = Resolution(cyclic=False)


class Graph(Mapping[PackageId, Tuple[PackageId, ...]]):
    """Read-only adjacency mapping from a package to its declared dependencies.

    Iteration follows the order in which packages were declared; dependency
    tuples keep the order of the lock file.
    """

    def __init__(self, adjacency: Mapping[PackageId, Tuple[PackageId, ...]]):
        self._adjacency: Dict[PackageId, Tuple[PackageId, ...]] = {
            pkg: tuple(deps) for pkg, deps in adjacency.items()
        }

    def __getitem__(self, key: PackageId) -> Tuple[PackageId, ...]:
        return self._adjacency[key]

    def __iter__(self):
        return iter(self._adjacency)

    def __len__(self) -> int:
        return len(self._adjacency)

    def dependencies(self, pkg: PackageId) -> Tuple[PackageId, ...]:
        """Return the dependencies of ``pkg``, empty for dangling targets."""
        return self._adjacency.get(pkg, ())

    @property
    def edge_count(self) -> int:
        return sum(len(deps) for deps in self._adjacency.values())

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self)}, edges={self.edge_count})"


# Write-once mapping filled by the detector.
ResolutionTable = Dict[PackageId, Resolution]
