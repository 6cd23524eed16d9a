"""Data models for linkgraph."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from linkgraph.core.graph.base import LinkGraph


class Query(Enum):
    """Structural queries the engine answers."""

    SHORTEST_PATH = "shortest-path"
    CENTERS = "centers"
    COMPONENTS = "components"
    HAMILTONIAN = "hamiltonian"


@dataclass
class GraphStats:
    """Size summary of a graph."""

    vertices: int
    edges: int
    self_loops: int

    @classmethod
    def from_graph(cls, graph: LinkGraph) -> GraphStats:
        """Summarize a graph."""
        return cls(
            vertices=graph.num_vertices,
            edges=graph.num_edges,
            self_loops=sum(1 for v in range(graph.num_vertices) if v in graph.neighbors(v)),
        )


@dataclass
class BenchmarkResult:
    """Timing of repeated calls to one query on one generated graph."""

    query: Query
    size: int
    dense: bool
    edges: int
    runs: int
    total_ns: int
    min_ns: int
    max_ns: int
    # Shortest path runs where the target was unreachable
    no_path: int = 0

    @property
    def mean_ns(self) -> float:
        return self.total_ns / self.runs if self.runs else 0.0

    @property
    def density(self) -> str:
        return "dense" if self.dense else "sparse"

    def to_dict(self) -> dict[str, object]:
        return {
            "query": self.query.value,
            "size": self.size,
            "density": self.density,
            "edges": self.edges,
            "runs": self.runs,
            "mean_ns": self.mean_ns,
            "min_ns": self.min_ns,
            "max_ns": self.max_ns,
            "no_path": self.no_path,
        }
