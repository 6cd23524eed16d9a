"""Core LinkGraph class with adjacency set representation."""

from __future__ import annotations

from collections.abc import Iterator

from linkgraph.core.graph.analysis import strongly_connected_components
from linkgraph.core.graph.hamiltonian import hamiltonian_path
from linkgraph.core.graph.pathfinding import centers, shortest_path_length
from linkgraph.core.graph.registry import LabelRegistry


class LinkGraph:
    """Directed graph over string labels.

    Labels are interned to dense integer ids; each id owns a set of successor
    ids. Vertices and edges are only ever added.
    """

    __slots__ = ("_registry", "_out", "_num_edges")

    def __init__(self) -> None:
        self._registry = LabelRegistry()
        self._out: list[set[int]] = []
        self._num_edges = 0

    def add_vertex(self, label: str) -> int:
        """Add a vertex if unseen and return its id. O(1)."""
        vertex_id = self._registry.intern(label)
        if vertex_id == len(self._out):
            self._out.append(set())
        return vertex_id

    def add_edge(self, from_label: str, to_label: str) -> None:
        """Add a directed edge, creating either vertex as needed. O(1)."""
        self.connect(self.add_vertex(from_label), self.add_vertex(to_label))

    def connect(self, from_id: int, to_id: int) -> None:
        """Add a directed edge between known ids. Repeats are no-ops."""
        successors = self._out[from_id]
        if to_id not in successors:
            successors.add(to_id)
            self._num_edges += 1

    def neighbors(self, vertex_id: int) -> set[int]:
        """Successor ids of a known vertex. The set must not be mutated."""
        return self._out[vertex_id]

    def has_edge(self, from_label: str, to_label: str) -> bool:
        if from_label not in self._registry or to_label not in self._registry:
            return False
        return self._registry.id_of(to_label) in self._out[self._registry.id_of(from_label)]

    def vertex_id(self, label: str) -> int:
        """Id of a label. Raises UnknownLabelError if absent."""
        return self._registry.id_of(label)

    def label(self, vertex_id: int) -> str:
        """Label of an id."""
        return self._registry.label_of(vertex_id)

    # Queries

    def get_shortest_path(self, from_label: str, to_label: str) -> int:
        """Hop count of the shortest directed path."""
        return shortest_path_length(self, from_label, to_label)

    def get_centers(self) -> list[str]:
        """Labels of all minimum-eccentricity vertices."""
        return centers(self)

    def get_strongly_connected_components(self) -> list[list[str]]:
        """All strongly connected components, in Tarjan completion order."""
        return strongly_connected_components(self)

    def get_hamiltonian_path(self) -> list[str]:
        """A path through every vertex once, or an empty list."""
        return hamiltonian_path(self)

    @property
    def num_vertices(self) -> int:
        return len(self._out)

    @property
    def num_edges(self) -> int:
        return self._num_edges

    @property
    def labels(self) -> list[str]:
        return self._registry.labels

    def edges(self) -> Iterator[tuple[str, str]]:
        """Yield (from, to) label pairs."""
        for from_id, successors in enumerate(self._out):
            for to_id in successors:
                yield self.label(from_id), self.label(to_id)

    def __contains__(self, label: object) -> bool:
        return label in self._registry

    def __len__(self) -> int:
        return self.num_vertices

    def __repr__(self) -> str:
        return f"LinkGraph(nodes={self.num_vertices}, edges={self.num_edges})"
