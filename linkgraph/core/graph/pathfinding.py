"""Path finding algorithms: BFS distances, shortest path, centers."""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING

from linkgraph.core.exceptions import NoPathError

if TYPE_CHECKING:
    from linkgraph.core.graph.base import LinkGraph

logger = logging.getLogger(__name__)

UNREACHABLE = -1


def distances_from(graph: LinkGraph, source: int) -> list[int]:
    """Hop distance from source to every vertex using BFS. O(V + E).

    Vertices the source cannot reach get UNREACHABLE.
    """
    distances = [UNREACHABLE] * graph.num_vertices
    distances[source] = 0
    queue: deque[int] = deque([source])

    while queue:
        current = queue.popleft()
        for neighbor in graph.neighbors(current):
            if distances[neighbor] == UNREACHABLE:
                distances[neighbor] = distances[current] + 1
                queue.append(neighbor)

    return distances


def shortest_path_length(graph: LinkGraph, from_label: str, to_label: str) -> int:
    """Number of edges on a shortest path from one label to another.

    Raises:
        UnknownLabelError: either label is not in the graph.
        NoPathError: to_label cannot be reached from from_label.
    """
    from_id = graph.vertex_id(from_label)
    to_id = graph.vertex_id(to_label)

    distance = distances_from(graph, from_id)[to_id]
    if distance == UNREACHABLE:
        raise NoPathError(f"No path from '{from_label}' to '{to_label}'")
    return distance


def eccentricities(graph: LinkGraph) -> list[int]:
    """Eccentricity of every vertex, in id order. O(V * (V + E)).

    Only vertices reachable from v count towards its eccentricity, so a vertex
    that reaches nothing has eccentricity 0.
    """
    return [max(distances_from(graph, v)) for v in range(graph.num_vertices)]


def radius_and_centers(graph: LinkGraph) -> tuple[int | None, list[str]]:
    """Radius and center labels from a single pass of V BFS runs.

    The radius is None for an empty graph.
    """
    values = eccentricities(graph)
    if not values:
        return None, []

    radius = min(values)
    result = [graph.label(v) for v, ecc in enumerate(values) if ecc == radius]
    logger.debug("radius %d, %d center(s) of %d vertices", radius, len(result), len(values))
    return radius, result


def centers(graph: LinkGraph) -> list[str]:
    """Labels of the vertices whose eccentricity equals the radius."""
    return radius_and_centers(graph)[1]
