"""Graph analysis: strongly connected components."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from linkgraph.core.graph.base import LinkGraph

logger = logging.getLogger(__name__)

_UNVISITED = 0


def strongly_connected_components(graph: LinkGraph) -> list[list[str]]:
    """Find strongly connected components with Tarjan's algorithm. O(V + E).

    DFS roots are tried in increasing id order and components are returned in
    the order they complete. Within a component, labels follow the order they
    are popped off the Tarjan stack.

    The walk keeps its own stack of (vertex, neighbor iterator) frames instead
    of recursing, so path length is not limited by the interpreter's recursion
    limit. Vertices are visited in exactly the order the recursive form would.
    """
    n = graph.num_vertices
    index = [_UNVISITED] * n
    low = [0] * n
    on_stack = [False] * n
    stack: list[int] = []
    components: list[list[str]] = []
    counter = 1

    for root in range(n):
        if index[root] != _UNVISITED:
            continue

        index[root] = low[root] = counter
        counter += 1
        stack.append(root)
        on_stack[root] = True
        work: list[tuple[int, Iterator[int]]] = [(root, iter(graph.neighbors(root)))]

        while work:
            vertex, neighbors = work[-1]
            descended = False

            for neighbor in neighbors:
                if index[neighbor] == _UNVISITED:
                    index[neighbor] = low[neighbor] = counter
                    counter += 1
                    stack.append(neighbor)
                    on_stack[neighbor] = True
                    work.append((neighbor, iter(graph.neighbors(neighbor))))
                    descended = True
                    break
                if on_stack[neighbor]:
                    low[vertex] = min(low[vertex], index[neighbor])

            if descended:
                continue

            # All neighbors done: vertex finishes
            work.pop()
            if work:
                parent = work[-1][0]
                low[parent] = min(low[parent], low[vertex])

            if low[vertex] == index[vertex]:
                component: list[str] = []
                while True:
                    member = stack.pop()
                    on_stack[member] = False
                    component.append(graph.label(member))
                    if member == vertex:
                        break
                components.append(component)

    logger.debug("found %d strongly connected component(s) in %d vertices", len(components), n)
    return components
