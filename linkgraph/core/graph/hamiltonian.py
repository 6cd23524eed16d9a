"""Hamiltonian path search using bitmask dynamic programming."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from linkgraph import config
from linkgraph.core.exceptions import GraphTooLargeError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from linkgraph.core.graph.base import LinkGraph

logger = logging.getLogger(__name__)

# (vertex, mask): mask holds every vertex the path starting at vertex must cover
State = tuple[int, int]


class _Frame:
    """One pending (vertex, mask) subproblem on the search stack."""

    __slots__ = ("vertex", "mask", "rest", "neighbors", "child")

    def __init__(self, graph: LinkGraph, vertex: int, mask: int) -> None:
        self.vertex = vertex
        self.mask = mask
        self.rest = mask & ~(1 << vertex)
        self.neighbors: Iterator[int] = iter(graph.neighbors(vertex))
        self.child: int | None = None


def can_complete(
    graph: LinkGraph,
    start: int,
    mask: int,
    memo: dict[State, bool],
    successor: dict[State, int],
) -> bool:
    """Check whether a path from start covers exactly the vertices in mask.

    A state (i, mask) is solvable if mask is just {i}, or if some neighbor k of
    i inside mask - {i} has (k, mask - {i}) solvable. The first such k, in
    neighbor iteration order, is stored in successor and the search stops.

    memo and successor are filled in place and may be shared between calls
    on the same graph.
    """
    if (start, mask) in memo:
        return memo[(start, mask)]

    work = [_Frame(graph, start, mask)]
    while work:
        frame = work[-1]
        state = (frame.vertex, frame.mask)

        if frame.rest == 0:
            memo[state] = True
            work.pop()
            continue

        if frame.child is not None:
            if memo[(frame.child, frame.rest)]:
                memo[state] = True
                successor[state] = frame.child
                work.pop()
                continue
            frame.child = None

        for k in frame.neighbors:
            if not frame.rest & (1 << k):
                continue
            known = memo.get((k, frame.rest))
            if known is None:
                frame.child = k
                work.append(_Frame(graph, k, frame.rest))
                break
            if known:
                frame.child = k
                break
        else:
            memo[state] = False
            work.pop()

    return memo[(start, mask)]


def reconstruct(graph: LinkGraph, start: int, mask: int, successor: dict[State, int]) -> list[str]:
    """Follow successor links from a solved (start, mask) state."""
    path: list[str] = []
    vertex = start
    while True:
        path.append(graph.label(vertex))
        rest = mask & ~(1 << vertex)
        if rest == 0:
            return path
        vertex, mask = successor[(vertex, mask)], rest


def hamiltonian_path(graph: LinkGraph) -> list[str]:
    """Find a path visiting every vertex exactly once. O(V^2 * 2^V).

    Start vertices are tried in increasing id order. Returns an empty list
    when no such path exists.

    Raises:
        GraphTooLargeError: more vertices than config.MASK_WIDTH.
    """
    n = graph.num_vertices
    if n > config.MASK_WIDTH:
        logger.debug("refusing hamiltonian search over %d vertices", n)
        raise GraphTooLargeError(
            f"Hamiltonian search supports at most {config.MASK_WIDTH} vertices, graph has {n}"
        )

    full_mask = (1 << n) - 1
    memo: dict[State, bool] = {}
    successor: dict[State, int] = {}

    for start in range(n):
        if can_complete(graph, start, full_mask, memo, successor):
            logger.debug("hamiltonian path found from vertex %d (%d states)", start, len(memo))
            return reconstruct(graph, start, full_mask, successor)

    logger.debug("no hamiltonian path in %d vertices (%d states)", n, len(memo))
    return []
