"""Random sparse and dense graph generation."""

from __future__ import annotations

import random

from linkgraph import config


def generate_edges(n: int, dense: bool, rng: random.Random | None = None) -> list[tuple[str, str]]:
    """Generate a random graph on n vertices as (from, to) label pairs.

    Vertices are shuffled and joined in a ring, so every graph is strongly
    connected and has a Hamiltonian path. Dense graphs also get each forward
    edge v[i] -> v[j], j >= i + 2, with probability DENSE_EDGE_PROBABILITY.
    """
    rng = rng or random.Random()
    order = list(range(n))
    rng.shuffle(order)
    labels = [config.LABEL_TEMPLATE.format(v) for v in order]

    edges = [(labels[i], labels[(i + 1) % n]) for i in range(n)]

    if dense:
        for i in range(n):
            for j in range(i + 2, n):
                if rng.random() < config.DENSE_EDGE_PROBABILITY:
                    edges.append((labels[i], labels[j]))

    return edges
