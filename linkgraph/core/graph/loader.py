"""Load a LinkGraph from an edge list file.

The file holds one label per line, alternating edge source and target:

    www.node3.com
    www.node1.com
    www.node1.com
    www.node4.com
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from linkgraph.core.exceptions import EdgeFileError
from linkgraph.core.graph.base import LinkGraph

logger = logging.getLogger(__name__)


def read_edges(path: Path) -> list[tuple[str, str]]:
    """Read (from, to) label pairs. Blank lines are skipped."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise EdgeFileError(f"Cannot read {path}: {e}") from e

    labels = [line.strip() for line in text.splitlines() if line.strip()]
    if len(labels) % 2:
        raise EdgeFileError(f"{path} has {len(labels)} labels; expected from/to pairs")

    return list(zip(labels[::2], labels[1::2]))


def write_edges(path: Path, edges: Iterable[tuple[str, str]]) -> int:
    """Write edges in the alternating-line format. Returns the edge count."""
    count = 0
    with path.open("w", encoding="utf-8") as f:
        for from_label, to_label in edges:
            f.write(f"{from_label}\n{to_label}\n")
            count += 1
    return count


def build_graph(edges: Iterable[tuple[str, str]]) -> LinkGraph:
    """Insert edges into a fresh graph, in order. O(E)."""
    graph = LinkGraph()
    for from_label, to_label in edges:
        graph.add_edge(from_label, to_label)
    return graph


def load_from_file(path: Path) -> LinkGraph:
    """Load full graph from an edge list file. O(V + E)."""
    graph = build_graph(read_edges(path))
    logger.debug("loaded %r from %s", graph, path)
    return graph
