"""
Link graph data structures and algorithms.

This module provides in-memory graph operations over labelled vertices:

Data Structures:
    - LabelRegistry: Dense integer ids for string labels
    - LinkGraph: Adjacency sets indexed by id, plus the query facade

Algorithms:
    - pathfinding: BFS distances, shortest path, eccentricity and centers
    - analysis: Tarjan strongly connected components
    - hamiltonian: Bitmask DP Hamiltonian path with reconstruction

Loading:
    - load_from_file(): Build a graph from an edge list file
    - build_graph(): Build a graph from (from, to) pairs
"""

from linkgraph.core.graph.base import LinkGraph
from linkgraph.core.graph.loader import build_graph, load_from_file, read_edges, write_edges
from linkgraph.core.graph.pathfinding import UNREACHABLE
from linkgraph.core.graph.registry import LabelRegistry

__all__ = [
    "LinkGraph",
    "LabelRegistry",
    "UNREACHABLE",
    "build_graph",
    "load_from_file",
    "read_edges",
    "write_edges",
]
