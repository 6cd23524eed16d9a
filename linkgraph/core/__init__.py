"""
Core module: graph engine and exceptions.

Exceptions (exceptions.py):
    - LinkGraphError: Base exception for all linkgraph errors
    - UnknownLabelError: Label was never added to the graph
    - NoPathError: Destination unreachable from source
    - GraphTooLargeError: Too many vertices for the Hamiltonian search
    - EdgeFileError: Edge list file could not be read

Graph (graph/):
    - LinkGraph: In-memory directed graph with the four structural queries
"""

from linkgraph.core.exceptions import (
    EdgeFileError,
    GraphTooLargeError,
    LinkGraphError,
    NoPathError,
    UnknownLabelError,
)
from linkgraph.core.graph import LinkGraph, load_from_file

__all__ = [
    # Graph
    "LinkGraph",
    "load_from_file",
    # Exceptions
    "LinkGraphError",
    "UnknownLabelError",
    "NoPathError",
    "GraphTooLargeError",
    "EdgeFileError",
]
