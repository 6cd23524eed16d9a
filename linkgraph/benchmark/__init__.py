"""
Benchmark driver: time engine queries on random graphs.

Components:
    - generate_edges(): Random ring graphs, optionally with extra forward edges
    - run_benchmark(): Time repeated calls per query, size and density
"""

from linkgraph.benchmark.generator import generate_edges
from linkgraph.benchmark.runner import ProgressCallback, run_benchmark, time_query

__all__ = [
    "ProgressCallback",
    "generate_edges",
    "run_benchmark",
    "time_query",
]
