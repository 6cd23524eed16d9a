"""Time repeated engine queries on generated graphs."""

from __future__ import annotations

import logging
import random
import time
from collections.abc import Callable, Iterable

from linkgraph import config
from linkgraph.benchmark.generator import generate_edges
from linkgraph.core.exceptions import NoPathError
from linkgraph.core.graph import LinkGraph, build_graph
from linkgraph.core.models import BenchmarkResult, Query

logger = logging.getLogger(__name__)

# (description, current, total)
ProgressCallback = Callable[[str, int, int], None]


def _make_call(graph: LinkGraph, query: Query) -> Callable[[], object]:
    if query is Query.SHORTEST_PATH:
        # First and last inserted vertices
        from_label = graph.label(0)
        to_label = graph.label(graph.num_vertices - 1)
        return lambda: graph.get_shortest_path(from_label, to_label)
    if query is Query.CENTERS:
        return graph.get_centers
    if query is Query.COMPONENTS:
        return graph.get_strongly_connected_components
    return graph.get_hamiltonian_path


def time_query(graph: LinkGraph, query: Query, runs: int, size: int, dense: bool) -> BenchmarkResult:
    """Call one query runs times and collect timings."""
    call = _make_call(graph, query)
    timings: list[int] = []
    no_path = 0

    for _ in range(runs):
        start = time.perf_counter_ns()
        try:
            call()
        except NoPathError:
            no_path += 1
        timings.append(time.perf_counter_ns() - start)

    return BenchmarkResult(
        query=query,
        size=size,
        dense=dense,
        edges=graph.num_edges,
        runs=runs,
        total_ns=sum(timings),
        min_ns=min(timings, default=0),
        max_ns=max(timings, default=0),
        no_path=no_path,
    )


def run_benchmark(
    queries: Iterable[Query],
    sizes: Iterable[int] = config.DEFAULT_SIZES,
    densities: Iterable[bool] = config.DEFAULT_DENSITIES,
    runs: int = config.DEFAULT_RUNS,
    seed: int | None = None,
    on_progress: ProgressCallback | None = None,
) -> list[BenchmarkResult]:
    """Benchmark each query over every size and density.

    Every (query, size, density) combination gets a freshly generated graph.

    Args:
        queries: Queries to time
        sizes: Vertex counts, each at least 1
        densities: False for sparse (ring only), True for dense
        runs: Timed calls per combination
        seed: Seed for graph generation, for repeatable graphs
        on_progress: Optional callback for progress updates (description, current, total)
    """
    queries = list(queries)
    sizes = list(sizes)
    densities = list(densities)
    if any(n < 1 for n in sizes):
        raise ValueError(f"Graph sizes must be at least 1, got {sizes}")
    if runs < 1:
        raise ValueError(f"runs must be at least 1, got {runs}")

    rng = random.Random(seed)
    total = len(queries) * len(sizes) * len(densities)
    results: list[BenchmarkResult] = []

    for query in queries:
        for n in sizes:
            for dense in densities:
                graph = build_graph(generate_edges(n, dense, rng))
                result = time_query(graph, query, runs, n, dense)
                results.append(result)
                logger.debug(
                    "%s n=%d %s: mean %.0f ns over %d runs",
                    query.value,
                    n,
                    result.density,
                    result.mean_ns,
                    runs,
                )
                if on_progress:
                    on_progress(f"{query.value} n={n} {result.density}", len(results), total)

    return results
