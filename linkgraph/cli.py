"""CLI entry point for linkgraph."""

import json
import logging
import random
from dataclasses import asdict
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn
from rich.table import Table

from linkgraph import config
from linkgraph.benchmark import generate_edges, run_benchmark
from linkgraph.core.exceptions import LinkGraphError
from linkgraph.core.graph import LinkGraph, load_from_file, write_edges
from linkgraph.core.graph.pathfinding import radius_and_centers
from linkgraph.core.models import BenchmarkResult, GraphStats, Query

app = typer.Typer(
    name="linkgraph",
    help="Structural queries over directed graphs of URLs.",
    no_args_is_help=True,
)
console = Console()

GraphFile = Annotated[
    Path, typer.Option("--file", "-f", help="Edge list file, one label per line")
]
JsonFlag = Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")]


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
) -> None:
    """Structural queries over directed graphs of URLs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else config.LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
    )


def get_graph(path: Path) -> LinkGraph:
    """Load a graph, exiting with an error message if it cannot be read."""
    try:
        return load_from_file(path)
    except LinkGraphError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1) from e


def fail(error: LinkGraphError, output_json: bool) -> typer.Exit:
    """Report a query error as JSON or red text; returns the exit to raise."""
    if output_json:
        print(json.dumps({"error": str(error)}))
    else:
        console.print(f"[red]{escape(str(error))}[/red]")
    return typer.Exit(1)


def format_ns(value: float) -> str:
    """Format a duration in nanoseconds with a readable unit."""
    for unit, scale in (("s", 1e9), ("ms", 1e6), ("µs", 1e3)):
        if value >= scale:
            return f"{value / scale:.2f} {unit}"
    return f"{value:.0f} ns"


def results_table(query: Query, results: list[BenchmarkResult]) -> Table:
    """Timing table for one query, one row per size and density."""
    table = Table(title=query.value)
    table.add_column("Density")
    table.add_column("Vertices", justify="right")
    table.add_column("Edges", justify="right")
    table.add_column("Mean", justify="right")
    table.add_column("Min", justify="right")
    table.add_column("Max", justify="right")

    for dense in (False, True):
        for r in results:
            if r.query is query and r.dense == dense:
                table.add_row(
                    r.density,
                    str(r.size),
                    str(r.edges),
                    format_ns(r.mean_ns),
                    format_ns(r.min_ns),
                    format_ns(r.max_ns),
                )
    return table


@app.command()
def bench(
    query: Annotated[
        list[Query] | None, typer.Option("--query", "-q", help="Query to time (repeatable)")
    ] = None,
    sizes: Annotated[
        list[int] | None, typer.Option("--size", "-n", min=1, help="Vertex count (repeatable)")
    ] = None,
    runs: Annotated[int, typer.Option("--runs", "-r", min=1, help="Calls per graph")] = (
        config.DEFAULT_RUNS
    ),
    sparse_only: Annotated[bool, typer.Option("--sparse-only", help="Skip dense graphs")] = False,
    seed: Annotated[int | None, typer.Option("--seed", help="Random seed")] = None,
    output_json: JsonFlag = False,
) -> None:
    """Time each query on random sparse and dense graphs."""
    queries = query or list(Query)
    densities = (False,) if sparse_only else config.DEFAULT_DENSITIES

    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            console=console,
            disable=output_json,
        ) as progress:
            task = progress.add_task("Benchmarking", total=None)

            def on_progress(description: str, current: int, total: int) -> None:
                progress.update(task, total=total, completed=current)
                progress.update(task, description=f"[cyan]{description}[/]")

            results = run_benchmark(
                queries,
                sizes=sizes or config.DEFAULT_SIZES,
                densities=densities,
                runs=runs,
                seed=seed,
                on_progress=on_progress,
            )
    except LinkGraphError as e:
        raise fail(e, output_json) from e

    if output_json:
        print(json.dumps([r.to_dict() for r in results]))
        return

    for q in queries:
        console.print(results_table(q, results))
    unreachable = sum(r.no_path for r in results)
    if unreachable:
        console.print(f"[dim]Unreachable shortest path runs: {unreachable}[/]")


@app.command()
def generate(
    size: Annotated[int, typer.Argument(min=1, help="Number of vertices")],
    dense: Annotated[bool, typer.Option("--dense", "-d", help="Add random forward edges")] = False,
    output: GraphFile = config.DEFAULT_GRAPH_FILE,
    seed: Annotated[int | None, typer.Option("--seed", help="Random seed")] = None,
) -> None:
    """Write a random graph as an edge list file."""
    edges = generate_edges(size, dense, random.Random(seed))
    count = write_edges(output, edges)
    console.print(f"[green]Wrote {count} edges[/green] to {output}")


@app.command()
def path(
    from_label: Annotated[str, typer.Argument(help="Source label")],
    to_label: Annotated[str, typer.Argument(help="Destination label")],
    graph_file: GraphFile = config.DEFAULT_GRAPH_FILE,
    output_json: JsonFlag = False,
) -> None:
    """Show the shortest path length between two labels."""
    graph = get_graph(graph_file)
    try:
        length = graph.get_shortest_path(from_label, to_label)
    except LinkGraphError as e:
        raise fail(e, output_json) from e

    if output_json:
        print(json.dumps({"from": from_label, "to": to_label, "length": length}))
    else:
        console.print(f"[cyan]{from_label}[/] → [cyan]{to_label}[/]: {length} hop(s)")


@app.command()
def centers(
    graph_file: GraphFile = config.DEFAULT_GRAPH_FILE,
    output_json: JsonFlag = False,
) -> None:
    """Show the vertices of minimum eccentricity."""
    graph = get_graph(graph_file)
    radius, result = radius_and_centers(graph)

    if output_json:
        print(json.dumps({"radius": radius, "centers": result}))
        return

    if not result:
        console.print("[dim]Graph is empty[/]")
        return
    console.print(f"Radius: {radius}")
    for label in result:
        console.print(f"  [cyan]{label}[/]")


@app.command()
def components(
    graph_file: GraphFile = config.DEFAULT_GRAPH_FILE,
    output_json: JsonFlag = False,
) -> None:
    """Show the strongly connected components."""
    graph = get_graph(graph_file)
    result = graph.get_strongly_connected_components()

    if output_json:
        print(json.dumps(result))
        return

    console.print(f"{len(result)} component(s)")
    for i, component in enumerate(result, start=1):
        console.print(f"\n[bold]#{i}[/] [dim]({len(component)} vertices)[/]")
        for label in component:
            console.print(f"  [cyan]{label}[/]")


@app.command()
def hamiltonian(
    graph_file: GraphFile = config.DEFAULT_GRAPH_FILE,
    output_json: JsonFlag = False,
) -> None:
    """Show a path that visits every vertex exactly once."""
    graph = get_graph(graph_file)
    try:
        result = graph.get_hamiltonian_path()
    except LinkGraphError as e:
        raise fail(e, output_json) from e

    if output_json:
        print(json.dumps(result))
        return

    if not result:
        console.print("[dim]No Hamiltonian path[/]")
        return
    console.print(" → ".join(f"[cyan]{label}[/]" for label in result))


@app.command()
def stats(
    graph_file: GraphFile = config.DEFAULT_GRAPH_FILE,
    output_json: JsonFlag = False,
) -> None:
    """Show graph size."""
    result = GraphStats.from_graph(get_graph(graph_file))

    if output_json:
        print(json.dumps(asdict(result)))
    else:
        console.print(f"Vertices: {result.vertices}")
        console.print(f"Edges: {result.edges}")
        if result.self_loops:
            console.print(f"  [dim]Self-loops: {result.self_loops}[/]")


if __name__ == "__main__":
    app()
