"""MCP server implementation for linkgraph."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from linkgraph import config
from linkgraph.core.exceptions import LinkGraphError
from linkgraph.core.graph import LinkGraph, load_from_file
from linkgraph.core.graph.pathfinding import radius_and_centers
from linkgraph.core.models import GraphStats

server = Server("linkgraph")

_GRAPH_FILE_PROPERTY = {
    "graph_file": {
        "type": "string",
        "description": (
            "Edge list file, one label per line alternating from/to "
            f"(default: {config.DEFAULT_GRAPH_FILE})"
        ),
    },
}


def _get_graph(graph_file: str | None) -> LinkGraph:
    """Load the graph for a tool call."""
    path = Path(graph_file) if graph_file else config.DEFAULT_GRAPH_FILE
    if not path.exists():
        raise FileNotFoundError(
            f"No graph file found. Run 'linkgraph generate' first.\nExpected: {path}"
        )
    return load_from_file(path)


@server.list_tools()  # type: ignore[no-untyped-call, untyped-decorator]
async def list_tools() -> list[Tool]:
    """List available tools."""
    return [
        Tool(
            name="linkgraph_shortest_path",
            description=(
                "Length (number of links) of the shortest directed path between two URLs. "
                "Returns an error if either URL is unknown or no path exists."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "from_url": {"type": "string", "description": "Source URL"},
                    "to_url": {"type": "string", "description": "Destination URL"},
                    **_GRAPH_FILE_PROPERTY,
                },
                "required": ["from_url", "to_url"],
            },
        ),
        Tool(
            name="linkgraph_centers",
            description=(
                "URLs of minimum eccentricity: the pages from which every page they can "
                "reach is fewest links away."
            ),
            inputSchema={"type": "object", "properties": {**_GRAPH_FILE_PROPERTY}},
        ),
        Tool(
            name="linkgraph_components",
            description="Strongly connected components: groups of URLs that all reach each other.",
            inputSchema={"type": "object", "properties": {**_GRAPH_FILE_PROPERTY}},
        ),
        Tool(
            name="linkgraph_hamiltonian_path",
            description=(
                "A path following links that visits every URL exactly once. "
                "Returns an empty path if there is none. Exponential cost; small graphs only."
            ),
            inputSchema={"type": "object", "properties": {**_GRAPH_FILE_PROPERTY}},
        ),
        Tool(
            name="linkgraph_stats",
            description="Get vertex and edge counts of the graph.",
            inputSchema={"type": "object", "properties": {**_GRAPH_FILE_PROPERTY}},
        ),
    ]


@server.call_tool()  # type: ignore[untyped-decorator]
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Handle tool calls."""
    try:
        result = handle_tool(name, arguments)
        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    except (FileNotFoundError, LinkGraphError) as e:
        return [TextContent(type="text", text=json.dumps({"error": str(e)}))]
    except KeyError as e:
        error = f"Missing required argument: {e}"
        return [TextContent(type="text", text=json.dumps({"error": error}))]
    except Exception as e:
        return [TextContent(type="text", text=json.dumps({"error": str(e)}))]


def handle_tool(name: str, arguments: dict[str, Any]) -> dict[str, Any]:
    """Dispatch a tool call to its handler."""
    graph_file = arguments.get("graph_file")

    if name == "linkgraph_shortest_path":
        return _handle_shortest_path(graph_file, arguments["from_url"], arguments["to_url"])
    if name == "linkgraph_centers":
        return _handle_centers(graph_file)
    if name == "linkgraph_components":
        return _handle_components(graph_file)
    if name == "linkgraph_hamiltonian_path":
        return _handle_hamiltonian_path(graph_file)
    if name == "linkgraph_stats":
        return _handle_stats(graph_file)
    return {"error": f"Unknown tool: {name}"}


def _handle_shortest_path(graph_file: str | None, from_url: str, to_url: str) -> dict[str, Any]:
    """Handle linkgraph_shortest_path tool."""
    graph = _get_graph(graph_file)
    return {
        "from": from_url,
        "to": to_url,
        "length": graph.get_shortest_path(from_url, to_url),
    }


def _handle_centers(graph_file: str | None) -> dict[str, Any]:
    """Handle linkgraph_centers tool."""
    radius, result = radius_and_centers(_get_graph(graph_file))
    return {"radius": radius, "centers": result}


def _handle_components(graph_file: str | None) -> dict[str, Any]:
    """Handle linkgraph_components tool."""
    graph = _get_graph(graph_file)
    result = graph.get_strongly_connected_components()
    return {"count": len(result), "components": result}


def _handle_hamiltonian_path(graph_file: str | None) -> dict[str, Any]:
    """Handle linkgraph_hamiltonian_path tool."""
    graph = _get_graph(graph_file)
    result = graph.get_hamiltonian_path()
    return {"found": bool(result), "path": result}


def _handle_stats(graph_file: str | None) -> dict[str, Any]:
    """Handle linkgraph_stats tool."""
    stats = GraphStats.from_graph(_get_graph(graph_file))
    return {
        "vertices": stats.vertices,
        "edges": stats.edges,
        "self_loops": stats.self_loops,
    }


async def serve() -> None:
    """Run the MCP server."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())
