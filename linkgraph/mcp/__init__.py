"""
MCP server for linkgraph.

Exposes the graph queries to LLMs via the Model Context Protocol.

Tools:
    - linkgraph_shortest_path: Links on the shortest path between two URLs
    - linkgraph_centers: Minimum eccentricity URLs
    - linkgraph_components: Strongly connected components
    - linkgraph_hamiltonian_path: Path through every URL once
    - linkgraph_stats: Vertex and edge counts

Usage:
    Install: pip install linkgraph
    Run: mcp-server-linkgraph
"""

import asyncio

from linkgraph.mcp.server import serve as _serve


def serve() -> None:
    """Entry point for the MCP server."""
    asyncio.run(_serve())


__all__ = ["serve"]
