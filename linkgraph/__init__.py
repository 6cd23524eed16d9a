"""
Linkgraph: structural queries over directed graphs of URLs.

Linkgraph keeps an in-memory directed graph keyed by string labels and answers:
- Shortest path length between two labels (BFS)
- Graph centers (minimum eccentricity vertices)
- Strongly connected components (Tarjan)
- A Hamiltonian path, if one exists (bitmask dynamic programming)

Usage:
    from linkgraph.core.graph import LinkGraph

    graph = LinkGraph()
    graph.add_edge("www.a.com", "www.b.com")
    graph.get_shortest_path("www.a.com", "www.b.com")
"""

__version__ = "0.1.0"
