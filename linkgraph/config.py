"""
Configuration constants for linkgraph.

Limits, benchmark defaults and file locations are defined here.
Values that vary per environment are read from environment variables.
"""

import os
from pathlib import Path

# =============================================================================
# Engine Limits
# =============================================================================

# Widest vertex set the Hamiltonian search will encode as a bitmask
MASK_WIDTH = 64

# =============================================================================
# Benchmark Configuration
# =============================================================================

# Graph sizes (vertex counts) timed by default
DEFAULT_SIZES = (5, 10, 15, 20)

# Sparse first, then dense
DEFAULT_DENSITIES = (False, True)

# Timed calls per (query, size, density)
DEFAULT_RUNS = 20

# Chance of each extra forward edge in a dense graph
DENSE_EDGE_PROBABILITY = 0.5

# Generated vertex labels
LABEL_TEMPLATE = "www.node{}.com"

# =============================================================================
# Files
# =============================================================================

# Edge list used by the CLI and MCP server when none is given
DEFAULT_GRAPH_FILE = Path(os.environ.get("LINKGRAPH_GRAPH_FILE", "graphData.txt"))

# =============================================================================
# Logging
# =============================================================================

LOG_LEVEL = os.environ.get("LINKGRAPH_LOG_LEVEL", "WARNING").upper()
