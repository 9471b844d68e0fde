"""
graph-planarity: Planarity testing by cycle decomposition in Python.

This package decides whether an undirected simple graph is planar. A cycle is
found, the graph is split into pieces attached to it, each non-trivial piece
is tested recursively, and the pieces' interlacement along the cycle must
allow a two-sided placement.

Available modules:
- graph: Undirected graph over hashable vertices
- traversal: Depth-first searches (paths, cycles, colouring, pieces)
- operations: Structural predicates (is_cycle, is_path, ...) and union
- planarity: The recursive planarity test
- io: Edge-list reading and writing
"""

__version__ = "0.1.0"

from .graph import Graph

# Edge-list files
from .io import format_edge_list, parse_edge_list, read_edge_list, write_edge_list

# Structural predicates
from .operations import (
    is_bipartite,
    is_connected,
    is_cycle,
    is_path,
    split_into_pieces,
    union,
)

# Planarity testing
from .planarity import (
    NonPlanarReason,
    PlanarityResult,
    PlanarityTester,
    check_planarity,
    is_planar,
    test_planarity,
)
from .traversal import GraphTraverser

# Validation utilities
from .validation import (
    EdgeListFormatError,
    GraphStructureWarning,
    InvalidEdgeError,
    NoCycleError,
    NotBiconnectedError,
    ValidationError,
)

__all__ = [
    # Version
    "__version__",
    # Graph and traversal
    "Graph",
    "GraphTraverser",
    # Predicates and combinators
    "is_bipartite",
    "is_connected",
    "is_cycle",
    "is_path",
    "split_into_pieces",
    "union",
    # Planarity
    "is_planar",
    "check_planarity",
    "test_planarity",
    "PlanarityTester",
    "PlanarityResult",
    "NonPlanarReason",
    # Edge lists
    "parse_edge_list",
    "read_edge_list",
    "format_edge_list",
    "write_edge_list",
    # Validation
    "ValidationError",
    "InvalidEdgeError",
    "EdgeListFormatError",
    "NoCycleError",
    "NotBiconnectedError",
    "GraphStructureWarning",
]
