"""Planarity testing by recursive decomposition along cycles.

A cycle is found in the graph, the rest of the graph is split into pieces
attached to that cycle, every non-trivial piece is tested recursively, and the
pieces' interlacement along the cycle must form a bipartite conflict graph.

Public API:
    is_planar(graph_or_edges) -> bool
    check_planarity(graph_or_edges) -> PlanarityResult
    test_planarity(graph, cycle) -> bool
"""

from __future__ import annotations

import warnings
from typing import Iterable, Sequence, Union

from ..graph import Graph, V
from ..traversal import GraphTraverser
from ..validation import GraphStructureWarning, NoCycleError
from ._interlacement import (
    NOT_INTERLACED,
    build_interlacement_graph,
    interlacement_symbols,
    is_interlaced,
    pieces_interlace,
)
from ._tester import PlanarityTester, test_planarity
from ._types import NonPlanarReason, PlanarityResult

GraphLike = Union[Graph[V], Iterable[Sequence[V]]]


def is_planar(
    graph: GraphLike[V],
    euler_bound: bool = True,
    full_bipartite_check: bool = False,
) -> bool:
    """Test whether a graph is planar.

    This is the simple boolean API. For richer results use
    ``check_planarity`` instead.

    Args:
        graph: A Graph, or an iterable of (u, v) edges.
        euler_bound: Reject levels with more than 3n - 6 edges early.
        full_bipartite_check: Colour every interlacement component.

    Returns:
        True if the graph is planar, False otherwise.

    Raises:
        NoCycleError: If the graph has no cycle to start from.
    """
    return check_planarity(
        graph,
        euler_bound=euler_bound,
        full_bipartite_check=full_bipartite_check,
    ).is_planar


def check_planarity(
    graph: GraphLike[V],
    euler_bound: bool = True,
    full_bipartite_check: bool = False,
) -> PlanarityResult:
    """Test planarity and return detailed results.

    The first separating cycle is found by a depth-first search from the
    first vertex of the graph. The input is expected to be biconnected;
    a disconnected input triggers a ``GraphStructureWarning`` and the verdict
    only covers what the search reaches.

    Args:
        graph: A Graph, or an iterable of (u, v) edges.
        euler_bound: Reject levels with more than 3n - 6 edges early.
        full_bipartite_check: Colour every interlacement component.

    Returns:
        PlanarityResult with the verdict and run statistics.

    Raises:
        NoCycleError: If the graph has no cycle to start from.
        NotBiconnectedError: If a piece is attached to a cycle at one vertex.
    """
    if not isinstance(graph, Graph):
        graph = Graph.from_edges(graph)

    traverser = GraphTraverser(graph)
    if not traverser.is_connected():
        warnings.warn(
            f"Graph has {len(traverser.connected_components())} connected components. "
            "Only the component containing the first vertex is tested.",
            GraphStructureWarning,
            stacklevel=2,
        )

    cycle = traverser.find_cycle()
    if cycle is None:
        raise NoCycleError("No cycle found; graph not biconnected or too small")

    tester = PlanarityTester(euler_bound=euler_bound, full_bipartite_check=full_bipartite_check)
    return tester.test(graph, cycle)


__all__ = [
    "is_planar",
    "check_planarity",
    "test_planarity",
    "PlanarityTester",
    "PlanarityResult",
    "NonPlanarReason",
    "NOT_INTERLACED",
    "build_interlacement_graph",
    "interlacement_symbols",
    "is_interlaced",
    "pieces_interlace",
]
