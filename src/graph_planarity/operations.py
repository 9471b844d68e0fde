"""
Structural predicates and combinators on graphs.

These functions take whole graphs as arguments. The predicates that need a
search delegate to ``GraphTraverser``.
"""

from __future__ import annotations

from .graph import Graph, V
from .traversal import GraphTraverser


def is_connected(graph: Graph[V]) -> bool:
    """Check whether every vertex is reachable from every other vertex."""
    return GraphTraverser(graph).is_connected()


def is_cycle(graph: Graph[V]) -> bool:
    """
    Check whether a graph is a single cycle.

    A cycle is connected, has more than two vertices, and every vertex has
    degree exactly 2.
    """
    if graph.num_vertices() <= 2:
        return False
    if any(graph.degree(v) != 2 for v in graph.vertices()):
        return False
    return is_connected(graph)


def is_path(graph: Graph[V]) -> bool:
    """
    Check whether a graph is a simple path.

    Exactly two vertices have degree 1 and all others have degree 2.
    """
    end_points = 0
    for v in graph.vertices():
        degree = graph.degree(v)
        if degree == 1:
            end_points += 1
        elif degree != 2:
            return False
    return end_points == 2


def is_bipartite(graph: Graph[V], all_components: bool = False) -> bool:
    """Check whether a graph can be two-coloured (see ``GraphTraverser.is_bipartite``)."""
    return GraphTraverser(graph).is_bipartite(all_components=all_components)


def split_into_pieces(graph: Graph[V], cycle: Graph[V]) -> list[Graph[V]]:
    """Split ``graph`` into pieces relative to ``cycle``."""
    return GraphTraverser(graph).split_into_pieces(cycle)


def union(g1: Graph[V], g2: Graph[V]) -> Graph[V]:
    """Return a new graph holding every vertex and edge of both inputs."""
    result: Graph[V] = Graph(g1)
    for v in g2.vertices():
        result.add_vertex(v)
    for u, v in g2.edges():
        result.add_edge(u, v)
    return result


__all__ = [
    "is_connected",
    "is_cycle",
    "is_path",
    "is_bipartite",
    "split_into_pieces",
    "union",
]
