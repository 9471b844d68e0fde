"""
Undirected simple graph used throughout the planarity tester.

The graph stores its edges as an adjacency mapping from each vertex to the
set of its neighbors. The mapping is kept symmetric, and a vertex whose last
edge is removed disappears from the vertex set.

Queries about absent vertices return None instead of raising, so callers
must check the result before using it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, Hashable, Iterable, Iterator, Optional, Sequence, TypeVar

import numpy as np

from .validation import validate_edge

if TYPE_CHECKING:
    from typing_extensions import Self

V = TypeVar("V", bound=Hashable)


class Graph(Generic[V]):
    """
    Mutable undirected graph without self-loops or parallel edges.

    Vertices can be any hashable value. Iteration order follows insertion
    order, which makes every "arbitrary" choice of the algorithms
    deterministic for a given construction sequence.

    Example:
        g = Graph.from_edges([(1, 2), (2, 3), (3, 1)])
        g.num_edges()   # 3
        g.degree(4)     # None
    """

    __slots__ = ("_adj",)

    def __init__(self, source: Optional[Graph[V]] = None) -> None:
        """Create an empty graph, or a copy of ``source``."""
        self._adj: dict[V, set[V]] = {}
        if source is not None:
            for v in source.vertices():
                self.add_vertex(v)
                for u in source._adj[v]:
                    self.add_edge(v, u)

    @classmethod
    def from_edges(cls, edges: Iterable[Sequence[V]]) -> Self:
        """Build a graph from an iterable of (u, v) pairs."""
        graph = cls()
        for u, v in edges:
            graph.add_edge(u, v)
        return graph

    def copy(self) -> Self:
        """Return an independent copy of this graph."""
        return type(self)(self)

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def add_vertex(self, v: V) -> None:
        """Insert ``v`` with no neighbors. No-op if already present."""
        if v not in self._adj:
            self._adj[v] = set()

    def add_edge(self, u: V, v: V) -> None:
        """
        Insert the undirected edge {u, v}, adding missing endpoints.

        Raises:
            InvalidEdgeError: If u == v
        """
        validate_edge(u, v)
        self.add_vertex(u)
        self.add_vertex(v)
        self._adj[u].add(v)
        self._adj[v].add(u)

    def remove_edge(self, u: V, v: V) -> None:
        """
        Remove the edge {u, v} if present.

        Endpoints left without neighbors are removed from the graph.
        """
        if not (self.has_edge(u, v) and self.has_edge(v, u)):
            return
        self._adj[u].discard(v)
        self._adj[v].discard(u)
        if not self._adj[u]:
            del self._adj[u]
        if not self._adj[v]:
            del self._adj[v]

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def num_vertices(self) -> int:
        return len(self._adj)

    def num_edges(self) -> int:
        # Handshake lemma: every edge is counted once from each endpoint
        return sum(len(nbrs) for nbrs in self._adj.values()) // 2

    def neighbors(self, v: V) -> Optional[frozenset[V]]:
        """Return the neighbors of ``v``, or None if ``v`` is not a vertex."""
        nbrs = self._adj.get(v)
        if nbrs is None:
            return None
        return frozenset(nbrs)

    def degree(self, v: V) -> Optional[int]:
        """Return the degree of ``v``, or None if ``v`` is not a vertex."""
        nbrs = self._adj.get(v)
        if nbrs is None:
            return None
        return len(nbrs)

    def has_vertex(self, v: V) -> bool:
        return v in self._adj

    def has_edge(self, u: V, v: V) -> bool:
        """Check whether ``v`` is in the neighbor set of ``u``."""
        nbrs = self._adj.get(u)
        return nbrs is not None and v in nbrs

    def vertices(self) -> list[V]:
        """Return the vertices in insertion order."""
        return list(self._adj)

    def edges(self) -> list[tuple[V, V]]:
        """Return every undirected edge exactly once."""
        seen: set[V] = set()
        result: list[tuple[V, V]] = []
        for u, nbrs in self._adj.items():
            for v in nbrs:
                if v not in seen:
                    result.append((u, v))
            seen.add(u)
        return result

    def edge_set(self) -> set[frozenset[V]]:
        """Return the edges as a set of unordered pairs, for content comparison."""
        return {frozenset(e) for e in self.edges()}

    def to_adjacency_matrix(self, order: Optional[Sequence[V]] = None) -> np.ndarray:
        """
        Build a dense 0/1 adjacency matrix.

        Args:
            order: Vertex order for rows and columns (default: insertion order)

        Returns:
            Symmetric (n, n) integer array
        """
        if order is None:
            order = self.vertices()
        index = {v: i for i, v in enumerate(order)}
        n = len(order)
        matrix = np.zeros((n, n), dtype=np.int8)
        for u, v in self.edges():
            if u in index and v in index:
                matrix[index[u], index[v]] = 1
                matrix[index[v], index[u]] = 1
        return matrix

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._adj)

    def __contains__(self, v: object) -> bool:
        return v in self._adj

    def __iter__(self) -> Iterator[V]:
        return iter(list(self._adj))

    def __repr__(self) -> str:
        return f"Graph(vertices={self.num_vertices()}, edges={self.num_edges()})"


__all__ = ["Graph", "V"]
