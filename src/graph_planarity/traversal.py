"""
Depth-first traversal engine bound to a single graph.

Provides the searches the planarity tester is built from:

- two-colouring (bipartite check)
- walking around a cycle
- finding a path that avoids a set of vertices
- finding a cycle through an arbitrary root
- splitting a graph into pieces relative to a cycle

All searches run on an explicit stack, so deep graphs do not hit the
interpreter's recursion limit. Each public call builds its own search state;
the only state kept between calls is the cursor of ``walk_cycle``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterable, Iterator, Optional

from .graph import Graph, V
from .validation import NoCycleError


@dataclass
class _Search(Generic[V]):
    """State of one speculative depth-first search.

    ``result`` holds the edges of the current branch. The search succeeds when
    a neighbor equal to ``goal`` is met while ``result`` has more than
    ``closing_size`` vertices.
    """

    goal: V
    closing_size: int
    searched: set[V] = field(default_factory=set)
    result: Graph[V] = field(default_factory=Graph)


class GraphTraverser(Generic[V]):
    """
    Search helper for one graph.

    Example:
        traverser = GraphTraverser(graph)
        cycle = traverser.find_cycle()
        if cycle is not None:
            pieces = traverser.split_into_pieces(cycle)
    """

    def __init__(self, graph: Graph[V]) -> None:
        self._graph = graph
        self._walk_started = False
        self._walk_prev: Optional[V] = None
        self._walk_next: Optional[V] = None

    @property
    def graph(self) -> Graph[V]:
        return self._graph

    def _neighbor_list(self, v: V) -> list[V]:
        nbrs = self._graph.neighbors(v)
        return list(nbrs) if nbrs is not None else []

    # -------------------------------------------------------------------------
    # Colouring
    # -------------------------------------------------------------------------

    def is_bipartite(self, all_components: bool = False) -> bool:
        """
        Test whether the graph can be two-coloured.

        Only the component of the first vertex is coloured unless
        ``all_components`` is set, so a disconnected graph is judged by that
        component alone.

        Args:
            all_components: Colour every connected component

        Returns:
            True if no edge joins two vertices of the same colour.
        """
        if self._graph.num_vertices() == 0:
            return True

        vertices = self._graph.vertices()
        roots = vertices if all_components else vertices[:1]
        coloring: dict[V, bool] = {}
        for root in roots:
            if root not in coloring and not self._color_from(root, coloring):
                return False
        return True

    def _color_from(self, root: V, coloring: dict[V, bool]) -> bool:
        stack: list[tuple[V, bool]] = [(root, True)]
        while stack:
            v, color = stack.pop()
            if v in coloring:
                if coloring[v] != color:
                    return False
                continue
            coloring[v] = color
            for n in self._neighbor_list(v):
                stack.append((n, not color))
        return True

    # -------------------------------------------------------------------------
    # Cycle walking
    # -------------------------------------------------------------------------

    def walk_cycle(self) -> V:
        """
        Return the next vertex of a walk around the graph, assumed a cycle.

        The first call picks a start vertex and a direction; each later call
        steps to the neighbor that is not the previous vertex. Calling this
        ``num_vertices()`` times visits every vertex of a cycle once.

        Raises:
            NoCycleError: If the graph has no edge to walk along
        """
        if not self._walk_started:
            vertices = self._graph.vertices()
            if not vertices:
                raise NoCycleError("Cannot walk a cycle in an empty graph")
            start = vertices[0]
            nbrs = self._neighbor_list(start)
            if not nbrs:
                raise NoCycleError(f"Vertex {start!r} has no edge to walk along")
            self._walk_prev, self._walk_next = start, nbrs[0]
            self._walk_started = True
        else:
            for n in self._neighbor_list(self._walk_next):  # type: ignore[arg-type]
                if n != self._walk_prev:
                    self._walk_prev, self._walk_next = self._walk_next, n
                    break
        return self._walk_prev  # type: ignore[return-value]

    def reset_walk(self) -> None:
        """Forget the walk cursor so the next ``walk_cycle`` starts over."""
        self._walk_started = False
        self._walk_prev = None
        self._walk_next = None

    def iter_cycle(self) -> Iterator[V]:
        """Yield ``num_vertices()`` vertices of a walk, without touching this cursor."""
        walker = GraphTraverser(self._graph)
        for _ in range(self._graph.num_vertices()):
            yield walker.walk_cycle()

    # -------------------------------------------------------------------------
    # Path and cycle search
    # -------------------------------------------------------------------------

    def find_path(self, start: V, end: V, banned: Iterable[V] = ()) -> Optional[Graph[V]]:
        """
        Find a path from ``start`` to ``end``.

        Vertices in ``banned`` are never expanded, though ``end`` may still be
        reached when it is banned.

        Args:
            start: First vertex of the path
            end: Last vertex of the path
            banned: Vertices the path must not pass through

        Returns:
            The path as a graph, or None if every route is blocked.
        """
        if not self._graph.has_vertex(start):
            return None
        search: _Search[V] = _Search(goal=end, closing_size=-1, searched=set(banned))
        return search.result if self._extend(search, start) else None

    def find_cycle(self) -> Optional[Graph[V]]:
        """
        Find a cycle through the first vertex of the graph.

        Returns:
            A cycle with more than two vertices, or None if the component of
            the first vertex has none through it.
        """
        vertices = self._graph.vertices()
        if not vertices:
            return None
        root = vertices[0]
        search: _Search[V] = _Search(goal=root, closing_size=2)
        return search.result if self._extend(search, root) else None

    def _extend(self, search: _Search[V], start: V) -> bool:
        """Grow ``search.result`` from ``start`` until it closes on the goal."""
        search.searched.add(start)
        stack: list[tuple[V, list[V], int]] = [(start, self._neighbor_list(start), 0)]

        while stack:
            v, nbrs, idx = stack[-1]
            if idx < len(nbrs):
                stack[-1] = (v, nbrs, idx + 1)
                n = nbrs[idx]
                if n == search.goal and search.result.num_vertices() > search.closing_size:
                    search.result.add_edge(v, n)
                    return True
                if n not in search.searched:
                    search.result.add_edge(v, n)
                    search.searched.add(n)
                    stack.append((n, self._neighbor_list(n), 0))
            else:
                stack.pop()
                if stack:
                    # Branch exhausted: roll back the edge that led here
                    search.result.remove_edge(stack[-1][0], v)

        return False

    # -------------------------------------------------------------------------
    # Decomposition
    # -------------------------------------------------------------------------

    def split_into_pieces(self, cycle: Graph[V]) -> list[Graph[V]]:
        """
        Split the graph into pieces relative to ``cycle``.

        A piece is either a chord (an edge between two cycle vertices that is
        not a cycle edge) or a connected part of the graph off the cycle
        together with the edges attaching it to the cycle.

        Args:
            cycle: A cycle contained in the graph

        Returns:
            The pieces, one graph per piece, in discovery order.
        """
        searched: set[V] = set()
        pieces: list[Graph[V]] = []

        for v in _cycle_order(cycle):
            searched.add(v)
            for n in self._neighbor_list(v):
                if n not in searched and not cycle.has_edge(n, v):
                    piece: Graph[V] = Graph()
                    piece.add_edge(v, n)
                    self._grow_piece(piece, cycle, n, searched)
                    pieces.append(piece)

        return pieces

    def _grow_piece(
        self,
        piece: Graph[V],
        cycle: Graph[V],
        start: V,
        searched: set[V],
    ) -> None:
        stack = [start]
        while stack:
            v = stack.pop()
            # Attachment vertex: keep the edge, do not cross the cycle
            if cycle.has_vertex(v):
                continue
            searched.add(v)
            for n in self._neighbor_list(v):
                if not piece.has_edge(n, v):
                    piece.add_edge(v, n)
                    stack.append(n)

    # -------------------------------------------------------------------------
    # Connectivity
    # -------------------------------------------------------------------------

    def connected_components(self) -> list[list[V]]:
        """Return the connected components, each in discovery order."""
        visited: set[V] = set()
        components: list[list[V]] = []

        for start in self._graph.vertices():
            if start in visited:
                continue
            comp: list[V] = []
            stack = [start]
            visited.add(start)
            while stack:
                v = stack.pop()
                comp.append(v)
                for w in self._neighbor_list(v):
                    if w not in visited:
                        visited.add(w)
                        stack.append(w)
            components.append(comp)

        return components

    def is_connected(self) -> bool:
        if self._graph.num_vertices() <= 1:
            return True
        return len(self.connected_components()) == 1


def _cycle_order(cycle: Graph[V]) -> list[V]:
    """Vertices of ``cycle`` in walk order, or insertion order if it is no cycle."""
    if cycle.num_vertices() == 0:
        return []
    if any(cycle.degree(v) != 2 for v in cycle.vertices()):
        return cycle.vertices()
    walk = list(GraphTraverser(cycle).iter_cycle())
    if len(set(walk)) != len(walk):
        return cycle.vertices()
    return walk


__all__ = ["GraphTraverser"]
