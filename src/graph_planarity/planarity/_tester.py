"""
Recursive cycle/piece planarity test.

Given a graph and a cycle inside it, the graph is split into pieces attached
to the cycle. Every piece that is not a plain path is tested recursively
together with the cycle, using a new cycle that runs through the piece.
Finally the pieces must be assignable to the two sides of the cycle without
conflict, i.e. their interlacement graph must be bipartite.

The method assumes a biconnected input. It is quadratic or worse and meant
for small and medium graphs.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..graph import Graph, V
from ..operations import is_path, split_into_pieces, union
from ..traversal import GraphTraverser
from ..validation import NotBiconnectedError, validate_flag
from ._interlacement import build_interlacement_graph
from ._types import NonPlanarReason, PlanarityResult


@dataclass
class _RunStats:
    depth: int = 0
    pieces: int = 0


class PlanarityTester:
    """
    Planarity tester for a graph together with a cycle in it.

    Configuration:
        euler_bound: Reject a level as soon as it has more than 3n - 6 edges.
        full_bipartite_check: Colour every component of the interlacement
            graph. By default only the component of the first conflicting
            piece is coloured.

    Example:
        tester = PlanarityTester()
        result = tester.test(graph, cycle)
        if not result.is_planar:
            print(result.reason)
    """

    def __init__(self, euler_bound: bool = True, full_bipartite_check: bool = False) -> None:
        self.euler_bound = euler_bound
        self.full_bipartite_check = full_bipartite_check

    @property
    def euler_bound(self) -> bool:
        return self._euler_bound

    @euler_bound.setter
    def euler_bound(self, value: bool) -> None:
        self._euler_bound = validate_flag("euler_bound", value)

    @property
    def full_bipartite_check(self) -> bool:
        return self._full_bipartite_check

    @full_bipartite_check.setter
    def full_bipartite_check(self, value: bool) -> None:
        self._full_bipartite_check = validate_flag("full_bipartite_check", value)

    def test(self, graph: Graph[V], cycle: Graph[V]) -> PlanarityResult:
        """
        Test ``graph`` for planarity using ``cycle`` as the first separating cycle.

        Args:
            graph: A biconnected graph
            cycle: A cycle contained in ``graph``

        Returns:
            PlanarityResult with the verdict and run statistics.

        Raises:
            NotBiconnectedError: If a piece meets the cycle in a single vertex
        """
        stats = _RunStats()
        reason = self._test(graph, cycle, 0, stats)
        return PlanarityResult(
            is_planar=reason is None,
            reason=reason,
            depth=stats.depth,
            pieces=stats.pieces,
        )

    def _test(
        self,
        graph: Graph[V],
        cycle: Graph[V],
        depth: int,
        stats: _RunStats,
    ) -> NonPlanarReason | None:
        stats.depth = max(stats.depth, depth)

        # Euler: a simple planar graph has at most 3n - 6 edges
        if self.euler_bound and graph.num_edges() > 3 * graph.num_vertices() - 6:
            return NonPlanarReason.edge_bound

        pieces = split_into_pieces(graph, cycle)
        stats.pieces += len(pieces)

        for piece in pieces:
            # Paths can always be drawn on either side
            if is_path(piece):
                continue
            sub_graph, sub_cycle = _reroute_cycle(cycle, piece)
            reason = self._test(sub_graph, sub_cycle, depth + 1, stats)
            if reason is not None:
                return reason

        cycle_order = list(GraphTraverser(cycle).iter_cycle())
        interlacement = build_interlacement_graph(cycle_order, pieces)
        traverser = GraphTraverser(interlacement)
        if not traverser.is_bipartite(all_components=self.full_bipartite_check):
            return NonPlanarReason.interlacement
        return None


def _reroute_cycle(cycle: Graph[V], piece: Graph[V]) -> tuple[Graph[V], Graph[V]]:
    """
    Build the sub-problem for one piece.

    The new cycle keeps the old cycle except for the arc between two
    consecutive attachment vertices, which is replaced by a path through the
    piece.

    Returns:
        (cycle + piece, new cycle)
    """
    start = next(v for v in cycle.vertices() if piece.has_vertex(v))

    segment = cycle.copy()
    prev = start
    curr = next(iter(cycle.neighbors(start) or ()))
    segment.remove_edge(prev, curr)
    while not piece.has_vertex(curr):
        for v in cycle.neighbors(curr) or ():
            if v != prev:
                prev, curr = curr, v
                break
        segment.remove_edge(prev, curr)
    end = curr

    if end == start:
        raise NotBiconnectedError(
            f"Piece is attached to the cycle only at vertex {start!r}; "
            "the graph is not biconnected"
        )

    piece_path = GraphTraverser(piece).find_path(start, end, banned=cycle.vertices())
    if piece_path is None:
        raise NotBiconnectedError(
            f"No path through the piece joins attachment vertices {start!r} and {end!r}"
        )

    return union(cycle, piece), union(segment, piece_path)


def test_planarity(
    graph: Graph[V],
    cycle: Graph[V],
    euler_bound: bool = True,
    full_bipartite_check: bool = False,
) -> bool:
    """
    Test whether ``graph`` is planar, given a cycle contained in it.

    Args:
        graph: A biconnected graph
        cycle: A cycle contained in ``graph``
        euler_bound: Reject levels with more than 3n - 6 edges early
        full_bipartite_check: Colour every interlacement component

    Returns:
        True if the graph is planar.
    """
    tester = PlanarityTester(euler_bound=euler_bound, full_bipartite_check=full_bipartite_check)
    return tester.test(graph, cycle).is_planar


# Keep pytest from collecting the public function as a test
test_planarity.__test__ = False  # type: ignore[attr-defined]
