"""Tests for the recursive cycle/piece planarity test."""

from __future__ import annotations

import pytest

from graph_planarity import (
    Graph,
    GraphStructureWarning,
    NoCycleError,
    NonPlanarReason,
    NotBiconnectedError,
    PlanarityResult,
    PlanarityTester,
    ValidationError,
    check_planarity,
    is_planar,
    test_planarity,
)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_complete_graph(n: int) -> list[tuple[int, int]]:
    """Return edges for K_n."""
    return [(i, j) for i in range(n) for j in range(i + 1, n)]


def _make_complete_bipartite(a: int, b: int) -> list[tuple[int, int]]:
    """Return edges for K_{a,b}."""
    return [(i, a + j) for i in range(a) for j in range(b)]


def _make_cycle(n: int) -> list[tuple[int, int]]:
    """Return edges for C_n."""
    return [(i, (i + 1) % n) for i in range(n)]


def _make_tree(n: int) -> list[tuple[int, int]]:
    """Return edges for a star with n leaves."""
    return [(0, i) for i in range(1, n + 1)]


def _graph_with_chords(n: int, chords: list[tuple[int, int]]) -> tuple[Graph[int], Graph[int]]:
    """Return (C_n plus chords, C_n)."""
    cycle = Graph.from_edges(_make_cycle(n))
    graph = Graph.from_edges(_make_cycle(n) + chords)
    return graph, cycle


# =========================================================================
# Planar graphs
# =========================================================================


class TestPlanarGraphs:
    """Known planar graphs are accepted."""

    def test_triangle(self) -> None:
        result = check_planarity(_make_cycle(3))
        assert result.is_planar
        assert result.reason is None
        assert result.pieces == 0
        assert result.depth == 0

    def test_cycle_100(self) -> None:
        assert is_planar(_make_cycle(100))

    def test_long_cycle(self) -> None:
        assert is_planar(_make_cycle(5000))

    def test_k4(self) -> None:
        """K4 is planar."""
        assert is_planar(_make_complete_graph(4))

    def test_diamond(self) -> None:
        """Square with one diagonal."""
        assert is_planar(_make_cycle(4) + [(0, 2)])

    def test_k23(self) -> None:
        """K2,3: two vertices joined by three paths."""
        assert is_planar(_make_complete_bipartite(2, 3))

    def test_accepts_graph_instance(self) -> None:
        graph = Graph.from_edges(_make_complete_graph(4))
        result = check_planarity(graph)
        assert isinstance(result, PlanarityResult)
        assert result

    def test_string_vertices(self) -> None:
        edges = [("a", "b"), ("b", "c"), ("c", "a"), ("a", "d"), ("d", "c")]
        assert is_planar(edges)


# =========================================================================
# Non-planar graphs
# =========================================================================


class TestNonPlanarGraphs:
    """Known non-planar graphs are rejected."""

    def test_k5_caught_by_edge_bound(self) -> None:
        """K5 has 10 > 3 * 5 - 6 edges; no decomposition is needed."""
        result = check_planarity(_make_complete_graph(5))
        assert not result.is_planar
        assert result.reason == NonPlanarReason.edge_bound
        assert result.pieces == 0

    def test_k6(self) -> None:
        result = check_planarity(_make_complete_graph(6))
        assert not result.is_planar
        assert result.reason == NonPlanarReason.edge_bound

    def test_k33(self) -> None:
        """K3,3 passes the edge bound and fails on interlacement."""
        result = check_planarity(_make_complete_bipartite(3, 3))
        assert not result.is_planar
        assert result.reason == NonPlanarReason.interlacement

    def test_k33_without_edge_bound(self) -> None:
        assert not is_planar(_make_complete_bipartite(3, 3), euler_bound=False)

    def test_k33_full_bipartite_check(self) -> None:
        assert not is_planar(_make_complete_bipartite(3, 3), full_bipartite_check=True)

    def test_result_is_falsy(self) -> None:
        assert not check_planarity(_make_complete_graph(5))


# =========================================================================
# Explicit cycles
# =========================================================================


class TestWithGivenCycle:
    """The tester driven with a caller-supplied cycle."""

    def test_cycle_alone(self) -> None:
        graph, cycle = _graph_with_chords(6, [])
        assert test_planarity(graph, cycle)

    def test_fan_of_chords(self) -> None:
        """Chords sharing an endpoint never interlace."""
        graph, cycle = _graph_with_chords(6, [(0, 2), (0, 3), (0, 4)])
        result = PlanarityTester().test(graph, cycle)
        assert result.is_planar
        assert result.pieces == 3
        assert result.depth == 0

    def test_two_crossing_chords(self) -> None:
        """One chord inside, one outside."""
        graph, cycle = _graph_with_chords(6, [(0, 3), (1, 4)])
        assert test_planarity(graph, cycle)

    def test_three_crossing_chords(self) -> None:
        """Three diameters of a hexagon form a K3,3."""
        graph, cycle = _graph_with_chords(6, [(0, 3), (1, 4), (2, 5)])
        result = PlanarityTester().test(graph, cycle)
        assert not result.is_planar
        assert result.reason == NonPlanarReason.interlacement

    def test_k4_recurses_into_star(self) -> None:
        """With a triangle as cycle, the fourth vertex is a non-path piece."""
        graph = Graph.from_edges(_make_complete_graph(4))
        cycle = Graph.from_edges(_make_cycle(3))
        result = PlanarityTester().test(graph, cycle)
        assert result.is_planar
        assert result.depth == 1
        assert result.pieces == 3

    def test_interlacement_components(self) -> None:
        """Only the first conflict component is coloured unless asked otherwise."""
        chords = [(0, 2), (1, 3), (6, 9), (7, 10), (8, 11)]
        graph, cycle = _graph_with_chords(12, chords)

        assert PlanarityTester().test(graph, cycle).is_planar

        result = PlanarityTester(full_bipartite_check=True).test(graph, cycle)
        assert not result.is_planar
        assert result.reason == NonPlanarReason.interlacement

    def test_inputs_are_not_modified(self) -> None:
        graph = Graph.from_edges(_make_complete_graph(4))
        cycle = Graph.from_edges(_make_cycle(3))
        graph_edges, cycle_edges = graph.edge_set(), cycle.edge_set()
        test_planarity(graph, cycle)
        assert graph.edge_set() == graph_edges
        assert cycle.edge_set() == cycle_edges


# =========================================================================
# Inputs outside the algorithm's assumptions
# =========================================================================


class TestInvalidInputs:
    """Explicit errors and warnings instead of undefined behaviour."""

    def test_tree_has_no_cycle(self) -> None:
        with pytest.raises(NoCycleError, match="No cycle found"):
            check_planarity(_make_tree(4))

    def test_empty_graph(self) -> None:
        with pytest.raises(NoCycleError):
            is_planar([])

    def test_cut_vertex_piece(self) -> None:
        """Two triangles sharing vertex 0."""
        edges = _make_cycle(3) + [(0, 3), (3, 4), (4, 0)]
        with pytest.raises(NotBiconnectedError, match="only at vertex 0"):
            check_planarity(edges)

    def test_pendant_edge_is_a_path_piece(self) -> None:
        assert is_planar(_make_cycle(3) + [(0, 3)])

    def test_disconnected_graph_warns(self) -> None:
        edges = _make_cycle(3) + [(5, 6), (6, 7), (7, 5)]
        with pytest.warns(GraphStructureWarning, match="2 connected components"):
            result = check_planarity(edges)
        assert result.is_planar


# =========================================================================
# Configuration
# =========================================================================


class TestConfiguration:
    """Tester options."""

    def test_defaults(self) -> None:
        tester = PlanarityTester()
        assert tester.euler_bound is True
        assert tester.full_bipartite_check is False

    def test_options_are_validated(self) -> None:
        with pytest.raises(ValidationError, match="euler_bound must be a bool"):
            PlanarityTester(euler_bound="yes")  # type: ignore[arg-type]

    def test_option_setter_is_validated(self) -> None:
        tester = PlanarityTester()
        with pytest.raises(ValidationError, match="full_bipartite_check"):
            tester.full_bipartite_check = 1  # type: ignore[assignment]

    def test_k5_without_edge_bound_is_decomposed(self) -> None:
        result = check_planarity(_make_complete_graph(5), euler_bound=False)
        assert result.reason != NonPlanarReason.edge_bound
        assert result.pieces > 0
