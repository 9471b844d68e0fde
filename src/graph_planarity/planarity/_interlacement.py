"""
Interlacement of pieces along a cycle.

Two pieces interlace when their attachment vertices alternate around the
cycle, which forbids drawing both on the same side of it. The test walks the
cycle once per pair of pieces and encodes each visited vertex as a symbol:

- ``b``: the vertex belongs to both pieces
- ``x``: the vertex belongs to the first piece only
- ``y``: the vertex belongs to the second piece only

Runs of the same single-piece symbol collapse to one symbol, and a run split
across the start of the walk is merged. What remains decides the conflict.
"""

from __future__ import annotations

from typing import Sequence

from ..graph import Graph, V

# Length-4 symbol sequences whose pieces can share a side of the cycle
NOT_INTERLACED = frozenset({"xbyb", "bybx", "ybxb", "bxby"})


def interlacement_symbols(
    cycle_order: Sequence[V],
    x: Graph[V],
    y: Graph[V],
) -> tuple[str, int]:
    """
    Encode how two pieces meet the cycle.

    Args:
        cycle_order: Cycle vertices in walk order, each exactly once
        x: First piece
        y: Second piece

    Returns:
        (symbols, b_count): the collapsed symbol sequence and the number of
        vertices shared by both pieces.
    """
    symbols: list[str] = []
    last = ""
    b_count = 0

    for v in cycle_order:
        in_x = x.has_vertex(v)
        in_y = y.has_vertex(v)
        if in_x and in_y:
            b_count += 1
            symbols.append("b")
            last = "b"
        elif in_x and last != "x":
            symbols.append("x")
            last = "x"
        elif in_y and last != "y":
            symbols.append("y")
            last = "y"

    # The walk may have started in the middle of a run
    if last in ("x", "y") and symbols[0] == last:
        symbols = symbols[1:]

    return "".join(symbols), b_count


def is_interlaced(symbols: str, b_count: int) -> bool:
    """Decide whether a symbol sequence describes conflicting pieces."""
    if len(symbols) > 4 or b_count > 2:
        return True
    return len(symbols) == 4 and symbols not in NOT_INTERLACED


def pieces_interlace(cycle_order: Sequence[V], x: Graph[V], y: Graph[V]) -> bool:
    """Check whether pieces ``x`` and ``y`` conflict along the cycle."""
    symbols, b_count = interlacement_symbols(cycle_order, x, y)
    return is_interlaced(symbols, b_count)


def build_interlacement_graph(
    cycle_order: Sequence[V],
    pieces: Sequence[Graph[V]],
) -> Graph[int]:
    """
    Build the conflict graph of a set of pieces.

    Vertices are piece indices; an edge joins two interlaced pieces. Pieces
    that conflict with nothing do not appear.
    """
    interlacement: Graph[int] = Graph()
    for i in range(len(pieces)):
        for j in range(i + 1, len(pieces)):
            if pieces_interlace(cycle_order, pieces[i], pieces[j]):
                interlacement.add_edge(i, j)
    return interlacement
