"""
Edge-list input and output.

The edge-list format is a sequence of whitespace-separated integers read in
pairs; each pair ``a b`` is one undirected edge. Line breaks carry no meaning.
"""

from __future__ import annotations

import warnings
from pathlib import Path
from typing import Union

import numpy as np

from .graph import Graph
from .validation import EdgeListFormatError, GraphStructureWarning

PathLike = Union[str, Path]


def parse_edge_list(text: str) -> Graph[int]:
    """
    Parse an edge list into a graph.

    Self-loops are skipped with a ``GraphStructureWarning``; they do not
    affect planarity.

    Args:
        text: Whitespace-separated integers, consumed pairwise

    Returns:
        Graph with one edge per pair

    Raises:
        EdgeListFormatError: If a token is not an integer or the count is odd
    """
    tokens = text.split()
    try:
        values = np.asarray(tokens, dtype=np.str_).astype(np.int64)
    except (ValueError, OverflowError) as exc:
        raise EdgeListFormatError(f"Edge list must contain only integers: {exc}") from exc

    if values.size % 2:
        raise EdgeListFormatError(
            f"Edge list has an odd number of integers ({values.size}); "
            "the last edge is incomplete"
        )

    graph: Graph[int] = Graph()
    loops = 0
    for a, b in values.reshape(-1, 2).tolist():
        if a == b:
            loops += 1
            continue
        graph.add_edge(a, b)

    if loops:
        warnings.warn(
            f"Skipped {loops} self-loop(s) in edge list.",
            GraphStructureWarning,
            stacklevel=2,
        )
    return graph


def read_edge_list(path: PathLike) -> Graph[int]:
    """
    Read an edge-list file.

    Raises:
        OSError: If the file cannot be read
        EdgeListFormatError: If the contents are malformed
    """
    return parse_edge_list(Path(path).read_text())


def format_edge_list(graph: Graph[int]) -> str:
    """Serialize a graph as one ``a b`` edge per line."""
    return "".join(f"{u} {v}\n" for u, v in graph.edges())


def write_edge_list(graph: Graph[int], path: PathLike) -> None:
    """Write a graph to an edge-list file."""
    Path(path).write_text(format_edge_list(graph))


__all__ = [
    "parse_edge_list",
    "read_edge_list",
    "format_edge_list",
    "write_edge_list",
]
