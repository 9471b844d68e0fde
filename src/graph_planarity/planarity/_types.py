"""Result types for cycle-based planarity testing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class NonPlanarReason(IntEnum):
    """
    Why a graph was rejected.

    - edge_bound: more than 3n - 6 edges at some recursion level
    - interlacement: the interlacement graph of some level is not bipartite
    """

    edge_bound = 1
    interlacement = 2


@dataclass
class PlanarityResult:
    """Result of a planarity test.

    Attributes:
        is_planar: Whether the graph is planar.
        reason: Which check rejected the graph. None if planar.
        depth: Deepest recursion level reached (0 for the top-level call).
        pieces: Total number of pieces split off over all levels.
    """

    is_planar: bool
    reason: Optional[NonPlanarReason] = None
    depth: int = 0
    pieces: int = 0

    def __bool__(self) -> bool:
        return self.is_planar
