"""
Errors, warnings and input checks for planarity testing.

Provides the exception hierarchy raised by graph construction, edge-list
parsing and the planarity tester, plus the warning category issued when an
input falls outside the algorithm's assumptions.
"""

from __future__ import annotations

from typing import Any


class ValidationError(ValueError):
    """Base exception for graph validation errors."""

    pass


class InvalidEdgeError(ValidationError):
    """Raised when an edge would break the simple-graph invariant."""

    pass


class EdgeListFormatError(ValidationError):
    """Raised when an edge list is not a sequence of integer pairs."""

    pass


class NoCycleError(ValidationError):
    """Raised when an operation needs a cycle and the graph has none."""

    pass


class NotBiconnectedError(ValidationError):
    """Raised when a piece hangs off the cycle at a single vertex."""

    pass


class GraphStructureWarning(UserWarning):
    """Warning issued when graph structure doesn't match algorithm assumptions."""

    pass


def validate_edge(u: Any, v: Any) -> tuple[Any, Any]:
    """
    Validate an undirected edge.

    Args:
        u: First endpoint
        v: Second endpoint

    Returns:
        The validated (u, v) tuple

    Raises:
        InvalidEdgeError: If the edge is a self-loop
    """
    if u == v:
        raise InvalidEdgeError(f"Self-loop on vertex {u!r} is not allowed")
    return u, v


def validate_flag(name: str, value: Any) -> bool:
    """
    Validate a boolean configuration flag.

    Raises:
        ValidationError: If value is not a bool
    """
    if not isinstance(value, bool):
        raise ValidationError(f"{name} must be a bool, got {type(value).__name__}")
    return value


__all__ = [
    "ValidationError",
    "InvalidEdgeError",
    "EdgeListFormatError",
    "NoCycleError",
    "NotBiconnectedError",
    "GraphStructureWarning",
    "validate_edge",
    "validate_flag",
]
