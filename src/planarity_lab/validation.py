"""
Input validation utilities for graphs, generators and sessions.

Provides centralized validation functions for canvas size, generator
parameters and edge lists. Raises descriptive exceptions on invalid input.
"""

from __future__ import annotations

import math
from typing import Any, Sequence


class ValidationError(ValueError):
    """Base exception for configuration validation errors."""

    pass


class InvalidCanvasSizeError(ValidationError):
    """Raised when canvas dimensions are invalid."""

    pass


class InvalidVertexCountError(ValidationError):
    """Raised when a vertex count is out of range."""

    pass


class InvalidDensityError(ValidationError):
    """Raised when an edge density is outside [0, 1]."""

    pass


class InvalidEdgeError(ValidationError):
    """Raised when an edge is a self-loop, a duplicate or references unknown vertices."""

    pass


def validate_canvas_size(size: Sequence[float]) -> tuple[float, float]:
    """
    Validate canvas size dimensions.

    Args:
        size: [width, height] sequence

    Returns:
        Validated (width, height) tuple

    Raises:
        InvalidCanvasSizeError: If dimensions are invalid
    """
    if len(size) < 2:
        raise InvalidCanvasSizeError(
            f"Canvas size must have 2 elements [width, height], got {len(size)}"
        )

    width, height = float(size[0]), float(size[1])

    if not width > 0:
        raise InvalidCanvasSizeError(f"Canvas width must be positive, got {width}")
    if not height > 0:
        raise InvalidCanvasSizeError(f"Canvas height must be positive, got {height}")

    return width, height


def validate_vertex_count(count: Any, minimum: int = 1) -> int:
    """
    Validate a vertex count.

    Args:
        count: Requested number of vertices
        minimum: Smallest accepted value (default 1)

    Returns:
        Validated count as int

    Raises:
        InvalidVertexCountError: If count is not an integer >= minimum
    """
    if isinstance(count, bool) or not isinstance(count, int):
        if isinstance(count, float) and count.is_integer():
            count = int(count)
        else:
            raise InvalidVertexCountError(f"vertex_count must be an integer, got {count!r}")
    if count < minimum:
        raise InvalidVertexCountError(f"vertex_count must be >= {minimum}, got {count}")
    return count


def validate_density(density: float) -> float:
    """
    Validate edge density is in valid range.

    Args:
        density: Fraction of the maximum edge count to aim for

    Returns:
        Validated density as float

    Raises:
        InvalidDensityError: If density not in [0, 1]
    """
    value = float(density)
    if math.isnan(value) or value < 0 or value > 1:
        raise InvalidDensityError(f"edge_density must be in [0, 1], got {density}")
    return value


def validate_edge(v1: int, v2: int, vertex_count: int) -> tuple[int, int]:
    """
    Validate that an edge joins two distinct, existing vertices.

    Args:
        v1: First endpoint id
        v2: Second endpoint id
        vertex_count: Number of vertices in the graph

    Returns:
        The (v1, v2) pair

    Raises:
        InvalidEdgeError: If either endpoint is out of bounds or both are equal
    """
    for endpoint in (v1, v2):
        if not 0 <= endpoint < vertex_count:
            raise InvalidEdgeError(
                f"Edge endpoint {endpoint} out of bounds [0, {vertex_count})"
            )
    if v1 == v2:
        raise InvalidEdgeError(f"Self-loop on vertex {v1} is not allowed")
    return v1, v2


def validate_edge_list(
    edges: Sequence[Sequence[int]],
    vertex_count: int,
    strict: bool = True,
) -> list[tuple[int, str]]:
    """
    Validate a whole edge list: bounds, self-loops and duplicates.

    Args:
        edges: Sequence of (v1, v2) pairs
        vertex_count: Number of vertices in the graph
        strict: If True, raises on invalid. If False, returns list of issues.

    Returns:
        List of (edge_index, issue_description) tuples

    Raises:
        InvalidEdgeError: If strict=True and invalid edges found
    """
    issues: list[tuple[int, str]] = []
    seen: set[tuple[int, int]] = set()

    for i, (v1, v2) in enumerate(edges):
        if not (0 <= v1 < vertex_count and 0 <= v2 < vertex_count):
            issues.append((i, f"Edge {i}: ({v1}, {v2}) out of bounds [0, {vertex_count})"))
            continue
        if v1 == v2:
            issues.append((i, f"Edge {i}: self-loop on vertex {v1}"))
            continue
        key = (v1, v2) if v1 < v2 else (v2, v1)
        if key in seen:
            issues.append((i, f"Edge {i}: duplicate of ({key[0]}, {key[1]})"))
            continue
        seen.add(key)

    if strict and issues:
        msg = "Invalid edges:\n" + "\n".join(issue[1] for issue in issues)
        raise InvalidEdgeError(msg)

    return issues


def validate_non_negative(name: str, value: float) -> float:
    """
    Validate a non-negative numeric setting (radius, delay, margin).

    Raises:
        ValidationError: If value < 0
    """
    result = float(value)
    if math.isnan(result) or result < 0:
        raise ValidationError(f"{name} must be >= 0, got {value}")
    return result


__all__ = [
    "ValidationError",
    "InvalidCanvasSizeError",
    "InvalidVertexCountError",
    "InvalidDensityError",
    "InvalidEdgeError",
    "validate_canvas_size",
    "validate_vertex_count",
    "validate_density",
    "validate_edge",
    "validate_edge_list",
    "validate_non_negative",
]
