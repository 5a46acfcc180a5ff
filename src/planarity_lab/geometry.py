"""
Geometric primitives for crossing detection.

Segments are tested with the parametric line-line solve:

    P = p1 + t (p2 - p1) = p3 + u (p4 - p3)

A pair of segments crosses only when both parameters lie strictly inside
(0, 1). Touching at an endpoint is not a crossing, and (near-)parallel
segments are reported as not intersecting even when collinear pieces
overlap.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence

from .types import Edge, Point, PointLike

PARALLEL_EPSILON = 1e-10
"""Denominator magnitude below which two segments are treated as parallel."""


def _solve(
    p1: PointLike, p2: PointLike, p3: PointLike, p4: PointLike
) -> Optional[tuple[float, float]]:
    """Return the (t, u) segment parameters, or None for parallel segments."""
    x1, y1 = p1[0], p1[1]
    x2, y2 = p2[0], p2[1]
    x3, y3 = p3[0], p3[1]
    x4, y4 = p4[0], p4[1]

    denom = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
    if abs(denom) < PARALLEL_EPSILON:
        return None

    t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / denom
    u = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)) / denom
    return t, u


def segments_intersect(p1: PointLike, p2: PointLike, p3: PointLike, p4: PointLike) -> bool:
    """
    Check if segments (p1, p2) and (p3, p4) cross in their open interiors.

    Args:
        p1: First endpoint of segment one
        p2: Second endpoint of segment one
        p3: First endpoint of segment two
        p4: Second endpoint of segment two

    Returns:
        True iff both segment parameters are strictly between 0 and 1.
        Parallel and collinear segments return False.
    """
    params = _solve(p1, p2, p3, p4)
    if params is None:
        return False
    t, u = params
    return 0 < t < 1 and 0 < u < 1


def intersection_point(
    p1: PointLike, p2: PointLike, p3: PointLike, p4: PointLike
) -> Optional[Point]:
    """
    Compute where the lines through (p1, p2) and (p3, p4) meet.

    Intended for placing crossing markers; callers should only ask for
    pairs already known to cross.

    Returns:
        The intersection Point, or None if the lines are parallel.
    """
    params = _solve(p1, p2, p3, p4)
    if params is None:
        return None
    t = params[0]
    return Point(p1[0] + t * (p2[0] - p1[0]), p1[1] + t * (p2[1] - p1[1]))


def edge_intersection_point(
    edge1: Edge, edge2: Edge, positions: Sequence[PointLike]
) -> Optional[Point]:
    """Intersection point of two edges given the per-vertex position list."""
    return intersection_point(
        positions[edge1.v1], positions[edge1.v2], positions[edge2.v1], positions[edge2.v2]
    )


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(high, value))


def clamp_to_canvas(
    x: float, y: float, size: tuple[float, float], margin: float = 0.0
) -> Point:
    """
    Clamp a position so it stays ``margin`` away from the canvas borders.

    If the margin is too large for the canvas, the position is pinned to
    the canvas centre on that axis.
    """
    width, height = size
    if width - margin >= margin:
        x = clamp(x, margin, width - margin)
    else:
        x = width / 2
    if height - margin >= margin:
        y = clamp(y, margin, height - margin)
    else:
        y = height / 2
    return Point(x, y)


def distance(p: PointLike, q: PointLike) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p[0] - q[0], p[1] - q[1])


__all__ = [
    "PARALLEL_EPSILON",
    "segments_intersect",
    "intersection_point",
    "edge_intersection_point",
    "clamp",
    "clamp_to_canvas",
    "distance",
]
