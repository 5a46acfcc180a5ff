"""
Edge crossing detection.

Recomputes the full set of crossing edge pairs from the current vertex
positions. Nothing is cached: positions change externally at arbitrary
granularity (every drag step), so each call starts from scratch.
"""

from __future__ import annotations

from typing import Iterable, Optional

from .geometry import edge_intersection_point, segments_intersect
from .graph import Graph
from .types import Crossing, Edge, Point, Vertex


def detect_crossings(graph: Graph) -> list[Crossing]:
    """
    Find every pair of edges that cross in the current embedding.

    Two edges cross if their segments intersect in their open interiors.
    Edges sharing an endpoint are never reported, even when they overlap
    geometrically.

    Args:
        graph: Graph with positioned vertices

    Returns:
        Crossings ordered by (edge_a, edge_b), with edge_a < edge_b

    Time Complexity: O(m^2) where m = number of edges
    """
    edges = graph.edges
    vertices = graph.vertices
    crossings: list[Crossing] = []
    n_edges = len(edges)

    for i in range(n_edges):
        for j in range(i + 1, n_edges):
            if _edges_cross(vertices, edges[i], edges[j]):
                crossings.append(Crossing(i, j))

    return crossings


def _edges_cross(vertices: list[Vertex], e1: Edge, e2: Edge) -> bool:
    """Check if two edges cross (not at shared endpoints)."""
    # Skip if edges share an endpoint
    if e1.shares_endpoint(e2):
        return False

    a, b = vertices[e1.v1], vertices[e1.v2]
    c, d = vertices[e2.v1], vertices[e2.v2]
    return segments_intersect((a.x, a.y), (b.x, b.y), (c.x, c.y), (d.x, d.y))


def count_crossings(graph: Graph) -> int:
    """Number of crossing edge pairs in the current embedding."""
    return len(detect_crossings(graph))


def is_crossing_free(graph: Graph) -> bool:
    """Check if the current embedding has no crossings."""
    return not detect_crossings(graph)


def crossing_point(graph: Graph, crossing: Crossing) -> Optional[Point]:
    """
    Where the two edges of a crossing meet, for marker placement.

    Returns None if the crossing references unknown edges or the edges
    are parallel.
    """
    edges = graph.edges
    if not (0 <= crossing.edge_a < len(edges) and 0 <= crossing.edge_b < len(edges)):
        return None
    return edge_intersection_point(
        edges[crossing.edge_a], edges[crossing.edge_b], graph.positions()
    )


def crossing_points(graph: Graph, crossings: Iterable[Crossing]) -> list[Point]:
    """Marker positions for a batch of crossings (parallel pairs skipped)."""
    points = []
    for crossing in crossings:
        point = crossing_point(graph, crossing)
        if point is not None:
            points.append(point)
    return points


def crossing_edge_indices(crossings: Iterable[Crossing]) -> set[int]:
    """Indices of every edge involved in at least one crossing."""
    involved: set[int] = set()
    for crossing in crossings:
        involved.add(crossing.edge_a)
        involved.add(crossing.edge_b)
    return involved


__all__ = [
    "detect_crossings",
    "count_crossings",
    "is_crossing_free",
    "crossing_point",
    "crossing_points",
    "crossing_edge_indices",
]
