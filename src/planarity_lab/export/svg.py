"""
SVG export for graph layouts.

Renders a static snapshot of a graph's current embedding: edges involved
in a crossing are highlighted, a marker is drawn at each crossing point,
and vertices carry their labels.
"""

from __future__ import annotations

from typing import Optional, Sequence
from xml.sax.saxutils import escape

from ..crossings import crossing_edge_indices, crossing_points, detect_crossings
from ..graph import Graph
from ..types import Crossing, Edge, Point, Vertex


def to_svg(
    graph: Graph,
    crossings: Optional[Sequence[Crossing]] = None,
    *,
    size: Optional[tuple[float, float]] = None,
    vertex_radius: float = 25.0,
    vertex_color: str = "#3b82f6",
    vertex_stroke: str = "#1e40af",
    edge_color: str = "#6b7280",
    crossing_edge_color: str = "#ef4444",
    marker_color: str = "#ff0000",
    marker_radius: float = 6.0,
    show_labels: bool = True,
    label_color: str = "#ffffff",
    font_size: float = 14.0,
    font_family: str = "sans-serif",
    background: Optional[str] = "#ffffff",
) -> str:
    """
    Export a graph's current layout to SVG.

    Args:
        graph: Graph with positioned vertices
        crossings: Precomputed crossings; detected from the graph if None
        size: Canvas (width, height). If None, fit the drawing with a
            one-radius border.
        vertex_radius: Radius of vertex circles (default 25)
        vertex_color: Fill color for vertices
        vertex_stroke: Stroke color for vertices
        edge_color: Color for edges without crossings
        crossing_edge_color: Color for edges involved in a crossing
        marker_color: Fill color of crossing markers
        marker_radius: Radius of crossing markers (default 6)
        show_labels: Whether to draw vertex labels (default True)
        label_color: Color for labels
        font_size: Font size for labels
        font_family: Font family for labels
        background: Background color (None for transparent)

    Returns:
        SVG string representation of the layout
    """
    if crossings is None:
        crossings = detect_crossings(graph)

    if size is not None:
        width, height = size
        offset_x = offset_y = 0.0
    elif graph.vertex_count:
        coords = graph.position_array()
        min_x, min_y = coords.min(axis=0) - 2 * vertex_radius
        max_x, max_y = coords.max(axis=0) + 2 * vertex_radius
        width, height = float(max_x - min_x), float(max_y - min_y)
        offset_x, offset_y = float(-min_x), float(-min_y)
    else:
        width = height = 4 * vertex_radius
        offset_x = offset_y = 0.0

    svg_parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{width:.1f}" height="{height:.1f}" '
        f'viewBox="0 0 {width:.1f} {height:.1f}">'
    ]

    if background:
        svg_parts.append(f'  <rect width="100%" height="100%" fill="{escape(background)}"/>')

    highlighted = crossing_edge_indices(crossings)
    svg_parts.append('  <g class="edges">')
    for index, edge in enumerate(graph.edges):
        crossing = index in highlighted
        svg_parts.append(
            _render_edge(
                edge,
                graph.vertices,
                offset_x,
                offset_y,
                crossing_edge_color if crossing else edge_color,
                3.0 if crossing else 2.0,
            )
        )
    svg_parts.append("  </g>")

    svg_parts.append('  <g class="vertices">')
    for vertex in graph.vertices:
        svg_parts.append(
            _render_vertex(vertex, offset_x, offset_y, vertex_radius, vertex_color, vertex_stroke)
        )
    svg_parts.append("  </g>")

    if show_labels:
        svg_parts.append('  <g class="labels">')
        for vertex in graph.vertices:
            svg_parts.append(
                _render_label(vertex, offset_x, offset_y, label_color, font_size, font_family)
            )
        svg_parts.append("  </g>")

    markers = crossing_points(graph, crossings)
    if markers:
        svg_parts.append('  <g class="crossings">')
        for point in markers:
            svg_parts.append(_render_marker(point, offset_x, offset_y, marker_radius, marker_color))
        svg_parts.append("  </g>")

    svg_parts.append("</svg>")

    return "\n".join(svg_parts)


def _render_edge(
    edge: Edge,
    vertices: Sequence[Vertex],
    offset_x: float,
    offset_y: float,
    color: str,
    width: float,
) -> str:
    """Render a single edge as an SVG line."""
    a = vertices[edge.v1]
    b = vertices[edge.v2]
    return (
        f'    <line x1="{a.x + offset_x:.1f}" y1="{a.y + offset_y:.1f}" '
        f'x2="{b.x + offset_x:.1f}" y2="{b.y + offset_y:.1f}" '
        f'stroke="{escape(color)}" stroke-width="{width}" stroke-linecap="round"/>'
    )


def _render_vertex(
    vertex: Vertex,
    offset_x: float,
    offset_y: float,
    radius: float,
    color: str,
    stroke: str,
) -> str:
    """Render a single vertex as an SVG circle."""
    return (
        f'    <circle cx="{vertex.x + offset_x:.1f}" cy="{vertex.y + offset_y:.1f}" '
        f'r="{radius}" fill="{escape(color)}" stroke="{escape(stroke)}" stroke-width="2"/>'
    )


def _render_label(
    vertex: Vertex,
    offset_x: float,
    offset_y: float,
    color: str,
    font_size: float,
    font_family: str,
) -> str:
    """Render a vertex label as SVG text."""
    return (
        f'    <text x="{vertex.x + offset_x:.1f}" y="{vertex.y + offset_y:.1f}" '
        f'text-anchor="middle" dominant-baseline="central" '
        f'fill="{escape(color)}" font-size="{font_size}" font-weight="bold" '
        f'font-family="{escape(font_family)}">{escape(vertex.label)}</text>'
    )


def _render_marker(point: Point, offset_x: float, offset_y: float, radius: float, color: str) -> str:
    """Render a crossing marker."""
    return (
        f'    <circle class="crossing" cx="{point.x + offset_x:.1f}" '
        f'cy="{point.y + offset_y:.1f}" r="{radius}" fill="{escape(color)}"/>'
    )


__all__ = ["to_svg"]
