"""
Complete graph generator.

Places K_n on a circle and connects every pair. K4 is drawn as a square
(first vertex at -45 degrees) and K5 as a pentagon with its first vertex
at the top.
"""

from __future__ import annotations

import math
from typing import Optional

from ..graph import Graph
from ..types import GraphFamily, SizeType
from ..validation import InvalidVertexCountError
from .base import DEFAULT_CANVAS_SIZE, BaseGenerator

_START_ANGLES = {4: -math.pi / 4, 5: -math.pi / 2}
_FAMILIES = {4: GraphFamily.COMPLETE_K4, 5: GraphFamily.COMPLETE_K5}


class CompleteGraphGenerator(BaseGenerator):
    """
    Complete graph K_n on a circle.

    Only n = 4 (planar, with a guided Solution) and n = 5 (non-planar)
    are part of the catalog.

    Example:
        graph = CompleteGraphGenerator(4, size=(800, 600)).generate()
        assert graph.edge_count == 6
    """

    def __init__(
        self,
        n: int = 4,
        *,
        size: SizeType = DEFAULT_CANVAS_SIZE,
        radius: Optional[float] = None,
    ) -> None:
        """
        Initialize complete graph generator.

        Args:
            n: Number of vertices, 4 or 5
            size: Canvas size as (width, height)
            radius: Circle radius. If None, 0.6 * min(cx, cy).

        Raises:
            InvalidVertexCountError: If n is not 4 or 5
        """
        super().__init__(size=size)
        if n not in _FAMILIES:
            raise InvalidVertexCountError(f"Complete graphs are available for n=4 or n=5, got {n}")
        self._n: int = n
        self._radius: Optional[float] = radius
        self.family = _FAMILIES[n]

    @property
    def n(self) -> int:
        return self._n

    @property
    def radius(self) -> float:
        """Circle radius (auto-computed from the canvas when not set)."""
        if self._radius is not None:
            return self._radius
        return min(self.center) * 0.6

    def _place_vertices(self, graph: Graph) -> None:
        cx, cy = self.center
        radius = self.radius
        start = _START_ANGLES[self._n]
        for i in range(self._n):
            angle = 2 * math.pi * i / self._n + start
            graph.add_vertex(cx + radius * math.cos(angle), cy + radius * math.sin(angle))

    def _add_edges(self, graph: Graph) -> None:
        for i in range(self._n):
            for j in range(i + 1, self._n):
                graph.add_edge(i, j)


def complete_graph(n: int = 4, size: SizeType = DEFAULT_CANVAS_SIZE) -> Graph:
    """Generate K4 or K5 for the given canvas."""
    return CompleteGraphGenerator(n, size=size).generate()


__all__ = ["CompleteGraphGenerator", "complete_graph"]
