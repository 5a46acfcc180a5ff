"""
Complete bipartite graph K3,3 (the "utility graph").

Two groups of three vertices on parallel vertical lines, every vertex of
the left group joined to every vertex of the right group.
"""

from __future__ import annotations

from ..graph import Graph
from ..types import GraphFamily, SizeType
from .base import DEFAULT_CANVAS_SIZE, BaseGenerator

GROUP_SIZE = 3


class CompleteBipartiteGenerator(BaseGenerator):
    """
    K3,3 on two vertical lines.

    Vertices 0-2 (A-C) form the left group and 3-5 (D-F) the right
    group. The group offset from the centre is ``0.2 * min(width,
    height)``; rows are spaced at 0.8 times that.
    """

    family = GraphFamily.COMPLETE_BIPARTITE_33

    @property
    def spacing(self) -> float:
        return min(self.size) * 0.2

    def _place_vertices(self, graph: Graph) -> None:
        cx, cy = self.center
        spacing = self.spacing
        for column_x in (cx - spacing, cx + spacing):
            for row in range(GROUP_SIZE):
                graph.add_vertex(column_x, cy + (row - 1) * spacing * 0.8)

    def _add_edges(self, graph: Graph) -> None:
        for left in range(GROUP_SIZE):
            for right in range(GROUP_SIZE, 2 * GROUP_SIZE):
                graph.add_edge(left, right)


def complete_bipartite_graph(size: SizeType = DEFAULT_CANVAS_SIZE) -> Graph:
    """Generate K3,3 for the given canvas."""
    return CompleteBipartiteGenerator(size=size).generate()


__all__ = ["CompleteBipartiteGenerator", "complete_bipartite_graph", "GROUP_SIZE"]
