"""
Cube graph generator.

The 1-skeleton of a cube: a back 4-cycle, a front 4-cycle and the
matching between them. Vertices start at an oblique projection of the
3D cube, which produces crossings on purpose.
"""

from __future__ import annotations

import numpy as np

from ..graph import Graph
from ..types import GraphFamily, SizeType
from .base import DEFAULT_CANVAS_SIZE, BaseGenerator

CUBE_CORNERS = np.array(
    [
        [-1, -1, -1],
        [1, -1, -1],
        [1, 1, -1],
        [-1, 1, -1],  # back face
        [-1, -1, 1],
        [1, -1, 1],
        [1, 1, 1],
        [-1, 1, 1],  # front face
    ],
    dtype=float,
)

CUBE_EDGES = (
    (0, 1), (1, 2), (2, 3), (3, 0),  # back face
    (4, 5), (5, 6), (6, 7), (7, 4),  # front face
    (0, 4), (1, 5), (2, 6), (3, 7),  # connecting edges
)  # fmt: skip


def oblique_projection(depth_shear: float = 0.3) -> np.ndarray:
    """
    2x3 projection matrix: x' = x + s*z, y' = y - s*z.

    Args:
        depth_shear: How far the z axis is drawn along the diagonal
    """
    return np.array(
        [
            [1.0, 0.0, depth_shear],
            [0.0, 1.0, -depth_shear],
        ]
    )


class CubeGraphGenerator(BaseGenerator):
    """
    Cube graph (8 vertices, 12 edges) in oblique projection.

    Example:
        graph = CubeGraphGenerator(size=(800, 600)).generate()
        assert graph.has_solution
    """

    family = GraphFamily.CUBE

    def __init__(self, *, size: SizeType = DEFAULT_CANVAS_SIZE, depth_shear: float = 0.3) -> None:
        """
        Initialize cube generator.

        Args:
            size: Canvas size as (width, height)
            depth_shear: Oblique projection shear (default 0.3)
        """
        super().__init__(size=size)
        self._depth_shear: float = float(depth_shear)

    @property
    def scale(self) -> float:
        """Half the projected side length of the cube."""
        return min(self.size) * 0.25

    def _place_vertices(self, graph: Graph) -> None:
        projected = CUBE_CORNERS @ oblique_projection(self._depth_shear).T
        projected = projected * self.scale + np.asarray(self.center)
        for x, y in projected:
            graph.add_vertex(float(x), float(y))

    def _add_edges(self, graph: Graph) -> None:
        for v1, v2 in CUBE_EDGES:
            graph.add_edge(v1, v2)


def cube_graph(size: SizeType = DEFAULT_CANVAS_SIZE) -> Graph:
    """Generate the cube graph for the given canvas."""
    return CubeGraphGenerator(size=size).generate()


__all__ = ["CubeGraphGenerator", "cube_graph", "oblique_projection", "CUBE_CORNERS", "CUBE_EDGES"]
