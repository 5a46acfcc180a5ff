"""
Random connected graph generator.

Vertices sit on a jittered circle; edges come from a random spanning tree
(guaranteeing connectivity) topped up with random extra edges until the
requested density is reached or the attempt budget runs out.
"""

from __future__ import annotations

import logging
import math
import random
from typing import Optional

from ..geometry import clamp_to_canvas
from ..graph import Graph
from ..types import GraphFamily, SizeType
from ..validation import validate_density, validate_non_negative, validate_vertex_count
from .base import DEFAULT_CANVAS_SIZE, BaseGenerator

logger = logging.getLogger(__name__)

ATTEMPTS_PER_TARGET_EDGE = 3


def target_edge_count(vertex_count: int, edge_density: float) -> int:
    """
    Number of edges a random graph aims for.

    At least a spanning tree (n - 1 edges), otherwise
    ``floor(n(n-1)/2 * density)``.
    """
    max_edges = vertex_count * (vertex_count - 1) // 2
    return max(vertex_count - 1, math.floor(max_edges * edge_density))


class RandomGraphGenerator(BaseGenerator):
    """
    Random connected graph on a jittered circle.

    Each vertex gets 70-100% of the base radius and an angle jitter of up
    to a quarter of the angular step either way, then is clamped to stay
    ``margin`` away from the canvas borders. No Solution is attached:
    planarity of a random graph is not classified.

    Example:
        generator = RandomGraphGenerator(
            vertex_count=8,
            edge_density=0.4,
            size=(800, 600),
            random_seed=7,
        )
        graph = generator.generate()
        assert graph.is_connected()
    """

    family = GraphFamily.RANDOM

    def __init__(
        self,
        vertex_count: int = 6,
        edge_density: float = 0.5,
        *,
        size: SizeType = DEFAULT_CANVAS_SIZE,
        margin: float = 35.0,
        random_seed: Optional[int] = None,
    ) -> None:
        """
        Initialize random graph generator.

        Args:
            vertex_count: Number of vertices (>= 1)
            edge_density: Fraction of all possible edges to aim for, in [0, 1]
            size: Canvas size as (width, height)
            margin: Padding from canvas edges for initial placement
                (default 35, a vertex radius of 25 plus 10)
            random_seed: Random seed for reproducible graphs

        Raises:
            InvalidVertexCountError: If vertex_count < 1
            InvalidDensityError: If edge_density is outside [0, 1]
        """
        super().__init__(size=size)
        self._vertex_count: int = validate_vertex_count(vertex_count)
        self._edge_density: float = validate_density(edge_density)
        self._margin: float = validate_non_negative("margin", margin)
        self._random_seed: Optional[int] = random_seed
        self._rng = random.Random(random_seed)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def vertex_count(self) -> int:
        return self._vertex_count

    @vertex_count.setter
    def vertex_count(self, value: int) -> None:
        self._vertex_count = validate_vertex_count(value)

    @property
    def edge_density(self) -> float:
        return self._edge_density

    @edge_density.setter
    def edge_density(self, value: float) -> None:
        self._edge_density = validate_density(value)

    @property
    def margin(self) -> float:
        """Get margin (padding from canvas edges)."""
        return self._margin

    @margin.setter
    def margin(self, value: float) -> None:
        self._margin = validate_non_negative("margin", value)

    @property
    def random_seed(self) -> Optional[int]:
        """Get random seed for reproducible graphs."""
        return self._random_seed

    @random_seed.setter
    def random_seed(self, value: Optional[int]) -> None:
        """Set random seed and restart the random stream."""
        self._random_seed = value
        self._rng = random.Random(value)

    @property
    def target_edges(self) -> int:
        return target_edge_count(self._vertex_count, self._edge_density)

    # -------------------------------------------------------------------------
    # Generation
    # -------------------------------------------------------------------------

    def _place_vertices(self, graph: Graph) -> None:
        n = self._vertex_count
        cx, cy = self.center
        radius = min(cx, cy) * 0.7
        angle_step = 2 * math.pi / n
        rng = self._rng

        for i in range(n):
            angle = angle_step * i
            r = radius * (0.7 + rng.random() * 0.3)
            a = angle + (rng.random() - 0.5) * (angle_step * 0.5)
            x, y = clamp_to_canvas(
                cx + r * math.cos(a), cy + r * math.sin(a), self.size, self._margin
            )
            graph.add_vertex(x, y)

    def _add_edges(self, graph: Graph) -> None:
        n = self._vertex_count
        rng = self._rng

        # Random spanning tree: each new vertex hooks onto one already connected
        connected = [0]
        for i in range(1, n):
            graph.add_edge(rng.choice(connected), i)
            connected.append(i)

        target = self.target_edges
        max_attempts = target * ATTEMPTS_PER_TARGET_EDGE
        attempts = 0
        while graph.edge_count < target and attempts < max_attempts:
            v1 = rng.randrange(n)
            v2 = rng.randrange(n)
            if v1 != v2 and not graph.has_edge(v1, v2):
                graph.add_edge(v1, v2)
            attempts += 1

        if graph.edge_count < target:
            logger.debug(
                "random graph stopped at %d/%d edges after %d attempts",
                graph.edge_count,
                target,
                attempts,
            )


def random_graph(
    vertex_count: int = 6,
    edge_density: float = 0.5,
    size: SizeType = DEFAULT_CANVAS_SIZE,
    random_seed: Optional[int] = None,
) -> Graph:
    """Generate a random connected graph for the given canvas."""
    return RandomGraphGenerator(
        vertex_count, edge_density, size=size, random_seed=random_seed
    ).generate()


__all__ = ["RandomGraphGenerator", "random_graph", "target_edge_count"]
