"""
Base class for graph family generators.

Every generator is configured once (canvas size plus family-specific
parameters) and can then produce any number of fresh graphs with
``generate()``. Subclasses place vertices and add edges; the base class
handles canvas bookkeeping and attaches a Solution for known-planar
families.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ..graph import Graph
from ..solutions import Solution, solution_for
from ..types import GraphFamily, SizeType
from ..validation import validate_canvas_size

DEFAULT_CANVAS_SIZE = (800.0, 600.0)


class BaseGenerator(ABC):
    """
    Abstract base class for graph family generators.

    Example:
        generator = CubeGraphGenerator(size=(800, 600))
        graph = generator.generate()

        for vertex in graph.vertices:
            print(f"{vertex.label}: ({vertex.x}, {vertex.y})")
    """

    family: Optional[GraphFamily] = None

    def __init__(self, *, size: SizeType = DEFAULT_CANVAS_SIZE) -> None:
        """
        Initialize generator with canvas size.

        Args:
            size: Canvas size as (width, height)

        Raises:
            InvalidCanvasSizeError: If width or height is not positive.
        """
        self._canvas_size: tuple[float, float] = DEFAULT_CANVAS_SIZE
        self.size = size

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def size(self) -> tuple[float, float]:
        """Get canvas size as (width, height)."""
        return self._canvas_size

    @size.setter
    def size(self, value: SizeType) -> None:
        """
        Set canvas size.

        Raises:
            InvalidCanvasSizeError: If width or height is not positive.
        """
        self._canvas_size = validate_canvas_size(value)

    @property
    def center(self) -> tuple[float, float]:
        """Canvas centre."""
        return (self._canvas_size[0] / 2, self._canvas_size[1] / 2)

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def generate(self) -> Graph:
        """
        Build a fresh graph.

        Places vertices, adds edges, then attaches the family's Solution
        (if it has one) computed against the generated layout.

        Returns:
            A new Graph
        """
        graph = Graph(family=self.family)
        self._place_vertices(graph)
        self._add_edges(graph)
        graph.solution = self._solution(graph)
        return graph

    @abstractmethod
    def _place_vertices(self, graph: Graph) -> None:
        """Add the family's vertices at their initial positions."""
        pass

    @abstractmethod
    def _add_edges(self, graph: Graph) -> None:
        """Add the family's edges."""
        pass

    def _solution(self, graph: Graph) -> Optional[Solution]:
        return solution_for(self.family, graph, self._canvas_size)


__all__ = ["BaseGenerator", "DEFAULT_CANVAS_SIZE"]
