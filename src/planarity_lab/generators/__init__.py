"""
Graph family generators.

This module provides one generator per catalog family:
- CompleteGraphGenerator: K4 (planar, guided) and K5 (non-planar)
- CompleteBipartiteGenerator: K3,3 (non-planar)
- CubeGraphGenerator: Cube graph (planar, guided)
- RandomGraphGenerator: Random connected graph (unclassified)
"""

from __future__ import annotations

from typing import Optional

from ..graph import Graph
from ..types import GraphFamily, SizeType
from .base import DEFAULT_CANVAS_SIZE, BaseGenerator
from .bipartite import CompleteBipartiteGenerator, complete_bipartite_graph
from .complete import CompleteGraphGenerator, complete_graph
from .cube import CubeGraphGenerator, cube_graph
from .random import RandomGraphGenerator, random_graph, target_edge_count


def generator_for(
    family: GraphFamily,
    *,
    size: SizeType = DEFAULT_CANVAS_SIZE,
    vertex_count: int = 6,
    edge_density: float = 0.5,
    margin: float = 35.0,
    random_seed: Optional[int] = None,
) -> BaseGenerator:
    """
    Build the generator for a catalog family.

    ``vertex_count``, ``edge_density``, ``margin`` and ``random_seed`` only
    apply to the random family.
    """
    if family is GraphFamily.COMPLETE_K4:
        return CompleteGraphGenerator(4, size=size)
    if family is GraphFamily.COMPLETE_K5:
        return CompleteGraphGenerator(5, size=size)
    if family is GraphFamily.COMPLETE_BIPARTITE_33:
        return CompleteBipartiteGenerator(size=size)
    if family is GraphFamily.CUBE:
        return CubeGraphGenerator(size=size)
    if family is GraphFamily.RANDOM:
        return RandomGraphGenerator(
            vertex_count,
            edge_density,
            size=size,
            margin=margin,
            random_seed=random_seed,
        )
    raise ValueError(f"Unknown graph family: {family!r}")


def generate(family: GraphFamily, **kwargs) -> Graph:
    """Generate a fresh graph for a catalog family (see generator_for for options)."""
    return generator_for(family, **kwargs).generate()


__all__ = [
    "BaseGenerator",
    "DEFAULT_CANVAS_SIZE",
    "CompleteGraphGenerator",
    "CompleteBipartiteGenerator",
    "CubeGraphGenerator",
    "RandomGraphGenerator",
    "complete_graph",
    "complete_bipartite_graph",
    "cube_graph",
    "random_graph",
    "target_edge_count",
    "generator_for",
    "generate",
]
