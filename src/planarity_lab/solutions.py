"""
Guided solutions for the known-planar catalog entries.

Only two families have one: K4 and the cube graph. Each Solution is a
canonical crossing-free target layout plus an ordered tuple of Steps that
narrate how to reach it. Steps are authored tables, scaled to the canvas
at generation time; they are not derived from the target layout.

Step positions are offsets from the canvas centre in units of a
family-specific scale. A step whose offsets are None replays the layout
the generator produced.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Optional, Sequence

from .graph import Graph
from .types import GraphFamily, Point, PointLike, SizeType

KNOWN_PLANAR = frozenset({GraphFamily.COMPLETE_K4, GraphFamily.CUBE})
"""Families with an authored crossing-free layout."""

PROVEN_NON_PLANAR = frozenset({GraphFamily.COMPLETE_K5, GraphFamily.COMPLETE_BIPARTITE_33})
"""Families that contain a Kuratowski graph and can never be drawn without crossings."""


@dataclass(frozen=True)
class Step:
    """
    One stage of a guided solution.

    Attributes:
        ordinal: 1-based position in the sequence
        title: Short heading
        description: What the step does
        positions: Target position per vertex, indexed by vertex id.
            May cover only a prefix of the vertices.
        message: Narrative shown alongside the step
    """

    ordinal: int
    title: str
    description: str
    positions: tuple[Point, ...]
    message: str


@dataclass(frozen=True)
class Solution:
    """Canonical target layout plus the steps leading to it."""

    target: tuple[Point, ...]
    steps: tuple[Step, ...]

    @property
    def step_count(self) -> int:
        return len(self.steps)

    def step(self, index: int) -> Step:
        """Get a step by 0-based index, clamped to the valid range."""
        index = max(0, min(len(self.steps) - 1, index))
        return self.steps[index]

    @property
    def final_step(self) -> Step:
        return self.steps[-1]


class _StepTemplate(NamedTuple):
    title: str
    description: str
    message: str
    offsets: Optional[tuple[tuple[float, float], ...]]


# Unit: 0.6 * min(cx, cy), the radius of the generated square.
_K4_STEPS = (
    _StepTemplate(
        "Initial Layout",
        "K₄ (complete graph with 4 vertices) starts with vertices arranged in a square pattern.",
        "This initial layout shows all 6 edges of K₄, but some may cross.",
        None,
    ),
    _StepTemplate(
        "Arrange Outer Triangle",
        "Move 3 vertices to form an outer triangle.",
        "Three vertices form an outer triangle. "
        "This creates the outer face of our planar embedding.",
        ((0.0, -1.0), (-0.866, 0.5), (0.866, 0.5), (0.0, 0.0)),
    ),
    _StepTemplate(
        "Position Center Vertex",
        "Place the 4th vertex inside the triangle.",
        "The 4th vertex is placed inside the triangle. "
        "All edges can now be drawn without crossings!",
        ((0.0, -1.0), (-0.866, 0.5), (0.866, 0.5), (0.0, 0.2)),
    ),
)

_CUBE_OUTER = ((-1.0, -1.0), (1.0, -1.0), (1.0, 1.0), (-1.0, 1.0))


def _cube_ring(scale: float) -> tuple[tuple[float, float], ...]:
    return tuple((x * scale, y * scale) for x, y in _CUBE_OUTER)


# Unit: 0.2 * min(width, height), half the side of the outer square.
_CUBE_STEPS = (
    _StepTemplate(
        "Initial 3D Projection",
        "The cube graph starts as a 3D projection which may have crossing edges.",
        "This 3D projection of a cube often has edge crossings. "
        "A cube has 8 vertices and 12 edges.",
        None,
    ),
    _StepTemplate(
        "Create Outer 4-Cycle",
        "Arrange 4 vertices to form the outer boundary (one face of the cube).",
        "Four vertices (A,B,C,D) form the outer square. "
        "The remaining 4 vertices will be positioned inside.",
        _CUBE_OUTER + _cube_ring(0.5),
    ),
    _StepTemplate(
        "Position Inner 4-Cycle",
        "Place the remaining 4 vertices inside to form the second face of the cube.",
        "Inner vertices (E,F,G,H) form a smaller square inside. "
        "Each connects to its corresponding outer vertex, "
        "creating a planar layout of the cube graph!",
        _CUBE_OUTER + _cube_ring(0.3),
    ),
)


def _scale_offsets(
    offsets: Sequence[tuple[float, float]], center: tuple[float, float], unit: float
) -> tuple[Point, ...]:
    cx, cy = center
    return tuple(Point(cx + dx * unit, cy + dy * unit) for dx, dy in offsets)


def _build_steps(
    templates: Sequence[_StepTemplate],
    initial: Sequence[PointLike],
    center: tuple[float, float],
    unit: float,
) -> tuple[Step, ...]:
    steps = []
    for ordinal, template in enumerate(templates, start=1):
        if template.offsets is None:
            positions = tuple(Point(float(p[0]), float(p[1])) for p in initial)
        else:
            positions = _scale_offsets(template.offsets, center, unit)
        steps.append(
            Step(
                ordinal=ordinal,
                title=template.title,
                description=template.description,
                positions=positions,
                message=template.message,
            )
        )
    return tuple(steps)


def k4_solution(initial: Sequence[PointLike], size: SizeType) -> Solution:
    """
    Solution for K4: square, then outer triangle, then vertex inside.

    The target layout is the generated square;
    the final step is the crossing-free triangle-with-centre embedding.
    """
    width, height = float(size[0]), float(size[1])
    center = (width / 2, height / 2)
    unit = min(center) * 0.6
    steps = _build_steps(_K4_STEPS, initial, center, unit)
    target = tuple(Point(float(p[0]), float(p[1])) for p in initial)
    return Solution(target=target, steps=steps)


def cube_solution(initial: Sequence[PointLike], size: SizeType) -> Solution:
    """Solution for the cube graph: outer 4-cycle with a nested inner 4-cycle."""
    width, height = float(size[0]), float(size[1])
    center = (width / 2, height / 2)
    unit = min(width, height) * 0.2
    steps = _build_steps(_CUBE_STEPS, initial, center, unit)
    return Solution(target=steps[-1].positions, steps=steps)


def solution_for(family: Optional[GraphFamily], graph: Graph, size: SizeType) -> Optional[Solution]:
    """Look up and build the Solution for a freshly generated graph, if any."""
    if family is GraphFamily.COMPLETE_K4:
        return k4_solution(graph.positions(), size)
    if family is GraphFamily.CUBE:
        return cube_solution(graph.positions(), size)
    return None


def apply_step(graph: Graph, step: Step) -> None:
    """Move the vertices a step lists; vertices beyond its prefix keep their positions."""
    graph.set_positions(step.positions)


def is_known_planar(family: Optional[GraphFamily]) -> bool:
    return family in KNOWN_PLANAR


def is_proven_non_planar(family: Optional[GraphFamily]) -> bool:
    return family in PROVEN_NON_PLANAR


__all__ = [
    "KNOWN_PLANAR",
    "PROVEN_NON_PLANAR",
    "Step",
    "Solution",
    "k4_solution",
    "cube_solution",
    "solution_for",
    "apply_step",
    "is_known_planar",
    "is_proven_non_planar",
]
