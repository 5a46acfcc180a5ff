"""
Common types for the planarity playground.

This module provides the fundamental types used across the package:
- Point: Immutable 2D position
- Vertex: Graph vertex with a stable id, label and mutable position
- Edge: Unordered pair of vertex ids
- Crossing: Pair of edge indices whose segments cross
- GraphFamily: The fixed catalog of graph families
- TraceCategory / TraceEntry: Learning trace records
- SessionEventType / Event: Session lifecycle events
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum, IntEnum
from typing import Any, Callable, NamedTuple, Optional, Sequence, TypedDict, Union


class Point(NamedTuple):
    """A position in canvas coordinates."""

    x: float
    y: float


def vertex_label(index: int) -> str:
    """
    Derive a display label from a vertex id.

    Ids 0-25 map to A-Z. Beyond that the letter cycles and the
    quotient is appended: 26 -> "A1", 27 -> "B1", 52 -> "A2".
    """
    letter = chr(ord("A") + index % 26)
    if index < 26:
        return letter
    return f"{letter}{index // 26}"


class Vertex:
    """
    Graph vertex with identity, label and position.

    Attributes:
        id: Stable 0-based index, assigned at generation time
        label: Display label derived from the id
        x: X coordinate in canvas space
        y: Y coordinate in canvas space
    """

    def __init__(self, id: int, x: float = 0.0, y: float = 0.0, label: Optional[str] = None) -> None:
        self.id: int = id
        self.x: float = float(x)
        self.y: float = float(y)
        self.label: str = label if label is not None else vertex_label(id)

    @property
    def position(self) -> Point:
        """Get the current position as a Point."""
        return Point(self.x, self.y)

    def move_to(self, x: float, y: float) -> None:
        """Overwrite the position."""
        self.x = float(x)
        self.y = float(y)

    def __repr__(self) -> str:
        return f"Vertex(id={self.id}, label={self.label!r}, x={self.x:.2f}, y={self.y:.2f})"


@dataclass(frozen=True)
class Edge:
    """
    Undirected edge between two distinct vertices.

    Edges are immutable once created. ``Edge(0, 1)`` and ``Edge(1, 0)``
    describe the same connection; use ``key`` to compare orientation-free.
    """

    v1: int
    v2: int

    def __post_init__(self) -> None:
        if self.v1 == self.v2:
            raise ValueError(f"Edge endpoints must differ, got ({self.v1}, {self.v2})")

    @property
    def key(self) -> tuple[int, int]:
        """Orientation-free identity as a (min, max) tuple."""
        return (self.v1, self.v2) if self.v1 < self.v2 else (self.v2, self.v1)

    @property
    def endpoints(self) -> tuple[int, int]:
        return (self.v1, self.v2)

    def touches(self, vertex_id: int) -> bool:
        """Check if the vertex is one of this edge's endpoints."""
        return vertex_id == self.v1 or vertex_id == self.v2

    def shares_endpoint(self, other: Edge) -> bool:
        """Check if two edges meet at a common vertex."""
        return (
            self.v1 == other.v1 or self.v1 == other.v2 or self.v2 == other.v1 or self.v2 == other.v2
        )

    def __repr__(self) -> str:
        return f"Edge({self.v1} -- {self.v2})"


class Crossing(NamedTuple):
    """Two edges (by index, ``edge_a < edge_b``) whose segments cross."""

    edge_a: int
    edge_b: int


class GraphFamily(str, Enum):
    """
    The fixed catalog of graph families.

    Values match the identifiers used by presentation layers, so
    ``GraphFamily("K4")`` works as a lookup from a string selection.
    """

    COMPLETE_K4 = "K4"
    COMPLETE_K5 = "K5"
    COMPLETE_BIPARTITE_33 = "K33"
    CUBE = "cube"
    RANDOM = "random"

    @property
    def display_name(self) -> str:
        """Human-readable name used in trace messages."""
        return _DISPLAY_NAMES[self]

    @classmethod
    def parse(cls, value: Union[GraphFamily, str, None]) -> Optional[GraphFamily]:
        """Resolve a family from an enum member, value or member name; None if unknown."""
        if isinstance(value, GraphFamily):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            pass
        try:
            return cls[value.upper()]
        except KeyError:
            return None


_DISPLAY_NAMES = {
    GraphFamily.COMPLETE_K4: "Complete Graph K₄",
    GraphFamily.COMPLETE_K5: "Complete Graph K₅",
    GraphFamily.COMPLETE_BIPARTITE_33: "Complete Bipartite K₃,₃",
    GraphFamily.CUBE: "Cube Graph",
    GraphFamily.RANDOM: "Random Graph",
}


class TraceCategory(str, Enum):
    """Category of a learning trace entry."""

    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class TraceEntry:
    """One timestamped narrative event in the learning trace."""

    message: str
    category: TraceCategory
    timestamp: datetime


class SessionEventType(IntEnum):
    """
    Session lifecycle events.

    - graph_loaded: A new graph family was generated
    - crossings_changed: Crossings were recomputed after a position change
    - step_changed: A guided step was applied
    - guided_started: Guided playback began
    - guided_exited: Guided playback ended
    - trace_updated: The learning trace was appended to or cleared
    - celebrate: A crossing-free layout was confirmed
    - celebration_dismissed: Crossings reappeared while celebrating
    """

    graph_loaded = 0
    crossings_changed = 1
    step_changed = 2
    guided_started = 3
    guided_exited = 4
    trace_updated = 5
    celebrate = 6
    celebration_dismissed = 7


class Event(TypedDict, total=False):
    """Event payload passed to event listeners."""

    type: SessionEventType
    family: Optional[GraphFamily]
    crossings: list[Crossing]
    step: Any
    message: str


EventCallback = Callable[[Event], None]

PointLike = Union[Point, tuple[float, float], Sequence[float]]
"""Input type for positions: Point, (x, y) tuple or any 2-sequence."""

SizeType = Union[tuple[float, float], list[float], Sequence[float]]
"""Canvas size: (width, height) tuple, list, or sequence."""


__all__ = [
    "Point",
    "vertex_label",
    "Vertex",
    "Edge",
    "Crossing",
    "GraphFamily",
    "TraceCategory",
    "TraceEntry",
    "SessionEventType",
    "Event",
    "EventCallback",
    "PointLike",
    "SizeType",
]
