"""
Graph container for the planarity playground.

A Graph owns an ordered list of vertices (ids contiguous from 0) and an
ordered list of edges. Topology is fixed once a generator has finished
building it; afterwards only vertex positions change.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Iterable, Iterator, Optional, Sequence

import numpy as np

from .geometry import distance
from .types import Edge, GraphFamily, Point, PointLike, Vertex, vertex_label
from .validation import InvalidEdgeError, validate_edge

if TYPE_CHECKING:
    from .solutions import Solution


class Graph:
    """
    Vertices, edges and the current embedding of one graph.

    Example:
        graph = Graph()
        a = graph.add_vertex(0, 0)
        b = graph.add_vertex(100, 0)
        graph.add_edge(a.id, b.id)
        graph.move_vertex(b.id, 100, 50)
    """

    def __init__(
        self,
        family: Optional[GraphFamily] = None,
        positions: Optional[Iterable[PointLike]] = None,
        edges: Optional[Iterable[Sequence[int]]] = None,
    ) -> None:
        """
        Initialize a graph, optionally from positions and an edge list.

        Args:
            family: Catalog family this graph was generated from
            positions: Initial (x, y) per vertex; ids follow the order
            edges: (v1, v2) pairs, validated like add_edge()

        Raises:
            InvalidEdgeError: If an edge is a self-loop, duplicate or out of bounds
        """
        self.family: Optional[GraphFamily] = family
        self.solution: Optional[Solution] = None
        self._vertices: list[Vertex] = []
        self._edges: list[Edge] = []
        self._edge_keys: set[tuple[int, int]] = set()

        if positions is not None:
            for x, y in positions:
                self.add_vertex(x, y)
        if edges is not None:
            for v1, v2 in edges:
                self.add_edge(v1, v2)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def vertices(self) -> list[Vertex]:
        """Get the list of vertices (index == id)."""
        return self._vertices

    @property
    def edges(self) -> list[Edge]:
        """Get the list of edges in generation order."""
        return self._edges

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    @property
    def has_solution(self) -> bool:
        """Whether a guided Solution is attached (known-planar catalog entry)."""
        return self.solution is not None

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    def add_vertex(self, x: float = 0.0, y: float = 0.0) -> Vertex:
        """Append a vertex with the next id and its derived label."""
        vertex_id = len(self._vertices)
        vertex = Vertex(vertex_id, x, y, vertex_label(vertex_id))
        self._vertices.append(vertex)
        return vertex

    def add_edge(self, v1: int, v2: int) -> Edge:
        """
        Append an edge between two existing, distinct vertices.

        Raises:
            InvalidEdgeError: On self-loops, unknown ids or duplicates
        """
        validate_edge(v1, v2, len(self._vertices))
        edge = Edge(v1, v2)
        if edge.key in self._edge_keys:
            raise InvalidEdgeError(f"Duplicate edge ({v1}, {v2})")
        self._edge_keys.add(edge.key)
        self._edges.append(edge)
        return edge

    def has_edge(self, v1: int, v2: int) -> bool:
        """Check for an edge between v1 and v2 in either orientation."""
        key = (v1, v2) if v1 < v2 else (v2, v1)
        return key in self._edge_keys

    # -------------------------------------------------------------------------
    # Embedding
    # -------------------------------------------------------------------------

    def vertex(self, vertex_id: int) -> Vertex:
        """Get a vertex by id (raises IndexError if unknown)."""
        if not 0 <= vertex_id < len(self._vertices):
            raise IndexError(f"Vertex {vertex_id} out of bounds [0, {len(self._vertices)})")
        return self._vertices[vertex_id]

    def move_vertex(self, vertex_id: int, x: float, y: float) -> None:
        """Overwrite one vertex position."""
        self.vertex(vertex_id).move_to(x, y)

    def positions(self) -> list[Point]:
        """Current positions, indexed by vertex id."""
        return [v.position for v in self._vertices]

    def position_array(self) -> np.ndarray:
        """Current positions as an (n, 2) float array."""
        if not self._vertices:
            return np.zeros((0, 2), dtype=float)
        return np.array([[v.x, v.y] for v in self._vertices], dtype=float)

    def set_positions(self, positions: Sequence[PointLike]) -> None:
        """
        Overwrite positions positionally.

        Entry ``i`` applies to vertex ``i``. A shorter list updates only
        that prefix; extra entries beyond the vertex count are ignored.
        """
        for vertex, (x, y) in zip(self._vertices, positions):
            vertex.move_to(x, y)

    def endpoints(self, edge: Edge) -> tuple[Point, Point]:
        """Current positions of an edge's two endpoints."""
        return self._vertices[edge.v1].position, self._vertices[edge.v2].position

    def vertex_at(self, x: float, y: float, radius: float) -> Optional[Vertex]:
        """
        Hit-test a canvas position.

        Returns the first vertex (in id order) whose centre lies within
        ``radius`` of (x, y), or None.
        """
        for vertex in self._vertices:
            if distance((x, y), vertex.position) <= radius:
                return vertex
        return None

    # -------------------------------------------------------------------------
    # Topology queries
    # -------------------------------------------------------------------------

    def adjacency(self) -> list[list[int]]:
        """Build an undirected adjacency list."""
        adj: list[list[int]] = [[] for _ in self._vertices]
        for edge in self._edges:
            adj[edge.v1].append(edge.v2)
            adj[edge.v2].append(edge.v1)
        return adj

    def degree(self, vertex_id: int) -> int:
        """Number of edges incident to a vertex."""
        return sum(1 for edge in self._edges if edge.touches(vertex_id))

    def reachable_from(self, start: int = 0) -> set[int]:
        """Ids reachable from ``start`` by BFS."""
        if not self._vertices:
            return set()
        adj = self.adjacency()
        seen = {start}
        queue: deque[int] = deque([start])
        while queue:
            node = queue.popleft()
            for neighbor in adj[node]:
                if neighbor not in seen:
                    seen.add(neighbor)
                    queue.append(neighbor)
        return seen

    def is_connected(self) -> bool:
        """Check if every vertex is reachable from vertex 0."""
        if len(self._vertices) <= 1:
            return True
        return len(self.reachable_from(0)) == len(self._vertices)

    def copy(self) -> Graph:
        """Independent copy sharing no mutable state (solution is immutable and shared)."""
        clone = Graph(
            family=self.family,
            positions=self.positions(),
            edges=[e.endpoints for e in self._edges],
        )
        clone.solution = self.solution
        return clone

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices)

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self) -> str:
        family = self.family.value if self.family is not None else None
        return f"Graph(family={family!r}, vertices={self.vertex_count}, edges={self.edge_count})"


__all__ = ["Graph", "vertex_label"]
