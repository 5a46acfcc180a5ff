"""
planarity-lab: An interactive graph planarity playground.

Users drag the vertices of a fixed graph around a canvas while the
package reports, after every move, whether the layout has straight-line
edge crossings. Known-planar graphs come with a guided step-by-step
walkthrough to a crossing-free embedding.

Components:
- geometry: Segment intersection primitives
- graph / generators: Graph model and the catalog families (K4, K5, K3,3,
  cube, random connected)
- crossings: Crossing detection on the current embedding
- solutions: Authored guided solutions for the known-planar families
- session: The interactive session state machine
- export: SVG snapshots
"""

__version__ = "0.1.0"

# Crossing detection
from .crossings import (
    count_crossings,
    crossing_edge_indices,
    crossing_point,
    crossing_points,
    detect_crossings,
    is_crossing_free,
)

# Graph family generators
from .generators import (
    BaseGenerator,
    CompleteBipartiteGenerator,
    CompleteGraphGenerator,
    CubeGraphGenerator,
    RandomGraphGenerator,
    complete_bipartite_graph,
    complete_graph,
    cube_graph,
    generate,
    generator_for,
    random_graph,
)

# Geometry primitives
from .geometry import (
    PARALLEL_EPSILON,
    edge_intersection_point,
    intersection_point,
    segments_intersect,
)
from .graph import Graph

# Scheduling for the settle delay
from .scheduling import SettleScheduler

# Interactive session
from .session import (
    PlanarityOutcome,
    PlanarityReport,
    Session,
    SessionSnapshot,
    SessionState,
    StepInfo,
)

# Guided solutions
from .solutions import (
    KNOWN_PLANAR,
    PROVEN_NON_PLANAR,
    Solution,
    Step,
    apply_step,
    is_known_planar,
    is_proven_non_planar,
)
from .types import (
    Crossing,
    Edge,
    Event,
    GraphFamily,
    Point,
    SessionEventType,
    TraceCategory,
    TraceEntry,
    Vertex,
    vertex_label,
)

# Validation utilities
from .validation import (
    InvalidCanvasSizeError,
    InvalidDensityError,
    InvalidEdgeError,
    InvalidVertexCountError,
    ValidationError,
)

__all__ = [
    # Version
    "__version__",
    # Shared types
    "Point",
    "Vertex",
    "Edge",
    "Crossing",
    "GraphFamily",
    "TraceCategory",
    "TraceEntry",
    "SessionEventType",
    "Event",
    "vertex_label",
    # Graph model
    "Graph",
    # Generators
    "BaseGenerator",
    "CompleteGraphGenerator",
    "CompleteBipartiteGenerator",
    "CubeGraphGenerator",
    "RandomGraphGenerator",
    "complete_graph",
    "complete_bipartite_graph",
    "cube_graph",
    "random_graph",
    "generator_for",
    "generate",
    # Geometry
    "PARALLEL_EPSILON",
    "segments_intersect",
    "intersection_point",
    "edge_intersection_point",
    # Crossings
    "detect_crossings",
    "count_crossings",
    "is_crossing_free",
    "crossing_point",
    "crossing_points",
    "crossing_edge_indices",
    # Solutions
    "Solution",
    "Step",
    "apply_step",
    "KNOWN_PLANAR",
    "PROVEN_NON_PLANAR",
    "is_known_planar",
    "is_proven_non_planar",
    # Session
    "Session",
    "SessionState",
    "SessionSnapshot",
    "StepInfo",
    "PlanarityOutcome",
    "PlanarityReport",
    "SettleScheduler",
    # Validation
    "ValidationError",
    "InvalidCanvasSizeError",
    "InvalidVertexCountError",
    "InvalidDensityError",
    "InvalidEdgeError",
]
