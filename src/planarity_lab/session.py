"""
Interactive planarity session.

A Session owns the current graph, the guided-solution playback state and
the learning trace. Presentation layers drive it with plain method calls
(load a family, move a vertex, step through a solution, check planarity)
and observe it either by subscribing to events with ``on()`` or by
polling ``snapshot()``.

State machine::

    IDLE --load_graph--> EXPLORE <--start_guided / exit_guided--> GUIDED

``load_graph`` is valid from any state and resets everything, including
the learning trace and any pending settle timer.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Callable, Optional, Union

if TYPE_CHECKING:
    from typing_extensions import Self

from .crossings import count_crossings, crossing_point, detect_crossings
from .generators import DEFAULT_CANVAS_SIZE, generator_for
from .geometry import clamp_to_canvas
from .graph import Graph
from .scheduling import Cancellable, Scheduler, SettleScheduler
from .solutions import Solution, Step, apply_step, is_known_planar, is_proven_non_planar
from .types import (
    Crossing,
    Event,
    EventCallback,
    GraphFamily,
    Point,
    SessionEventType,
    SizeType,
    TraceCategory,
    TraceEntry,
    Vertex,
)
from .validation import (
    validate_canvas_size,
    validate_density,
    validate_non_negative,
    validate_vertex_count,
)

logger = logging.getLogger(__name__)

DEFAULT_VERTEX_RADIUS = 25.0
DEFAULT_SETTLE_DELAY = 0.5
RANDOM_PLACEMENT_PADDING = 10.0


class SessionState(str, Enum):
    """Where the session is in its lifecycle."""

    IDLE = "idle"
    EXPLORE = "explore"
    GUIDED = "guided"


class PlanarityOutcome(str, Enum):
    """Result class of an explicit planarity check."""

    SUCCESS = "success"
    NON_PLANAR = "non_planar"
    HAS_CROSSINGS = "has_crossings"


@dataclass(frozen=True)
class StepInfo:
    """Metadata of the guided step currently shown."""

    index: int
    ordinal: int
    total: int
    title: str
    description: str
    message: str

    @property
    def is_first(self) -> bool:
        return self.index == 0

    @property
    def is_last(self) -> bool:
        return self.index == self.total - 1

    @classmethod
    def from_step(cls, step: Step, index: int, total: int) -> StepInfo:
        return cls(
            index=index,
            ordinal=step.ordinal,
            total=total,
            title=step.title,
            description=step.description,
            message=step.message,
        )

    def __str__(self) -> str:
        return f"Step {self.ordinal} of {self.total}: {self.title}"


@dataclass(frozen=True)
class PlanarityReport:
    """Outcome of ``Session.check_planarity()``."""

    crossing_count: int
    is_known_planar: bool
    is_proven_non_planar: bool
    outcome: PlanarityOutcome
    message: str


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only view of the session for polling presentation layers."""

    state: SessionState
    family: Optional[GraphFamily]
    graph_name: Optional[str]
    vertex_count: int
    edge_count: int
    crossings: tuple[Crossing, ...]
    has_solution: bool
    offers_guidance: bool
    celebrating: bool
    step: Optional[StepInfo]

    @property
    def crossing_count(self) -> int:
        return len(self.crossings)

    @property
    def status(self) -> str:
        """Short planarity status line for the current layout."""
        if self.family is None:
            return "No graph loaded"
        return "Planar (no crossings)" if not self.crossings else "Has crossings"


def celebration_message(family: Optional[GraphFamily]) -> Optional[str]:
    """
    Message shown when a crossing-free layout is confirmed.

    Known-planar families and random graphs celebrate; the proven
    non-planar families never reach zero crossings and get None.
    """
    if family is None:
        return None
    if is_known_planar(family):
        return (
            f"Congratulations! You've successfully drawn {family.display_name} "
            "without edge crossings!"
        )
    if family is GraphFamily.RANDOM:
        return "Great work! You found a planar layout for this random graph!"
    return None


class Session:
    """
    One user's interactive planarity session.

    Example:
        session = Session(size=(800, 600))
        session.on("celebrate", lambda event: print(event["message"]))

        session.load_graph("K4")
        session.start_guided()
        while not session.current_step.is_last:
            session.next_step()
        print(session.check_planarity().outcome)  # PlanarityOutcome.SUCCESS
    """

    def __init__(
        self,
        *,
        size: SizeType = DEFAULT_CANVAS_SIZE,
        vertex_count: int = 6,
        edge_density: float = 0.5,
        vertex_radius: float = DEFAULT_VERTEX_RADIUS,
        settle_delay: float = DEFAULT_SETTLE_DELAY,
        random_seed: Optional[int] = None,
        scheduler: Optional[Scheduler] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        """
        Initialize an idle session.

        Args:
            size: Canvas size as (width, height)
            vertex_count: Vertices in the random family (>= 1)
            edge_density: Edge density of the random family, in [0, 1]
            vertex_radius: Drawn vertex radius; used as drag margin and hit radius
            settle_delay: Seconds to wait before celebrating a drag-found
                crossing-free layout
            random_seed: Seed for random graphs and family shuffling
            scheduler: Deferred-call provider for the settle delay
                (default: a SettleScheduler driven by poll())
            clock: Timestamp source for trace entries (default datetime.now)

        Raises:
            ValidationError: If any configuration value is out of range
        """
        self._canvas_size: tuple[float, float] = validate_canvas_size(size)
        self._vertex_count: int = validate_vertex_count(vertex_count)
        self._edge_density: float = validate_density(edge_density)
        self._vertex_radius: float = validate_non_negative("vertex_radius", vertex_radius)
        self._settle_delay: float = validate_non_negative("settle_delay", settle_delay)
        self._rng = random.Random(random_seed)
        self._scheduler: Scheduler = scheduler if scheduler is not None else SettleScheduler()
        self._clock: Callable[[], datetime] = clock if clock is not None else datetime.now
        self._events: dict[SessionEventType, EventCallback] = {}

        self._family: Optional[GraphFamily] = None
        self._graph: Optional[Graph] = None
        self._crossings: list[Crossing] = []
        self._guided: bool = False
        self._step_index: int = 0
        self._celebrating: bool = False
        self._settle_handle: Optional[Cancellable] = None
        self._trace: list[TraceEntry] = []

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    @property
    def size(self) -> tuple[float, float]:
        """Get canvas size as (width, height)."""
        return self._canvas_size

    @size.setter
    def size(self, value: SizeType) -> None:
        """Set canvas size; takes effect on the next load_graph()."""
        self._canvas_size = validate_canvas_size(value)

    @property
    def vertex_count(self) -> int:
        return self._vertex_count

    @vertex_count.setter
    def vertex_count(self, value: int) -> None:
        """Set random-family vertex count; regenerates a loaded random graph."""
        self._vertex_count = validate_vertex_count(value)
        if self._family is GraphFamily.RANDOM:
            self._regenerate()

    @property
    def edge_density(self) -> float:
        return self._edge_density

    @edge_density.setter
    def edge_density(self, value: float) -> None:
        """Set random-family edge density; regenerates a loaded random graph."""
        self._edge_density = validate_density(value)
        if self._family is GraphFamily.RANDOM:
            self._regenerate()

    @property
    def vertex_radius(self) -> float:
        return self._vertex_radius

    @property
    def settle_delay(self) -> float:
        return self._settle_delay

    @settle_delay.setter
    def settle_delay(self, value: float) -> None:
        self._settle_delay = validate_non_negative("settle_delay", value)

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def state(self) -> SessionState:
        if self._graph is None:
            return SessionState.IDLE
        return SessionState.GUIDED if self._guided else SessionState.EXPLORE

    @property
    def family(self) -> Optional[GraphFamily]:
        return self._family

    @property
    def graph(self) -> Optional[Graph]:
        return self._graph

    @property
    def solution(self) -> Optional[Solution]:
        return self._graph.solution if self._graph is not None else None

    @property
    def is_guided(self) -> bool:
        return self._guided

    @property
    def step_index(self) -> int:
        return self._step_index

    @property
    def celebrating(self) -> bool:
        """Whether a crossing-free layout has been confirmed and not since broken."""
        return self._celebrating

    @property
    def settle_pending(self) -> bool:
        return self._settle_handle is not None

    @property
    def crossing_count(self) -> int:
        return len(self._crossings)

    @property
    def current_step(self) -> Optional[StepInfo]:
        """Metadata of the shown step, or None outside guided mode."""
        solution = self.solution
        if not self._guided or solution is None:
            return None
        index = self._step_index
        return StepInfo.from_step(solution.steps[index], index, solution.step_count)

    # -------------------------------------------------------------------------
    # Event System
    # -------------------------------------------------------------------------

    def on(self, event: Union[SessionEventType, str], callback: EventCallback) -> Self:
        """
        Subscribe to a session event.

        Args:
            event: Event type (SessionEventType enum or string name)
            callback: Function to call when event fires

        Returns:
            self (for chaining)
        """
        if isinstance(event, str):
            event = SessionEventType[event]
        self._events[event] = callback
        return self

    def trigger(self, event: Event) -> None:
        """
        Trigger an event, calling the registered callback.

        Args:
            event: Event payload with type and optional data
        """
        event_type = event.get("type")
        if event_type is not None and event_type in self._events:
            self._events[event_type](event)

    # -------------------------------------------------------------------------
    # Graph lifecycle
    # -------------------------------------------------------------------------

    def load_graph(self, family: Union[GraphFamily, str]) -> bool:
        """
        Generate a fresh graph of the given family and reset the session.

        Clears the learning trace, leaves guided mode, resets the step
        index, dismisses any celebration and cancels a pending settle
        timer so it cannot fire against the new graph.

        Args:
            family: GraphFamily or its string value ("K4", "cube", ...)

        Returns:
            False (and no state change) if the family is unknown
        """
        resolved = GraphFamily.parse(family)
        if resolved is None:
            logger.debug("load_graph: ignoring unknown family %r", family)
            return False

        self._cancel_settle()
        self._guided = False
        self._step_index = 0
        self._celebrating = False
        self.clear_learning_trace()

        self._family = resolved
        self._graph = self._generate(resolved)
        logger.debug("load_graph: %r", self._graph)

        self._recompute()
        self.trigger({"type": SessionEventType.graph_loaded, "family": resolved})
        self._add_trace(f"Loaded {resolved.display_name}", TraceCategory.INFO)
        return True

    def _generate(self, family: GraphFamily) -> Graph:
        generator = generator_for(
            family,
            size=self._canvas_size,
            vertex_count=self._vertex_count,
            edge_density=self._edge_density,
            margin=self._vertex_radius + RANDOM_PLACEMENT_PADDING,
            random_seed=self._rng.randrange(2**32),
        )
        return generator.generate()

    def _regenerate(self) -> None:
        """Replace the current graph with a fresh one of the same family, keeping the trace."""
        assert self._family is not None
        self._cancel_settle()
        self._dismiss_celebration()
        self._guided = False
        self._step_index = 0
        self._graph = self._generate(self._family)
        logger.debug("regenerate: %r", self._graph)
        self._recompute()
        self.trigger({"type": SessionEventType.graph_loaded, "family": self._family})

    def reset_graph(self) -> bool:
        """Reload the current family at its initial layout."""
        if self._family is None:
            return False
        self.load_graph(self._family)
        self._add_trace("Reset graph to original positions", TraceCategory.INFO)
        return True

    def try_another_graph(self) -> GraphFamily:
        """Load a randomly chosen family different from the current one."""
        choices = [f for f in GraphFamily if f is not self._family]
        family = self._rng.choice(choices)
        self.load_graph(family)
        return family

    # -------------------------------------------------------------------------
    # Vertex interaction
    # -------------------------------------------------------------------------

    def vertex_at(self, x: float, y: float) -> Optional[Vertex]:
        """Vertex under a canvas position (within the vertex radius), if any."""
        if self._graph is None:
            return None
        return self._graph.vertex_at(x, y, self._vertex_radius)

    def move_vertex(self, vertex_id: int, x: float, y: float, *, evaluate: bool = True) -> bool:
        """
        Move one vertex and recompute crossings.

        The position is clamped to stay one vertex radius inside the
        canvas. With ``evaluate`` (the default, meaning the drag ended)
        the planarity-improvement check runs: zero crossings records a
        success and schedules the settle timer, otherwise a warning with
        the crossing count is recorded. Pass ``evaluate=False`` for
        intermediate drag positions.

        Returns:
            False if no graph is loaded or the id is unknown
        """
        graph = self._graph
        if (
            graph is None
            or isinstance(vertex_id, bool)
            or not isinstance(vertex_id, int)
            or not 0 <= vertex_id < graph.vertex_count
        ):
            logger.debug("move_vertex: ignoring vertex %r", vertex_id)
            return False

        x, y = clamp_to_canvas(x, y, self._canvas_size, self._vertex_radius)
        graph.move_vertex(vertex_id, x, y)
        self._recompute()
        if evaluate:
            self._check_improvement()
        return True

    def _check_improvement(self) -> None:
        count = len(self._crossings)
        if count == 0:
            self._add_trace("Excellent! No edge crossings detected!", TraceCategory.SUCCESS)
            if not self._celebrating:
                self._schedule_settle()
        else:
            plural = "s" if count > 1 else ""
            self._add_trace(
                f"{count} edge crossing{plural} detected. Try repositioning vertices.",
                TraceCategory.WARNING,
            )
            self._cancel_settle()
            self._dismiss_celebration()

    # -------------------------------------------------------------------------
    # Settle timer
    # -------------------------------------------------------------------------

    def _schedule_settle(self) -> None:
        self._cancel_settle()
        self._settle_handle = self._scheduler.call_later(self._settle_delay, self._on_settled)

    def _cancel_settle(self) -> None:
        if self._settle_handle is not None:
            self._settle_handle.cancel()
            self._settle_handle = None

    def _on_settled(self) -> None:
        self._settle_handle = None
        # Re-read live state: positions may have changed since scheduling
        if self._graph is None or count_crossings(self._graph) != 0:
            return
        self._celebrate()

    def poll(self) -> int:
        """
        Fire due deferred callbacks of a poll-driven scheduler.

        Returns:
            Number of callbacks fired (0 for self-driven schedulers such
            as an asyncio loop)
        """
        run_due = getattr(self._scheduler, "run_due", None)
        if run_due is None:
            return 0
        return int(run_due())

    def _celebrate(self) -> None:
        message = celebration_message(self._family)
        if message is None or self._celebrating:
            return
        self._celebrating = True
        self.trigger(
            {"type": SessionEventType.celebrate, "family": self._family, "message": message}
        )

    def _dismiss_celebration(self) -> None:
        if not self._celebrating:
            return
        self._celebrating = False
        self.trigger({"type": SessionEventType.celebration_dismissed, "family": self._family})

    # -------------------------------------------------------------------------
    # Guided solution
    # -------------------------------------------------------------------------

    def start_guided(self) -> Optional[StepInfo]:
        """
        Enter guided mode at the first step and apply it.

        Calling it again while guided restarts from the first step.

        Returns:
            Step metadata, or None if the current graph has no Solution
        """
        if self._graph is None or self._graph.solution is None:
            logger.debug("start_guided: no solution for %r", self._family)
            return None

        self._guided = True
        self._step_index = 0
        self.trigger({"type": SessionEventType.guided_started, "family": self._family})
        info = self._show_step()
        assert self._family is not None
        self._add_trace(
            f"Starting step-by-step solution for {self._family.display_name}",
            TraceCategory.INFO,
        )
        return info

    def next_step(self) -> Optional[StepInfo]:
        """Advance one step (stays on the last step). None outside guided mode."""
        solution = self.solution
        if not self._guided or solution is None:
            return None
        if self._step_index < solution.step_count - 1:
            self._step_index += 1
            return self._show_step()
        return self.current_step

    def previous_step(self) -> Optional[StepInfo]:
        """Go back one step (stays on the first step). None outside guided mode."""
        if not self._guided or self.solution is None:
            return None
        if self._step_index > 0:
            self._step_index -= 1
            return self._show_step()
        return self.current_step

    def exit_guided(self) -> Optional[StepInfo]:
        """
        Leave guided mode, keeping the last applied positions.

        Returns:
            Metadata of the step left on screen, or None if not guided
        """
        info = self.current_step
        if info is None:
            return None
        self._guided = False
        self.trigger({"type": SessionEventType.guided_exited, "family": self._family})
        self._add_trace("Exited step-by-step solution mode", TraceCategory.INFO)
        return info

    def _show_step(self) -> StepInfo:
        graph = self._graph
        solution = self.solution
        assert graph is not None and solution is not None
        step = solution.steps[self._step_index]
        apply_step(graph, step)
        self._recompute()
        info = StepInfo.from_step(step, self._step_index, solution.step_count)
        self.trigger({"type": SessionEventType.step_changed, "family": self._family, "step": info})
        return info

    # -------------------------------------------------------------------------
    # Crossings and planarity
    # -------------------------------------------------------------------------

    def _recompute(self) -> None:
        assert self._graph is not None
        self._crossings = detect_crossings(self._graph)
        if self._crossings:
            self._dismiss_celebration()
        self.trigger(
            {
                "type": SessionEventType.crossings_changed,
                "family": self._family,
                "crossings": list(self._crossings),
            }
        )

    def get_crossings(self) -> list[Crossing]:
        """Crossings of the current layout, ordered by edge indices."""
        return list(self._crossings)

    def get_crossing_point(self, crossing: Crossing) -> Optional[Point]:
        """Marker position for a crossing, or None."""
        if self._graph is None:
            return None
        return crossing_point(self._graph, crossing)

    def check_planarity(self) -> Optional[PlanarityReport]:
        """
        Recompute crossings and classify the current layout.

        Unlike the drag check there is no settle delay: a crossing-free
        layout celebrates immediately.

        Returns:
            PlanarityReport, or None when no graph is loaded
        """
        if self._graph is None or self._family is None:
            return None

        self._recompute()
        count = len(self._crossings)
        family = self._family
        name = family.display_name
        known = is_known_planar(family)
        proven = is_proven_non_planar(family)

        if count == 0:
            self._cancel_settle()
            if known:
                message = "Perfect! This graph is planar and you found a crossing-free layout!"
                self._add_trace(f"Successfully drew {name} without crossings!", TraceCategory.SUCCESS)
            else:
                message = "Excellent! No crossings detected in current layout!"
                self._add_trace("Found layout without crossings", TraceCategory.SUCCESS)
            self._celebrate()
            outcome = PlanarityOutcome.SUCCESS
        elif proven:
            self._dismiss_celebration()
            message = f"This graph is non-planar! {name} cannot be drawn without crossings."
            self._add_trace(f"{name} is proven non-planar", TraceCategory.INFO)
            outcome = PlanarityOutcome.NON_PLANAR
        else:
            self._dismiss_celebration()
            message = f"{count} edge crossing(s) detected. Try repositioning vertices!"
            self._add_trace(f"{count} crossings detected - keep trying!", TraceCategory.WARNING)
            outcome = PlanarityOutcome.HAS_CROSSINGS

        return PlanarityReport(
            crossing_count=count,
            is_known_planar=known,
            is_proven_non_planar=proven,
            outcome=outcome,
            message=message,
        )

    # -------------------------------------------------------------------------
    # Learning trace
    # -------------------------------------------------------------------------

    def _add_trace(self, message: str, category: TraceCategory) -> None:
        self._trace.append(TraceEntry(message, category, self._clock()))
        self.trigger({"type": SessionEventType.trace_updated, "message": message})

    def learning_trace(self, newest_first: bool = False) -> list[TraceEntry]:
        """Recorded trace entries, oldest first unless ``newest_first``."""
        if newest_first:
            return list(reversed(self._trace))
        return list(self._trace)

    def clear_learning_trace(self) -> None:
        self._trace = []
        self.trigger({"type": SessionEventType.trace_updated})

    # -------------------------------------------------------------------------
    # Snapshot
    # -------------------------------------------------------------------------

    def snapshot(self) -> SessionSnapshot:
        """Capture the presentation-relevant state."""
        graph = self._graph
        family = self._family
        return SessionSnapshot(
            state=self.state,
            family=family,
            graph_name=family.display_name if family is not None else None,
            vertex_count=graph.vertex_count if graph is not None else 0,
            edge_count=graph.edge_count if graph is not None else 0,
            crossings=tuple(self._crossings),
            has_solution=graph is not None and graph.has_solution,
            offers_guidance=family is not None and family is not GraphFamily.RANDOM,
            celebrating=self._celebrating,
            step=self.current_step,
        )

    def __repr__(self) -> str:
        family = self._family.value if self._family is not None else None
        return (
            f"Session(state={self.state.value}, family={family!r}, "
            f"crossings={len(self._crossings)})"
        )


__all__ = [
    "Session",
    "SessionState",
    "PlanarityOutcome",
    "PlanarityReport",
    "SessionSnapshot",
    "StepInfo",
    "celebration_message",
    "DEFAULT_VERTEX_RADIUS",
    "DEFAULT_SETTLE_DELAY",
]
