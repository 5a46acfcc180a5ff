"""Tests for the interactive planarity session."""

from datetime import datetime

import pytest

from planarity_lab import (
    Crossing,
    GraphFamily,
    InvalidDensityError,
    InvalidVertexCountError,
    PlanarityOutcome,
    Session,
    SessionEventType,
    SessionState,
    SettleScheduler,
    TraceCategory,
    ValidationError,
)
from planarity_lab.session import celebration_message

FIXED_TIME = datetime(2024, 5, 1, 12, 0, 0)

# K4 on an 800x600 canvas: a square of radius 180 around (400, 300).
# Vertex D (id 3) starts at the upper-left corner; this point lies inside
# triangle ABC and untangles the drawing.
K4_UNTANGLED_D = (440.0, 340.0)


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingScheduler:
    """Scheduler that only records requests, like an external event loop would."""

    class Handle:
        def __init__(self) -> None:
            self.cancelled = False

        def cancel(self) -> None:
            self.cancelled = True

    def __init__(self) -> None:
        self.calls = []

    def call_later(self, delay, callback):
        handle = self.Handle()
        self.calls.append((delay, callback, handle))
        return handle


def make_session(**kwargs):
    clock = FakeClock()
    kwargs.setdefault("size", (800, 600))
    kwargs.setdefault("random_seed", 7)
    session = Session(scheduler=SettleScheduler(clock), clock=lambda: FIXED_TIME, **kwargs)
    return session, clock


def record_events(session):
    events = []
    for event_type in SessionEventType:
        session.on(event_type, events.append)
    return events


def trace_messages(session):
    return [entry.message for entry in session.learning_trace()]


class TestConfiguration:
    """Tests for session configuration."""

    def test_defaults(self):
        """A fresh session is idle with default settings."""
        session = Session()
        assert session.state is SessionState.IDLE
        assert session.size == (800.0, 600.0)
        assert session.vertex_count == 6
        assert session.edge_density == 0.5
        assert session.vertex_radius == 25.0
        assert session.settle_delay == 0.5

    def test_invalid_values(self):
        """Configuration is validated up front."""
        with pytest.raises(InvalidVertexCountError):
            Session(vertex_count=0)
        with pytest.raises(InvalidDensityError):
            Session(edge_density=2)
        with pytest.raises(ValidationError):
            Session(settle_delay=-1)

    def test_setters_validate(self):
        """Setters reject invalid values too."""
        session = Session()
        with pytest.raises(InvalidDensityError):
            session.edge_density = -0.5
        with pytest.raises(InvalidVertexCountError):
            session.vertex_count = 0

    def test_vertex_count_regenerates_random_graph(self):
        """Changing the vertex count reloads a loaded random graph."""
        session, _ = make_session()
        session.load_graph(GraphFamily.RANDOM)
        session.vertex_count = 9
        assert session.graph.vertex_count == 9

    def test_random_settings_keep_trace(self):
        """Regenerating from a settings change keeps the learning trace."""
        session, _ = make_session()
        session.load_graph(GraphFamily.RANDOM)
        session.check_planarity()
        before = trace_messages(session)
        session.vertex_count = 5
        session.edge_density = 0.2
        assert session.graph.vertex_count == 5
        assert session.family is GraphFamily.RANDOM
        assert trace_messages(session) == before

    def test_vertex_count_leaves_catalog_graph(self):
        """Other families ignore the random settings."""
        session, _ = make_session()
        session.load_graph("cube")
        session.vertex_count = 3
        assert session.graph.vertex_count == 8


class TestIdleSession:
    """Operations before any graph is loaded are no-ops."""

    def test_snapshot(self):
        """Snapshot of an idle session."""
        session, _ = make_session()
        snapshot = session.snapshot()
        assert snapshot.state is SessionState.IDLE
        assert snapshot.status == "No graph loaded"
        assert snapshot.vertex_count == 0
        assert snapshot.crossing_count == 0

    def test_no_ops(self):
        """Nothing happens without a graph."""
        session, _ = make_session()
        assert session.move_vertex(0, 1, 1) is False
        assert session.start_guided() is None
        assert session.next_step() is None
        assert session.exit_guided() is None
        assert session.check_planarity() is None
        assert session.reset_graph() is False
        assert session.vertex_at(0, 0) is None
        assert session.learning_trace() == []


class TestLoadGraph:
    """Tests for loading graph families."""

    def test_load_k4(self):
        """Loading enters explore mode with fresh crossings and trace."""
        session, _ = make_session()
        assert session.load_graph("K4") is True
        assert session.state is SessionState.EXPLORE
        assert session.family is GraphFamily.COMPLETE_K4
        assert session.get_crossings() == [Crossing(1, 4)]
        trace = session.learning_trace()
        assert len(trace) == 1
        assert trace[0].message == "Loaded Complete Graph K₄"
        assert trace[0].category is TraceCategory.INFO
        assert trace[0].timestamp == FIXED_TIME

    def test_accepts_member_names(self):
        """Enum members, values and member names all resolve."""
        session, _ = make_session()
        assert session.load_graph(GraphFamily.CUBE)
        assert session.load_graph("K33")
        assert session.family is GraphFamily.COMPLETE_BIPARTITE_33
        assert session.load_graph("RANDOM")
        assert session.family is GraphFamily.RANDOM

    def test_unknown_family_ignored(self):
        """An unknown family leaves the session untouched."""
        session, _ = make_session()
        session.load_graph("K4")
        graph = session.graph
        assert session.load_graph("hexagon") is False
        assert session.family is GraphFamily.COMPLETE_K4
        assert session.graph is graph
        assert len(session.learning_trace()) == 1

    def test_load_clears_trace(self):
        """Each load starts a fresh trace."""
        session, _ = make_session()
        session.load_graph("K4")
        session.check_planarity()
        session.load_graph("K5")
        assert trace_messages(session) == ["Loaded Complete Graph K₅"]

    def test_load_leaves_guided_mode(self):
        """Loading while guided returns to explore mode."""
        session, _ = make_session()
        session.load_graph("K4")
        session.start_guided()
        session.next_step()
        session.load_graph("cube")
        assert session.state is SessionState.EXPLORE
        assert session.step_index == 0
        assert session.current_step is None

    def test_snapshot(self):
        """Snapshot reflects the loaded graph."""
        session, _ = make_session()
        session.load_graph("K4")
        snapshot = session.snapshot()
        assert snapshot.graph_name == "Complete Graph K₄"
        assert snapshot.vertex_count == 4
        assert snapshot.edge_count == 6
        assert snapshot.crossing_count == 1
        assert snapshot.status == "Has crossings"
        assert snapshot.has_solution
        assert snapshot.offers_guidance
        assert not snapshot.celebrating

    def test_snapshot_random(self):
        """Random graphs offer no guidance."""
        session, _ = make_session()
        session.load_graph("random")
        snapshot = session.snapshot()
        assert not snapshot.has_solution
        assert not snapshot.offers_guidance

    def test_non_planar_offers_guidance_without_solution(self):
        """Catalog non-planar graphs offer guidance but have no solution."""
        session, _ = make_session()
        session.load_graph("K5")
        snapshot = session.snapshot()
        assert snapshot.offers_guidance
        assert not snapshot.has_solution

    def test_reset_graph(self):
        """Reset restores the generated layout and notes it in the trace."""
        session, _ = make_session()
        session.load_graph("K4")
        initial = session.graph.positions()
        session.move_vertex(0, 100, 100)
        assert session.reset_graph() is True
        assert session.graph.positions() == initial
        assert trace_messages(session) == [
            "Loaded Complete Graph K₄",
            "Reset graph to original positions",
        ]

    def test_try_another_graph(self):
        """A different family is loaded."""
        session, _ = make_session()
        session.load_graph("cube")
        for _ in range(10):
            previous = session.family
            family = session.try_another_graph()
            assert family is not previous
            assert session.family is family


class TestMoveVertex:
    """Tests for dragging vertices."""

    def test_clamped_to_canvas(self):
        """Positions stay one vertex radius inside the canvas."""
        session, _ = make_session()
        session.load_graph("K4")
        assert session.move_vertex(0, -100, 10_000)
        assert session.graph.vertex(0).position == (25.0, 575.0)

    def test_unknown_vertex(self):
        """Unknown ids are ignored."""
        session, _ = make_session()
        session.load_graph("K4")
        assert session.move_vertex(9, 1, 1) is False
        assert session.move_vertex(-1, 1, 1) is False

    def test_non_integer_vertex_id(self):
        """Non-integer ids are ignored rather than raising."""
        session, _ = make_session()
        session.load_graph("K4")
        positions = session.graph.positions()
        assert session.move_vertex(1.0, 1, 1) is False
        assert session.move_vertex(True, 1, 1) is False
        assert session.move_vertex("1", 1, 1) is False
        assert session.graph.positions() == positions

    def test_intermediate_moves_do_not_evaluate(self):
        """evaluate=False recomputes crossings without trace entries."""
        session, _ = make_session()
        session.load_graph("K4")
        session.move_vertex(3, *K4_UNTANGLED_D, evaluate=False)
        assert session.crossing_count == 0
        assert len(session.learning_trace()) == 1
        assert not session.settle_pending

    def test_crossing_warning(self):
        """Ending a drag with crossings records a warning."""
        session, _ = make_session()
        session.load_graph("K4")
        session.move_vertex(0, 530, 170)
        entry = session.learning_trace()[-1]
        assert entry.message == "1 edge crossing detected. Try repositioning vertices."
        assert entry.category is TraceCategory.WARNING

    def test_plural_warning(self):
        """Counts above one are pluralized."""
        session, _ = make_session()
        session.load_graph("K5")
        vertex = session.graph.vertex(0)
        session.move_vertex(0, vertex.x, vertex.y)
        assert session.learning_trace()[-1].message == (
            "5 edge crossings detected. Try repositioning vertices."
        )

    def test_vertex_at(self):
        """Hit-testing uses the vertex radius."""
        session, _ = make_session()
        session.load_graph("K4")
        vertex = session.graph.vertex(2)
        assert session.vertex_at(vertex.x + 10, vertex.y - 10).id == 2
        assert session.vertex_at(400, 300) is None

    def test_crossing_point(self):
        """The K4 diagonals meet at the canvas centre."""
        session, _ = make_session()
        session.load_graph("K4")
        point = session.get_crossing_point(session.get_crossings()[0])
        assert point == pytest.approx((400.0, 300.0))


class TestSettleDelay:
    """Tests for the delayed celebration after a successful drag."""

    def test_success_then_celebrate(self):
        """Zero crossings records a success and celebrates after the delay."""
        session, clock = make_session()
        celebrations = []
        session.on("celebrate", celebrations.append)
        session.load_graph("K4")

        session.move_vertex(3, *K4_UNTANGLED_D)
        entry = session.learning_trace()[-1]
        assert entry.message == "Excellent! No edge crossings detected!"
        assert entry.category is TraceCategory.SUCCESS
        assert session.settle_pending
        assert not session.celebrating

        clock.advance(0.4)
        assert session.poll() == 0
        assert celebrations == []

        clock.advance(0.1)
        assert session.poll() == 1
        assert session.celebrating
        assert celebrations[0]["message"] == (
            "Congratulations! You've successfully drawn Complete Graph K₄ without edge crossings!"
        )

    def test_rechecks_live_state(self):
        """Crossings reintroduced before the deadline suppress the celebration."""
        session, clock = make_session()
        session.load_graph("K4")
        start = session.graph.vertex(3).position
        session.move_vertex(3, *K4_UNTANGLED_D)
        session.move_vertex(3, *start, evaluate=False)
        clock.advance(1.0)
        session.poll()
        assert not session.celebrating

    def test_crossing_drag_cancels_timer(self):
        """A drag ending with crossings cancels the pending timer."""
        session, clock = make_session()
        session.load_graph("K4")
        start = session.graph.vertex(3).position
        session.move_vertex(3, *K4_UNTANGLED_D)
        session.move_vertex(3, *start)
        assert not session.settle_pending
        clock.advance(1.0)
        assert session.poll() == 0

    def test_load_cancels_timer(self):
        """A stale timer never fires against a newly loaded graph."""
        session, clock = make_session()
        celebrations = []
        session.on("celebrate", celebrations.append)
        session.load_graph("K4")
        session.move_vertex(3, *K4_UNTANGLED_D)
        session.load_graph("random")
        assert not session.settle_pending
        clock.advance(1.0)
        assert session.poll() == 0
        assert celebrations == []

    def test_no_reschedule_while_celebrating(self):
        """Further crossing-free drags do not schedule a second celebration."""
        session, clock = make_session()
        session.load_graph("K4")
        session.move_vertex(3, *K4_UNTANGLED_D)
        clock.advance(0.5)
        session.poll()
        session.move_vertex(3, 445, 345)
        assert not session.settle_pending

    def test_crossings_dismiss_celebration(self):
        """Reintroducing crossings dismisses the celebration."""
        session, clock = make_session()
        dismissed = []
        session.on(SessionEventType.celebration_dismissed, dismissed.append)
        session.load_graph("K4")
        start = session.graph.vertex(3).position
        session.move_vertex(3, *K4_UNTANGLED_D)
        clock.advance(0.5)
        session.poll()
        session.move_vertex(3, *start)
        assert not session.celebrating
        assert len(dismissed) == 1

    def test_celebrates_again_after_guided_retangles(self):
        """Replaying a tangled guided step ends the celebration, so solving again celebrates."""
        session, clock = make_session()
        celebrations = []
        session.on("celebrate", celebrations.append)
        session.load_graph("K4")
        session.move_vertex(3, *K4_UNTANGLED_D)
        clock.advance(0.5)
        session.poll()
        assert len(celebrations) == 1

        session.start_guided()
        assert session.crossing_count == 1
        assert not session.celebrating
        session.exit_guided()

        session.move_vertex(3, *K4_UNTANGLED_D)
        assert session.settle_pending
        clock.advance(0.5)
        session.poll()
        assert len(celebrations) == 2

    def test_intermediate_crossings_dismiss_celebration(self):
        """Crossings reappearing mid-drag end the celebration."""
        session, clock = make_session()
        session.load_graph("K4")
        start = session.graph.vertex(3).position
        session.move_vertex(3, *K4_UNTANGLED_D)
        clock.advance(0.5)
        session.poll()
        session.move_vertex(3, *start, evaluate=False)
        assert not session.celebrating

    def test_external_scheduler(self):
        """Any call_later provider can drive the settle delay."""
        scheduler = RecordingScheduler()
        session = Session(size=(800, 600), scheduler=scheduler)
        session.load_graph("K4")
        session.move_vertex(3, *K4_UNTANGLED_D)
        assert len(scheduler.calls) == 1
        delay, callback, _ = scheduler.calls[0]
        assert delay == 0.5
        assert session.poll() == 0
        callback()
        assert session.celebrating

    def test_external_scheduler_cancel(self):
        """Loading a graph cancels the external handle."""
        scheduler = RecordingScheduler()
        session = Session(size=(800, 600), scheduler=scheduler)
        session.load_graph("K4")
        session.move_vertex(3, *K4_UNTANGLED_D)
        session.load_graph("K4")
        assert scheduler.calls[0][2].cancelled


class TestGuidedMode:
    """Tests for step-by-step solution playback."""

    def test_walkthrough(self):
        """Steps advance, clamp at the ends and end crossing-free."""
        session, _ = make_session()
        session.load_graph("K4")

        info = session.start_guided()
        assert session.state is SessionState.GUIDED
        assert (info.index, info.ordinal, info.total) == (0, 1, 3)
        assert info.is_first
        assert str(info) == "Step 1 of 3: Initial Layout"
        assert session.crossing_count == 1

        assert session.next_step().ordinal == 2
        last = session.next_step()
        assert last.is_last
        assert session.crossing_count == 0

        assert session.next_step().index == 2
        assert session.step_index == 2

    def test_previous_clamps(self):
        """Going back stops at the first step and replays its layout."""
        session, _ = make_session()
        session.load_graph("K4")
        session.start_guided()
        session.next_step()
        session.next_step()
        for _ in range(3):
            info = session.previous_step()
        assert info.index == 0
        assert session.crossing_count == 1

    def test_exit_keeps_positions(self):
        """Leaving guided mode keeps the last applied layout."""
        session, _ = make_session()
        session.load_graph("cube")
        session.start_guided()
        session.next_step()
        session.next_step()
        positions = session.graph.positions()
        info = session.exit_guided()
        assert info.is_last
        assert session.state is SessionState.EXPLORE
        assert session.graph.positions() == positions
        assert session.crossing_count == 0

    def test_trace_entries(self):
        """Entering and leaving guided mode are recorded."""
        session, _ = make_session()
        session.load_graph("cube")
        session.start_guided()
        session.exit_guided()
        assert trace_messages(session) == [
            "Loaded Cube Graph",
            "Starting step-by-step solution for Cube Graph",
            "Exited step-by-step solution mode",
        ]

    def test_restart(self):
        """start_guided while guided restarts from the first step."""
        session, _ = make_session()
        session.load_graph("K4")
        session.start_guided()
        session.next_step()
        assert session.start_guided().index == 0

    def test_no_solution(self):
        """Families without a solution cannot enter guided mode."""
        session, _ = make_session()
        for family in ("K5", "K33", "random"):
            session.load_graph(family)
            assert session.start_guided() is None
            assert session.state is SessionState.EXPLORE

    def test_navigation_outside_guided(self):
        """Step navigation is a no-op in explore mode."""
        session, _ = make_session()
        session.load_graph("K4")
        positions = session.graph.positions()
        assert session.next_step() is None
        assert session.previous_step() is None
        assert session.graph.positions() == positions

    def test_step_events(self):
        """Each applied step emits step_changed."""
        session, _ = make_session()
        steps = []
        session.on("step_changed", lambda event: steps.append(event["step"].ordinal))
        session.load_graph("K4")
        session.start_guided()
        session.next_step()
        session.next_step()
        session.next_step()
        assert steps == [1, 2, 3]


class TestCheckPlanarity:
    """Tests for the explicit planarity check."""

    def test_proven_non_planar(self):
        """K5 is reported as non-planar."""
        session, _ = make_session()
        session.load_graph("K5")
        report = session.check_planarity()
        assert report.outcome is PlanarityOutcome.NON_PLANAR
        assert report.crossing_count == 5
        assert report.is_proven_non_planar
        assert not report.is_known_planar
        entry = session.learning_trace()[-1]
        assert entry.message == "Complete Graph K₅ is proven non-planar"
        assert entry.category is TraceCategory.INFO

    def test_has_crossings(self):
        """Known-planar graphs with crossings get encouragement."""
        session, _ = make_session()
        session.load_graph("K4")
        report = session.check_planarity()
        assert report.outcome is PlanarityOutcome.HAS_CROSSINGS
        assert report.crossing_count == 1
        assert report.is_known_planar
        entry = session.learning_trace()[-1]
        assert entry.message == "1 crossings detected - keep trying!"
        assert entry.category is TraceCategory.WARNING

    def test_success_celebrates_immediately(self):
        """A crossing-free known-planar layout celebrates without the delay."""
        session, _ = make_session()
        celebrations = []
        session.on("celebrate", celebrations.append)
        session.load_graph("K4")
        session.start_guided()
        session.next_step()
        session.next_step()
        report = session.check_planarity()
        assert report.outcome is PlanarityOutcome.SUCCESS
        assert report.message == (
            "Perfect! This graph is planar and you found a crossing-free layout!"
        )
        assert session.celebrating
        assert len(celebrations) == 1
        assert session.learning_trace()[-1].message == (
            "Successfully drew Complete Graph K₄ without crossings!"
        )

    def test_random_success(self):
        """A single-vertex random graph is trivially crossing-free."""
        session, _ = make_session(vertex_count=1)
        celebrations = []
        session.on("celebrate", celebrations.append)
        session.load_graph("random")
        report = session.check_planarity()
        assert report.outcome is PlanarityOutcome.SUCCESS
        assert not report.is_known_planar
        assert report.message == "Excellent! No crossings detected in current layout!"
        assert celebrations[0]["message"] == (
            "Great work! You found a planar layout for this random graph!"
        )

    def test_celebration_messages(self):
        """Non-planar families never celebrate."""
        assert celebration_message(GraphFamily.COMPLETE_K5) is None
        assert celebration_message(GraphFamily.COMPLETE_BIPARTITE_33) is None
        assert celebration_message(None) is None
        assert "Cube Graph" in celebration_message(GraphFamily.CUBE)


class TestLearningTrace:
    """Tests for the learning trace."""

    def test_newest_first(self):
        """The trace can be read in reverse order."""
        session, _ = make_session()
        session.load_graph("K4")
        session.check_planarity()
        newest = [e.message for e in session.learning_trace(newest_first=True)]
        assert newest == list(reversed(trace_messages(session)))

    def test_clear(self):
        """Clearing empties the trace."""
        session, _ = make_session()
        session.load_graph("K4")
        session.clear_learning_trace()
        assert session.learning_trace() == []


class TestEvents:
    """Tests for event subscription."""

    def test_on_returns_self(self):
        """on() supports chaining."""
        session = Session()
        assert session.on("graph_loaded", lambda e: None) is session

    def test_unknown_event_name(self):
        """Unknown event names raise KeyError."""
        with pytest.raises(KeyError):
            Session().on("exploded", lambda e: None)

    def test_load_event_order(self):
        """Loading clears the trace, recomputes, announces, then records."""
        session, _ = make_session()
        events = record_events(session)
        session.load_graph("K4")
        assert [e["type"] for e in events] == [
            SessionEventType.trace_updated,
            SessionEventType.crossings_changed,
            SessionEventType.graph_loaded,
            SessionEventType.trace_updated,
        ]
        assert events[1]["crossings"] == [Crossing(1, 4)]
        assert events[2]["family"] is GraphFamily.COMPLETE_K4

    def test_guided_events(self):
        """Guided playback announces start and exit."""
        session, _ = make_session()
        session.load_graph("K4")
        events = record_events(session)
        session.start_guided()
        session.exit_guided()
        types = [e["type"] for e in events]
        assert SessionEventType.guided_started in types
        assert SessionEventType.guided_exited in types
        assert types.index(SessionEventType.guided_started) < types.index(
            SessionEventType.step_changed
        )

    def test_repr(self):
        """repr summarizes the state."""
        session, _ = make_session()
        assert repr(session) == "Session(state=idle, family=None, crossings=0)"
        session.load_graph("K4")
        assert repr(session) == "Session(state=explore, family='K4', crossings=1)"
