"""
Cancellable deferred calls.

The session debounces its "celebrate" feedback with a short settle delay.
Anything exposing ``call_later(delay, callback)`` and returning a handle
with ``cancel()`` can drive it; an ``asyncio`` event loop qualifies.

SettleScheduler is the bundled single-threaded implementation: nothing
runs on its own, the owner calls ``run_due()`` (usually from its frame or
event loop) and due callbacks fire synchronously on that thread.
"""

from __future__ import annotations

import time
from typing import Callable, Optional, Protocol


class Cancellable(Protocol):
    """Handle for a scheduled call."""

    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Anything that can run a callback after a delay."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> Cancellable: ...


class DeferredCall:
    """A callback due at a point on the scheduler's clock."""

    def __init__(self, due: float, callback: Callable[[], None]) -> None:
        self.due = due
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.fired)

    def __repr__(self) -> str:
        state = "cancelled" if self.cancelled else "fired" if self.fired else "pending"
        return f"DeferredCall(due={self.due:.3f}, {state})"


class SettleScheduler:
    """
    Poll-driven scheduler for deferred callbacks.

    Example:
        scheduler = SettleScheduler()
        handle = scheduler.call_later(0.5, on_settled)
        ...
        scheduler.run_due()  # fires on_settled once 0.5s have passed
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None) -> None:
        """
        Initialize scheduler.

        Args:
            clock: Monotonic time source in seconds (default time.monotonic)
        """
        self._clock: Callable[[], float] = clock if clock is not None else time.monotonic
        self._calls: list[DeferredCall] = []

    def now(self) -> float:
        return self._clock()

    def call_later(self, delay: float, callback: Callable[[], None]) -> DeferredCall:
        """Schedule callback to run once ``delay`` seconds have elapsed."""
        call = DeferredCall(self._clock() + max(0.0, delay), callback)
        self._calls.append(call)
        return call

    def run_due(self) -> int:
        """
        Fire every pending call whose due time has passed, oldest first.

        Returns:
            Number of callbacks fired
        """
        now = self._clock()
        due = [c for c in self._calls if c.pending and c.due <= now]
        due.sort(key=lambda c: c.due)
        fired = 0
        for call in due:
            # An earlier callback may have cancelled this one
            if not call.pending:
                continue
            call.fired = True
            call.callback()
            fired += 1
        self._calls = [c for c in self._calls if c.pending]
        return fired

    def cancel_all(self) -> None:
        for call in self._calls:
            call.cancel()
        self._calls = []

    @property
    def pending(self) -> int:
        """Number of calls still waiting."""
        return sum(1 for c in self._calls if c.pending)


__all__ = ["Cancellable", "Scheduler", "DeferredCall", "SettleScheduler"]
