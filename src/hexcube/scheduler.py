"""Cancellable delayed and per-frame callbacks.

:class:`Scheduler` is the interface used by
:class:`~hexcube.rotation.RotationSession`.  Two implementations are
provided:

- :class:`ManualScheduler` advances a fake clock on demand, for tests
  and headless use.
- :class:`MatplotlibScheduler` drives callbacks from timers on a
  matplotlib figure canvas.

Every handle returned by a scheduler can be cancelled any number of
times, before or after it has fired.
"""

from __future__ import annotations

import heapq
import itertools
import time
from collections.abc import Callable
from typing import Any

from hexcube._constants import FRAME_INTERVAL

FrameCallback = Callable[[float], None]
"""Per-frame callback; receives the scheduler clock in seconds."""


class ScheduledCall:
    """Handle for a scheduled callback.

    Cancelling is idempotent: cancelling a handle that has already
    fired or been cancelled does nothing.
    """

    def __init__(self, on_cancel: Callable[[], None] | None = None) -> None:
        self._cancelled = False
        self._finished = False
        self._on_cancel = on_cancel

    @property
    def active(self) -> bool:
        """``True`` until the call fires (one-shot) or is cancelled."""
        return not (self._cancelled or self._finished)

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        """Prevent any further invocation of the callback."""
        if not self.active:
            return
        self._cancelled = True
        if self._on_cancel is not None:
            on_cancel, self._on_cancel = self._on_cancel, None
            on_cancel()

    def _finish(self) -> None:
        self._finished = True
        self._on_cancel = None


class Scheduler:
    """Interface for cooperative scheduling of callbacks."""

    def now(self) -> float:
        """Current clock value in seconds."""
        raise NotImplementedError

    def schedule_after(
        self, delay: float, callback: Callable[[], None],
    ) -> ScheduledCall:
        """Call *callback* once after *delay* seconds."""
        raise NotImplementedError

    def schedule_each_frame(self, callback: FrameCallback) -> ScheduledCall:
        """Call *callback* on every frame until the handle is cancelled."""
        raise NotImplementedError


def _check_delay(delay: float) -> None:
    if delay < 0:
        raise ValueError(f"delay must be non-negative, got {delay}")


class ManualScheduler(Scheduler):
    """Scheduler with a fake clock that only moves when told to.

    Example::

        sched = ManualScheduler()
        handle = sched.schedule_after(2.0, fire)
        sched.advance(1.0)    # nothing happens
        sched.advance(1.0)    # fire() is called
        sched.run_frames(10)  # ten frame callbacks at 60 fps

    Args:
        start: Initial clock value in seconds.
        frame_interval: Clock step used by :meth:`step_frame` when no
            explicit step is given.
    """

    def __init__(
        self, start: float = 0.0, frame_interval: float = FRAME_INTERVAL,
    ) -> None:
        self._now = float(start)
        self.frame_interval = frame_interval
        self._timers: list[tuple[float, int, ScheduledCall, Callable[[], None]]] = []
        self._frames: list[tuple[ScheduledCall, FrameCallback]] = []
        self._seq = itertools.count()

    def now(self) -> float:
        return self._now

    def schedule_after(
        self, delay: float, callback: Callable[[], None],
    ) -> ScheduledCall:
        _check_delay(delay)
        handle = ScheduledCall()
        heapq.heappush(
            self._timers, (self._now + delay, next(self._seq), handle, callback),
        )
        return handle

    def schedule_each_frame(self, callback: FrameCallback) -> ScheduledCall:
        handle = ScheduledCall()
        self._frames.append((handle, callback))
        return handle

    @property
    def pending_timers(self) -> int:
        """Number of one-shot callbacks still waiting to fire."""
        return sum(1 for _, _, handle, _ in self._timers if handle.active)

    @property
    def frame_callbacks(self) -> int:
        """Number of active per-frame callbacks."""
        return sum(1 for handle, _ in self._frames if handle.active)

    def advance(self, seconds: float) -> None:
        """Move the clock forward, firing due one-shot callbacks in order.

        Frame callbacks are not run; use :meth:`step_frame` for those.
        """
        _check_delay(seconds)
        target = self._now + seconds
        while self._timers and self._timers[0][0] <= target:
            due, _, handle, callback = heapq.heappop(self._timers)
            if not handle.active:
                continue
            self._now = max(self._now, due)
            handle._finish()
            callback()
        self._now = target

    def step_frame(self, dt: float | None = None) -> None:
        """Advance by one frame, then run every active frame callback once.

        Callbacks registered during this step, including by timers that
        fire while the clock advances, first run on the next.
        """
        frames = list(self._frames)
        self.advance(self.frame_interval if dt is None else dt)
        for handle, callback in frames:
            if handle.active:
                callback(self._now)
        self._frames = [(h, cb) for h, cb in self._frames if h.active]

    def run_frames(self, n: int, dt: float | None = None) -> None:
        """Call :meth:`step_frame` *n* times."""
        for _ in range(n):
            self.step_frame(dt)


class MatplotlibScheduler(Scheduler):
    """Scheduler backed by timers on a matplotlib figure canvas.

    Callbacks run on the GUI event loop of the canvas, so they never
    overlap with mouse event handlers.

    Args:
        canvas: A matplotlib ``FigureCanvasBase``.
        frame_interval: Seconds between frame callbacks.
    """

    def __init__(self, canvas: Any, frame_interval: float = FRAME_INTERVAL) -> None:
        self.canvas = canvas
        self.frame_interval = frame_interval

    def now(self) -> float:
        return time.monotonic()

    def schedule_after(
        self, delay: float, callback: Callable[[], None],
    ) -> ScheduledCall:
        _check_delay(delay)
        timer = self.canvas.new_timer(interval=max(1, int(delay * 1000)))
        timer.single_shot = True
        handle = ScheduledCall(on_cancel=timer.stop)

        def _fire() -> None:
            if not handle.active:
                return
            handle._finish()
            callback()

        timer.add_callback(_fire)
        timer.start()
        return handle

    def schedule_each_frame(self, callback: FrameCallback) -> ScheduledCall:
        timer = self.canvas.new_timer(
            interval=max(1, int(self.frame_interval * 1000)),
        )
        handle = ScheduledCall(on_cancel=timer.stop)

        def _tick() -> None:
            if handle.active:
                callback(self.now())

        timer.add_callback(_tick)
        timer.start()
        return handle
