"""Tests for the callback schedulers."""

from unittest.mock import MagicMock

import pytest

from hexcube.scheduler import ManualScheduler, MatplotlibScheduler, ScheduledCall


class TestScheduledCall:
    def test_cancel_idempotent(self):
        calls = []
        handle = ScheduledCall(on_cancel=lambda: calls.append(1))
        handle.cancel()
        handle.cancel()
        assert handle.cancelled
        assert not handle.active
        assert calls == [1]

    def test_cancel_after_finish_is_noop(self):
        calls = []
        handle = ScheduledCall(on_cancel=lambda: calls.append(1))
        handle._finish()
        handle.cancel()
        assert not handle.cancelled
        assert calls == []


class TestManualSchedulerTimers:
    def test_fires_when_due(self, scheduler):
        fired = []
        scheduler.schedule_after(2.0, lambda: fired.append(scheduler.now()))
        scheduler.advance(1.5)
        assert fired == []
        scheduler.advance(0.5)
        assert fired == [pytest.approx(2.0)]

    def test_fires_in_order(self, scheduler):
        fired = []
        scheduler.schedule_after(3.0, lambda: fired.append("c"))
        scheduler.schedule_after(1.0, lambda: fired.append("a"))
        scheduler.schedule_after(2.0, lambda: fired.append("b"))
        scheduler.advance(10.0)
        assert fired == ["a", "b", "c"]
        assert scheduler.now() == pytest.approx(10.0)

    def test_cancelled_timer_does_not_fire(self, scheduler):
        fired = []
        handle = scheduler.schedule_after(1.0, lambda: fired.append(1))
        handle.cancel()
        scheduler.advance(5.0)
        assert fired == []
        assert scheduler.pending_timers == 0

    def test_fired_handle_inactive(self, scheduler):
        handle = scheduler.schedule_after(0.0, lambda: None)
        scheduler.advance(0.0)
        assert not handle.active
        handle.cancel()
        assert not handle.cancelled

    def test_negative_delay(self, scheduler):
        with pytest.raises(ValueError, match="delay"):
            scheduler.schedule_after(-1.0, lambda: None)

    def test_pending_count(self, scheduler):
        scheduler.schedule_after(1.0, lambda: None)
        scheduler.schedule_after(2.0, lambda: None)
        assert scheduler.pending_timers == 2


class TestManualSchedulerFrames:
    def test_frames_receive_clock(self, scheduler):
        seen = []
        scheduler.schedule_each_frame(seen.append)
        scheduler.run_frames(3, dt=0.1)
        assert seen == [pytest.approx(0.1), pytest.approx(0.2), pytest.approx(0.3)]

    def test_default_frame_interval(self):
        sched = ManualScheduler(frame_interval=0.5)
        sched.step_frame()
        assert sched.now() == pytest.approx(0.5)

    def test_cancel_stops_frames(self, scheduler):
        seen = []
        handle = scheduler.schedule_each_frame(seen.append)
        scheduler.step_frame()
        handle.cancel()
        scheduler.run_frames(5)
        assert len(seen) == 1
        assert scheduler.frame_callbacks == 0

    def test_callback_added_during_frame_runs_next_frame(self, scheduler):
        seen = []

        def first(now):
            seen.append("first")
            scheduler.schedule_each_frame(lambda now: seen.append("second"))

        handle = scheduler.schedule_each_frame(first)
        scheduler.step_frame()
        handle.cancel()
        assert seen == ["first"]
        scheduler.step_frame()
        assert seen == ["first", "second"]

    def test_callback_added_by_timer_runs_next_frame(self, scheduler):
        seen = []
        scheduler.schedule_after(
            0.01,
            lambda: scheduler.schedule_each_frame(seen.append),
        )
        scheduler.step_frame(0.1)
        assert seen == []
        assert scheduler.frame_callbacks == 1
        scheduler.step_frame(0.1)
        assert seen == [pytest.approx(0.2)]

    def test_self_cancel_during_frame(self, scheduler):
        seen = []
        handle = None

        def tick(now):
            seen.append(now)
            handle.cancel()

        handle = scheduler.schedule_each_frame(tick)
        scheduler.run_frames(3)
        assert len(seen) == 1


class TestMatplotlibScheduler:
    def test_schedule_after_uses_single_shot_timer(self):
        canvas = MagicMock()
        timer = canvas.new_timer.return_value
        sched = MatplotlibScheduler(canvas)
        fired = []
        handle = sched.schedule_after(2.0, lambda: fired.append(1))

        canvas.new_timer.assert_called_once_with(interval=2000)
        assert timer.single_shot is True
        timer.start.assert_called_once()

        callback = timer.add_callback.call_args[0][0]
        callback()
        callback()
        assert fired == [1]
        assert not handle.active

    def test_cancel_stops_timer(self):
        canvas = MagicMock()
        timer = canvas.new_timer.return_value
        sched = MatplotlibScheduler(canvas)
        fired = []
        handle = sched.schedule_after(1.0, lambda: fired.append(1))
        handle.cancel()
        timer.stop.assert_called_once()
        timer.add_callback.call_args[0][0]()
        assert fired == []

    def test_frames(self):
        canvas = MagicMock()
        timer = canvas.new_timer.return_value
        sched = MatplotlibScheduler(canvas, frame_interval=0.05)
        seen = []
        handle = sched.schedule_each_frame(seen.append)
        canvas.new_timer.assert_called_once_with(interval=50)
        tick = timer.add_callback.call_args[0][0]
        tick()
        handle.cancel()
        tick()
        assert len(seen) == 1
        timer.stop.assert_called_once()
