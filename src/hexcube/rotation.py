"""Drag-to-rotate state machine for the edge guide cube.

Dragging rotates the cube directly.  Releasing it arms a dwell timer;
when the timer fires, the cube eases back to the canonical rotation
over a fixed duration.  Starting a new drag at any point cancels both
the timer and any return animation, and the cube continues from
wherever it was.

States::

    IDLE --start_drag--> DRAGGING --end_drag--> PENDING_RETURN
    PENDING_RETURN --dwell elapsed--> RETURNING --progress 1--> IDLE
    PENDING_RETURN / RETURNING --start_drag--> DRAGGING
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import StrEnum

from hexcube._constants import DRAG_SENSITIVITY, DWELL_DELAY, RETURN_DURATION
from hexcube.model import TARGET_ROTATION, Rotation3D
from hexcube.scheduler import ScheduledCall, Scheduler

logger = logging.getLogger(__name__)


class RotationState(StrEnum):
    """Phase of a :class:`RotationSession`.

    Attributes:
        IDLE: Resting; no drag, timer, or animation.
        DRAGGING: Pointer held down; moves rotate the cube.
        PENDING_RETURN: Drag released; dwell timer armed.
        RETURNING: Easing back to the target rotation.
    """

    IDLE = "idle"
    DRAGGING = "dragging"
    PENDING_RETURN = "pending_return"
    RETURNING = "returning"


def ease_out_cubic(progress: float) -> float:
    """Cubic ease-out: fast start, gentle finish."""
    return 1 - (1 - progress) ** 3


class RotationSession:
    """Live rotation of the edge guide cube and its pointer interaction.

    The session is owned by one guide window.  Call :meth:`cancel`
    when the window closes so that no scheduled callback fires
    afterwards.

    Args:
        scheduler: Source of the dwell timer and animation frames.
        target: Rotation to return to after a drag.
        sensitivity: Radians per pixel of pointer movement.
        dwell: Seconds to wait after a drag before returning.
        duration: Seconds taken by the return animation.
        on_change: Called with the new rotation whenever it changes.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        *,
        target: Rotation3D = TARGET_ROTATION,
        sensitivity: float = DRAG_SENSITIVITY,
        dwell: float = DWELL_DELAY,
        duration: float = RETURN_DURATION,
        on_change: Callable[[Rotation3D], None] | None = None,
    ) -> None:
        if duration <= 0:
            raise ValueError(f"duration must be positive, got {duration}")
        if dwell < 0:
            raise ValueError(f"dwell must be non-negative, got {dwell}")
        self.scheduler = scheduler
        self.target = target
        self.sensitivity = sensitivity
        self.dwell = dwell
        self.duration = duration
        self.on_change = on_change

        self._rotation = target
        self._state = RotationState.IDLE
        self._last_pos: tuple[float, float] | None = None
        self._dwell_handle: ScheduledCall | None = None
        self._frame_handle: ScheduledCall | None = None
        self._return_start: Rotation3D = target
        self._return_t0 = 0.0

    # ---- Observables ----

    @property
    def rotation(self) -> Rotation3D:
        """Current live rotation."""
        return self._rotation

    @property
    def state(self) -> RotationState:
        return self._state

    @property
    def is_active(self) -> bool:
        """``True`` while a drag is in progress."""
        return self._state is RotationState.DRAGGING

    @property
    def is_animating(self) -> bool:
        """``True`` while the return animation is running."""
        return self._state is RotationState.RETURNING

    # ---- Pointer events ----

    def start_drag(self, x: float, y: float) -> None:
        """Begin a drag at pointer position ``(x, y)``.

        Cancels any pending return and any return animation; the
        rotation stays where it currently is.
        """
        self._cancel_scheduled()
        self._last_pos = (x, y)
        self._set_state(RotationState.DRAGGING)

    def move_drag(self, x: float, y: float) -> None:
        """Rotate by the pointer movement since the previous event.

        Horizontal movement changes yaw; vertical movement changes
        pitch, with upward movement tilting the top towards the
        viewer.  Ignored unless a drag is in progress.
        """
        if self._state is not RotationState.DRAGGING or self._last_pos is None:
            return
        x0, y0 = self._last_pos
        dx = x - x0
        dy = y - y0
        self._last_pos = (x, y)
        r = self._rotation
        self._set_rotation(Rotation3D(
            x=r.x - dy * self.sensitivity,
            y=r.y + dx * self.sensitivity,
            z=r.z,
        ))

    def end_drag(self) -> None:
        """Release the drag and arm the dwell timer.

        Ignored unless a drag is in progress.
        """
        if self._state is not RotationState.DRAGGING:
            return
        self._last_pos = None
        self._dwell_handle = self.scheduler.schedule_after(
            self.dwell, self._begin_return,
        )
        self._set_state(RotationState.PENDING_RETURN)

    def cancel(self) -> None:
        """Tear down: cancel the dwell timer and any animation.

        The rotation is left where it is.  Safe to call repeatedly.
        """
        self._cancel_scheduled()
        self._last_pos = None
        self._set_state(RotationState.IDLE)

    # ---- Return animation ----

    def _begin_return(self) -> None:
        self._dwell_handle = None
        if self._state is not RotationState.PENDING_RETURN:
            return
        self._return_start = self._rotation
        self._return_t0 = self.scheduler.now()
        self._set_state(RotationState.RETURNING)
        self._frame_handle = self.scheduler.schedule_each_frame(self._animate)

    def _animate(self, now: float) -> None:
        if self._state is not RotationState.RETURNING:
            return
        progress = min((now - self._return_t0) / self.duration, 1.0)
        if progress < 1.0:
            eased = ease_out_cubic(progress)
            self._set_rotation(self._return_start.lerp(self.target, eased))
            return
        # Land exactly on the target.
        self._cancel_scheduled()
        self._set_rotation(self.target)
        self._set_state(RotationState.IDLE)

    # ---- Internals ----

    def _cancel_scheduled(self) -> None:
        if self._dwell_handle is not None:
            self._dwell_handle.cancel()
            self._dwell_handle = None
        if self._frame_handle is not None:
            self._frame_handle.cancel()
            self._frame_handle = None

    def _set_state(self, state: RotationState) -> None:
        if state is not self._state:
            logger.debug("Rotation session: %s -> %s", self._state, state)
            self._state = state

    def _set_rotation(self, rotation: Rotation3D) -> None:
        self._rotation = rotation
        if self.on_change is not None:
            self.on_change(rotation)
