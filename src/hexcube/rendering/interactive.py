"""Interactive edge-numbering guide with drag-to-rotate."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import matplotlib.patheffects as path_effects
import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from hexcube.model import CUBE_EDGES, EDGE_NUMBER_MAP, Rotation3D
from hexcube.projection import project_vertices
from hexcube.rotation import RotationSession
from hexcube.scheduler import MatplotlibScheduler, Scheduler

logger = logging.getLogger(__name__)

_VIEW_EXTENT = 100.0
_EDGE_COLOUR = "#FFFFFF"
_EDGE_LABEL_COLOUR = "#FFAA00"
_VERTEX_COLOUR = "#4299E1"
_VERTEX_LABEL_COLOUR = "#63B3ED"
_PANEL_COLOUR = "#1F2937"
_TITLE_COLOUR = "#60A5FA"

_HELP_TEXT = "Click and drag the cube to rotate."


def _draw_guide(ax: Axes, rotation: Rotation3D) -> None:
    """Draw the labelled cube wireframe at *rotation* onto *ax*.

    Clears *ax* first.  Edges carry their guide number at the
    midpoint; vertices carry their index just above and to the right.
    """
    ax.clear()
    xy = project_vertices(rotation)
    outline = [path_effects.withStroke(linewidth=3, foreground="black")]

    for index, (i, j) in enumerate(CUBE_EDGES):
        (x1, y1), (x2, y2) = xy[i], xy[j]
        ax.plot(
            [x1, x2], [y1, y2],
            color=_EDGE_COLOUR, alpha=0.5, linewidth=1.5,
        )
        ax.text(
            (x1 + x2) / 2, (y1 + y2) / 2, str(EDGE_NUMBER_MAP[index]),
            color=_EDGE_LABEL_COLOUR, fontsize=10, fontweight="bold",
            ha="center", va="center", path_effects=outline,
        )

    ax.scatter(xy[:, 0], xy[:, 1], s=20, color=_VERTEX_COLOUR, zorder=3)
    for index, (x, y) in enumerate(xy):
        ax.text(
            x + 5, y - 5, str(index),
            color=_VERTEX_LABEL_COLOUR, fontsize=8,
            ha="center", va="center",
            path_effects=[path_effects.withStroke(linewidth=2, foreground="black")],
        )

    ax.set_aspect("equal")
    ax.set_xlim(-_VIEW_EXTENT, _VIEW_EXTENT)
    ax.set_ylim(_VIEW_EXTENT, -_VIEW_EXTENT)
    ax.axis("off")


def _connect_guide(
    fig: Figure,
    ax: Axes,
    session: RotationSession,
) -> dict[str, Callable[[Any], None]]:
    """Wire mouse and close events on *fig* to *session*.

    Returns:
        The handlers keyed by matplotlib event name.
    """

    def on_press(event):
        if event.inaxes != ax or event.button != 1:
            return
        # Display y grows upwards; the session expects screen y down.
        session.start_drag(event.x, -event.y)

    def on_motion(event):
        if session.is_active:
            session.move_drag(event.x, -event.y)

    def on_release(event):
        session.end_drag()

    def on_leave(event):
        session.end_drag()

    def on_close(event):
        session.cancel()
        logger.debug("Edge guide closed")

    handlers = {
        "button_press_event": on_press,
        "motion_notify_event": on_motion,
        "button_release_event": on_release,
        "figure_leave_event": on_leave,
        "close_event": on_close,
    }
    for name, handler in handlers.items():
        fig.canvas.mpl_connect(name, handler)
    return handlers


def _setup_guide(
    fig: Figure,
    scheduler: Scheduler | None = None,
) -> tuple[Axes, RotationSession]:
    """Create the guide axes and rotation session on *fig*."""
    fig.set_facecolor(_PANEL_COLOUR)
    fig.suptitle(
        "Edge Numbering Guide", color=_TITLE_COLOUR, fontweight="bold",
    )
    fig.text(0.5, 0.03, _HELP_TEXT, color="#9CA3AF", fontsize=8, ha="center")
    ax = fig.add_axes((0.05, 0.08, 0.9, 0.82))
    ax.set_facecolor(_PANEL_COLOUR)

    def redraw(rotation: Rotation3D) -> None:
        _draw_guide(ax, rotation)
        fig.canvas.draw_idle()

    if scheduler is None:
        scheduler = MatplotlibScheduler(fig.canvas)
    session = RotationSession(scheduler, on_change=redraw)
    _draw_guide(ax, session.rotation)
    _connect_guide(fig, ax, session)
    return ax, session


def render_guide_interactive(
    *,
    figsize: tuple[float, float] = (4.0, 4.4),
    dpi: int = 100,
) -> Rotation3D:
    """Open the edge-numbering guide window.

    Shows the wireframe cube with every edge labelled by its guide
    number and every vertex by its index.  **Left-drag** rotates the
    cube; a couple of seconds after releasing, it eases back to the
    orientation used by the font.  Closing the window stops any
    pending animation.

    Returns:
        The rotation of the cube when the window was closed.
    """
    fig = plt.figure(figsize=figsize, dpi=dpi)
    _, session = _setup_guide(fig)
    plt.show()
    session.cancel()
    return session.rotation
