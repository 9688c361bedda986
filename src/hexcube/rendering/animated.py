"""Animated export of the flicker effect via matplotlib animation."""

from __future__ import annotations

import logging
import math
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.animation import FuncAnimation

from hexcube.flicker import _resolve_rng
from hexcube.layout import layout
from hexcube.model import RenderParams
from hexcube.rendering.painter import _apply_flicker
from hexcube.rendering.static import (
    DEFAULT_WIDTH,
    _draw_grid,
    _new_mosaic_figure,
    _resolve_params,
)

logger = logging.getLogger(__name__)


def render_mpl_animation(
    text: str,
    output: str | Path | None = None,
    *,
    params: RenderParams | None = None,
    width: float = DEFAULT_WIDTH,
    dpi: int = 100,
    duration: float = 4.0,
    fps: int = 20,
    include_background: bool = True,
    seed: int | np.random.Generator | None = None,
    **param_kwargs: object,
) -> FuncAnimation:
    """Render *text* with flickering glyph edges as an animation.

    Each frame sets the opacity of every flickering edge from its
    own delay and cycle length.  With ``flicker_speed == 0`` every
    frame is identical.

    Args:
        text: Text to render.
        output: Optional output path.  ``.gif`` is written with the
            Pillow writer; other extensions use matplotlib's default
            movie writer (usually ffmpeg).
        params: Visual parameters; keyword overrides as for
            :func:`~hexcube.rendering.static.render_mpl`.
        width: Container width in layout units.
        dpi: Resolution; also fixes the figure size.
        duration: Length of the animation in seconds.
        fps: Frames per second.
        include_background: Whether to paint the background.
        seed: Seed or generator for the flicker selection.
        **param_kwargs: :class:`RenderParams` overrides.

    Returns:
        The :class:`~matplotlib.animation.FuncAnimation`.  When
        *output* is given the animation is saved and its figure
        closed.

    Raises:
        ValueError: If there is nothing to draw, *duration* or *fps*
            is not positive, or *width* is not positive and finite.
    """
    resolved = _resolve_params(params, **param_kwargs)
    if duration <= 0:
        raise ValueError(f"duration must be positive, got {duration}")
    if fps <= 0:
        raise ValueError(f"fps must be positive, got {fps}")
    if not 0 < width < math.inf:
        raise ValueError(f"width must be positive and finite, got {width}")

    grid = layout(text, resolved.hexagon_size, width)
    if not grid.placements:
        raise ValueError("text contains no characters to render")

    rng = _resolve_rng(seed)

    fig, ax = _new_mosaic_figure(
        width, grid.height, dpi, resolved, include_background,
    )

    artists = _draw_grid(ax, grid, resolved, width, rng)
    n_frames = max(1, round(duration * fps))

    def _update(frame: int):
        _apply_flicker(artists, resolved, frame / fps)
        return [artists.flicker] if artists.flicker is not None else []

    anim = FuncAnimation(
        fig, _update, frames=n_frames, interval=1000.0 / fps, blit=False,
    )

    if output is not None:
        writer = "pillow" if Path(output).suffix.lower() == ".gif" else None
        anim.save(str(output), writer=writer, fps=fps, dpi=dpi)
        logger.info("Animation saved to: %s (%d frames)", output, n_frames)
        plt.close(fig)

    return anim
