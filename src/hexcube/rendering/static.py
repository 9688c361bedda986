"""Static matplotlib renderer: :func:`render_mpl` entry point."""

from __future__ import annotations

import dataclasses
import logging
import math
from pathlib import Path
from typing import Any

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from hexcube.flicker import _resolve_rng
from hexcube.layout import GridLayout, layout
from hexcube.model import RenderParams, normalise_colour
from hexcube.rendering.painter import (
    MosaicArtists,
    _draw_mosaic,
    _mosaic_flicker,
    _set_mosaic_limits,
)

logger = logging.getLogger(__name__)

_PARAM_FIELDS = frozenset(f.name for f in dataclasses.fields(RenderParams))

DEFAULT_WIDTH = 1000.0
"""Default container width in output pixels."""


def _resolve_params(
    params: RenderParams | None,
    **kwargs: Any,
) -> RenderParams:
    """Build :class:`RenderParams` from an optional base plus overrides.

    Any kwarg whose name matches a ``RenderParams`` field replaces that
    field's value.  Passing ``None`` is treated as "not provided".

    Raises:
        TypeError: If a kwarg name does not match any ``RenderParams``
            field.
    """
    unknown = kwargs.keys() - _PARAM_FIELDS
    if unknown:
        raise TypeError(
            f"Unknown render parameter(s): {', '.join(sorted(unknown))}"
        )

    p = params if params is not None else RenderParams()
    overrides = {k: v for k, v in kwargs.items() if v is not None}
    if overrides:
        p = dataclasses.replace(p, **overrides)
    return p


def _draw_grid(
    ax: Axes,
    grid: GridLayout,
    params: RenderParams,
    width: float,
    rng: np.random.Generator,
) -> MosaicArtists:
    """Paint a laid-out *grid* onto *ax*, framing the whole grid."""
    flicker = _mosaic_flicker(grid, params, rng)
    artists = _draw_mosaic(ax, grid, params, flicker=flicker)
    _set_mosaic_limits(ax, width, grid.height)
    return artists


def _new_mosaic_figure(
    width: float,
    height: float,
    dpi: int,
    params: RenderParams,
    include_background: bool,
) -> tuple[Figure, Axes]:
    """Create a figure whose single axes fills it edge to edge."""
    fig = plt.figure(figsize=(width / dpi, height / dpi), dpi=dpi)
    ax = fig.add_axes((0.0, 0.0, 1.0, 1.0))
    if include_background:
        bg_rgb = normalise_colour(params.background)
        fig.set_facecolor(bg_rgb)
        ax.set_facecolor(bg_rgb)
    else:
        fig.patch.set_alpha(0.0)
        ax.patch.set_alpha(0.0)
    return fig, ax


def render_mpl(
    text: str,
    output: str | Path | None = None,
    *,
    ax: Axes | None = None,
    params: RenderParams | None = None,
    width: float = DEFAULT_WIDTH,
    dpi: int = 100,
    include_background: bool = True,
    show: bool | None = None,
    seed: int | np.random.Generator | None = None,
    **param_kwargs: object,
) -> Figure:
    """Render *text* as a hexagon-cube mosaic.

    The figure is sized so that one layout unit is one pixel at
    *dpi*: a *width* of 1000 at 100 dpi gives a 10-inch-wide figure.

    Flickering edges cannot move in a still image; they are drawn at
    full opacity in their own collection whose id starts with
    ``"flicker-line"``, which SVG output preserves.

    Example usage::

        from hexcube import render_mpl

        # Save to file (no interactive window):
        render_mpl("HELLO\\nWORLD", "hello.svg")

        # Bigger cells, transparent background, gold glyphs:
        render_mpl("HEX", "hex.png", hexagon_size=120,
                   thick_colour="#FFAA00", include_background=False)

    Args:
        text: Text to render; ``"\\n"`` starts a new row.
        output: Optional file path to save the figure.  The format is
            inferred from the extension (e.g. ``.svg``, ``.pdf``,
            ``.png``).  Ignored when *ax* is provided.
        ax: Optional matplotlib ``Axes`` to draw into.  The caller
            then owns the figure; *output*, *dpi*,
            *include_background*, and *show* are ignored.
        params: Visual parameters.  Any :class:`RenderParams` field
            name may also be passed as a keyword argument to override
            individual fields.
        width: Container width in layout units.
        dpi: Resolution; also fixes the figure size.
        include_background: Whether to paint ``params.background``
            behind the grid.  When ``False`` the saved file has a
            transparent background.
        show: Whether to call ``plt.show()``.  Defaults to ``True``
            when *output* is ``None``.
        seed: Seed or generator for the flicker selection.
        **param_kwargs: :class:`RenderParams` overrides.

    Returns:
        The matplotlib :class:`~matplotlib.figure.Figure`.

    Raises:
        ValueError: If *text* contains nothing to draw (it is empty or
            only line breaks) or *width* is not positive and finite.
        TypeError: If an unknown keyword argument is given.
    """
    resolved = _resolve_params(params, **param_kwargs)
    if not 0 < width < math.inf:
        raise ValueError(f"width must be positive and finite, got {width}")

    grid = layout(text, resolved.hexagon_size, width)
    if not grid.placements:
        raise ValueError("text contains no characters to render")

    rng = _resolve_rng(seed)

    if ax is not None:
        fig = ax.get_figure()
        if not isinstance(fig, Figure):
            raise ValueError("ax is not attached to a Figure")
        _draw_grid(ax, grid, resolved, width, rng)
        return fig

    fig, ax = _new_mosaic_figure(
        width, grid.height, dpi, resolved, include_background,
    )

    artists = _draw_grid(ax, grid, resolved, width, rng)
    logger.debug(
        "Rendered %d cells in %d columns (%d flickering edges)",
        len(grid), grid.columns, len(artists.flicker_timings),
    )

    if output is not None:
        fig.savefig(
            str(output), dpi=dpi,
            facecolor=fig.get_facecolor(),
            transparent=not include_background,
        )
        logger.info("Mosaic saved to: %s", output)

    if show is None:
        show = output is None

    if show:
        plt.show()
    else:
        plt.close(fig)

    return fig
