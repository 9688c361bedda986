"""Paint hexagon cells and their cube glyphs onto a matplotlib axes.

All strokes are drawn as filled polygons in data coordinates, so line
widths scale with the layout exactly as sizes do.  One unit of layout
is one output pixel at the figure's DPI.

Within a cell the painting order is: grid hexagon, cube skeleton
edges, skeleton vertex dots, glyph edges, glyph vertex dots.  Glyph
vertex dots have the same radius as half the glyph stroke, which
gives the glyph edges round caps.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache

import numpy as np
from matplotlib.axes import Axes
from matplotlib.collections import PolyCollection

from hexcube.flicker import (
    FlickerState,
    FlickerTiming,
    flicker_opacity,
    flicker_state,
)
from hexcube.glyphs import active_vertices, glyph_edges
from hexcube.layout import GridLayout, hexagon_points
from hexcube.model import CUBE_EDGES, RenderParams, normalise_colour
from hexcube.projection import canonical_vertices

_N_CIRCLE = 16
_UNIT_CIRCLE = np.column_stack([
    np.cos(np.linspace(0, 2 * np.pi, _N_CIRCLE + 1)),
    np.sin(np.linspace(0, 2 * np.pi, _N_CIRCLE + 1)),
])

_EDGE_STARTS = np.array([i for i, _ in CUBE_EDGES])
_EDGE_ENDS = np.array([j for _, j in CUBE_EDGES])

FLICKER_GID = "flicker-line"
"""Artist id prefix of flickering glyph edges (visible in SVG output)."""


@dataclass
class MosaicArtists:
    """Collections added to the axes by :func:`_draw_mosaic`.

    Attributes:
        grid: Hexagon outlines, or ``None`` when the grid is hidden.
        skeleton: Skeleton edges and vertex dots.
        glyphs: Steady glyph edges and glyph vertex dots.
        flicker: Flickering glyph edges, one polygon per edge.
        flicker_timings: Timing of each polygon in *flicker*, in order.
    """

    grid: PolyCollection | None = None
    skeleton: PolyCollection | None = None
    glyphs: PolyCollection | None = None
    flicker: PolyCollection | None = None
    flicker_timings: list[FlickerTiming] = field(default_factory=list)


def _segment_polygons(
    starts: np.ndarray, ends: np.ndarray, width: float,
) -> list[np.ndarray]:
    """Expand 2D segments into rectangles of the given full *width*.

    Zero-length segments are dropped.
    """
    polys: list[np.ndarray] = []
    hw = width / 2.0
    for start, end in zip(starts, ends):
        direction = end - start
        length = float(np.linalg.norm(direction))
        if length < 1e-12:
            continue
        offset = np.array([-direction[1], direction[0]]) / length * hw
        polys.append(np.array([
            start + offset,
            end + offset,
            end - offset,
            start - offset,
        ]))
    return polys


def _dot_polygons(centres: np.ndarray, radius: float) -> list[np.ndarray]:
    """Circle polygons of *radius* at each of *centres*."""
    if radius <= 0:
        return []
    return [_UNIT_CIRCLE * radius + c for c in centres]


@lru_cache(maxsize=None)
def _glyph_parts(char: str) -> tuple[tuple[int, ...], tuple[int, ...]]:
    """Edge indices and sorted active vertex indices for *char*."""
    edges = tuple(glyph_edges(char))
    return edges, tuple(sorted(active_vertices(edges)))


def _cube_edge_endpoints(xy: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Start and end points of all 12 cube edges for projected *xy*."""
    return xy[_EDGE_STARTS], xy[_EDGE_ENDS]


def _draw_mosaic(
    ax: Axes,
    grid: GridLayout,
    params: RenderParams,
    *,
    flicker: dict[int, FlickerState] | None = None,
) -> MosaicArtists:
    """Add every cell of *grid* to *ax*.

    Does not set limits or create a figure; the caller owns both.

    Args:
        ax: A matplotlib ``Axes`` with *y* increasing downwards.
        grid: Cell placements from :func:`~hexcube.layout.layout`.
        params: Visual parameters.
        flicker: Flicker state per placement index (position in
            ``grid.placements``).  Missing entries do not flicker.

    Returns:
        The collections that were added.
    """
    flicker = flicker or {}
    artists = MosaicArtists()
    scale = params.font_scale
    hex_outline = hexagon_points(params.hexagon_size)
    base_xy = canonical_vertices() * scale

    grid_polys: list[np.ndarray] = []
    skeleton_polys: list[np.ndarray] = []
    skeleton_colours: list[tuple[float, ...]] = []
    glyph_polys: list[np.ndarray] = []
    flicker_polys: list[np.ndarray] = []

    thin_rgba = (*normalise_colour(params.thin_colour), params.thin_opacity)
    vertex_rgba = (*normalise_colour(params.vertex_colour), params.thin_opacity)

    for n, cell in enumerate(grid.placements):
        centre = np.array([cell.x, cell.y])

        if params.grid_stroke_width > 0:
            outline = hex_outline + centre
            grid_polys.extend(_segment_polygons(
                outline, np.roll(outline, -1, axis=0), params.grid_stroke_width,
            ))

        xy = base_xy + centre
        starts, ends = _cube_edge_endpoints(xy)

        if params.thin_stroke > 0:
            edge_polys = _segment_polygons(starts, ends, params.thin_stroke * scale)
            skeleton_polys.extend(edge_polys)
            skeleton_colours.extend([thin_rgba] * len(edge_polys))

        dots = _dot_polygons(xy, params.vertex_size / 2 * scale)
        skeleton_polys.extend(dots)
        skeleton_colours.extend([vertex_rgba] * len(dots))

        if params.thick_stroke <= 0:
            continue

        edges, vertices = _glyph_parts(cell.char)
        state = flicker.get(n)
        width = params.thick_stroke * scale
        for edge in edges:
            polys = _segment_polygons(
                starts[edge:edge + 1], ends[edge:edge + 1], width,
            )
            if state is not None and edge in state:
                flicker_polys.extend(polys)
                artists.flicker_timings.extend(
                    [state.timings[edge]] * len(polys),
                )
            else:
                glyph_polys.extend(polys)
        glyph_polys.extend(
            _dot_polygons(xy[list(vertices)], params.thick_stroke / 2 * scale),
        )

    if grid_polys:
        artists.grid = PolyCollection(
            grid_polys, closed=True,
            facecolors=[(*normalise_colour(params.grid_colour), params.grid_opacity)],
            edgecolors="none", linewidths=0.0,
        )
        ax.add_collection(artists.grid)

    if skeleton_polys:
        artists.skeleton = PolyCollection(
            skeleton_polys, closed=True,
            facecolors=skeleton_colours, edgecolors="none", linewidths=0.0,
        )
        ax.add_collection(artists.skeleton)

    thick_rgb = normalise_colour(params.thick_colour)
    if glyph_polys:
        artists.glyphs = PolyCollection(
            glyph_polys, closed=True,
            facecolors=[(*thick_rgb, 1.0)], edgecolors="none", linewidths=0.0,
        )
        ax.add_collection(artists.glyphs)

    if flicker_polys:
        artists.flicker = PolyCollection(
            flicker_polys, closed=True,
            facecolors=[(*thick_rgb, 1.0)] * len(flicker_polys),
            edgecolors="none", linewidths=0.0,
        )
        artists.flicker.set_gid(FLICKER_GID)
        ax.add_collection(artists.flicker)

    return artists


def _apply_flicker(
    artists: MosaicArtists, params: RenderParams, t: float,
) -> None:
    """Set each flickering edge's opacity for time *t* seconds."""
    if artists.flicker is None:
        return

    rgb = normalise_colour(params.thick_colour)
    artists.flicker.set_facecolors([
        (*rgb, flicker_opacity(t, timing.delay, timing.duration))
        for timing in artists.flicker_timings
    ])


def _mosaic_flicker(
    grid: GridLayout,
    params: RenderParams,
    rng: np.random.Generator,
) -> dict[int, FlickerState]:
    """Draw a fresh flicker state for every placed glyph."""
    if not params.flicker_enabled:
        return {}

    states: dict[int, FlickerState] = {}
    for n, cell in enumerate(grid.placements):
        edges, _ = _glyph_parts(cell.char)
        state = flicker_state(
            edges, params.flicker_amount, params.flicker_speed, rng,
        )
        if len(state):
            states[n] = state
    return states


def _set_mosaic_limits(ax: Axes, width: float, height: float) -> None:
    """Frame ``[0, width] x [0, height]`` with *y* pointing down."""
    ax.set_aspect("equal")
    ax.set_xlim(0.0, width)
    ax.set_ylim(height, 0.0)
    ax.axis("off")
