"""Hexcube: text rendered as a mosaic of hexagonal cube-wireframe glyphs.

Every character is drawn with a subset of the 12 edges of a cube seen
in isometric projection, and the characters are packed into a
staggered grid of pointy-top hexagons.

Example usage::

    from hexcube import layout, glyph_edges, render_mpl

    grid = layout("HELLO", cell_size=80, container_width=1000)
    for cell in grid:
        print(cell.char, cell.x, cell.y, glyph_edges(cell.char))

    render_mpl("HELLO\\nWORLD", "hello.svg")
"""

from hexcube.flicker import (
    FlickerState,
    FlickerTiming,
    flicker_opacity,
    flicker_state,
    select_flicker,
)
from hexcube.glyphs import (
    ALPHABET_GLYPHS,
    DIGIT_GLYPHS,
    active_vertices,
    glyph_edges,
    supported_characters,
)
from hexcube.layout import CellPlacement, GridLayout, hexagon_points, layout
from hexcube.logging_config import setup_logging
from hexcube.model import (
    CUBE_EDGES,
    CUBE_VERTICES,
    EDGE_NUMBER_MAP,
    TARGET_ROTATION,
    Colour,
    EditorState,
    Point2D,
    Point3D,
    RenderParams,
    Rotation3D,
    edge_label,
    normalise_colour,
)
from hexcube.params_io import load_params, save_params
from hexcube.projection import project, project_vertices
from hexcube.rendering import (
    render_guide_interactive,
    render_mpl,
    render_mpl_animation,
)
from hexcube.rotation import RotationSession, RotationState, ease_out_cubic
from hexcube.scheduler import (
    ManualScheduler,
    MatplotlibScheduler,
    ScheduledCall,
    Scheduler,
)

__all__ = [
    "ALPHABET_GLYPHS",
    "CUBE_EDGES",
    "CUBE_VERTICES",
    "CellPlacement",
    "Colour",
    "DIGIT_GLYPHS",
    "EDGE_NUMBER_MAP",
    "EditorState",
    "FlickerState",
    "FlickerTiming",
    "GridLayout",
    "ManualScheduler",
    "MatplotlibScheduler",
    "Point2D",
    "Point3D",
    "RenderParams",
    "Rotation3D",
    "RotationSession",
    "RotationState",
    "ScheduledCall",
    "Scheduler",
    "TARGET_ROTATION",
    "active_vertices",
    "ease_out_cubic",
    "edge_label",
    "flicker_opacity",
    "flicker_state",
    "glyph_edges",
    "hexagon_points",
    "layout",
    "load_params",
    "normalise_colour",
    "project",
    "project_vertices",
    "render_guide_interactive",
    "render_mpl",
    "render_mpl_animation",
    "save_params",
    "select_flicker",
    "setup_logging",
    "supported_characters",
]
