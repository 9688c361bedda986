"""Core data model for hexcube: cube geometry, colours, and parameters.

Everything is re-exported here so that ``from hexcube.model import
RenderParams`` works regardless of which submodule defines it.
"""

from hexcube.model.colour import Colour, colour_to_hex, normalise_colour
from hexcube.model.editor_state import EditorState
from hexcube.model.geometry import (
    CUBE_EDGES,
    CUBE_VERTICES,
    EDGE_NUMBER_MAP,
    TARGET_ROTATION,
    Point2D,
    Point3D,
    Rotation3D,
    edge_label,
)
from hexcube.model.render_params import RenderParams

__all__ = [
    "CUBE_EDGES",
    "CUBE_VERTICES",
    "Colour",
    "EDGE_NUMBER_MAP",
    "EditorState",
    "Point2D",
    "Point3D",
    "RenderParams",
    "Rotation3D",
    "TARGET_ROTATION",
    "colour_to_hex",
    "edge_label",
    "normalise_colour",
]
