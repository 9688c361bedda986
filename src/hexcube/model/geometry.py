"""Fixed wireframe cube: vertices, edge topology, and orientations."""

from __future__ import annotations

import math
from dataclasses import dataclass

from hexcube._constants import CUBE_HALF_EXTENT


@dataclass(frozen=True)
class Point3D:
    """A point in cube object space.

    Attributes:
        x: Horizontal coordinate.
        y: Vertical coordinate ("up" in object space).
        z: Depth coordinate.
    """

    x: float
    y: float
    z: float


@dataclass(frozen=True)
class Point2D:
    """A projected screen-space offset from a cell centre.

    Screen *y* grows downwards, as in SVG and image coordinates.
    """

    x: float
    y: float


@dataclass(frozen=True)
class Rotation3D:
    """Cube orientation as Euler angles in radians.

    Attributes:
        x: Pitch, about the horizontal axis.
        y: Yaw, about the vertical axis.
        z: Roll.  Carried through interpolation but not applied by
            :func:`~hexcube.projection.project`.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def lerp(self, target: Rotation3D, t: float) -> Rotation3D:
        """Linearly interpolate each axis towards *target*.

        ``t = 0`` returns ``self`` and ``t = 1`` returns *target* (up
        to rounding; callers that need the exact target should use it
        directly).
        """
        return Rotation3D(
            x=self.x + (target.x - self.x) * t,
            y=self.y + (target.y - self.y) * t,
            z=self.z + (target.z - self.z) * t,
        )


_S = CUBE_HALF_EXTENT

# Vertex order is load-bearing: edges, glyph tables, and the guide
# overlay all refer to vertices and edges by index.
CUBE_VERTICES: tuple[Point3D, ...] = (
    Point3D(-_S, -_S, -_S),
    Point3D(_S, -_S, -_S),
    Point3D(_S, _S, -_S),
    Point3D(-_S, _S, -_S),
    Point3D(-_S, -_S, _S),
    Point3D(_S, -_S, _S),
    Point3D(_S, _S, _S),
    Point3D(-_S, _S, _S),
)
"""The 8 cube corners at ``(±S, ±S, ±S)``."""

CUBE_EDGES: tuple[tuple[int, int], ...] = (
    # Back face cycle (z = -S).
    (0, 1), (1, 2), (2, 3), (3, 0),
    # Front face cycle (z = +S).
    (4, 5), (5, 6), (6, 7), (7, 4),
    # Connecting edges.
    (0, 4), (1, 5), (2, 6), (3, 7),
)
"""The 12 cube edges as pairs of indices into :data:`CUBE_VERTICES`."""

TARGET_ROTATION = Rotation3D(x=math.atan(1 / math.sqrt(2)), y=math.pi / 4, z=0.0)
"""Canonical isometric orientation used for every grid glyph."""

EDGE_NUMBER_MAP: tuple[int, ...] = (11, 7, 6, 5, 3, 2, 8, 10, 4, 9, 1, 12)
"""Label shown on the edge guide for each internal edge index."""


def edge_label(index: int) -> int:
    """Return the guide label for edge *index*.

    Raises:
        IndexError: If *index* is not in ``range(12)``.
    """
    if not 0 <= index < len(CUBE_EDGES):
        raise IndexError(f"edge index must be in [0, 11], got {index}")
    return EDGE_NUMBER_MAP[index]
