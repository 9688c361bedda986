"""Rotation helpers and orthographic projection of the cube."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from hexcube.model import CUBE_VERTICES, TARGET_ROTATION, Point2D, Point3D, Rotation3D


def rotation_x(angle: float) -> np.ndarray:
    """Rotation matrix about the X axis by *angle* radians."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([
        [1.0, 0.0, 0.0],
        [0.0,   c,  -s],
        [0.0,   s,   c],
    ])


def rotation_y(angle: float) -> np.ndarray:
    """Rotation matrix about the Y axis by *angle* radians."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([
        [ c,  0.0,  s],
        [0.0, 1.0, 0.0],
        [-s,  0.0,  c],
    ])


def rotation_z(angle: float) -> np.ndarray:
    """Rotation matrix about the Z axis by *angle* radians."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([
        [  c,  -s, 0.0],
        [  s,   c, 0.0],
        [0.0, 0.0, 1.0],
    ])


def rotation_matrix(rotation: Rotation3D) -> np.ndarray:
    """Combined view matrix: yaw about Y first, then pitch about X.

    Roll is not applied.
    """
    return rotation_x(rotation.x) @ rotation_y(rotation.y)


def project(point: Point3D, rotation: Rotation3D) -> Point2D:
    """Project a cube-space point to a 2D offset from the cell centre.

    The point is rotated by yaw and then pitch, depth is discarded,
    and the vertical axis is flipped so that object-space "up" is
    screen-space "up".
    """
    v = np.array([point.x, point.y, point.z])
    rotated = rotation_x(rotation.x) @ (rotation_y(rotation.y) @ v)
    return Point2D(float(rotated[0]), float(-rotated[1]))


def project_vertices(
    rotation: Rotation3D = TARGET_ROTATION,
    vertices: Sequence[Point3D] = CUBE_VERTICES,
) -> np.ndarray:
    """Project many points at once.

    Args:
        rotation: Cube orientation.
        vertices: Points to project; defaults to the 8 cube corners.

    Returns:
        Array of shape ``(n, 2)`` of screen-space offsets, row *i*
        matching ``project(vertices[i], rotation)``.
    """
    coords = np.array([[p.x, p.y, p.z] for p in vertices], dtype=float)
    if len(coords) == 0:
        return np.empty((0, 2))
    rotated = coords @ rotation_y(rotation.y).T @ rotation_x(rotation.x).T
    xy = rotated[:, :2].copy()
    xy[:, 1] = -xy[:, 1]
    return xy


# Every grid glyph shares the canonical orientation.
_CANONICAL_XY = project_vertices(TARGET_ROTATION)
_CANONICAL_XY.flags.writeable = False


def canonical_vertices() -> np.ndarray:
    """Return the read-only ``(8, 2)`` projection at the canonical rotation."""
    return _CANONICAL_XY
