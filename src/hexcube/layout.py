"""Text-to-grid layout on a staggered grid of pointy-top hexagons.

Cells touch edge to edge.  Odd rows are shifted right by half a cell
width and rows are ``0.75 * H`` apart, so neighbouring rows interlock.
Coordinates are in the same units as *cell_size*, with the origin at
the top-left of the container and *y* growing downwards.
"""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass

import numpy as np

_ROW_PITCH = 0.75
"""Row spacing as a fraction of the hexagon height."""


@dataclass(frozen=True)
class CellPlacement:
    """One character placed in the grid.

    Attributes:
        char: The (upper-cased) character.
        x: Cell centre, horizontal.
        y: Cell centre, vertical.
        row: Grid row, counting line breaks and wraps.
        column: Column within the row.
        index: Position of the character in the upper-cased text.
    """

    char: str
    x: float
    y: float
    row: int
    column: int
    index: int


@dataclass(frozen=True)
class GridLayout:
    """Result of :func:`layout`.

    Attributes:
        placements: One entry per non-newline character, in input order.
        height: Total height of the grid, or 0 when nothing was placed.
        columns: Cells per row used for wrapping.
        cell_size: Hexagon circumradius used for the layout.
        rows: Rows counted for *height*.
    """

    placements: tuple[CellPlacement, ...] = ()
    height: float = 0.0
    columns: int = 1
    cell_size: float = 0.0
    rows: int = 0

    @property
    def hex_width(self) -> float:
        """Flat-to-flat width of one hexagon."""
        return hex_width(self.cell_size)

    def __len__(self) -> int:
        return len(self.placements)

    def __iter__(self):
        return iter(self.placements)


def hex_width(cell_size: float) -> float:
    """Bounding width of a pointy-top hexagon with circumradius *cell_size*."""
    return math.sqrt(3) * cell_size


def hex_height(cell_size: float) -> float:
    """Bounding height of a pointy-top hexagon with circumradius *cell_size*."""
    return 2 * cell_size


def column_count(cell_size: float, container_width: float) -> int:
    """Number of whole hexagons that fit across *container_width*.

    A quarter of a hexagon width is reserved before dividing, and the
    result is never less than 1.  An infinite container never wraps.
    """
    w = hex_width(cell_size)
    if not 0 < w < math.inf or not container_width > 0:
        return 1
    if container_width == math.inf:
        return sys.maxsize
    cols = math.floor((container_width - w / 4) / w)
    return max(1, cols)


def layout(text: str, cell_size: float, container_width: float) -> GridLayout:
    """Place each character of *text* in a hexagonal grid.

    The text is upper-cased first.  A line break starts a new row and
    takes no cell; any other character that would overflow the row
    wraps to the next one.

    Args:
        text: Raw input text.
        cell_size: Hexagon circumradius.
        container_width: Width available for the grid.

    Returns:
        A :class:`GridLayout`.  Empty text, a *cell_size* that is not
        positive and finite, or a *container_width* that is not
        positive give an empty layout of height 0.  An infinite
        *container_width* puts every line on a single row.
    """
    size_ok = 0 < cell_size < math.inf
    if not size_ok or not container_width > 0:
        return GridLayout(cell_size=cell_size if size_ok else 0.0)

    w = hex_width(cell_size)
    h = hex_height(cell_size)
    cols = column_count(cell_size, container_width)

    placements: list[CellPlacement] = []
    row = 0
    col = 0
    for i, char in enumerate(text.upper()):
        if char == "\n":
            row += 1
            col = 0
            continue

        if col >= cols:
            row += 1
            col = 0

        x_offset = (row % 2) * w / 2
        x = col * w + x_offset + w / 2
        y = row * h * _ROW_PITCH + h / 2
        placements.append(CellPlacement(char, x, y, row, col, i))
        col += 1

    if not placements:
        return GridLayout(columns=cols, cell_size=cell_size)

    # Trailing line breaks still count towards the height.
    rows = row + 1
    height = rows * h * _ROW_PITCH + h * (1 - _ROW_PITCH)
    return GridLayout(
        placements=tuple(placements),
        height=height,
        columns=cols,
        cell_size=cell_size,
        rows=rows,
    )


def hexagon_points(cell_size: float) -> np.ndarray:
    """Corners of a pointy-top hexagon centred on the origin.

    Corners sit at 30, 90, ..., 330 degrees.

    Returns:
        Array of shape ``(6, 2)``.
    """
    angles = np.radians(60.0 * np.arange(6) + 30.0)
    return np.column_stack([
        cell_size * np.cos(angles),
        cell_size * np.sin(angles),
    ])
