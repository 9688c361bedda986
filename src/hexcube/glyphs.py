"""Glyph dictionary: which cube edges draw each character.

Each glyph is an ordered list of edge indices into
:data:`~hexcube.model.CUBE_EDGES`.  The tables are a hand-designed
font and cannot be derived from the characters.  Order within a
glyph does not change how it looks, but it is kept stable so that
seeded flicker sampling is reproducible.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from hexcube.model import CUBE_EDGES

ALPHABET_GLYPHS: Mapping[str, tuple[int, ...]] = MappingProxyType({
    " ": (),
    "A": (3, 2, 10, 5),
    "B": (1, 10, 6, 9, 4, 7),
    "C": (10, 2, 3, 8, 4),
    "D": (1, 10, 5, 4, 7),
    "E": (2, 11, 0, 8),
    "F": (10, 1, 9, 7),
    "G": (10, 2, 3, 8, 4, 9),
    "H": (3, 5),
    "I": (1, 7),
    "J": (1, 7, 8),
    "K": (1, 7, 6, 9),
    "L": (1, 7, 4),
    "M": (3, 11, 6, 5),
    "N": (3, 11, 9, 5),
    "O": (10, 5, 4, 8, 3, 2),
    "P": (7, 1, 10, 6),
    "Q": (10, 5, 4, 8, 3, 2, 9),
    "R": (7, 1, 10, 6, 9),
    "S": (2, 11, 0),
    "T": (2, 10, 1, 7),
    "U": (3, 8, 4, 5),
    "V": (11, 9, 5),
    "W": (3, 0, 9, 5),
    "X": (11, 9, 0, 6),
    "Y": (11, 6, 7),
    "Z": (10, 6, 0, 8),
    "*": (1, 6, 9, 7, 0, 11),
})
"""Letters, space, and the ``*`` wildcard."""

DIGIT_GLYPHS: Mapping[str, tuple[int, ...]] = MappingProxyType({
    "0": (10, 5, 4, 8, 3, 2),
    "1": (2, 1, 7),
    "2": (2, 10, 6, 0, 8, 4),
    "3": (10, 6, 9, 4),
    "4": (3, 0, 1, 7),
    "5": (10, 2, 11, 9, 4, 8),
    "6": (10, 2, 3, 8, 4, 9, 0),
    "7": (2, 10, 6, 7),
    "8": (2, 10, 11, 6, 0, 9, 8, 4),
    "9": (6, 11, 2, 10, 5, 4, 8),
})


def is_digit(char: str) -> bool:
    """Return ``True`` if *char* is looked up in the digit table."""
    return char.isdecimal()


def glyph_edges(char: str) -> list[int]:
    """Return the edge indices that draw *char*.

    Letters are matched case-insensitively; digits and symbols are
    matched exactly.  Characters outside both tables (including
    multi-character strings) give an empty list and render as a bare
    cell.
    """
    if is_digit(char):
        return list(DIGIT_GLYPHS.get(char, ()))
    return list(ALPHABET_GLYPHS.get(char.upper(), ()))


def active_vertices(edges: Iterable[int]) -> frozenset[int]:
    """Return the vertex indices touched by *edges*.

    These are the vertices that get a foreground dot when the glyph
    is drawn.
    """
    vertices: set[int] = set()
    for index in edges:
        i, j = CUBE_EDGES[index]
        vertices.add(i)
        vertices.add(j)
    return frozenset(vertices)


def supported_characters() -> frozenset[str]:
    """Return every character that has a glyph definition."""
    return frozenset(ALPHABET_GLYPHS) | frozenset(DIGIT_GLYPHS)
