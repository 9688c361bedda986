from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from functools import cache

from hexcube._constants import FONT_SCALE_DIVISOR
from hexcube.model.colour import Colour, normalise_colour

_COLOUR_FIELDS = frozenset({
    "thick_colour", "thin_colour", "vertex_colour", "grid_colour", "background",
})
_OPACITY_FIELDS = ("thin_opacity", "grid_opacity")
_NON_NEGATIVE_FIELDS = (
    "thin_stroke", "thick_stroke", "vertex_size",
    "grid_stroke_width", "flicker_speed",
)


@cache
def _field_defaults(cls: type) -> dict:
    """Map each field of dataclass *cls* that has a plain default to it."""
    return {
        f.name: f.default
        for f in dataclasses.fields(cls)
        if f.default is not dataclasses.MISSING
    }


@dataclass(frozen=True)
class RenderParams:
    """Visual parameters for painting a hexagon mosaic.

    Sizes and stroke widths are in the same units as the layout (one
    unit per output pixel at the default DPI).  A stroke or size of
    zero switches that layer off rather than raising.

    Attributes:
        hexagon_size: Hexagon circumradius (centre to corner).
        hexagon_gap: Inset between the hexagon outline and the glyph.
            Only affects the glyph scale, never the cell positions;
            may be negative to let glyphs overflow their cells.
        thin_stroke: Line width of the full 12-edge cube skeleton.
        thick_stroke: Line width of the glyph edges.  Also sets the
            radius (half the width) of the glyph vertex dots.
        vertex_size: Diameter of the 8 skeleton vertex dots.
        thin_opacity: Opacity of the skeleton edges and vertex dots.
        thick_colour: Glyph edge and glyph vertex colour.
        thin_colour: Skeleton edge colour.
        vertex_colour: Skeleton vertex dot colour.
        flicker_speed: Flicker cycles per two seconds.  Zero disables
            flicker regardless of *flicker_amount*.
        flicker_amount: Percentage of each glyph's edges that flicker.
        grid_colour: Hexagon outline colour.
        grid_stroke_width: Hexagon outline width; zero hides the grid.
        grid_opacity: Hexagon outline opacity.
        background: Background fill used when the background is
            included in the output.
    """

    hexagon_size: float = 80.0
    hexagon_gap: float = 5.0
    thin_stroke: float = 1.0
    thick_stroke: float = 4.0
    vertex_size: float = 1.0
    thin_opacity: float = 0.1
    thick_colour: Colour = "#FFFFFF"
    thin_colour: Colour = "#FFFFFF"
    vertex_colour: Colour = "#FFFFFF"
    flicker_speed: float = 0.0
    flicker_amount: float = 25.0
    grid_colour: Colour = "#4A5568"
    grid_stroke_width: float = 1.0
    grid_opacity: float = 0.2
    background: Colour = "#000000"

    def __post_init__(self) -> None:
        if self.hexagon_size <= 0:
            raise ValueError(
                f"hexagon_size must be positive, got {self.hexagon_size}"
            )
        for name in _NON_NEGATIVE_FIELDS:
            val = getattr(self, name)
            if val < 0:
                raise ValueError(f"{name} must be non-negative, got {val}")
        for name in _OPACITY_FIELDS:
            val = getattr(self, name)
            if not 0.0 <= val <= 1.0:
                raise ValueError(f"{name} must be in [0, 1], got {val}")
        if not 0.0 <= self.flicker_amount <= 100.0:
            raise ValueError(
                f"flicker_amount must be in [0, 100], got {self.flicker_amount}"
            )
        for name in sorted(_COLOUR_FIELDS):
            normalise_colour(getattr(self, name))

    @property
    def font_scale(self) -> float:
        """Scale applied to the cube glyph inside each cell."""
        return max(0.0, (self.hexagon_size - self.hexagon_gap) / FONT_SCALE_DIVISOR)

    @property
    def flicker_enabled(self) -> bool:
        """Whether any glyph edges can flicker with these parameters."""
        return self.flicker_speed > 0 and self.flicker_amount > 0

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary.

        Fields at their default values are omitted.
        """
        defaults = _field_defaults(type(self))
        d: dict = {}
        for key, default in defaults.items():
            val = getattr(self, key)
            if key in _COLOUR_FIELDS:
                if normalise_colour(val) == normalise_colour(default):
                    continue
                d[key] = list(val) if isinstance(val, tuple) else val
            elif val != default:
                d[key] = val
        return d

    @classmethod
    def from_dict(cls, d: dict) -> RenderParams:
        """Deserialise from a dictionary.

        Raises:
            ValueError: If *d* contains keys that are not
                :class:`RenderParams` fields.
        """
        defaults = _field_defaults(cls)
        unknown = set(d) - set(defaults)
        if unknown:
            raise ValueError(
                f"unknown render parameter(s): {sorted(unknown)}"
            )
        kwargs: dict = {}
        for key, val in d.items():
            if key in _COLOUR_FIELDS and isinstance(val, list):
                val = tuple(val)
            kwargs[key] = val
        return cls(**kwargs)
