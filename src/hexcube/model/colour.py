"""Colour values accepted by the render parameters."""

from __future__ import annotations

from matplotlib.colors import to_hex, to_rgb

Colour = str | float | tuple[float, float, float] | list[float]
"""Any of: a CSS name or hex string (``"white"``, ``"#4A5568"``), a grey
level in ``[0, 1]``, or an ``(r, g, b)`` sequence with components in
``[0, 1]``."""

_RGB_NAMES = ("r", "g", "b")


def _unit(value: float, what: str) -> float:
    f = float(value)
    if not 0.0 <= f <= 1.0:
        raise ValueError(f"{what} must be in [0, 1], got {f}")
    return f


def normalise_colour(colour: Colour) -> tuple[float, float, float]:
    """Convert *colour* to an ``(r, g, b)`` tuple of floats in [0, 1].

    Raises:
        ValueError: If the colour cannot be interpreted.  Booleans are
            rejected even though they are numbers.
    """
    if isinstance(colour, bool):
        raise ValueError(f"Cannot interpret colour: {colour!r}")

    if isinstance(colour, str):
        try:
            return to_rgb(colour)
        except ValueError:
            raise ValueError(f"Unrecognised colour name: {colour!r}") from None

    if isinstance(colour, (int, float)):
        grey = _unit(colour, "Grey value")
        return (grey, grey, grey)

    if isinstance(colour, (tuple, list)):
        if len(colour) != 3:
            raise ValueError(
                f"RGB sequence must have 3 elements, got {len(colour)}"
            )
        r, g, b = (
            _unit(c, f"RGB component {name}")
            for c, name in zip(colour, _RGB_NAMES)
        )
        return (r, g, b)

    raise ValueError(f"Cannot interpret colour: {colour!r}")


def colour_to_hex(colour: Colour) -> str:
    """Return *colour* as an upper-case ``#RRGGBB`` string."""
    return to_hex(normalise_colour(colour)).upper()
