"""Shared constants used across the model, animation, and rendering layers."""

CUBE_HALF_EXTENT: float = 50.0
"""Half the side length of the wireframe cube, in glyph units."""

FONT_SCALE_DIVISOR: float = 100.0
"""A glyph drawn at scale 1 fills a cell whose inner size is this value."""

DRAG_SENSITIVITY: float = 0.01
"""Radians of rotation per pixel of pointer movement."""

DWELL_DELAY: float = 2.0
"""Seconds between the end of a drag and the start of the return animation."""

RETURN_DURATION: float = 0.6
"""Seconds taken by the eased return to the canonical rotation."""

FRAME_INTERVAL: float = 1.0 / 60.0
"""Target interval between animation frames, in seconds."""

FLICKER_PERIOD: float = 2.0
"""Flicker cycle length in seconds at a flicker speed of 1."""

FLICKER_MIN_OPACITY: float = 0.2
"""Opacity at the midpoint of a flicker cycle."""
