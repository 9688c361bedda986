"""Rendering: matplotlib output of mosaics (static, animated) and the edge guide."""

from hexcube.rendering.animated import render_mpl_animation
from hexcube.rendering.interactive import render_guide_interactive
from hexcube.rendering.static import render_mpl

__all__ = [
    "render_guide_interactive",
    "render_mpl",
    "render_mpl_animation",
]
