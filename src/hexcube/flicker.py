"""Random flicker: which glyph edges pulse, and with what timing.

Selection is deliberately re-randomised every time it is computed, so
identical parameters can show a different subset of flickering
edges.  Randomness comes from an injected
:class:`numpy.random.Generator`; pass a seeded generator for
reproducible output.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

import numpy as np

from hexcube._constants import FLICKER_MIN_OPACITY, FLICKER_PERIOD


@dataclass(frozen=True)
class FlickerTiming:
    """Animation timing for one flickering edge.

    Attributes:
        delay: Seconds before the edge starts flickering.
        duration: Seconds per flicker cycle.
    """

    delay: float
    duration: float


@dataclass(frozen=True)
class FlickerState:
    """Flickering edges of one glyph instance and their timings."""

    timings: Mapping[int, FlickerTiming] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @property
    def edges(self) -> frozenset[int]:
        """Edge indices that flicker."""
        return frozenset(self.timings)

    def __contains__(self, edge: object) -> bool:
        return edge in self.timings

    def __len__(self) -> int:
        return len(self.timings)

    def opacity(self, edge: int, t: float) -> float:
        """Opacity of *edge* at time *t*; 1.0 for non-flickering edges."""
        timing = self.timings.get(edge)
        if timing is None:
            return 1.0
        return flicker_opacity(t, timing.delay, timing.duration)


def _resolve_rng(rng: np.random.Generator | int | None) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def flicker_count(n_edges: int, intensity: float) -> int:
    """Number of edges that flicker for a glyph with *n_edges* edges.

    Rounds up, so any positive intensity flickers at least one edge,
    and never exceeds *n_edges*.  A NaN intensity flickers nothing.
    """
    if n_edges <= 0 or not intensity > 0:
        return 0
    return math.ceil(n_edges * min(intensity, 100.0) / 100)


def select_flicker(
    edges: Sequence[int],
    intensity: float,
    rng: np.random.Generator | int | None = None,
) -> frozenset[int]:
    """Pick a uniformly random subset of *edges* to flicker.

    Args:
        edges: The glyph's edge indices.
        intensity: Percentage of edges to flicker.  Values at or
            below zero select nothing; values above 100 select all.
        rng: Random generator, or a seed for a new one.

    Returns:
        The selected edge indices.
    """
    n = flicker_count(len(edges), intensity)
    if n == 0:
        return frozenset()
    picks = _resolve_rng(rng).choice(len(edges), size=n, replace=False)
    return frozenset(edges[int(i)] for i in picks)


def flicker_state(
    edges: Sequence[int],
    intensity: float,
    speed: float,
    rng: np.random.Generator | int | None = None,
) -> FlickerState:
    """Select flickering edges and give each a random start delay.

    A *speed* at or below zero disables flicker entirely.  Each
    selected edge cycles every ``FLICKER_PERIOD / speed`` seconds,
    offset by an independent delay in ``[0, 1)`` seconds.
    """
    if speed <= 0:
        return FlickerState()
    gen = _resolve_rng(rng)
    selected = select_flicker(edges, intensity, gen)
    duration = FLICKER_PERIOD / speed
    # Delays are drawn in glyph order.
    timings = {
        edge: FlickerTiming(delay=float(gen.random()), duration=duration)
        for edge in edges
        if edge in selected
    }
    return FlickerState(MappingProxyType(timings))


def _ease_in_out(s: float) -> float:
    return s * s * (3.0 - 2.0 * s)


def flicker_opacity(t: float, delay: float, duration: float) -> float:
    """Opacity of a flickering edge at time *t* seconds.

    Each cycle eases from fully opaque down to
    ``FLICKER_MIN_OPACITY`` at its midpoint and back.  Before *delay*
    the edge is fully opaque.
    """
    if duration <= 0 or t < delay:
        return 1.0
    phase = ((t - delay) % duration) / duration
    s = 2.0 * phase if phase < 0.5 else 2.0 * (1.0 - phase)
    return 1.0 - (1.0 - FLICKER_MIN_OPACITY) * _ease_in_out(s)
