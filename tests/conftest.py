"""Shared test fixtures for hexcube."""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from hexcube.scheduler import ManualScheduler


@pytest.fixture
def scheduler():
    """Return a scheduler with a fake clock starting at zero."""
    return ManualScheduler()


@pytest.fixture
def rng():
    """Return a seeded random generator."""
    return np.random.default_rng(1234)
