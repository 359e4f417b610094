"""Shared pytest fixtures for swirl tests."""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import numpy as np
import pytest

from swirl.config import build_config


class SequenceRng:
    """Stand-in for numpy's Generator that hands out scripted values."""

    def __init__(self, ints=(), floats=()):
        self.ints = list(ints)
        self.floats = list(floats)
        self.int_calls = []

    def integers(self, low, high=None, endpoint=False):
        self.int_calls.append((low, high, endpoint))
        return self.ints.pop(0)

    def uniform(self, low=0.0, high=1.0):
        return self.floats.pop(0)


# =============================================================================
# Config Fixtures
# =============================================================================


@pytest.fixture
def config():
    """Default config (50 particles, ember palette)."""
    return build_config()


@pytest.fixture
def pursuit_config():
    """Fixed radius 10, no rotation, full-step pursuit."""
    return build_config(
        factor={"inner": 10, "outer": 10},
        rotation_speed=0,
        follow_speed=1,
    )["particle"]


# =============================================================================
# Randomness Fixtures
# =============================================================================


@pytest.fixture
def seeded_rng():
    return np.random.default_rng(1234)


@pytest.fixture
def scripted_rng():
    """factor=10, angle=3, hue=25, lightness=50, line width=4.0."""
    return SequenceRng(ints=[10, 3, 25, 50], floats=[4.0])


@pytest.fixture
def sequence_rng():
    """Factory for scripted random sources."""
    return SequenceRng
