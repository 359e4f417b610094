"""Particles swirling around a point that chases the pointer."""

from swirl.config import DEFAULT_CONFIG, PALETTES, ConfigError, build_config
from swirl.particle import Particle
from swirl.scene import Pointer, Scene
from swirl.vector2d import Vector2D

__all__ = [
    "DEFAULT_CONFIG",
    "PALETTES",
    "ConfigError",
    "Particle",
    "Pointer",
    "Scene",
    "Vector2D",
    "build_config",
]
