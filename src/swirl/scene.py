"""The scene driver: pointer sample, particle set and per-frame pass."""

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np
import pygame

from swirl.config import build_config
from swirl.particle import Particle
from swirl.vector2d import Vector2D

logger = logging.getLogger(__name__)


@dataclass
class Pointer:
    """Latest pointer position in surface space, or absent (both None)."""

    x: Optional[float] = None
    y: Optional[float] = None

    @property
    def present(self):
        return self.x is not None and self.y is not None

    def move(self, x, y):
        self.x = x
        self.y = y

    def clear(self):
        self.x = None
        self.y = None

    def to_object(self):
        return {"x": self.x, "y": self.y}


def to_surface_coordinates(position, bounds, size):
    """Map a device position inside the window rect `bounds` onto a surface
    of `size` pixels."""
    bounds = pygame.Rect(bounds)
    width, height = size
    cx, cy = position
    x = (cx - bounds.left) / (bounds.right - bounds.left) * width
    y = (cy - bounds.top) / (bounds.bottom - bounds.top) * height
    return x, y


class Scene:
    """Owns the particles and the pointer sample for one drawing surface.

    Call `handle_event` for every pygame event, then `frame` once per
    display refresh.
    """

    def __init__(self, size, config=None, rng=None):
        self.size = (int(size[0]), int(size[1]))
        self.rng = np.random.default_rng() if rng is None else rng
        self.pointer = Pointer()
        self.bounds = pygame.Rect((0, 0), self.size)
        self.respawn(build_config() if config is None else config)

    @property
    def center(self):
        return Vector2D(self.size[0] / 2, self.size[1] / 2)

    def respawn(self, config=None):
        """Start over with a fresh particle set, optionally under a new config."""
        if config is not None:
            self.config = config
            self._fade = self._build_fade_layer()
        particle_config = self.config["particle"]
        center = self.center
        self.particles = [
            Particle(center, particle_config, self.rng)
            for _ in range(particle_config["amount"])
        ]
        self.tick = 0
        logger.info(
            "Spawned %d particles at %s on a %dx%d surface",
            len(self.particles),
            center,
            *self.size,
        )

    def _build_fade_layer(self):
        scene = self.config["scene"]
        color = pygame.Color(scene["color"])
        color.a = int(scene["alpha"])
        layer = pygame.Surface(self.size, pygame.SRCALPHA)
        layer.fill(color)
        return layer

    def clear(self, surface):
        """Paint the surface with the opaque scene colour."""
        surface.fill(pygame.Color(self.config["scene"]["color"]))

    def frame(self, surface):
        """Fade the previous frames, then draw and advance every particle."""
        surface.blit(self._fade, (0, 0))
        pointer = self.pointer.to_object()
        for particle in self.particles:
            particle.draw(surface)
            particle.update(pointer)
        self.tick += 1

    def handle_event(self, event):
        """Feed pointer events into the sample. Returns True if consumed."""
        if event.type == pygame.MOUSEMOTION:
            self.pointer.move(*to_surface_coordinates(event.pos, self.bounds, self.size))
            return True
        if event.type == pygame.WINDOWLEAVE:
            if self.pointer.present:
                logger.debug(
                    "Pointer left the surface at (%.0f, %.0f)", self.pointer.x, self.pointer.y
                )
            self.pointer.clear()
            return True
        return False
