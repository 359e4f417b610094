"""A single swirling particle.

Each particle orbits a pursuit target that eases toward the pointer. The
orbit radius is the particle's radius factor, and so is its angular speed:
bigger orbits spin faster.
"""

import math

import numpy as np
import pygame

from swirl.vector2d import Vector2D


# --- Random helpers ---
# `rng` is anything with numpy Generator's integers()/uniform().


def random_int(rng, low, high):
    """Uniform integer in [ceil(low), floor(high)], both ends included."""
    return int(rng.integers(math.ceil(low), math.floor(high), endpoint=True))


def random_float(rng, low, high):
    return float(rng.uniform(low, high))


# --- Colour ---


def hsl_color(hue, lightness):
    """Fully saturated colour for `hue` (any real, wrapped mod 360) and
    `lightness` in percent."""
    color = pygame.Color(0, 0, 0)
    color.hsla = (hue % 360, 100, lightness, 100)
    return color


class Particle:
    def __init__(self, position, config, rng=None):
        if rng is None:
            rng = np.random.default_rng()
        self.config = config

        self.radius_factor = random_int(
            rng, config["factor"]["inner"], config["factor"]["outer"]
        )

        self.position = Vector2D.from_object(position)
        self.velocity = Vector2D().set(self.radius_factor)

        self.angle = random_int(rng, 0, math.pi * 2)
        hue = config["color"]["hue"]
        lightness = config["color"]["lightness"]
        self.hue = random_int(rng, hue["min"], hue["max"])
        self.lightness = random_int(rng, lightness["min"], lightness["max"])
        self.line_width = random_float(
            rng, config["line_width"]["min"], config["line_width"]["max"]
        )

        self.last_position = self.position.clone()
        self.last_mouse_position = self.position.clone()

    def draw(self, surface):
        """Advance the hue and stroke last_position -> position."""
        self.hue += self.config["changing_hue_speed"]
        pygame.draw.line(
            surface,
            hsl_color(self.hue, self.lightness),
            self.last_position.to_array(),
            self.position.to_array(),
            max(1, round(self.line_width)),
        )

    def update(self, pointer):
        """Ease the pursuit target toward `pointer` and orbit around it.

        `pointer` is a mapping or object with optional `x`/`y`. Absent
        coordinates read as 0, and a zero-length pointer vector leaves the
        pursuit target where it is.
        """
        self.last_position.copy(self.position)
        self.angle += self.radius_factor * self.config["rotation_speed"]

        pointer_vector = Vector2D.from_object(pointer)
        difference = pointer_vector.subtract(self.last_mouse_position)
        step = difference.multiply_scalar(self.config["follow_speed"])
        if pointer_vector.length != 0:
            self.last_mouse_position.add_self(step)

        offset = self.velocity.multiply_scalar(math.cos(self.angle), math.sin(self.angle))
        self.position.copy(self.last_mouse_position.add(offset))

    def __repr__(self):
        return (
            f"Particle(position={self.position!r}, factor={self.radius_factor}, "
            f"angle={self.angle:.3f}, hue={self.hue})"
        )
