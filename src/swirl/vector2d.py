"""A mutable 2D vector with allocating and in-place operations.

Every operation comes in one of two flavours:

  - allocating (`add`, `multiply_scalar`, `normalize`, `clone`, ...) returns
    a new Vector2D and leaves the receiver untouched
  - in-place (`add_self`, `multiply_scalar_self`, `rotate`, `copy`, ...)
    mutates the receiver and returns it so calls can be chained

Division follows IEEE float semantics: dividing by zero gives inf or nan
instead of raising.
"""

import math
from collections.abc import Mapping

import numpy as np


def _divide(numerator, denominator):
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


def _quotient_or_one(numerator, denominator):
    quotient = _divide(numerator, denominator)
    if quotient == 0 or math.isnan(quotient):
        return 1.0
    return quotient


def _whole(func, value):
    """Apply floor/ceil to finite values only (inf and nan pass through)."""
    if not math.isfinite(value):
        return value
    return float(func(value))


def _format(value):
    """Number to text the way a browser prints it (1e+21, 1e-7, NaN)."""
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    if 1e-6 <= abs(value) < 1e21:
        return np.format_float_positional(value, trim="-")
    return np.format_float_scientific(value, trim="-", exp_digits=1)


def _coordinates(point):
    if isinstance(point, Mapping):
        return point["x"], point["y"]
    return point.x, point.y


class Vector2D:
    """A point or direction in 2D space."""

    __slots__ = ("x", "y")

    def __init__(self, x=0.0, y=0.0):
        self.x = x
        self.y = y

    @classmethod
    def from_object(cls, obj):
        """Build a vector from a mapping or any object with `x` and `y`.

        Missing or None coordinates default to 0.
        """
        if isinstance(obj, Mapping):
            x, y = obj.get("x"), obj.get("y")
        else:
            x, y = getattr(obj, "x", None), getattr(obj, "y", None)
        return cls(0.0 if x is None else x, 0.0 if y is None else y)

    # --- Derived properties ---

    @property
    def width(self):
        return self.x

    @property
    def height(self):
        return self.y

    @property
    def magnitude(self):
        return math.sqrt(self.x * self.x + self.y * self.y)

    @property
    def length(self):
        return self.magnitude

    @property
    def direction(self):
        """Angle from the positive x axis in radians, in (-pi, pi]."""
        return math.atan2(self.y, self.x)

    @property
    def angle(self):
        return self.direction

    @property
    def direction_degrees(self):
        return self.direction * 180 / math.pi

    @property
    def angle_degrees(self):
        return self.direction_degrees

    @property
    def absolute_x(self):
        return abs(self.x)

    @property
    def absolute_y(self):
        return abs(self.y)

    def set(self, x, y=None):
        """Set both axes. With a single argument both axes get `x`."""
        self.x = x
        self.y = x if y is None else y
        return self

    # --- Vector arithmetic ---

    def add(self, vector):
        return Vector2D(self.x + vector.x, self.y + vector.y)

    def add_self(self, vector):
        self.x += vector.x
        self.y += vector.y
        return self

    def subtract(self, vector):
        return Vector2D(self.x - vector.x, self.y - vector.y)

    def subtract_self(self, vector):
        self.x -= vector.x
        self.y -= vector.y
        return self

    def multiply(self, vector):
        return Vector2D(self.x * vector.x, self.y * vector.y)

    def multiply_self(self, vector):
        self.x *= vector.x
        self.y *= vector.y
        return self

    def divide(self, vector):
        return Vector2D(_divide(self.x, vector.x), _divide(self.y, vector.y))

    def divide_self(self, vector):
        self.x = _divide(self.x, vector.x)
        self.y = _divide(self.y, vector.y)
        return self

    # --- Scalar arithmetic ---
    # A second scalar applies to y only; without it both axes use the first.

    def add_scalar(self, scalar, scalar2=None):
        scalar2 = scalar if scalar2 is None else scalar2
        return Vector2D(self.x + scalar, self.y + scalar2)

    def add_scalar_self(self, scalar, scalar2=None):
        self.x += scalar
        self.y += scalar if scalar2 is None else scalar2
        return self

    def subtract_scalar(self, scalar, scalar2=None):
        scalar2 = scalar if scalar2 is None else scalar2
        return Vector2D(self.x - scalar, self.y - scalar2)

    def subtract_scalar_self(self, scalar, scalar2=None):
        self.x -= scalar
        self.y -= scalar if scalar2 is None else scalar2
        return self

    def multiply_scalar(self, scalar, scalar2=None):
        scalar2 = scalar if scalar2 is None else scalar2
        return Vector2D(self.x * scalar, self.y * scalar2)

    def multiply_scalar_self(self, scalar, scalar2=None):
        self.x *= scalar
        self.y *= scalar if scalar2 is None else scalar2
        return self

    def divide_scalar(self, scalar, scalar2=None):
        scalar2 = scalar if scalar2 is None else scalar2
        return Vector2D(_divide(self.x, scalar), _divide(self.y, scalar2))

    def divide_scalar_self(self, scalar, scalar2=None):
        self.x = _divide(self.x, scalar)
        self.y = _divide(self.y, scalar if scalar2 is None else scalar2)
        return self

    # --- Products and distances ---

    def dot_product(self, vector):
        return self.x * vector.x + self.y * vector.y

    def cross_product(self, vector):
        """Scalar z-component of the 3D cross product."""
        return self.x * vector.y - self.y * vector.x

    def distance(self, vector):
        dx = self.x - vector.x
        dy = self.y - vector.y
        return math.sqrt(dx * dx + dy * dy)

    # --- In-place transforms ---

    def lerp(self, vector, alpha):
        """Move toward `vector` by `alpha` (0 stays put, 1 lands on it)."""
        self.x += (vector.x - self.x) * alpha
        self.y += (vector.y - self.y) * alpha
        return self

    def rotate(self, point, angle):
        """Rotate around the pivot `point` by `angle` degrees, clockwise.

        `point` may be a vector or a mapping with "x" and "y" keys. The
        y formula is cos*dy - sin*dx, so a positive angle turns (1, 0)
        into (0, -1) around the origin.
        """
        px, py = _coordinates(point)
        radians = (math.pi / 180) * angle
        cos = math.cos(radians)
        sin = math.sin(radians)

        dx = self.x - px
        dy = self.y - py
        self.x = cos * dx + sin * dy + px
        self.y = cos * dy - sin * dx + py
        return self

    def ceil(self):
        self.x = _whole(math.ceil, self.x)
        self.y = _whole(math.ceil, self.y)
        return self

    def floor(self):
        self.x = _whole(math.floor, self.x)
        self.y = _whole(math.floor, self.y)
        return self

    def round(self):
        """Round half up on both axes (2.5 -> 3, -2.5 -> -2)."""
        self.x = _whole(math.floor, self.x + 0.5)
        self.y = _whole(math.floor, self.y + 0.5)
        return self

    def min(self, vector):
        """Clamp each axis down to `vector`'s value where it is smaller."""
        if self.x > vector.x:
            self.x = vector.x
        if self.y > vector.y:
            self.y = vector.y
        return self

    def max(self, vector):
        """Clamp each axis up to `vector`'s value where it is larger."""
        if self.x < vector.x:
            self.x = vector.x
        if self.y < vector.y:
            self.y = vector.y
        return self

    def clear(self):
        self.x = 0.0
        self.y = 0.0
        return self

    def invert(self):
        self.x *= -1
        self.y *= -1
        return self

    def normalize(self):
        """Return a new vector divided by this vector's magnitude.

        Any axis whose quotient comes out 0 or nan is replaced by 1, so
        the zero vector normalizes to (1, 1) and (0, 5) to (1, 1).
        """
        magnitude = self.magnitude
        return Vector2D(
            _quotient_or_one(self.x, magnitude),
            _quotient_or_one(self.y, magnitude),
        )

    def copy(self, vector):
        self.x = vector.x
        self.y = vector.y
        return self

    def clone(self):
        return Vector2D(self.x, self.y)

    def equals(self, vector):
        return self.x == vector.x and self.y == vector.y

    # --- Conversion ---

    def to_array(self):
        return [self.x, self.y]

    def to_object(self):
        return {"x": self.x, "y": self.y}

    def to_string(self):
        return f"x: {_format(self.x)}, y: {_format(self.y)}"

    def __iter__(self):
        yield self.x
        yield self.y

    def __eq__(self, other):
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"Vector2D({self.x!r}, {self.y!r})"
