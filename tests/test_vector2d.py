"""Tests for Vector2D."""

import math

import pytest

from swirl.vector2d import Vector2D


class TestConstruction:
    """Tests for building vectors."""

    def test_defaults_to_origin(self):
        v = Vector2D()
        assert v.x == 0 and v.y == 0

    def test_from_mapping(self):
        v = Vector2D.from_object({"x": 3, "y": -2})
        assert v.to_array() == [3, -2]

    def test_from_object_missing_or_none_reads_zero(self):
        """Absent coordinates fall back to 0."""
        assert Vector2D.from_object({"x": None, "y": None}).equals(Vector2D(0, 0))
        assert Vector2D.from_object({}).equals(Vector2D(0, 0))
        assert Vector2D.from_object({"x": 5}).equals(Vector2D(5, 0))

    def test_from_attribute_object(self):
        v = Vector2D.from_object(Vector2D(1.5, 2.5))
        assert v.to_array() == [1.5, 2.5]

    def test_set_single_argument_broadcasts(self):
        v = Vector2D(1, 2)
        assert v.set(7) is v
        assert v.to_array() == [7, 7]

    def test_set_two_arguments(self):
        assert Vector2D().set(1, 2).to_array() == [1, 2]


class TestDerivedProperties:
    """Tests for magnitude, angle and friends."""

    def test_magnitude_and_length_agree(self):
        v = Vector2D(3, 4)
        assert v.magnitude == 5
        assert v.length == 5

    def test_angle_and_direction(self):
        v = Vector2D(0, 1)
        assert v.angle == pytest.approx(math.pi / 2)
        assert v.direction == v.angle
        assert v.angle_degrees == pytest.approx(90)
        assert v.direction_degrees == v.angle_degrees

    def test_absolute_axes(self):
        v = Vector2D(-3, -4)
        assert v.absolute_x == 3
        assert v.absolute_y == 4

    def test_width_height_alias_axes(self):
        v = Vector2D(640, 480)
        assert (v.width, v.height) == (640, 480)

    def test_huge_components_overflow_to_inf(self):
        """Squares past the float range give inf instead of raising."""
        assert Vector2D(1e200, 1e200).magnitude == math.inf
        assert Vector2D(1e200, 0).length == math.inf
        assert Vector2D(1e200, 0).distance(Vector2D(-1e200, 0)) == math.inf

    def test_normalize_huge_vector_falls_back_to_ones(self):
        assert Vector2D(1e200, 0).normalize().to_array() == [1, 1]


class TestArithmetic:
    """Allocating vs in-place arithmetic."""

    def test_allocating_ops_leave_operands_alone(self):
        a = Vector2D(1, 2)
        b = Vector2D(3, 5)
        assert a.add(b).to_array() == [4, 7]
        assert a.subtract(b).to_array() == [-2, -3]
        assert a.multiply(b).to_array() == [3, 10]
        assert a.divide(b).to_array() == [1 / 3, 2 / 5]
        assert a.to_array() == [1, 2]
        assert b.to_array() == [3, 5]

    def test_self_ops_mutate_and_chain(self):
        v = Vector2D(1, 2)
        result = v.add_self(Vector2D(1, 1)).multiply_self(Vector2D(2, 3))
        assert result is v
        assert v.to_array() == [4, 9]
        v.subtract_self(Vector2D(4, 3)).divide_self(Vector2D(1, 2))
        assert v.to_array() == [0, 3]

    def test_add_subtract_round_trip(self):
        a = Vector2D(0.1, -7.3)
        b = Vector2D(1e3, 0.2)
        back = a.add(b).subtract(b)
        assert back.x == pytest.approx(a.x)
        assert back.y == pytest.approx(a.y)

    def test_scalar_ops_broadcast(self):
        v = Vector2D(2, 4)
        assert v.add_scalar(1).to_array() == [3, 5]
        assert v.subtract_scalar(1).to_array() == [1, 3]
        assert v.multiply_scalar(3).to_array() == [6, 12]
        assert v.divide_scalar(2).to_array() == [1, 2]

    def test_scalar_ops_with_separate_y(self):
        """The second scalar applies to y only."""
        v = Vector2D(2, 3)
        assert v.multiply_scalar(4, 5).to_array() == [8, 15]
        assert v.add_scalar(1, 10).to_array() == [3, 13]
        assert v.subtract_scalar(1, 10).to_array() == [1, -7]
        assert v.divide_scalar(2, 3).to_array() == [1, 1]

    def test_scalar_self_ops(self):
        v = Vector2D(2, 3)
        assert v.multiply_scalar_self(2, 3) is v
        assert v.to_array() == [4, 9]
        v.add_scalar_self(1).subtract_scalar_self(0, 5).divide_scalar_self(5)
        assert v.to_array() == [1, 1]

    def test_multiply_scalar_identity_and_zero(self):
        a = Vector2D(3.5, -2)
        assert a.multiply_scalar(1).equals(a)
        assert a.multiply_scalar(0).equals(Vector2D(0, 0))

    def test_divide_by_zero_follows_float_semantics(self):
        v = Vector2D(1, 0).divide_scalar(0)
        assert v.x == math.inf
        assert math.isnan(v.y)
        assert Vector2D(-2, 1).divide(Vector2D(0, 1)).x == -math.inf


class TestProducts:
    def test_dot_product(self):
        assert Vector2D(1, 2).dot_product(Vector2D(3, 4)) == 11

    def test_cross_product(self):
        assert Vector2D(1, 0).cross_product(Vector2D(0, 1)) == 1
        assert Vector2D(0, 1).cross_product(Vector2D(1, 0)) == -1

    def test_distance(self):
        assert Vector2D(1, 1).distance(Vector2D(4, 5)) == 5


class TestTransforms:
    """In-place transforms."""

    def test_lerp(self):
        v = Vector2D(0, 0)
        assert v.lerp(Vector2D(10, 20), 0.5) is v
        assert v.to_array() == [5, 10]

    def test_lerp_is_not_clamped(self):
        v = Vector2D(0, 0).lerp(Vector2D(10, 0), 2)
        assert v.x == 20

    def test_rotate_90_turns_clockwise(self):
        """(1, 0) goes to (0, -1), not the counter-clockwise (0, 1)."""
        v = Vector2D(1, 0).rotate(Vector2D(0, 0), 90)
        assert v.x == pytest.approx(0, abs=1e-12)
        assert v.y == -1

    def test_rotate_full_turn_is_identity(self):
        v = Vector2D(3.2, -1.7).rotate(Vector2D(10, 4), 360)
        assert v.x == pytest.approx(3.2)
        assert v.y == pytest.approx(-1.7)

    def test_rotate_around_mapping_pivot(self):
        v = Vector2D(2, 1).rotate({"x": 1, "y": 1}, 90)
        assert v.x == pytest.approx(1)
        assert v.y == pytest.approx(0, abs=1e-12)

    def test_floor_and_ceil(self):
        assert Vector2D(1.2, -1.7).floor().to_array() == [1, -2]
        assert Vector2D(1.2, -1.7).ceil().to_array() == [2, -1]

    def test_round_half_up(self):
        assert Vector2D(2.5, -2.5).round().to_array() == [3, -2]
        assert Vector2D(1.4, 1.6).round().to_array() == [1, 2]

    def test_rounding_passes_non_finite_through(self):
        v = Vector2D(math.inf, math.nan).floor()
        assert v.x == math.inf
        assert math.isnan(v.y)

    def test_min_and_max_clamp_per_axis(self):
        assert Vector2D(5, 1).min(Vector2D(3, 3)).to_array() == [3, 1]
        assert Vector2D(5, 1).max(Vector2D(3, 3)).to_array() == [5, 3]

    def test_clear_and_invert(self):
        assert Vector2D(3, -4).invert().to_array() == [-3, 4]
        assert Vector2D(3, -4).clear().to_array() == [0, 0]


class TestNormalize:
    def test_unit_vector(self):
        n = Vector2D(3, 4).normalize()
        assert n.to_array() == [0.6, 0.8]

    def test_does_not_mutate(self):
        v = Vector2D(3, 4)
        v.normalize()
        assert v.to_array() == [3, 4]

    def test_zero_vector_falls_back_to_ones(self):
        assert Vector2D(0, 0).normalize().to_array() == [1, 1]

    def test_zero_axis_falls_back_to_one(self):
        """A 0 quotient is replaced the same way as a nan one."""
        assert Vector2D(0, 5).normalize().to_array() == [1, 1]


class TestCopyCloneEquality:
    def test_clone_is_equal_and_independent(self):
        v = Vector2D(1, 2)
        c = v.clone()
        assert c.equals(v)
        assert c is not v
        c.add_scalar_self(5)
        assert v.to_array() == [1, 2]

    def test_copy_assigns_in_place(self):
        v = Vector2D(1, 2)
        assert v.copy(Vector2D(9, 8)) is v
        assert v.to_array() == [9, 8]

    def test_equality_operator(self):
        assert Vector2D(1, 2) == Vector2D(1, 2)
        assert Vector2D(1, 2) != Vector2D(2, 1)
        assert Vector2D(1, 2) != (1, 2)


class TestConversion:
    def test_to_object(self):
        assert Vector2D(1, 2).to_object() == {"x": 1, "y": 2}

    def test_to_string(self):
        assert str(Vector2D(1.0, 2.5)) == "x: 1, y: 2.5"
        assert Vector2D(-3, 0).to_string() == "x: -3, y: 0"

    def test_to_string_non_finite(self):
        assert str(Vector2D(math.inf, math.nan)) == "x: Infinity, y: NaN"
        assert str(Vector2D(-math.inf, -0.0)) == "x: -Infinity, y: 0"

    def test_to_string_exponent_forms(self):
        assert str(Vector2D(1e21, 1e-7)) == "x: 1e+21, y: 1e-7"
        assert str(Vector2D(1e20, 0.00001)) == "x: 100000000000000000000, y: 0.00001"

    def test_unpacks_like_a_pair(self):
        x, y = Vector2D(4, 5)
        assert (x, y) == (4, 5)
