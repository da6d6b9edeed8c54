"""
Unit tests for 2D vector geometry.
"""

import math

import numpy as np
import pytest

from smath.geometry.vector2 import (
    cartesian_from_cartesian_vectors,
    cartesian_from_polar,
    cartesian_kvadrantized,
    cartesian_normalized,
    cross_product_from_cartesian,
    direction_from_cartesian,
    distance_from_cartesian,
    distance_from_polar,
    dot_product_from_cartesian,
    dot_product_from_polar,
    magnitude_from_cartesian,
    magnitude_from_cartesian_vectors,
    magnitude_from_polar_vectors,
    magnitude_from_two_polar_vectors,
    normal1_from_cartesian,
    normal2_from_cartesian,
    polar_angle_from_cartesian,
    polar_from_cartesian,
    polar_normalized,
    x_from_polar,
    y_from_polar,
)
from smath.numerics.backend import FLOAT64, UnsupportedNumericTypeError

VECTORS = [(3.0, 4.0), (-2.5, 1.5), (0.25, -7.0), (-1.0, -1.0), (6.0, 0.0), (0.0, 2.0)]


@pytest.fixture
def vectors(backend):
    return [(backend.coerce(x), backend.coerce(y)) for x, y in VECTORS]


class TestMagnitude:
    """Tests for vector lengths."""

    def test_from_cartesian(self):
        assert magnitude_from_cartesian(3.0, 4.0) == 5.0
        assert magnitude_from_cartesian(-3, -4) == 5.0

    def test_keeps_precision(self):
        assert type(magnitude_from_cartesian(np.float32(3), np.float32(4))) is np.float32

    def test_from_cartesian_vectors(self):
        assert magnitude_from_cartesian_vectors((1.0, 2.0), (2.0, 2.0)) == 5.0

    def test_from_two_polar_vectors(self):
        assert magnitude_from_two_polar_vectors(3.0, 4.0, math.pi / 2) == pytest.approx(5.0)
        assert magnitude_from_two_polar_vectors(3.0, 4.0, math.pi) == pytest.approx(7.0)

    def test_from_two_polar_vectors_zero_angle(self):
        """Sides lying on top of each other leave only their difference."""
        assert magnitude_from_two_polar_vectors(3.0, 4.0, 0.0) == pytest.approx(1.0)

    def test_from_two_polar_vectors_sign_of_angle(self):
        assert magnitude_from_two_polar_vectors(2.0, 5.0, 1.1) == pytest.approx(
            magnitude_from_two_polar_vectors(2.0, 5.0, -1.1))

    def test_from_polar_vectors(self):
        assert magnitude_from_polar_vectors((3.0, 0.2), (4.0, 0.2 + math.pi / 2)) == pytest.approx(5.0)
        assert magnitude_from_polar_vectors((3.0, 0.2), (4.0, 0.2)) == pytest.approx(1.0)

    def test_polar_vectors_match_cartesian_difference(self):
        v1, v2 = (2.0, 0.4), (5.0, 2.1)
        x1, y1 = cartesian_from_polar(*v1)
        x2, y2 = cartesian_from_polar(*v2)
        expected = magnitude_from_cartesian(x1 - x2, y1 - y2)
        assert magnitude_from_polar_vectors(v1, v2) == pytest.approx(expected)
        assert magnitude_from_polar_vectors(v1, v2) == pytest.approx(distance_from_polar(v1, v2))


class TestComponents:
    """Tests for polar to cartesian components and the polar angle."""

    def test_components(self):
        assert x_from_polar(2.0, 0.0) == 2.0
        assert y_from_polar(2.0, 0.0) == 0.0
        assert x_from_polar(2.0, math.pi / 2) == pytest.approx(0.0, abs=1e-15)
        assert y_from_polar(2.0, math.pi / 2) == pytest.approx(2.0)

    def test_polar_angle(self):
        assert polar_angle_from_cartesian(1.0, 1.0) == pytest.approx(math.pi / 4)
        assert polar_angle_from_cartesian(1.0, -1.0) == pytest.approx(-math.pi / 4)

    def test_polar_angle_left_half_plane_is_reflected(self):
        """atan(y/x) cannot tell (x, y) from (-x, -y)."""
        assert polar_angle_from_cartesian(-1.0, -1.0) == polar_angle_from_cartesian(1.0, 1.0)

    def test_polar_angle_vertical_axis_builtin_float(self):
        with pytest.raises(ZeroDivisionError):
            polar_angle_from_cartesian(0.0, 1.0)

    def test_polar_angle_vertical_axis_numpy(self):
        with np.errstate(divide='ignore'):
            angle = polar_angle_from_cartesian(np.float64(0.0), np.float64(1.0))
        assert angle == pytest.approx(math.pi / 2)


class TestConversions:
    """Tests for cartesian/polar conversions."""

    @pytest.mark.parametrize("vector", [(3.0, 4.0), (0.5, -2.0), (1e-3, 7.0), (10.0, 0.1)])
    def test_round_trip(self, backend, tolerances, vector):
        x, y = backend.coerce(vector[0]), backend.coerce(vector[1])
        magnitude, angle = polar_from_cartesian(x, y)
        x2, y2 = cartesian_from_polar(magnitude, angle)
        assert tolerances.is_close(x2, x, scale=16)
        assert tolerances.is_close(y2, y, scale=16)

    def test_round_trip_left_half_plane(self):
        x, y = cartesian_from_polar(*polar_from_cartesian(-3.0, 4.0))
        assert (x, y) == pytest.approx((3.0, -4.0))

    def test_from_polar(self):
        assert cartesian_from_polar(2.0, math.pi) == pytest.approx((-2.0, 0.0), abs=1e-15)

    def test_from_cartesian_vectors(self):
        assert cartesian_from_cartesian_vectors((1, 2), (3, 4), (-5, 0.5)) == (-1, 6.5)

    def test_from_no_vectors_needs_backend(self):
        assert cartesian_from_cartesian_vectors(ops=FLOAT64) == (0.0, 0.0)
        with pytest.raises(UnsupportedNumericTypeError):
            cartesian_from_cartesian_vectors()

    def test_normalized(self):
        assert cartesian_normalized(3.0, 4.0) == pytest.approx((0.6, 0.8))

    def test_normalized_has_unit_length(self, vectors, tolerances):
        for x, y in vectors:
            assert tolerances.is_close(magnitude_from_cartesian(*cartesian_normalized(x, y)), 1)

    def test_normalized_zero_vector_builtin_float(self):
        with pytest.raises(ZeroDivisionError):
            cartesian_normalized(0.0, 0.0)

    def test_normalized_zero_vector_numpy(self):
        with np.errstate(invalid='ignore'):
            x, y = cartesian_normalized(np.float64(0.0), np.float64(0.0))
        assert np.isnan(x) and np.isnan(y)

    def test_kvadrantized(self):
        assert cartesian_kvadrantized(-2.5, 3.0) == (-1.0, 1.0)
        assert cartesian_kvadrantized(np.float32(4), np.float32(-0.1)) == (1, -1)

    def test_kvadrantized_zero_component(self):
        with pytest.raises(ZeroDivisionError):
            cartesian_kvadrantized(0.0, 1.0)

    def test_polar_normalized(self):
        assert polar_normalized(5.0, 0.3) == (1.0, 0.3)
        assert type(polar_normalized(np.float32(5), np.float32(0.3))[0]) is np.float32


class TestNormals:
    """Tests for the two perpendicular vectors."""

    def test_values(self):
        assert normal1_from_cartesian(3, 4) == (-4, 3)
        assert normal2_from_cartesian(3, 4) == (4, -3)

    def test_two_rotations_negate(self, vectors):
        for x, y in vectors:
            assert normal1_from_cartesian(*normal1_from_cartesian(x, y)) == (-x, -y)

    def test_four_rotations_identity(self, vectors):
        for vector in vectors:
            rotated = vector
            for _ in range(4):
                rotated = normal1_from_cartesian(*rotated)
            assert rotated == vector

    def test_normals_are_opposite(self, vectors):
        for x, y in vectors:
            n1 = normal1_from_cartesian(x, y)
            n2 = normal2_from_cartesian(x, y)
            assert n2 == (-n1[0], -n1[1])

    def test_perpendicular(self, vectors):
        for vector in vectors:
            assert dot_product_from_cartesian(vector, normal1_from_cartesian(*vector)) == 0
            assert dot_product_from_cartesian(vector, normal2_from_cartesian(*vector)) == 0


class TestDistanceAndDirection:
    """Tests for distances and directions between two vectors."""

    def test_distance_from_cartesian(self):
        assert distance_from_cartesian((0, 0), (3, 4)) == 5

    def test_distance_is_symmetric(self, vectors):
        for v1 in vectors:
            for v2 in vectors:
                assert distance_from_cartesian(v1, v2) == distance_from_cartesian(v2, v1)

    def test_distance_from_polar(self):
        assert distance_from_polar((3.0, 0.0), (4.0, math.pi / 2)) == pytest.approx(5.0)
        assert distance_from_polar((2.0, 1.0), (2.0, 1.0)) == 0.0

    def test_distance_from_polar_matches_cartesian(self):
        p1, p2 = (2.0, 0.7), (5.0, -1.9)
        expected = distance_from_cartesian(cartesian_from_polar(*p1), cartesian_from_polar(*p2))
        assert distance_from_polar(p1, p2) == pytest.approx(expected)

    def test_direction(self):
        assert direction_from_cartesian((1, 2), (4, 6)) == (3, 4)

    def test_direction_length_is_distance(self):
        v1, v2 = (1.5, -2.0), (-3.0, 4.0)
        assert magnitude_from_cartesian(*direction_from_cartesian(v1, v2)) == pytest.approx(distance_from_cartesian(v1, v2))


class TestProducts:
    """Tests for dot and cross products."""

    def test_dot_product(self):
        assert dot_product_from_cartesian((1, 2), (3, 4)) == 11

    def test_dot_product_with_itself_is_squared_magnitude(self, vectors, tolerances):
        for x, y in vectors:
            magnitude = magnitude_from_cartesian(x, y)
            assert tolerances.is_close(dot_product_from_cartesian((x, y), (x, y)), magnitude * magnitude)

    def test_dot_product_from_polar(self):
        assert dot_product_from_polar(2.0, 3.0, 0.0) == 6.0
        assert dot_product_from_polar(2.0, 3.0, math.pi / 2) == pytest.approx(0.0, abs=1e-15)

    def test_dot_product_polar_matches_cartesian(self):
        v1, v2 = (2.0, 0.3), (3.0, 1.4)
        expected = dot_product_from_cartesian(cartesian_from_polar(*v1), cartesian_from_polar(*v2))
        assert dot_product_from_polar(v1[0], v2[0], v2[1] - v1[1]) == pytest.approx(expected)

    def test_cross_product(self):
        assert cross_product_from_cartesian((1, 0), (0, 1)) == 1
        assert cross_product_from_cartesian((0, 1), (1, 0)) == -1

    def test_cross_product_with_itself_is_zero(self, vectors):
        for vector in vectors:
            assert cross_product_from_cartesian(vector, vector) == 0
