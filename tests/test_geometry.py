"""Tests for Vector, Matrix and Transform."""

import math

import pytest

from bezier_spline.geometry import Matrix, Transform, Vector
from tests.conftest import assert_vec


class TestVector:
    """Vector arithmetic."""

    def test_arithmetic(self):
        a = Vector(1, 2, 3)
        b = Vector(4, 5, 6)
        assert a + b == Vector(5, 7, 9)
        assert b - a == Vector(3, 3, 3)
        assert 2 * a == Vector(2, 4, 6)
        assert a * 2 == Vector(2, 4, 6)
        assert a / 2 == Vector(0.5, 1, 1.5)
        assert -a == Vector(-1, -2, -3)

    def test_products(self):
        x = Vector(1, 0, 0)
        y = Vector(0, 1, 0)
        assert x.dot(y) == 0.0
        assert x.cross(y) == Vector(0, 0, 1)

    def test_normalize(self):
        assert_vec(Vector(3, 0, 4).normalize(), (0.6, 0, 0.8))
        assert Vector(3, 0, 4).length() == 5.0

    def test_normalize_zero_gives_zero(self):
        assert Vector().normalize() == Vector()

    def test_lerp_and_distance(self):
        a = Vector(0, 0, 0)
        b = Vector(2, 4, 6)
        assert a.lerp(b, 0.5) == Vector(1, 2, 3)
        assert a.distance(Vector(0, 3, 4)) == 5.0

    def test_indexing(self):
        v = Vector(1, 2, 3)
        assert v[0] == 1.0 and v[-1] == 3.0
        assert v[0:2] == (1.0, 2.0)
        v[1] = 7
        assert v.y == 7.0
        with pytest.raises(IndexError):
            v[3]

    def test_copy_is_independent(self):
        v = Vector(1, 2, 3)
        c = v.copy()
        c[0] = 5
        assert v.x == 1.0


class TestMatrix:

    def test_rotation_z(self):
        r = Matrix.rotation_xyz(0.0, 0.0, math.pi / 2)
        assert_vec(r @ Vector(1, 0, 0), (0, 1, 0))

    def test_inverse(self):
        m = Matrix.rotation_xyz(0.3, -0.2, 1.1) @ Matrix.diagonal((1, 2, 3))
        ident = m @ m.inverse()
        for i in range(3):
            for j in range(3):
                assert ident[i, j] == pytest.approx(1.0 if i == j else 0.0, abs=1e-12)

    def test_singular(self):
        with pytest.raises(ZeroDivisionError):
            Matrix.diagonal((1, 0, 1)).inverse()


class TestTransform:

    def test_identity(self):
        t = Transform.identity()
        assert t.transform_point(Vector(1, 2, 3)) == Vector(1, 2, 3)
        assert t.origin == Vector()

    def test_transform_point(self, frame):
        # scale by 2, rotate x onto y, translate
        assert_vec(frame.transform_point(Vector(1, 0, 0)), (1, 4, 3))

    def test_transform_direction_ignores_location(self, frame):
        assert_vec(frame.transform_direction(Vector(1, 0, 0)), (0, 2, 0))

    def test_inverse_transform_point(self, frame):
        p = Vector(0.5, -1.5, 2.0)
        assert_vec(frame.inverse_transform_point(frame.transform_point(p)), p)

    def test_setters_update_mapping(self):
        t = Transform()
        t.scale = Vector(3, 3, 3)
        t.location = Vector(0, 0, 1)
        assert_vec(t.transform_point(Vector(1, 1, 1)), (3, 3, 4))
