"""Tests for storing splines in Blender. Skipped outside Blender."""

import math

import pytest

bpy = pytest.importorskip("bpy")

from bezier_spline import PointKind, Spline, Transform, Vector
from bezier_spline.blender import spline_from_blender, spline_to_blender
from tests.conftest import assert_vec


def test_store_and_read_back():
    spline = Spline()
    spline.add_point_to_end()
    spline.set_point_position(1, PointKind.RIGHT_CONTROL, Vector(-0.6, 0.5, 0.25))
    spline.is_looping = True
    transform = Transform(location=Vector(1, 2, 3), rotation=Vector(0, 0, math.pi / 4))

    ob = spline_to_blender(spline, "TestSpline", transform)
    restored, restored_transform = spline_from_blender(ob.name)

    assert restored.total_points == spline.total_points
    assert restored.is_looping
    for i in range(spline.total_points):
        for kind in PointKind:
            assert_vec(restored.point_at(i, kind), spline.point_at(i, kind), abs_tol=1e-6)
    assert_vec(restored_transform.location, (1, 2, 3), abs_tol=1e-6)
    assert_vec(restored_transform.rotation, (0, 0, math.pi / 4), abs_tol=1e-6)
    assert_vec(restored.position_for_time(0.3, restored_transform),
               spline.position_for_time(0.3, transform), abs_tol=1e-5)
