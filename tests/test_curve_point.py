"""Tests for CurvePoint."""

from bezier_spline import CurvePoint, PointKind, Transform, Vector
from tests.conftest import assert_vec


def make_point():
    return CurvePoint(Vector(0, 0, 0), Vector(-1, 0, 0), Vector(0, 2, 0))


class TestAccess:

    def test_get_by_kind(self):
        cp = make_point()
        assert cp[PointKind.ANCHOR] == Vector(0, 0, 0)
        assert cp.get(PointKind.LEFT_CONTROL) == Vector(-1, 0, 0)
        assert cp.right_control == Vector(0, 2, 0)

    def test_set_does_not_touch_other_kinds(self):
        cp = make_point()
        cp.set(PointKind.RIGHT_CONTROL, Vector(5, 5, 5))
        assert cp[PointKind.RIGHT_CONTROL] == Vector(5, 5, 5)
        assert cp[PointKind.ANCHOR] == Vector(0, 0, 0)
        assert cp[PointKind.LEFT_CONTROL] == Vector(-1, 0, 0)

    def test_returned_vectors_are_copies(self):
        cp = make_point()
        v = cp[PointKind.ANCHOR]
        v[0] = 10
        assert cp[PointKind.ANCHOR] == Vector(0, 0, 0)


class TestForwardDirection:

    def test_anchor_direction(self):
        assert_vec(make_point().forward_direction(PointKind.ANCHOR), (1, 0, 0))

    def test_right_control_is_measured_from_left_control(self):
        # Not the direction from the anchor to the right handle.
        direction = make_point().forward_direction(PointKind.RIGHT_CONTROL)
        s = 1 / 5 ** 0.5
        assert_vec(direction, (s, 2 * s, 0))

    def test_left_control_is_degenerate(self):
        assert make_point().forward_direction(PointKind.LEFT_CONTROL) == Vector()

    def test_with_transform(self, frame):
        direction = make_point().forward_direction(PointKind.ANCHOR, frame)
        assert_vec(direction, (0, 1, 0))

    def test_transform_none_matches_identity(self):
        cp = make_point()
        assert_vec(cp.forward_direction(PointKind.RIGHT_CONTROL, Transform()),
                   cp.forward_direction(PointKind.RIGHT_CONTROL))
