"""Shared fixtures for the spline tests."""

import math

import pytest

from bezier_spline import Spline, Transform, Vector


def assert_vec(actual, expected, abs_tol=1e-9):
    """Component-wise comparison of two vectors."""
    assert tuple(actual) == pytest.approx(tuple(expected), abs=abs_tol)


@pytest.fixture
def spline():
    """Default two point spline seeded at the local origin."""
    return Spline(Vector())


@pytest.fixture
def looping_spline():
    return Spline(Vector(), is_looping=True)


@pytest.fixture
def frame():
    """Translated, scaled and rotated 90 degrees about z."""
    return Transform(location=Vector(1.0, 2.0, 3.0),
                     rotation=Vector(0.0, 0.0, math.pi / 2),
                     scale=Vector(2.0, 2.0, 2.0))
