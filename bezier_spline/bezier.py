# Copyright 2023-2025 Jens Zamanian

# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at

# https://www.apache.org/licenses/LICENSE-2.0

# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Evaluation of single cubic Bezier segments.

A segment is given by p0 (start anchor), p1 (right control of the start),
p2 (left control of the end) and p3 (end anchor).
"""

from .geometry import Vector


def quadratic_point(p0: Vector, p1: Vector, p2: Vector, t: float) -> Vector:
    """Quadratic Bezier by two levels of linear interpolation."""
    q0 = p0.lerp(p1, t)
    q1 = p1.lerp(p2, t)
    return q0.lerp(q1, t)


def cubic_point(p0: Vector, p1: Vector, p2: Vector, p3: Vector, t: float) -> Vector:
    """Cubic Bezier by De Casteljau reduction: two quadratics and one more lerp."""
    q0 = quadratic_point(p0, p1, p2, t)
    q1 = quadratic_point(p1, p2, p3, t)
    return q0.lerp(q1, t)


def cubic_derivative(p0: Vector, p1: Vector, p2: Vector, p3: Vector, t: float) -> Vector:
    """First derivative with respect to t (Bernstein form)."""
    return 3 * (1 - t)**2 * (p1 - p0) + 6 * (1 - t) * t * (p2 - p1) + 3 * t**2 * (p3 - p2)


class BezierSegment():
    """Cubic Bezier segment of a spline, in the spline's local space."""
    __slots__ = ("points", "index")

    def __init__(self, p0: Vector, p1: Vector, p2: Vector, p3: Vector, index: int = 0) -> None:
        self.points: list[Vector] = [p0, p1, p2, p3]
        self.index: int = index # Index of the segment in its spline.

    def __repr__(self):
        p = self.points
        return f"BezierSegment(\nindex={self.index}, \np0={p[0]}, \np1={p[1]}, \np2={p[2]}, \np3={p[3]}\n)"

    def __call__(self, t: float) -> Vector:
        """Returns the position at parameter t."""
        return cubic_point(*self.points, t)

    def eval_derivative(self, t: float) -> Vector:
        return cubic_derivative(*self.points, t)

    def tangent(self, t: float) -> Vector:
        """Unit tangent at parameter t, zero vector if the derivative vanishes."""
        return self.eval_derivative(t).normalize()

    @property
    def start(self) -> Vector:
        return self.points[0]

    @property
    def end(self) -> Vector:
        return self.points[3]
