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
"""An anchor point together with its two control handles."""

from enum import Enum

from .geometry import Vector, Transform


class PointKind(Enum):
    """The three points of a CurvePoint. The value is the storage slot."""
    ANCHOR = 0
    LEFT_CONTROL = 1
    RIGHT_CONTROL = 2


class CurvePoint():
    """Anchor with a left (incoming) and a right (outgoing) control handle.

    The points are in the local space of the owning Spline. Setting one point
    never touches the others; keeping the handles aligned is done by the Spline.
    """
    __slots__ = ("points",)

    def __init__(self, anchor: Vector, left_control: Vector, right_control: Vector) -> None:
        self.points: list[Vector] = [anchor.copy(), left_control.copy(), right_control.copy()]

    def __repr__(self):
        p = self.points
        return f"CurvePoint(anchor={p[0]}, left={p[1]}, right={p[2]})"

    def __getitem__(self, kind: PointKind) -> Vector:
        return self.points[kind.value].copy()

    def __setitem__(self, kind: PointKind, value: Vector) -> None:
        self.points[kind.value] = value.copy()

    def get(self, kind: PointKind) -> Vector:
        return self[kind]

    def set(self, kind: PointKind, value: Vector) -> None:
        self[kind] = value

    @property
    def anchor(self) -> Vector:
        return self[PointKind.ANCHOR]

    @property
    def left_control(self) -> Vector:
        return self[PointKind.LEFT_CONTROL]

    @property
    def right_control(self) -> Vector:
        return self[PointKind.RIGHT_CONTROL]

    def copy(self) -> "CurvePoint":
        return CurvePoint(*self.points)

    def forward_direction(self, kind: PointKind, transform: Transform | None = None) -> Vector:
        """Unit vector from the left control towards the point of the given kind.

        The direction is always measured from LEFT_CONTROL, also for RIGHT_CONTROL.
        If a transform is given both points are mapped by it before taking the difference.
        Returns a zero vector when the two points coincide.
        """
        start = self[PointKind.LEFT_CONTROL]
        end = self[kind]
        if transform is not None:
            start = transform.transform_point(start)
            end = transform.transform_point(end)
        return (end - start).normalize()
