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
"""Editable cubic Bezier spline with time based sampling.

A Spline is a list of CurvePoints. Segment i runs from the anchor of point i
through its right control and the left control of point i + 1 to the anchor of
point i + 1, with indices taken modulo the number of points so that a looping
spline closes on itself.
"""

import logging
import math
from typing import Iterator

from .bezier import BezierSegment, cubic_point, cubic_derivative
from .config import SplineSettings
from .curve_point import CurvePoint, PointKind
from .exceptions import EmptySplineError, IndexOutOfRangeError
from .geometry import Transform, Vector

logger = logging.getLogger(__name__)


class Spline():
    """The points that make up a spline. Lets you create, get, move and sample them.

    All points are stored in local space. Methods taking a transform use it only
    to map their result, the identity is used when it is None.
    """
    __slots__ = ("_points", "is_looping", "settings")

    def __init__(self,
                 anchor_position: Vector | None = None,
                 settings: SplineSettings | None = None,
                 is_looping: bool = False,
                 ) -> None:
        """Seeds the spline with two points on a line along the seed axis,
        placed symmetrically around anchor_position (the local origin by default)."""
        self.settings: SplineSettings = settings or SplineSettings()
        self.is_looping: bool = is_looping
        self._points: list[CurvePoint] = []

        origin = anchor_position if anchor_position is not None else Vector()
        offset = self.settings.seed_axis * self.settings.handle_distance * 2.0
        self.add_point(origin + offset)
        self.add_point(origin - offset)

    @classmethod
    def from_points(cls,
                    points: list[CurvePoint],
                    is_looping: bool = False,
                    settings: SplineSettings | None = None,
                    ) -> "Spline":
        """Alternative constructor from existing points, e.g. when restoring a stored spline.
        The points are copied."""
        spline = cls.__new__(cls)
        spline.settings = settings or SplineSettings()
        spline.is_looping = is_looping
        spline._points = [p.copy() for p in points]
        return spline

    def __repr__(self):
        return f"Spline(total_points={self.total_points}, is_looping={self.is_looping})"

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[CurvePoint]:
        return iter(self._points)

    def __getitem__(self, index: int) -> CurvePoint:
        return self.points_at(index)

    @property
    def total_points(self) -> int:
        return len(self._points)

    @property
    def total_segments(self) -> int:
        if not self._points:
            return 0
        return self.total_points if self.is_looping else self.total_points - 1

    def toggle_looping(self) -> None:
        self.is_looping = not self.is_looping

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.total_points:
            raise IndexOutOfRangeError(index, self.total_points)

    ##### POINT ACCESS #####

    def point_at(self, index: int, kind: PointKind, transform: Transform | None = None) -> Vector:
        """Position of an anchor or control point, mapped by transform if one is given.
        An empty spline gives a zero vector."""
        if not self._points:
            return Vector()
        self._check_index(index)
        p = self._points[index][kind]
        return transform.transform_point(p) if transform is not None else p

    def points_at(self, index: int) -> CurvePoint:
        """The CurvePoint at index. This is the stored point, not a copy."""
        self._check_index(index)
        return self._points[index]

    def nearest_point_index(self, position: Vector, transform: Transform | None = None) -> int:
        """Index of the anchor closest to position, or -1 for an empty spline.
        position is compared with the anchors mapped by transform."""
        index = -1
        min_distance = math.inf
        for i in range(self.total_points):
            distance = self.point_at(i, PointKind.ANCHOR, transform).distance(position)
            if distance < min_distance:
                min_distance = distance
                index = i
        return index

    ##### MUTATION #####

    def add_point(self, anchor_position: Vector) -> None:
        """Append a point. Its handles continue the direction from the previous
        point's right handle to the new anchor. The first point gets its
        handles along the seed axis."""
        d = self.settings.handle_distance
        if not self._points:
            axis = self.settings.seed_axis
            point = CurvePoint(anchor_position,
                               anchor_position + axis * d,
                               anchor_position - axis * d)
        else:
            prev_right = self._points[-1][PointKind.RIGHT_CONTROL]
            direction = ((anchor_position - prev_right) / 2).normalize()
            if direction.is_zero():
                logger.debug("New anchor coincides with previous right handle, handles collapse onto the anchor.")
            point = CurvePoint(anchor_position,
                               anchor_position - direction * d,
                               anchor_position + direction * d)
        self._points.append(point)
        logger.debug("Added point %d at %s", self.total_points - 1, anchor_position)

    def add_point_to_end(self) -> None:
        """Add a point beyond the last point, following its right handle."""
        if not self._points:
            raise EmptySplineError("add a point to the end")
        last = self._points[-1]
        right = last[PointKind.RIGHT_CONTROL]
        direction = ((last[PointKind.ANCHOR] - right) / 2).normalize()
        self.add_point(right - direction * self.settings.extend_distance)

    def insert_point(self, index: int) -> None:
        """Insert a new point after index. The new anchor is placed from the right
        handle of point index towards the left handle of the next point, with
        its handles along that direction. Inserting after the last point appends."""
        self._check_index(index)
        if index == self.total_points - 1:
            self.add_point_to_end()
            return

        right = self._points[index][PointKind.RIGHT_CONTROL]
        next_left = self._points[index + 1][PointKind.LEFT_CONTROL]
        direction = ((next_left - right) / 2).normalize()
        position = right + direction * self.settings.insert_distance
        d = self.settings.handle_distance
        self._points.insert(index + 1, CurvePoint(position,
                                                  position - direction * d,
                                                  position + direction * d))
        logger.debug("Inserted point %d at %s", index + 1, position)

    def remove_point(self, index: int) -> None:
        """Remove the point at index with its handles. No minimum count is enforced."""
        self._check_index(index)
        del self._points[index]
        logger.debug("Removed point %d, %d points left", index, self.total_points)

    def set_point_position(self, index: int, kind: PointKind, position: Vector) -> None:
        """Move a point while keeping the handles tangent.

        - Anchor: both handles move with it.
        - Control: the other handle is turned to point away from the moved one
          through the anchor, keeping its own distance to the anchor.
        """
        self._check_index(index)
        point = self._points[index]
        anchor = point[PointKind.ANCHOR]

        if kind is PointKind.ANCHOR:
            delta = position - anchor
            point[PointKind.LEFT_CONTROL] = point[PointKind.LEFT_CONTROL] + delta
            point[PointKind.RIGHT_CONTROL] = point[PointKind.RIGHT_CONTROL] + delta
        else:
            other = PointKind.LEFT_CONTROL if kind is PointKind.RIGHT_CONTROL else PointKind.RIGHT_CONTROL
            dist = point[other].distance(anchor)
            direction = (anchor - position).normalize()
            if direction.is_zero():
                # Handle dropped on the anchor, no direction to mirror.
                logger.debug("Control moved onto the anchor of point %d, opposite handle kept.", index)
            else:
                point[other] = anchor + direction * dist

        point[kind] = position

    ##### SAMPLING #####

    def segment(self, index: int) -> BezierSegment:
        """Segment starting at point index (modulo the number of points)."""
        if not self._points:
            raise EmptySplineError("get a segment")
        n = self.total_points
        start = self._points[index % n]
        end = self._points[(index + 1) % n]
        return BezierSegment(start[PointKind.ANCHOR],
                             start[PointKind.RIGHT_CONTROL],
                             end[PointKind.LEFT_CONTROL],
                             end[PointKind.ANCHOR],
                             index = index % n)

    def segments(self) -> Iterator[BezierSegment]:
        """All segments, including the closing one when looping."""
        for i in range(self.total_segments):
            yield self.segment(i)

    def _locate(self, time: float, operation: str) -> tuple[BezierSegment, float]:
        """Split time in [0, 1] into the segment and the parameter within it."""
        if not self._points:
            raise EmptySplineError(operation)
        time_in_spline = time * self.total_segments
        segment_number = math.floor(time_in_spline)
        time_in_segment = time_in_spline - segment_number
        # Modulo also covers time == 1 of an open spline, which lands on the last anchor.
        return self.segment(segment_number), time_in_segment

    def position_for_time(self, time: float, transform: Transform | None = None) -> Vector:
        """Position on the spline at time in [0, 1]."""
        seg, u = self._locate(time, "sample a position")
        p = cubic_point(*seg.points, u)
        return transform.transform_point(p) if transform is not None else p

    def velocity_for_time(self, time: float, transform: Transform | None = None) -> Vector:
        """First derivative at time with respect to the segment parameter.
        With a transform, the derivative is mapped as a point and the origin subtracted."""
        seg, u = self._locate(time, "sample a velocity")
        v = cubic_derivative(*seg.points, u)
        if transform is None:
            return v
        return transform.transform_point(v) - transform.origin

    def direction_for_time(self, time: float, transform: Transform | None = None) -> Vector:
        """Unit velocity. A zero vector means the direction is undefined."""
        return self.velocity_for_time(time, transform).normalize()

    def sample(self, count: int, transform: Transform | None = None) -> list[Vector]:
        """count positions evenly spaced in time from 0 to 1 inclusive."""
        if count < 2:
            raise ValueError("count must be at least 2")
        return [self.position_for_time(i / (count - 1), transform) for i in range(count)]
