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
"""Objects that own or borrow a Spline.

SplineCreator owns a spline together with the frame it lives in.
SplineFollower borrows the creator's spline and moves along it over time.
Both see every edit since they share the same Spline instance.
"""

import logging
from dataclasses import dataclass

from .config import SplineSettings
from .curve_point import PointKind
from .geometry import Transform, Vector
from .spline import Spline

logger = logging.getLogger(__name__)

TIME_TO_TRAVERSE = 10.0 # Seconds a follower needs for the whole spline.


class SplineCreator():
    """Owner of a spline and of the transform placing it in the world."""

    def __init__(self,
                 transform: Transform | None = None,
                 settings: SplineSettings | None = None,
                 ) -> None:
        self.transform: Transform = transform or Transform()
        self.settings: SplineSettings | None = settings
        self.spline: Spline | None = None

    def create_spline(self) -> Spline:
        """Create, or reset, the spline. It is seeded around the local origin
        since the points are stored relative to the transform."""
        self.spline = Spline(Vector(), settings = self.settings)
        logger.debug("Created spline with %d points", self.spline.total_points)
        return self.spline

    def ensure_spline(self) -> Spline:
        if self.spline is None:
            return self.create_spline()
        return self.spline

    def world_point(self, index: int, kind: PointKind) -> Vector:
        return self.ensure_spline().point_at(index, kind, self.transform)

    def move_point(self, index: int, kind: PointKind, world_position: Vector) -> None:
        """Move a point to a position given in world space."""
        local = self.transform.inverse_transform_point(world_position)
        self.ensure_spline().set_point_position(index, kind, local)


@dataclass
class FollowState:
    """Position and unit direction of a follower, in world space."""
    position: Vector
    direction: Vector


class SplineFollower():
    """Moves along the spline of a SplineCreator over time_to_traverse seconds.

    Non looping splines are traversed once. Looping splines are traversed
    repeatedly since the time wraps around.
    """

    def __init__(self, creator: SplineCreator, time_to_traverse: float = TIME_TO_TRAVERSE) -> None:
        if time_to_traverse <= 0.0:
            raise ValueError("time_to_traverse must be positive")
        self.creator = creator
        self.time_to_traverse = time_to_traverse
        self.elapsed = 0.0

    @property
    def spline(self) -> Spline:
        return self.creator.ensure_spline()

    @property
    def finished(self) -> bool:
        return not self.spline.is_looping and self.elapsed >= self.time_to_traverse

    def reset(self) -> None:
        self.elapsed = 0.0

    def update(self, delta_time: float) -> FollowState | None:
        """Advance the clock by delta_time. Returns the new position and
        direction in world space, or None when the end has been reached."""
        self.elapsed += delta_time
        if self.finished:
            return None

        time = self.elapsed / self.time_to_traverse
        transform = self.creator.transform
        return FollowState(self.spline.position_for_time(time, transform),
                           self.spline.direction_for_time(time, transform))
