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
"""Default values used when points are created."""

import math
from dataclasses import dataclass, field

from .geometry import Vector

##### CONSTANTS #####
HANDLE_DISTANCE = 0.3 # Distance from a new anchor to each of its handles.
EXTEND_DISTANCE = 1.0 # How far beyond the last right handle add_point_to_end places the new anchor.
INSERT_DISTANCE = 1.0 # How far from the right handle insert_point places the new anchor.
SEED_AXIS = (1.0, 0.0, 0.0) # Axis the two seed points and the first handles are laid out along.
##### END: CONSTANTS #####


@dataclass
class SplineSettings:
    """Placement parameters for new points.

    Attributes:
        handle_distance: Distance between a new anchor and each of its handles.
        extend_distance: Step used by Spline.add_point_to_end.
        insert_distance: Step used by Spline.insert_point.
        seed_axis: Axis used for the seed points and the handles of the first point.
    """
    handle_distance: float = HANDLE_DISTANCE
    extend_distance: float = EXTEND_DISTANCE
    insert_distance: float = INSERT_DISTANCE
    seed_axis: Vector = field(default_factory = lambda: Vector(*SEED_AXIS))

    def __post_init__(self) -> None:
        for name in ("handle_distance", "extend_distance", "insert_distance"):
            value = getattr(self, name)
            if not value > 0.0 or math.isinf(value):
                raise ValueError(f"{name} must be positive, got {value}")
        self.seed_axis = Vector.from_sequence(self.seed_axis)
        if self.seed_axis.is_zero() or not all(math.isfinite(c) for c in self.seed_axis):
            raise ValueError("seed_axis must be a finite, non-zero vector")
        self.seed_axis = self.seed_axis.normalize()
