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
"""Cubic Bezier splines for interactive editing and time based sampling."""

import logging

from .config import SplineSettings
from .curve_point import CurvePoint, PointKind
from .exceptions import EmptySplineError, IndexOutOfRangeError, SplineError
from .geometry import Matrix, Transform, Vector
from .host import FollowState, SplineCreator, SplineFollower
from .spline import Spline

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CurvePoint",
    "EmptySplineError",
    "FollowState",
    "IndexOutOfRangeError",
    "Matrix",
    "PointKind",
    "Spline",
    "SplineCreator",
    "SplineError",
    "SplineFollower",
    "SplineSettings",
    "Transform",
    "Vector",
]
