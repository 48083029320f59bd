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
"""Exceptions raised by the spline package.

Every error is a caller error: nothing here is transient or retried.
Degenerate geometry (coincident points) is not an error, it yields zero vectors.
"""

from typing import Any, Optional


class SplineError(Exception):
    """Base exception for all spline errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional context.
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class IndexOutOfRangeError(SplineError, IndexError):
    """A point index outside [0, total_points - 1]."""

    def __init__(self, index: int, total_points: int):
        self.index = index
        self.total_points = total_points
        super().__init__(
            "Point index out of range",
            details={"index": index, "total_points": total_points},
        )


class EmptySplineError(SplineError):
    """An operation that needs at least one point was called on an empty spline."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(
            f"Cannot {operation} on a spline without points",
            details={"operation": operation},
        )
