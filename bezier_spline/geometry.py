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
"""Vectors, matrices and reference frames used by the splines.

All spline points are stored in local space. A Transform maps local
positions into some other frame (e.g. world space) and is only applied
when results leave the spline.
"""

import math
from typing import Iterator, Iterable, overload
from collections.abc import Sequence

##### CONSTANTS #####
ISCLOSE_TOLERANCE = 1e-9 # Absolute tolerance used by Vector.isclose.
##### END: CONSTANTS #####


class Vector(Sequence[float]): # Inheritance only for type checking.
    __slots__ = ("x", "y", "z")

    _index_to_attr = ("x", "y", "z")

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @classmethod
    def from_sequence(cls, v: Iterable[float]) -> "Vector":
        """Build a Vector from any 3 element sequence, e.g. a mathutils.Vector or a tuple."""
        x, y, z = (float(c) for c in v)
        return cls(x, y, z)

    def __repr__(self) -> str:
        return f"Vector(x = {self.x}, y = {self.y}, z = {self.z})"

    def __len__(self) -> int: return 3

    def __iter__(self) -> Iterator[float]:
        for name in self._index_to_attr:
            yield getattr(self, name)

    # For type-checking, two versions of __getitem__ are noted.
    @overload
    def __getitem__(self, idx: int) -> float: ...
    @overload
    def __getitem__(self, idx: slice) -> tuple[float, ...]: ...
    def __getitem__(self, idx):
        if isinstance(idx, slice):
            rng = range(*idx.indices(3))
            return tuple(getattr(self, self._index_to_attr[i]) for i in rng)
        if not isinstance(idx, int):
            raise TypeError("Indices must be int or slice.")
        if not -3 <= idx < 3:
            raise IndexError("Vector index out of range (0..2)")
        return getattr(self, self._index_to_attr[idx])

    def __setitem__(self, idx: int, value: float) -> None:
        if not isinstance(idx, int):
            raise TypeError("Indices must be int.")
        if not -3 <= idx < 3:
            raise IndexError("Vector index out of range.")
        setattr(self, self._index_to_attr[idx], float(value))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    __hash__ = None # Mutable, so not hashable.

    def copy(self) -> "Vector":
        return Vector(self.x, self.y, self.z)

    def length(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def __add__(self, other: "Vector") -> "Vector":
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector") -> "Vector":
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, v: float) -> "Vector":
        x = v * self.x
        y = v * self.y
        z = v * self.z
        return Vector(x, y, z)

    __rmul__ = __mul__

    def __truediv__(self, v: float) -> "Vector":
        return Vector(self.x / v, self.y / v, self.z / v)

    def __neg__(self) -> "Vector":
        return Vector(-self.x, -self.y, -self.z)

    def normalize(self) -> "Vector":
        """Return the unit vector in the same direction.
        A zero vector is returned unchanged, callers must treat it as an undefined direction."""
        l = self.length()
        if l == 0.0:
            return Vector()
        return Vector(self.x / l, self.y / l, self.z / l)

    def dot(self, other: "Vector") -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector") -> "Vector":
        x = self.y * other.z - self.z * other.y
        y = self.z * other.x - self.x * other.z
        z = self.x * other.y - self.y * other.x
        return Vector(x, y, z)

    def lerp(self, other: "Vector", t: float) -> "Vector":
        """Linear interpolation between self and other at parameter t."""
        return self * (1 - t) + other * t

    def distance(self, other: "Vector") -> float:
        return (self - other).length()

    def isclose(self, other: Iterable[float], abs_tol: float = ISCLOSE_TOLERANCE) -> bool:
        return all(math.isclose(a, b, abs_tol = abs_tol) for a, b in zip(self, other))

    def is_zero(self) -> bool:
        return self.x == 0.0 and self.y == 0.0 and self.z == 0.0


class Matrix():
    """3-by-3 matrix, column-vector convention."""
    __slots__ = ("m00", "m01", "m02",
                 "m10", "m11", "m12",
                 "m20", "m21", "m22")

    _names = (
        ("m00", "m01", "m02"),
        ("m10", "m11", "m12"),
        ("m20", "m21", "m22"),
    )

    def __init__(self, rows: Iterable[Iterable[float]] | None = None) -> None:
        if rows is None:
            # Identity matrix
            self.m00, self.m01, self.m02 = 1.0, 0.0, 0.0
            self.m10, self.m11, self.m12 = 0.0, 1.0, 0.0
            self.m20, self.m21, self.m22 = 0.0, 0.0, 1.0
            return

        it = [tuple(map(float, r)) for r in rows]
        if len(it) != 3 or any(len(r) != 3 for r in it):
            raise ValueError("Matrix expects 3 rows of 3 floats")
        self.m00, self.m01, self.m02 = it[0]
        self.m10, self.m11, self.m12 = it[1]
        self.m20, self.m21, self.m22 = it[2]

    @classmethod
    def from_rows(cls, r0: Iterable[float], r1: Iterable[float], r2: Iterable[float]) -> "Matrix":
        return cls((r0, r1, r2))

    @classmethod
    def rotation_xyz(cls, rx: float, ry: float, rz: float) -> "Matrix":
        """Build rotation R = Rz(rz) @ Ry(ry) @ Rx(rx) (column-vector convention).
        This is the order Blender uses for XYZ Euler rotations."""
        cx, sx = math.cos(rx), math.sin(rx)
        cy, sy = math.cos(ry), math.sin(ry)
        cz, sz = math.cos(rz), math.sin(rz)
        m00 = cz * cy
        m01 =  cz*sy*sx - sz*cx
        m02 =  cz*sy*cx + sz*sx
        m10 =  sz*cy
        m11 =  sz*sy*sx + cz*cx
        m12 =  sz*sy*cx - cz*sx
        m20 = -sy
        m21 =  cy*sx
        m22 =  cy*cx
        return cls.from_rows((m00, m01, m02), (m10, m11, m12), (m20, m21, m22))

    @classmethod
    def diagonal(cls, d: Iterable[float]) -> "Matrix":
        a, b, c = d
        return cls.from_rows((a, 0.0, 0.0), (0.0, b, 0.0), (0.0, 0.0, c))

    def __repr__(self) -> str:
        r0 = f"[{self.m00:.6g}, {self.m01:.6g}, {self.m02:.6g}]"
        r1 = f"[{self.m10:.6g}, {self.m11:.6g}, {self.m12:.6g}]"
        r2 = f"[{self.m20:.6g}, {self.m21:.6g}, {self.m22:.6g}]"
        return f"Matrix(\n  {r0},\n  {r1},\n  {r2}\n)"

    def __iter__(self) -> Iterator[tuple[float, float, float]]:
        yield (self.m00, self.m01, self.m02)
        yield (self.m10, self.m11, self.m12)
        yield (self.m20, self.m21, self.m22)

    def __getitem__(self, key: tuple[int, int]) -> float:
        if isinstance(key, tuple) and len(key) == 2:
            i, j = key
            if not isinstance(i, int) or not isinstance(j, int):
                raise TypeError("Indices must be ints.")
            if not -3 <= i < 3 or not -3 <= j < 3:
                raise IndexError("Indices out of range (0..2)")
            return getattr(self, Matrix._names[i][j])
        raise TypeError("key must be tuple[int, int]")

    def transpose(self) -> "Matrix":
        return Matrix.from_rows((self.m00, self.m10, self.m20),
                                (self.m01, self.m11, self.m21),
                                (self.m02, self.m12, self.m22))

    def inverse(self) -> "Matrix":
        # Adjugate / determinant formula; fine for 3-by-3
        a, b, c = self.m00, self.m01, self.m02
        d, e, f = self.m10, self.m11, self.m12
        g, h, i = self.m20, self.m21, self.m22
        A =  (e*i - f*h);  B = -(b*i - c*h);  C =  (b*f - c*e)
        D = -(d*i - f*g);  E =  (a*i - c*g);  F = -(a*f - c*d)
        G =  (d*h - e*g);  H = -(a*h - b*g);  I =  (a*e - b*d)
        det = a*A + b*D + c*G
        if det == 0.0:
            raise ZeroDivisionError("singular matrix")
        inv_det = 1.0 / det
        return Matrix.from_rows((A*inv_det, B*inv_det, C*inv_det),
                                (D*inv_det, E*inv_det, F*inv_det),
                                (G*inv_det, H*inv_det, I*inv_det))

    def __matmul__(self, other):
        # Matrix @ Matrix
        if isinstance(other, Matrix):
            rows = tuple(self)
            cols = tuple(other.transpose())
            return Matrix(tuple(sum(r[k] * c[k] for k in range(3)) for c in cols) for r in rows)
        # Matrix @ Vector
        if isinstance(other, Vector):
            x = self.m00*other.x + self.m01*other.y + self.m02*other.z
            y = self.m10*other.x + self.m11*other.y + self.m12*other.z
            z = self.m20*other.x + self.m21*other.y + self.m22*other.z
            return Vector(x, y, z)
        return NotImplemented


class Transform():
    """A reference frame given by location, Euler XYZ rotation (radians) and scale.

    Local points are mapped as: location + R @ (scale * p).
    """
    __slots__ = ("_location",
                 "_rotation",
                 "_scale",
                 "_linear")

    def __init__(self,
                 location: Vector | None = None,
                 rotation: Vector | None = None,
                 scale: Vector | None = None,
                 ) -> None:
        self._location: Vector = location.copy() if location is not None else Vector()
        self._rotation: Vector = rotation.copy() if rotation is not None else Vector()
        self._scale: Vector = scale.copy() if scale is not None else Vector(1.0, 1.0, 1.0)
        self._update_linear()

    @classmethod
    def identity(cls) -> "Transform":
        return cls()

    def __repr__(self) -> str:
        return f"Transform(location = {self._location}, rotation = {self._rotation}, scale = {self._scale})"

    def _update_linear(self) -> None:
        self._linear = Matrix.rotation_xyz(*self._rotation) @ Matrix.diagonal(self._scale)

    @property
    def location(self) -> Vector:
        return self._location.copy()

    @location.setter
    def location(self, location: Vector) -> None:
        self._location = location.copy()

    @property
    def rotation(self) -> Vector:
        return self._rotation.copy()

    @rotation.setter
    def rotation(self, rotation: Vector) -> None:
        self._rotation = rotation.copy()
        self._update_linear()

    @property
    def scale(self) -> Vector:
        return self._scale.copy()

    @scale.setter
    def scale(self, scale: Vector) -> None:
        self._scale = scale.copy()
        self._update_linear()

    @property
    def origin(self) -> Vector:
        """The image of the local origin, i.e. the location."""
        return self._location.copy()

    def transform_point(self, p: Vector) -> Vector:
        return self._linear @ p + self._location

    def transform_direction(self, v: Vector) -> Vector:
        """Maps a free vector, ignoring the location."""
        return self._linear @ v

    def inverse_transform_point(self, p: Vector) -> Vector:
        """Maps a point from the target frame back into local space.
        Raises ZeroDivisionError if any scale component is zero."""
        return self._linear.inverse() @ (p - self._location)
