## vector primitives for dxfent entities
## Copyright (c) 2020 Richard W. DeVaul
## Copyright (c) 2024 dxfent contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""2D and 3D vector types used by dxfent entities.

``Vector3`` is mutable so that it can be normalized in place, the way
DXF normals are handled.  Because of that there are no shared module
level vector constants: ``Vector3.zero()`` and ``Vector3.unit_z()``
return fresh instances every call.

``Vector2`` is an immutable value, used for tessellated polyline
vertexes.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple

## empirically chosen tolerance for double precision geometry
epsilon = 0.000005


def isgoodnum(n) -> bool:
    """determine if an argument is actually a scalar number, and not boolean"""
    return (not isinstance(n, bool)) and isinstance(n, (int, float))


def close(a: float, b: float, tol: float = epsilon) -> bool:
    """are two scalars the same within ``tol``"""
    return abs(a - b) < tol


@dataclass
class Vector3:
    """Three component vector with in-place normalization."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self) -> None:
        for name in ("x", "y", "z"):
            value = getattr(self, name)
            if not isgoodnum(value):
                raise ValueError('bad {} component for Vector3: {}'.format(name, value))
            setattr(self, name, float(value))

    @classmethod
    def zero(cls) -> "Vector3":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def unit_x(cls) -> "Vector3":
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def unit_y(cls) -> "Vector3":
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def unit_z(cls) -> "Vector3":
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def of(cls, value: "Vector3 | Sequence[float]") -> "Vector3":
        """Copy a ``Vector3`` or lift an ``(x, y, z)`` sequence."""
        if isinstance(value, Vector3):
            return value.copy()
        if isinstance(value, (tuple, list)) and len(value) == 3:
            return cls(value[0], value[1], value[2])
        raise ValueError('bad thing passed to Vector3.of(): {}'.format(value))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, c: float) -> "Vector3":
        return Vector3(self.x * c, self.y * c, self.z * c)

    __rmul__ = __mul__

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def copy(self) -> "Vector3":
        return Vector3(self.x, self.y, self.z)

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(self.y * other.z - self.z * other.y,
                       self.z * other.x - self.x * other.z,
                       self.x * other.y - self.y * other.x)

    def normalize(self) -> "Vector3":
        """Scale this vector to unit length in place and return it.

        A vector shorter than ``epsilon`` has no direction; this raises
        ``ValueError`` and leaves the components untouched.
        """
        m = self.magnitude()
        if m < epsilon:
            raise ValueError('zero-length vector cannot be normalized: {}'.format(self))
        self.x /= m
        self.y /= m
        self.z /= m
        return self

    def normalized(self) -> "Vector3":
        return self.copy().normalize()

    def isclose(self, other: "Vector3", tol: float = epsilon) -> bool:
        return (self - other).magnitude() < tol


@dataclass(frozen=True)
class Vector2:
    """Immutable two component vector."""

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        for name in ("x", "y"):
            value = getattr(self, name)
            if not isgoodnum(value):
                raise ValueError('bad {} component for Vector2: {}'.format(name, value))
            object.__setattr__(self, name, float(value))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def distance(self, other: "Vector2") -> float:
        return (self - other).magnitude()

    def isclose(self, other: "Vector2", tol: float = epsilon) -> bool:
        return self.distance(other) < tol


__all__ = [
    "epsilon",
    "isgoodnum",
    "close",
    "Vector2",
    "Vector3",
]
