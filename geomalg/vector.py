"""
Vector types for directions, normals and displacements.

Points live in ``geomalg.point``; a vector converts to a point only through an
explicit field copy (``as_point``).
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING, Any, Generic, Iterator, Sequence

import numpy as np

from geomalg.approx import ApproxEq, approx_eq
from geomalg.errors import DegenerateGeometryError
from geomalg.scalar import S, is_scalar, one, sqrt, zero

if TYPE_CHECKING:
    from geomalg.point import Point2, Point3


class _Components(ApproxEq):
    """Shared dimension access for fixed-size coordinate types."""

    def __iter__(self) -> Iterator[Any]:
        for f in fields(self):
            yield getattr(self, f.name)

    def __len__(self) -> int:
        return len(fields(self))

    def i(self, index: int) -> Any:
        names = [f.name for f in fields(self)]
        if not 0 <= index < len(names):
            raise IndexError(f"{type(self).__name__} has no component {index}")
        return getattr(self, names[index])

    def swap(self, a: int, b: int):
        names = [f.name for f in fields(self)]
        if not (0 <= a < len(names) and 0 <= b < len(names)):
            raise IndexError(f"{type(self).__name__} has no components ({a}, {b})")
        return replace(self, **{names[a]: self.i(b), names[b]: self.i(a)})

    def to_array(self) -> np.ndarray:
        return np.array(list(self), dtype=float)

    def __str__(self) -> str:
        return "[" + ", ".join(str(c) for c in self) + "]"


class _VectorOps(_Components):
    def __add__(self, other: Any):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(*(a + b for a, b in zip(self, other)))

    def __sub__(self, other: Any):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(*(a - b for a, b in zip(self, other)))

    def __mul__(self, scalar: Any):
        if not is_scalar(scalar):
            return NotImplemented
        return type(self)(*(c * scalar for c in self))

    def __rmul__(self, scalar: Any):
        return self.__mul__(scalar)

    def __truediv__(self, scalar: Any):
        if not is_scalar(scalar):
            return NotImplemented
        return type(self)(*(c / scalar for c in self))

    def __neg__(self):
        return type(self)(*(-c for c in self))

    def mul_s(self, scalar: Any):
        return self * scalar

    def div_s(self, scalar: Any):
        return self / scalar

    def mul_v(self, other: Any):
        """Component-wise product."""
        return type(self)(*(a * b for a, b in zip(self, other)))

    def dot(self, other: Any) -> Any:
        it = iter(zip(self, other))
        a, b = next(it)
        total = a * b
        for a, b in it:
            total = total + a * b
        return total

    def magnitude2(self) -> Any:
        return self.dot(self)

    def magnitude(self) -> Any:
        return sqrt(self.magnitude2())

    def is_zero(self) -> bool:
        return approx_eq(self, type(self).zero(like=self.i(0)))

    def normalize(self):
        mag = self.magnitude()
        if approx_eq(mag, zero(mag)):
            raise DegenerateGeometryError("Cannot normalize a zero-length vector.")
        return self * (one(mag) / mag)

    @classmethod
    def from_array(cls, arr: Sequence[Any]):
        n = len(fields(cls))
        return cls(*(float(arr[k]) for k in range(n)))


@dataclass(frozen=True)
class Vec2(_VectorOps, Generic[S]):
    x: S
    y: S

    @staticmethod
    def zero(like: Any = 0.0) -> "Vec2":
        z = zero(like)
        return Vec2(z, z)

    def as_point(self) -> "Point2":
        from geomalg.point import Point2

        return Point2(self.x, self.y)


@dataclass(frozen=True)
class Vec3(_VectorOps, Generic[S]):
    x: S
    y: S
    z: S

    @staticmethod
    def zero(like: Any = 0.0) -> "Vec3":
        z = zero(like)
        return Vec3(z, z, z)

    def cross(self, other: "Vec3") -> "Vec3":
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def as_point(self) -> "Point3":
        from geomalg.point import Point3

        return Point3(self.x, self.y, self.z)


@dataclass(frozen=True)
class Vec4(_VectorOps, Generic[S]):
    x: S
    y: S
    z: S
    w: S

    @staticmethod
    def zero(like: Any = 0.0) -> "Vec4":
        z = zero(like)
        return Vec4(z, z, z, z)
