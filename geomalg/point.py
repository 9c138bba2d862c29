"""
Affine points.

A point is a position, not a displacement. Structurally it matches the vector
of the same dimension, but the arithmetic is restricted:

- ``Point + Vec -> Point`` (translation)
- ``Point - Vec -> Point`` (inverse translation)
- ``Point - Point -> Vec`` (displacement)
- ``Point * Vec -> Point`` (per-component scale about the origin)

Adding two points is a type error. Conversions to and from vectors copy fields.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Sequence

from geomalg.ray import Ray2, Ray3
from geomalg.scalar import S, one, sqrt, zero
from geomalg.vector import Vec2, Vec3, Vec4, _Components


class _PointOps(_Components):
    _vec: type
    _ray: type

    def translate_v(self, offset: Any):
        return type(self)(*(p + o for p, o in zip(self, offset)))

    def scale_s(self, factor: Any):
        return type(self)(*(p * factor for p in self))

    def scale_v(self, factor: Any):
        return type(self)(*(p * f for p, f in zip(self, factor)))

    def displacement(self, other: Any):
        """Vector from ``other`` to ``self``."""
        return self._vec(*(a - b for a, b in zip(self, other)))

    def distance2(self, other: Any) -> Any:
        return other.displacement(self).magnitude2()

    def distance(self, other: Any) -> Any:
        return sqrt(self.distance2(other))

    def direction(self, other: Any):
        """Unit vector pointing from ``self`` toward ``other``."""
        return other.displacement(self).normalize()

    def ray_to(self, other: Any):
        return self._ray.new(self, self.direction(other))

    def to_vec(self):
        return self._vec(*self)

    def __add__(self, other: Any):
        if isinstance(other, self._vec):
            return self.translate_v(other)
        return NotImplemented

    def __sub__(self, other: Any):
        if type(other) is type(self):
            return self.displacement(other)
        if isinstance(other, self._vec):
            return self.translate_v(-other)
        return NotImplemented

    def __mul__(self, other: Any):
        if isinstance(other, self._vec):
            return self.scale_v(other)
        return NotImplemented

    @classmethod
    def from_array(cls, arr: Sequence[Any]):
        return cls(*(float(arr[k]) for k in range(len(cls.__dataclass_fields__))))


@dataclass(frozen=True)
class Point2(_PointOps, Generic[S]):
    x: S
    y: S

    _vec = Vec2
    _ray = Ray2

    @staticmethod
    def origin(like: Any = 0.0) -> "Point2":
        z = zero(like)
        return Point2(z, z)

    @staticmethod
    def from_vec2(vec: Vec2) -> "Point2":
        return Point2(vec.x, vec.y)

    def to_homogeneous(self) -> Vec3:
        """``[x, y] -> [x, y, 1]``"""
        return Vec3(self.x, self.y, one(self.x))


@dataclass(frozen=True)
class Point3(_PointOps, Generic[S]):
    x: S
    y: S
    z: S

    _vec = Vec3
    _ray = Ray3

    @staticmethod
    def origin(like: Any = 0.0) -> "Point3":
        z = zero(like)
        return Point3(z, z, z)

    @staticmethod
    def from_vec3(vec: Vec3) -> "Point3":
        return Point3(vec.x, vec.y, vec.z)

    def to_homogeneous(self) -> Vec4:
        """``[x, y, z] -> [x, y, z, 1]``"""
        return Vec4(self.x, self.y, self.z, one(self.x))
