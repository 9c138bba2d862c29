from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from geomalg.approx import ApproxEq

if TYPE_CHECKING:
    from geomalg.point import Point2, Point3
    from geomalg.vector import Vec2, Vec3


@dataclass(frozen=True)
class Ray2(ApproxEq):
    origin: "Point2"
    direction: "Vec2"

    @classmethod
    def new(cls, origin: "Point2", direction: "Vec2") -> "Ray2":
        return cls(origin, direction)

    def at(self, t: Any) -> "Point2":
        return self.origin + self.direction * t


@dataclass(frozen=True)
class Ray3(ApproxEq):
    origin: "Point3"
    direction: "Vec3"

    @classmethod
    def new(cls, origin: "Point3", direction: "Vec3") -> "Ray3":
        return cls(origin, direction)

    def at(self, t: Any) -> "Point3":
        """Point reached after travelling ``t`` units of ``direction`` from ``origin``."""
        return self.origin + self.direction * t
