"""
Three-dimensional planes.

A plane is stored in implicit form ``normal . p + distance = 0``:

- ``normal.x``, ``normal.y``, ``normal.z`` are ``A``, ``B``, ``C``
- ``distance`` is ``D``

``Plane3.distance(point)`` is a true Euclidean distance only when ``normal``
has unit length. ``from_3p`` normalizes; ``from_abcd``, ``from_nd`` and
``from_vec4`` store their input unchanged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Generic, Optional

import numpy as np

from geomalg.approx import ApproxEq, approx_eq
from geomalg.matrix import mat3_from_rows, mat3_inverse
from geomalg.point import Point3
from geomalg.ray import Ray3
from geomalg.scalar import S, zero
from geomalg.tolerance import RAY_TMIN
from geomalg.vector import Vec3, Vec4

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Plane3(ApproxEq, Generic[S]):
    normal: Vec3
    distance_term: S

    @staticmethod
    def from_abcd(a: Any, b: Any, c: Any, d: Any) -> "Plane3":
        return Plane3(Vec3(a, b, c), d)

    @staticmethod
    def from_nd(normal: Vec3, distance: Any) -> "Plane3":
        return Plane3(normal, distance)

    @staticmethod
    def from_vec4(vec: Vec4) -> "Plane3":
        return Plane3.from_abcd(vec.x, vec.y, vec.z, vec.w)

    @staticmethod
    def from_3p(a: Point3, b: Point3, c: Point3) -> Optional["Plane3"]:
        """
        Plane through the three points, or ``None`` when they are collinear or
        coincident. The normal follows the winding ``a -> b -> c``.
        """
        v0 = b - a
        v1 = c - a
        normal = v0.cross(v1)
        if normal.is_zero():
            logger.debug("from_3p: degenerate points %s, %s, %s", a, b, c)
            return None
        normal = normal.normalize()
        return Plane3(normal, -a.to_vec().dot(normal))

    def to_vec4(self) -> Vec4:
        return Vec4(self.normal.x, self.normal.y, self.normal.z, self.distance_term)

    def distance(self, pos: Point3) -> Any:
        """Signed distance from the plane to ``pos`` (scaled by ``|normal|``)."""
        return self.normal.dot(pos.to_vec()) + self.distance_term

    def contains(self, pos: Point3) -> bool:
        """``True`` when ``pos`` lies behind the plane."""
        return self.distance(pos) < zero(self.distance_term)

    def intersection_r(self, ray: Ray3, t_min: Any = RAY_TMIN) -> Optional[Point3]:
        """
        Point where ``ray`` meets the plane.

        Returns ``None`` when the ray runs parallel to the plane or when the
        hit lies behind the ray origin (``t < t_min``).
        """
        denom = self.normal.dot(ray.direction)
        if approx_eq(denom, zero(denom)):
            return None
        t = -(self.normal.dot(ray.origin.to_vec()) + self.distance_term) / denom
        if t < t_min:
            return None
        return ray.at(t)

    def intersects(self, ray: Ray3, t_min: Any = RAY_TMIN) -> bool:
        return self.intersection_r(ray, t_min=t_min) is not None

    def intersection_2pl(self, other: "Plane3") -> Optional[Ray3]:
        """
        Line shared by ``self`` and ``other`` as a ray, or ``None`` when the
        planes are parallel or coincident.

        The ray direction is ``cross(self.normal, other.normal)``. Its origin is
        the point of the line closest to the world origin: the three-plane
        solve against an auxiliary plane through the origin, perpendicular to
        that direction. The distance terms are negated so the solve lands on
        ``normal . p + distance = 0`` for both planes.
        """
        direction = self.normal.cross(other.normal)
        if direction.is_zero():
            logger.debug("intersection_2pl: parallel planes %s and %s", self, other)
            return None
        aux = Plane3.from_nd(direction, zero(self.distance_term))
        origin = aux.intersection_3pl(
            Plane3.from_nd(self.normal, -self.distance_term),
            Plane3.from_nd(other.normal, -other.distance_term),
        )
        if origin is None:
            return None
        return Ray3.new(origin, direction)

    def intersection_3pl(self, other_a: "Plane3", other_b: "Plane3") -> Optional[Point3]:
        """
        Point shared by ``self``, ``other_a`` and ``other_b``, or ``None`` when
        their normals are linearly dependent.

        Solves ``N p = (d_self, d_a, d_b)`` where ``N`` holds one plane normal
        per row. The result satisfies ``normal . p = distance`` for each plane,
        which is the plane equation ``normal . p + distance = 0`` only when all
        three distance terms are zero. Pass planes with negated distance terms
        to get the point lying on all three planes.
        """
        mx = mat3_from_rows(self.normal, other_a.normal, other_b.normal)
        inv = mat3_inverse(mx)
        if inv is None:
            logger.debug("intersection_3pl: coplanar normals")
            return None
        d = np.array([self.distance_term, other_a.distance_term, other_b.distance_term], dtype=float)
        return Point3.origin() + Vec3.from_array(inv @ d)

    def __str__(self) -> str:
        return (
            f"{self.normal.x:g}x + {self.normal.y:g}y + {self.normal.z:g}z + "
            f"{self.distance_term:g} = 0"
        )
