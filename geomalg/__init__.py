"""
geomalg

Points, implicit planes and quaternion rotations over a generic scalar, with
epsilon-based equality throughout.
"""

import logging

from geomalg.approx import ApproxEq, approx_eq, approx_eq_eps
from geomalg.errors import DegenerateGeometryError
from geomalg.plane import Plane3
from geomalg.point import Point2, Point3
from geomalg.quat import Quat
from geomalg.ray import Ray2, Ray3
from geomalg.vector import Vec2, Vec3, Vec4

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ApproxEq",
    "approx_eq",
    "approx_eq_eps",
    "DegenerateGeometryError",
    "Plane3",
    "Point2",
    "Point3",
    "Quat",
    "Ray2",
    "Ray3",
    "Vec2",
    "Vec3",
    "Vec4",
]
