"""
Quaternions in scalar/vector form: ``q = s + v.x*i + v.y*j + v.z*k``.

Rotation operations (``mul_v``, ``to_mat3``, ``slerp``) assume a unit
quaternion; the arithmetic operations accept any quaternion.

Rotation matrix convention
--------------------------
``to_mat3`` returns a row-major ``numpy.ndarray`` acting on column vectors, so
``q.to_mat3() @ v.to_array()`` equals ``q.mul_v(v)``. ``from_mat3`` is its
inverse for proper rotation matrices.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Generic, Iterator

import numpy as np

from geomalg.approx import ApproxEq, approx_eq
from geomalg.errors import DegenerateGeometryError
from geomalg.matrix import Mat3, mat3_from_axes, mat3_look_at
from geomalg.scalar import S, acos, clamp, cos, is_scalar, one, sin, sqrt, two, zero
from geomalg.tolerance import SLERP_DOT_THRESHOLD
from geomalg.vector import Vec3

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Quat(ApproxEq, Generic[S]):
    s: S
    v: Vec3

    # -- construction -------------------------------------------------------

    @staticmethod
    def new(w: Any, xi: Any, yj: Any, zk: Any) -> "Quat":
        """Quaternion from its scalar part ``w`` and imaginary parts ``xi``, ``yj``, ``zk``."""
        return Quat(w, Vec3(xi, yj, zk))

    @staticmethod
    def from_sv(s: Any, v: Vec3) -> "Quat":
        return Quat(s, v)

    @staticmethod
    def identity(like: Any = 0.0) -> "Quat":
        """Multiplicative identity ``1 + 0i + 0j + 0k``."""
        return Quat(one(like), Vec3.zero(like))

    @staticmethod
    def zero(like: Any = 0.0) -> "Quat":
        """Additive identity ``0 + 0i + 0j + 0k``."""
        return Quat(zero(like), Vec3.zero(like))

    @staticmethod
    def from_mat3(m: Mat3) -> "Quat":
        """Quaternion of a proper rotation matrix (Shepperd's method)."""
        r = np.asarray(m, dtype=float)
        trace = r[0, 0] + r[1, 1] + r[2, 2]
        if trace > 0.0:
            k = np.sqrt(trace + 1.0) * 2.0
            return Quat.new(
                float(0.25 * k),
                float((r[2, 1] - r[1, 2]) / k),
                float((r[0, 2] - r[2, 0]) / k),
                float((r[1, 0] - r[0, 1]) / k),
            )
        if r[0, 0] > r[1, 1] and r[0, 0] > r[2, 2]:
            k = np.sqrt(1.0 + r[0, 0] - r[1, 1] - r[2, 2]) * 2.0
            return Quat.new(
                float((r[2, 1] - r[1, 2]) / k),
                float(0.25 * k),
                float((r[0, 1] + r[1, 0]) / k),
                float((r[0, 2] + r[2, 0]) / k),
            )
        if r[1, 1] > r[2, 2]:
            k = np.sqrt(1.0 + r[1, 1] - r[0, 0] - r[2, 2]) * 2.0
            return Quat.new(
                float((r[0, 2] - r[2, 0]) / k),
                float((r[0, 1] + r[1, 0]) / k),
                float(0.25 * k),
                float((r[1, 2] + r[2, 1]) / k),
            )
        k = np.sqrt(1.0 + r[2, 2] - r[0, 0] - r[1, 1]) * 2.0
        return Quat.new(
            float((r[1, 0] - r[0, 1]) / k),
            float((r[0, 2] + r[2, 0]) / k),
            float((r[1, 2] + r[2, 1]) / k),
            float(0.25 * k),
        )

    @staticmethod
    def from_axes(x: Vec3, y: Vec3, z: Vec3) -> "Quat":
        return Quat.from_mat3(mat3_from_axes(x, y, z))

    @staticmethod
    def look_at(direction: Vec3, up: Vec3) -> "Quat":
        return Quat.from_mat3(mat3_look_at(direction, up))

    # -- components ---------------------------------------------------------

    def __iter__(self) -> Iterator[Any]:
        yield self.s
        yield self.v.x
        yield self.v.y
        yield self.v.z

    def __len__(self) -> int:
        return 4

    def i(self, index: int) -> Any:
        if not 0 <= index < 4:
            raise IndexError(f"Quat has no component {index}")
        return list(self)[index]

    def swap(self, a: int, b: int) -> "Quat":
        comps = list(self)
        if not (0 <= a < 4 and 0 <= b < 4):
            raise IndexError(f"Quat has no components ({a}, {b})")
        comps[a], comps[b] = comps[b], comps[a]
        return Quat.new(*comps)

    def to_array(self) -> np.ndarray:
        return np.array(list(self), dtype=float)

    # -- algebra ------------------------------------------------------------

    def mul_s(self, value: Any) -> "Quat":
        return Quat(self.s * value, self.v * value)

    def div_s(self, value: Any) -> "Quat":
        return Quat(self.s / value, self.v / value)

    def mul_v(self, vec: Vec3) -> Vec3:
        """Rotate ``vec`` by this (unit) quaternion."""
        tmp = self.v.cross(vec) + vec * self.s
        return self.v.cross(tmp) * two(self.s) + vec

    def add_q(self, other: "Quat") -> "Quat":
        return Quat.new(*(a + b for a, b in zip(self, other)))

    def sub_q(self, other: "Quat") -> "Quat":
        return Quat.new(*(a - b for a, b in zip(self, other)))

    def mul_q(self, other: "Quat") -> "Quat":
        """Hamilton product ``self * other``."""
        s1, x1, y1, z1 = self
        s2, x2, y2, z2 = other
        return Quat.new(
            s1 * s2 - x1 * x2 - y1 * y2 - z1 * z2,
            s1 * x2 + x1 * s2 + y1 * z2 - z1 * y2,
            s1 * y2 + y1 * s2 + z1 * x2 - x1 * z2,
            s1 * z2 + z1 * s2 + x1 * y2 - y1 * x2,
        )

    def dot(self, other: "Quat") -> Any:
        return self.s * other.s + self.v.dot(other.v)

    def conjugate(self) -> "Quat":
        return Quat(self.s, -self.v)

    def inverse(self) -> "Quat":
        return self.conjugate().div_s(self.magnitude2())

    def magnitude2(self) -> Any:
        """Squared magnitude; cheaper than ``magnitude`` for comparisons."""
        return self.s * self.s + self.v.magnitude2()

    def magnitude(self) -> Any:
        return sqrt(self.magnitude2())

    def is_zero(self) -> bool:
        return approx_eq(self, Quat.zero(self.s))

    def normalize(self) -> "Quat":
        mag = self.magnitude()
        if approx_eq(mag, zero(mag)):
            raise DegenerateGeometryError("Cannot normalize a zero quaternion.")
        return self.mul_s(one(mag) / mag)

    # -- interpolation ------------------------------------------------------

    def nlerp(self, other: "Quat", amount: Any) -> "Quat":
        """Normalized linear interpolation; cheap but not constant angular velocity."""
        return self.mul_s(one(amount) - amount).add_q(other.mul_s(amount)).normalize()

    def slerp(self, other: "Quat", amount: Any) -> "Quat":
        """
        Spherical linear interpolation between two unit quaternions.

        Nearly parallel inputs (dot above ``SLERP_DOT_THRESHOLD``) use ``nlerp``,
        where the trigonometric form loses precision. The dot product is
        clamped to ``[-1, 1]`` before ``acos``.
        """
        d = self.dot(other)
        if d > SLERP_DOT_THRESHOLD:
            return self.nlerp(other, amount)

        o = one(d)
        robust_d = clamp(d, -o, o)
        theta_0 = acos(robust_d)
        theta = theta_0 * amount

        q = other.sub_q(self.mul_s(robust_d))
        if q.is_zero():
            # antipodal inputs: every great circle through self is a shortest arc
            logger.debug("slerp: antipodal quaternions, using fixed perpendicular")
            q = self._perpendicular()
        q = q.normalize()

        return self.mul_s(cos(theta)).add_q(q.mul_s(sin(theta)))

    def _perpendicular(self) -> "Quat":
        return Quat.new(-self.v.x, self.s, -self.v.z, self.v.y)

    # -- conversion ---------------------------------------------------------

    def to_mat3(self) -> Mat3:
        x2 = self.v.x + self.v.x
        y2 = self.v.y + self.v.y
        z2 = self.v.z + self.v.z

        xx2 = x2 * self.v.x
        xy2 = x2 * self.v.y
        xz2 = x2 * self.v.z

        yy2 = y2 * self.v.y
        yz2 = y2 * self.v.z
        zz2 = z2 * self.v.z

        sx2 = x2 * self.s
        sy2 = y2 * self.s
        sz2 = z2 * self.s

        _1 = one(self.s)

        return np.array(
            [
                [_1 - yy2 - zz2, xy2 - sz2, xz2 + sy2],
                [xy2 + sz2, _1 - xx2 - zz2, yz2 - sx2],
                [xz2 - sy2, yz2 + sx2, _1 - xx2 - yy2],
            ],
            dtype=float,
        )

    # -- operators ----------------------------------------------------------

    def __add__(self, other: Any) -> "Quat":
        if not isinstance(other, Quat):
            return NotImplemented
        return self.add_q(other)

    def __sub__(self, other: Any) -> "Quat":
        if not isinstance(other, Quat):
            return NotImplemented
        return self.sub_q(other)

    def __neg__(self) -> "Quat":
        return Quat(-self.s, -self.v)

    def __mul__(self, other: Any):
        if isinstance(other, Quat):
            return self.mul_q(other)
        if isinstance(other, Vec3):
            return self.mul_v(other)
        if is_scalar(other):
            return self.mul_s(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> "Quat":
        if is_scalar(other):
            return self.mul_s(other)
        return NotImplemented

    def __truediv__(self, other: Any) -> "Quat":
        if is_scalar(other):
            return self.div_s(other)
        return NotImplemented

    def __str__(self) -> str:
        return f"{self.s} + {self.v.x}i + {self.v.y}j + {self.v.z}k"
