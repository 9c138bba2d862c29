"""
3x3 matrix helpers.

Matrices are plain ``numpy.ndarray`` values of shape (3, 3), row-major, acting
on column vectors (``m @ v``). Constructors taking axes place them as columns,
so a rotation built from axes maps the standard basis onto those axes.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import numpy as np

from geomalg.approx import approx_eq, approx_eq_eps
from geomalg.errors import DegenerateGeometryError
from geomalg.vector import Vec3

logger = logging.getLogger(__name__)

Mat3 = np.ndarray  # 3x3, row-major


def mat3(
    m00: float, m01: float, m02: float,
    m10: float, m11: float, m12: float,
    m20: float, m21: float, m22: float,
) -> Mat3:
    """Build a matrix from nine scalars given row by row."""
    return np.array(
        [
            [m00, m01, m02],
            [m10, m11, m12],
            [m20, m21, m22],
        ],
        dtype=float,
    )


def mat3_from_cols(c0: Vec3, c1: Vec3, c2: Vec3) -> Mat3:
    return np.array(
        [
            [c0.x, c1.x, c2.x],
            [c0.y, c1.y, c2.y],
            [c0.z, c1.z, c2.z],
        ],
        dtype=float,
    )


def mat3_from_rows(r0: Vec3, r1: Vec3, r2: Vec3) -> Mat3:
    return np.array([list(r0), list(r1), list(r2)], dtype=float)


def mat3_identity() -> Mat3:
    return np.eye(3, dtype=float)


def mat3_inverse(m: Mat3) -> Optional[Mat3]:
    """Inverse of ``m``, or ``None`` when its determinant is approximately zero."""
    m = np.asarray(m, dtype=float)
    det = float(np.linalg.det(m))
    if approx_eq(det, 0.0):
        logger.debug("mat3_inverse: singular matrix (det=%g)", det)
        return None
    return np.linalg.inv(m)


def mat3_mul_v(m: Mat3, v: Vec3) -> Vec3:
    return Vec3.from_array(np.asarray(m, dtype=float) @ v.to_array())


def mat3_approx_eq(a: Mat3, b: Mat3, epsilon: Optional[Any] = None) -> bool:
    if epsilon is None:
        return approx_eq(np.asarray(a, dtype=float), np.asarray(b, dtype=float))
    return approx_eq_eps(np.asarray(a, dtype=float), np.asarray(b, dtype=float), epsilon)


def mat3_from_axes(x: Vec3, y: Vec3, z: Vec3) -> Mat3:
    """Basis matrix whose columns are the axes ``x``, ``y`` and ``z``."""
    return mat3_from_cols(x, y, z)


def mat3_look_at(direction: Vec3, up: Vec3) -> Mat3:
    """
    Orthonormal basis with local +Z along ``direction`` and local +Y as close
    to ``up`` as the constraint allows.

    ``mat3_look_at(Vec3(0, 0, 1), Vec3(0, 1, 0))`` is the identity.
    """
    z_axis = direction.normalize()
    side = up.cross(z_axis)
    if side.is_zero():
        raise DegenerateGeometryError("look_at: up vector is parallel to the view direction.")
    x_axis = side.normalize()
    y_axis = z_axis.cross(x_axis)
    return mat3_from_axes(x_axis, y_axis, z_axis)
