from __future__ import annotations

import numpy as np

from geomalg import Plane3, Point3, Quat, Vec3, approx_eq, approx_eq_eps
from geomalg.tolerance import EPS_APPROX


def test_scalar_comparison_is_strict_inside_epsilon() -> None:
    assert approx_eq(1.0, 1.0 + EPS_APPROX * 0.5)
    assert not approx_eq(1.0, 1.0 + EPS_APPROX * 2.0)
    assert approx_eq_eps(1.0, 1.05, 0.1)


def test_aggregate_default_epsilon_comes_from_scalar() -> None:
    assert Point3(1.0, 2.0, 3.0).approx_epsilon() == EPS_APPROX
    assert Quat.identity().approx_epsilon() == EPS_APPROX


def test_aggregate_requires_every_field() -> None:
    p = Point3(1.0, 2.0, 3.0)
    assert p.approx_eq(Point3(1.0, 2.0, 3.0 + EPS_APPROX * 0.1))
    assert not p.approx_eq(Point3(1.0, 2.0, 3.1))
    assert not p.approx_eq(Point3(1.1, 2.0, 3.0))


def test_composite_fields_recurse() -> None:
    a = Plane3.from_abcd(0.0, 0.0, 1.0, 2.0)
    assert a.approx_eq(Plane3.from_abcd(0.0, 0.0, 1.0 + EPS_APPROX * 0.1, 2.0))
    assert not a.approx_eq(Plane3.from_abcd(0.0, 0.1, 1.0, 2.0))
    assert not a.approx_eq(Plane3.from_abcd(0.0, 0.0, 1.0, 2.5))


def test_explicit_epsilon_overrides_default() -> None:
    a = Vec3(1.0, 1.0, 1.0)
    b = Vec3(1.01, 0.99, 1.0)
    assert not a.approx_eq(b)
    assert a.approx_eq_eps(b, 0.05)


def test_different_types_never_compare_equal() -> None:
    assert not Point3(1.0, 2.0, 3.0).approx_eq(Vec3(1.0, 2.0, 3.0))


def test_arrays_compare_elementwise() -> None:
    assert approx_eq(np.eye(3), np.eye(3) + EPS_APPROX * 0.1)
    assert not approx_eq(np.eye(3), np.zeros((3, 3)))
    assert not approx_eq(np.eye(3), np.eye(2))
