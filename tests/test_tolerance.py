from __future__ import annotations

import inspect
import math
import re
from pathlib import Path

import numpy as np
import pytest

from geomalg import Point3, Quat, Ray3, Vec3, approx, plane, quat, scalar
from geomalg.matrix import mat3, mat3_inverse
from geomalg.plane import Plane3
from geomalg.tolerance import EPS_APPROX, RAY_TMIN, SLERP_DOT_THRESHOLD


def test_tolerance_constants_exist() -> None:
    assert EPS_APPROX > 0.0
    assert 0.0 < SLERP_DOT_THRESHOLD < 1.0
    assert RAY_TMIN == 0.0


def test_key_functions_use_central_tolerance_defaults() -> None:
    assert inspect.signature(Plane3.intersection_r).parameters["t_min"].default == RAY_TMIN
    assert inspect.signature(Plane3.intersects).parameters["t_min"].default == RAY_TMIN
    assert scalar.FLOAT_OPS.epsilon == EPS_APPROX
    assert scalar.INT_OPS.epsilon == EPS_APPROX


def test_modules_reference_shared_tolerance_symbols() -> None:
    assert quat.SLERP_DOT_THRESHOLD == SLERP_DOT_THRESHOLD
    assert plane.RAY_TMIN == RAY_TMIN
    assert approx.approx_epsilon(1.0) == EPS_APPROX


def test_package_has_no_inline_scientific_epsilon_literals() -> None:
    root = Path(__file__).resolve().parents[1] / "geomalg"
    pattern = re.compile(r"\b1e-\d+\b")
    offenders: list[str] = []
    for p in sorted(root.rglob("*.py")):
        if p.name == "tolerance.py":
            continue
        text = p.read_text(encoding="utf-8")
        if pattern.search(text):
            offenders.append(str(p.relative_to(root.parent)))
    assert offenders == []


def test_numpy_float_epsilon_is_eps_approx_in_that_dtype() -> None:
    eps = scalar.default_epsilon(np.float32(1.0))
    assert isinstance(eps, np.float32)
    assert eps == np.float32(EPS_APPROX)


def test_approx_eq_boundary_is_eps_approx() -> None:
    assert approx.approx_eq(1.0, 1.0 + EPS_APPROX / 2)
    assert not approx.approx_eq(1.0, 1.0 + EPS_APPROX * 2)


def test_mat3_inverse_singular_below_eps_approx() -> None:
    assert mat3_inverse(mat3(1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, EPS_APPROX / 2)) is None
    assert mat3_inverse(mat3(1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, EPS_APPROX * 2)) is not None


def _z_rotation_with_dot(d: float) -> Quat:
    half = math.acos(d)
    return Quat.new(math.cos(half), 0.0, 0.0, math.sin(half))


@pytest.mark.parametrize(
    ("dot", "uses_nlerp"),
    [
        ((SLERP_DOT_THRESHOLD + 1.0) / 2, True),
        (SLERP_DOT_THRESHOLD - 0.001, False),
    ],
)
def test_slerp_switches_to_nlerp_above_threshold(
    monkeypatch: pytest.MonkeyPatch, dot: float, uses_nlerp: bool
) -> None:
    calls: list[float] = []
    original = Quat.nlerp

    def spy(self: Quat, other: Quat, amount: float) -> Quat:
        calls.append(amount)
        return original(self, other, amount)

    monkeypatch.setattr(Quat, "nlerp", spy)
    a = Quat.identity()
    b = _z_rotation_with_dot(dot)
    assert a.dot(b) == pytest.approx(dot)
    a.slerp(b, 0.25)
    assert bool(calls) is uses_nlerp


def test_ray_plane_default_t_min_accepts_zero_and_rejects_negative() -> None:
    floor = Plane3.from_abcd(0.0, 0.0, 1.0, 0.0)
    up = Vec3(0.0, 0.0, 1.0)
    on_plane = Ray3.new(Point3(1.0, 2.0, 0.0), up)
    above = Ray3.new(Point3(0.0, 0.0, 1.0), up)
    assert floor.intersection_r(on_plane) == Point3(1.0, 2.0, 0.0)
    assert floor.intersection_r(above) is None
    assert floor.intersection_r(above, t_min=RAY_TMIN - 2.0) == Point3(0.0, 0.0, 0.0)
