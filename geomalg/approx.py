"""
Approximate equality.

All geometric predicates in the package are epsilon based. Scalars compare as
``abs(a - b) < epsilon``; aggregates compare field by field under one shared
epsilon, recursing into composite fields.
"""

from __future__ import annotations

from dataclasses import fields
from typing import Any

import numpy as np

from geomalg.scalar import default_epsilon


def approx_epsilon(value: Any) -> Any:
    method = getattr(value, "approx_epsilon", None)
    if method is not None:
        return method()
    if isinstance(value, np.ndarray):
        return default_epsilon(value.dtype.type(0))
    if isinstance(value, (tuple, list)):
        return approx_epsilon(value[0])
    return default_epsilon(value)


def approx_eq_eps(a: Any, b: Any, epsilon: Any) -> bool:
    method = getattr(a, "approx_eq_eps", None)
    if method is not None:
        return bool(method(b, epsilon))
    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        aa = np.asarray(a, dtype=float)
        bb = np.asarray(b, dtype=float)
        if aa.shape != bb.shape:
            return False
        return bool(np.all(np.abs(aa - bb) < epsilon))
    if isinstance(a, (tuple, list)):
        if not isinstance(b, (tuple, list)) or len(a) != len(b):
            return False
        return all(approx_eq_eps(x, y, epsilon) for x, y in zip(a, b))
    return bool(abs(a - b) < epsilon)


def approx_eq(a: Any, b: Any) -> bool:
    return approx_eq_eps(a, b, approx_epsilon(a))


class ApproxEq:
    """
    Mixin giving a dataclass the approximate-equality contract.

    ``approx_eq_eps`` holds iff every dataclass field of ``self`` and ``other``
    is approximately equal under the same epsilon. Evaluation stops at the
    first failing field.
    """

    def _first_scalar(self) -> Any:
        value = getattr(self, fields(self)[0].name)
        if isinstance(value, ApproxEq):
            return value._first_scalar()
        return value

    def approx_epsilon(self) -> Any:
        return default_epsilon(self._first_scalar())

    def approx_eq(self, other: Any) -> bool:
        return self.approx_eq_eps(other, self.approx_epsilon())

    def approx_eq_eps(self, other: Any, epsilon: Any) -> bool:
        if type(other) is not type(self):
            return False
        return all(
            approx_eq_eps(getattr(self, f.name), getattr(other, f.name), epsilon)
            for f in fields(self)
        )
