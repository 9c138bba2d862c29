"""
Scalar capability set.

Every geometric type in the package is generic over its scalar. The operations
a scalar must support beyond the arithmetic and ordering operators are bundled
in one ``ScalarOps`` record per scalar family, looked up from the value's type.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, Protocol, TypeVar

import numpy as np

from geomalg.tolerance import EPS_APPROX


class Scalar(Protocol):
    """Structural type of a scalar: ring arithmetic, division and ordering."""

    def __add__(self, other: Any) -> Any: ...
    def __sub__(self, other: Any) -> Any: ...
    def __mul__(self, other: Any) -> Any: ...
    def __truediv__(self, other: Any) -> Any: ...
    def __neg__(self) -> Any: ...
    def __abs__(self) -> Any: ...
    def __lt__(self, other: Any) -> bool: ...


S = TypeVar("S")


@dataclass(frozen=True)
class ScalarOps:
    zero: Any
    one: Any
    epsilon: Any
    sqrt: Callable[[Any], Any]
    acos: Callable[[Any], Any]
    cos: Callable[[Any], Any]
    sin: Callable[[Any], Any]


FLOAT_OPS = ScalarOps(
    zero=0.0,
    one=1.0,
    epsilon=EPS_APPROX,
    sqrt=math.sqrt,
    acos=math.acos,
    cos=math.cos,
    sin=math.sin,
)

INT_OPS = ScalarOps(
    zero=0,
    one=1,
    epsilon=EPS_APPROX,
    sqrt=math.sqrt,
    acos=math.acos,
    cos=math.cos,
    sin=math.sin,
)


def _numpy_ops(dtype: type) -> ScalarOps:
    # integer dtypes would truncate the epsilon to zero
    eps = dtype(EPS_APPROX) if issubclass(dtype, np.floating) else EPS_APPROX
    return ScalarOps(
        zero=dtype(0),
        one=dtype(1),
        epsilon=eps,
        sqrt=np.sqrt,
        acos=np.arccos,
        cos=np.cos,
        sin=np.sin,
    )


_REGISTRY: Dict[type, ScalarOps] = {
    float: FLOAT_OPS,
    int: INT_OPS,
}

# Abstract numpy families; concrete dtypes get their own ops on first use.
_NUMPY_FAMILIES = (np.floating, np.integer)


def register_scalar(kind: type, ops: ScalarOps) -> None:
    """Make ``kind`` (and its subclasses) usable as a geometric scalar."""
    _REGISTRY[kind] = ops


def ops_for(value: Any) -> ScalarOps:
    # numpy.float64 reaches numpy.floating before float, bool subclasses int.
    kind = type(value)
    for base in kind.__mro__:
        ops = _REGISTRY.get(base)
        if ops is not None:
            return ops
        if base in _NUMPY_FAMILIES:
            ops = _REGISTRY[kind] = _numpy_ops(kind)
            return ops
    raise TypeError(f"Unsupported scalar type: {type(value).__name__}")


def is_scalar(value: Any) -> bool:
    try:
        ops_for(value)
    except TypeError:
        return False
    return True


def zero(like: Any) -> Any:
    return ops_for(like).zero


def one(like: Any) -> Any:
    return ops_for(like).one


def two(like: Any) -> Any:
    o = ops_for(like).one
    return o + o


def default_epsilon(like: Any) -> Any:
    return ops_for(like).epsilon


def sqrt(value: S) -> S:
    return ops_for(value).sqrt(value)


def acos(value: S) -> S:
    return ops_for(value).acos(value)


def cos(value: S) -> S:
    return ops_for(value).cos(value)


def sin(value: S) -> S:
    return ops_for(value).sin(value)


def clamp(value: S, lo: S, hi: S) -> S:
    if value < lo:
        return lo
    if hi < value:
        return hi
    return value
