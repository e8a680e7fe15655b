"""Second-order dual numbers together with second derivatives and Hessians."""

from __future__ import annotations

from typing import Any, Callable

import numpy as np

from .base import DualNumber, _add_field, _scale_field
from .dual import Dual64, _float_list, _vector

_SCALAR_RESULT = "argument 'f' must return a scalar."
_LIST_ARGUMENT = (
    "argument 'x': must be a list. For univariate functions use 'second_derivative' instead."
)


class _Dual2Base(DualNumber):
    """Shared algebra of scalar second-order dual numbers."""

    _fields = ("re", "v1", "v2")

    @property
    def first_derivative(self):
        return self.v1

    @property
    def second_derivative(self):
        return self.v2

    def _mul(self, other):
        return self._build(
            (
                self.re * other.re,
                self.v1 * other.re + self.re * other.v1,
                self.v2 * other.re + self.re * other.v2 + self.v1 * other.v1 * 2.0,
            )
        )

    def _chain(self, f0, f1, f2, f3):
        return self._build(
            (f0, self.v1 * f1, self.v2 * f1 + self.v1 * self.v1 * f2)
        )


class Dual2_64(_Dual2Base):
    """Second-order dual number ``re + v1 ε + v2 ε²`` with float fields."""

    def __init__(self, re, v1=0.0, v2=0.0):
        self.re = re
        self.v1 = v1
        self.v2 = v2

    def derivative(self) -> "Dual2_64":
        """The same value with a unit first derivative."""
        return Dual2_64(self.re, 1.0, self.v2)


def _as_dual64(value) -> Dual64:
    if isinstance(value, Dual64):
        return value
    return Dual64(float(value), 0.0)


class Dual2Dual64(_Dual2Base):
    """Second-order dual number whose fields are first-order dual numbers."""

    def __init__(self, re, v1=0.0, v2=0.0):
        self.re = _as_dual64(re)
        self.v1 = _as_dual64(v1)
        self.v2 = _as_dual64(v2)


class Dual2Vec64(DualNumber):
    """Second-order dual number with a gradient vector and a Hessian matrix.

    Either derivative may be ``None``, meaning it is identically zero.
    """

    _fields = ("re", "v1", "v2")

    def __init__(self, re, v1=None, v2=None):
        self.re = re
        self.v1 = None if v1 is None else np.asarray(v1, dtype=float)
        self.v2 = None if v2 is None else np.asarray(v2, dtype=float)

    @classmethod
    def from_re(cls, re):
        return cls(float(re))

    @property
    def first_derivative(self):
        return None if self.v1 is None else [float(v) for v in self.v1]

    @property
    def second_derivative(self):
        return None if self.v2 is None else self.v2.tolist()

    def _mul(self, other: "Dual2Vec64") -> "Dual2Vec64":
        v1 = _add_field(_scale_field(self.v1, other.re), _scale_field(other.v1, self.re))
        v2 = _add_field(_scale_field(self.v2, other.re), _scale_field(other.v2, self.re))
        if self.v1 is not None and other.v1 is not None:
            cross = np.outer(self.v1, other.v1)
            v2 = _add_field(v2, cross + cross.T)
        return Dual2Vec64(self.re * other.re, v1, v2)

    def _chain(self, f0, f1, f2, f3) -> "Dual2Vec64":
        v1 = _scale_field(self.v1, f1)
        v2 = _scale_field(self.v2, f1)
        if self.v1 is not None:
            v2 = _add_field(v2, np.outer(self.v1, self.v1) * f2)
        return Dual2Vec64(f0, v1, v2)


def second_derivative(
    f: Callable[[Dual2_64], Any], x: float
) -> tuple[float, float, float]:
    """Value, first and second derivative of a scalar, univariate function."""
    res = f(Dual2_64(float(x), 1.0, 0.0))
    if not isinstance(res, Dual2_64):
        raise TypeError(_SCALAR_RESULT)
    return float(res.re), float(res.v1), float(res.v2)


def hessian(
    f: Callable[[list], Any], x
) -> tuple[float, list[float], list[list[float]]]:
    """Value, gradient and Hessian of a scalar, multivariate function."""
    values = _float_list(x, _LIST_ARGUMENT)
    n = len(values)
    args = [Dual2Vec64(v, e) for v, e in zip(values, np.eye(n))]
    res = f(args)
    if not isinstance(res, Dual2Vec64):
        raise TypeError(_SCALAR_RESULT)
    hess = [[0.0] * n for _ in range(n)] if res.v2 is None else res.v2.tolist()
    return float(res.re), _vector(res.v1, n), hess