"""First-order dual numbers together with first derivatives, gradients and Jacobians."""

from __future__ import annotations

import numbers
from typing import Any, Callable

import numpy as np

from .base import DualNumber, _add_field, _scale_field

_MAX_JACOBIAN_VARIABLES = 10

_SCALAR_RESULT = (
    "argument 'f' must return a scalar. For vector functions use 'jacobian' instead."
)
_LIST_RESULT = (
    "argument 'f' must return a list. "
    "For scalar functions use 'first_derivative' or 'gradient' instead."
)
_LIST_ARGUMENT = (
    "argument 'x': must be a list. For univariate functions use 'first_derivative' instead."
)


def _one_like(value: Any):
    """The multiplicative identity of the type of ``value``."""
    if isinstance(value, DualNumber):
        return type(value).from_re(1.0)
    return 1.0


def _float_list(x: Any, message: str) -> list[float]:
    """Convert a sequence of reals to a list of floats or raise ``TypeError``."""
    if isinstance(x, (numbers.Number, str, bytes)):
        raise TypeError(message)
    try:
        return [float(v) for v in x]
    except (TypeError, ValueError) as exc:
        raise TypeError(message) from exc


def _vector(values: Any, n: int) -> list[float]:
    """A derivative vector as a list, zeros where it is absent."""
    if values is None:
        return [0.0] * n
    return [float(v) for v in values]


class Dual64(DualNumber):
    """Dual number ``re + eps ε`` holding a value and its first derivative."""

    _fields = ("re", "eps")

    def __init__(self, re, eps=0.0):
        self.re = re
        self.eps = eps

    @property
    def first_derivative(self):
        return self.eps

    def derivative(self) -> "Dual64":
        """The same value with a unit first derivative."""
        return Dual64(self.re, _one_like(self.re))

    def _mul(self, other: "Dual64") -> "Dual64":
        return Dual64(self.re * other.re, self.eps * other.re + self.re * other.eps)

    def _chain(self, f0, f1, f2, f3) -> "Dual64":
        return Dual64(f0, self.eps * f1)


class DualVec64(DualNumber):
    """Dual number with a vector of first derivatives (``None`` if absent)."""

    _fields = ("re", "eps")

    def __init__(self, re, eps=None):
        self.re = re
        self.eps = None if eps is None else np.asarray(eps, dtype=float)

    @classmethod
    def from_re(cls, re):
        return cls(float(re))

    @property
    def first_derivative(self):
        return None if self.eps is None else [float(v) for v in self.eps]

    def _mul(self, other: "DualVec64") -> "DualVec64":
        return DualVec64(
            self.re * other.re,
            _add_field(
                _scale_field(self.eps, other.re), _scale_field(other.eps, self.re)
            ),
        )

    def _chain(self, f0, f1, f2, f3) -> "DualVec64":
        return DualVec64(f0, _scale_field(self.eps, f1))


def _seed(values: list[float]) -> list[DualVec64]:
    return [DualVec64(v, e) for v, e in zip(values, np.eye(len(values)))]


def first_derivative(f: Callable[[Dual64], Any], x: float) -> tuple[float, float]:
    """Value and first derivative of a scalar, univariate function at ``x``."""
    res = f(Dual64(float(x), 1.0))
    if not isinstance(res, Dual64):
        raise TypeError(_SCALAR_RESULT)
    return float(res.re), float(res.eps)


def gradient(f: Callable[[list], Any], x) -> tuple[float, list[float]]:
    """Value and gradient of a scalar, multivariate function at ``x``."""
    values = _float_list(x, _LIST_ARGUMENT)
    res = f(_seed(values))
    if not isinstance(res, DualVec64):
        raise TypeError(_SCALAR_RESULT)
    return float(res.re), _vector(res.eps, len(values))


def jacobian(f: Callable[[list], Any], x) -> tuple[list[float], list[list[float]]]:
    """Values and Jacobian of a vector, multivariate function at ``x``."""
    values = _float_list(x, _LIST_ARGUMENT)
    n = len(values)
    if not 1 <= n <= _MAX_JACOBIAN_VARIABLES:
        raise TypeError(
            f"Jacobians are only available for up to {_MAX_JACOBIAN_VARIABLES} variables!"
        )
    res = f(_seed(values))
    if not isinstance(res, (list, tuple)) or not all(
        isinstance(r, DualVec64) for r in res
    ):
        raise TypeError(_LIST_RESULT)
    return [float(r.re) for r in res], [_vector(r.eps, n) for r in res]