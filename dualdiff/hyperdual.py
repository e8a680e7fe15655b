"""Hyper-dual numbers together with mixed second partial derivatives."""

from __future__ import annotations

from typing import Any, Callable

import numpy as np

from .base import DualNumber, _add_field, _scale_field
from .dual import _float_list, _vector
from .dual2 import _as_dual64

_SCALAR_RESULT = "argument 'f' must return a scalar."
_LIST_ARGUMENTS = (
    "argument 'x' and 'y' must be lists. "
    "For bivariate functions use 'second_partial_derivative' instead."
)


class _HyperDualBase(DualNumber):
    """Shared algebra of scalar hyper-dual numbers ``a + b ε1 + c ε2 + d ε1ε2``."""

    _fields = ("re", "eps1", "eps2", "eps1eps2")

    @property
    def first_derivative(self):
        return self.eps1, self.eps2

    @property
    def second_derivative(self):
        return self.eps1eps2

    def _mul(self, other):
        a, b = self, other
        return self._build(
            (
                a.re * b.re,
                a.eps1 * b.re + a.re * b.eps1,
                a.eps2 * b.re + a.re * b.eps2,
                a.eps1eps2 * b.re
                + a.eps1 * b.eps2
                + a.eps2 * b.eps1
                + a.re * b.eps1eps2,
            )
        )

    def _chain(self, f0, f1, f2, f3):
        return self._build(
            (
                f0,
                self.eps1 * f1,
                self.eps2 * f1,
                self.eps1eps2 * f1 + self.eps1 * self.eps2 * f2,
            )
        )


class HyperDual64(_HyperDualBase):
    """Hyper-dual number with float fields."""

    def __init__(self, re, eps1=0.0, eps2=0.0, eps1eps2=0.0):
        self.re = re
        self.eps1 = eps1
        self.eps2 = eps2
        self.eps1eps2 = eps1eps2


class HyperDualDual64(_HyperDualBase):
    """Hyper-dual number whose fields are first-order dual numbers."""

    def __init__(self, re, eps1=0.0, eps2=0.0, eps1eps2=0.0):
        self.re = _as_dual64(re)
        self.eps1 = _as_dual64(eps1)
        self.eps2 = _as_dual64(eps2)
        self.eps1eps2 = _as_dual64(eps1eps2)


class HyperDualVec64(DualNumber):
    """Hyper-dual number with derivative vectors and a mixed derivative matrix.

    ``eps1`` has length m, ``eps2`` length n and ``eps1eps2`` shape (m, n);
    any of them may be ``None``, meaning identically zero.
    """

    _fields = ("re", "eps1", "eps2", "eps1eps2")

    def __init__(self, re, eps1=None, eps2=None, eps1eps2=None):
        self.re = re
        self.eps1 = None if eps1 is None else np.asarray(eps1, dtype=float)
        self.eps2 = None if eps2 is None else np.asarray(eps2, dtype=float)
        self.eps1eps2 = None if eps1eps2 is None else np.asarray(eps1eps2, dtype=float)

    @classmethod
    def from_re(cls, re):
        return cls(float(re))

    @property
    def first_derivative(self):
        def as_list(v):
            return None if v is None else [float(e) for e in v]

        return as_list(self.eps1), as_list(self.eps2)

    @property
    def second_derivative(self):
        return None if self.eps1eps2 is None else self.eps1eps2.tolist()

    def _mul(self, other: "HyperDualVec64") -> "HyperDualVec64":
        eps1 = _add_field(
            _scale_field(self.eps1, other.re), _scale_field(other.eps1, self.re)
        )
        eps2 = _add_field(
            _scale_field(self.eps2, other.re), _scale_field(other.eps2, self.re)
        )
        eps12 = _add_field(
            _scale_field(self.eps1eps2, other.re),
            _scale_field(other.eps1eps2, self.re),
        )
        if self.eps1 is not None and other.eps2 is not None:
            eps12 = _add_field(eps12, np.outer(self.eps1, other.eps2))
        if other.eps1 is not None and self.eps2 is not None:
            eps12 = _add_field(eps12, np.outer(other.eps1, self.eps2))
        return HyperDualVec64(self.re * other.re, eps1, eps2, eps12)

    def _chain(self, f0, f1, f2, f3) -> "HyperDualVec64":
        eps12 = _scale_field(self.eps1eps2, f1)
        if self.eps1 is not None and self.eps2 is not None:
            eps12 = _add_field(eps12, np.outer(self.eps1, self.eps2) * f2)
        return HyperDualVec64(
            f0, _scale_field(self.eps1, f1), _scale_field(self.eps2, f1), eps12
        )


def second_partial_derivative(
    f: Callable[[HyperDual64, HyperDual64], Any], x: float, y: float
) -> tuple[float, float, float, float]:
    """Value, partial derivatives w.r.t. x and y, and the mixed partial derivative."""
    res = f(HyperDual64(float(x), 1.0, 0.0, 0.0), HyperDual64(float(y), 0.0, 1.0, 0.0))
    if not isinstance(res, HyperDual64):
        raise TypeError(_SCALAR_RESULT)
    return float(res.re), float(res.eps1), float(res.eps2), float(res.eps1eps2)


def partial_hessian(
    f: Callable[[list, list], Any], x, y
) -> tuple[float, list[float], list[float], list[list[float]]]:
    """Value, gradients w.r.t. x and y, and the mixed Hessian block of ``f(x, y)``."""
    xs = _float_list(x, _LIST_ARGUMENTS)
    ys = _float_list(y, _LIST_ARGUMENTS)
    m, n = len(xs), len(ys)
    x_args = [HyperDualVec64(v, e, None) for v, e in zip(xs, np.eye(m))]
    y_args = [HyperDualVec64(v, None, e) for v, e in zip(ys, np.eye(n))]
    res = f(x_args, y_args)
    if not isinstance(res, HyperDualVec64):
        raise TypeError(_SCALAR_RESULT)
    if res.eps1eps2 is None:
        f_xy = [[0.0] * n for _ in range(m)]
    else:
        f_xy = res.eps1eps2.tolist()
    return float(res.re), _vector(res.eps1, m), _vector(res.eps2, n), f_xy