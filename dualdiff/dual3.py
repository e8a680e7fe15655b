"""Third-order dual numbers together with third derivatives."""

from __future__ import annotations

from typing import Any, Callable

from .base import DualNumber
from .dual2 import _as_dual64

_SCALAR_RESULT = "argument 'f' must return a scalar."


class _Dual3Base(DualNumber):
    """Shared algebra of third-order dual numbers ``re + v1 ε + v2 ε² + v3 ε³``."""

    _fields = ("re", "v1", "v2", "v3")

    @property
    def first_derivative(self):
        return self.v1

    @property
    def second_derivative(self):
        return self.v2

    @property
    def third_derivative(self):
        return self.v3

    def _mul(self, other):
        a, b = self, other
        return self._build(
            (
                a.re * b.re,
                a.v1 * b.re + a.re * b.v1,
                a.v2 * b.re + a.v1 * b.v1 * 2.0 + a.re * b.v2,
                a.v3 * b.re
                + a.v2 * b.v1 * 3.0
                + a.v1 * b.v2 * 3.0
                + a.re * b.v3,
            )
        )

    def _chain(self, f0, f1, f2, f3):
        v1, v2, v3 = self.v1, self.v2, self.v3
        return self._build(
            (
                f0,
                v1 * f1,
                v2 * f1 + v1 * v1 * f2,
                v3 * f1 + v1 * v2 * f2 * 3.0 + v1 * v1 * v1 * f3,
            )
        )


class Dual3_64(_Dual3Base):
    """Third-order dual number with float fields."""

    def __init__(self, re, v1=0.0, v2=0.0, v3=0.0):
        self.re = re
        self.v1 = v1
        self.v2 = v2
        self.v3 = v3

    def derivative(self) -> "Dual3_64":
        """The same value with a unit first derivative."""
        return Dual3_64(self.re, 1.0, self.v2, self.v3)


class Dual3Dual64(_Dual3Base):
    """Third-order dual number whose fields are first-order dual numbers."""

    def __init__(self, re, v1=0.0, v2=0.0, v3=0.0):
        self.re = _as_dual64(re)
        self.v1 = _as_dual64(v1)
        self.v2 = _as_dual64(v2)
        self.v3 = _as_dual64(v3)


def third_derivative(
    f: Callable[[Dual3_64], Any], x: float
) -> tuple[float, float, float, float]:
    """Value and first three derivatives of a scalar, univariate function."""
    res = f(Dual3_64(float(x), 1.0, 0.0, 0.0))
    if not isinstance(res, Dual3_64):
        raise TypeError(_SCALAR_RESULT)
    return float(res.re), float(res.v1), float(res.v2), float(res.v3)