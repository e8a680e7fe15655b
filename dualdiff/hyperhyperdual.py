"""Third-order hyper-dual numbers together with third partial derivatives."""

from __future__ import annotations

from typing import Any, Callable

from .base import DualNumber
from .dual import _float_list

_SCALAR_RESULT = "argument 'f' must return a scalar."

# Bit mask of the infinitesimals present in each field, in field order.
_MASKS = (0, 1, 2, 4, 3, 5, 6, 7)

Result8 = tuple[float, float, float, float, float, float, float, float]


class HyperHyperDual64(DualNumber):
    """Hyper-dual number with three infinitesimals ε1, ε2, ε3 and float fields."""

    _fields = (
        "re",
        "eps1",
        "eps2",
        "eps3",
        "eps1eps2",
        "eps1eps3",
        "eps2eps3",
        "eps1eps2eps3",
    )

    def __init__(
        self,
        re,
        eps1=0.0,
        eps2=0.0,
        eps3=0.0,
        eps1eps2=0.0,
        eps1eps3=0.0,
        eps2eps3=0.0,
        eps1eps2eps3=0.0,
    ):
        self.re = re
        self.eps1 = eps1
        self.eps2 = eps2
        self.eps3 = eps3
        self.eps1eps2 = eps1eps2
        self.eps1eps3 = eps1eps3
        self.eps2eps3 = eps2eps3
        self.eps1eps2eps3 = eps1eps2eps3

    @property
    def first_derivative(self):
        return self.eps1, self.eps2, self.eps3

    @property
    def second_derivative(self):
        return self.eps1eps2, self.eps1eps3, self.eps2eps3

    @property
    def third_derivative(self):
        return self.eps1eps2eps3

    def _mul(self, other: "HyperHyperDual64") -> "HyperHyperDual64":
        a = dict(zip(_MASKS, self._components()))
        b = dict(zip(_MASKS, other._components()))
        out = []
        for s in _MASKS:
            acc = None
            for part in range(8):
                if part & s == part:
                    term = a[part] * b[s ^ part]
                    acc = term if acc is None else acc + term
            out.append(acc)
        return self._build(out)

    def _chain(self, f0, f1, f2, f3) -> "HyperHyperDual64":
        e1, e2, e3 = self.eps1, self.eps2, self.eps3
        e12, e13, e23 = self.eps1eps2, self.eps1eps3, self.eps2eps3
        return HyperHyperDual64(
            f0,
            e1 * f1,
            e2 * f1,
            e3 * f1,
            e12 * f1 + e1 * e2 * f2,
            e13 * f1 + e1 * e3 * f2,
            e23 * f1 + e2 * e3 * f2,
            self.eps1eps2eps3 * f1
            + (e1 * e23 + e2 * e13 + e3 * e12) * f2
            + e1 * e2 * e3 * f3,
        )


def _result(res: Any) -> Result8:
    if not isinstance(res, HyperHyperDual64):
        raise TypeError(_SCALAR_RESULT)
    return tuple(float(c) for c in res._components())  # type: ignore[return-value]


def third_partial_derivative(
    f: Callable[..., Any], x: float, y: float, z: float
) -> Result8:
    """All partial derivatives up to the third mixed one of ``f(x, y, z)``."""
    res = f(
        HyperHyperDual64(float(x), 1.0, 0.0, 0.0),
        HyperHyperDual64(float(y), 0.0, 1.0, 0.0),
        HyperHyperDual64(float(z), 0.0, 0.0, 1.0),
    )
    return _result(res)


def third_partial_derivative_vec(
    f: Callable[[list], Any], x, i: int, j: int, k: int
) -> Result8:
    """Partial derivatives of ``f`` w.r.t. the variables ``i``, ``j`` and ``k``."""
    values = _float_list(x, "argument 'x': must be a list.")
    for index in (i, j, k):
        if not 0 <= index < len(values):
            raise IndexError(f"variable index {index} out of range for {len(values)} variables")
    args = [
        HyperHyperDual64(
            v,
            1.0 if n == i else 0.0,
            1.0 if n == j else 0.0,
            1.0 if n == k else 0.0,
        )
        for n, v in enumerate(values)
    ]
    return _result(f(args))