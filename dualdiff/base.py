"""Common arithmetic and elementary functions shared by all dual number types."""

from __future__ import annotations

import math
import numbers
import sys
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Iterable

import numpy as np
from scipy import special

_EPS = sys.float_info.epsilon


def _real(x: Any) -> float:
    """Innermost real value of a (possibly nested) dual number."""
    while isinstance(x, DualNumber):
        x = x.re
    return float(x)


def _apply(x: Any, method: str, fn) -> Any:
    if isinstance(x, DualNumber):
        return getattr(x, method)()
    return fn(x)


def _exp(x):
    return _apply(x, "exp", math.exp)


def _expm1(x):
    return _apply(x, "exp_m1", math.expm1)


def _exp2(x):
    return _apply(x, "exp2", lambda v: 2.0**v)


def _ln(x):
    return _apply(x, "ln", math.log)


def _ln1p(x):
    return _apply(x, "ln_1p", math.log1p)


def _sqrt(x):
    return _apply(x, "sqrt", math.sqrt)


def _cbrt(x):
    return _apply(x, "cbrt", lambda v: math.copysign(abs(v) ** (1.0 / 3.0), v))


def _sin(x):
    return _apply(x, "sin", math.sin)


def _cos(x):
    return _apply(x, "cos", math.cos)


def _tan(x):
    return _apply(x, "tan", math.tan)


def _asin(x):
    return _apply(x, "asin", math.asin)


def _acos(x):
    return _apply(x, "acos", math.acos)


def _atan(x):
    return _apply(x, "atan", math.atan)


def _sinh(x):
    return _apply(x, "sinh", math.sinh)


def _cosh(x):
    return _apply(x, "cosh", math.cosh)


def _tanh(x):
    return _apply(x, "tanh", math.tanh)


def _asinh(x):
    return _apply(x, "asinh", math.asinh)


def _acosh(x):
    return _apply(x, "acosh", math.acosh)


def _atanh(x):
    return _apply(x, "atanh", math.atanh)


def _powf(x, n: float):
    if isinstance(x, DualNumber):
        return x.powf(n)
    return math.pow(x, n)


def _powi(x, n: int):
    if isinstance(x, DualNumber):
        return x.powi(n)
    return float(x) ** n


def _jn(n: int, x):
    """Bessel function of the first kind of integer order ``n``."""
    if isinstance(x, DualNumber):
        return x._bessel(n)
    m = abs(n)
    sign = -1.0 if (n < 0 and m % 2 == 1) else 1.0
    x = float(x)
    if x < 0.0:
        if m % 2 == 1:
            sign = -sign
        x = -x
    return sign * float(special.jv(m, x))


def _add_field(a, b):
    if a is None:
        return b
    if b is None:
        return a
    return a + b


def _neg_field(a):
    return None if a is None else -a


def _scale_field(a, s):
    return None if a is None else a * s


def _eq_field(a, b) -> bool:
    if a is None or b is None:
        return a is None and b is None
    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        return bool(np.array_equal(a, b))
    return bool(a == b)


class DualNumber(ABC):
    """Base class of generalized dual numbers.

    Subclasses list their components in ``_fields`` (real part first), accept
    them positionally in the constructor and implement ``_mul`` and ``_chain``.
    """

    _fields: ClassVar[tuple[str, ...]] = ("re",)
    re: Any

    # --- hooks for subclasses -------------------------------------------------

    @abstractmethod
    def _mul(self, other: "DualNumber") -> "DualNumber":
        """Product of two numbers of the same type."""

    @abstractmethod
    def _chain(self, f0, f1, f2, f3) -> "DualNumber":
        """Apply a scalar function with value ``f0`` and derivatives ``f1..f3``."""

    # --- construction ---------------------------------------------------------

    def _components(self) -> tuple:
        return tuple(getattr(self, name) for name in self._fields)

    def _build(self, components) -> "DualNumber":
        return type(self)(*components)

    @classmethod
    def from_re(cls, re):
        """A number with the given real part and vanishing derivatives."""
        if not isinstance(re, DualNumber):
            re = float(re)
        return cls(re, *(re * 0.0 for _ in cls._fields[1:]))

    def _constant(self, value: float) -> "DualNumber":
        return self * 0.0 + value

    @classmethod
    def total(cls, values: Iterable["DualNumber"]):
        """Sum of the given numbers, zero for an empty iterable."""
        acc = cls.from_re(0.0)
        for v in values:
            acc = acc + v
        return acc

    @classmethod
    def product(cls, values: Iterable["DualNumber"]):
        """Product of the given numbers, one for an empty iterable."""
        acc = cls.from_re(1.0)
        for v in values:
            acc = acc * v
        return acc

    # --- arithmetic -----------------------------------------------------------

    def __add__(self, other):
        if isinstance(other, type(self)):
            return self._build(
                _add_field(a, b)
                for a, b in zip(self._components(), other._components())
            )
        if isinstance(other, numbers.Real):
            comps = list(self._components())
            comps[0] = comps[0] + other
            return self._build(comps)
        return NotImplemented

    __radd__ = __add__

    def __neg__(self):
        return self._build(_neg_field(c) for c in self._components())

    def __pos__(self):
        return self

    def __sub__(self, other):
        if isinstance(other, (type(self), numbers.Real)):
            return self + (-other)
        return NotImplemented

    def __rsub__(self, other):
        if isinstance(other, numbers.Real):
            return (-self) + other
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, type(self)):
            return self._mul(other)
        if isinstance(other, numbers.Real):
            return self._build(_scale_field(c, other) for c in self._components())
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, type(self)):
            return self._mul(other.recip())
        if isinstance(other, numbers.Real):
            return self * (1.0 / other)
        return NotImplemented

    def __rtruediv__(self, other):
        if isinstance(other, numbers.Real):
            return self.recip() * other
        return NotImplemented

    def __mod__(self, other):
        raise TypeError("remainder is not defined for dual numbers")

    __rmod__ = __mod__

    def __pow__(self, other):
        if isinstance(other, numbers.Integral):
            return self.powi(int(other))
        if isinstance(other, numbers.Real):
            return self.powf(float(other))
        if isinstance(other, type(self)):
            return (other * self.ln()).exp()
        return NotImplemented

    def __rpow__(self, other):
        if isinstance(other, numbers.Real):
            return (self * math.log(other)).exp()
        return NotImplemented

    def __abs__(self):
        return self if self.is_positive() else -self

    def __float__(self) -> float:
        return _real(self)

    # --- comparison -----------------------------------------------------------

    def __eq__(self, other):
        if isinstance(other, type(self)):
            return all(
                _eq_field(a, b)
                for a, b in zip(self._components(), other._components())
            )
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    @staticmethod
    def _key(x) -> float:
        return _real(x)

    def __lt__(self, other):
        return _real(self) < self._key(other)

    def __le__(self, other):
        return _real(self) <= self._key(other)

    def __gt__(self, other):
        return _real(self) > self._key(other)

    def __ge__(self, other):
        return _real(self) >= self._key(other)

    def __repr__(self) -> str:
        inner = ", ".join(f"{n}={getattr(self, n)!r}" for n in self._fields)
        return f"{type(self).__name__}({inner})"

    # --- sign -----------------------------------------------------------------

    def is_zero(self) -> bool:
        return _real(self) == 0.0

    def is_positive(self) -> bool:
        return _real(self) > 0.0

    def is_negative(self) -> bool:
        return _real(self) < 0.0

    def signum(self):
        if self.is_positive():
            return self._constant(1.0)
        if self.is_zero():
            return self._constant(0.0)
        return self._constant(-1.0)

    def abs_sub(self, other):
        if _real(self) > _real(other):
            return self - other
        return self._constant(0.0)

    # --- elementary functions -------------------------------------------------

    def recip(self):
        x = self.re
        f0 = 1.0 / x
        f1 = -f0 * f0
        f2 = -2.0 * f1 * f0
        f3 = -3.0 * f2 * f0
        return self._chain(f0, f1, f2, f3)

    def exp(self):
        f = _exp(self.re)
        return self._chain(f, f, f, f)

    def exp_m1(self):
        f = _exp(self.re)
        return self._chain(_expm1(self.re), f, f, f)

    def exp2(self):
        f0 = _exp2(self.re)
        ln2 = math.log(2.0)
        return self._chain(f0, f0 * ln2, f0 * ln2**2, f0 * ln2**3)

    def ln(self):
        x = self.re
        f1 = 1.0 / x
        f2 = -f1 * f1
        f3 = -2.0 * f2 * f1
        return self._chain(_ln(x), f1, f2, f3)

    def log(self, base: float):
        return self.ln() / math.log(base)

    def log2(self):
        return self.ln() / math.log(2.0)

    def log10(self):
        return self.ln() / math.log(10.0)

    def ln_1p(self):
        x = self.re
        f1 = 1.0 / (x + 1.0)
        f2 = -f1 * f1
        f3 = -2.0 * f2 * f1
        return self._chain(_ln1p(x), f1, f2, f3)

    def sqrt(self):
        x = self.re
        f0 = _sqrt(x)
        rx = 1.0 / x
        f1 = 0.5 / f0
        f2 = -0.5 * f1 * rx
        f3 = -1.5 * f2 * rx
        return self._chain(f0, f1, f2, f3)

    def cbrt(self):
        x = self.re
        f0 = _cbrt(x)
        rx = 1.0 / x
        f1 = f0 * rx / 3.0
        f2 = f1 * rx * (-2.0 / 3.0)
        f3 = f2 * rx * (-5.0 / 3.0)
        return self._chain(f0, f1, f2, f3)

    def powf(self, n: float):
        n = float(n)
        if n == 0.0:
            return self._constant(1.0)
        if n == 1.0:
            return self
        if abs(n - 2.0) < _EPS:
            return self * self
        if abs(n - 3.0) < _EPS:
            return self * self * self
        x = self.re
        return self._chain(
            _powf(x, n),
            _powf(x, n - 1.0) * n,
            _powf(x, n - 2.0) * (n * (n - 1.0)),
            _powf(x, n - 3.0) * (n * (n - 1.0) * (n - 2.0)),
        )

    def powi(self, n: int):
        n = int(n)
        if n == 0:
            return self._constant(1.0)
        if n == 1:
            return self
        if n == 2:
            return self * self
        if n == 3:
            return self * self * self
        x = self.re
        return self._chain(
            _powi(x, n),
            _powi(x, n - 1) * n,
            _powi(x, n - 2) * (n * (n - 1)),
            _powi(x, n - 3) * (n * (n - 1) * (n - 2)),
        )

    def sin(self):
        s, c = _sin(self.re), _cos(self.re)
        return self._chain(s, c, -s, -c)

    def cos(self):
        s, c = _sin(self.re), _cos(self.re)
        return self._chain(c, -s, -c, s)

    def tan(self):
        t = _tan(self.re)
        f1 = t * t + 1.0
        f2 = t * f1 * 2.0
        f3 = f1 * (f1 + t * t * 2.0) * 2.0
        return self._chain(t, f1, f2, f3)

    def asin(self):
        x = self.re
        f1 = 1.0 / _sqrt(1.0 - x * x)
        f13 = f1 * f1 * f1
        return self._chain(_asin(x), f1, x * f13, f13 * (x * x * f1 * f1 * 3.0 + 1.0))

    def acos(self):
        x = self.re
        f1 = 1.0 / _sqrt(1.0 - x * x)
        f13 = f1 * f1 * f1
        return self._chain(
            _acos(x), -f1, -(x * f13), -(f13 * (x * x * f1 * f1 * 3.0 + 1.0))
        )

    def atan(self):
        x = self.re
        f1 = 1.0 / (x * x + 1.0)
        return self._chain(
            _atan(x), f1, x * f1 * f1 * -2.0, (x * x * 6.0 - 2.0) * f1 * f1 * f1
        )

    def atan2(self, other):
        """Four-quadrant arctangent of ``self / other``."""
        if not isinstance(other, DualNumber):
            other = self._constant(float(other))
        y, x = _real(self), _real(other)
        if x != 0.0:
            r = (self / other).atan()
            return r + (math.atan2(y, x) - math.atan(y / x))
        r = -((other / self).atan())
        return r + (math.atan2(y, x) - 0.0)

    def sinh(self):
        s, c = _sinh(self.re), _cosh(self.re)
        return self._chain(s, c, s, c)

    def cosh(self):
        s, c = _sinh(self.re), _cosh(self.re)
        return self._chain(c, s, c, s)

    def tanh(self):
        t = _tanh(self.re)
        f1 = 1.0 - t * t
        f2 = t * f1 * -2.0
        f3 = f1 * (f1 - t * t * 2.0) * -2.0
        return self._chain(t, f1, f2, f3)

    def asinh(self):
        x = self.re
        f1 = 1.0 / _sqrt(x * x + 1.0)
        f13 = f1 * f1 * f1
        return self._chain(
            _asinh(x), f1, -(x * f13), f13 * (x * x * f1 * f1 * 3.0 - 1.0)
        )

    def acosh(self):
        x = self.re
        f1 = 1.0 / _sqrt(x * x - 1.0)
        f13 = f1 * f1 * f1
        return self._chain(
            _acosh(x), f1, -(x * f13), f13 * (x * x * f1 * f1 * 3.0 - 1.0)
        )

    def atanh(self):
        x = self.re
        f1 = 1.0 / (1.0 - x * x)
        return self._chain(
            _atanh(x), f1, x * f1 * f1 * 2.0, (x * x * 6.0 + 2.0) * f1 * f1 * f1
        )

    # --- special functions ----------------------------------------------------

    def sph_j0(self):
        """Spherical Bessel function of the first kind, order 0."""
        if abs(_real(self)) < _EPS:
            return 1.0 - self * self / 6.0
        return self.sin() / self

    def sph_j1(self):
        """Spherical Bessel function of the first kind, order 1."""
        if abs(_real(self)) < _EPS:
            return self / 3.0
        s, c = self.sin(), self.cos()
        return (s - self * c) / (self * self)

    def sph_j2(self):
        """Spherical Bessel function of the first kind, order 2."""
        if abs(_real(self)) < _EPS:
            return self * self / 15.0
        s, c = self.sin(), self.cos()
        x2 = self * self
        return ((s - self * c) * 3.0 - x2 * s) / (x2 * self)

    def _bessel(self, n: int):
        x = self.re
        derivs = []
        for k in range(4):
            acc = None
            for i in range(k + 1):
                term = _jn(n - k + 2 * i, x) * (math.comb(k, i) * (-1) ** i)
                acc = term if acc is None else acc + term
            derivs.append(acc * (0.5**k))
        return self._chain(*derivs)

    def bessel_j0(self):
        return self._bessel(0)

    def bessel_j1(self):
        return self._bessel(1)

    def bessel_j2(self):
        return self._bessel(2)