"""Dense linear algebra that works on floats and on dual numbers alike."""

from __future__ import annotations

import math
from functools import reduce
from operator import mul
from typing import Any, Sequence

from .base import DualNumber, _real, _sqrt

Matrix = list[list[Any]]


class LinAlgError(ValueError):
    """Raised when a matrix cannot be factorized."""

    def __init__(self, message: str = "The matrix appears to be singular.") -> None:
        super().__init__(message)


def _element_type(values) -> type | None:
    for v in values:
        if isinstance(v, DualNumber):
            return type(v)
    return None


def _convert(value, kind: type | None):
    if kind is None:
        return float(value)
    if isinstance(value, kind):
        return value
    return kind.from_re(float(value))


def _matrix(a: Sequence[Sequence[Any]]) -> tuple[Matrix, type | None]:
    rows = [list(row) for row in a]
    kind = _element_type(v for row in rows for v in row)
    return [[_convert(v, kind) for v in row] for row in rows], kind


def _vector(b: Sequence[Any], kind: type | None = None) -> list:
    values = list(b)
    if kind is None:
        kind = _element_type(values)
    return [_convert(v, kind) for v in values]


def _zero(kind: type | None):
    return 0.0 if kind is None else kind.from_re(0.0)


def _one(kind: type | None):
    return 1.0 if kind is None else kind.from_re(1.0)


class LU:
    """LU decomposition with partial pivoting of a square matrix."""

    def __init__(self, a: Sequence[Sequence[Any]]) -> None:
        a, kind = _matrix(a)
        n = len(a)
        p = list(range(n))
        p_count = n

        for i in range(n):
            max_a = 0.0
            imax = i
            for k in range(i, n):
                abs_a = abs(_real(a[k][i]))
                if abs_a > max_a:
                    max_a = abs_a
                    imax = k

            if max_a == 0.0:
                raise LinAlgError()

            if imax != i:
                p[i], p[imax] = p[imax], p[i]
                a[i], a[imax] = a[imax], a[i]
                p_count += 1

            for j in range(i + 1, n):
                a[j][i] = a[j][i] / a[i][i]
                for k in range(i + 1, n):
                    a[j][k] = a[j][k] - a[j][i] * a[i][k]

        self._a = a
        self._p = p
        self._p_count = p_count
        self._kind = kind

    def solve(self, b: Sequence[Any]) -> list:
        """Solve ``A x = b`` for ``x``."""
        a, p = self._a, self._p
        b = _vector(b, self._kind)
        n = len(b)
        x: list = []
        for i in range(n):
            xi = b[p[i]]
            for k in range(i):
                xi = xi - a[i][k] * x[k]
            x.append(xi)

        for i in reversed(range(n)):
            for k in range(i + 1, n):
                x[i] = x[i] - a[i][k] * x[k]
            x[i] = x[i] / a[i][i]
        return x

    def determinant(self):
        """Determinant of the factorized matrix."""
        n = len(self._p)
        det = reduce(mul, (self._a[i][i] for i in range(n)), 1.0)
        return det if (self._p_count - n) % 2 == 0 else -det

    def inverse(self) -> Matrix:
        """Inverse of the factorized matrix."""
        a, p, kind = self._a, self._p, self._kind
        n = len(p)
        zero, one = _zero(kind), _one(kind)
        ia: Matrix = [[zero] * n for _ in range(n)]

        for j in range(n):
            for i in range(n):
                value = one if p[i] == j else zero
                for k in range(i):
                    value = value - a[i][k] * ia[k][j]
                ia[i][j] = value

            for i in reversed(range(n)):
                value = ia[i][j]
                for k in range(i + 1, n):
                    value = value - a[i][k] * ia[k][j]
                ia[i][j] = value / a[i][i]
        return ia


def norm(x: Sequence[Any]):
    """Euclidean norm of a vector."""
    values = _vector(x)
    acc = _zero(_element_type(values))
    for v in values:
        acc = acc + v * v
    return _sqrt(acc)


def smallest_ev(a: Sequence[Sequence[Any]]):
    """Smallest eigenvalue of a symmetric matrix and its eigenvector."""
    e, vecs = jacobi_eigenvalue(a, 200)
    return e[0], [row[0] for row in vecs]


def _rotate(g, h, s, tau):
    return g - s * (h + g * tau), h + s * (g - h * tau)


def jacobi_eigenvalue(a: Sequence[Sequence[Any]], max_iter: int = 200):
    """Eigenvalues (ascending) and eigenvectors (columns) of a symmetric matrix."""
    a, kind = _matrix(a)
    n = len(a)
    zero, one = _zero(kind), _one(kind)

    v: Matrix = [[one if i == j else zero for j in range(n)] for i in range(n)]
    d = [a[i][i] for i in range(n)]
    bw = list(d)
    zw = [zero] * n

    for it_num in range(max_iter):
        thresh = math.sqrt(
            sum(_real(a[i][j]) ** 2 for j in range(n) for i in range(j))
        ) / n
        if thresh == 0.0:
            break

        for p in range(n):
            for q in range(p + 1, n):
                gapq = abs(a[p][q]) * 10.0
                termp = gapq + abs(d[p])
                termq = gapq + abs(d[q])

                if 4 < it_num and termp == abs(d[p]) and termq == abs(d[q]):
                    a[p][q] = zero
                elif thresh <= abs(_real(a[p][q])):
                    h = d[q] - d[p]
                    term = abs(h) + gapq

                    if term == abs(h):
                        t = a[p][q] / h
                    else:
                        theta = h * 0.5 / a[p][q]
                        t = 1.0 / (abs(theta) + _sqrt(theta * theta + 1.0))
                        if _real(theta) < 0.0:
                            t = -t

                    c = 1.0 / _sqrt(t * t + 1.0)
                    s = t * c
                    tau = s / (c + 1.0)
                    h = t * a[p][q]

                    zw[p] = zw[p] - h
                    zw[q] = zw[q] + h
                    d[p] = d[p] - h
                    d[q] = d[q] + h

                    a[p][q] = zero

                    for j in range(p):
                        a[j][p], a[j][q] = _rotate(a[j][p], a[j][q], s, tau)
                    for j in range(p + 1, q):
                        a[p][j], a[j][q] = _rotate(a[p][j], a[j][q], s, tau)
                    for j in range(q + 1, n):
                        a[p][j], a[q][j] = _rotate(a[p][j], a[q][j], s, tau)
                    for row in v:
                        row[p], row[q] = _rotate(row[p], row[q], s, tau)

        bw = [b + z for b, z in zip(bw, zw)]
        d = list(bw)
        zw = [zero] * n

    for k in range(n - 1):
        m = k
        for l in range(k + 1, n):
            if _real(d[l]) < _real(d[m]):
                m = l
        if m != k:
            d[m], d[k] = d[k], d[m]
            for row in v:
                row[m], row[k] = row[k], row[m]

    return d, v