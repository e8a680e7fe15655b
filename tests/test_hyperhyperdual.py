import pytest

from dualdiff.dual3 import Dual3_64, third_derivative
from dualdiff.hyperhyperdual import (
    HyperHyperDual64,
    third_partial_derivative,
    third_partial_derivative_vec,
)


@pytest.mark.parametrize(
    "method, x", [("sin", 1.2), ("exp", 1.2), ("ln", 1.2), ("tan", 1.2), ("asin", 0.2), ("cbrt", 1.2)]
)
def test_all_seeds_match_dual3(method, x):
    h = getattr(HyperHyperDual64(x, 1.0, 1.0, 1.0), method)()
    d = getattr(Dual3_64.from_re(x).derivative(), method)()
    assert h.re == pytest.approx(d.re)
    assert h.first_derivative == pytest.approx((d.v1, d.v1, d.v1))
    assert h.second_derivative == pytest.approx((d.v2, d.v2, d.v2))
    assert h.third_derivative == pytest.approx(d.v3)


def test_sum_of_variables_matches_dual3():
    res = third_partial_derivative(lambda x, y, z: (x + y + z).sin(), 1.2, 0.0, 0.0)
    d = Dual3_64.from_re(1.2).derivative().sin()
    assert res == pytest.approx((d.re, d.v1, d.v1, d.v1, d.v2, d.v2, d.v2, d.v3))


def test_product_of_three():
    x, y, z = 2.0, 3.0, 5.0
    res = third_partial_derivative(lambda a, b, c: a * b * c, x, y, z)
    assert res == pytest.approx((x * y * z, y * z, x * z, x * y, z, y, x, 1.0))


def _f(a, b, c):
    return (a * b).exp() * c.sqrt() + a**3 * c


def test_vec_matches_scalar_version():
    x = [0.4, 0.9, 1.7]
    scalar = third_partial_derivative(_f, *x)
    vec = third_partial_derivative_vec(lambda v: _f(v[0], v[1], v[2]), x, 0, 1, 2)
    assert vec == pytest.approx(scalar)


def test_vec_same_index_gives_third_derivative():
    res = third_partial_derivative_vec(lambda v: v[0].exp() * v[1], [1.2, 2.0], 0, 0, 0)
    ref = third_derivative(lambda t: t.exp() * 2.0, 1.2)
    assert res[0] == pytest.approx(ref[0])
    assert res[1:4] == pytest.approx((ref[1],) * 3)
    assert res[4:7] == pytest.approx((ref[2],) * 3)
    assert res[7] == pytest.approx(ref[3])


def test_third_mixed_derivative_is_symmetric():
    x = [0.4, 0.9, 1.7]

    def g(v):
        return _f(v[0], v[1], v[2])

    a = third_partial_derivative_vec(g, x, 0, 1, 2)
    b = third_partial_derivative_vec(g, x, 2, 0, 1)
    assert a[7] == pytest.approx(b[7])
    assert a[1] == pytest.approx(b[2])


def test_requires_scalar_result():
    with pytest.raises(TypeError, match="must return a scalar"):
        third_partial_derivative(lambda x, y, z: 0.0, 1.0, 2.0, 3.0)
    with pytest.raises(TypeError, match="must return a scalar"):
        third_partial_derivative_vec(lambda v: [v[0]], [1.0], 0, 0, 0)


def test_vec_index_out_of_range():
    with pytest.raises(IndexError):
        third_partial_derivative_vec(lambda v: v[0], [1.0, 2.0], 0, 1, 2)


def test_from_re_has_no_derivatives():
    h = HyperHyperDual64.from_re(2.5)
    assert h == HyperHyperDual64(2.5, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0)
    assert (h * h).third_derivative == 0.0