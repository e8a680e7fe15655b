import math

import pytest

from dualdiff.dual import Dual64
from dualdiff.dual3 import Dual3_64, Dual3Dual64, third_derivative

_C04 = (Dual3_64.from_re(0.4),)
_CM04 = (Dual3_64.from_re(-0.4),)

CASES = [
    ("recip", 1.2, (), (0.833333333333333, -0.694444444444445, 1.15740740740741, -2.89351851851852)),
    ("exp", 1.2, (), (3.32011692273655, 3.32011692273655, 3.32011692273655, 3.32011692273655)),
    ("exp_m1", 1.2, (), (2.32011692273655, 3.32011692273655, 3.32011692273655, 3.32011692273655)),
    ("exp2", 1.2, (), (2.29739670999407, 1.59243405216008, 1.10379117348241, 0.765089739826287)),
    ("ln", 1.2, (), (0.182321556793955, 0.833333333333333, -0.694444444444445, 1.15740740740741)),
    ("log", 1.2, (4.2,), (0.127045866345188, 0.580685888982970, -0.483904907485808, 0.806508179143013)),
    ("ln_1p", 1.2, (), (0.788457360364270, 0.454545454545455, -0.206611570247934, 0.187828700225394)),
    ("log2", 1.2, (), (0.263034405833794, 1.20224586740747, -1.00187155617289, 1.66978592695482)),
    ("log10", 1.2, (), (0.0791812460476248, 0.361912068252710, -0.301593390210592, 0.502655650350986)),
    ("sqrt", 1.2, (), (1.09544511501033, 0.456435464587638, -0.190181443578183, 0.237726804472728)),
    ("cbrt", 1.2, (), (1.06265856918261, 0.295182935884059, -0.163990519935588, 0.227764611021650)),
    ("powf", 1.2, (4.2,), (2.15060788316847, 7.52712759108966, 20.0723402429058, 36.7992904453272)),
    ("powf", 0.0, (0.0,), (1.0, 0.0, 0.0, 0.0)),
    ("powf", 0.0, (1.0,), (0.0, 1.0, 0.0, 0.0)),
    ("powf", 0.0, (2.0,), (0.0, 0.0, 2.0, 0.0)),
    ("powf", 0.0, (3.0,), (0.0, 0.0, 0.0, 6.0)),
    ("powf", 0.0, (4.0,), (0.0, 0.0, 0.0, 0.0)),
    ("powi", 1.2, (6,), (2.985984, 14.92992, 62.208, 207.36)),
    ("powi", 0.0, (0,), (1.0, 0.0, 0.0, 0.0)),
    ("powi", 0.0, (1,), (0.0, 1.0, 0.0, 0.0)),
    ("powi", 0.0, (2,), (0.0, 0.0, 2.0, 0.0)),
    ("powi", 0.0, (3,), (0.0, 0.0, 0.0, 6.0)),
    ("powi", 0.0, (4,), (0.0, 0.0, 0.0, 0.0)),
    ("sin", 1.2, (), (0.932039085967226, 0.362357754476674, -0.932039085967226, -0.362357754476674)),
    ("cos", 1.2, (), (0.362357754476674, -0.932039085967226, -0.362357754476674, 0.932039085967226)),
    ("tan", 1.2, (), (2.57215162212632, 7.61596396720705, 39.1788281446144, 317.553587029949)),
    ("asin", 0.2, (), (0.201357920790331, 1.02062072615966, 0.212629317949929, 1.19603991346835)),
    ("acos", 0.2, (), (1.36943840600457, -1.02062072615966, -0.212629317949929, -1.19603991346835)),
    ("atan", 0.2, (), (0.197395559849881, 0.961538461538462, -0.369822485207101, -1.56463359126081)),
    ("atan2", 0.2, _C04, (0.463647609000806, 2.0, -4.0, -4.0)),
    ("atan2", -0.2, _C04, (-0.463647609000806, 2.0, 4.0, -4.0)),
    ("atan2", 0.2, _CM04, (2.67794504458899, -2.0, 4.0, 4.0)),
    ("atan2", -0.2, _CM04, (-2.67794504458899, -2.0, -4.0, 4.0)),
    ("sinh", 1.2, (), (1.50946135541217, 1.81065556732437, 1.50946135541217, 1.81065556732437)),
    ("cosh", 1.2, (), (1.81065556732437, 1.50946135541217, 1.81065556732437, 1.50946135541217)),
    ("tanh", 1.2, (), (0.833654607012155, 0.305019996207409, -0.508562650138273, 0.661856796311429)),
    ("asinh", 1.2, (), (1.01597313417969, 0.640184399664480, -0.314844786720236, 0.202154439560807)),
    ("acosh", 1.2, (), (0.622362503714779, 1.50755672288882, -4.11151833515132, 30.2134301901272)),
    ("atanh", 0.2, (), (0.202732554054082, 1.04166666666667, 0.434027777777778, 2.53182870370370)),
    ("sph_j0", 1.2, (), (0.776699238306022, -0.345284569857790, -0.201224955209705, 0.201097592627034)),
    ("sph_j1", 1.2, (), (0.345284569857790, 0.201224955209705, -0.201097592627034, -0.106373929549242)),
    ("sph_j2", 1.2, (), (0.0865121863384538, 0.129004104011656, 0.0589484167190109, -0.111341070273405)),
    ("bessel_j0", 0.0, (), (1.0, 0.0, -0.5, 0.0)),
    ("bessel_j1", 0.0, (), (0.0, 0.5, 0.0, -0.375)),
    ("bessel_j2", 0.0, (), (0.0, 0.0, 0.25, 0.0)),
    ("bessel_j0", 1.2, (), (0.671132744264363, -0.498289057567215, -0.255891862958350, 0.365498208944163)),
    ("bessel_j1", 1.2, (), (0.498289057567215, 0.255891862958350, -0.365498208944163, -0.172628103209968)),
    ("bessel_j2", 1.2, (), (0.159349018347663, 0.232707360321110, 0.0893643434615870, -0.236892915552203)),
    ("bessel_j0", 7.2, (), (0.295070691400958, -0.0543274202223671, -0.287525216370074, 0.0932134954083656)),
    ("bessel_j1", 7.2, (), (0.0543274202223671, 0.287525216370074, -0.0932134954083656, -0.263777210011690)),
    ("bessel_j2", 7.2, (), (-0.279979741339189, 0.132099570594364, 0.240029203653306, -0.146694937335182)),
    ("bessel_j0", -1.2, (), (0.671132744264363, 0.498289057567215, -0.255891862958350, -0.365498208944163)),
    ("bessel_j1", -1.2, (), (-0.498289057567215, 0.255891862958350, 0.365498208944163, -0.172628103209968)),
    ("bessel_j2", -1.2, (), (0.159349018347663, -0.232707360321110, 0.0893643434615870, 0.236892915552203)),
    ("bessel_j0", -7.2, (), (0.295070691400958, 0.0543274202223671, -0.287525216370074, -0.0932134954083656)),
    ("bessel_j1", -7.2, (), (-0.0543274202223671, 0.287525216370074, 0.0932134954083656, -0.263777210011690)),
    ("bessel_j2", -7.2, (), (-0.279979741339189, -0.132099570594364, 0.240029203653306, 0.146694937335182)),
]


@pytest.mark.parametrize("method, x, args, expected", CASES)
def test_dual3_functions(method, x, args, expected):
    res = getattr(Dual3_64.from_re(x).derivative(), method)(*args)
    got = (res.re, res.v1, res.v2, res.v3)
    assert got == pytest.approx(expected, abs=1e-11)


def test_derivative_sets_unit_first_derivative():
    d = Dual3_64.from_re(1.2).derivative()
    assert (d.re, d.v1, d.v2, d.v3) == (1.2, 1.0, 0.0, 0.0)


def test_properties():
    d = Dual3_64(1.0, 2.0, 3.0, 4.0)
    assert (d.first_derivative, d.second_derivative, d.third_derivative) == (2.0, 3.0, 4.0)


def test_third_derivative_of_cube():
    assert third_derivative(lambda x: x * x * x, 2.0) == pytest.approx((8.0, 12.0, 12.0, 6.0))


def test_third_derivative_matches_method():
    res = Dual3_64.from_re(1.2).derivative().sin()
    assert third_derivative(lambda x: x.sin(), 1.2) == pytest.approx(
        (res.re, res.v1, res.v2, res.v3)
    )


def test_third_derivative_requires_scalar_result():
    with pytest.raises(TypeError, match="must return a scalar"):
        third_derivative(lambda x: 1.0, 1.0)


def test_dual3_dual64_nested_exp():
    x = Dual3Dual64(Dual64(1.2, 1.0), Dual64(1.0, 0.0))
    res = x.exp()
    e = math.exp(1.2)
    assert res.re.re == pytest.approx(e)
    assert res.re.eps == pytest.approx(e)
    assert res.v3.re == pytest.approx(e)
    assert res.v3.eps == pytest.approx(e)


def test_dual3_dual64_matches_float_version():
    x = Dual3Dual64(Dual64(1.2, 0.0), Dual64(1.0, 0.0)).tanh()
    y = Dual3_64.from_re(1.2).derivative().tanh()
    assert (x.re.re, x.v1.re, x.v2.re, x.v3.re) == pytest.approx((y.re, y.v1, y.v2, y.v3))