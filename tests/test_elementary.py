import logging
import math

import numpy as np
import pytest
from scipy import special

import forward_ad as fa
from forward_ad import Dual, config, seed, value

# name -> (point, analytic derivative), written independently of the library
ANALYTIC = {
    "abs":   (-0.7, lambda x: -1.0),
    "fabs":  (0.7, lambda x: 1.0),
    "exp":   (0.7, math.exp),
    "exp2":  (0.7, lambda x: 2.0 ** x * math.log(2.0)),
    "expm1": (0.7, math.exp),
    "log":   (1.7, lambda x: 1.0 / x),
    "log2":  (1.7, lambda x: 1.0 / (x * math.log(2.0))),
    "log10": (1.7, lambda x: 1.0 / (x * math.log(10.0))),
    "log1p": (0.7, lambda x: 1.0 / (1.0 + x)),
    "sqrt":  (1.7, lambda x: 0.5 / math.sqrt(x)),
    "cbrt":  (1.7, lambda x: x ** (-2.0 / 3.0) / 3.0),
    "sin":   (0.7, math.cos),
    "cos":   (0.7, lambda x: -math.sin(x)),
    "tan":   (0.7, lambda x: 1.0 + math.tan(x) ** 2),
    "asin":  (0.3, lambda x: 1.0 / math.sqrt(1.0 - x * x)),
    "acos":  (0.3, lambda x: -1.0 / math.sqrt(1.0 - x * x)),
    "atan":  (0.7, lambda x: 1.0 / (1.0 + x * x)),
    "sinh":  (0.7, math.cosh),
    "cosh":  (0.7, math.sinh),
    "tanh":  (0.7, lambda x: 1.0 / math.cosh(x) ** 2),
    "asinh": (0.7, lambda x: 1.0 / math.sqrt(x * x + 1.0)),
    "acosh": (1.7, lambda x: 1.0 / math.sqrt(x * x - 1.0)),
    "erf":   (0.7, lambda x: 2.0 / math.sqrt(math.pi) * math.exp(-x * x)),
    "erfc":  (0.7, lambda x: -2.0 / math.sqrt(math.pi) * math.exp(-x * x)),
    "floor": (2.5, lambda x: 0.0),
    "ceil":  (2.5, lambda x: 0.0),
    "trunc": (2.5, lambda x: 0.0),
    "round": (2.3, lambda x: 0.0),
    "rint":  (2.3, lambda x: 0.0),
    "nearbyint": (2.3, lambda x: 0.0),
}


@pytest.mark.parametrize("name", sorted(ANALYTIC))
def test_chain_rule_matches_analytic_derivative(name):
    x0, df = ANALYTIC[name]
    f = fa.ops.UNARY_FUNCTIONS[name]
    y = f(seed(x0))
    assert y.dot == pytest.approx(df(x0), rel=1e-9, abs=1e-15)


@pytest.mark.parametrize("name", sorted(ANALYTIC))
def test_chain_rule_matches_bumping(name):
    x0, _ = ANALYTIC[name]
    f = fa.ops.UNARY_FUNCTIONS[name]
    _, ad = fa.derivative(f, x0)
    bump = fa.bump_derivative(f, x0, 1e-6)
    assert ad == pytest.approx(bump, rel=1e-6, abs=1e-8)


@pytest.mark.parametrize("name", sorted(ANALYTIC))
def test_tangent_scales_with_seed(name):
    x0, _ = ANALYTIC[name]
    f = fa.ops.UNARY_FUNCTIONS[name]
    assert f(Dual(x0, 2.5)).dot == pytest.approx(2.5 * f(seed(x0)).dot, rel=1e-12)
    assert f(Dual(x0)).dot == 0.0


def test_scenario_sine_at_zero():
    y = fa.sin(Dual(0, 1))
    assert y.val == 0.0
    assert y.dot == 1.0


def test_scenario_floor_is_flat():
    y = fa.floor(Dual(2.5, 1))
    assert y.val == 2.0
    assert y.dot == 0.0


def test_functions_accept_plain_numbers():
    y = fa.exp(0.0)
    assert isinstance(y, Dual)
    assert (y.val, y.dot) == (1.0, 0.0)


def test_nested_chain_rule():
    # d/dx exp(sin(x)^2) = exp(sin^2) * 2 sin cos
    x0 = 0.4
    y = fa.exp(fa.sin(seed(x0)) ** 2)
    expected = math.exp(math.sin(x0) ** 2) * 2.0 * math.sin(x0) * math.cos(x0)
    assert y.dot == pytest.approx(expected, rel=1e-12)


def test_sqrt_zero_guard():
    y = fa.sqrt(Dual(0.0, 1.0))
    assert (y.val, y.dot) == (0.0, 0.0)


def test_sqrt_without_guard_gives_infinite_tangent(monkeypatch):
    monkeypatch.setattr(config, "SQRT_ZERO_GUARD", False)
    y = fa.sqrt(Dual(0.0, 1.0))
    assert y.val == 0.0
    assert math.isinf(y.dot)


def test_out_of_domain_propagates_nan_quietly():
    with np.errstate(all="raise"):
        assert math.isnan(fa.sqrt(Dual(-1.0, 1.0)).val)
        assert math.isnan(fa.asin(Dual(2.0, 1.0)).val)
        assert math.isnan(fa.log(Dual(-1.0, 1.0)).val)
        y = fa.log(Dual(0.0, 1.0))
        assert y.val == -math.inf
        assert math.isinf(y.dot)


def test_hypot_partials():
    y = fa.hypot(Dual(3.0, 1.0), Dual(4.0, 2.0))
    assert y.val == 5.0
    assert y.dot == pytest.approx(3.0 / 5.0 + 2.0 * 4.0 / 5.0, rel=1e-12)


def test_atan2_partials():
    a, b = 1.0, 2.0
    y = fa.atan2(Dual(a, 1.0), Dual(b, 0.0))
    assert y.val == math.atan2(a, b)
    assert y.dot == pytest.approx(-b / (a * a + b * b), rel=1e-12)
    z = fa.atan2(Dual(a, 0.0), Dual(b, 1.0))
    assert z.dot == pytest.approx(a / (a * a + b * b), rel=1e-12)


def test_atan2_textbook_partials_match_bumping(monkeypatch):
    monkeypatch.setattr(config, "ATAN2_TEXTBOOK_PARTIALS", True)
    _, ad = fa.derivative(lambda y: fa.atan2(y, 2.0), 1.0)
    bump = fa.bump_derivative(lambda y: fa.atan2(y, 2.0), 1.0)
    assert ad == pytest.approx(bump, rel=1e-6)
    _, ad = fa.derivative(lambda x: fa.atan2(1.0, x), 2.0)
    bump = fa.bump_derivative(lambda x: fa.atan2(1.0, x), 2.0)
    assert ad == pytest.approx(bump, rel=1e-6)


def test_rounding_values():
    assert value(fa.round(Dual(2.5))) == 3.0
    assert value(fa.round(Dual(-2.5))) == -3.0
    assert value(fa.round(Dual(0.49999999999999994))) == 0.0
    assert value(fa.rint(Dual(2.5))) == 2.0
    assert value(fa.nearbyint(Dual(3.5))) == 4.0
    assert value(fa.ceil(Dual(-1.5))) == -1.0
    assert value(fa.trunc(Dual(-1.5))) == -1.0


def test_lrint_returns_int():
    assert fa.lrint(Dual(2.5, 1.0)) == 2
    assert isinstance(fa.llrint(Dual(-3.7)), int)


def test_modf_splits_tangent():
    frac, whole = fa.modf(Dual(3.25, 2.0))
    assert (frac.val, frac.dot) == (0.25, 2.0)
    assert (whole.val, whole.dot) == (3.0, 0.0)


def test_python_rounding_protocols():
    x = Dual(2.5, 1.0)
    assert (math.floor(x).val, math.floor(x).dot) == (2.0, 0.0)
    assert math.ceil(x).val == 3.0
    assert math.trunc(Dual(-2.5, 1.0)).val == -2.0
    assert round(x).val == 2.0
    assert round(Dual(1.2345, 1.0), 2).val == pytest.approx(1.23)


def test_gamma_tangents_are_relative_central_differences():
    x0 = 2.5
    y = fa.tgamma(seed(x0))
    assert y.val == pytest.approx(special.gamma(x0), rel=1e-14)
    fd = (special.gamma(x0 * 1.01) - special.gamma(x0 * 0.99)) / (x0 * 0.02)
    assert y.dot == pytest.approx(fd, rel=1e-12)
    exact = special.gamma(x0) * special.digamma(x0)
    assert y.dot == pytest.approx(exact, rel=1e-3)

    z = fa.lgamma(seed(x0))
    assert z.val == pytest.approx(special.gammaln(x0), rel=1e-14)
    assert z.dot == pytest.approx(special.digamma(x0), rel=1e-3)


def test_gamma_step_is_configurable(monkeypatch):
    monkeypatch.setattr(config, "GAMMA_FD_REL_STEP", 1e-5)
    y = fa.lgamma(seed(3.0))
    assert y.dot == pytest.approx(special.digamma(3.0), rel=1e-8)


def test_classification_uses_value():
    assert fa.isfinite(Dual(1.0, math.inf))
    assert fa.isinf(Dual(-math.inf, 0.0))
    assert fa.isnan(Dual(math.nan, 1.0))
    assert not fa.isnan(Dual(1.0, math.nan))


def test_gamma_approximation_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="forward_ad")
    fa.tgamma(seed(1.5))
    assert any("central difference" in r.getMessage() for r in caplog.records)


def test_cbrt_at_zero_has_nan_tangent():
    with np.errstate(all="raise"):
        y = fa.cbrt(Dual(0.0, 1.0))
    assert y.val == 0.0
    assert math.isnan(y.dot)


@pytest.mark.parametrize("f", [fa.tgamma, fa.lgamma])
def test_gamma_at_zero_has_nan_tangent(f):
    with np.errstate(all="raise"):
        y = f(Dual(0.0, 1.0))
    assert not math.isfinite(y.val)
    assert math.isnan(y.dot)
