# forward_ad/ops/transcendental.py
import numpy as np

from .. import config
from ..core.dual import Dual
from ..core.coerce import as_dual
from .arithmetic import _unary, _binary

LN2 = np.log(2.0)
LN10 = np.log(10.0)


# --------------------------- exponentials & logs --------------------------- #
def exp(x):
    return _unary(x, np.exp, np.exp)


def exp2(x):
    return _unary(x, np.exp2, lambda v: np.exp2(v) * LN2)


def expm1(x):
    return _unary(x, np.expm1, np.exp)


def log(x):
    return _unary(x, np.log, lambda v: 1.0 / v)


def log2(x):
    return _unary(x, np.log2, lambda v: 1.0 / (v * LN2))


def log10(x):
    return _unary(x, np.log10, lambda v: 1.0 / (v * LN10))


def log1p(x):
    return _unary(x, np.log1p, lambda v: 1.0 / (v + 1.0))


# ---------------------------------- roots ---------------------------------- #
def sqrt(x):
    """
    Square root, d/dx sqrt(x) = 0.5 / sqrt(x).

    At x == 0 the tangent would be infinite; with config.SQRT_ZERO_GUARD
    (default) the result is {0, 0} instead.
    """
    x = as_dual(x)
    if config.SQRT_ZERO_GUARD and x.val == 0.0:
        return Dual(0.0, 0.0)
    return _unary(x, np.sqrt, lambda v: 0.5 / np.sqrt(v))


def cbrt(x):
    return _unary(x, np.cbrt, lambda v: np.cbrt(v) / (3.0 * v))


# ------------------------------ trigonometric ------------------------------ #
def sin(x):
    return _unary(x, np.sin, np.cos)


def cos(x):
    return _unary(x, np.cos, lambda v: -np.sin(v))


def tan(x):
    return _unary(x, np.tan, lambda v: 1.0 / (np.cos(v) * np.cos(v)))


def asin(x):
    return _unary(x, np.arcsin, lambda v: 1.0 / np.sqrt(1.0 - v * v))


def acos(x):
    return _unary(x, np.arccos, lambda v: -1.0 / np.sqrt(1.0 - v * v))


def atan(x):
    return _unary(x, np.arctan, lambda v: 1.0 / (1.0 + v * v))


def atan2(y, x):
    """
    atan2(a, b) with partials
        ∂/∂a = -b / (a² + b²),  ∂/∂b = a / (a² + b²)

    config.ATAN2_TEXTBOOK_PARTIALS flips both signs, giving the derivative of
    the angle of the point (x=b, y=a).
    """
    sign = -1.0 if config.ATAN2_TEXTBOOK_PARTIALS else 1.0
    return _binary(
        y, x, np.arctan2,
        lambda a, b: sign * -b / (a * a + b * b),
        lambda a, b: sign * a / (a * a + b * b),
    )


def hypot(x, y):
    return _binary(
        x, y, np.hypot,
        lambda a, b: a / np.hypot(a, b),
        lambda a, b: b / np.hypot(a, b),
    )


# -------------------------------- hyperbolic ------------------------------- #
def sinh(x):
    return _unary(x, np.sinh, np.cosh)


def cosh(x):
    return _unary(x, np.cosh, np.sinh)


def tanh(x):
    return _unary(x, np.tanh, lambda v: 1.0 - np.tanh(v) * np.tanh(v))


def asinh(x):
    return _unary(x, np.arcsinh, lambda v: 1.0 / np.sqrt(v * v + 1.0))


def acosh(x):
    return _unary(x, np.arccosh, lambda v: 1.0 / np.sqrt(v * v - 1.0))
