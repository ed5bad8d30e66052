# forward_ad/ops/arithmetic.py
import numbers
import numpy as np

from .. import config
from ..core.dual import Dual
from ..core.coerce import as_dual
from ..logging_config import get_logger

logger = get_logger(__name__)


@np.errstate(all="ignore")
def _unary(x, f, df):
    """
    Generic unary primitive (chain rule):
      out.val = f(x.val)
      out.dot = f'(x.val) * x.dot
    """
    x = as_dual(x)
    return Dual(f(x.val), df(x.val) * x.dot)


@np.errstate(all="ignore")
def _binary(x, y, f, dfdx, dfdy):
    """
    Generic binary primitive:
      out.val = f(x.val, y.val)
      out.dot = ∂f/∂x * x.dot + ∂f/∂y * y.dot
    """
    x = as_dual(x)
    y = as_dual(y)
    a, b = x.val, y.val
    return Dual(f(a, b), dfdx(a, b) * x.dot + dfdy(a, b) * y.dot)


# ----------------------------- four operations ----------------------------- #
@np.errstate(all="ignore")
def add(x, y):
    x, y = as_dual(x), as_dual(y)
    return Dual(x.val + y.val, x.dot + y.dot)


@np.errstate(all="ignore")
def sub(x, y):
    x, y = as_dual(x), as_dual(y)
    return Dual(x.val - y.val, x.dot - y.dot)


@np.errstate(all="ignore")
def mul(x, y):
    # d(x*y) = x.dot * y.val + x.val * y.dot
    x, y = as_dual(x), as_dual(y)
    return Dual(x.val * y.val, x.dot * y.val + x.val * y.dot)


@np.errstate(all="ignore")
def div(x, y):
    # d(x/y) = x.dot / y.val - x.val * y.dot / y.val^2
    x, y = as_dual(x), as_dual(y)
    return Dual(x.val / y.val, x.dot / y.val - x.val * y.dot / (y.val * y.val))


def neg(x):
    x = as_dual(x)
    return Dual(-x.val, -x.dot)


def pos(x):
    x = as_dual(x)
    return Dual(x.val, x.dot)


def inc(x):
    """x + 1: the value moves, the tangent does not."""
    x = as_dual(x)
    return Dual(x.val + 1.0, x.dot)


def dec(x):
    """x - 1: the value moves, the tangent does not."""
    x = as_dual(x)
    return Dual(x.val - 1.0, x.dot)


# ------------------------------- power & co -------------------------------- #
@np.errstate(all="ignore")
def pow(x, y):
    """
    Power:
      out.val = x.val ** y.val

    Local partials:
      ∂out/∂x = y * x^(y-1)          (0 when y == 0)
      ∂out/∂y = x^y * log(x)         (only where the base guard allows it)

    The base guard enables the log term for x > 0. With
    config.POW_LEGACY_LOG_GUARD it is enabled for x <= 0 instead, which yields
    NaN tangents for negative bases.
    """
    x, y = as_dual(x), as_dual(y)
    a, b = x.val, y.val
    p = a ** b

    da = b * a ** (b - 1.0) if b != 0.0 else 0.0
    if config.POW_LEGACY_LOG_GUARD:
        use_log = a <= 0.0
        if use_log:
            logger.debug("pow: legacy guard takes log of non-positive base %r", a)
    else:
        use_log = a > 0.0
    db = p * np.log(a) if use_log else 0.0

    return Dual(p, da * x.dot + db * y.dot)


def fmod(x, y):
    """C fmod: ∂/∂x = 1, ∂/∂y = -trunc(x/y)."""
    return _binary(x, y, np.fmod, lambda a, b: 1.0, lambda a, b: -np.trunc(a / b))


@np.errstate(all="ignore")
def copysign(x, y):
    """Magnitude of x with the sign of y; y contributes no tangent."""
    x, y = as_dual(x), as_dual(y)
    return Dual(np.copysign(x.val, y.val), np.copysign(1.0, x.val * y.val) * x.dot)


def abs(x):
    """|x| with derivative +1 for x >= 0 and -1 otherwise."""
    x = as_dual(x)
    return Dual(np.abs(x.val), (1.0 if x.val >= 0.0 else -1.0) * x.dot)


fabs = abs


# -------------------------------- selection -------------------------------- #
def max(x, y):
    """Return whichever argument has the larger value (ties pick y), untouched."""
    x, y = as_dual(x), as_dual(y)
    return x if x > y else y


def min(x, y):
    """Return whichever argument has the smaller value (ties pick y), untouched."""
    x, y = as_dual(x), as_dual(y)
    return x if x < y else y


# Bind Python operators to Dual
def _is_operand(v):
    return isinstance(v, (Dual, numbers.Real))


def _forward(fn):
    def method(self, other):
        if not _is_operand(other):
            return NotImplemented
        return fn(self, other)
    method.__name__ = fn.__name__
    return method


def _reflected(fn):
    def method(self, other):
        if not _is_operand(other):
            return NotImplemented
        return fn(other, self)
    method.__name__ = "r" + fn.__name__
    return method


Dual.__add__      = _forward(add)
Dual.__radd__     = _reflected(add)
Dual.__sub__      = _forward(sub)
Dual.__rsub__     = _reflected(sub)
Dual.__mul__      = _forward(mul)
Dual.__rmul__     = _reflected(mul)
Dual.__truediv__  = _forward(div)
Dual.__rtruediv__ = _reflected(div)
Dual.__pow__      = _forward(pow)
Dual.__rpow__     = _reflected(pow)
Dual.__neg__      = lambda self: neg(self)
Dual.__pos__      = lambda self: pos(self)
Dual.__abs__      = lambda self: abs(self)
