# forward_ad/ops/rounding.py
"""
Rounding and classification.

Rounding functions are piecewise constant: the tangent is 0 everywhere,
including at the jumps (by convention, not left undefined).
"""
import numpy as np

from ..core.dual import Dual
from ..core.coerce import as_dual


def _flat(x, f):
    x = as_dual(x)
    return Dual(f(x.val), 0.0)


def floor(x):
    return _flat(x, np.floor)


def ceil(x):
    return _flat(x, np.ceil)


def trunc(x):
    return _flat(x, np.trunc)


def _round_half_away(v):
    r = np.trunc(v)
    if np.abs(v - r) >= 0.5:
        r = r + np.copysign(1.0, v)
    return r


@np.errstate(all="ignore")
def round(x):
    """Nearest integer, halfway cases away from zero (C ``round``)."""
    return _flat(x, _round_half_away)


def rint(x):
    """Nearest integer, halfway cases to even (default rounding mode)."""
    return _flat(x, np.rint)


nearbyint = rint


def lrint(x) -> int:
    """rint as a Python int. Raises ValueError/OverflowError for NaN/inf."""
    return int(np.rint(as_dual(x).val))


llrint = lrint


def modf(x):
    """
    Split into (fractional, integral) parts, like math.modf.
    The fractional part keeps x.dot; the integral part is a constant.
    """
    x = as_dual(x)
    frac, whole = np.modf(x.val)
    return Dual(frac, x.dot), Dual(whole, 0.0)


def isfinite(x) -> bool:
    return bool(np.isfinite(as_dual(x).val))


def isinf(x) -> bool:
    return bool(np.isinf(as_dual(x).val))


def isnan(x) -> bool:
    return bool(np.isnan(as_dual(x).val))


def _dunder_round(self, ndigits=None):
    # builtin round(): Python float semantics (half to even), tangent 0
    if ndigits is None:
        return Dual(np.rint(self.val), 0.0)
    return Dual(np.round(self.val, ndigits), 0.0)


# Bind rounding protocols to Dual (math.floor / math.ceil / math.trunc / round)
Dual.__floor__ = lambda self: floor(self)
Dual.__ceil__  = lambda self: ceil(self)
Dual.__trunc__ = lambda self: trunc(self)
Dual.__round__ = _dunder_round
