# forward_ad/ops/special.py
import numpy as np
from scipy import special as sp

from .. import config
from ..core.dual import Dual
from ..core.coerce import as_dual
from ..logging_config import get_logger
from .arithmetic import _unary

logger = get_logger(__name__)

TWO_OVER_SQRT_PI = 2.0 / np.sqrt(np.pi)


def erf(x):
    """
    Error function: erf(x) = (2/√π) ∫₀ˣ e^(-t²) dt

    Derivative: d/dx erf(x) = (2/√π) * e^(-x²)
    """
    return _unary(x, sp.erf, lambda v: TWO_OVER_SQRT_PI * np.exp(-v * v))


def erfc(x):
    """Complementary error function; d/dx erfc(x) = -(2/√π) * e^(-x²)."""
    return _unary(x, sp.erfc, lambda v: -TWO_OVER_SQRT_PI * np.exp(-v * v))


@np.errstate(all="ignore")
def _bumped_slope(f, v):
    """
    Central difference with a relative bump (config.GAMMA_FD_REL_STEP):
        f'(v) ~ [f(v(1+s)) - f(v(1-s))] / (2 s v)
    This is an approximation, not exact AD; it is NaN at v == 0.
    """
    s = config.GAMMA_FD_REL_STEP
    return (f(v * (1.0 + s)) - f(v * (1.0 - s))) / (v * 2.0 * s)


@np.errstate(all="ignore")
def tgamma(x):
    """Gamma function. The tangent comes from `_bumped_slope`, not a digamma formula."""
    x = as_dual(x)
    logger.debug("tgamma(%r): tangent from relative central difference", x.val)
    return Dual(sp.gamma(x.val), _bumped_slope(sp.gamma, x.val) * x.dot)


@np.errstate(all="ignore")
def lgamma(x):
    """log|Γ(x)|. The tangent comes from `_bumped_slope`, not a digamma formula."""
    x = as_dual(x)
    logger.debug("lgamma(%r): tangent from relative central difference", x.val)
    return Dual(sp.gammaln(x.val), _bumped_slope(sp.gammaln, x.val) * x.dot)
