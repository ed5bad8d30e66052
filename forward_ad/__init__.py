# forward_ad/__init__.py
# Forward-mode Automatic Differentiation library

from .core import (
    Dual,
    DualLimits,
    numeric_limits,
    promote,
    is_promotable,
    as_dual,
    constant,
    seed,
    value,
    tangent,
    derivative,
    bump_derivative,
)

# Elementary functions (importing ops also binds the operators on Dual)
from . import ops
from .ops import (
    add, sub, mul, div, neg, pos, inc, dec,
    pow, fmod, copysign, abs, fabs, max, min,
    exp, exp2, expm1, log, log2, log10, log1p, sqrt, cbrt,
    sin, cos, tan, asin, acos, atan, atan2, hypot,
    sinh, cosh, tanh, asinh, acosh,
    erf, erfc, tgamma, lgamma,
    floor, ceil, trunc, round, nearbyint, rint, lrint, llrint, modf,
    isfinite, isinf, isnan,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    'Dual',
    'DualLimits',
    'numeric_limits',
    'promote',
    'is_promotable',
    'as_dual',
    'constant',
    'seed',
    'value',
    'tangent',
    'derivative',
    'bump_derivative',
    # Ops
    'ops',
] + [name for name in ops.__all__ if name != 'UNARY_FUNCTIONS']
