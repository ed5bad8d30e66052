# forward_ad/ops/__init__.py

# Ensure operator overloading and the NumPy hook are registered
from . import arithmetic
from . import transcendental
from . import special
from . import rounding
from . import ufuncs

# Convenience re-exports so users can do: from forward_ad.ops import mul, exp, ...
from .arithmetic import (
    add, sub, mul, div, neg, pos, inc, dec,
    pow, fmod, copysign, abs, fabs, max, min,
)
from .transcendental import (
    exp, exp2, expm1, log, log2, log10, log1p, sqrt, cbrt,
    sin, cos, tan, asin, acos, atan, atan2, hypot,
    sinh, cosh, tanh, asinh, acosh,
)
from .special import erf, erfc, tgamma, lgamma
from .rounding import (
    floor, ceil, trunc, round, nearbyint, rint, lrint, llrint, modf,
    isfinite, isinf, isnan,
)

# One-argument rules that map a Dual to a Dual, by name
UNARY_FUNCTIONS = {
    name: f
    for name, f in [
        ("abs", abs), ("fabs", fabs),
        ("exp", exp), ("exp2", exp2), ("expm1", expm1),
        ("log", log), ("log2", log2), ("log10", log10), ("log1p", log1p),
        ("sqrt", sqrt), ("cbrt", cbrt),
        ("sin", sin), ("cos", cos), ("tan", tan),
        ("asin", asin), ("acos", acos), ("atan", atan),
        ("sinh", sinh), ("cosh", cosh), ("tanh", tanh),
        ("asinh", asinh), ("acosh", acosh),
        ("erf", erf), ("erfc", erfc), ("tgamma", tgamma), ("lgamma", lgamma),
        ("floor", floor), ("ceil", ceil), ("trunc", trunc),
        ("round", round), ("rint", rint), ("nearbyint", nearbyint),
    ]
}

__all__ = [
    "add", "sub", "mul", "div", "neg", "pos", "inc", "dec",
    "pow", "fmod", "copysign", "abs", "fabs", "max", "min",
    "exp", "exp2", "expm1", "log", "log2", "log10", "log1p", "sqrt", "cbrt",
    "sin", "cos", "tan", "asin", "acos", "atan", "atan2", "hypot",
    "sinh", "cosh", "tanh", "asinh", "acosh",
    "erf", "erfc", "tgamma", "lgamma",
    "floor", "ceil", "trunc", "round", "nearbyint", "rint", "lrint", "llrint", "modf",
    "isfinite", "isinf", "isnan",
    "UNARY_FUNCTIONS",
]
