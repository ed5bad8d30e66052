# forward_ad/interop/single.py
"""
Single-precision-named entry points for code that dispatches on a float-like
kind and calls ``cosf``/``sqrtf``-style functions.

Everything is still computed in float64; each name delegates one-to-one to
the rule in ``forward_ad.ops`` and re-tags the result as DualFloat.
"""
from ..core.dual import Dual
from .. import ops


class DualFloat(Dual):
    """A Dual tagged as the "float" kind. Arithmetic forwards to Dual (and returns Dual)."""
    __slots__ = ()


def _tag(d: Dual) -> DualFloat:
    return DualFloat(d.val, d.dot)


def cosf(x):
    return _tag(ops.cos(x))


def sinf(x):
    return _tag(ops.sin(x))


def sqrtf(x):
    return _tag(ops.sqrt(x))


def atan2f(y, x):
    return _tag(ops.atan2(y, x))


def fabsf(x):
    return _tag(ops.fabs(x))


def acosf(x):
    return _tag(ops.acos(x))


def floorf(x):
    return _tag(ops.floor(x))


def ceilf(x):
    return _tag(ops.ceil(x))
