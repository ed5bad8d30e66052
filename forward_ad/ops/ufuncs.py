# forward_ad/ops/ufuncs.py
"""
NumPy interop: route ufunc calls on Dual operands to the derivative rules.

With this hook ``np.sin(x)``, ``np.hypot(x, y)`` or ``np.float64(2.0) * x``
propagate tangents, so code written against NumPy's scalar functions runs
unchanged on floats or Duals. Arrays, reductions (``np.add.reduce``) and ufunc
keyword arguments are not supported and give NotImplemented.
"""
import numbers
import operator

import numpy as np
from scipy import special as sp

from ..core.dual import Dual
from ..core.coerce import as_dual
from . import arithmetic as ar
from . import transcendental as tr
from . import special as sf
from . import rounding as rd


def _compare(op):
    # promote first so the comparison lands on Dual, not back on numpy
    return lambda a, b: op(as_dual(a), as_dual(b))


UFUNC_RULES = {
    np.add: ar.add,
    np.subtract: ar.sub,
    np.multiply: ar.mul,
    np.true_divide: ar.div,
    np.negative: ar.neg,
    np.positive: ar.pos,
    np.power: ar.pow,
    np.float_power: ar.pow,
    np.fmod: ar.fmod,
    np.copysign: ar.copysign,
    np.absolute: ar.abs,
    np.fabs: ar.fabs,
    np.maximum: ar.max,
    np.minimum: ar.min,
    np.exp: tr.exp,
    np.exp2: tr.exp2,
    np.expm1: tr.expm1,
    np.log: tr.log,
    np.log2: tr.log2,
    np.log10: tr.log10,
    np.log1p: tr.log1p,
    np.sqrt: tr.sqrt,
    np.cbrt: tr.cbrt,
    np.sin: tr.sin,
    np.cos: tr.cos,
    np.tan: tr.tan,
    np.arcsin: tr.asin,
    np.arccos: tr.acos,
    np.arctan: tr.atan,
    np.arctan2: tr.atan2,
    np.hypot: tr.hypot,
    np.sinh: tr.sinh,
    np.cosh: tr.cosh,
    np.tanh: tr.tanh,
    np.arcsinh: tr.asinh,
    np.arccosh: tr.acosh,
    np.floor: rd.floor,
    np.ceil: rd.ceil,
    np.trunc: rd.trunc,
    np.rint: rd.rint,
    sp.erf: sf.erf,
    sp.erfc: sf.erfc,
    sp.gamma: sf.tgamma,
    sp.gammaln: sf.lgamma,
    np.isfinite: rd.isfinite,
    np.isinf: rd.isinf,
    np.isnan: rd.isnan,
    np.equal: _compare(operator.eq),
    np.not_equal: _compare(operator.ne),
    np.less: _compare(operator.lt),
    np.less_equal: _compare(operator.le),
    np.greater: _compare(operator.gt),
    np.greater_equal: _compare(operator.ge),
}


def _unwrap(v):
    # numpy scalars sometimes arrive as 0-d arrays (e.g. via comparisons)
    if isinstance(v, np.ndarray) and v.ndim == 0 and v.dtype.kind in "iuf":
        return v[()]
    return v


def _array_ufunc(self, ufunc, method, *inputs, **kwargs):
    rule = UFUNC_RULES.get(ufunc)
    if rule is None or method != "__call__" or kwargs:
        return NotImplemented
    inputs = tuple(_unwrap(v) for v in inputs)
    if not all(isinstance(v, (Dual, numbers.Real)) for v in inputs):
        return NotImplemented
    return rule(*inputs)


Dual.__array_ufunc__ = _array_ufunc
