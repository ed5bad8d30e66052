# forward_ad/core/limits.py
"""
Numeric limits of Dual.

Dual has no limits of its own: every bound and trait is taken from the float64
metadata reported by ``numpy.finfo``. Bounds are returned as constant Duals.
"""
import numpy as np

from .dual import Dual

_F64 = np.finfo(np.float64)
_SIGNALING_NAN_BITS = 0x7FF4000000000000


class DualLimits:
    """Traits and bounds of Dual, delegated to float64."""

    is_specialized = True
    is_signed = True
    is_integer = False
    is_exact = False
    has_infinity = True
    has_quiet_nan = True
    has_signaling_nan = True
    has_denorm = True
    has_denorm_loss = False
    round_style = "round_to_nearest"
    is_iec559 = True
    is_bounded = True
    is_modulo = False
    traps = False
    tinyness_before = False

    radix = 2
    digits = _F64.nmant + 1
    digits10 = _F64.precision
    min_exponent = _F64.minexp + 1
    max_exponent = _F64.maxexp
    min_exponent10 = int(np.floor(np.log10(_F64.smallest_normal))) + 1
    max_exponent10 = int(np.floor(np.log10(_F64.max)))

    @staticmethod
    def min() -> Dual:
        """Smallest positive normal value."""
        return Dual(_F64.smallest_normal)

    @staticmethod
    def lowest() -> Dual:
        return Dual(_F64.min)

    @staticmethod
    def max() -> Dual:
        return Dual(_F64.max)

    @staticmethod
    def epsilon() -> Dual:
        return Dual(_F64.eps)

    @staticmethod
    def round_error() -> Dual:
        # round-to-nearest: at most half an ulp
        return Dual(0.5)

    @staticmethod
    def infinity() -> Dual:
        return Dual(np.inf)

    @staticmethod
    def quiet_nan() -> Dual:
        return Dual(np.nan)

    @staticmethod
    def signaling_nan() -> Dual:
        bits = np.array([_SIGNALING_NAN_BITS], dtype=np.uint64)
        return Dual(bits.view(np.float64)[0])

    @staticmethod
    def denorm_min() -> Dual:
        return Dual(_F64.smallest_subnormal)


def numeric_limits(kind=Dual):
    """Limits for a Dual kind (Dual or a subclass such as DualFloat)."""
    if isinstance(kind, type) and issubclass(kind, Dual):
        return DualLimits
    raise TypeError(f"numeric_limits is only defined for Dual kinds, got {kind!r}")
