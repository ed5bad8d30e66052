# forward_ad/core/coerce.py
"""
Promotion of plain scalars into Dual numbers.

Generic numeric code written against the arithmetic operators (or the NumPy
ufuncs dispatched by ``forward_ad.ops.ufuncs``) runs unchanged over floats or
Duals; these helpers are the boundary where a real number becomes a
zero-tangent Dual.
"""
import numbers
from typing import Any

from .dual import Dual


def is_promotable(x: Any) -> bool:
    """True if `promote` would turn x into a Dual (any real scalar, not a Dual)."""
    return isinstance(x, numbers.Real) and not isinstance(x, Dual)


def promote(x: Any) -> Any:
    """
    Promote-if-real:
      - Dual        -> returned unchanged
      - real scalar -> Dual(x, 0.0)
      - anything else (complex, str, arrays, ...) -> passed through unchanged
    """
    if isinstance(x, Dual):
        return x
    if isinstance(x, numbers.Real):
        return Dual(x)
    return x


def as_dual(x: Any) -> Dual:
    """Ensure x is a Dual; otherwise wrap a real scalar as a constant Dual."""
    if isinstance(x, Dual):
        return x
    if isinstance(x, numbers.Real):
        return Dual(x)
    raise TypeError(f"expected a Dual or a real scalar, got {type(x)}")
