# forward_ad/core/__init__.py

"""
Core public API for forward_ad.

Exports:
    Dual           : The forward-mode dual number (value, tangent).
    DualLimits     : Numeric limits of Dual, delegated to float64.
    numeric_limits : Lookup of DualLimits for a Dual kind.
    promote        : Promote-if-real conversion for generic code.
    is_promotable  : Whether `promote` would convert its argument.
    as_dual        : Strict conversion used at operator boundaries.
    constant, seed : Zero- and unit-tangent construction.
    value, tangent : Read the components (plain numbers pass through).
    derivative     : (value, derivative) of f at a point, via one forward pass.
    bump_derivative: Central finite-difference reference.
"""

from .dual import Dual
from .limits import DualLimits, numeric_limits
from .coerce import promote, is_promotable, as_dual
from .seeds import constant, seed, value, tangent, derivative, bump_derivative

__all__ = [
    "Dual",
    "DualLimits", "numeric_limits",
    "promote", "is_promotable", "as_dual",
    "constant", "seed", "value", "tangent", "derivative", "bump_derivative",
]
