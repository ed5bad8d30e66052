# forward_ad/interop/__init__.py
"""
Adapters for embedding Duals in external numeric code: the float-kind
DualFloat with its f-suffixed function names, and DualComplex.
These names are not part of the core forward_ad namespace.
"""
from .single import DualFloat, cosf, sinf, sqrtf, atan2f, fabsf, acosf, floorf, ceilf
from .complex import DualComplex

__all__ = [
    "DualFloat",
    "cosf", "sinf", "sqrtf", "atan2f", "fabsf", "acosf", "floorf", "ceilf",
    "DualComplex",
]
