# forward_ad/interop/complex.py
from __future__ import annotations
import numbers
from typing import Any, Optional

from ..core.dual import Dual
from ..core.coerce import as_dual
from .. import ops


class DualComplex:
    """
    Complex number whose real and imaginary parts are Duals.

    Plain reals, Duals and Python complex numbers on either side of + - * /
    are promoted first: reals become zero-tangent Duals, and a real operand
    gets a zero imaginary part.
    """

    __slots__ = ("real", "imag")

    def __init__(self, real: Any = 0.0, imag: Any = 0.0):
        # complex(a, b) == a + b*1j, also when a is itself complex
        if isinstance(real, numbers.Complex) and not isinstance(real, (Dual, numbers.Real)):
            real, imag = real.real, real.imag + imag
        object.__setattr__(self, "real", as_dual(real))
        object.__setattr__(self, "imag", as_dual(imag))

    def __setattr__(self, name, value):
        raise AttributeError("DualComplex is immutable; build a new instance instead")

    def __reduce__(self):
        return (DualComplex, (self.real, self.imag))

    @staticmethod
    def _coerce(other) -> Optional["DualComplex"]:
        if isinstance(other, DualComplex):
            return other
        if isinstance(other, (Dual, numbers.Real)):
            return DualComplex(other, 0.0)
        if isinstance(other, numbers.Complex):
            return DualComplex(other.real, other.imag)
        return None

    def __repr__(self):
        return f"DualComplex({self.real!r}, {self.imag!r})"

    def __str__(self):
        return str(complex(self.real.to_float(), self.imag.to_float()))

    # --------------------------- arithmetic --------------------------- #
    def __add__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return DualComplex(self.real + o.real, self.imag + o.imag)

    def __radd__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return o + self

    def __sub__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return DualComplex(self.real - o.real, self.imag - o.imag)

    def __rsub__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return o - self

    def __mul__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return DualComplex(
            self.real * o.real - self.imag * o.imag,
            self.real * o.imag + self.imag * o.real,
        )

    def __rmul__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return o * self

    def __truediv__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        # (a+bi)/(c+di) = ((ac+bd) + (bc-ad)i) / (c²+d²)
        denom = o.real * o.real + o.imag * o.imag
        return DualComplex(
            (self.real * o.real + self.imag * o.imag) / denom,
            (self.imag * o.real - self.real * o.imag) / denom,
        )

    def __rtruediv__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return o / self

    def __neg__(self):
        return DualComplex(-self.real, -self.imag)

    def __pos__(self):
        return self

    def __abs__(self) -> Dual:
        return ops.hypot(self.real, self.imag)

    def conjugate(self) -> "DualComplex":
        return DualComplex(self.real, -self.imag)

    # Equality compares component values (tangents ignored, like Dual)
    def __eq__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self.real == o.real and self.imag == o.imag

    def __hash__(self):
        return hash(complex(self.real.val, self.imag.val))
