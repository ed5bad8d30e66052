# forward_ad/core/dual.py
from __future__ import annotations
import numbers
import numpy as np
from typing import Any


class Dual:
    """
    Active scalar for forward-mode Automatic Differentiation (AD).

    Attributes
    ----------
    val : np.float64
        Forward (primal) value.
    dot : np.float64
        Forward tangent: d(val)/d(seed), where the seed is whichever input
        was created with dot = 1 upstream in the expression.

    ``Dual(x)`` is a constant (dot = 0); only the two-argument form sets a
    tangent. Comparisons look at ``val`` alone, so ``Dual(5, 1) == Dual(5, -3)``.
    Instances are immutable: arithmetic operators (bound in ``forward_ad.ops``)
    always return a new Dual, and ``x += y`` simply rebinds ``x``.

    There is intentionally no ``__float__``: ``math.sin(x)`` or ``float(x)``
    would silently drop the tangent. Use ``x.to_float()`` to leave AD.
    """

    __slots__ = ("val", "dot")
    __array_priority__ = 1000  # ensures NumPy ufuncs prefer Dual.__array_ufunc__

    def __init__(self, val: Any = 0.0, dot: Any = 0.0):
        # Type check: only real scalars (int, float, numpy real scalars)
        for arg in (val, dot):
            if isinstance(arg, Dual) or not isinstance(arg, numbers.Real):
                raise TypeError(
                    f"Dual only accepts real scalars (int, float, numpy real), "
                    f"but got {type(arg)}"
                )
        object.__setattr__(self, "val", np.float64(val))
        object.__setattr__(self, "dot", np.float64(dot))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable; build a new instance instead")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (float(self.val), float(self.dot)))

    # ------------------------------------------------------------------
    # Text I/O: only the value crosses the textual boundary
    # ------------------------------------------------------------------

    def __repr__(self):
        return f"{type(self).__name__}({float(self.val)!r}, {float(self.dot)!r})"

    def __str__(self):
        return str(float(self.val))

    def __format__(self, spec: str) -> str:
        return format(float(self.val), spec)

    @classmethod
    def parse(cls, text) -> "Dual":
        """
        Read a Dual from text. Only a scalar value is read; the tangent is
        always 0, so a parsed value can never act as the seed.

        Raises ValueError for text that is not a float literal.
        """
        if isinstance(text, (bytes, bytearray)):
            text = text.decode()
        if not isinstance(text, str):
            raise TypeError(f"Dual.parse expects str or bytes, got {type(text)}")
        return cls(float(text))

    # ------------------------------------------------------------------
    # Explicit conversion
    # ------------------------------------------------------------------

    def to_float(self) -> float:
        """Primal value as a Python float (the tangent is discarded)."""
        return float(self.val)

    def __bool__(self):
        return bool(self.val != 0.0)

    # ------------------------------------------------------------------
    # Comparisons: value only
    # ------------------------------------------------------------------

    def _other_val(self, other):
        if isinstance(other, Dual):
            return other.val
        if isinstance(other, numbers.Real):
            return other
        return None

    def __eq__(self, other):
        o = self._other_val(other)
        return NotImplemented if o is None else bool(self.val == o)

    def __ne__(self, other):
        o = self._other_val(other)
        return NotImplemented if o is None else bool(self.val != o)

    def __lt__(self, other):
        o = self._other_val(other)
        return NotImplemented if o is None else bool(self.val < o)

    def __le__(self, other):
        o = self._other_val(other)
        return NotImplemented if o is None else bool(self.val <= o)

    def __gt__(self, other):
        o = self._other_val(other)
        return NotImplemented if o is None else bool(self.val > o)

    def __ge__(self, other):
        o = self._other_val(other)
        return NotImplemented if o is None else bool(self.val >= o)

    def __hash__(self):
        # Consistent with value-only equality (and with hash(float))
        return hash(self.val)
