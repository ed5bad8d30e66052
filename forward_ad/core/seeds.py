# forward_ad/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dx/dx = 1) at the input and let the tangent flow forward
# through every operation to the output.
#-----------------------------------------------------------------------------
from __future__ import annotations
from typing import Any, Callable, Optional, Tuple
import numpy as np

from .. import config
from .dual import Dual


def constant(x: Any) -> Dual:
    """Non-differentiated value: Dual(x, 0.0). A Dual argument loses its tangent."""
    return Dual(x.val if isinstance(x, Dual) else x, 0.0)


def seed(x: Any) -> Dual:
    """The variable of differentiation: Dual(x, 1.0)."""
    return Dual(x.val if isinstance(x, Dual) else x, 1.0)


def value(x: Any) -> Any:
    """Return the numeric value of a Dual; pass through plain numbers unchanged."""
    return x.val if isinstance(x, Dual) else x


def tangent(x: Any) -> Any:
    """Return the tangent of a Dual; plain numbers are constants (0.0)."""
    return x.dot if isinstance(x, Dual) else 0.0


def derivative(f: Callable[[Dual], Any], x0: float) -> Tuple[Any, Any]:
    """
    Value and derivative of a scalar function y = f(x) at x0.

    Evaluates f once on seed(x0). f may return a plain number (e.g. if it does
    not depend on x), in which case the derivative is 0.0.

    Example
    -------
    derivative(lambda x: x*x + 3.0*x, 2.0) -> (10.0, 7.0)
    """
    y = f(seed(x0))
    return value(y), tangent(y)


@np.errstate(all="ignore")
def bump_derivative(f: Callable[[Dual], Any], x0: float, h: Optional[float] = None) -> Any:
    """
    Central finite difference of f at x0 (bumping):

        f'(x0) ~ [f(x0+h) - f(x0-h)] / (2h)

    f is evaluated on constants, so only the value channel is used. This is
    the reference the forward tangents are checked against.
    """
    h = config.BUMP_STEP if h is None else h
    x0 = np.float64(value(x0))
    up = value(f(constant(x0 + h)))
    down = value(f(constant(x0 - h)))
    return (up - down) / (2.0 * h)
