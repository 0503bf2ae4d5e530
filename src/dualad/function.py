"""
###############################################
Mathematical functions (:mod:`dualad.function`)
###############################################

.. currentmodule:: dualad.function

This module provides mathematical functions which accept both plain numbers and
dual numbers.

Trigonometric functions
=======================

.. autosummary::
    :toctree: generated/

    cos
    sin

"""

import math
from typing import Any, overload

import mpmath
import mpmath.ctx_mp_python

from dualad.autodiff.autodiff import _defderiv, _primitive
from dualad.autodiff.dual import Dual


@overload
def cos[T](x: Dual[T], /) -> Dual[T]: ...


@overload
def cos(x: float | int, /) -> float: ...


@overload
def cos(x: Any, /) -> Any: ...


@_primitive
def cos(x, /):
    """Cosine.

    Infinite arguments yield NaN, as in IEEE 754.

    Examples
    --------
    >>> print(format(cos(1.0), ".6f"))
    0.540302
    >>> cos(Dual.variable(0.0))
    Dual(value=1.0, deriv=-0.0)
    """
    match x:
        case mpmath.ctx_mp_python.mpnumeric():
            return mpmath.cos(x)

        case float() | int():
            return math.nan if math.isinf(x) else math.cos(x)

        case _:
            raise TypeError


@overload
def sin[T](x: Dual[T], /) -> Dual[T]: ...


@overload
def sin(x: float | int, /) -> float: ...


@overload
def sin(x: Any, /) -> Any: ...


@_primitive
def sin(x, /):
    """Sine.

    Infinite arguments yield NaN, as in IEEE 754.

    Examples
    --------
    >>> print(format(sin(1.0), ".6f"))
    0.841471
    >>> sin(Dual.variable(0.0))
    Dual(value=0.0, deriv=1.0)
    """
    match x:
        case mpmath.ctx_mp_python.mpnumeric():
            return mpmath.sin(x)

        case float() | int():
            return math.nan if math.isinf(x) else math.sin(x)

        case _:
            raise TypeError


_defderiv(cos, lambda x: -sin(x))
_defderiv(sin, cos)
