"""
##################################################
Automatic differentiation (:mod:`dualad.autodiff`)
##################################################

.. currentmodule:: dualad.autodiff

This module provides forward-mode automatic differentiation.

Differential operators
----------------------

.. autosummary::
    :toctree: generated/

    deriv

Number systems containing infinitesimals
----------------------------------------

.. autosummary::
    :toctree: generated/

    Dual
    lift

"""

from .autodiff import deriv
from .dual import Dual, lift

__all__ = [
    "deriv",
    "Dual",
    "lift",
]
