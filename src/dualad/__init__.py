from .autodiff import Dual, deriv, lift
from .function import cos, sin

__all__ = [
    "cos",
    "sin",
    "Dual",
    "deriv",
    "lift",
]
