"""
#################################
Examples (:mod:`dualad.examples`)
#################################

.. currentmodule:: dualad.examples

Scalar functions whose derivatives are known in closed form. They are used by the
command-line driver to demonstrate :func:`dualad.autodiff.deriv`.

.. autosummary::
    :toctree: generated/

    Example
    EXAMPLES
    get_example

"""

import dataclasses
import math
from collections.abc import Callable

from dualad.autodiff.dual import Dual
from dualad.function import cos, sin


@dataclasses.dataclass(frozen=True, slots=True)
class Example:
    """Scalar function paired with its closed-form derivative.

    Attributes
    ----------
    name : str
    formula : str
        Human-readable expression of the function.
    fun : Callable[[Dual], Dual]
        Function written in dual-number arithmetic.
    exact : Callable[[float], float]
        Closed form of the function.
    exact_deriv : Callable[[float], float]
        Closed form of the derivative.
    points : tuple[float, ...]
        Sample points at which the example is demonstrated.
    """

    name: str
    formula: str
    fun: Callable[[Dual[float]], Dual[float]]
    exact: Callable[[float], float]
    exact_deriv: Callable[[float], float]
    points: tuple[float, ...]

    def value(self, x: float) -> float:
        """Evaluate the function at `x` with a zero seed."""
        return self.fun(Dual.constant(x)).value


EXAMPLES: tuple[Example, ...] = (
    Example(
        name="f1",
        formula="x*x",
        fun=lambda x: x * x,
        exact=lambda x: x * x,
        exact_deriv=lambda x: 2.0 * x,
        points=(3.0, 5.0),
    ),
    Example(
        name="f2",
        formula="sin(x)",
        fun=lambda x: sin(x),
        exact=math.sin,
        exact_deriv=math.cos,
        points=(math.pi / 2, 0.0),
    ),
    Example(
        name="f3",
        formula="3*cos(x) - x",
        fun=lambda x: 3.0 * cos(x) - x,
        exact=lambda x: 3.0 * math.cos(x) - x,
        exact_deriv=lambda x: -3.0 * math.sin(x) - 1.0,
        points=(math.pi, 0.0),
    ),
    Example(
        name="f4",
        formula="x*x + 2*x + 1",
        fun=lambda x: x * x + 2.0 * x + 1.0,
        exact=lambda x: x * x + 2.0 * x + 1.0,
        exact_deriv=lambda x: 2.0 * x + 2.0,
        points=(1.0, 5.0),
    ),
)


def get_example(name: str) -> Example:
    """Return the example called `name`.

    Raises
    ------
    KeyError
        If no example has that name.
    """
    for example in EXAMPLES:
        if example.name == name:
            return example

    raise KeyError(name)
