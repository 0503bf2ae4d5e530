import functools
from collections.abc import Callable
from typing import Any

from dualad.autodiff.dual import Dual, lift


def deriv[T](fun: Callable[[Dual[T]], Dual[T] | T]) -> Callable[[T], T]:
    """Return a function that evaluates the derivative of the univariate scalar-valued
    function.

    Parameters
    ----------
    fun : Callable
        Differentiated function. It must be built from the arithmetic of
        :class:`Dual` and the functions in :mod:`dualad.function`.

    Returns
    -------
    Callable
        Derivative of `fun`.

    Raises
    ------
    TypeError
        If the derivative is evaluated at a dual number.

    Warnings
    --------
    `fun` must not contain conditional branches on its argument. Comparisons of dual
    numbers are not defined, so such a branch raises :exc:`TypeError`.

    Examples
    --------
    This example computes values of the derivative.

    >>> from dualad import function as daf
    >>> df = deriv(lambda x: 3.0 * daf.cos(x) - x)
    >>> df(0.0)
    -1.0
    >>> print(format(df(1.2), ".6g"))
    -3.79612

    A constant function has a zero derivative.

    >>> deriv(lambda x: 2.0)(5.0)
    0.0
    """

    @functools.wraps(fun)
    def result(x):
        if isinstance(x, Dual):
            raise TypeError("differentiation w.r.t. Dual is not supported")

        tmp: Any = fun(Dual.variable(x))
        return lift(tmp).deriv

    return result


def _defderiv[**P](
    fun: Callable[P, Any], deriv: Callable[P, Any], *, argnum: int = 0
) -> None:
    if "_dualad_is_primitive" not in fun.__dict__:
        raise ValueError

    fun.__dict__["_dualad_derivs"][argnum] = deriv


def _primitive[T, **P](fun: Callable[P, T]) -> Callable[P, T]:
    derivs: dict[int, Callable] = {}

    @functools.wraps(fun)
    def wrapper(*args, **kwargs):
        if not any(isinstance(x, Dual) for x in args):
            return fun(*args, **kwargs)

        args_value = [x.value if isinstance(x, Dual) else x for x in args]
        result = None

        for argnum, arg in enumerate(args):
            if not isinstance(arg, Dual):
                continue

            tmp = derivs[argnum](*args_value, **kwargs) * arg.deriv
            result = tmp if result is None else result + tmp

        return Dual(fun(*args_value, **kwargs), result)

    wrapper.__dict__["_dualad_is_primitive"] = True
    wrapper.__dict__["_dualad_derivs"] = derivs
    return wrapper  # type: ignore
