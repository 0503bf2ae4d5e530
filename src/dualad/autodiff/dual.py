import dataclasses
from typing import Self, final

import mpmath
import mpmath.ctx_mp_python

from dualad.typing import Scalar


@final
@dataclasses.dataclass(frozen=True, slots=True, eq=False)
class Dual[T: Scalar]:
    r"""Dual number.

    Parameters
    ----------
    value : T
        Primal value.
    deriv : T
        Derivative (tangent) with respect to the seeded variable.

    Attributes
    ----------
    value : T
    deriv : T

    Warnings
    --------
    Instances are immutable. Users cannot define classes derived from this.

    See Also
    --------
    lift, deriv

    Notes
    -----
    Instances of this class behave like elements of the dual number ring
    :math:`T[\varepsilon]/(\varepsilon^2)`, where `value` and `deriv` are the
    coefficients of :math:`1` and :math:`\varepsilon` respectively.

    Operands that are not dual numbers are lifted by :func:`lift` before the
    operation is applied, so that ``x * 2.0`` is exactly ``x * Dual(2.0, 0.0)``.

    Examples
    --------
    >>> x = Dual.variable(3.0)
    >>> x * x
    Dual(value=9.0, deriv=6.0)
    >>> 2.0 * x + 1.0
    Dual(value=7.0, deriv=2.0)
    >>> -x
    Dual(value=-3.0, deriv=-1.0)
    """

    value: T
    deriv: T

    @classmethod
    def constant(cls, value: T) -> Self:
        """Return the dual number of `value` with a zero derivative."""
        return cls(value, 0.0)  # type: ignore

    @classmethod
    def variable(cls, value: T) -> Self:
        """Return the dual number of `value` with a unit derivative.

        This is the seed of forward-mode differentiation: the derivative of the
        input with respect to itself is one.
        """
        return cls(value, 1.0)  # type: ignore

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return repr(self)

        value = format(self.value, format_spec)
        deriv = format(self.deriv, format_spec)
        return f"{type(self).__name__}(value={value}, deriv={deriv})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented

        return other.value == self.value and other.deriv == self.deriv  # type: ignore

    def __hash__(self) -> int:
        return hash((self.value, self.deriv))

    def __add__(self, rhs: Self | T | float) -> Self:
        if not _is_acceptable(rhs):
            return NotImplemented

        rhs = lift(rhs)
        return self.__class__(self.value + rhs.value, self.deriv + rhs.deriv)

    def __sub__(self, rhs: Self | T | float) -> Self:
        if not _is_acceptable(rhs):
            return NotImplemented

        rhs = lift(rhs)
        return self.__class__(self.value - rhs.value, self.deriv - rhs.deriv)

    def __mul__(self, rhs: Self | T | float) -> Self:
        if not _is_acceptable(rhs):
            return NotImplemented

        rhs = lift(rhs)
        deriv = self.deriv * rhs.value + self.value * rhs.deriv
        return self.__class__(self.value * rhs.value, deriv)

    def __neg__(self) -> Self:
        return self.__class__(-self.value, -self.deriv)

    def __pos__(self) -> Self:
        return self.__class__(+self.value, +self.deriv)

    def __radd__(self, lhs: T | float) -> Self:
        if not _is_acceptable(lhs):
            return NotImplemented

        return lift(lhs).__add__(self)

    def __rsub__(self, lhs: T | float) -> Self:
        if not _is_acceptable(lhs):
            return NotImplemented

        return lift(lhs).__sub__(self)

    def __rmul__(self, lhs: T | float) -> Self:
        if not _is_acceptable(lhs):
            return NotImplemented

        return lift(lhs).__mul__(self)


def lift[T: Scalar](x: Dual[T] | T | float) -> Dual[T]:
    """Return `x` as a dual number.

    A dual number is returned as is; any other value is treated as a constant, whose
    derivative is zero.

    Examples
    --------
    >>> lift(2.5)
    Dual(value=2.5, deriv=0.0)
    >>> lift(Dual(1.0, 4.0))
    Dual(value=1.0, deriv=4.0)
    """
    if isinstance(x, Dual):
        return x

    return Dual.constant(x)  # type: ignore


def _is_acceptable(value: object) -> bool:
    return isinstance(value, Dual | int | float | mpmath.ctx_mp_python.mpnumeric)
