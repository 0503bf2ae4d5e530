import math

import mpmath
import numpy as np
import pytest

from dualad import function as daf
from dualad.autodiff import autodiff
from dualad.autodiff.dual import Dual


def test_deriv():
    df = autodiff.deriv(lambda x: x * x)
    assert df(3.0) == 6.0
    assert df(5.0) == 10.0
    assert (lambda x: x * x)(Dual(3.0, 0.0)).value == 9.0

    df = autodiff.deriv(lambda x: daf.sin(x))
    assert df(math.pi / 2) == pytest.approx(0.0, abs=1e-9)
    assert df(0.0) == 1.0

    f = lambda x: 3.0 * daf.cos(x) - x  # noqa: E731
    df = autodiff.deriv(f)
    assert df(math.pi) == pytest.approx(-1.0, abs=1e-9)
    assert df(0.0) == -1.0
    assert f(Dual(math.pi, 0.0)).value == pytest.approx(-6.14159265358979, abs=1e-9)
    assert f(Dual(0.0, 0.0)).value == 3.0

    f = lambda x: x * x + 2.0 * x + 1.0  # noqa: E731
    df = autodiff.deriv(f)
    assert df(1.0) == 4.0
    assert df(5.0) == 12.0
    assert f(Dual(1.0, 0.0)).value == 4.0


@pytest.mark.parametrize("x", [-2.5, 0.0, 1.0, 1e10])
def test_seed(x):
    assert autodiff.deriv(lambda t: t)(x) == 1.0
    assert autodiff.deriv(lambda t: 2.0)(x) == 0.0
    assert autodiff.deriv(lambda t: t - t)(x) == 0.0


def test_linearity():
    a = Dual(0.4, 1.7)
    b = Dual(-2.2, 0.3)
    assert (a + b).deriv == a.deriv + b.deriv
    assert (a - b).deriv == a.deriv - b.deriv
    assert (a * 3.5).deriv == a.deriv * 3.5

    f = lambda x: daf.sin(x) * x  # noqa: E731
    g = lambda x: daf.cos(x) - x * x  # noqa: E731
    h = lambda x: f(x) + g(x)  # noqa: E731
    df, dg, dh = autodiff.deriv(f), autodiff.deriv(g), autodiff.deriv(h)
    assert dh(0.7) == pytest.approx(df(0.7) + dg(0.7), abs=1e-12)


def test_composition():
    xs = np.linspace(-5.0, 5.0, 41)

    df = autodiff.deriv(lambda x: daf.sin(x) * daf.cos(x) - x * x * x + 2.0)
    expected = np.cos(xs) ** 2 - np.sin(xs) ** 2 - 3 * xs**2
    np.testing.assert_allclose([df(x) for x in xs], expected, rtol=1e-9, atol=1e-9)

    df = autodiff.deriv(lambda x: daf.sin(daf.cos(x)))
    expected = -np.cos(np.cos(xs)) * np.sin(xs)
    np.testing.assert_allclose([df(x) for x in xs], expected, rtol=1e-9, atol=1e-9)

    df = autodiff.deriv(lambda x: -(1.0 - x) * daf.sin(2.0 * x))
    expected = np.sin(2 * xs) + 2 * (xs - 1) * np.cos(2 * xs)
    np.testing.assert_allclose([df(x) for x in xs], expected, rtol=1e-9, atol=1e-9)


def test_mpmath():
    x = mpmath.mpf("0.5")
    c = autodiff.deriv(lambda t: daf.sin(t) * t)(x)
    assert isinstance(c, mpmath.mpf)
    assert float(c) == pytest.approx(math.sin(0.5) + 0.5 * math.cos(0.5), 1e-12)


def test_misuse():
    def f(x):
        return x if x > 0.0 else -x

    with pytest.raises(TypeError):
        autodiff.deriv(f)(1.0)

    with pytest.raises(TypeError):
        autodiff.deriv(lambda x: x * x)(Dual(1.0, 1.0))


def test_wraps():
    def square(x):
        """Square."""
        return x * x

    df = autodiff.deriv(square)
    assert df.__name__ == "square"
    assert df.__doc__ == "Square."


def test_primitive():
    @autodiff._primitive
    def square(x, /):
        return x * x

    @autodiff._primitive
    def hypot(x, y, /):
        return math.hypot(x, y)

    autodiff._defderiv(square, lambda x: 2 * x)
    autodiff._defderiv(hypot, lambda x, y: x / math.hypot(x, y), argnum=0)
    autodiff._defderiv(hypot, lambda x, y: y / math.hypot(x, y), argnum=1)

    assert square(3.0) == 9.0
    assert square(Dual(3.0, 2.0)) == Dual(9.0, 12.0)

    df = autodiff.deriv(lambda x: square(daf.sin(x)))
    assert df(0.3) == pytest.approx(2 * math.sin(0.3) * math.cos(0.3), 1e-12)

    assert autodiff.deriv(lambda x: hypot(3.0, x))(4.0) == pytest.approx(0.8, 1e-12)
    assert autodiff.deriv(lambda x: hypot(x, x))(1.0) == pytest.approx(math.sqrt(2))

    def plain(x):
        return x

    with pytest.raises(ValueError):
        autodiff._defderiv(plain, lambda x: 1.0)
