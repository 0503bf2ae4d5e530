"""Typer CLI for dualad. Prints values and derivatives of the bundled examples."""

import logging
import math
from typing import Optional

import typer

from dualad.autodiff import deriv
from dualad.examples import EXAMPLES, Example, get_example

logger = logging.getLogger(__name__)

app = typer.Typer(help="Forward-mode automatic differentiation with dual numbers")


def _resolve_example(name: str) -> Example:
    try:
        return get_example(name)
    except KeyError:
        names = ", ".join(x.name for x in EXAMPLES)
        raise typer.BadParameter(f"unknown example {name!r} (choose from {names})")


# ── Shared functions ──


def evaluate_fn(example: Example, x: float) -> tuple[float, float]:
    """Return the value and the derivative of `example` at `x`."""
    value = example.value(x)
    derivative = deriv(example.fun)(x)
    logger.debug("%s at %r: value=%r deriv=%r", example.name, x, value, derivative)
    return value, derivative


def describe_fn(example: Example) -> list[str]:
    """Return the lines printed for `example` by ``dualad demo``."""
    lines = [f"{example.name}(x) = {example.formula}"]

    for x in example.points:
        value, derivative = evaluate_fn(example, x)
        lines.append(f"{example.name}({x})  = {value}")
        lines.append(f"{example.name}'({x}) = {derivative}")

    lines.append("-" * 20)
    return lines


def check_fn(example: Example, x: float, tolerance: float) -> list[str]:
    """Compare `example` at `x` with its closed forms. Returns mismatch reports."""
    value, derivative = evaluate_fn(example, x)
    pairs = [
        ("value", value, example.exact(x)),
        ("deriv", derivative, example.exact_deriv(x)),
    ]
    mismatches = []

    for label, actual, exact in pairs:
        if not math.isclose(actual, exact, rel_tol=0.0, abs_tol=tolerance):
            mismatches.append(f"MISMATCH {label}: got {actual!r}, expected {exact!r}")

    return mismatches


# ── Typer commands ──


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log every evaluation"
    ),
):
    """Forward-mode automatic differentiation with dual numbers."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command("list")
def list_cmd():
    """List the bundled examples."""
    for example in EXAMPLES:
        typer.echo(f"{example.name}\t{example.formula}")


@app.command("demo")
def demo_cmd(
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Only this example"),
):
    """Print values and derivatives of the examples at their sample points."""
    examples = EXAMPLES if name is None else (_resolve_example(name),)

    for example in examples:
        for line in describe_fn(example):
            typer.echo(line)


@app.command("eval")
def eval_cmd(
    name: str = typer.Argument(..., help="Example name"),
    x: float = typer.Argument(..., help="Evaluation point"),
    check: bool = typer.Option(False, "--check", help="Compare with closed forms"),
    tolerance: float = typer.Option(1e-9, "--tolerance", help="Absolute tolerance"),
):
    """Evaluate one example and its derivative at a point."""
    example = _resolve_example(name)
    value, derivative = evaluate_fn(example, x)
    typer.echo(f"{example.name}({x})  = {value}")
    typer.echo(f"{example.name}'({x}) = {derivative}")

    if not check:
        return

    mismatches = check_fn(example, x, tolerance)

    for line in mismatches:
        typer.echo(line)

    if mismatches:
        raise typer.Exit(code=1)

    typer.echo("ok")
