"""Solving quadratic equations."""

from __future__ import annotations

import cmath
import math
import sys
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class QuadraticSolution:
    """Roots of ``a*x^2 + b*x + c = 0``; complex roots when ``delta < 0``."""

    a: float
    b: float
    c: float
    delta: float
    roots: tuple


def normalize_unicode_dashes(text: str) -> str:
    """Replace en and em dashes with an ASCII minus sign."""
    return text.replace("\u2013", "-").replace("\u2014", "-")


def solve_quadratic(a: float, b: float, c: float) -> QuadraticSolution:
    if a == 0:
        raise ValueError("Coefficient 'a' cannot be zero in a quadratic equation.")
    delta = b * b - 4 * a * c
    if delta > 0:
        root = math.sqrt(delta)
        roots: tuple = ((-b + root) / (2 * a), (-b - root) / (2 * a))
    elif delta == 0:
        roots = (-b / (2 * a),)
    else:
        real = -b / (2 * a)
        imag = math.sqrt(-delta) / (2 * a)
        roots = (complex(real, imag), complex(real, -imag))
    return QuadraticSolution(a, b, c, delta, roots)


def _fmt(value: float) -> str:
    return f"{value:g}"


def _describe(solution: QuadraticSolution) -> str:
    roots = solution.roots
    if solution.delta > 0:
        return f"Two distinct real roots: x1 = {_fmt(roots[0])}, x2 = {_fmt(roots[1])}"
    if solution.delta == 0:
        return f"One real root (double root): x = {_fmt(roots[0])}"
    real, imag = roots[0].real, roots[0].imag
    return (
        f"Two complex roots: x1 = {_fmt(real)} + {_fmt(imag)}i, "
        f"x2 = {_fmt(real)} - {_fmt(imag)}i"
    )


def handle_solve_quadratic(args: Sequence[str]) -> None:
    """Run ``solve_quadratic <a> <b> <c>``."""
    if len(args) != 3:
        print("Usage: solve_quadratic <a> <b> <c>")
        return
    try:
        a, b, c = (float(normalize_unicode_dashes(arg)) for arg in args)
    except ValueError:
        print("Invalid input. Please enter numeric coefficients.", file=sys.stderr)
        return
    try:
        solution = solve_quadratic(a, b, c)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return
    print(f"Solving: {_fmt(a)}x^2 + {_fmt(b)}x + {_fmt(c)} = 0")
    print(_describe(solution))


__all__ = [
    "QuadraticSolution",
    "normalize_unicode_dashes",
    "solve_quadratic",
    "handle_solve_quadratic",
    "cmath",
]