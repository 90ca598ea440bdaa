"""Real roots of the equation a*x**2 + b*x + c = 0."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from enum import Enum


class SolutionKind(Enum):
    """What kind of solution set an equation has."""

    INFINITE = "infinite"
    NONE = "none"
    NO_REAL = "no_real"
    ONE = "one"
    TWO = "two"


def _fmt(value: float) -> str:
    return f"{value:g}"


@dataclass(frozen=True)
class QuadraticSolution:
    """The solution set of a quadratic (or degenerate linear) equation."""

    kind: SolutionKind
    roots: tuple[float, ...] = ()

    def describe(self) -> str:
        """Return the human-readable description of the solution."""
        if self.kind is SolutionKind.INFINITE:
            return "Infinite solutions"
        if self.kind is SolutionKind.NONE:
            return "No solutions"
        if self.kind is SolutionKind.NO_REAL:
            return "No real solutions"
        if self.kind is SolutionKind.ONE:
            return f"x = {_fmt(self.roots[0])}"
        x1, x2 = self.roots
        return f"x1 = {_fmt(x1)}, x2 = {_fmt(x2)}"


def solve_quadratic(a: float, b: float, c: float) -> QuadraticSolution:
    """Solve a*x**2 + b*x + c = 0 over the reals."""
    a, b, c = float(a), float(b), float(c)
    if a == 0:
        if b == 0:
            return QuadraticSolution(SolutionKind.INFINITE if c == 0 else SolutionKind.NONE)
        return QuadraticSolution(SolutionKind.ONE, (-c / b,))
    discriminant = b * b - 4 * a * c
    if discriminant < 0:
        return QuadraticSolution(SolutionKind.NO_REAL)
    if discriminant == 0:
        return QuadraticSolution(SolutionKind.ONE, (-b / (2 * a),))
    root = math.sqrt(discriminant)
    return QuadraticSolution(
        SolutionKind.TWO, ((-b + root) / (2 * a), (-b - root) / (2 * a))
    )


def main(argv: list[str] | None = None) -> int:
    """Solve an equation whose coefficients come from argv or standard input."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        if len(args) != 3:
            print("Usage: quadratic a b c", file=sys.stderr)
            return 1
        tokens = args
    else:
        print("Enter coefficients a, b, c: ", end="", flush=True)
        tokens = sys.stdin.read().split()
        if len(tokens) < 3:
            print("Error: three coefficients are required.", file=sys.stderr)
            return 1
    try:
        a, b, c = (float(token) for token in tokens[:3])
    except ValueError:
        print("Error: coefficients must be numbers.", file=sys.stderr)
        return 1
    print(solve_quadratic(a, b, c).describe())
    return 0


if __name__ == "__main__":
    sys.exit(main())