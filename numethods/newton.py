"""Newton divided-difference polynomial interpolation."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .gauss_jordan import _open_input


def divided_differences(xs: Sequence[float], ys: Sequence[float]) -> list[float]:
    """Return the Newton coefficients f[x0], f[x0,x1], ..., f[x0..xn]."""
    xs = [float(v) for v in xs]
    column = [float(v) for v in ys]
    if len(xs) != len(column):
        raise ValueError("xs and ys must have the same length")
    if not xs:
        raise ValueError("at least one point is required")
    if len(set(xs)) != len(xs):
        raise ValueError("interpolation nodes must have distinct x values")

    coefficients = [column[0]]
    for order in range(1, len(xs)):
        column = [
            (upper - lower) / (xs[i + order] - xs[i])
            for i, (lower, upper) in enumerate(zip(column, column[1:]))
        ]
        coefficients.append(column[0])
    return coefficients


def interpolate(xs: Sequence[float], ys: Sequence[float], x: float) -> float:
    """Evaluate at x the Newton interpolating polynomial through (xs, ys)."""
    coefficients = divided_differences(xs, ys)
    value = coefficients[0]
    product = 1.0
    for coefficient, node in zip(coefficients[1:], xs):
        product *= x - node
        value += coefficient * product
    return value


def main(argv: Sequence[str] | None = None) -> int:
    """Read a polynomial's points from standard input and print the interpolated value."""
    inp = _open_input(argv, "newton", "Newton divided-difference interpolation.")
    try:
        degree = inp.read(int, "Cual es el grado del polinomio: ")
        if degree < 0:
            print("Error: El grado del polinomio no puede ser negativo.")
            return 1
        print("\nIngresa los valores de los puntos que componen al polinomio (x y):")
        print(f"Debes ingresar {degree + 1} pares de (x, y).")
        points = [(inp.read(float, f"Punto {i + 1} (x y): "), inp.read()) for i in range(degree + 1)]
        x = inp.read(float, "\nIngrese el valor de x que desea interpolar: ")
        xs, ys = zip(*points)
        result = interpolate(xs, ys, x)
    except (EOFError, ValueError) as exc:
        print(f"\nError: {exc}")
        return 1

    print(f"\nEl resultado de la interpolacion es: {result:f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())