"""Lagrange polynomial interpolation."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable, Sequence

from .gauss_jordan import _Input, _open_input

MAX_POINTS = 100
MIN_POINTS = 2


def interpolate(points: Iterable[tuple[float, float]], x: float) -> float:
    """Evaluate at x the Lagrange polynomial through the given (x, y) points."""
    pts = [(float(px), float(py)) for px, py in points]
    if not MIN_POINTS <= len(pts) <= MAX_POINTS:
        raise ValueError(f"number of points must be between {MIN_POINTS} and {MAX_POINTS}")
    if len({px for px, _ in pts}) != len(pts):
        raise ValueError("interpolation nodes must have distinct x values")
    total = 0.0
    for i, (xi, yi) in enumerate(pts):
        others = [xj for j, (xj, _) in enumerate(pts) if j != i]
        total += math.prod(x - xj for xj in others) / math.prod(xi - xj for xj in others) * yi
    return total


def relative_error(real: float, approx: float) -> float:
    """Return the absolute relative error in percent; with a zero real value, the scaled absolute error."""
    if real != 0:
        return math.fabs(((real - approx) / real) * 100)
    return math.fabs((real - approx) * 100)


def _session(inp: _Input) -> int:
    n = inp.read(int, "\n¿Cuántos puntos vas a introducir?: ")
    while not MIN_POINTS <= n <= MAX_POINTS:
        n = inp.read(int, f"Por favor, introduce un número de puntos entre {MIN_POINTS} y {MAX_POINTS}: ")

    print(f"\nTeclea las {n} parejas de puntos (x y) separadas por un espacio:")
    points = [(inp.read(), inp.read()) for _ in range(n)]

    print("\nEsta es la tabla de datos que has tecleado:\n")
    print("\t   x\t\t   y")
    print("\t--------------------------")
    for px, py in points:
        print(f"\t{px:f}\t{py:f}")

    a = inp.read(float, '\n¿En qué punto "x" vas a aproximar con el polinomio?: ')
    real = inp.read(float, "¿Cuál es el valor real de f(x) en ese punto? (para calcular el error): ")
    value = interpolate(points, a)

    print("\n------------------------------------------------------")
    print(f"El valor obtenido en la interpolación para {a:0.4f} es: {value:f}")
    print(f"El porcentaje de error relativo es: {relative_error(real, value):f} %")
    print("------------------------------------------------------\n")

    option = inp.read(
        int,
        "Para ejecutar de nuevo el programa presiona 1, para terminar presiona cualquier otro número: ",
    )
    print()
    return option


def main(argv: Sequence[str] | None = None) -> int:
    """Interactively interpolate points read from standard input."""
    inp = _open_input(argv, "lagrange", "Lagrange polynomial interpolation.")
    try:
        while _session(inp) == 1:
            pass
    except (EOFError, ValueError) as exc:
        print(f"\nError: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())