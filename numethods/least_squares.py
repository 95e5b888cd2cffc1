"""Build the normal equations of a least-squares polynomial fit."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from .gauss_jordan import _open_input

SUPPORTED_DEGREES = (2, 3)
MAX_POINTS = 50


def normal_equations(xs: Sequence[float], ys: Sequence[float], degree: int) -> list[list[float]]:
    """Return the augmented normal-equation rows for a fit of degree 2 or 3.

    The first entry of the first row is the number of points, as an int.
    """
    if degree not in SUPPORTED_DEGREES:
        raise ValueError(f"degree must be one of {SUPPORTED_DEGREES}")
    xs = [float(v) for v in xs]
    ys = [float(v) for v in ys]
    if len(xs) != len(ys):
        raise ValueError("xs and ys must have the same length")

    power_sums: list[float] = [len(xs)]
    power_sums += [sum(x**k for x in xs) for k in range(1, 2 * degree + 1)]
    moment_sums = [sum(ys)] + [sum((x**k) * y for x, y in zip(xs, ys)) for k in range(1, degree + 1)]
    return [
        [power_sums[row + col] for col in range(degree + 1)] + [moment_sums[row]]
        for row in range(degree + 1)
    ]


def format_system(rows: Iterable[Sequence[float]]) -> str:
    """Render normal-equation rows as tab-separated lines."""

    def fmt(value: float) -> str:
        return str(value) if isinstance(value, int) else f"{value:f}"

    return "".join("\t" + "\t".join(fmt(v) for v in row) + "\n" for row in rows)


def main(argv: Sequence[str] | None = None) -> int:
    """Read data points from standard input and print the normal equations."""
    inp = _open_input(argv, "least-squares", "Normal equations of a least-squares fit.")
    print("\n\tPrograma de Minimos Cuadrados", end="")
    try:
        n = inp.read(int, "\n\tProporciona el numero de datos: ")
        if not 0 <= n <= MAX_POINTS:
            print(f"\nError: el numero de datos debe estar entre 0 y {MAX_POINTS}.")
            return 1
        degree = inp.read(int, "\n\tProporciona el Grado del Polinomio: ")
        xs = [inp.read(float, f"\n\tX({i + 1})= ") for i in range(n)]
        ys = [inp.read(float, f"\n\tY({i + 1})= ") for i in range(n)]
    except (EOFError, ValueError) as exc:
        print(f"\nError: {exc}")
        return 1

    if degree in SUPPORTED_DEGREES:
        print(format_system(normal_equations(xs, ys, degree)), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())