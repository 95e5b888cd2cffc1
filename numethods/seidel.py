"""Solve linear systems by Gauss-Seidel iteration."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .gauss_jordan import _augmented_rows, _open_input, _read_rows

TOLERANCE = 0.01
MAX_EQUATIONS = 10
MAX_ITERATIONS = 100


@dataclass(frozen=True)
class SeidelResult:
    """Outcome of a Gauss-Seidel run."""

    solution: list[float]
    iterations: int
    converged: bool


def _zero_diagonal(rows: Sequence[Sequence[float]]) -> int | None:
    return next((i for i, row in enumerate(rows) if row[i] == 0.0), None)


def solve(
    augmented: Iterable[Sequence[float]],
    tolerance: float = TOLERANCE,
    max_iterations: int = MAX_ITERATIONS,
) -> SeidelResult:
    """Iterate from a zero start until the largest update falls below tolerance."""
    rows = _augmented_rows(augmented, MAX_EQUATIONS, "equations")
    n = len(rows)
    zero = _zero_diagonal(rows)
    if zero is not None:
        raise ValueError(f"diagonal element a[{zero}][{zero}] is zero")

    x = [0.0] * n
    iterations = 0
    while True:
        max_error = 0.0
        for i, row in enumerate(rows):
            off_diagonal = sum(a * xj for j, (a, xj) in enumerate(zip(row, x)) if j != i)
            updated = (row[n] - off_diagonal) / row[i]
            max_error = max(max_error, abs(x[i] - updated))
            x[i] = updated
        iterations += 1
        if iterations > max_iterations:
            return SeidelResult(solution=x, iterations=iterations, converged=False)
        if max_error < tolerance:
            return SeidelResult(solution=x, iterations=iterations, converged=True)


def main(argv: Sequence[str] | None = None) -> int:
    """Read an augmented matrix from standard input and print the iterated solution."""
    inp = _open_input(argv, "seidel", "Solve a linear system by Gauss-Seidel iteration.")
    try:
        n = inp.read(int, f"Introduce el numero de ecuaciones (max {MAX_EQUATIONS}): ")
    except (EOFError, ValueError):
        n = 0
    if not 1 <= n <= MAX_EQUATIONS:
        print("Numero de ecuaciones no valido.")
        return 1

    print("Introduce los coeficientes de la matriz aumentada:")
    try:
        matrix = _read_rows(inp, n, n + 1, lambda i, j: f"a[{i}][{j}] = ")
    except (EOFError, ValueError) as exc:
        print(f"\nError: entrada no valida ({exc}).")
        return 1

    zero = _zero_diagonal(matrix)
    if zero is not None:
        print(f"Error: El elemento a[{zero}][{zero}] de la diagonal es cero. El metodo no puede continuar.")
        return 1

    result = solve(matrix)
    if not result.converged:
        print(f"\nADVERTENCIA: El metodo no converge despues de {MAX_ITERATIONS} iteraciones.")
        print("La solucion podria no ser precisa.")

    print("\n\nLa solucion final es:")
    for i, value in enumerate(result.solution):
        print(f"x[{i}] = {value:f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())