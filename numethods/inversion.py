"""Invert a square matrix by the Gauss-Jordan exchange method, without pivoting."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from .gauss_jordan import SingularMatrixError, _open_input, _read_rows

MAX_DIM = 50


def _exchange(a: list[list[float]], i: int) -> list[list[float]]:
    """Perform one exchange step on pivot (i, i)."""
    pivot = a[i][i]

    def entry(x: int, y: int) -> float:
        if x == i and y == i:
            return 1.0 / pivot
        if x == i:
            return a[i][y] / pivot
        if y == i:
            return -a[x][i] / pivot
        return a[x][y] - (a[i][y] * a[x][i]) / pivot

    return [[entry(x, y) for y in range(len(a))] for x in range(len(a))]


def invert(matrix: Iterable[Sequence[float]]) -> list[list[float]]:
    """Return the inverse of a square matrix; a zero pivot on the diagonal is an error."""
    a = [[float(v) for v in row] for row in matrix]
    if not 1 <= len(a) <= MAX_DIM:
        raise ValueError(f"dimension must be between 1 and {MAX_DIM}")
    if any(len(row) != len(a) for row in a):
        raise ValueError("matrix must be square")
    for i in range(len(a)):
        if a[i][i] == 0.0:
            raise SingularMatrixError("the matrix is singular or cannot be inverted with this method")
        a = _exchange(a, i)
    return a


def format_matrix(matrix: Iterable[Sequence[float]]) -> str:
    """Render a matrix as indented rows of fixed-width numbers."""
    return "".join("  " + "".join(f"{value:9.4f} " for value in row) + "\n" for row in matrix)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a matrix from standard input and print its inverse."""
    inp = _open_input(argv, "inversion", "Invert an NxN matrix by the Gauss-Jordan method.")
    print("\n--- INVERSA DE UNA MATRIZ NxN (METODO GAUSS-JORDAN) ---\n")
    try:
        n = inp.read(int, f"Cual es la dimension de la Matriz? (max {MAX_DIM}): ")
    except (EOFError, ValueError):
        n = 0
    if not 1 <= n <= MAX_DIM:
        print(f"Error: La dimension debe ser un numero entre 1 y {MAX_DIM}.")
        return 1

    print("\nIntroduce los elementos de la matriz:")
    try:
        matrix = _read_rows(inp, n, n, lambda i, j: f"  Elemento A[{i + 1}][{j + 1}]: ")
    except (EOFError, ValueError) as exc:
        print(f"\nError: entrada no valida ({exc}).")
        return 1

    try:
        inverse = invert(matrix)
    except SingularMatrixError:
        print("\nERROR: La matriz es singular o no se puede invertir con este metodo.")
        print("El calculo se ha detenido.")
        return 0

    print("\n\n--- Matriz Inversa Resultante ---")
    print(format_matrix(inverse), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())