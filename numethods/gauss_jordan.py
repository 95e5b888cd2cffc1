"""Solve linear systems by Gauss-Jordan elimination with partial pivoting."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Sequence

MAX_SIZE = 25
SINGULAR_EPS = 1e-9


class SingularMatrixError(ValueError):
    """Raised when a system has no unique solution."""


def _augmented_rows(augmented: Iterable[Sequence[float]], limit: int, what: str) -> list[list[float]]:
    """Copy an augmented matrix of n rows and n+1 columns, checking its shape."""
    rows = [[float(v) for v in row] for row in augmented]
    if not 1 <= len(rows) <= limit:
        raise ValueError(f"number of {what} must be between 1 and {limit}")
    if any(len(row) != len(rows) + 1 for row in rows):
        raise ValueError("each row of the augmented matrix needs n + 1 entries")
    return rows


def solve(augmented: Iterable[Sequence[float]]) -> list[float]:
    """Return the solution of the system given by an augmented matrix."""
    rows = _augmented_rows(augmented, MAX_SIZE, "unknowns")
    n = len(rows)
    for k in range(n):
        pivot_row = max(range(k, n), key=lambda i: abs(rows[i][k]))
        rows[k], rows[pivot_row] = rows[pivot_row], rows[k]
        pivot = rows[k][k]
        if abs(pivot) < SINGULAR_EPS:
            raise SingularMatrixError("the system has no unique solution (singular matrix)")
        rows[k] = [v / pivot for v in rows[k]]
        rows = [
            row if i == k else [a - row[k] * b for a, b in zip(row, rows[k])]
            for i, row in enumerate(rows)
        ]
    return [row[n] for row in rows]


class _Input:
    """Whitespace-separated values read one at a time from a text stream."""

    def __init__(self, stream: Iterable[str]) -> None:
        self._tokens = (token for line in stream for token in line.split())

    def read(self, kind: Callable = float, prompt: str = ""):
        if prompt:
            print(prompt, end="", flush=True)
        try:
            return kind(next(self._tokens))
        except StopIteration:
            raise EOFError("unexpected end of input") from None


def _open_input(argv: Sequence[str] | None, prog: str, description: str) -> _Input:
    argparse.ArgumentParser(prog=prog, description=description).parse_args(argv)
    return _Input(sys.stdin)


def _read_rows(inp: _Input, n: int, width: int, label: Callable[[int, int], str]) -> list[list[float]]:
    return [[inp.read(float, label(i, j)) for j in range(width)] for i in range(n)]


def main(argv: Sequence[str] | None = None) -> int:
    """Read an augmented matrix from standard input and print the solution."""
    inp = _open_input(argv, "gauss-jordan", "Solve a linear system by Gauss-Jordan elimination.")
    print("\n MÉTODO DE GAUSS-JORDAN")
    print("-------------------------")
    try:
        n = inp.read(int, "Ingrese el número de incógnitas (ecuaciones): ")
    except (EOFError, ValueError):
        n = 0
    if not 1 <= n <= MAX_SIZE:
        print(f"El número de incógnitas debe estar entre 1 y {MAX_SIZE}.")
        return 1

    def label(i: int, j: int) -> str:
        head = f"\nFila {i + 1}:\n" if j == 0 else ""
        return head + (f"  Coeficiente de x{j + 1}: " if j < n else "  Término independiente: ")

    print("\nIngrese los coeficientes de la matriz aumentada:")
    try:
        matrix = _read_rows(inp, n, n + 1, label)
    except (EOFError, ValueError) as exc:
        print(f"\nError: entrada no válida ({exc}).")
        return 1

    try:
        solution = solve(matrix)
    except SingularMatrixError:
        print("\nError: El sistema no tiene solución única (matriz singular).")
        return 0

    print("\n\nSOLUCIÓN DEL SISTEMA")
    print("---------------------")
    for i, value in enumerate(solution, start=1):
        print(f"X({i}) = {value:0.4f}")
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())