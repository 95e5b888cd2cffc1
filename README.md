# numethods

A small collection of classic numerical methods. You can use it as a Python
library or as a set of interactive command-line tools. It needs only the
Python standard library, version 3.10 or later.

## Methods

| Module | What it does |
| --- | --- |
| `numethods.gauss_jordan` | Solves a linear system from its augmented matrix by Gauss-Jordan elimination with partial pivoting (up to 25 unknowns) |
| `numethods.inversion` | Inverts a square matrix by exchange steps on the diagonal, without row swaps (up to 50×50) |
| `numethods.lagrange` | Lagrange polynomial interpolation (2 to 100 points), plus a percentage relative error |
| `numethods.newton` | Newton divided-difference interpolation |
| `numethods.least_squares` | Builds the augmented normal equations of a degree-2 or degree-3 least-squares fit |
| `numethods.seidel` | Gauss-Seidel iteration for a linear system (up to 10 equations) |

## Installation

```
pip install .
```

To install the test suite's requirements and run the tests:

```
pip install .[test]
pytest
```

## Library use

```python
from numethods import gauss_jordan, inversion, lagrange, least_squares, newton, seidel

# Linear system from an augmented matrix [A | b]
solution = gauss_jordan.solve([[2, 1, 5], [1, 3, 10]])       # [1.0, 3.0]

# Inverse of a square matrix
inverse = inversion.invert([[4, 7], [2, 6]])
print(inversion.format_matrix(inverse))

# Lagrange interpolation through (x, y) points
value = lagrange.interpolate([(1, 1), (2, 4), (3, 9)], 2.5)
error = lagrange.relative_error(6.25, value)                  # percent

# Newton divided differences
coefficients = newton.divided_differences([1, 2, 3], [1, 4, 9])
value = newton.interpolate([1, 2, 3], [1, 4, 9], 2.5)

# Normal equations for a least-squares polynomial of degree 2 or 3
rows = least_squares.normal_equations([1, 2, 3, 4], [2, 5, 10, 17], 2)
print(least_squares.format_system(rows), end="")

# Gauss-Seidel iteration
result = seidel.solve([[4, 1, 9], [2, 5, 12]], 0.01, 100)
print(result.solution, result.iterations, result.converged)
```

### Behaviour worth knowing

- `gauss_jordan.solve(augmented)` takes `n` rows of `n + 1` numbers and
  returns the `n` unknowns. A pivot whose absolute value is below `1e-9`
  raises `gauss_jordan.SingularMatrixError`, which is a `ValueError`. A wrong
  shape or size raises `ValueError`.
- `inversion.invert(matrix)` pivots on each diagonal entry in turn and never
  swaps rows. A zero on the diagonal at any step raises
  `gauss_jordan.SingularMatrixError`, even for some invertible matrices such
  as `[[0, 1], [1, 0]]`. `inversion.format_matrix(matrix)` renders each row
  indented, with every value printed as `%9.4f`.
- `lagrange.interpolate(points, x)` and `newton.interpolate(xs, ys, x)` raise
  `ValueError` when two nodes share an x value. `lagrange.interpolate` also
  raises it when fewer than 2 or more than 100 points are given.
  `newton.divided_differences(xs, ys)` returns the coefficients
  `f[x0], f[x0,x1], …, f[x0..xn]`.
- `lagrange.relative_error(real, approx)` returns
  `|(real - approx) / real| · 100`. When `real` is zero it returns
  `|real - approx| · 100`.
- `least_squares.normal_equations(xs, ys, degree)` accepts only degrees 2
  and 3. It returns `degree + 1` rows, each holding the power sums followed by
  the right-hand side. The first entry is the number of points, as an `int`.
  `least_squares.format_system(rows)` renders the rows tab-separated.
- `seidel.solve(augmented, tolerance=0.01, max_iterations=100)` starts from
  zero. It stops when the largest change in one sweep falls below
  `tolerance`. A zero on the diagonal raises `ValueError`. The result is a
  `seidel.SeidelResult` with `solution`, `iterations` and `converged`.
  `converged` is `False` when the run went past `max_iterations` sweeps.
  Convergence is not checked beforehand: the matrix is not tested for
  diagonal dominance.

## Command-line tools

Each method has an interactive command. It asks for its input on standard
input, reading whitespace-separated values, and prints the result. The
prompts and messages are in Spanish.

```
numethods-gauss-jordan
numethods-inversion
numethods-lagrange
numethods-newton
numethods-least-squares
numethods-seidel
```

`numethods-lagrange` asks at the end whether to run again. Entering `1`
starts a new round.

Each module can also be run with `python -m`, for example
`python -m numethods.seidel`.

## What it does not do

- `least_squares` builds the normal equations but does not solve them. To get
  the fit coefficients, pass the rows to `gauss_jordan.solve`.
- `numethods-least-squares` prints nothing for a degree other than 2 or 3.
  It accepts at most 50 data points.
- None of the tools read from files or save results. All input comes from
  standard input, and all output goes to standard output.