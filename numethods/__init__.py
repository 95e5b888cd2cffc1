"""Gauss-Jordan solving, matrix inversion, Lagrange and Newton interpolation, least-squares normal equations and Gauss-Seidel iteration."""

__version__ = "0.1.0"
__all__ = ["gauss_jordan", "inversion", "lagrange", "least_squares", "newton", "seidel"]