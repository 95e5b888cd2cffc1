[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numethods"
version = "0.1.0"
description = "Classic numerical methods: Gauss-Jordan elimination, matrix inversion, Lagrange and Newton interpolation, least-squares normal equations and Gauss-Seidel iteration."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "numerical-methods",
    "gauss-jordan",
    "matrix-inversion",
    "interpolation",
    "lagrange",
    "newton",
    "divided-differences",
    "least-squares",
    "gauss-seidel",
    "linear-systems",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
numethods-gauss-jordan = "numethods.gauss_jordan:main"
numethods-inversion = "numethods.inversion:main"
numethods-lagrange = "numethods.lagrange:main"
numethods-newton = "numethods.newton:main"
numethods-least-squares = "numethods.least_squares:main"
numethods-seidel = "numethods.seidel:main"

[tool.hatch.build.targets.wheel]
packages = ["numethods"]

[tool.hatch.build.targets.sdist]
include = ["numethods", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 110
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
