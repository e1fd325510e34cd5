[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qgrid"
version = "0.1.0"
description = "Finite-difference quantum wave functions on 1D and 2D grids"
requires-python = ">=3.10"
keywords = ["quantum", "schrodinger", "wave function", "finite differences", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["qgrid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
