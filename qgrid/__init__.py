"""Quantum wave functions on discrete 1D and 2D grids."""

__version__ = "0.1.0"
__all__ = ["wave", "integrators", "gridsystem", "system1d", "system2d"]