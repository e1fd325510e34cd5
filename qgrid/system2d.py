"""A particle on a two-dimensional grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

import numpy as np

from qgrid.gridsystem import GridSystem, _check_real


@dataclass
class InitPack2D:
    """Analytic initial wave function ``f(x, y)`` sampled on an ``n`` by ``m`` grid."""

    f: Optional[Callable[[float, float], complex]] = None
    n: int = 0
    m: int = 0

    def __call__(self, x: float, y: float) -> complex:
        if self.f is None:
            raise ValueError("no wave function given")
        return complex(self.f(x, y))

    def generate(self, dx: float, dy: float) -> np.ndarray:
        """Sample ``f`` at ``(i dx, j dy)``; the result has shape ``(n, m)``."""
        values = [[self(i * dx, j * dy) for j in range(self.m)] for i in range(self.n)]
        return np.array(values, dtype=complex).reshape(self.n, self.m)


def _laplace(vector: np.ndarray) -> np.ndarray:
    out = -2.0 * vector
    out[1:] += vector[:-1]
    out[:-1] += vector[1:]
    return out


def _difference(vector: np.ndarray) -> np.ndarray:
    out = np.zeros_like(vector)
    out[:-1] += vector[1:]
    out[1:] -= vector[:-1]
    return out


class System2D(GridSystem):
    """A particle on a 2D grid; ``psi[i, j]`` sits at ``(i dx, j dy)``.

    A row ``psi[i, :]`` runs along ``y`` at fixed ``i``; a column
    ``psi[:, j]`` runs along ``x`` at fixed ``j``.
    """

    def __init__(
        self,
        mass: float,
        dx: float,
        dy: float,
        potential: Callable[[int, int], float],
        init: Optional[InitPack2D] = None,
        evolver: Optional[Any] = None,
        hbar: float = 1.0,
    ) -> None:
        if init is None:
            init = InitPack2D()
        self._dx = dx
        self._dy = dy
        super().__init__(mass, init.generate(dx, dy), potential, evolver, hbar)
        self.normalize()

    @property
    def dx(self) -> float:
        return self._dx

    @dx.setter
    def dx(self, value: float) -> None:
        if value <= 0:
            raise ValueError("dx must be positive")
        self._dx = value

    @property
    def dy(self) -> float:
        return self._dy

    @dy.setter
    def dy(self, value: float) -> None:
        if value <= 0:
            raise ValueError("dy must be positive")
        self._dy = value

    @property
    def n(self) -> int:
        """Number of grid points along x."""
        return self.psi.shape[0]

    @property
    def m(self) -> int:
        """Number of grid points along y."""
        return self.psi.shape[1]

    # operators on grid lines

    def h_zero_x(self, vector) -> np.ndarray:
        """Kinetic term along x applied to a line of the grid."""
        v = np.asarray(vector, dtype=complex)
        return -((self.hbar / self._dx) ** 2) / (2 * self.mass) * _laplace(v)

    def h_zero_y(self, vector) -> np.ndarray:
        """Kinetic term along y applied to a line of the grid."""
        v = np.asarray(vector, dtype=complex)
        return -((self.hbar / self._dy) ** 2) / (2 * self.mass) * _laplace(v)

    def px(self, vector) -> np.ndarray:
        """Centred-difference momentum along x applied to a line."""
        v = np.asarray(vector, dtype=complex)
        return (-1j * self.hbar / (2.0 * self._dx)) * _difference(v)

    def py(self, vector) -> np.ndarray:
        """Centred-difference momentum along y applied to a line."""
        v = np.asarray(vector, dtype=complex)
        return (-1j * self.hbar / (2.0 * self._dy)) * _difference(v)

    def potential_on_row(self, i: int, vector) -> np.ndarray:
        """Multiply ``vector`` by the potential along row ``i``."""
        v = np.asarray(vector, dtype=complex)
        return np.array([self.potential(i, k) for k in range(len(v))], dtype=complex) * v

    def potential_on_column(self, j: int, vector) -> np.ndarray:
        """Multiply ``vector`` by the potential along column ``j``."""
        v = np.asarray(vector, dtype=complex)
        return np.array([self.potential(k, j) for k in range(len(v))], dtype=complex) * v

    # integrals

    def norm(self) -> float:
        return float(np.sum(np.abs(self.psi) ** 2)) * self._dx * self._dy

    def energy(self) -> float:
        total = 0j
        for i, row in enumerate(self.psi):
            total += np.vdot(row, self.h_zero_y(row))
            total += np.vdot(row, self.potential_on_row(i, row))
        for j in range(self.m):
            column = self.psi[:, j]
            total += np.vdot(column, self.h_zero_x(column))
            total += np.vdot(column, self.potential_on_column(j, column))
        return _check_real(complex(total), "energy")

    def position(self) -> tuple[float, float]:
        """Expectation values of ``x`` and ``y``."""
        density = np.abs(self.psi) ** 2
        xs = np.arange(self.n) * self._dx
        ys = np.arange(self.m) * self._dy
        area = self._dx * self._dy
        return (
            float(np.sum(density.sum(axis=1) * xs)) * area,
            float(np.sum(density.sum(axis=0) * ys)) * area,
        )

    def momentum(self) -> tuple[float, float]:
        """Expectation values of the momentum along ``x`` and ``y``."""
        px = sum((np.vdot(self.psi[:, j], self.px(self.psi[:, j])) for j in range(self.m)), 0j)
        py = sum((np.vdot(row, self.py(row)) for row in self.psi), 0j)
        area = self._dx * self._dy
        px = complex(px) * area
        py = complex(py) * area
        return _check_real(px, "momentum"), _check_real(py, "momentum")

    # evolution

    def evolve(self, dt: float) -> None:
        self.psi = np.asarray(self._step(dt), dtype=complex)

    def x(self, i: int) -> float:
        return i * self._dx

    def y(self, j: int) -> float:
        return j * self._dy