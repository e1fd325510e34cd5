"""A particle on a one-dimensional grid."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Callable, Optional

from qgrid.gridsystem import GridSystem, _check_real
from qgrid.wave import WaveVector


@dataclass
class InitPack1D:
    """Analytic initial wave function ``f`` sampled on ``n`` grid points."""

    f: Optional[Callable[[float], complex]] = None
    n: int = 0

    def __call__(self, x: float) -> complex:
        if self.f is None:
            raise ValueError("no wave function given")
        return complex(self.f(x))

    def generate(self, dx: float) -> WaveVector:
        """Sample ``f`` at ``0, dx, 2 dx, ...``."""
        return WaveVector(self(i * dx) for i in range(self.n))


class System1D(GridSystem):
    """A particle on a 1D grid of spacing ``dx``.

    Grid point ``i`` sits at ``x = dx * (i + 1)``, so that ``i = -1`` is the
    left boundary at ``x = 0``.
    """

    def __init__(
        self,
        mass: float,
        dx: float,
        potential: Callable[[int], float],
        init: Optional[InitPack1D] = None,
        evolver: Optional[Any] = None,
        hbar: float = 1.0,
    ) -> None:
        if init is None:
            init = InitPack1D()
        self._dx = dx
        super().__init__(mass, init.generate(dx), potential, evolver, hbar)
        self.normalize()

    @property
    def dx(self) -> float:
        return self._dx

    @dx.setter
    def dx(self, value: float) -> None:
        if value <= 0:
            raise ValueError("dx must be positive")
        self._dx = value

    # operators

    def h_zero(self, vector: Iterable[complex]) -> WaveVector:
        """Apply the kinetic term of the Hamiltonian to ``vector``."""
        v = WaveVector(vector)
        c = -((self.hbar / self._dx) ** 2) / (2 * self.mass)
        return WaveVector(
            c * (v.at(k - 1) - 2 * value + v.at(k + 1)) for k, value in enumerate(v)
        )

    def apply_hamiltonian(self, vector: Iterable[complex]) -> WaveVector:
        """Apply the full Hamiltonian, kinetic plus potential, to ``vector``."""
        v = WaveVector(vector)
        kinetic = self.h_zero(v)
        return WaveVector(
            t + self.potential(k) * value
            for k, (t, value) in enumerate(zip(kinetic, v))
        )

    def apply_momentum(self, vector: Iterable[complex]) -> WaveVector:
        """Apply the centred-difference momentum operator to ``vector``."""
        v = WaveVector(vector)
        c = -1j * self.hbar
        return WaveVector(c * (v.at(k + 1) - v.at(k - 1)) for k in range(len(v)))

    # integrals

    def norm(self) -> float:
        return self.psi.square_norm() * self._dx

    def energy(self) -> float:
        result = self.psi.dot(self.apply_hamiltonian(self.psi))
        return _check_real(result, "energy") * self._dx

    def position(self) -> float:
        """Expectation value of the position."""
        total = sum(
            self.x(i) * (z.real * z.real + z.imag * z.imag)
            for i, z in enumerate(self.psi)
        )
        return total * self._dx

    def momentum(self) -> float:
        """Expectation value of the momentum operator."""
        result = self.psi.dot(self.apply_momentum(self.psi))
        return _check_real(result, "momentum") * self._dx

    def probability(self, beg: int, end: int) -> float:
        """Probability of finding the particle on grid points ``[beg, end)``."""
        if beg < 0 or end < 0:
            raise ValueError("grid indices must not be negative")
        if end < beg:
            beg, end = end, beg
        if beg >= len(self.psi):
            return 0.0
        end = min(end, len(self.psi))
        return self.psi[beg:end].square_norm() * self._dx

    # evolution

    def evolve(self, dt: float) -> None:
        self.psi = WaveVector(self._step(dt))

    def replace_wave(self, init: InitPack1D) -> None:
        """Replace the wave function and normalize it."""
        self.psi = init.generate(self._dx)
        self.normalize()

    def x(self, i: int) -> float:
        return self._dx * (i + 1)

    def __iter__(self) -> Iterator[complex]:
        return iter(self.psi)

    def __len__(self) -> int:
        return len(self.psi)