"""Common behaviour of quantum systems discretised on a grid."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

import numpy as np

# Largest imaginary part tolerated in quantities that must be real.
MACHINE_PRECISION = 1e-9


class ComplexResultError(ArithmeticError):
    """Raised when an expectation value that must be real is not."""

    def __init__(self, value: complex, what: str = "result") -> None:
        super().__init__(f"{what} is not fully real: {value!r}")
        self.value = value


def _check_real(value: complex, what: str) -> float:
    if abs(value.imag) > MACHINE_PRECISION:
        raise ComplexResultError(value, what)
    return value.real


class GridSystem(ABC):
    """A particle of given mass whose wave function lives on a grid.

    ``potential`` is a callable taking grid indices and returning the
    potential there.  ``evolver`` is an object with a method
    ``evolve(system, dt)`` returning the wave function after ``dt``.
    """

    def __init__(
        self,
        mass: float,
        psi: Any,
        potential: Callable[..., float],
        evolver: Optional[Any] = None,
        hbar: float = 1.0,
    ) -> None:
        self.mass = mass
        self.psi = psi
        self.potential = potential
        self.evolver = evolver
        self.hbar = hbar

    @abstractmethod
    def norm(self) -> float:
        """Integral of the probability density over the grid."""

    @abstractmethod
    def energy(self) -> float:
        """Expectation value of the Hamiltonian."""

    def normalize(self) -> None:
        """Rescale the wave function so that its norm is one."""
        if self.size() == 0:
            return
        current = self.norm()
        if current <= 0:
            raise ValueError("cannot normalize a wave function of zero norm")
        self.psi = self.psi / math.sqrt(current)

    def _step(self, dt: float) -> Any:
        if self.evolver is None:
            raise RuntimeError("no evolver attached to the system")
        return self.evolver.evolve(self, dt)

    def evolve(self, dt: float) -> None:
        """Advance the wave function by ``dt`` using the attached evolver."""
        self.psi = self._step(dt)

    def size(self) -> int:
        """Number of grid points."""
        return int(np.size(self.psi))