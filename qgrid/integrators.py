"""Simple quadrature of operators over a discretised wave function."""

from __future__ import annotations

from typing import Callable

from qgrid.wave import WaveVector


class Neighbourhood:
    """Access to the grid values around a point.

    ``jumps`` are the flat-index strides of each grid direction; a point
    displaced by ``k`` along the first direction and by ``cs`` along the
    others is read as ``vector[offset + k + sum(jump * c)]``.  Points off the
    grid read as zero.
    """

    def __init__(self, vector: WaveVector, *args: int) -> None:
        for jump in args:
            if isinstance(jump, bool) or not isinstance(jump, int):
                raise TypeError("grid jumps must be integers")
        self.vector = vector
        self.jumps: tuple[int, ...] = tuple(args)

    def at(self, offset: int, k: int, *args: int) -> complex:
        if len(args) != len(self.jumps):
            raise TypeError(
                f"expected {len(self.jumps)} displacement(s), got {len(args)}"
            )
        index = offset + k + sum(n * c for n, c in zip(self.jumps, args))
        return self.vector.at(index)


def grid_integrate(
    vector: WaveVector,
    op: Callable[[Neighbourhood, int], complex],
    dv: float,
    *args: int,
) -> complex:
    """Integrate ``conj(psi) * (op psi)`` over the grid with volume ``dv``."""
    neighbourhood = Neighbourhood(vector, *args)
    total = sum(
        (value.conjugate() * op(neighbourhood, k) for k, value in enumerate(vector)),
        0j,
    )
    return total * dv