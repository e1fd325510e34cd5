# qgrid

Discretised quantum systems on one- and two-dimensional grids. A wave
function is sampled on a regular grid, and the kinetic, potential and
momentum operators are applied as finite-difference stencils.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Building blocks

- `qgrid.wave.WaveVector` – a mutable sequence of complex amplitudes.
  `+` and `-` work element by element, and the result is as long as the
  longer operand. Multiplying or dividing by a number scales every
  amplitude (`z / w` also divides every amplitude of `w` by `z`).
  Multiplying two vectors, or calling `dot()`, gives the inner product over
  their common length, conjugating the left operand. There are also
  `conj()`, `square_norm()`, `push(values)` and `at(i)`, which returns zero
  for an index off the grid.
- `qgrid.integrators.grid_integrate(vector, op, dv, *jumps)` – sums
  `conj(psi[k]) * op(neighbourhood, k)` over the grid and multiplies by
  `dv`. The `Neighbourhood` passed to `op` reads
  `vector[offset + k + sum(jump * c)]` through `at(offset, k, *cs)`, with
  zero off the grid.
- `qgrid.gridsystem.GridSystem` – the shared base: `mass`, `psi`,
  `potential`, `evolver` and `hbar`, with `norm()`, `normalize()`,
  `evolve(dt)` and `size()`. `ComplexResultError` is raised by
  expectation values whose imaginary part exceeds `MACHINE_PRECISION`.
- `qgrid.system1d.System1D` with `InitPack1D`, and
  `qgrid.system2d.System2D` with `InitPack2D`.

## One dimension

```python
import cmath

from qgrid.system1d import InitPack1D, System1D

samples = 100
dx = 1.0 / (samples + 1)

def gauss(x):
    return cmath.exp(-((x - 0.25) / 0.1) ** 2 / 2)

def harmonic(k):
    x = k / samples - 0.5
    return 0.5 * x * x

system = System1D(1.0, dx, harmonic, InitPack1D(gauss, samples))

print(system.norm())        # 1.0 after normalisation
print(system.energy())      # <psi|H|psi>
print(system.position())    # <x>
print(system.momentum())    # <p>
print(system.probability(0, samples // 2))
```

The potential is a callable taking a grid index. `InitPack1D.generate(dx)`
samples the function at `0, dx, 2 dx, ...`, while `System1D.x(i)` places
grid point `i` at `dx * (i + 1)`. The constructor normalises the initial
wave function, and `replace_wave(init)` swaps in a new one and normalises
it. `h_zero`, `apply_hamiltonian` and `apply_momentum` apply the operators
to any vector. `probability(beg, end)` sums the density over `[beg, end)`,
swapping the bounds if they are reversed and returning `0.0` when the range
starts past the grid; negative indices raise `ValueError`. A `System1D` can
be iterated and has a length.

## Two dimensions

```python
from qgrid.system2d import InitPack2D, System2D

system = System2D(1.0, 4.0, 4.0, lambda i, j: 0.0,
                  InitPack2D(lambda x, y: 1.0, 25, 25))
print(system.position())    # (<x>, <y>)
print(system.momentum())    # (<px>, <py>)
```

The wave function is a NumPy array of shape `(n, m)`, with `psi[i, j]` at
`(i dx, j dy)`. `h_zero_x`, `h_zero_y`, `px`, `py`, `potential_on_row` and
`potential_on_column` apply the operators to one line of the grid.
`energy()` sums the line contributions over all rows and columns; unlike
`norm()`, `position()` and `momentum()`, it is not multiplied by
`dx * dy`.

## Errors

- `energy()` and `momentum()` raise `ComplexResultError` when the result
  is not real to within machine precision.
- Assigning a value that is not positive to `dx` (or `dy`) raises
  `ValueError`.
- `normalize()` raises `ValueError` for a non-empty wave function of zero
  norm.
- `evolve(dt)` raises `RuntimeError` when no evolver is attached.

## What the package does not do

The package ships no time-evolution scheme and no ready-made potentials.
An evolver is any object with a method `evolve(system, dt)` returning the
new wave function; `system.evolve(dt)` stores whatever it returns. There
is no command-line program.