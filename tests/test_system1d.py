import cmath
import math

import numpy as np
import pytest

from qgrid.gridsystem import ComplexResultError
from qgrid.system1d import InitPack1D, System1D
from qgrid.wave import WaveVector

MASS = 1.0
DT = 0.017
L = 1.0
SAMPLES = 100
DX = L / (SAMPLES + 1)
X0 = L / 4
SIGMA = L / 10


def quadratic(x0, omega):
    def potential(k):
        x = k / SAMPLES - x0
        return 0.5 * MASS * omega * omega * x * x

    return potential


def gauss_with(k0):
    def gauss(x):
        return cmath.exp(1j * k0 * x - ((x - X0) / SIGMA) ** 2 / 2)

    return gauss


def gauss(x):
    return gauss_with(0.0)(x)


class CrankNicolson:
    """Crank-Nicolson stepper built from the system's Hamiltonian."""

    def evolve(self, system, dt):
        n = len(system)
        columns = [
            list(system.apply_hamiltonian(WaveVector(np.eye(n)[k]))) for k in range(n)
        ]
        h = np.array(columns, dtype=complex).T
        ident = np.eye(n)
        lhs = ident + 0.5j * dt * h / system.hbar
        rhs = (ident - 0.5j * dt * h / system.hbar) @ np.array(list(system.psi))
        return WaveVector(np.linalg.solve(lhs, rhs))


def make_system(potential=None, k0=0.0, evolver=None):
    if potential is None:
        potential = quadratic(L / 2, 1)
    return System1D(MASS, DX, potential, InitPack1D(gauss_with(k0), SAMPLES), evolver)


def test_init_pack_generate_samples_function():
    pack = InitPack1D(lambda x: x * 2, 4)
    assert pack.generate(0.5) == [0, 1, 2, 3]
    assert pack(1.5) == 3


def test_init_pack_without_function_raises():
    with pytest.raises(ValueError):
        InitPack1D(None, 3).generate(0.1)


def test_default_init_gives_empty_system():
    s = System1D(MASS, DX, lambda k: 0.0)
    assert len(s) == 0
    assert s.probability(0, 5) == 0.0


def test_constructed_system_is_normalized():
    s = make_system()
    assert len(s) == SAMPLES
    assert s.norm() == pytest.approx(1.0, abs=1e-12)


def test_position_of_gaussian():
    s = make_system()
    assert s.position() == pytest.approx(X0 + DX, abs=1e-4)


def test_x_mapping():
    s = make_system()
    assert s.x(-1) == 0.0
    assert s.x(0) == pytest.approx(DX)


def test_real_wave_has_zero_momentum():
    s = make_system()
    assert s.momentum() == pytest.approx(0.0, abs=1e-9)


def test_momentum_sign_follows_wave_number():
    forward = make_system(k0=2 * math.pi * 2 / L)
    backward = make_system(k0=-2 * math.pi * 2 / L)
    assert forward.momentum() > 0
    assert backward.momentum() == pytest.approx(-forward.momentum(), rel=1e-9)


def test_energy_free_particle_is_positive_and_below_harmonic():
    free = make_system(potential=lambda k: 0.0)
    harm = make_system()
    assert free.energy() > 0
    assert harm.energy() > free.energy()


def test_constant_potential_shifts_energy():
    free = make_system(potential=lambda k: 0.0)
    shifted = make_system(potential=lambda k: 3.0)
    assert shifted.energy() == pytest.approx(free.energy() + 3.0, rel=1e-9)


def test_complex_energy_raises():
    s = make_system(potential=lambda k: 1j)
    with pytest.raises(ComplexResultError):
        s.energy()


def test_h_zero_matches_hamiltonian_without_potential():
    s = make_system(potential=lambda k: 0.0)
    v = WaveVector([1, 2j, 3, 0.5])
    assert s.apply_hamiltonian(v) == s.h_zero(v)


def test_apply_momentum_of_constant_vector_only_edges():
    s = make_system()
    out = s.apply_momentum(WaveVector([1, 1, 1, 1]))
    assert out[1] == 0 and out[2] == 0
    assert out[0] == -out[3]


def test_probability_full_range_equals_norm():
    s = make_system()
    assert s.probability(0, SAMPLES) == pytest.approx(s.norm())
    assert s.probability(0, 10 * SAMPLES) == pytest.approx(s.norm())


def test_probability_swaps_and_splits():
    s = make_system()
    assert s.probability(40, 10) == pytest.approx(s.probability(10, 40))
    total = s.probability(0, 30) + s.probability(30, SAMPLES)
    assert total == pytest.approx(1.0)
    assert s.probability(SAMPLES, SAMPLES + 5) == 0.0


def test_probability_rejects_negative_indices():
    s = make_system()
    with pytest.raises(ValueError):
        s.probability(-1, 3)


def test_dx_setter_validates():
    s = make_system()
    with pytest.raises(ValueError):
        s.dx = 0
    with pytest.raises(ValueError):
        s.dx = -1.0
    s.dx = 0.5
    assert s.dx == 0.5


def test_replace_wave_normalizes():
    s = make_system()
    s.replace_wave(InitPack1D(lambda x: 5.0, 10))
    assert len(s) == 10
    assert s.norm() == pytest.approx(1.0)
    assert list(s) == list(s.psi)


def test_evolve_without_evolver_raises():
    s = make_system()
    with pytest.raises(RuntimeError):
        s.evolve(DT)


def test_crank_nicolson_conserves_norm_and_energy():
    s = make_system(evolver=CrankNicolson())
    e0 = s.energy()
    for _ in range(40):
        s.evolve(DT)
    assert isinstance(s.psi, WaveVector)
    assert s.norm() == pytest.approx(1.0, abs=1e-9)
    assert s.energy() == pytest.approx(e0, rel=1e-8)