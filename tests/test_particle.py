import numpy as np
import pytest
from particle_sim.species import Species
from particle_sim.types import Particle
from particle_sim.util import norm

R = 250.0


def test_inelastic_wall():
    """Crossing the boundary clamps onto the sphere and zeroes velocity."""
    p = Particle(Species.PROTON, position=(240.0, 0.0, 0.0), velocity=(20.0, 0.0, 0.0))
    hit = p.update_position(R)

    assert hit
    np.testing.assert_allclose(p.position, [R, 0.0, 0.0])
    np.testing.assert_array_equal(p.velocity, np.zeros(3))


def test_free_motion_inside_bound():
    p = Particle(Species.ELECTRON, position=(0.0, 0.0, 0.0), velocity=(1.0, 0.0, 0.0))
    p.acceleration = np.array([0.0, 0.5, 0.0])
    hit = p.update_position(R)

    assert not hit
    np.testing.assert_allclose(p.velocity, [1.0, 0.5, 0.0])
    np.testing.assert_allclose(p.position, [1.0, 0.5, 0.0])


def test_boundary_invariant_random():
    """|position| <= R after every update, whatever the starting state."""
    rng = np.random.default_rng(12345)
    for _ in range(200):
        p = Particle(
            Species.PROTON,
            position=rng.uniform(-140, 140, size=3),
            velocity=rng.normal(scale=80.0, size=3),
        )
        p.acceleration = rng.normal(scale=20.0, size=3)
        moved = p.position + (p.velocity + p.acceleration)
        p.update_position(R)

        assert norm(p.position) <= R
        if norm(moved) > R:
            np.testing.assert_array_equal(p.velocity, np.zeros(3))


def test_update_acceleration_skips_self():
    p = Particle(Species.PROTON, position=(10.0, 0.0, 0.0))
    p.update_acceleration([p])
    np.testing.assert_array_equal(p.acceleration, np.zeros(3))


def test_update_acceleration_sums_others():
    """An electron midway between two protons feels no net pull."""
    e = Particle(Species.ELECTRON)
    left = Particle(Species.PROTON, position=(-50.0, 0.0, 0.0))
    right = Particle(Species.PROTON, position=(50.0, 0.0, 0.0))
    e.update_acceleration([left, e, right])
    np.testing.assert_allclose(e.acceleration, np.zeros(3), atol=1e-12)

    right.update_acceleration([left, e, right])
    # Pulled toward the electron at the origin more than pushed by the far proton
    assert right.acceleration[0] < 0


def test_state_is_replaced_not_mutated():
    p = Particle(Species.PROTON, velocity=(1.0, 0.0, 0.0))
    before = p.position
    p.update_position(R)
    np.testing.assert_array_equal(before, np.zeros(3))


def test_species_lookups():
    p = Particle(Species.ELECTRON)
    assert p.charge == -1.0
    assert p.mass == pytest.approx(1 / 1836.15267)
    assert p.radius == 2.0


def test_wall_contact_never_overshoots():
    """Fast particles clamped onto the wall land on or inside it, never a rounding step outside."""
    rng = np.random.default_rng(31)
    for _ in range(5000):
        p = Particle(Species.ELECTRON, velocity=rng.normal(scale=300.0, size=3))
        if p.update_position(R):
            np.testing.assert_array_equal(p.velocity, np.zeros(3))
        assert norm(p.position) <= R
