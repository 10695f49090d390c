import logging

import numpy as np
import pytest
from particle_sim.core.invariants import kinetic_energy, linear_momentum, max_radius
from particle_sim.logging_config import setup_logging
from particle_sim.species import Species, Tool, SPECIES_TABLE
from particle_sim.types import Particle
from particle_sim.world import World


def test_kinetic_energy_and_momentum():
    a = Particle(Species.PROTON, velocity=(2.0, 0.0, 0.0))
    b = Particle(Species.ELECTRON, velocity=(0.0, 0.0, -4.0))
    me = Species.ELECTRON.mass

    assert kinetic_energy([a, b]) == pytest.approx(0.5 * 4.0 + 0.5 * me * 16.0)
    np.testing.assert_allclose(linear_momentum([a, b]), [2.0, 0.0, -4.0 * me])
    assert kinetic_energy([]) == 0.0


def test_max_radius():
    assert max_radius([]) == 0.0
    ps = [Particle(Species.NEUTRON, position=(3.0, 4.0, 0.0)), Particle(Species.PROTON)]
    assert max_radius(ps) == pytest.approx(5.0)


def test_wall_removes_energy():
    """The inelastic wall takes all kinetic energy from a particle that hits it."""
    world = World()
    world.add_particle(Species.PROTON, (240.0, 0.0, 0.0), velocity=(30.0, 0.0, 0.0))
    world.step()
    assert kinetic_energy(world.particles) == 0.0
    assert max_radius(world.particles) == pytest.approx(world.bound_radius)


def test_species_table():
    assert set(SPECIES_TABLE) == set(Species)
    assert Species.PROTON.charge == -Species.ELECTRON.charge
    assert Species.NEUTRON.charge == 0.0
    assert all(props.mass > 0 and props.radius > 0 for props in SPECIES_TABLE.values())
    assert Species.PROTON.is_nucleon and Species.NEUTRON.is_nucleon
    assert not Species.ELECTRON.is_nucleon


def test_tool_parse(caplog):
    assert Tool.parse("Proton") is Tool.PROTON
    assert Tool.parse(Tool.PAN) is Tool.PAN
    assert Tool.parse(Species.NEUTRON) is Tool.NEUTRON
    assert Tool.parse(None) is None
    assert Tool.ELECTRON.species is Species.ELECTRON
    assert Tool.MOVE.species is None

    with caplog.at_level(logging.WARNING, logger="particle_sim"):
        assert Tool.parse("quark") is None
    assert "quark" in caplog.text


def test_setup_logging(tmp_path):
    log_file = tmp_path / "sim.log"
    logger = setup_logging(logging.DEBUG, log_file=str(log_file))
    try:
        assert logger.name == "particle_sim"
        assert len(logger.handlers) == 2

        # Calling again replaces rather than duplicates handlers
        logger = setup_logging(logging.INFO)
        assert len(logger.handlers) == 1
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
