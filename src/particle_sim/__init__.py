# MIT License (see LICENSE)
"""
particle_sim - An interactive 3D electrostatic particle simulator.

Protons, neutrons and electrons are placed into a spherical region and move
under pairwise Coulomb-like forces, with a short-range strong-force
correction between nucleons.

Main entry points:
    - World: Owns the particles, run state and camera; drives each frame.
    - Particle: One charged body.
    - Species: Proton, neutron, electron and their constants.
    - Tool: The GUI tool a host hands to World.update().

Submodules:
    - core: Force model and diagnostic invariants.
    - mapping: Screen <-> world coordinate mapping.
    - renderer: Optional output adapters.

Example:
    from particle_sim import World, Species

    world = World()
    world.add_particle(Species.PROTON, (20.0, 0.0, 0.0))
    world.add_particle(Species.ELECTRON, (-20.0, 0.0, 0.0))
    world.step()
"""
from .world import World
from .types import Particle, Viewport, PointerState, CameraOrientation
from .species import Species, Tool

__all__ = [
    # Simulation
    "World",
    "Particle",
    # Kinds
    "Species",
    "Tool",
    # Host inputs
    "Viewport",
    "PointerState",
    "CameraOrientation",
]
