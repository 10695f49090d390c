# MIT License (see LICENSE)
"""
Core physics components.

This subpackage provides:
    - Force model: Coulomb term and nucleon strong-force correction.
    - Invariants: kinetic energy, momentum and boundary diagnostics.

Typical usage:
    from particle_sim.core import compute_acceleration

    a = compute_acceleration(electron, proton)
"""
from .forces import (
    ForceParams,
    DEFAULT_FORCE_PARAMS,
    coulomb_force,
    nucleon_force,
    compute_force,
    compute_acceleration,
)
from .invariants import kinetic_energy, linear_momentum, max_radius

__all__ = [
    # Forces
    "ForceParams",
    "DEFAULT_FORCE_PARAMS",
    "coulomb_force",
    "nucleon_force",
    "compute_force",
    "compute_acceleration",
    # Invariants
    "kinetic_energy",
    "linear_momentum",
    "max_radius",
]
