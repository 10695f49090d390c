# MIT License (see LICENSE)
"""
Diagnostic quantities over a set of particles.

Useful when checking the integrator and the boundary: the inelastic wall
removes kinetic energy, and because the force model is not antisymmetric for
unequal masses, total momentum is not conserved exactly either. These give a
quick view of both.
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Iterable

import numpy as np

from ..util import norm, zeros3

if TYPE_CHECKING:
    from ..types import Particle


def kinetic_energy(particles: Iterable[Particle]) -> float:
    """
    Total kinetic energy.

    T = Σ 0.5 * m * v²
    """
    ke = 0.0
    for p in particles:
        ke += 0.5 * p.mass * float(np.dot(p.velocity, p.velocity))
    return ke


def linear_momentum(particles: Iterable[Particle]) -> np.ndarray:
    """
    Total linear momentum P = Σ m * v as a 3-vector.
    """
    total = zeros3()
    for p in particles:
        total = total + p.mass * p.velocity
    return total


def max_radius(particles: Iterable[Particle]) -> float:
    """Largest distance of any particle from the origin (0.0 if none)."""
    return max((norm(p.position) for p in particles), default=0.0)
