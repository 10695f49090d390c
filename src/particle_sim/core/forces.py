# MIT License (see LICENSE)
"""
Pairwise force model for charged particles.

Every pair interacts through a Coulomb-like inverse-square term. Pairs of
nucleons (proton/neutron) replace it with a short-range correction: a tangent
well that holds them near STRONG_FORCE_DISTANCE, and beyond twice that
distance a Coulomb term shifted outward by 2·d0.

Sign convention: compute_force returns a signed magnitude, positive meaning
repulsion along the line from b to a. compute_acceleration turns it into a
vector acting on a (a = F/m).

Singular points are guarded, never propagated:
- coincident particles (r == 0) feel no force, since no direction exists;
- every other denominator or tangent argument is clamped by
  ForceParams.min_separation.
"""
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from ..constants import K_SIM, STRONG_FORCE_DISTANCE, MIN_SEPARATION, ZERO_DISTANCE
from ..util import norm, unit, zeros3

if TYPE_CHECKING:
    from ..types import Particle


@dataclass(frozen=True)
class ForceParams:
    """
    Tunable constants of the force model.

    Attributes:
        k: Coulomb-like coupling constant (simulation units).
        strong_force_distance: Nucleon equilibrium separation d0.
        min_separation: Floor applied to singular denominators.
    """
    k: float = K_SIM
    strong_force_distance: float = STRONG_FORCE_DISTANCE
    min_separation: float = MIN_SEPARATION

    def __post_init__(self) -> None:
        if self.strong_force_distance <= 0:
            raise ValueError(f"strong_force_distance must be positive, got {self.strong_force_distance}")
        if not 0 < self.min_separation < self.strong_force_distance:
            raise ValueError(
                f"min_separation must lie in (0, strong_force_distance), got {self.min_separation}"
            )


DEFAULT_FORCE_PARAMS = ForceParams()


def coulomb_force(qa: float, qb: float, r: float, params: ForceParams = DEFAULT_FORCE_PARAMS) -> float:
    """
    Inverse-square term F = k·qa·qb / r².

    r is floored at params.min_separation.
    """
    r = max(r, params.min_separation)
    return params.k * qa * qb / (r * r)


def nucleon_force(qa: float, qb: float, r: float, params: ForceParams = DEFAULT_FORCE_PARAMS) -> float:
    """
    Strong-force correction between two nucleons.

    For r > 2·d0 the Coulomb term is shifted outward:
        F = k·qa·qb / (r - 2·d0)²
    Inside the well (r <= 2·d0):
        F = -0.1·k·tan(π·(r - d0) / (2·d0))
    which is zero at r = d0, attractive for d0 < r and repulsive for r < d0.

    The tangent has poles at r = 0 and r = 2·d0; r is clamped to
    [min_separation, 2·d0 - min_separation] before evaluation, and the shifted
    denominator is floored at min_separation.
    """
    d0 = params.strong_force_distance
    eps = params.min_separation
    if r > 2 * d0:
        shifted = max(r - 2 * d0, eps)
        return params.k * qa * qb / (shifted * shifted)

    r = min(max(r, eps), 2 * d0 - eps)
    return -0.1 * params.k * math.tan(math.pi * (r - d0) / (2 * d0))


def compute_force(a: Particle, b: Particle, params: ForceParams = DEFAULT_FORCE_PARAMS) -> float:
    """
    Signed force magnitude between two particles (positive = repulsive).

    Returns 0.0 when the particles coincide.
    """
    r = norm(a.position - b.position)
    if r < ZERO_DISTANCE:
        return 0.0
    if a.species.is_nucleon and b.species.is_nucleon:
        return nucleon_force(a.charge, b.charge, r, params)
    return coulomb_force(a.charge, b.charge, r, params)


def compute_acceleration(a: Particle, b: Particle, params: ForceParams = DEFAULT_FORCE_PARAMS) -> np.ndarray:
    """
    Acceleration of a caused by b, from Newton's second law (a = F/m).

    Direction is unit(a.position - b.position), so a positive force pushes a
    away from b.
    """
    force = compute_force(a, b, params)
    if force == 0.0:
        return zeros3()
    return unit(a.position - b.position) * (force / a.mass)
