# MIT License (see LICENSE)
"""
Core type definitions for the particle simulation.

Defines:
- Particle: one charged body with position, velocity and acceleration.
- Viewport, PointerState, CameraOrientation: the per-frame values a host
  hands to the World.

Particles follow the frame-step equations of motion (no explicit dt; one
call is one frame):
    v ← v + a
    x ← clamp(x + v, R_bound)
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable

import numpy as np

from .constants import SPACE_SIZE
from .core.forces import ForceParams, DEFAULT_FORCE_PARAMS, compute_acceleration
from .species import Species
from .util import f64, zeros3, norm, clamp_to_sphere


@dataclass(frozen=True)
class Viewport:
    """Host canvas size in pixels."""
    width: float
    height: float

    @property
    def center(self) -> tuple[float, float]:
        return self.width / 2, self.height / 2

    @property
    def short_side(self) -> float:
        return min(self.width, self.height)


@dataclass(frozen=True)
class PointerState:
    """Pointer position in viewport pixels (origin top-left) and button state."""
    x: float
    y: float
    pressed: bool = False


@dataclass(frozen=True)
class CameraOrientation:
    """
    Camera rotation in radians.

    Attributes:
        yaw: Rotation about the vertical axis (driven by horizontal drag).
        pitch: Rotation about the horizontal axis (driven by vertical drag).
    """
    yaw: float = 0.0
    pitch: float = 0.0

    def offset(self, dyaw: float, dpitch: float) -> CameraOrientation:
        return CameraOrientation(self.yaw + dyaw, self.pitch + dpitch)


@dataclass(eq=False)
class Particle:
    """
    A single charged particle.

    Attributes:
        species: Kind of particle; charge, mass and render radius come from it.
        position: World position [x, y, z] in pm.
        velocity: Velocity in pm/frame.
        acceleration: Acceleration in pm/frame², recomputed every running frame.

    Note:
        State vectors are float64 arrays and are replaced, never mutated in
        place, so arrays handed out to renderers stay valid snapshots.
        Particles compare by identity.
    """
    species: Species
    position: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 0.0)
    velocity: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 0.0)
    acceleration: np.ndarray = field(default_factory=zeros3)

    def __post_init__(self) -> None:
        """Convert state to float64 arrays for consistent numerics."""
        self.position = f64(self.position)
        self.velocity = f64(self.velocity)
        self.acceleration = f64(self.acceleration)

    @property
    def charge(self) -> float:
        return self.species.charge

    @property
    def mass(self) -> float:
        return self.species.mass

    @property
    def radius(self) -> float:
        """Render radius in pixels."""
        return self.species.radius

    def update_acceleration(
        self,
        others: Iterable[Particle],
        params: ForceParams = DEFAULT_FORCE_PARAMS,
    ) -> None:
        """
        Recompute acceleration as the sum of pull/push from every other particle.

        Self-interaction is skipped by identity; a distinct particle at the
        same position contributes zero (see compute_force).
        """
        a = zeros3()
        for other in others:
            if other is self:
                continue
            a = a + compute_acceleration(self, other, params)
        self.acceleration = a

    def update_position(self, bound_radius: float = SPACE_SIZE / 2) -> bool:
        """
        Integrate one frame and confine the particle to the bounding sphere.

        The wall is inelastic: if the new position lies outside the sphere it
        is pulled back onto the surface and velocity is zeroed.

        Returns:
            True if the particle hit the boundary this frame.
        """
        self.velocity = self.velocity + self.acceleration
        moved = self.position + self.velocity
        hit = norm(moved) > bound_radius
        self.position = clamp_to_sphere(moved, bound_radius)
        if hit:
            self.velocity = zeros3()
        return hit
