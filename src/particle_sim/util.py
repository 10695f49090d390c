# MIT License (see LICENSE)
"""
Utility functions for 3D vector math.

Vectors are numpy float64 arrays of shape (3,). Addition, subtraction and
scaling use numpy operators directly; the helpers here cover the rest.
Every function returns a new array and leaves its inputs untouched, so
particle state can be shared without aliasing surprises.
"""
from __future__ import annotations

import numpy as np

X_AXIS = np.array([1.0, 0.0, 0.0])
Y_AXIS = np.array([0.0, 1.0, 0.0])
Z_AXIS = np.array([0.0, 0.0, 1.0])


def f64(x) -> np.ndarray:
    """Convert any array-like to a new float64 numpy array."""
    return np.array(x, dtype=np.float64)


def vec3(x: float = 0.0, y: float = 0.0, z: float = 0.0) -> np.ndarray:
    """Build a 3D vector from components."""
    return np.array([x, y, z], dtype=np.float64)


def zeros3() -> np.ndarray:
    return np.zeros(3, dtype=np.float64)


def norm2(v: np.ndarray) -> float:
    """Squared magnitude. Avoids sqrt."""
    return float(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])


def norm(v: np.ndarray) -> float:
    """Magnitude (length) of a 3D vector."""
    return float(np.sqrt(norm2(v)))


def unit(v: np.ndarray, eps: float = 1e-12) -> np.ndarray:
    """
    Return a unit vector in the same direction as v.

    Returns the zero vector if |v| < eps to avoid division by zero.
    """
    n = norm(v)
    if n < eps:
        return zeros3()
    return v / n


def distance(a: np.ndarray, b: np.ndarray) -> float:
    """Euclidean distance between two points."""
    return norm(a - b)


def clamp_to_sphere(v: np.ndarray, radius: float) -> np.ndarray:
    """
    Cap the magnitude of v at radius, keeping its direction.

    Vectors already inside the sphere come back unchanged (as a copy).
    The result always satisfies norm(out) <= radius; rounding in the
    rescale can land a few ULPs outside, so it is shrunk back in.
    """
    n = norm(v)
    if n <= radius:
        return f64(v)
    out = v * (radius / n)
    while norm(out) > radius:
        out = out * (1.0 - 1e-15)
    return out


def rotate(v: np.ndarray, axis: np.ndarray, angle: float) -> np.ndarray:
    """
    Rotate v by angle (radians) about axis, right-handed.

    Uses Rodrigues' formula:
        v' = v cosθ + (k × v) sinθ + k (k·v)(1 - cosθ)
    where k is the unit axis. A zero axis leaves v unchanged.

    Reference:
        https://en.wikipedia.org/wiki/Rodrigues%27_rotation_formula
    """
    v = f64(v)
    k = unit(f64(axis))
    if not k.any():
        return v
    c, s = np.cos(angle), np.sin(angle)
    return v * c + np.cross(k, v) * s + k * float(np.dot(k, v)) * (1.0 - c)
