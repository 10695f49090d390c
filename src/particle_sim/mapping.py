# MIT License (see LICENSE)
"""
Screen <-> world coordinate mapping.

The viewport's shorter side spans the whole simulated space (space_size pm),
centred on the origin. A pointer position is lifted onto the plane facing the
camera: screen-right is +x and screen-down is +y when the camera is at rest,
and the camera's pitch and yaw rotate that plane into world space.

screen_to_world rotates the offset from the viewport centre about +x by pitch
and then about +y by -yaw. In the host's 2D terms this is rotating the
vertical screen component by -pitch and then the horizontal (x, z) pair by
yaw. world_to_screen applies the inverse rotations in reverse order.
"""
from __future__ import annotations

import numpy as np

from .constants import SPACE_SIZE
from .types import CameraOrientation
from .util import f64, vec3, rotate, X_AXIS, Y_AXIS


def _check_viewport(width: float, height: float) -> None:
    if width <= 0 or height <= 0:
        raise ValueError(f"Viewport dimensions must be positive, got ({width}, {height})")


def pixels_to_world(v, width: float, height: float, space_size: float = SPACE_SIZE) -> np.ndarray:
    """Scale a pixel-space vector to world units."""
    _check_viewport(width, height)
    return f64(v) * (space_size / min(width, height))


def world_to_pixels(v, width: float, height: float, space_size: float = SPACE_SIZE) -> np.ndarray:
    """Scale a world-space vector to pixels."""
    _check_viewport(width, height)
    return f64(v) * (min(width, height) / space_size)


def in_placement_region(px: float, py: float, width: float, height: float) -> bool:
    """
    True if the pointer lies strictly inside the placement circle.

    The circle is centred on the viewport and has radius min(width, height)/2,
    i.e. the projection of the bounding sphere.
    """
    dx, dy = px - width / 2, py - height / 2
    r = min(width, height) / 2
    return dx * dx + dy * dy < r * r


def screen_to_world(
    px: float,
    py: float,
    width: float,
    height: float,
    camera: CameraOrientation = CameraOrientation(),
    space_size: float = SPACE_SIZE,
) -> np.ndarray:
    """
    Map a pointer position to a world-space point.

    Args:
        px, py: Pointer position in pixels, origin at the top-left corner.
        width, height: Viewport size in pixels.
        camera: Current camera orientation.
        space_size: World units spanned by the viewport's shorter side.

    Returns:
        The world point on the camera-facing plane through the origin.
    """
    offset = vec3(px - width / 2, py - height / 2, 0.0)
    p = rotate(offset, X_AXIS, camera.pitch)
    p = rotate(p, Y_AXIS, -camera.yaw)
    return pixels_to_world(p, width, height, space_size)


def world_to_screen(
    point,
    width: float,
    height: float,
    camera: CameraOrientation = CameraOrientation(),
    space_size: float = SPACE_SIZE,
) -> tuple[float, float]:
    """
    Project a world point to pointer coordinates.

    Exact inverse of screen_to_world for points on the camera-facing plane;
    for other points the depth component is dropped (orthographic).
    """
    p = world_to_pixels(point, width, height, space_size)
    p = rotate(p, Y_AXIS, camera.yaw)
    p = rotate(p, X_AXIS, -camera.pitch)
    return float(p[0] + width / 2), float(p[1] + height / 2)
