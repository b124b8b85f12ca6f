from __future__ import annotations

import numpy as np
from numpy import typing as npt

# Degrees of pitch that map onto the full radius of the dial.
PITCH_FULL_SCALE = 90.0


def normalize_yaw(yaw: float) -> float:
    """Wrap a yaw angle in degrees into [0, 360)."""
    return ((yaw % 360) + 360) % 360


def pitch_scale(radius: float) -> float:
    """Pixels per degree of pitch for a dial of the given radius."""
    return radius / PITCH_FULL_SCALE


def pitch_to_offset(pitch: float, radius: float) -> float:
    """
    Map a pitch angle to a vertical pixel offset.

    The mapping is linear: +-90 degrees maps onto +-radius.
    """
    return pitch * pitch_scale(radius)


def compass_points(
    center: tuple[float, float],
    angles_deg: npt.ArrayLike,
    radius: float
) -> np.ndarray:
    """
    Points at `radius` from `center` for compass bearings.

    Compass convention: 0 degrees points up, angles grow clockwise, so
    x = cx + sin(theta) * r and y = cy - cos(theta) * r in screen coordinates.

    Args:
        center: (x, y) screen coordinates of the dial center.
        angles_deg: Scalar or sequence of bearings in degrees.
        radius: Distance from the center.

    Returns:
        An array of shape (n, 2) with the (x, y) screen coordinates.
    """
    cx, cy = center
    theta = np.radians(np.atleast_1d(np.asarray(angles_deg, dtype=np.float64)))
    return np.c_[cx + np.sin(theta) * radius, cy - np.cos(theta) * radius]


def minor_heading_angles(step: int = 30) -> list[int]:
    """Bearings every `step` degrees in [0, 360), skipping the cardinal ones."""
    return [a for a in range(0, 360, step) if a % 90 != 0]
