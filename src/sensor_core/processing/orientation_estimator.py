"""
Device orientation from gravity and geomagnetic vectors.

The rotation matrix maps device coordinates to world coordinates with rows
East, North, Up. Euler angles are read off that matrix:

    azimuth = atan2(R[0][1], R[1][1])   heading from magnetic north, (-180, 180]
    pitch   = atan2(-R[2][1], R[2][2])  tilt about the lateral axis, (-180, 180]
    roll    = asin(-R[2][0])            tilt about the longitudinal axis, [-90, 90]

All functions here are pure: same inputs, same outputs, no state.
"""
import math
from typing import Optional, Sequence

import numpy as np

from sensor_core.models.orientation import OrientationResult

STANDARD_GRAVITY = 9.80665  # m/s^2

# Below 10% of g the device is in free fall (or the sensor is broken)
FREE_FALL_GRAVITY = 0.1 * STANDARD_GRAVITY

# Minimum field strength perpendicular to gravity (uT)
MIN_HORIZONTAL_FIELD = 0.1


def _as_vector(values: Optional[Sequence[float]]) -> Optional[np.ndarray]:
    if values is None:
        return None
    vector = np.asarray(values, dtype=float)
    if vector.shape != (3,) or not np.all(np.isfinite(vector)):
        return None
    return vector


def rotation_matrix(
    gravity: Optional[Sequence[float]],
    geomagnetic: Optional[Sequence[float]],
) -> Optional[np.ndarray]:
    """
    Build the 3x3 device-to-world rotation matrix.

    Args:
        gravity: gravity (or raw accelerometer) vector in device coordinates
        geomagnetic: magnetic field vector in device coordinates

    Returns:
        Matrix with rows East, North, Up, or None when the inputs are
        missing or degenerate.
    """
    a = _as_vector(gravity)
    e = _as_vector(geomagnetic)
    if a is None or e is None:
        return None

    norm_a = np.linalg.norm(a)
    if norm_a < FREE_FALL_GRAVITY:
        return None

    h = np.cross(e, a)
    norm_h = np.linalg.norm(h)
    if norm_h / norm_a < MIN_HORIZONTAL_FIELD:
        return None

    up = a / norm_a
    east = h / norm_h
    north = np.cross(up, east)
    return np.vstack((east, north, up))


def _to_degrees(radians: float) -> float:
    degrees = math.degrees(radians)
    if degrees == -180.0:
        degrees = 180.0
    # Drop negative zero
    return degrees + 0.0


def orientation_angles(matrix: np.ndarray) -> OrientationResult:
    """Euler angles (degrees) of a rotation matrix with rows East, North, Up."""
    azimuth = math.atan2(matrix[0][1], matrix[1][1])
    pitch = math.atan2(-matrix[2][1], matrix[2][2])
    # Rounding can push the argument just outside [-1, 1]
    roll = math.asin(max(-1.0, min(1.0, -matrix[2][0])))
    return OrientationResult(
        azimuth=_to_degrees(azimuth),
        pitch=_to_degrees(pitch),
        roll=_to_degrees(roll),
    )


def estimate(
    gravity: Optional[Sequence[float]],
    geomagnetic: Optional[Sequence[float]],
) -> Optional[OrientationResult]:
    """
    Estimate device orientation.

    Returns:
        OrientationResult, or None when orientation is undefined for these inputs.
    """
    matrix = rotation_matrix(gravity, geomagnetic)
    if matrix is None:
        return None
    return orientation_angles(matrix)
