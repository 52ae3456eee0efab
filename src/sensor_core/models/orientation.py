"""Device orientation model."""
from dataclasses import dataclass


@dataclass(frozen=True)
class OrientationResult:
    """Euler angles of the device, in degrees."""
    azimuth: float  # heading from magnetic north, (-180, 180]
    pitch: float    # tilt about the lateral axis, (-180, 180]
    roll: float     # tilt about the longitudinal axis, [-90, 90]
