"""
Emulated sensor readings for running without hardware.

Models a phone lying flat, screen up, slowly turning about the vertical axis
in a field with a horizontal and a downward component.
"""
import math
import random
from typing import Iterable, List, Optional

from sensor_core.models.sensor_data import SensorSample
from sensor_core.models.sensor_enum import SensorKind
from sensor_core.processing.orientation_estimator import STANDARD_GRAVITY

TURN_RATE = 0.1             # rad/s about the vertical axis
FIELD_HORIZONTAL = 22.0     # uT
FIELD_VERTICAL = -40.0      # uT, pointing down (northern hemisphere)
PROXIMITY_FAR = 5.0         # cm
PROXIMITY_PERIOD = 10.0     # s, near/far cycle


def _noise(scale: float) -> float:
    return random.uniform(-scale, scale)


def emulate_samples(
    elapsed: float,
    kinds: Iterable[SensorKind],
    timestamp: Optional[float] = None,
) -> List[SensorSample]:
    """
    Produce one emulated sample per requested kind.

    Args:
        elapsed: seconds since emulation started (drives the heading)
        kinds: sensor kinds to emulate
        timestamp: timestamp stamped on every sample (now when None)
    """
    heading = (TURN_RATE * elapsed) % (2 * math.pi)
    # Heading h clockwise from north: north shows up at (-sin h, cos h) in device axes
    mag = (
        -FIELD_HORIZONTAL * math.sin(heading) + _noise(0.5),
        FIELD_HORIZONTAL * math.cos(heading) + _noise(0.5),
        FIELD_VERTICAL + _noise(0.5),
    )
    linear = (_noise(0.05), _noise(0.05), _noise(0.05))
    # Unit quaternion for a rotation of -heading about z (x, y, z, w)
    half = -heading / 2
    quaternion = (0.0, 0.0, math.sin(half), math.cos(half))
    near = (elapsed % PROXIMITY_PERIOD) > PROXIMITY_PERIOD / 2

    readings = {
        SensorKind.MAGNETIC_FIELD: mag,
        SensorKind.ACCELEROMETER: (linear[0], linear[1], STANDARD_GRAVITY + linear[2]),
        SensorKind.GYROSCOPE: (_noise(0.01), _noise(0.01), -TURN_RATE + _noise(0.01)),
        SensorKind.ROTATION_VECTOR: quaternion,
        SensorKind.GRAVITY: (0.0, 0.0, STANDARD_GRAVITY),
        SensorKind.LINEAR_ACCELERATION: linear,
        SensorKind.GEOMAGNETIC_ROTATION_VECTOR: quaternion,
        SensorKind.PROXIMITY: (0.0 if near else PROXIMITY_FAR,),
    }

    return [
        SensorSample.from_values(kind, readings[kind], timestamp)
        for kind in kinds
    ]
