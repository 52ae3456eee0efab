"""Label keys and text templates of the sensor panel, one group per sensor kind."""
from typing import Dict, List, Tuple

from sensor_core.models.sensor_enum import SensorKind

# (label key, template) in component order
SENSOR_LABELS: Dict[SensorKind, List[Tuple[str, str]]] = {
    SensorKind.MAGNETIC_FIELD: [
        ("mag_x", "Magnetic field X: {:.2f} μT"),
        ("mag_y", "Magnetic field Y: {:.2f} μT"),
        ("mag_z", "Magnetic field Z: {:.2f} μT"),
    ],
    SensorKind.ACCELEROMETER: [
        ("acc_x", "Accelerometer X: {:.2f} m/s²"),
        ("acc_y", "Accelerometer Y: {:.2f} m/s²"),
        ("acc_z", "Accelerometer Z: {:.2f} m/s²"),
    ],
    SensorKind.GYROSCOPE: [
        ("gyro_x", "Gyroscope X: {:.2f} rad/s"),
        ("gyro_y", "Gyroscope Y: {:.2f} rad/s"),
        ("gyro_z", "Gyroscope Z: {:.2f} rad/s"),
    ],
    SensorKind.ROTATION_VECTOR: [
        ("rotv_x", "Rotation vector X: {:.2f}"),
        ("rotv_y", "Rotation vector Y: {:.2f}"),
        ("rotv_z", "Rotation vector Z: {:.2f}"),
        ("rotv_s", "Rotation vector scalar: {:.2f}"),
    ],
    SensorKind.GRAVITY: [
        ("grav_x", "Gravity X: {:.2f} m/s²"),
        ("grav_y", "Gravity Y: {:.2f} m/s²"),
        ("grav_z", "Gravity Z: {:.2f} m/s²"),
    ],
    SensorKind.LINEAR_ACCELERATION: [
        ("line_x", "Linear acceleration X: {:.2f} m/s²"),
        ("line_y", "Linear acceleration Y: {:.2f} m/s²"),
        ("line_z", "Linear acceleration Z: {:.2f} m/s²"),
    ],
    SensorKind.GEOMAGNETIC_ROTATION_VECTOR: [
        ("grt_x", "Geomagnetic rotation X: {:.2f}"),
        ("grt_y", "Geomagnetic rotation Y: {:.2f}"),
        ("grt_z", "Geomagnetic rotation Z: {:.2f}"),
        ("grt_s", "Geomagnetic rotation scalar: {:.2f}"),
    ],
    SensorKind.PROXIMITY: [
        ("prox", "Proximity: {:.2f} cm"),
    ],
}

ORIENTATION_LABELS: List[Tuple[str, str]] = [
    ("azimuth", "Azimuth: {:.2f}°"),
    ("pitch", "Pitch: {:.2f}°"),
    ("roll", "Roll: {:.2f}°"),
]


def label_keys() -> List[str]:
    """All label keys in screen order."""
    keys = [key for labels in SENSOR_LABELS.values() for key, _ in labels]
    keys.extend(key for key, _ in ORIENTATION_LABELS)
    return keys
