"""Sensor kind enumerations for type-safe sensor references."""
from enum import Enum


class SensorKind(Enum):
    """Enumeration of all sensor kinds shown on the panel."""
    MAGNETIC_FIELD = 0
    ACCELEROMETER = 1
    GYROSCOPE = 2
    ROTATION_VECTOR = 3
    GRAVITY = 4
    LINEAR_ACCELERATION = 5
    GEOMAGNETIC_ROTATION_VECTOR = 6
    PROXIMITY = 7

    def component_count(self) -> int:
        """Number of float components carried by a sample of this kind."""
        return _COMPONENT_COUNTS.get(self, 3)

    @classmethod
    def from_name(cls, name: str) -> "SensorKind":
        """Parse a kind name or short alias (case-insensitive)."""
        key = name.strip().upper()
        if key in cls.__members__:
            return cls[key]
        if key in _ALIASES:
            return _ALIASES[key]
        raise ValueError(f"Unknown sensor kind: {name}")


_COMPONENT_COUNTS = {
    SensorKind.ROTATION_VECTOR: 4,
    SensorKind.GEOMAGNETIC_ROTATION_VECTOR: 4,
    SensorKind.PROXIMITY: 1,
}

_ALIASES = {
    "MAG": SensorKind.MAGNETIC_FIELD,
    "ACC": SensorKind.ACCELEROMETER,
    "GYRO": SensorKind.GYROSCOPE,
    "ROTV": SensorKind.ROTATION_VECTOR,
    "GRAV": SensorKind.GRAVITY,
    "LINE": SensorKind.LINEAR_ACCELERATION,
    "GRT": SensorKind.GEOMAGNETIC_ROTATION_VECTOR,
    "PROX": SensorKind.PROXIMITY,
}


class SensorDelay(Enum):
    """Nominal delivery rate tiers, in microseconds between samples."""
    NORMAL = 200000
    UI = 66667
    GAME = 20000
    FASTEST = 0

    def period_seconds(self) -> float:
        """Get the nominal sample period in seconds"""
        return self.value / 1_000_000


class SensorSource(Enum):
    """Where sensor samples come from."""
    EMULATION = "emulation"
    SERIAL = "serial"
    EXTERNAL = "external"
