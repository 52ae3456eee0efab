"""Error kinds surfaced by the sensor services."""
from sensor_core.models.sensor_enum import SensorKind


class SensorUnavailableError(RuntimeError):
    """The requested sensor kind has no hardware backing on this device."""

    def __init__(self, kind: SensorKind):
        self.kind = kind
        super().__init__(f"Sensor {kind.name} is not available")


class OrientationUndefinedError(RuntimeError):
    """Not enough (or degenerate) data to compute orientation right now."""

    def __init__(self, message: str = "Orientation is not available yet"):
        super().__init__(message)
