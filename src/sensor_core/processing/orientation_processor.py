import logging
from typing import Optional

from sensor_core.config_loader import config_loader
from sensor_core.errors import OrientationUndefinedError, SensorUnavailableError
from sensor_core.event_hub import EventHub, ORIENTATION_UPDATE, SENSOR_UPDATE, event_hub
from sensor_core.models.orientation import OrientationResult
from sensor_core.models.sensor_data import SensorSample
from sensor_core.models.sensor_enum import SensorKind
from sensor_core.processing.orientation_estimator import estimate
from sensor_core.services.sensor_manager import SensorManager, sensor_manager

logger = logging.getLogger(__name__)

REQUIRED_KINDS = (SensorKind.ACCELEROMETER, SensorKind.MAGNETIC_FIELD)

class OrientationProcessor:
    """
    Recomputes orientation from the latest accelerometer and magnetometer samples.

    With the "accelerometer" refresh policy only accelerometer samples trigger
    a recompute, pairing them with whatever magnetometer sample is newest.
    "any" also recomputes on magnetometer samples.
    """
    def __init__(self, manager: SensorManager = sensor_manager, hub: EventHub = event_hub):
        self.manager = manager
        self.hub = hub
        self.running = False
        self.refresh = "accelerometer"
        self.latest: Optional[OrientationResult] = None

    def start(self, refresh: Optional[str] = None):
        if self.running:
            return
        self.refresh = refresh or config_loader.get_orientation_refresh()
        self.latest = None
        self.running = True
        self.hub.subscribe(SENSOR_UPDATE, self._on_sensor_update)
        logger.info(f"OrientationProcessor started (refresh on: {self.refresh})")

    def stop(self):
        self.running = False
        self.hub.unsubscribe(SENSOR_UPDATE, self._on_sensor_update)
        self.latest = None
        logger.info("OrientationProcessor stopped")

    def is_supported(self) -> bool:
        return all(self.manager.is_available(kind) for kind in REQUIRED_KINDS)

    def current(self) -> OrientationResult:
        """Latest valid orientation."""
        for kind in REQUIRED_KINDS:
            if not self.manager.is_available(kind):
                raise SensorUnavailableError(kind)
        if self.latest is None:
            raise OrientationUndefinedError()
        return self.latest

    def _triggers(self, kind: SensorKind) -> bool:
        if kind == SensorKind.ACCELEROMETER:
            return True
        return self.refresh == "any" and kind == SensorKind.MAGNETIC_FIELD

    def _on_sensor_update(self, topic: str, sample: SensorSample):
        if not self._triggers(sample.kind) or not self.is_supported():
            return
        self.recompute()

    def recompute(self) -> Optional[OrientationResult]:
        accel = self.manager.get_latest(SensorKind.ACCELEROMETER)
        magnetic = self.manager.get_latest(SensorKind.MAGNETIC_FIELD)

        result = estimate(
            accel.values if accel else None,
            magnetic.values if magnetic else None,
        )
        if result is None:
            logger.debug("Orientation undefined for current readings")
        self.latest = result
        self.hub.send_all_on_topic(ORIENTATION_UPDATE, result)
        return result

orientation_processor = OrientationProcessor()
