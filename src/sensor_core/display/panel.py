"""
DisplayPanel keeps the text of every label on the sensor screen up to date.
"""
import logging
import math
from typing import Dict, Iterable, Optional

from sensor_core.config_loader import config_loader
from sensor_core.display.label_formats import ORIENTATION_LABELS, SENSOR_LABELS, label_keys
from sensor_core.event_hub import EventHub, ORIENTATION_UPDATE, SENSOR_UPDATE, event_hub
from sensor_core.models.orientation import OrientationResult
from sensor_core.models.sensor_data import SensorSample
from sensor_core.models.sensor_enum import SensorKind

logger = logging.getLogger(__name__)


class DisplayPanel:
    """
    Label texts of the single screen.
    Labels of sensors without hardware get the "unavailable" placeholder once
    at start and are never updated; the rest show "no data" until a reading arrives.
    """

    def __init__(self, hub: EventHub = event_hub):
        self.hub = hub
        self.running = False
        self.unavailable_text = ""
        self.no_data_text = ""
        self._available: set = set()
        self._labels: Dict[str, str] = {}

    def start(self, available_kinds: Iterable[SensorKind],
              unavailable_text: Optional[str] = None, no_data_text: Optional[str] = None):
        if self.running:
            self.stop()
        placeholders = config_loader.get_placeholders()
        self.unavailable_text = placeholders.unavailable if unavailable_text is None else unavailable_text
        self.no_data_text = placeholders.noData if no_data_text is None else no_data_text
        self._available = set(available_kinds)

        self._labels = {key: self.no_data_text for key in label_keys()}
        for kind, labels in SENSOR_LABELS.items():
            if kind not in self._available:
                for key, _ in labels:
                    self._labels[key] = self.unavailable_text
        if not self.orientation_supported():
            for key, _ in ORIENTATION_LABELS:
                self._labels[key] = self.unavailable_text

        self.running = True
        self.hub.subscribe(SENSOR_UPDATE, self._on_sensor_update)
        self.hub.subscribe(ORIENTATION_UPDATE, self._on_orientation_update)
        logger.info("DisplayPanel started")

    def stop(self):
        self.running = False
        self.hub.unsubscribe(SENSOR_UPDATE, self._on_sensor_update)
        self.hub.unsubscribe(ORIENTATION_UPDATE, self._on_orientation_update)

    def orientation_supported(self) -> bool:
        return (SensorKind.ACCELEROMETER in self._available
                and SensorKind.MAGNETIC_FIELD in self._available)

    def labels(self) -> Dict[str, str]:
        return dict(self._labels)

    def label(self, key: str) -> str:
        return self._labels[key]

    def _format(self, template: str, value: float) -> str:
        if not math.isfinite(value):
            return self.no_data_text
        return template.format(value)

    def _on_sensor_update(self, topic: str, sample: SensorSample):
        if sample.kind not in self._available:
            return
        for (key, template), value in zip(SENSOR_LABELS[sample.kind], sample.values):
            self._labels[key] = self._format(template, value)

    def _on_orientation_update(self, topic: str, result: Optional[OrientationResult]):
        if not self.orientation_supported():
            return
        if result is None:
            for key, _ in ORIENTATION_LABELS:
                self._labels[key] = self.no_data_text
            return
        angles = (result.azimuth, result.pitch, result.roll)
        for (key, template), value in zip(ORIENTATION_LABELS, angles):
            self._labels[key] = self._format(template, value)

display_panel = DisplayPanel()
