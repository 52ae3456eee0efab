import threading
import time
import logging
from typing import Iterable, List, Optional, Set

from sensor_core.config_loader import config_loader
from sensor_core.errors import SensorUnavailableError
from sensor_core.event_hub import EventHub, SENSOR_EVENT, SENSOR_UPDATE, event_hub
from sensor_core.models.sample_store import LatestSampleStore
from sensor_core.models.sensor_data import SensorSample
from sensor_core.models.sensor_enum import SensorKind, SensorSource
from sensor_core.services.sensor_emulator import emulate_samples

logger = logging.getLogger(__name__)

MIN_EMULATION_PERIOD = 0.005  # FASTEST would otherwise spin

class SensorManager:
    """
    Owns the latest sample of every sensor kind.
    Feeds publish on SENSOR_EVENT; accepted samples are stored and re-published
    on SENSOR_UPDATE. The store is only written from the event hub dispatch.
    """
    def __init__(self, hub: EventHub = event_hub):
        self.hub = hub
        self.running = False
        self.source: Optional[SensorSource] = None
        self._available: Set[SensorKind] = set()
        self._store = LatestSampleStore()
        self._thread: Optional[threading.Thread] = None

    def start(self, source: SensorSource = SensorSource.EMULATION, available: Optional[Iterable[SensorKind]] = None):
        """
        Start accepting samples.
        `available` lists the kinds with hardware backing (config when None).
        """
        if self.running:
            if self.source != source:
                self.stop()
            else:
                return

        if available is None:
            available = config_loader.get_available_sensors().keys()
        self._available = set(available)
        for kind in SensorKind:
            if kind not in self._available:
                logger.info(f"Sensor {kind.name} is not available on this device")

        self.source = source
        self.running = True
        self.hub.subscribe(SENSOR_EVENT, self._on_sensor_event)
        logger.info(f"SensorManager started (Source: {source.value})")

        if source == SensorSource.EMULATION:
            self._thread = threading.Thread(target=self._loop, daemon=True)
            self._thread.start()

    def stop(self):
        """Stop accepting samples and forget the stored ones."""
        self.running = False
        self.hub.unsubscribe(SENSOR_EVENT, self._on_sensor_event)
        if self._thread:
            self._thread.join()
            self._thread = None
        self._store.clear()
        logger.info("SensorManager stopped")

    def is_available(self, kind: SensorKind) -> bool:
        return kind in self._available

    def available_kinds(self) -> List[SensorKind]:
        return [kind for kind in SensorKind if kind in self._available]

    def get_latest(self, kind: SensorKind) -> Optional[SensorSample]:
        """Latest sample of a kind, None if none arrived yet."""
        if not self.is_available(kind):
            raise SensorUnavailableError(kind)
        return self._store.get(kind)

    def submit(self, sample: SensorSample):
        """Entry point for feeds: publish a new sample."""
        self.hub.send_all_on_topic(SENSOR_EVENT, sample)

    def _loop(self):
        start_time = time.time()
        period = max(config_loader.get_delay().period_seconds(), MIN_EMULATION_PERIOD)
        while self.running:
            for sample in emulate_samples(time.time() - start_time, self.available_kinds()):
                self.submit(sample)
            time.sleep(period)

    def _on_sensor_event(self, topic: str, sample: SensorSample):
        if not self.running:
            return
        if sample.kind not in self._available:
            logger.debug(f"Dropping sample from unavailable sensor {sample.kind.name}")
            return
        self._store.put(sample)
        self.hub.send_all_on_topic(SENSOR_UPDATE, sample)

# Global instance
sensor_manager = SensorManager()
