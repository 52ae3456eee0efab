# External libs
import asyncio
import logging
from typing import Optional

# Internal libs
from sensor_core.config_loader import config_loader
from sensor_core.display.panel import display_panel
from sensor_core.event_hub import init_event_hub
from sensor_core.models.sensor_enum import SensorSource
from sensor_core.processing.orientation_processor import orientation_processor
from sensor_core.services.sensor_manager import sensor_manager
from sensor_core.services.serial_handler import serial_reader

logger = logging.getLogger(__name__)

class ServiceManager:

    def __init__(self):
        self._serial_task: Optional[asyncio.Task] = None

    async def start_services(self, source: SensorSource = SensorSource.EMULATION):
        """Start global background services.
        Args:
            source: where sensor samples come from. SERIAL needs a configured port.
        """
        logger.info("Starting background services...")
        loop = asyncio.get_running_loop()

        serial_cfg = config_loader.get_serial_settings()
        if source == SensorSource.SERIAL and not serial_cfg.port:
            raise ValueError("A serial port must be configured to read sensors from serial")

        # Every handler runs on this loop's thread
        init_event_hub(loop)

        available = list(config_loader.get_available_sensors().keys())

        # Subscribers first so the first sample is already seen
        display_panel.start(available)
        orientation_processor.start()
        sensor_manager.start(source=source, available=available)

        if source == SensorSource.SERIAL:
            self._serial_task = loop.create_task(
                serial_reader(serial_cfg.port, serial_cfg.baud, sensor_manager.submit)
            )

        logger.info(f"Services started ({len(available)} sensors available)")

    def stop_services(self):
        """Stop all background services."""
        logger.info("Stopping background services...")
        if self._serial_task:
            self._serial_task.cancel()
            self._serial_task = None

        sensor_manager.stop()
        orientation_processor.stop()
        display_panel.stop()

        init_event_hub(None)
        logger.info("All services stopped")

    def is_running(self) -> bool:
        return sensor_manager.running

service_manager = ServiceManager()
