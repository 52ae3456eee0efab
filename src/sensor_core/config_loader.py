import json
import logging
from pathlib import Path
from typing import Dict, Optional

from sensor_core.models.sensor_enum import SensorDelay, SensorKind, SensorSource
from sensor_core.models.config_data import configData, configSensorData, placeholderConfigData, serialConfigData

logger = logging.getLogger(__name__)

ORIENTATION_REFRESH_POLICIES = ("accelerometer", "any")

DEFAULT_DISPLAY_NAMES = {
    SensorKind.MAGNETIC_FIELD: "Magnetic field",
    SensorKind.ACCELEROMETER: "Accelerometer",
    SensorKind.GYROSCOPE: "Gyroscope",
    SensorKind.ROTATION_VECTOR: "Rotation vector",
    SensorKind.GRAVITY: "Gravity",
    SensorKind.LINEAR_ACCELERATION: "Linear acceleration",
    SensorKind.GEOMAGNETIC_ROTATION_VECTOR: "Geomagnetic rotation vector",
    SensorKind.PROXIMITY: "Proximity",
}

class ConfigLoader:
    """Loads and manages sensor panel configuration from JSON file."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigLoader, cls).__new__(cls)
            cls._instance._config = configData(sensors={})
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self._config = self._get_default_config()
            self.load_config()
            self._initialized = True

    @staticmethod
    def get_config_path() -> Path:
        """Get the path to the sensors_config.json file."""
        # Config file lives in the project root/config directory
        config_path = Path(__file__).parent.parent.parent / "config" / "sensors_config.json"
        return config_path

    def load_config(self, config_path: Optional[Path] = None):
        """Load configuration from JSON file (defaults to get_config_path())."""
        if config_path is None:
            config_path = self.get_config_path()

        # Start from defaults so every kind always has an entry
        self._config = self._get_default_config()

        if not config_path.exists():
            logger.error(f"Configuration file not found: {config_path}")
            return

        try:
            with open(config_path, 'r') as f:
                json_data = json.load(f)

            for sensor_key, sensor_cfg in json_data.get("sensors", {}).items():
                kind = SensorKind.from_name(sensor_key)
                self._config.sensors[kind] = configSensorData(
                    kind,
                    description=sensor_cfg.get("description", ""),
                    displayName=sensor_cfg.get("display_name", DEFAULT_DISPLAY_NAMES[kind]),
                    available=sensor_cfg.get("available", True),
                )

            self._config.source = SensorSource(json_data.get("source", SensorSource.EMULATION.value).lower())
            self._config.delay = SensorDelay[json_data.get("delay", SensorDelay.NORMAL.name).upper()]

            serial_cfg = json_data.get("serial", {})
            self._config.serial = serialConfigData(
                port=serial_cfg.get("port", ""),
                baud=serial_cfg.get("baud", 115200),
            )

            refresh = json_data.get("orientation_refresh", "accelerometer").lower()
            if refresh not in ORIENTATION_REFRESH_POLICIES:
                raise ValueError(f"Invalid orientation_refresh: {refresh}")
            self._config.orientationRefresh = refresh

            placeholders = json_data.get("placeholders", {})
            defaults = placeholderConfigData()
            self._config.placeholders = placeholderConfigData(
                unavailable=placeholders.get("unavailable", defaults.unavailable),
                noData=placeholders.get("no_data", defaults.noData),
            )
            logger.info(f"Configuration loaded from {config_path}")

        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse configuration file: {e}")
            self._config = self._get_default_config()

        except (KeyError, ValueError) as e:
            logger.error(f"Invalid value in configuration file: {e}")
            self._config = self._get_default_config()

    @staticmethod
    def _get_default_config() -> configData:
        """Return default configuration: every sensor present, emulated feed."""
        return configData(
            sensors={
                kind: configSensorData(kind, description="", displayName=DEFAULT_DISPLAY_NAMES[kind], available=True)
                for kind in SensorKind
            }
        )

    def get_source(self) -> SensorSource:
        """Get the configured sample source."""
        return self._config.source

    def get_delay(self) -> SensorDelay:
        return self._config.delay

    def get_serial_settings(self) -> serialConfigData:
        return self._config.serial

    def get_orientation_refresh(self) -> str:
        return self._config.orientationRefresh

    def get_placeholders(self) -> placeholderConfigData:
        return self._config.placeholders

    def get_sensor_config(self, kind: SensorKind) -> configSensorData:
        """Get configuration for a specific sensor kind."""
        return self._config.sensors[kind]

    def is_sensor_available(self, kind: SensorKind) -> bool:
        """Check whether the device has hardware for this sensor kind."""
        cfg = self._config.sensors.get(kind)
        return cfg is not None and cfg.available is True

    def get_all_sensors(self) -> Dict[SensorKind, configSensorData]:
        """Get all sensor configurations."""
        return dict(self._config.sensors)

    def get_available_sensors(self) -> Dict[SensorKind, configSensorData]:
        """Get only sensors with hardware backing."""
        return {kind: cfg for kind, cfg in self._config.sensors.items() if cfg.available is True}

    def reload_config(self):
        """Reload configuration from file."""
        self.load_config()
        logger.info("Configuration reloaded")


# Global singleton instance
config_loader = ConfigLoader()
