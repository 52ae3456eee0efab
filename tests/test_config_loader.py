import pytest

from sensor_core.config_loader import ConfigLoader, config_loader
from sensor_core.models.sensor_enum import SensorDelay, SensorKind, SensorSource


class TestConfigLoader:
    """Test configuration loading and access."""

    def test_config_loads(self):
        """Test that the project config loads with every sensor kind."""
        sensors = config_loader.get_all_sensors()
        assert isinstance(sensors, dict)
        assert set(sensors.keys()) == set(SensorKind)

    def test_project_defaults(self):
        """Test the shipped config values."""
        assert config_loader.get_source() == SensorSource.EMULATION
        assert config_loader.get_delay() == SensorDelay.NORMAL
        assert config_loader.get_orientation_refresh() == "accelerometer"
        assert config_loader.get_placeholders().unavailable == "Sensor not available"
        assert config_loader.get_placeholders().noData == "--"

    def test_display_names(self):
        cfg = config_loader.get_sensor_config(SensorKind.MAGNETIC_FIELD)
        assert cfg.displayName == "Magnetic field"

    def test_config_singleton(self):
        """Test that ConfigLoader is a singleton."""
        assert ConfigLoader() is config_loader

    def test_unavailable_sensor(self, write_config):
        """A sensor marked unavailable is excluded from available sensors."""
        write_config({"sensors": {"PROXIMITY": {"available": False}}})
        assert config_loader.is_sensor_available(SensorKind.PROXIMITY) is False
        assert SensorKind.PROXIMITY not in config_loader.get_available_sensors()
        # Kinds missing from the file keep their defaults
        assert config_loader.is_sensor_available(SensorKind.ACCELEROMETER) is True

    def test_aliases_accepted_as_keys(self, write_config):
        write_config({"sensors": {"acc": {"available": False, "display_name": "Accel"}}})
        cfg = config_loader.get_sensor_config(SensorKind.ACCELEROMETER)
        assert cfg.available is False
        assert cfg.displayName == "Accel"

    def test_full_config(self, write_config):
        write_config({
            "source": "serial",
            "delay": "game",
            "orientation_refresh": "any",
            "serial": {"port": "/dev/ttyUSB0", "baud": 9600},
            "placeholders": {"unavailable": "N/A", "no_data": "..."},
        })
        assert config_loader.get_source() == SensorSource.SERIAL
        assert config_loader.get_delay() == SensorDelay.GAME
        assert config_loader.get_orientation_refresh() == "any"
        assert config_loader.get_serial_settings().port == "/dev/ttyUSB0"
        assert config_loader.get_serial_settings().baud == 9600
        assert config_loader.get_placeholders().unavailable == "N/A"
        assert config_loader.get_placeholders().noData == "..."

    @pytest.mark.parametrize("data", [
        {"sensors": {"BAROMETER": {}}},
        {"delay": "SLOW"},
        {"source": "bluetooth"},
        {"orientation_refresh": "gyroscope"},
    ])
    def test_invalid_values_fall_back_to_defaults(self, write_config, data):
        write_config(data)
        assert config_loader.get_source() == SensorSource.EMULATION
        assert config_loader.get_delay() == SensorDelay.NORMAL
        assert all(config_loader.is_sensor_available(kind) for kind in SensorKind)

    def test_malformed_json_falls_back_to_defaults(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        config_loader.load_config(path)
        assert config_loader.get_source() == SensorSource.EMULATION
        assert len(config_loader.get_available_sensors()) == len(SensorKind)

    def test_missing_file_uses_defaults(self, tmp_path):
        config_loader.load_config(tmp_path / "missing.json")
        assert config_loader.get_serial_settings().port == ""
        assert config_loader.get_orientation_refresh() == "accelerometer"
