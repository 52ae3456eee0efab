"""Pytest configuration and fixtures for test suite."""
import json

import pytest

from sensor_core.config_loader import config_loader
from sensor_core.display.panel import display_panel
from sensor_core.event_hub import event_hub, init_event_hub
from sensor_core.processing.orientation_processor import orientation_processor
from sensor_core.services.sensor_manager import sensor_manager


@pytest.fixture(autouse=True)
def reset_global_services():
    """Make sure no global service is left running or subscribed between tests.

    The API tests start the services through the app lifespan; unit tests work
    on their own instances but share the global config and event hub.
    """
    yield

    if sensor_manager.running:
        sensor_manager.stop()
    if orientation_processor.running:
        orientation_processor.stop()
    if display_panel.running:
        display_panel.stop()
    init_event_hub(None)
    event_hub.unsubscribe_all()
    config_loader.reload_config()


@pytest.fixture
def write_config(tmp_path):
    """Write a config file and load it into the global config loader."""
    def _write(data: dict):
        path = tmp_path / "sensors_config.json"
        path.write_text(json.dumps(data))
        config_loader.load_config(path)
        return path
    return _write
