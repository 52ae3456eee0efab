"""
Tests for the HTTP API. Services run with the external source, so every
sample comes from the tests themselves.
"""
import pytest
from fastapi.testclient import TestClient

from main import Settings, app, settings
from sensor_core.models.sensor_enum import SensorKind, SensorSource

VALID_KINDS = [k.name for k in SensorKind]


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(settings, "sensor_source", SensorSource.EXTERNAL)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def client_without_accelerometer(monkeypatch, write_config):
    write_config({"sensors": {"ACCELEROMETER": {"available": False}}})
    monkeypatch.setattr(settings, "sensor_source", SensorSource.EXTERNAL)
    with TestClient(app) as client:
        yield client


def post(client, kind: str, values, timestamp=None):
    body = {"values": values}
    if timestamp is not None:
        body["timestamp"] = timestamp
    return client.post(f"/api/sensor/{kind}/data", json=body)


class TestMeta:

    def test_root(self, client) -> None:
        response = client.get("/")
        assert response.status_code == 200
        assert response.json() == {"message": settings.app_name}

    def test_health(self, client) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    @pytest.mark.parametrize("value", ["SERIAL", "serial", " Serial "])
    def test_source_env_override_any_case(self, monkeypatch, value: str) -> None:
        monkeypatch.setenv("SENSOR_SOURCE", value)
        assert Settings().sensor_source == SensorSource.SERIAL


class TestSensorList:
    """Test GET /api/sensor"""

    def test_lists_every_kind(self, client) -> None:
        response = client.get("/api/sensor")
        assert response.status_code == 200
        sensors = response.json()["list"]
        assert [s["kind"] for s in sensors] == VALID_KINDS
        by_kind = {s["kind"]: s for s in sensors}
        assert by_kind["ROTATION_VECTOR"]["components"] == 4
        assert by_kind["PROXIMITY"]["components"] == 1
        assert all(s["available"] for s in sensors)

    def test_reports_missing_hardware(self, client_without_accelerometer) -> None:
        response = client_without_accelerometer.get("/api/sensor")
        by_kind = {s["kind"]: s for s in response.json()["list"]}
        assert by_kind["ACCELEROMETER"]["available"] is False
        assert by_kind["GYROSCOPE"]["available"] is True


class TestSensorData:
    """Test GET/POST /api/sensor/{kind}/data"""

    def test_post_then_get(self, client) -> None:
        response = post(client, "GYROSCOPE", [0.1, 0.2, 0.3], timestamp=12.5)
        assert response.status_code == 204

        response = client.get("/api/sensor/GYROSCOPE/data")
        assert response.status_code == 200
        data = response.json()
        assert data["kind"] == "GYROSCOPE"
        assert data["timestamp"] == 12.5
        assert data["values"] == [0.1, 0.2, 0.3]

    def test_latest_wins(self, client) -> None:
        post(client, "PROXIMITY", [5.0])
        post(client, "PROXIMITY", [0.0])
        assert client.get("/api/sensor/PROXIMITY/data").json()["values"] == [0.0]

    def test_case_insensitive_and_aliases(self, client) -> None:
        assert post(client, "acc", [0.0, 0.0, 9.81]).status_code == 204
        response = client.get("/api/sensor/accelerometer/data")
        assert response.status_code == 200
        assert response.json()["kind"] == "ACCELEROMETER"

    @pytest.mark.parametrize("kind", VALID_KINDS)
    def test_no_reading_yet(self, client, kind: str) -> None:
        response = client.get(f"/api/sensor/{kind}/data")
        assert response.status_code == 409

    def test_invalid_kind(self, client) -> None:
        response = client.get("/api/sensor/BAROMETER/data")
        assert response.status_code == 400
        assert "Invalid sensor kind" in response.json()["detail"]
        assert post(client, "BAROMETER", [1.0]).status_code == 400

    def test_wrong_component_count(self, client) -> None:
        response = post(client, "ACCELEROMETER", [0.0, 9.81])
        assert response.status_code == 400
        assert "expects 3 components" in response.json()["detail"]

    def test_extra_components_dropped(self, client) -> None:
        assert post(client, "ROTATION_VECTOR", [0.0, 0.0, 0.38, 0.92, 0.1]).status_code == 204
        assert client.get("/api/sensor/ROTATION_VECTOR/data").json()["values"] == [0.0, 0.0, 0.38, 0.92]

    def test_unavailable_sensor(self, client_without_accelerometer) -> None:
        client = client_without_accelerometer
        assert client.get("/api/sensor/ACCELEROMETER/data").status_code == 503
        assert post(client, "ACCELEROMETER", [0.0, 0.0, 9.81]).status_code == 503

    def test_post_without_services(self) -> None:
        """Without the lifespan running, nothing accepts samples"""
        client = TestClient(app)
        assert post(client, "PROXIMITY", [1.0]).status_code == 409

    def test_get_without_services(self) -> None:
        client = TestClient(app)
        response = client.get("/api/sensor/PROXIMITY/data")
        assert response.status_code == 409
        assert response.json()["detail"] == "Sensor services are not running"


class TestOrientation:
    """Test GET /api/orientation"""

    def test_undefined_before_readings(self, client) -> None:
        response = client.get("/api/orientation")
        assert response.status_code == 409

    def test_flat_facing_north(self, client) -> None:
        post(client, "MAGNETIC_FIELD", [0.0, 22.0, -40.0])
        post(client, "ACCELEROMETER", [0.0, 0.0, 9.81])
        response = client.get("/api/orientation")
        assert response.status_code == 200
        data = response.json()
        assert data["azimuth"] == pytest.approx(0.0, abs=1.0)
        assert data["pitch"] == pytest.approx(0.0, abs=1.0)
        assert data["roll"] == pytest.approx(0.0, abs=1.0)

    def test_recomputed_on_accelerometer_only(self, client) -> None:
        post(client, "MAGNETIC_FIELD", [0.0, 22.0, -40.0])
        post(client, "ACCELEROMETER", [0.0, 0.0, 9.81])
        post(client, "MAGNETIC_FIELD", [-22.0, 0.0, -40.0])
        assert client.get("/api/orientation").json()["azimuth"] == pytest.approx(0.0, abs=1.0)
        post(client, "ACCELEROMETER", [0.0, 0.0, 9.81])
        assert client.get("/api/orientation").json()["azimuth"] == pytest.approx(90.0, abs=1.0)

    def test_degenerate_gravity(self, client) -> None:
        post(client, "MAGNETIC_FIELD", [0.0, 22.0, -40.0])
        post(client, "ACCELEROMETER", [0.0, 0.0, 0.0])
        assert client.get("/api/orientation").status_code == 409

    def test_missing_accelerometer(self, client_without_accelerometer) -> None:
        response = client_without_accelerometer.get("/api/orientation")
        assert response.status_code == 503
        assert "ACCELEROMETER" in response.json()["detail"]


class TestDisplay:
    """Test GET /api/display"""

    def test_placeholders_before_readings(self, client) -> None:
        labels = client.get("/api/display").json()["labels"]
        assert labels["acc_x"] == "--"
        assert labels["azimuth"] == "--"
        assert labels["prox"] == "--"

    def test_labels_follow_readings(self, client) -> None:
        post(client, "MAGNETIC_FIELD", [0.0, 22.0, -40.0])
        post(client, "ACCELEROMETER", [0.0, 0.0, 9.81])
        labels = client.get("/api/display").json()["labels"]
        assert labels["mag_z"] == "Magnetic field Z: -40.00 μT"
        assert labels["acc_z"] == "Accelerometer Z: 9.81 m/s²"
        assert labels["azimuth"] == "Azimuth: 0.00°"

    def test_missing_accelerometer(self, client_without_accelerometer) -> None:
        client = client_without_accelerometer
        post(client, "MAGNETIC_FIELD", [0.0, 22.0, -40.0])
        labels = client.get("/api/display").json()["labels"]
        for key in ("acc_x", "acc_y", "acc_z", "azimuth", "pitch", "roll"):
            assert labels[key] == "Sensor not available"
        assert labels["mag_x"] == "Magnetic field X: 0.00 μT"
