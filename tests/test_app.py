from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from services.alerts import build_default_alert_service
from services.device_secrets import build_default_secret_validator
from settings import get_settings

SECRET = "device-secret-1"
HEADERS = {"x-device-shared-secret": SECRET}


@pytest.fixture
def api_client(monkeypatch) -> Iterator[TestClient]:
    monkeypatch.setenv("DEVICE_SHARED_SECRETS", f"{SECRET},device-secret-2")
    get_settings.cache_clear()
    build_default_secret_validator.cache_clear()

    app = create_app()
    with TestClient(app) as client:
        yield client

    get_settings.cache_clear()
    build_default_secret_validator.cache_clear()


def _reading(temperature: float = 20.0, humidity: float = 50.0, firmware: str = "1.2.3") -> dict:
    return {"temperature": temperature, "humidity": humidity, "firmwareVersion": firmware}


def test_lifespan_clears_service_caches() -> None:
    app = create_app()

    with TestClient(app):
        service_during = build_default_alert_service()
        validator_during = build_default_secret_validator()
        assert service_during is build_default_alert_service()

    try:
        assert build_default_alert_service() is not service_during
        assert build_default_secret_validator() is not validator_during
    finally:
        build_default_alert_service.cache_clear()
        build_default_secret_validator.cache_clear()


def test_valid_reading_returns_empty_alert_list(api_client: TestClient) -> None:
    response = api_client.post("/readings/evaluate", json=_reading(), headers=HEADERS)

    assert response.status_code == 200
    assert response.json() == []


def test_out_of_range_sensors_return_alerts(api_client: TestClient) -> None:
    response = api_client.post(
        "/readings/evaluate",
        json=_reading(temperature=200, humidity=-1),
        headers=HEADERS,
    )

    assert response.status_code == 200
    assert response.json() == [
        {"alertType": "HumidityOutOfRange", "message": "Humidity sensor is out of range."},
        {"alertType": "TemperatureOutOfRange", "message": "Temperature sensor is out of range."},
    ]


def test_snake_case_firmware_field_is_accepted(api_client: TestClient) -> None:
    response = api_client.post(
        "/readings/evaluate",
        json={"temperature": 50, "humidity": 100, "firmware_version": "2.0.0-rc.1+build.7"},
        headers=HEADERS,
    )

    assert response.status_code == 200
    assert response.json() == []


def test_invalid_firmware_returns_validation_problem(api_client: TestClient) -> None:
    response = api_client.post(
        "/readings/evaluate",
        json=_reading(temperature=999, humidity=999, firmware="bad"),
        headers=HEADERS,
    )

    assert response.status_code == 400
    assert response.headers["content-type"].startswith("application/problem+json")
    body = response.json()
    assert body["status"] == 400
    assert body["title"] == "One or more validation errors occurred."
    assert body["errors"] == {
        "FirmwareVersion": ["The firmware value does not match semantic versioning format."]
    }


@pytest.mark.parametrize("headers", [{}, {"x-device-shared-secret": "unknown"}])
def test_rejected_secret_returns_unauthorized(api_client: TestClient, headers: dict) -> None:
    response = api_client.post("/readings/evaluate", json=_reading(), headers=headers)

    assert response.status_code == 401
    body = response.json()
    assert body["status"] == 401
    assert body["detail"] == "Device secret is not within the valid range."


def test_unauthorized_takes_precedence_over_firmware(api_client: TestClient) -> None:
    response = api_client.post(
        "/readings/evaluate",
        json=_reading(firmware="bad"),
        headers={"x-device-shared-secret": "nope"},
    )

    assert response.status_code == 401


def test_malformed_body_is_rejected_before_evaluation(api_client: TestClient) -> None:
    response = api_client.post(
        "/readings/evaluate",
        json={"temperature": "hot", "humidity": 50},
        headers=HEADERS,
    )

    assert response.status_code == 422


@pytest.mark.parametrize(("version", "valid"), [("1.0.0", True), ("1.0", False), ("", False)])
def test_firmware_validation_endpoint(api_client: TestClient, version: str, valid: bool) -> None:
    response = api_client.get("/firmware/validate", params={"version": version})

    assert response.status_code == 200
    assert response.json() == {"version": version, "valid": valid}


def test_healthcheck(api_client: TestClient) -> None:
    response = api_client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
