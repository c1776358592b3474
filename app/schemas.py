"""Pydantic schemas for the HTTP API layer."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from models.readings import Alert, AlertKind, Reading


class DeviceReadingRequest(BaseModel):
    """Sensor values and metadata submitted by a device."""

    model_config = ConfigDict(populate_by_name=True)

    temperature: float = Field(..., description="Temperature in degrees Celsius.")
    humidity: float = Field(..., description="Relative humidity percentage.")
    firmware_version: str = Field(
        ...,
        alias="firmwareVersion",
        description="Firmware version reported by the device, expected in semantic versioning format.",
    )

    def to_reading(self) -> Reading:
        return Reading(
            temperature=self.temperature,
            humidity=self.humidity,
            firmware_version=self.firmware_version,
        )


class AlertResponse(BaseModel):
    """A single alert raised while evaluating a reading."""

    model_config = ConfigDict(populate_by_name=True)

    alert_type: AlertKind = Field(..., alias="alertType")
    message: str

    @classmethod
    def from_alert(cls, alert: Alert) -> "AlertResponse":
        return cls(alert_type=alert.kind, message=alert.message)


class FirmwareValidationResponse(BaseModel):
    version: str
    valid: bool


class ProblemDetails(BaseModel):
    """Problem document returned for rejected requests."""

    type: str = "about:blank"
    title: str
    status: int
    detail: Optional[str] = None
    errors: Optional[Dict[str, List[str]]] = None
