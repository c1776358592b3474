"""Domain models shared across services."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class AlertKind(str, Enum):
    """Closed set of alert categories the engine can raise."""

    humidity_out_of_range = "HumidityOutOfRange"
    temperature_out_of_range = "TemperatureOutOfRange"
    firmware_invalid = "FirmwareInvalid"


@dataclass(frozen=True, slots=True)
class Reading:
    """A single sensor sample submitted by a device."""

    temperature: float
    humidity: float
    firmware_version: str


@dataclass(frozen=True, slots=True)
class Alert:
    """A rule violation detected on a reading."""

    kind: AlertKind
    message: str
