"""Rule evaluation for incoming device readings."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Callable, Iterable, List, Optional, Sequence

from models.readings import Alert, AlertKind, Reading
from services.firmware import is_valid_firmware_version

logger = logging.getLogger(__name__)

Rule = Callable[[Reading], Optional[Alert]]

HUMIDITY_MIN = 0.0
HUMIDITY_MAX = 100.0
TEMPERATURE_MIN = -10.0
TEMPERATURE_MAX = 50.0


def check_humidity(reading: Reading) -> Optional[Alert]:
    if reading.humidity < HUMIDITY_MIN or reading.humidity > HUMIDITY_MAX:
        return Alert(AlertKind.humidity_out_of_range, "Humidity sensor is out of range.")
    return None


def check_temperature(reading: Reading) -> Optional[Alert]:
    if reading.temperature < TEMPERATURE_MIN or reading.temperature > TEMPERATURE_MAX:
        return Alert(AlertKind.temperature_out_of_range, "Temperature sensor is out of range.")
    return None


def check_firmware(reading: Reading) -> Optional[Alert]:
    if not is_valid_firmware_version(reading.firmware_version):
        return Alert(
            AlertKind.firmware_invalid,
            "The firmware value does not match semantic versioning format.",
        )
    return None


DEFAULT_RULES: tuple[Rule, ...] = (check_humidity, check_temperature, check_firmware)


class AlertService:
    """Applies a fixed, ordered set of independent rules to a reading.

    Holds no mutable state, so a single instance can serve concurrent requests.
    Alerts are returned in rule order.
    """

    def __init__(self, rules: Sequence[Rule] = DEFAULT_RULES) -> None:
        self._rules: tuple[Rule, ...] = tuple(rules)

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    def evaluate(self, reading: Reading) -> List[Alert]:
        alerts = [alert for alert in (rule(reading) for rule in self._rules) if alert is not None]
        logger.debug(
            "Evaluated reading",
            extra={
                "temperature": reading.temperature,
                "humidity": reading.humidity,
                "firmware_version": reading.firmware_version,
                "alert_count": len(alerts),
                "alert_kinds": ",".join(alert.kind.value for alert in alerts) or None,
            },
        )
        return alerts

    @staticmethod
    def first_of_kind(alerts: Iterable[Alert], kind: AlertKind) -> Optional[Alert]:
        return next((alert for alert in alerts if alert.kind is kind), None)


@lru_cache
def build_default_alert_service() -> AlertService:
    """Factory that wires the engine with the built-in rules."""
    return AlertService(rules=DEFAULT_RULES)
