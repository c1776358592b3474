from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import FrozenSet


_DEVICE_SECRETS_ENV = "DEVICE_SHARED_SECRETS"
_LOG_LEVEL_ENV = "LOG_LEVEL"

_DEFAULT_DEVICE_SECRETS = (
    "secret-ABC-123-XYZ-001",
    "secret-ABC-123-XYZ-002",
    "secret-ABC-123-XYZ-003",
    "secret-ABC-123-XYZ-004",
    "secret-ABC-123-XYZ-005",
)


@dataclass(frozen=True)
class Settings:
    device_secrets: FrozenSet[str]
    log_level: str


def _read_secrets(default: tuple[str, ...]) -> FrozenSet[str]:
    value = os.getenv(_DEVICE_SECRETS_ENV)
    if value is None:
        return frozenset(default)
    secrets = {part.strip() for part in value.split(",")}
    secrets.discard("")
    return frozenset(secrets) if secrets else frozenset(default)


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings(
        device_secrets=_read_secrets(_DEFAULT_DEVICE_SECRETS),
        log_level=_read_log_level("INFO"),
    )
