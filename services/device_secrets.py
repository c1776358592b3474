"""Shared-secret gate in front of reading evaluation."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable, Optional

from settings import get_settings


class DeviceSecretValidator:

    def __init__(self, allowed_secrets: Iterable[str]) -> None:
        self._allowed = frozenset(secret for secret in allowed_secrets if secret)

    def validate(self, secret: Optional[str]) -> bool:
        if not secret:
            return False
        return secret in self._allowed


@lru_cache
def build_default_secret_validator() -> DeviceSecretValidator:
    settings = get_settings()
    return DeviceSecretValidator(settings.device_secrets)
