from __future__ import annotations

from typing import Any, Dict, List

import httpx
import typer

from cli.config import CLIConfig

SECRET_HEADER = "x-device-shared-secret"


class ApiClient:
    """Minimal HTTP client for the climate monitor service."""

    def __init__(self, config: CLIConfig) -> None:
        self._config = config
        headers = {SECRET_HEADER: config.device_secret} if config.device_secret else {}
        self._client = httpx.Client(
            base_url=config.base_url,
            timeout=config.request_timeout,
            headers=headers,
        )

    def close(self) -> None:
        self._client.close()

    def evaluate_reading(
        self, temperature: float, humidity: float, firmware_version: str
    ) -> List[Dict[str, Any]]:
        try:
            response = self._client.post(
                "/readings/evaluate",
                json={
                    "temperature": temperature,
                    "humidity": humidity,
                    "firmwareVersion": firmware_version,
                },
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            self._handle_http_error(exc)
        payload = response.json()
        if not isinstance(payload, list):
            raise typer.BadParameter("Unexpected response payload when evaluating reading.")
        return payload

    def validate_firmware(self, version: str) -> Dict[str, Any]:
        try:
            response = self._client.get("/firmware/validate", params={"version": version})
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            self._handle_http_error(exc)
        return response.json()

    @staticmethod
    def _extract_detail(response: httpx.Response) -> str | None:
        try:
            data = response.json()
        except ValueError:
            return response.text.strip() or None
        if not isinstance(data, dict):
            return None
        errors = data.get("errors")
        if isinstance(errors, dict) and errors:
            return "; ".join(
                f"{field}: {' '.join(messages)}" for field, messages in errors.items()
            )
        detail = data.get("detail")
        return str(detail) if detail else None

    @classmethod
    def _handle_http_error(cls, exc: httpx.HTTPStatusError) -> None:
        detail = cls._extract_detail(exc.response)
        message = (
            f"Request failed with status {exc.response.status_code}: {detail or 'no detail provided.'}"
        )
        typer.secho(message, fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
