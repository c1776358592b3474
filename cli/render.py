from __future__ import annotations

from typing import Any, Dict, Iterable, List

import typer


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def echo_key_values(pairs: Iterable[tuple[str, Any]]) -> None:
    for key, value in pairs:
        typer.echo(f"{key}: {value}")


def render_alerts(alerts: List[Dict[str, Any]]) -> None:
    echo_heading("Alerts")
    if not alerts:
        typer.secho("No alerts raised.", fg=typer.colors.GREEN)
        return
    for alert in alerts:
        typer.secho(
            f"  - {alert.get('alertType')}: {alert.get('message')}",
            fg=typer.colors.YELLOW,
        )


def render_firmware(payload: Dict[str, Any]) -> None:
    echo_heading("Firmware Version")
    valid = bool(payload.get("valid"))
    echo_key_values(
        [
            ("version", payload.get("version")),
            ("status", "valid" if valid else "invalid"),
        ]
    )
