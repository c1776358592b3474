from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import typer

from cli.client import ApiClient
from cli.config import CLIConfig, load_config
from cli.render import render_alerts, render_firmware


@dataclass
class CLIState:
    config: CLIConfig
    client: ApiClient


app = typer.Typer(
    help="Utilities for interacting with the climate monitor service.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise typer.Exit(code=1)
    return state


@app.callback()
def main(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(
        None,
        "--base-url",
        "-b",
        help="Climate monitor API base URL (defaults to API_BASE_URL env or http://localhost:8000).",
    ),
    secret: Optional[str] = typer.Option(
        None,
        "--secret",
        "-s",
        help="Device shared secret (defaults to DEVICE_SHARED_SECRET env).",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="Seconds to wait for each HTTP request.",
    ),
) -> None:
    """Entry point for the CLI."""
    config = load_config(
        base_url=base_url,
        device_secret=secret,
        request_timeout=timeout,
    )
    client = ApiClient(config)
    ctx.obj = CLIState(config=config, client=client)
    ctx.call_on_close(client.close)


@app.command("evaluate")
def evaluate_command(
    ctx: typer.Context,
    temperature: float = typer.Option(..., "--temperature", "-t", help="Temperature reading."),
    humidity: float = typer.Option(..., "--humidity", help="Humidity reading (percent)."),
    firmware: str = typer.Option(..., "--firmware", "-f", help="Device firmware version."),
) -> None:
    """Submit a reading and display the alerts it raises."""
    state = _get_state(ctx)
    if state.config.device_secret is None:
        typer.secho(
            "No device secret configured; the request will likely be rejected.",
            fg=typer.colors.YELLOW,
            err=True,
        )
    alerts = state.client.evaluate_reading(temperature, humidity, firmware)
    render_alerts(alerts)


@app.command("firmware")
def firmware_command(
    ctx: typer.Context,
    version: str = typer.Argument(..., help="Firmware version string to check."),
) -> None:
    """Check whether a firmware version follows semantic versioning."""
    state = _get_state(ctx)
    payload = state.client.validate_firmware(version)
    render_firmware(payload)
    if not payload.get("valid"):
        raise typer.Exit(code=1)
