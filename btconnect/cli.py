"""Typer CLI entrypoint."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

import typer

from btconnect import __version__, render
from btconnect.core.config import load_settings
from btconnect.core.errors import BtconnectError
from btconnect.core.model import Device
from btconnect.core.service import BluetoothService
from btconnect.prompt import disambiguate

app = typer.Typer(help="Connect and inspect paired Bluetooth devices by fuzzy name")


@dataclass
class CliState:
    config: Path | None = None
    color: bool = True


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"btconnect {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    config: Path | None = typer.Option(None, "--config", help="Path to a YAML config file"),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log subprocess calls"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = CliState(config=config, color=not no_color)


def _state(ctx: typer.Context) -> CliState:
    return ctx.obj if isinstance(ctx.obj, CliState) else CliState()


def _build_service(state: CliState) -> tuple[BluetoothService, bool]:
    settings = load_settings(state.config)
    color = state.color and settings.color
    return BluetoothService(settings=settings), color


def _chooser(color: bool):
    def choose(matches: Sequence[Device]) -> Device:
        return disambiguate(matches, color=color)

    return choose


@app.command("status")
def show_status(ctx: typer.Context) -> None:
    """Show Bluetooth power, discoverable state, audio output, and paired devices."""
    state = _state(ctx)
    color = state.color
    try:
        service, color = _build_service(state)
        status = service.get_status()
        for warning in status.warnings:
            render.warning(warning, color=color)
        for line in render.status_lines(status, color=color):
            typer.echo(line)
    except BtconnectError as exc:
        render.error(str(exc), color=color)
        raise typer.Exit(code=1) from None


@app.command("list")
def list_devices(ctx: typer.Context) -> None:
    """List all paired Bluetooth devices."""
    state = _state(ctx)
    color = state.color
    try:
        service, color = _build_service(state)
        for line in render.device_list(service.list_devices(), color=color):
            typer.echo(line)
    except BtconnectError as exc:
        render.error(str(exc), color=color)
        raise typer.Exit(code=1) from None


@app.command("connect")
def connect(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Device name or part of it"),
) -> None:
    """Connect to a paired Bluetooth device by name."""
    state = _state(ctx)
    color = state.color
    try:
        service, color = _build_service(state)
        device = service.select_device(name, _chooser(color))
        typer.echo(f"Connecting to {device.name}...")
        ack = service.connect_device(device)
        typer.echo(render.ack_line(ack, color=color))
    except BtconnectError as exc:
        render.error(str(exc), color=color)
        raise typer.Exit(code=1) from None


@app.command("disconnect")
def disconnect(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Device name or part of it"),
) -> None:
    """Disconnect a paired Bluetooth device by name."""
    state = _state(ctx)
    color = state.color
    try:
        service, color = _build_service(state)
        device = service.select_device(name, _chooser(color))
        typer.echo(f"Disconnecting from {device.name}...")
        ack = service.disconnect_device(device)
        typer.echo(render.ack_line(ack, color=color))
    except BtconnectError as exc:
        render.error(str(exc), color=color)
        raise typer.Exit(code=1) from None


def run() -> None:
    app()


if __name__ == "__main__":
    run()
