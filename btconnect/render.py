"""Colorized text formatting for devices and status."""

from __future__ import annotations

import typer

from btconnect.core.model import ActionAck, Device, SystemStatus


def _style(text: str, color: bool, **styles) -> str:
    return typer.style(text, **styles) if color else text


def connection_label(connected: bool, *, color: bool = True) -> str:
    if connected:
        return _style("Connected", color, fg=typer.colors.GREEN)
    return _style("Disconnected", color, fg=typer.colors.RED)


def device_line(device: Device, *, color: bool = True) -> str:
    name = device.name or "<unnamed>"
    return f"{device.address} {connection_label(device.connected, color=color)} \"{name}\""


def device_list(devices: tuple[Device, ...] | list[Device], *, color: bool = True) -> list[str]:
    if not devices:
        return ["No paired devices"]
    lines = ["Paired devices:"]
    lines.extend(f"  {device_line(device, color=color)}" for device in devices)
    return lines


def status_lines(status: SystemStatus, *, color: bool = True) -> list[str]:
    power = (
        _style("On", color, fg=typer.colors.GREEN, bold=True)
        if status.powered
        else _style("Off", color, fg=typer.colors.RED, bold=True)
    )
    discoverable = (
        _style("Yes", color, fg=typer.colors.YELLOW)
        if status.discoverable
        else _style("No", color, dim=True)
    )
    audio = status.audio_output or _style("<unknown>", color, dim=True)

    lines = [
        f"Bluetooth power: {power}",
        f"Discoverable:    {discoverable}",
        f"Audio output:    {audio}",
    ]
    lines.extend(device_list(status.devices, color=color))
    return lines


def ack_line(ack: ActionAck, *, color: bool = True) -> str:
    verb = "Connected to" if ack.action == "connect" else "Disconnected from"
    return _style(f"{verb} {ack.device.name} ({ack.device.address})", color, fg=typer.colors.GREEN)


def error(message: str, *, color: bool = True) -> None:
    typer.echo(_style(f"Error: {message}", color, fg=typer.colors.RED), err=True)


def warning(message: str, *, color: bool = True) -> None:
    typer.echo(_style(f"Warning: {message}", color, fg=typer.colors.YELLOW), err=True)
