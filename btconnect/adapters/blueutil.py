"""Adapter around the ``blueutil`` command-line tool."""

from __future__ import annotations

import logging
import re
import subprocess
from collections.abc import Sequence
from pathlib import PurePath

from btconnect.core.errors import (
    AdapterError,
    AdapterQueryError,
    AdapterUnavailable,
    DeviceNotReachable,
    ExternalToolFailure,
)
from btconnect.core.model import Device, Settings, SystemStatus

LOGGER = logging.getLogger(__name__)

_DEVICE_LINE_RE = re.compile(
    r"^address:\s*(?P<address>[0-9A-F]{2}(?:[-:][0-9A-F]{2}){5})\s*(?:,(?P<rest>.*))?$",
    re.IGNORECASE,
)
_NAME_RE = re.compile(r'name:\s*"(?P<name>[^"]*)"(?=,|$)')
_UNREACHABLE_RE = re.compile(
    r"not found|timed? ?out|unreachable|failed to connect|not available|page timeout",
    re.IGNORECASE,
)
_INSTALL_HINTS = {
    "blueutil": "Install it with 'brew install blueutil'.",
    "SwitchAudioSource": "Install it with 'brew install switchaudio-osx'.",
}


def parse_device_line(line: str) -> Device | None:
    """Parse one ``blueutil --paired`` line, or return None if it is not a device line."""
    match = _DEVICE_LINE_RE.match(line.strip())
    if not match:
        return None

    rest = match.group("rest") or ""
    name_match = _NAME_RE.search(rest)
    name = name_match.group("name") if name_match else ""
    flags_part = rest[: name_match.start()] if name_match else rest
    flags = [flag.strip() for flag in flags_part.split(",") if flag.strip()]

    connected = any(flag == "connected" or flag.startswith("connected ") for flag in flags)
    paired = "paired" in flags
    return Device(
        name=name,
        address=match.group("address").lower(),
        connected=connected,
        paired=paired,
    )


def parse_device_list(output: str) -> list[Device]:
    devices: list[Device] = []
    skipped = 0
    for line in output.splitlines():
        if not line.strip():
            continue
        device = parse_device_line(line)
        if device is None:
            skipped += 1
            LOGGER.debug("Skipping unrecognized line: %r", line)
            continue
        devices.append(device)

    if not devices and skipped:
        raise AdapterQueryError(
            f"Could not parse any paired device from blueutil output ({skipped} unrecognized lines)"
        )
    return devices


def parse_flag(output: str, *, query: str) -> bool:
    value = output.strip()
    if value == "1":
        return True
    if value == "0":
        return False
    raise AdapterQueryError(f"Unexpected {query} state from blueutil: {value!r}")


class BlueutilAdapter:
    def __init__(self, settings: Settings | None = None) -> None:
        settings = settings or Settings()
        self.executable = settings.executable
        self.audio_command = tuple(settings.audio_command)

    def list_devices(self) -> list[Device]:
        result = self._query(["--paired"], query="paired devices")
        return parse_device_list(result.stdout)

    def power_state(self) -> bool:
        result = self._query(["--power"], query="power")
        return parse_flag(result.stdout, query="power")

    def discoverable_state(self) -> bool:
        result = self._query(["--discoverable"], query="discoverable")
        return parse_flag(result.stdout, query="discoverable")

    def audio_output(self) -> str | None:
        result = _run(self.audio_command)
        if result.returncode != 0:
            raise AdapterQueryError(
                f"Audio output query failed: {_describe_failure(self.audio_command, result)}"
            )
        name = result.stdout.strip()
        return name or None

    def get_status(self) -> SystemStatus:
        powered = self.power_state()

        warnings: list[str] = []
        try:
            audio_output = self.audio_output()
        except AdapterError as exc:
            LOGGER.debug("Audio output query failed: %s", exc)
            warnings.append(f"Audio output unavailable: {exc}")
            audio_output = None

        discoverable = self.discoverable_state()
        devices = self.list_devices()
        return SystemStatus(
            powered=powered,
            audio_output=audio_output,
            discoverable=discoverable,
            devices=tuple(devices),
            warnings=tuple(warnings),
        )

    def connect(self, address: str) -> None:
        self._act("--connect", address)

    def disconnect(self, address: str) -> None:
        self._act("--disconnect", address)

    def _query(self, args: Sequence[str], *, query: str) -> subprocess.CompletedProcess[str]:
        cmd = [self.executable, *args]
        result = _run(cmd)
        if result.returncode != 0:
            raise AdapterQueryError(
                f"Querying {query} failed: {_describe_failure(cmd, result)}"
            )
        return result

    def _act(self, flag: str, address: str) -> None:
        cmd = [self.executable, flag, address]
        result = _run(cmd)
        if result.returncode == 0:
            return

        message = (result.stderr or result.stdout or "").strip()
        if _UNREACHABLE_RE.search(message):
            raise DeviceNotReachable(f"Device {address} is not reachable: {message}")
        raise ExternalToolFailure(result.returncode, message)


def _run(cmd: Sequence[str]) -> subprocess.CompletedProcess[str]:
    LOGGER.debug("Running %s", " ".join(cmd))
    try:
        return subprocess.run(
            list(cmd),
            check=False,
            capture_output=True,
            text=True,
        )
    except FileNotFoundError as exc:
        program = cmd[0]
        hint = _INSTALL_HINTS.get(PurePath(program).name, "Install it or set its path in the config file.")
        raise AdapterUnavailable(f"'{program}' was not found on PATH. {hint}") from exc


def _describe_failure(cmd: Sequence[str], result: subprocess.CompletedProcess[str]) -> str:
    stderr = (result.stderr or "").strip()
    detail = f" -> {stderr}" if stderr else ""
    return f"{' '.join(cmd)} exited with {result.returncode}{detail}"
