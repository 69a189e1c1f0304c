"""Core data models used across adapter, service, and CLI."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Device:
    name: str
    address: str
    connected: bool = False
    paired: bool = True


@dataclass(frozen=True)
class MatchResult:
    devices: tuple[Device, ...]
    mode: str

    def __len__(self) -> int:
        return len(self.devices)

    def __iter__(self):
        return iter(self.devices)


@dataclass(frozen=True)
class SystemStatus:
    powered: bool
    audio_output: str | None
    discoverable: bool
    devices: tuple[Device, ...]
    warnings: tuple[str, ...] = field(default=())


@dataclass(frozen=True)
class ActionAck:
    action: str
    device: Device


@dataclass(frozen=True)
class Settings:
    executable: str = "blueutil"
    audio_command: tuple[str, ...] = ("SwitchAudioSource", "-c", "-t", "output")
    fuzzy_threshold: float = 0.6
    color: bool = True
