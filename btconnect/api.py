"""Stable public API for scripting on top of btconnect.

This module is the supported integration surface for third-party callers.
Avoid importing from private/internal modules unless intentionally depending on
non-stable internals.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from btconnect.adapters.base import BluetoothAdapter
from btconnect.core.config import load_settings
from btconnect.core.errors import (
    ActionError,
    AdapterError,
    AdapterQueryError,
    AdapterUnavailable,
    BtconnectError,
    ConfigError,
    DeviceNotReachable,
    DeviceSelectionError,
    ExternalToolFailure,
    InvalidSelection,
    NoMatchFound,
)
from btconnect.core.model import ActionAck, Device, MatchResult, Settings, SystemStatus
from btconnect.core.service import BluetoothService, Chooser

__all__ = [
    "ActionError",
    "AdapterError",
    "AdapterQueryError",
    "AdapterUnavailable",
    "BtconnectError",
    "ConfigError",
    "DeviceNotReachable",
    "DeviceSelectionError",
    "ExternalToolFailure",
    "InvalidSelection",
    "NoMatchFound",
    "ActionAck",
    "Device",
    "MatchResult",
    "Settings",
    "SystemStatus",
    "BluetoothAdapter",
    "Client",
]


def _refuse_ambiguous(matches: Sequence[Device]) -> Device:
    names = ", ".join(f"{d.address} ({d.name})" for d in matches)
    raise DeviceSelectionError(f"Multiple candidate devices found: {names}. Use a more specific name.")


class Client:
    """Public client for querying and controlling paired devices.

    Non-interactive by default: an ambiguous name raises
    ``DeviceSelectionError`` unless a ``choose`` callable is given.
    """

    def __init__(
        self,
        *,
        adapter: BluetoothAdapter | None = None,
        settings: Settings | None = None,
        config_path: Path | None = None,
    ) -> None:
        if settings is None and config_path is not None:
            settings = load_settings(config_path)
        self._service = BluetoothService(adapter=adapter, settings=settings)

    @property
    def settings(self) -> Settings:
        return self._service.settings

    def list_devices(self) -> list[Device]:
        return self._service.list_devices()

    def get_status(self) -> SystemStatus:
        return self._service.get_status()

    def resolve(self, query: str) -> MatchResult:
        return self._service.resolve(query)

    def connect(self, query: str, *, choose: Chooser | None = None) -> ActionAck:
        return self._service.connect(query, choose or _refuse_ambiguous)

    def disconnect(self, query: str, *, choose: Chooser | None = None) -> ActionAck:
        return self._service.disconnect(query, choose or _refuse_ambiguous)
