"""Adapter interfaces."""

from __future__ import annotations

from typing import Protocol

from btconnect.core.model import Device, SystemStatus


class BluetoothAdapter(Protocol):
    def list_devices(self) -> list[Device]:
        """Return paired devices in the order the system reports them."""

    def get_status(self) -> SystemStatus:
        """Return power, audio output, discoverable state and devices."""

    def connect(self, address: str) -> None:
        """Connect the device with ``address``."""

    def disconnect(self, address: str) -> None:
        """Disconnect the device with ``address``."""
