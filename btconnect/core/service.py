"""Service layer used by the CLI and the public API."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from btconnect.adapters.base import BluetoothAdapter
from btconnect.adapters.blueutil import BlueutilAdapter
from btconnect.core.device_match import resolve
from btconnect.core.errors import NoMatchFound
from btconnect.core.model import ActionAck, Device, MatchResult, Settings, SystemStatus

LOGGER = logging.getLogger(__name__)

Chooser = Callable[[Sequence[Device]], Device]


class BluetoothService:
    def __init__(
        self,
        *,
        adapter: BluetoothAdapter | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.adapter = adapter or BlueutilAdapter(self.settings)

    def list_devices(self) -> list[Device]:
        return self.adapter.list_devices()

    def get_status(self) -> SystemStatus:
        return self.adapter.get_status()

    def resolve(self, query: str) -> MatchResult:
        return resolve(query, self.list_devices(), threshold=self.settings.fuzzy_threshold)

    def select_device(self, query: str, choose: Chooser) -> Device:
        """Resolve ``query`` to exactly one device.

        ``choose`` is only called when more than one device matches.
        """
        result = self.resolve(query)
        LOGGER.debug("Query %r matched %d device(s) by %s", query, len(result), result.mode)

        if not result.devices:
            raise NoMatchFound(f"No devices found matching '{query}'")
        if len(result.devices) == 1:
            return result.devices[0]
        return choose(result.devices)

    def connect_device(self, device: Device) -> ActionAck:
        self.adapter.connect(device.address)
        return ActionAck(action="connect", device=device)

    def disconnect_device(self, device: Device) -> ActionAck:
        self.adapter.disconnect(device.address)
        return ActionAck(action="disconnect", device=device)

    def connect(self, query: str, choose: Chooser) -> ActionAck:
        return self.connect_device(self.select_device(query, choose))

    def disconnect(self, query: str, choose: Chooser) -> ActionAck:
        return self.disconnect_device(self.select_device(query, choose))
