from __future__ import annotations

from pathlib import Path

import pytest

from btconnect.api import Client, DeviceSelectionError, NoMatchFound
from btconnect.core.model import Device, SystemStatus

PRO = Device(name="AirPods Pro", address="90-9c-4a-11-22-33")
MAX = Device(name="AirPods Max", address="90-9c-4a-44-55-66", connected=True)


class FakeAdapter:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def list_devices(self) -> list[Device]:
        return [PRO, MAX]

    def get_status(self) -> SystemStatus:
        return SystemStatus(powered=True, audio_output=None, discoverable=False, devices=(PRO, MAX))

    def connect(self, address: str) -> None:
        self.calls.append(("connect", address))

    def disconnect(self, address: str) -> None:
        self.calls.append(("disconnect", address))


def test_public_client_lists_and_resolves() -> None:
    client = Client(adapter=FakeAdapter())
    assert client.list_devices() == [PRO, MAX]
    assert client.get_status().powered is True
    assert client.resolve("airpds max").devices[0] == MAX


def test_public_client_refuses_ambiguous_name_without_chooser() -> None:
    adapter = FakeAdapter()
    client = Client(adapter=adapter)
    with pytest.raises(DeviceSelectionError) as exc:
        client.connect("airpods")
    assert "Multiple candidate devices" in str(exc.value)
    assert adapter.calls == []


def test_public_client_uses_chooser() -> None:
    adapter = FakeAdapter()
    client = Client(adapter=adapter)
    ack = client.disconnect("airpods", choose=lambda matches: matches[0])
    assert ack.device == PRO
    assert adapter.calls == [("disconnect", PRO.address)]


def test_public_client_no_match() -> None:
    with pytest.raises(NoMatchFound):
        Client(adapter=FakeAdapter()).connect("keyboard")


def test_public_client_reads_config(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("fuzzy_threshold: 0.9\n", encoding="utf-8")
    client = Client(adapter=FakeAdapter(), config_path=path)
    assert client.settings.fuzzy_threshold == 0.9
