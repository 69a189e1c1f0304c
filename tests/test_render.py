from btconnect import render
from btconnect.core.model import ActionAck, Device, SystemStatus

DEVICE = Device(name="AirPods Max", address="90-9c-4a-44-55-66", connected=True)


def test_device_line_plain() -> None:
    assert render.device_line(DEVICE, color=False) == '90-9c-4a-44-55-66 Connected "AirPods Max"'


def test_connection_colors_differ() -> None:
    on = render.connection_label(True)
    off = render.connection_label(False)
    assert "\x1b[" in on and "\x1b[" in off
    assert on.split("m", 1)[0] != off.split("m", 1)[0]


def test_unnamed_device_placeholder() -> None:
    line = render.device_line(Device(name="", address="aa-bb-cc-dd-ee-ff"), color=False)
    assert "<unnamed>" in line


def test_status_lines_plain() -> None:
    status = SystemStatus(powered=False, audio_output=None, discoverable=True, devices=())
    lines = render.status_lines(status, color=False)
    assert lines == [
        "Bluetooth power: Off",
        "Discoverable:    Yes",
        "Audio output:    <unknown>",
        "No paired devices",
    ]


def test_ack_line() -> None:
    assert render.ack_line(ActionAck("disconnect", DEVICE), color=False) == (
        "Disconnected from AirPods Max (90-9c-4a-44-55-66)"
    )
