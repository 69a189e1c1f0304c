"""Domain-specific errors for btconnect."""

from __future__ import annotations


class BtconnectError(Exception):
    """Base error for btconnect."""


class ConfigError(BtconnectError):
    """Raised when the configuration file cannot be read or fails validation."""


class AdapterError(BtconnectError):
    """Base error for the external Bluetooth-control executable."""


class AdapterUnavailable(AdapterError):
    """Raised when the Bluetooth-control executable is not installed."""


class AdapterQueryError(AdapterError):
    """Raised when a query fails or its output cannot be parsed."""


class DeviceSelectionError(BtconnectError):
    """Raised when a search string cannot be resolved to a single device."""


class NoMatchFound(DeviceSelectionError):
    """Raised when no paired device matches the search string."""


class InvalidSelection(DeviceSelectionError):
    """Raised when the disambiguation answer is not a listed number."""


class ActionError(BtconnectError):
    """Base error for connect/disconnect failures."""


class DeviceNotReachable(ActionError):
    """Raised when the executable reports the device could not be reached."""


class ExternalToolFailure(ActionError):
    """Raised when the executable exits non-zero for any other reason."""

    def __init__(self, exit_code: int, message: str) -> None:
        self.exit_code = exit_code
        self.message = message
        super().__init__(f"exit code {exit_code}: {message}" if message else f"exit code {exit_code}")
