"""Exceptions raised by battery-notify."""


class BatteryNotifyError(Exception):
    """Base class for all battery-notify errors."""


class ConfigurationError(BatteryNotifyError, ValueError):
    """Thresholds are out of range or in the wrong order."""


class ProviderError(BatteryNotifyError):
    """The battery provider could not start or enumerate batteries."""


class BatteryNotFound(BatteryNotifyError):
    """No enumerated battery carries the requested serial number."""

    def __init__(self, serial: str):
        super().__init__(f"Unable to find a battery with serial {serial!r}")
        self.serial = serial


class BatteryAccessError(BatteryNotifyError):
    """A battery was found but its data could not be read."""


class StateWriteError(BatteryNotifyError):
    """The last seen percentage could not be persisted."""


class NotificationError(BatteryNotifyError):
    """The desktop notification could not be displayed."""
