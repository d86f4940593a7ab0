"""
Battery Notify - desktop notifications when the battery runs low.

This package provides:
- Threshold crossing detection against the previous run's percentage
- A tiny state file so each crossing notifies only once
- Battery enumeration through Linux sysfs
- Notifications through libnotify
"""

__version__ = "1.0.0"

from .errors import (
    BatteryNotifyError,
    ConfigurationError,
    ProviderError,
    BatteryNotFound,
    BatteryAccessError,
    StateWriteError,
    NotificationError,
)
from .models import Alert, BatteryReading, Notification, Thresholds, Urgency
from .monitor import ThresholdMonitor, build_notification, evaluate
from .state import FileStateStore, MemoryStateStore, STATE_FILE_NAME

__all__ = [
    "BatteryNotifyError",
    "ConfigurationError",
    "ProviderError",
    "BatteryNotFound",
    "BatteryAccessError",
    "StateWriteError",
    "NotificationError",
    "Alert",
    "BatteryReading",
    "Notification",
    "Thresholds",
    "Urgency",
    "ThresholdMonitor",
    "build_notification",
    "evaluate",
    "FileStateStore",
    "MemoryStateStore",
    "STATE_FILE_NAME",
]
