"""
Threshold monitor - decides when a declining battery deserves a notification.

A notification fires only on the run where the charge crosses a threshold
going down, relative to the percentage stored by the previous run. Staying
below a threshold does not notify again.
"""

import logging
from typing import Optional

from .errors import BatteryNotFound
from .models import Alert, Notification, Thresholds, Urgency

LOGGER = logging.getLogger(__name__)

SUMMARY = "Battery level"
CRITICAL_SOUND = "battery-caution"
WARN_TIMEOUT_S = 30


def _crossed(prev: int, curr: int, threshold: int) -> bool:
    return curr <= threshold < prev


def evaluate(prev: int, curr: int, thresholds: Thresholds) -> Optional[Alert]:
    """Return the alert to raise for a move from prev to curr percent, if any."""
    if _crossed(prev, curr, thresholds.critical):
        return Alert.CRITICAL
    if thresholds.warn is not None and _crossed(prev, curr, thresholds.warn):
        return Alert.WARNING
    return None


def build_notification(alert: Alert, percentage: int) -> Notification:
    if alert is Alert.CRITICAL:
        return Notification(
            SUMMARY,
            f"Battery level is CRITICAL ({percentage}%)",
            urgency=Urgency.CRITICAL,
            sound=CRITICAL_SOUND,
        )
    return Notification(
        SUMMARY,
        f"Battery level is low ({percentage}%)",
        urgency=Urgency.NORMAL,
        timeout=WARN_TIMEOUT_S,
    )


class ThresholdMonitor:
    """
    One check of a single battery against the configured thresholds.

    Args:
        provider: object with find(serial) returning a battery with read()
        notifier: object with show(notification)
        store: object with load() and save(percentage)
        thresholds: Thresholds to compare against
    """

    def __init__(self, provider, notifier, store, thresholds: Thresholds, logger=None):
        self.provider = provider
        self.notifier = notifier
        self.store = store
        self.thresholds = thresholds
        self.logger = logger or LOGGER

    def check(self, serial: str) -> Optional[Alert]:
        prev = self.store.load()

        battery = self.provider.find(serial)
        if battery is None:
            raise BatteryNotFound(serial)

        reading = battery.read()
        curr = reading.percentage

        # Stored even when the notification below fails
        self.store.save(curr)

        if reading.charging:
            self.logger.debug("Battery %s is charging", serial)

        print(f"prev: {prev}, curr: {curr}")

        alert = evaluate(prev, curr, self.thresholds)
        if alert is not None:
            self.logger.debug("Threshold crossed: %s", alert.value)
            self.notifier.show(build_notification(alert, curr))
        return alert
