"""
Desktop notifications through libnotify (works with mako, dunst, GNOME, ...).
"""

import logging

import gi

gi.require_version("Notify", "0.7")
from gi.repository import GLib, Notify

from .errors import NotificationError
from .models import Notification

LOGGER = logging.getLogger(__name__)

APP_NAME = "bn"


class LibnotifyNotifier:
    """Shows Notification objects on the freedesktop notification service."""

    def __init__(self, app_name: str = APP_NAME):
        self.app_name = app_name
        if not Notify.is_initted() and not Notify.init(app_name):
            raise NotificationError("Unable to initialise libnotify")

    def show(self, notification: Notification):
        notif = Notify.Notification.new(notification.summary, notification.body, None)
        notif.set_urgency(getattr(Notify.Urgency, notification.urgency.name))
        if notification.sound:
            notif.set_hint("sound-name", GLib.Variant("s", notification.sound))
        if notification.timeout is not None:
            notif.set_timeout(int(notification.timeout * 1000))

        try:
            notif.show()
        except GLib.Error as e:
            raise NotificationError(f"Failed to show notification: {e.message}") from e
        LOGGER.debug("Notification shown: %s", notification.body)
