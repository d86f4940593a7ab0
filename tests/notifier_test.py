import importlib.util
import unittest
from unittest import mock

from battery_notify.errors import NotificationError
from battery_notify.models import Notification, Urgency

HAS_GI = importlib.util.find_spec("gi") is not None


@unittest.skipUnless(HAS_GI, "PyGObject is not installed")
class TestLibnotifyNotifier(unittest.TestCase):

    def setUp(self):
        try:
            from battery_notify import notifier
        except (ImportError, ValueError) as e:
            self.skipTest(f"libnotify typelib unavailable: {e}")
        self.module = notifier
        patcher = mock.patch.object(notifier, "Notify")
        self.Notify = patcher.start()
        self.addCleanup(patcher.stop)
        self.Notify.is_initted.return_value = False
        self.Notify.init.return_value = True
        self.notif = self.Notify.Notification.new.return_value

    def test_critical(self):
        self.module.LibnotifyNotifier().show(Notification(
            "Battery level", "Battery level is CRITICAL (8%)",
            urgency=Urgency.CRITICAL, sound="battery-caution",
        ))
        self.Notify.init.assert_called_once_with("bn")
        self.Notify.Notification.new.assert_called_once_with(
            "Battery level", "Battery level is CRITICAL (8%)", None
        )
        self.notif.set_urgency.assert_called_once_with(self.Notify.Urgency.CRITICAL)
        key, variant = self.notif.set_hint.call_args[0]
        self.assertEqual(key, "sound-name")
        self.assertEqual(variant.unpack(), "battery-caution")
        self.notif.set_timeout.assert_not_called()
        self.notif.show.assert_called_once_with()

    def test_warning_timeout(self):
        self.module.LibnotifyNotifier().show(Notification(
            "Battery level", "Battery level is low (18%)", urgency=Urgency.NORMAL, timeout=30,
        ))
        self.Notify.Notification.new.assert_called_once_with(
            "Battery level", "Battery level is low (18%)", None
        )
        self.notif.set_urgency.assert_called_once_with(self.Notify.Urgency.NORMAL)
        self.notif.set_timeout.assert_called_once_with(30000)
        self.notif.set_hint.assert_not_called()

    def test_init_failure(self):
        self.Notify.init.return_value = False
        with self.assertRaises(NotificationError):
            self.module.LibnotifyNotifier()

    def test_show_failure(self):
        self.notif.show.side_effect = self.module.GLib.Error("no service")
        with self.assertRaises(NotificationError):
            self.module.LibnotifyNotifier().show(Notification("Battery level", "x"))


if __name__ == '__main__':
    unittest.main()
