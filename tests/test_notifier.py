"""
Tests for the org.freedesktop.Notifications client.
"""

import unittest
from unittest import mock

try:
    import dbus
    HAVE_DBUS = True
except ImportError:
    HAVE_DBUS = False

if HAVE_DBUS:
    from battery_notify.notifier import DesktopNotifier

from battery_notify.notification import (
    EXPIRE_NEVER,
    CloseError,
    Notification,
    SendError,
    Urgency,
)


@unittest.skipUnless(HAVE_DBUS, "dbus-python is required")
class DesktopNotifierTest(unittest.TestCase):

    def setUp(self):
        self.bus = mock.MagicMock()
        self.notifier = DesktopNotifier(self.bus)
        self.notifier.iface = mock.Mock()

    def test_follows_notification_server(self):
        self.bus.get_object.assert_called_once_with(
            "org.freedesktop.Notifications",
            "/org/freedesktop/Notifications",
            introspect=False,
            follow_name_owner_changes=True,
        )

    def test_send_builds_notify_call(self):
        self.notifier.iface.Notify.return_value = dbus.UInt32(12)
        notification = Notification(
            summary="Battery: BAT0",
            body="Current level: 9%",
            urgency=Urgency.CRITICAL,
            expire_timeout=EXPIRE_NEVER,
            replaces_id=11,
            value=9,
        )

        self.assertEqual(self.notifier.send(notification), 12)

        args = self.notifier.iface.Notify.call_args[0]
        app_name, replaces_id, icon, summary, body, actions, hints, timeout = args
        self.assertEqual(app_name, "battery-notify")
        self.assertEqual(replaces_id, 11)
        self.assertEqual(summary, "Battery: BAT0")
        self.assertEqual(body, "Current level: 9%")
        self.assertEqual(list(actions), [])
        self.assertEqual(hints["urgency"], 2)
        self.assertEqual(hints["value"], 9)
        self.assertEqual(timeout, 0)

    def test_send_failure(self):
        self.notifier.iface.Notify.side_effect = dbus.exceptions.DBusException(
            "The name is not activatable"
        )

        with self.assertRaises(SendError):
            self.notifier.send(Notification(summary="s", body="b"))

    def test_close(self):
        self.notifier.close(5)

        self.notifier.iface.CloseNotification.assert_called_once_with(5)

    def test_close_failure(self):
        self.notifier.iface.CloseNotification.side_effect = dbus.exceptions.DBusException(
            "Invalid notification id"
        )

        with self.assertRaises(CloseError):
            self.notifier.close(0)


if __name__ == "__main__":
    unittest.main()
