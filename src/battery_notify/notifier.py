"""
Desktop notifications over org.freedesktop.Notifications (session bus).
Works with any notification server (mako, dunst, GNOME Shell, etc.).
"""

import dbus

from .notification import CloseError, Notification, SendError

NOTIFY_NAME = "org.freedesktop.Notifications"
NOTIFY_PATH = "/org/freedesktop/Notifications"
NOTIFY_IFACE = NOTIFY_NAME


class DesktopNotifier:
    """Sends, replaces and closes notifications."""

    def __init__(self, bus):
        self.bus = bus
        # Resolve the server on each call so one started later is still used
        obj = bus.get_object(
            NOTIFY_NAME, NOTIFY_PATH, introspect=False, follow_name_owner_changes=True
        )
        self.iface = dbus.Interface(obj, NOTIFY_IFACE)

    def send(self, notification: Notification) -> int:
        """Send (or replace) a notification and return its id."""
        hints = dbus.Dictionary(
            {
                "urgency": dbus.Byte(int(notification.urgency)),
                "value": dbus.Int32(notification.value),
            },
            signature="sv",
        )
        try:
            notification_id = self.iface.Notify(
                notification.app_name,
                dbus.UInt32(notification.replaces_id),
                "",  # app_icon
                notification.summary,
                notification.body,
                dbus.Array([], signature="s"),  # actions
                hints,
                dbus.Int32(notification.expire_timeout),
            )
        except dbus.exceptions.DBusException as e:
            raise SendError(e.get_dbus_message() or str(e)) from e
        return int(notification_id)

    def close(self, notification_id: int):
        try:
            self.iface.CloseNotification(dbus.UInt32(notification_id))
        except dbus.exceptions.DBusException as e:
            raise CloseError(e.get_dbus_message() or str(e)) from e
