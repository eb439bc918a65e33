"""
UPower battery device on the system bus.
Reads device properties and delivers PropertiesChanged events through a
small bounded buffer drained from the GLib main loop.
"""

import sys
from collections import deque

import dbus
from gi.repository import GLib

from .battery import QueryError, decode_properties_changed

UPOWER_NAME = "org.freedesktop.UPower"
DEVICE_IFACE = "org.freedesktop.UPower.Device"
PROPERTIES_IFACE = "org.freedesktop.DBus.Properties"
BATTERY_PATH = "/org/freedesktop/UPower/devices/battery_BAT0"

# Pending change events kept while the watcher is busy
EVENT_BUFFER_SIZE = 10


class BatteryDevice:
    """A single UPower battery device."""

    def __init__(self, bus, path: str = BATTERY_PATH):
        self.bus = bus
        self.path = path
        self._pending = deque(maxlen=EVENT_BUFFER_SIZE)
        self._dispatch_scheduled = False
        self._callback = None
        self._receiver = None

    def get(self, name: str):
        """Read one org.freedesktop.UPower.Device property."""
        try:
            obj = self.bus.get_object(UPOWER_NAME, self.path, introspect=False)
            return obj.Get(DEVICE_IFACE, name, dbus_interface=PROPERTIES_IFACE)
        except dbus.exceptions.DBusException as e:
            raise QueryError(name, e.get_dbus_message() or str(e)) from e

    def subscribe(self, callback):
        """
        Deliver ChangeEvents for this device to callback.

        Raises DBusException when the match rule cannot be installed.
        """
        self._callback = callback
        self._receiver = self.bus.add_signal_receiver(
            self._on_properties_changed,
            signal_name="PropertiesChanged",
            dbus_interface=PROPERTIES_IFACE,
            path=self.path,
            path_keyword="path",
        )
        return self._receiver

    def unsubscribe(self):
        if self._receiver is not None:
            self._receiver.remove()
            self._receiver = None
        self._callback = None
        self._pending.clear()

    def _on_properties_changed(self, *body, path=None):
        event = decode_properties_changed(body, path or self.path)
        if event is None:
            return

        if len(self._pending) == self._pending.maxlen:
            print("Event buffer full, dropping oldest battery event", file=sys.stderr)
        self._pending.append(event)

        if not self._dispatch_scheduled:
            self._dispatch_scheduled = True
            GLib.idle_add(self._dispatch)

    def _dispatch(self) -> bool:
        """Hand buffered events to the callback, oldest first."""
        self._dispatch_scheduled = False
        while self._pending and self._callback is not None:
            event = self._pending.popleft()
            try:
                self._callback(event)
            except Exception as e:
                print(f"Error handling battery event: {e}", file=sys.stderr)
        return False
