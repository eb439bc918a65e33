#!/usr/bin/env python3
"""
Battery Notify Daemon.
Listens for UPower battery changes and shows a desktop notification when the
battery runs low while discharging.
"""

import signal
import sys

import dbus
from dbus.mainloop.glib import DBusGMainLoop
from gi.repository import GLib

from .cli import parse_args
from .notifier import DesktopNotifier
from .upower import BatteryDevice
from .watcher import BatteryWatcher


def _quit(loop) -> bool:
    loop.quit()
    return GLib.SOURCE_REMOVE


def run(thresholds) -> int:
    """Connect to both buses and process battery events until SIGINT/SIGTERM."""
    DBusGMainLoop(set_as_default=True)

    try:
        system_bus = dbus.SystemBus()
        session_bus = dbus.SessionBus()
        notifier = DesktopNotifier(session_bus)
        device = BatteryDevice(system_bus)
        watcher = BatteryWatcher(device, notifier, thresholds)
        device.subscribe(watcher.handle_event)
    except dbus.exceptions.DBusException as e:
        print(f"Error connecting to D-Bus: {e}", file=sys.stderr)
        return 1

    loop = GLib.MainLoop()
    for signum in (signal.SIGINT, signal.SIGTERM):
        GLib.unix_signal_add(GLib.PRIORITY_DEFAULT, signum, _quit, loop)

    print("Listening for changes in battery")
    print(f"Thresholds: low {thresholds.low:g}% / critical {thresholds.critical:g}%")
    try:
        loop.run()
    finally:
        device.unsubscribe()
        print("Quitting")
    return 0


def main(argv=None) -> int:
    """Entry point for the battery notify daemon."""
    parser, args = parse_args(argv)
    if args.extra:
        parser.print_help(sys.stderr)
        return 0
    return run(args.thresholds)


if __name__ == "__main__":
    sys.exit(main())
