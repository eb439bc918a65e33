"""
Battery Notify - low battery desktop notifications for Linux.

This package provides:
- A UPower battery device source (D-Bus system bus)
- A desktop notifier (org.freedesktop.Notifications)
- The battery watcher deciding when to notify, replace or close alerts
- The battery-notify daemon
"""

__version__ = "1.0.0"

from .battery import (
    BatteryReading,
    BatteryState,
    ChangeEvent,
    QueryError,
    decode_properties_changed,
)
from .notification import (
    APP_NAME,
    EXPIRE_DEFAULT,
    EXPIRE_NEVER,
    CloseError,
    Notification,
    SendError,
    Urgency,
    build_notification,
    select_urgency,
)
from .watcher import (
    BatteryWatcher,
    NotificationTracker,
    Thresholds,
    DEFAULT_CRITICAL,
    DEFAULT_LOW,
)

__all__ = [
    "BatteryReading",
    "BatteryState",
    "ChangeEvent",
    "QueryError",
    "decode_properties_changed",
    "APP_NAME",
    "EXPIRE_DEFAULT",
    "EXPIRE_NEVER",
    "CloseError",
    "Notification",
    "SendError",
    "Urgency",
    "build_notification",
    "select_urgency",
    "BatteryWatcher",
    "NotificationTracker",
    "Thresholds",
    "DEFAULT_CRITICAL",
    "DEFAULT_LOW",
]
