"""
Battery Watcher - decides when to send, replace or close low battery alerts.

Consumes change events from a battery device and talks to a notification
sink. Both collaborators are plain objects:

- device.get(name) returns a property value or raises QueryError
- notifier.send(notification) returns an id or raises SendError
- notifier.close(id) raises CloseError on failure
"""

import sys
from dataclasses import dataclass

from .battery import BatteryReading, BatteryState, ChangeEvent, QueryError
from .notification import CloseError, SendError, build_notification

DEFAULT_LOW = 30.0
DEFAULT_CRITICAL = 15.0


@dataclass(frozen=True)
class Thresholds:
    critical: float = DEFAULT_CRITICAL
    low: float = DEFAULT_LOW

    def __post_init__(self):
        for name, value in (("critical", self.critical), ("low", self.low)):
            if not 0 <= value <= 100:
                raise ValueError(f"{name} threshold must be between 0 and 100, got {value}")
        if self.critical >= self.low:
            raise ValueError(
                f"critical threshold ({self.critical}) must be below low threshold ({self.low})"
            )


class NotificationTracker:
    """Holds the id of the last notification this process sent (0 = none)."""

    def __init__(self, notification_id: int = 0):
        self.notification_id = notification_id

    def update(self, notification_id: int):
        self.notification_id = int(notification_id)


class BatteryWatcher:
    """Evaluates battery change events one at a time."""

    def __init__(self, device, notifier, thresholds: Thresholds = None, tracker=None):
        self.device = device
        self.notifier = notifier
        self.thresholds = thresholds or Thresholds()
        self.tracker = tracker or NotificationTracker()

    def handle_event(self, event: ChangeEvent):
        """Process one change event. Collaborator errors are logged, never raised."""
        if event.state == BatteryState.CHARGING:
            self._close_last()

        percentage = event.percentage
        if percentage is None:
            return

        reading = self._read(percentage)
        if reading is None:
            return

        self._notify(reading)

    def _close_last(self):
        print("Closing last notification")
        try:
            self.notifier.close(self.tracker.notification_id)
        except CloseError as e:
            print(f"Close notification error: {e}", file=sys.stderr)

    def _read(self, percentage: float):
        """Fetch the current state and model; None when the event should be skipped."""
        try:
            state = BatteryState.from_value(self.device.get("State"))
        except QueryError as e:
            print(str(e), file=sys.stderr)
            return None

        if state != BatteryState.DISCHARGING:
            print(f"Skipping notification. State: {state.label}")
            return None

        if percentage > self.thresholds.low:
            print(f"Skipping notification. Battery level: {percentage:.0f}%")
            return None

        try:
            model = str(self.device.get("Model"))
        except QueryError as e:
            print(str(e), file=sys.stderr)
            return None

        return BatteryReading(state=state, percentage=percentage, model=model)

    def _notify(self, reading: BatteryReading):
        notification = build_notification(
            reading,
            self.thresholds.critical,
            self.thresholds.low,
            replaces_id=self.tracker.notification_id,
        )

        print("Sending notification")
        try:
            notification_id = self.notifier.send(notification)
        except SendError as e:
            print(f"Send notification error: {e}", file=sys.stderr)
            return
        self.tracker.update(notification_id)
