"""
Notification requests and the errors raised by notification sinks.
"""

import math
from dataclasses import dataclass
from enum import IntEnum

from .battery import BatteryReading

APP_NAME = "battery-notify"

# Expire timeouts (milliseconds) understood by org.freedesktop.Notifications
EXPIRE_DEFAULT = -1
EXPIRE_NEVER = 0

BATTERY_GLYPH = "\U000f0079"


class Urgency(IntEnum):
    LOW = 0
    NORMAL = 1
    CRITICAL = 2


class SendError(Exception):
    """The notification server rejected or never answered a Notify call."""


class CloseError(Exception):
    """A CloseNotification call failed."""


@dataclass(frozen=True)
class Notification:
    summary: str
    body: str
    urgency: Urgency = Urgency.NORMAL
    expire_timeout: int = EXPIRE_DEFAULT
    replaces_id: int = 0
    value: int = 0
    app_name: str = APP_NAME


def round_percentage(percentage: float) -> int:
    """Round half away from zero, for the progress hint."""
    return int(math.copysign(math.floor(abs(percentage) + 0.5), percentage))


def select_urgency(percentage: float, critical: float, low: float):
    """
    Pick (urgency, expire_timeout) for a reading at or below the low mark.

    Critical alerts never expire so they cannot silently disappear.
    """
    if percentage <= critical:
        return Urgency.CRITICAL, EXPIRE_NEVER
    if percentage <= low:
        return Urgency.LOW, EXPIRE_DEFAULT
    return Urgency.NORMAL, EXPIRE_DEFAULT


def build_notification(reading: BatteryReading, critical: float, low: float,
                       replaces_id: int = 0) -> Notification:
    """Build the low battery alert for a reading."""
    urgency, expire_timeout = select_urgency(reading.percentage, critical, low)
    return Notification(
        summary=f"Battery: {reading.model}",
        body=f"{BATTERY_GLYPH} Current level: {reading.percentage:.0f}%",
        urgency=urgency,
        expire_timeout=expire_timeout,
        replaces_id=replaces_id,
        value=round_percentage(reading.percentage),
    )
