"""
Battery state model shared by the UPower device source and the watcher.
Decodes PropertiesChanged payloads into typed change events.
"""

import math
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional


class QueryError(Exception):
    """A battery property could not be read."""

    def __init__(self, name: str, reason: str):
        super().__init__(f"Cannot read battery property {name}: {reason}")
        self.name = name
        self.reason = reason


class BatteryState(IntEnum):
    """UPower device states (org.freedesktop.UPower.Device.State)."""

    UNKNOWN = 0
    CHARGING = 1
    DISCHARGING = 2
    EMPTY = 3
    FULLY_CHARGED = 4
    PENDING_CHARGE = 5
    PENDING_DISCHARGE = 6

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()

    @classmethod
    def from_value(cls, value) -> "BatteryState":
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class BatteryReading:
    state: BatteryState
    percentage: float
    model: str


@dataclass(frozen=True)
class ChangeEvent:
    """One PropertiesChanged signal for the battery device."""

    path: str
    properties: dict = field(default_factory=dict)
    state: Optional[BatteryState] = None
    percentage: Optional[float] = None


def _is_number(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def decode_properties_changed(body, path: str = "") -> Optional[ChangeEvent]:
    """
    Turn a raw PropertiesChanged signal body into a ChangeEvent.

    The body is (interface, changed_properties, invalidated_properties).
    Returns None when the payload is not a property mapping. Entries with
    an unexpected type, or a non-finite percentage, are left unset on the
    event.
    """
    if len(body) < 2:
        return None
    properties = body[1]
    if not isinstance(properties, dict):
        return None

    state = None
    raw_state = properties.get("State")
    if isinstance(raw_state, int) and not isinstance(raw_state, bool):
        state = BatteryState.from_value(int(raw_state))

    percentage = None
    raw_percentage = properties.get("Percentage")
    if _is_number(raw_percentage):
        percentage = float(raw_percentage)

    return ChangeEvent(
        path=str(path or ""),
        properties=dict(properties),
        state=state,
        percentage=percentage,
    )
