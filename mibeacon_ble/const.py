from __future__ import annotations

from typing import Final

from sensor_state_data import (
    BaseDeviceClass,
)

SERVICE_MIBEACON: Final = "0000fe95-0000-1000-8000-00805f9b34fb"
SERVICE_HHCCJCY10: Final = "0000fd50-0000-1000-8000-00805f9b34fb"
SERVICE_SCALE1: Final = "0000181d-0000-1000-8000-00805f9b34fb"
SERVICE_SCALE2: Final = "0000181b-0000-1000-8000-00805f9b34fb"

# Key ids with a fixed meaning in lock events
KEY_ID_ADMINISTRATOR: Final = 0x00000000
KEY_ID_UNKNOWN_OPERATOR: Final = 0xFFFFFFFF

# Not covered by sensor_state_data.Units
UNIT_OHM: Final = "Ω"


class ExtendedSensorDeviceClass(BaseDeviceClass):
    """Device class for additional sensors (compared to sensor-state-data)."""

    # Consumable (filter, refill) remaining
    CONSUMABLE = "consumable"

    # Formaldehyde concentration
    FORMALDEHYDE = "formaldehyde"

    # Body impedance
    IMPEDANCE = "impedance"

    # Toothbrush score
    SCORE = "score"


class ExtendedBinarySensorDeviceClass(BaseDeviceClass):
    """Device class for additional binary sensors (compared to sensor-state-data)."""

    # Armed away
    ARMED = "armed"

    # Toothbrush in use
    BRUSHING = "brushing"

    # Child lock engaged
    CHILD_LOCK = "child_lock"

    # Fingerprint matched
    FINGERPRINT = "fingerprint"
