"""Protocol independent sensor events.

Decoded payloads are mapped to :class:`BinaryMeasurement` and
:class:`NumericMeasurement` records carrying a ``sensor_state_data`` device
class and unit.
"""
from __future__ import annotations

import dataclasses
import logging
from enum import Enum
from typing import Callable, Union

from sensor_state_data import (
    BaseDeviceClass,
    BinarySensorDeviceClass,
    SensorDeviceClass,
    Units,
)

from .const import ExtendedBinarySensorDeviceClass, ExtendedSensorDeviceClass
from . import payloads as p

_LOGGER = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class BinaryMeasurement:
    kind: BaseDeviceClass
    value: bool


@dataclasses.dataclass(frozen=True)
class NumericMeasurement:
    kind: BaseDeviceClass
    value: float
    unit: Units | str | None


SensorEvent = Union[BinaryMeasurement, NumericMeasurement]


class WeightUnit(Enum):
    """Raw weight step, expressed in kilograms."""

    TWO_HUNDRED_GRAMS = 0.005
    POUNDS = 0.0045359237
    CATTY = 0.01


def weight_kilograms(raw: int, unit: WeightUnit) -> float:
    """Normalize a raw scale reading to kilograms."""
    return raw * unit.value


def _temperature(celsius: float) -> NumericMeasurement:
    return NumericMeasurement(SensorDeviceClass.TEMPERATURE, celsius, Units.TEMP_CELSIUS)


def _humidity(percent: float) -> NumericMeasurement:
    return NumericMeasurement(SensorDeviceClass.HUMIDITY, percent, Units.PERCENTAGE)


def _illuminance(lux: float) -> NumericMeasurement:
    return NumericMeasurement(SensorDeviceClass.ILLUMINANCE, lux, Units.LIGHT_LUX)


def _battery(payload: p.Battery) -> tuple[SensorEvent, ...]:
    return (
        NumericMeasurement(SensorDeviceClass.BATTERY, float(payload.percent), Units.PERCENTAGE),
    )


def _duration(seconds: int) -> NumericMeasurement:
    return NumericMeasurement(SensorDeviceClass.DURATION, float(seconds), Units.TIME_SECONDS)


def _formaldehyde(value: float) -> NumericMeasurement:
    return NumericMeasurement(
        ExtendedSensorDeviceClass.FORMALDEHYDE,
        value,
        Units.CONCENTRATION_MILLIGRAMS_PER_CUBIC_METER,
    )


def _door_event(payload: p.DoorEvent) -> tuple[SensorEvent, ...]:
    if payload.state in (p.DoorState.OPEN, p.DoorState.TIMEOUT_NOT_CLOSED):
        return (BinaryMeasurement(BinarySensorDeviceClass.DOOR, True),)
    if payload.state == p.DoorState.CLOSED:
        return (BinaryMeasurement(BinarySensorDeviceClass.DOOR, False),)
    if payload.state == p.DoorState.PRIED:
        return (BinaryMeasurement(BinarySensorDeviceClass.TAMPER, True),)
    if payload.state == p.DoorState.STUCK:
        return (BinaryMeasurement(BinarySensorDeviceClass.PROBLEM, True),)
    return ()


def _lock_event(payload: p.LockEvent) -> tuple[SensorEvent, ...]:
    # LOCK is on when unlocked
    if payload.action in (p.LockAction.UNLOCK_OUTSIDE, p.LockAction.UNLOCK_INSIDE):
        return (BinaryMeasurement(BinarySensorDeviceClass.LOCK, True),)
    if payload.action in (
        p.LockAction.LOCK,
        p.LockAction.LOCK_INSIDE,
        p.LockAction.LOCK_OUTSIDE,
    ):
        return (BinaryMeasurement(BinarySensorDeviceClass.LOCK, False),)
    if payload.action in (p.LockAction.CHILD_LOCK_ON, p.LockAction.CHILD_LOCK_OFF):
        return (
            BinaryMeasurement(
                ExtendedBinarySensorDeviceClass.CHILD_LOCK,
                payload.action == p.LockAction.CHILD_LOCK_ON,
            ),
        )
    return ()


def _toothbrush(payload: p.Toothbrush) -> tuple[SensorEvent, ...]:
    events: list[SensorEvent] = [
        BinaryMeasurement(
            ExtendedBinarySensorDeviceClass.BRUSHING,
            payload.state == p.ToothbrushState.BRUSHING,
        )
    ]
    if payload.state == p.ToothbrushState.FINISHED and payload.value is not None:
        events.append(
            NumericMeasurement(ExtendedSensorDeviceClass.SCORE, float(payload.value), None)
        )
    return tuple(events)


def _opening(payload: p.Opening) -> tuple[SensorEvent, ...]:
    if payload.state in (p.OpeningState.OPEN, p.OpeningState.TIMEOUT_NOT_CLOSED):
        return (BinaryMeasurement(BinarySensorDeviceClass.OPENING, True),)
    if payload.state == p.OpeningState.CLOSED:
        return (BinaryMeasurement(BinarySensorDeviceClass.OPENING, False),)
    return ()


_NORMALIZERS: dict[type[p.MiBeaconPayload], Callable[..., tuple[SensorEvent, ...]]] = {
    p.Fingerprint: lambda x: (
        BinaryMeasurement(
            ExtendedBinarySensorDeviceClass.FINGERPRINT,
            x.result == p.FingerprintResult.MATCH,
        ),
    ),
    p.DoorEvent: _door_event,
    p.Armed: lambda x: (BinaryMeasurement(ExtendedBinarySensorDeviceClass.ARMED, x.armed),),
    p.LockEvent: _lock_event,
    p.Flooding: lambda x: (BinaryMeasurement(BinarySensorDeviceClass.MOISTURE, x.detected),),
    p.SmokeAlarm: lambda x: (BinaryMeasurement(BinarySensorDeviceClass.SMOKE, x.detected),),
    p.GasLeak: lambda x: (BinaryMeasurement(BinarySensorDeviceClass.GAS, x.detected),),
    p.MovingWithLight: lambda x: (
        BinaryMeasurement(BinarySensorDeviceClass.MOTION, True),
        _illuminance(float(x.illuminance)),
    ),
    p.Toothbrush: _toothbrush,
    p.Temperature: lambda x: (_temperature(x.decicelsius / 10.0),),
    p.PowerAndTemperature: lambda x: (
        BinaryMeasurement(BinarySensorDeviceClass.POWER, x.power != 0),
        _temperature(float(x.temperature)),
    ),
    p.Humidity: lambda x: (_humidity(x.permille / 10.0),),
    p.Illuminance: lambda x: (_illuminance(float(x.lux)),),
    p.Moisture: lambda x: (
        NumericMeasurement(SensorDeviceClass.MOISTURE, float(x.percent), Units.PERCENTAGE),
    ),
    p.Conductivity: lambda x: (
        NumericMeasurement(
            SensorDeviceClass.CONDUCTIVITY, float(x.microsiemens_per_cm), Units.CONDUCTIVITY
        ),
    ),
    p.Battery: _battery,
    p.TemperatureAndHumidity: lambda x: (
        _temperature(x.decicelsius / 10.0),
        _humidity(x.permille / 10.0),
    ),
    p.LockState: lambda x: (
        BinaryMeasurement(BinarySensorDeviceClass.LOCK, not x.locked),
        BinaryMeasurement(ExtendedBinarySensorDeviceClass.CHILD_LOCK, x.child_lock),
    ),
    p.FormaldehydeConcentration: lambda x: (_formaldehyde(x.value / 100.0),),
    p.Power: lambda x: (BinaryMeasurement(BinarySensorDeviceClass.POWER, x.on),),
    p.Consumable: lambda x: (
        NumericMeasurement(ExtendedSensorDeviceClass.CONSUMABLE, float(x.percent), Units.PERCENTAGE),
    ),
    p.MoistureDetected: lambda x: (
        BinaryMeasurement(BinarySensorDeviceClass.MOISTURE, x.detected),
    ),
    p.SmokeDetected: lambda x: (BinaryMeasurement(BinarySensorDeviceClass.SMOKE, x.detected),),
    p.TimeWithoutMotion: lambda x: (
        BinaryMeasurement(BinarySensorDeviceClass.MOTION, False),
        _duration(x.seconds),
    ),
    p.LightIntensity: lambda x: (BinaryMeasurement(BinarySensorDeviceClass.LIGHT, x.strong),),
    p.Opening: _opening,
    p.NoMotionTimeout: lambda x: (
        BinaryMeasurement(BinarySensorDeviceClass.MOTION, False),
        _duration(x.seconds),
    ),
    p.PillowState: lambda x: (BinaryMeasurement(BinarySensorDeviceClass.OCCUPANCY, x.in_bed),),
    p.FineFormaldehydeConcentration: lambda x: (_formaldehyde(x.value / 1000.0),),
    p.NoMotionDuration: lambda x: (_duration(x.seconds),),
    p.MotionWithIlluminance: lambda x: (
        BinaryMeasurement(BinarySensorDeviceClass.MOTION, True),
        _illuminance(round(x.lux, 2)),
    ),
    p.FloatTemperature: lambda x: (_temperature(round(x.celsius, 2)),),
    p.PercentHumidity: lambda x: (_humidity(float(x.percent)),),
    p.FloatHumidity: lambda x: (_humidity(round(x.percent, 2)),),
}


def payload_to_sensor_events(payload: p.MiBeaconPayload) -> tuple[SensorEvent, ...]:
    """Map a decoded object payload to zero or more sensor events."""
    normalize = _NORMALIZERS.get(type(payload))
    if normalize is None:
        _LOGGER.debug("Ignoring unhandled MiBeacon object payload: %s", payload)
        return ()
    return normalize(payload)
