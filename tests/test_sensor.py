"""Tests for payload normalization into sensor events."""
import logging

import pytest

from sensor_state_data import BinarySensorDeviceClass, SensorDeviceClass, Units

from mibeacon_ble.const import ExtendedBinarySensorDeviceClass, ExtendedSensorDeviceClass
from mibeacon_ble.payloads import (
    OBJECT_TYPES,
    Button,
    ButtonEvent,
    KeyId,
    LockAction,
    LockEvent,
    LockMethod,
    RawPayload,
    decode_payload,
)
from mibeacon_ble.sensor import (
    BinaryMeasurement,
    NumericMeasurement,
    WeightUnit,
    payload_to_sensor_events,
    weight_kilograms,
)


def _events(object_id: int, data: bytes):
    return payload_to_sensor_events(decode_payload(object_id, data))


def test_temperature_decicelsius():
    assert _events(0x1004, b"\xec\x00") == (
        NumericMeasurement(SensorDeviceClass.TEMPERATURE, 23.6, Units.TEMP_CELSIUS),
    )


def test_humidity_permille():
    assert _events(0x1006, b"\xf4\x01") == (
        NumericMeasurement(SensorDeviceClass.HUMIDITY, 50.0, Units.PERCENTAGE),
    )


def test_illuminance_unscaled_lux():
    assert _events(0x1007, b"\x10\x27\x00") == (
        NumericMeasurement(SensorDeviceClass.ILLUMINANCE, 10000.0, Units.LIGHT_LUX),
    )


def test_conductivity():
    assert _events(0x1009, b"\xc8\x00") == (
        NumericMeasurement(SensorDeviceClass.CONDUCTIVITY, 200.0, Units.CONDUCTIVITY),
    )


def test_power_and_temperature_expands_to_two_events():
    assert _events(0x1005, b"\x01\x5a") == (
        BinaryMeasurement(BinarySensorDeviceClass.POWER, True),
        NumericMeasurement(SensorDeviceClass.TEMPERATURE, 90.0, Units.TEMP_CELSIUS),
    )


def test_temperature_and_humidity():
    assert _events(0x100D, b"\xec\x00\xf4\x01") == (
        NumericMeasurement(SensorDeviceClass.TEMPERATURE, 23.6, Units.TEMP_CELSIUS),
        NumericMeasurement(SensorDeviceClass.HUMIDITY, 50.0, Units.PERCENTAGE),
    )


def test_formaldehyde_ids_scale_differently():
    coarse = _events(0x1010, b"\x2c\x01")
    fine = _events(0x101C, b"\x2c\x01")
    assert coarse == (
        NumericMeasurement(
            ExtendedSensorDeviceClass.FORMALDEHYDE,
            3.0,
            Units.CONCENTRATION_MILLIGRAMS_PER_CUBIC_METER,
        ),
    )
    assert fine[0].value == pytest.approx(0.3)
    assert fine[0].unit == coarse[0].unit
    assert fine[0].value != coarse[0].value


def test_pillow_state():
    assert _events(0x101C, b"\x01") == (
        BinaryMeasurement(BinarySensorDeviceClass.OCCUPANCY, True),
    )


def test_battery_ids():
    expected = (NumericMeasurement(SensorDeviceClass.BATTERY, 87.0, Units.PERCENTAGE),)
    assert _events(0x100A, b"\x57") == expected
    assert _events(0x4803, b"\x57") == expected
    assert _events(0x4C03, b"\x57") == expected


def test_binary_detectors():
    assert _events(0x1014, b"\x01") == (BinaryMeasurement(BinarySensorDeviceClass.MOISTURE, True),)
    assert _events(0x1015, b"\x00") == (BinaryMeasurement(BinarySensorDeviceClass.SMOKE, False),)
    assert _events(0x000E, b"\x01") == (BinaryMeasurement(BinarySensorDeviceClass.GAS, True),)
    assert _events(0x1018, b"\x01") == (BinaryMeasurement(BinarySensorDeviceClass.LIGHT, True),)


def test_time_without_motion():
    assert _events(0x1017, b"\x3c\x00\x00\x00") == (
        BinaryMeasurement(BinarySensorDeviceClass.MOTION, False),
        NumericMeasurement(SensorDeviceClass.DURATION, 60.0, Units.TIME_SECONDS),
    )


def test_moving_with_light():
    assert _events(0x000F, b"\x64\x00\x00") == (
        BinaryMeasurement(BinarySensorDeviceClass.MOTION, True),
        NumericMeasurement(SensorDeviceClass.ILLUMINANCE, 100.0, Units.LIGHT_LUX),
    )


def test_opening_states():
    assert _events(0x1019, b"\x00") == (BinaryMeasurement(BinarySensorDeviceClass.OPENING, True),)
    assert _events(0x1019, b"\x01") == (BinaryMeasurement(BinarySensorDeviceClass.OPENING, False),)
    assert _events(0x1019, b"\x03") == ()


def test_door_event_states():
    assert _events(0x0007, b"\x00") == (BinaryMeasurement(BinarySensorDeviceClass.DOOR, True),)
    assert _events(0x0007, b"\x01") == (BinaryMeasurement(BinarySensorDeviceClass.DOOR, False),)
    assert _events(0x0007, b"\x04") == (BinaryMeasurement(BinarySensorDeviceClass.TAMPER, True),)


def test_lock_event_maps_to_lock_sensor():
    unlocked = LockEvent(LockAction.UNLOCK_OUTSIDE, LockMethod.NFC, KeyId.ADMINISTRATOR, 0)
    locked = LockEvent(LockAction.LOCK, LockMethod.KEY, 0x42, 0)
    assert payload_to_sensor_events(unlocked) == (
        BinaryMeasurement(BinarySensorDeviceClass.LOCK, True),
    )
    assert payload_to_sensor_events(locked) == (
        BinaryMeasurement(BinarySensorDeviceClass.LOCK, False),
    )


def test_lock_state_maps_lock_and_child_lock():
    assert _events(0x100E, b"\x08") == (
        BinaryMeasurement(BinarySensorDeviceClass.LOCK, True),
        BinaryMeasurement(ExtendedBinarySensorDeviceClass.CHILD_LOCK, True),
    )


def test_armed():
    assert _events(0x0008, b"\x01\xd2\x02\x96\x49") == (
        BinaryMeasurement(ExtendedBinarySensorDeviceClass.ARMED, True),
    )


def test_toothbrush_score():
    assert _events(0x0010, b"\x01\x5a") == (
        BinaryMeasurement(ExtendedBinarySensorDeviceClass.BRUSHING, False),
        NumericMeasurement(ExtendedSensorDeviceClass.SCORE, 90.0, None),
    )
    assert _events(0x0010, b"\x00\x05") == (
        BinaryMeasurement(ExtendedBinarySensorDeviceClass.BRUSHING, True),
    )


def test_unmapped_payload_is_empty_and_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="mibeacon_ble.sensor"):
        result = payload_to_sensor_events(Button(1, ButtonEvent.SINGLE_PRESS))
    assert result == ()
    assert "Ignoring unhandled MiBeacon object payload" in caplog.text


def test_raw_payload_is_empty():
    assert payload_to_sensor_events(RawPayload(b"\x01\x02")) == ()


def test_every_known_payload_normalizes_without_error():
    for object_id, decoders in OBJECT_TYPES.items():
        for length in decoders:
            events = _events(object_id, bytes(length))
            assert isinstance(events, tuple)


def test_weight_200_gram_units():
    assert weight_kilograms(1000, WeightUnit.TWO_HUNDRED_GRAMS) == 5.0


def test_weight_pounds():
    assert weight_kilograms(1000, WeightUnit.POUNDS) == 1000 * 0.0045359237


def test_weight_catty():
    assert weight_kilograms(1000, WeightUnit.CATTY) == pytest.approx(10.0)
