from __future__ import annotations

from sensor_state_data import (
    BinarySensorDeviceClass,
    DeviceClass,
    DeviceKey,
    SensorDescription,
    SensorDeviceClass,
    SensorDeviceInfo,
    SensorUpdate,
    SensorValue,
    Units,
)

from .errors import DecodeFailed, MiBeaconError, UnhandledService
from .mibeacon import MiBeaconObject, MiBeaconServiceAdvertisement
from .parser import MiBeaconBluetoothDeviceData
from .sensor import BinaryMeasurement, NumericMeasurement, SensorEvent, WeightUnit
from .service import ServiceType, decode, parse_service_advertisement, service_uuid_to_type

__version__ = "1.0.0"

__all__ = [
    "BinaryMeasurement",
    "BinarySensorDeviceClass",
    "DecodeFailed",
    "DeviceClass",
    "DeviceKey",
    "MiBeaconBluetoothDeviceData",
    "MiBeaconError",
    "MiBeaconObject",
    "MiBeaconServiceAdvertisement",
    "NumericMeasurement",
    "SensorDescription",
    "SensorDeviceClass",
    "SensorDeviceInfo",
    "SensorEvent",
    "SensorUpdate",
    "SensorValue",
    "ServiceType",
    "UnhandledService",
    "Units",
    "WeightUnit",
    "decode",
    "parse_service_advertisement",
    "service_uuid_to_type",
]
