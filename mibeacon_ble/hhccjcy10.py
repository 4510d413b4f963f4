"""HHCCJCY10 plant sensor (pink version) service advertisement."""
from __future__ import annotations

import dataclasses

from sensor_state_data import SensorDeviceClass, Units

from .devices import DeviceEntry
from .reader import ByteReader
from .sensor import NumericMeasurement, SensorEvent

HHCCJCY10_DEVICE = DeviceEntry(
    name="Plant Sensor",
    model="HHCCJCY10",
    manufacturer="HHCC Plant Technology Co. Ltd",
)


@dataclasses.dataclass(frozen=True)
class HHCCJCY10ServiceAdvertisement:
    moisture_percent: int
    temperature_decicelsius: int
    illuminance_lux: int
    battery_percent: int
    conductivity: int

    @classmethod
    def from_bytes(cls, data: bytes) -> HHCCJCY10ServiceAdvertisement:
        reader = ByteReader(data)
        reader.read(4, "reserved")
        return cls(
            moisture_percent=reader.u8("moisture"),
            temperature_decicelsius=reader.u16("temperature"),
            illuminance_lux=reader.u24("illuminance"),
            battery_percent=reader.u8("battery"),
            conductivity=reader.u16("conductivity"),
        )

    @property
    def device_type(self) -> DeviceEntry:
        return HHCCJCY10_DEVICE

    def sensor_events(self) -> tuple[SensorEvent, ...]:
        return (
            NumericMeasurement(
                SensorDeviceClass.MOISTURE, float(self.moisture_percent), Units.PERCENTAGE
            ),
            NumericMeasurement(
                SensorDeviceClass.TEMPERATURE,
                self.temperature_decicelsius / 10.0,
                Units.TEMP_CELSIUS,
            ),
            NumericMeasurement(
                SensorDeviceClass.ILLUMINANCE, float(self.illuminance_lux), Units.LIGHT_LUX
            ),
            NumericMeasurement(
                SensorDeviceClass.BATTERY, float(self.battery_percent), Units.PERCENTAGE
            ),
            NumericMeasurement(
                SensorDeviceClass.CONDUCTIVITY, float(self.conductivity), Units.CONDUCTIVITY
            ),
        )
