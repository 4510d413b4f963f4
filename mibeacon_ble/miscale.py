"""Xiaomi Mi Scale (v1/v2) service advertisements.

v1 (Mi Smart Scale, service 0x181D)::

    header (u8) | weight (u16) | reserved (7 bytes)

v2 (Mi Body Composition Scale, service 0x181B)::

    header (u16) | reserved (7 bytes) | impedance (u16) | weight (u16)
"""
from __future__ import annotations

import dataclasses

from sensor_state_data import SensorDeviceClass, Units

from .bitfields import bit
from .const import UNIT_OHM, ExtendedSensorDeviceClass
from .devices import DeviceEntry
from .reader import ByteReader
from .sensor import NumericMeasurement, SensorEvent, WeightUnit, weight_kilograms

SCALE_V1 = 0x181D
SCALE_V2 = 0x181B

DEVICE_TYPES: dict[int, DeviceEntry] = {
    SCALE_V1: DeviceEntry(
        name="Mi Smart Scale",
        model="XMTZC01HM/XMTZC04HM",
    ),
    SCALE_V2: DeviceEntry(
        name="Mi Body Composition Scale",
        model="XMTZC02HM/XMTZC05HM/NUN4049CN",
    ),
}


@dataclasses.dataclass(frozen=True)
class ScaleHeader:
    weight_unit_is_pounds: bool
    weight_unit_is_catty: bool
    weight_stabilized: bool
    weight_removed: bool
    impedance_stabilized: bool = False

    @classmethod
    def from_v1(cls, value: int) -> ScaleHeader:
        return cls(
            weight_unit_is_pounds=bit(value, 0),
            weight_unit_is_catty=bit(value, 4),
            weight_stabilized=bit(value, 5),
            weight_removed=bit(value, 7),
        )

    @classmethod
    def from_v2(cls, value: int) -> ScaleHeader:
        return cls(
            weight_unit_is_pounds=bit(value, 7),
            weight_removed=bit(value, 8),
            weight_unit_is_catty=bit(value, 9),
            weight_stabilized=bit(value, 10),
            impedance_stabilized=bit(value, 14),
        )

    @property
    def weight_unit(self) -> WeightUnit:
        if self.weight_unit_is_pounds:
            return WeightUnit.POUNDS
        if self.weight_unit_is_catty:
            return WeightUnit.CATTY
        return WeightUnit.TWO_HUNDRED_GRAMS


@dataclasses.dataclass(frozen=True)
class MiScaleServiceAdvertisement:
    device_id: int
    header: ScaleHeader
    weight: int
    impedance: int | None = None

    @classmethod
    def from_bytes(cls, data: bytes, device_id: int) -> MiScaleServiceAdvertisement:
        """Decode a scale packet; ``device_id`` selects the v1 or v2 layout."""
        reader = ByteReader(data)
        if device_id == SCALE_V1:
            header = ScaleHeader.from_v1(reader.u8("header"))
            weight = reader.u16("weight")
            reader.read(7, "reserved")
            return cls(device_id, header, weight)
        if device_id == SCALE_V2:
            header = ScaleHeader.from_v2(reader.u16("header"))
            reader.read(7, "reserved")
            impedance = reader.u16("impedance")
            weight = reader.u16("weight")
            return cls(device_id, header, weight, impedance)
        raise ValueError(f"Not a Mi Scale device id: 0x{device_id:04X}")

    @property
    def device_type(self) -> DeviceEntry | None:
        return DEVICE_TYPES.get(self.device_id)

    @property
    def weight_kilograms(self) -> float | None:
        """Weight normalized to kg, or ``None`` once the load was removed."""
        if self.header.weight_removed:
            return None
        return weight_kilograms(self.weight, self.header.weight_unit)

    def sensor_events(self) -> tuple[SensorEvent, ...]:
        events: list[SensorEvent] = []
        weight = self.weight_kilograms
        if weight is not None:
            events.append(
                NumericMeasurement(SensorDeviceClass.MASS, weight, Units.MASS_KILOGRAMS)
            )
        if self.impedance is not None:
            events.append(
                NumericMeasurement(
                    ExtendedSensorDeviceClass.IMPEDANCE, float(self.impedance), UNIT_OHM
                )
            )
        return tuple(events)
