"""MiBeacon object payloads.

Every known object id maps to one or two exact payload lengths, each with
its own decoder. Ids that are not in :data:`OBJECT_TYPES` decode to
:class:`RawPayload` whatever their length.

## References

- https://home-is-where-you-hang-your-hack.github.io/ble_monitor/MiBeacon_protocol
"""
from __future__ import annotations

import dataclasses
import logging
from enum import IntEnum
from types import MappingProxyType
from typing import Callable, Mapping, TypeVar

from .bitfields import bit, bits
from .const import KEY_ID_ADMINISTRATOR, KEY_ID_UNKNOWN_OPERATOR
from .errors import DecodeFailed
from .reader import ByteReader

_LOGGER = logging.getLogger(__name__)

_E = TypeVar("_E", bound=IntEnum)


def _enum_or_int(enum: type[_E], value: int) -> _E | int:
    """Map ``value`` to a member of ``enum``, keeping unknown values as ``int``."""
    try:
        return enum(value)
    except ValueError:
        return value


class KeyId(IntEnum):
    ADMINISTRATOR = KEY_ID_ADMINISTRATOR
    UNKNOWN_OPERATOR = KEY_ID_UNKNOWN_OPERATOR


class LockAction(IntEnum):
    UNLOCK_OUTSIDE = 0x0
    LOCK = 0x1
    ANTI_LOCK_ON = 0x2
    ANTI_LOCK_OFF = 0x3
    UNLOCK_INSIDE = 0x4
    LOCK_INSIDE = 0x5
    CHILD_LOCK_ON = 0x6
    CHILD_LOCK_OFF = 0x7
    LOCK_OUTSIDE = 0x8
    ABNORMAL = 0xF


class LockMethod(IntEnum):
    BLUETOOTH = 0x0
    PASSWORD = 0x1
    BIOMETRICS = 0x2
    KEY = 0x3
    TURNTABLE = 0x4
    NFC = 0x5
    ONE_TIME_PASSWORD = 0x6
    TWO_STEP_VERIFICATION = 0x7
    COERCION = 0x8
    MANUAL = 0xA
    AUTOMATIC = 0xB
    ABNORMAL = 0xF


class DoorState(IntEnum):
    OPEN = 0
    CLOSED = 1
    TIMEOUT_NOT_CLOSED = 2
    KNOCK = 3
    PRIED = 4
    STUCK = 5


class OpeningState(IntEnum):
    OPEN = 0
    CLOSED = 1
    TIMEOUT_NOT_CLOSED = 2
    DEVICE_RESET = 3


class FingerprintResult(IntEnum):
    MATCH = 0
    MISMATCH = 1
    TIMEOUT = 2
    LOW_QUALITY = 3
    INSUFFICIENT_AREA = 4
    SKIN_TOO_DRY = 5
    SKIN_TOO_WET = 6


class ButtonEvent(IntEnum):
    SINGLE_PRESS = 0
    DOUBLE_PRESS = 1
    LONG_PRESS = 2
    TRIPLE_PRESS = 3


class ToothbrushState(IntEnum):
    BRUSHING = 0
    FINISHED = 1


class MiBeaconPayload:
    """Base class of all decoded object payloads."""


@dataclasses.dataclass(frozen=True)
class RawPayload(MiBeaconPayload):
    """Payload of an object id without a known layout."""

    data: bytes


# Events (0x0000 - 0x0FFF)


@dataclasses.dataclass(frozen=True)
class Fingerprint(MiBeaconPayload):
    key_id: KeyId | int
    result: FingerprintResult | int

    @classmethod
    def decode(cls, reader: ByteReader) -> Fingerprint:
        return cls(
            key_id=_enum_or_int(KeyId, reader.u32("key id")),
            result=_enum_or_int(FingerprintResult, reader.u8("match result")),
        )


@dataclasses.dataclass(frozen=True)
class DoorEvent(MiBeaconPayload):
    state: DoorState | int
    timestamp: int | None = None

    @classmethod
    def decode(cls, reader: ByteReader) -> DoorEvent:
        state = _enum_or_int(DoorState, reader.u8("door state"))
        timestamp = None if reader.at_end else reader.u32("timestamp")
        return cls(state, timestamp)


@dataclasses.dataclass(frozen=True)
class Armed(MiBeaconPayload):
    """Armed away state, with the UTC time it changed in the long form."""

    armed: bool
    timestamp: int | None = None

    @classmethod
    def decode(cls, reader: ByteReader) -> Armed:
        armed = reader.u8("armed") != 0
        timestamp = None if reader.at_end else reader.u32("timestamp")
        return cls(armed, timestamp)


@dataclasses.dataclass(frozen=True)
class Gesture(MiBeaconPayload):
    code: int

    @classmethod
    def decode(cls, reader: ByteReader) -> Gesture:
        return cls(reader.u8("gesture"))


@dataclasses.dataclass(frozen=True)
class LockEvent(MiBeaconPayload):
    """Lock operation.

    The first byte packs the action into its low nibble and the method used
    into its high nibble.
    """

    action: LockAction | int
    method: LockMethod | int
    key_id: KeyId | int
    timestamp: int

    @classmethod
    def decode(cls, reader: ByteReader) -> LockEvent:
        packed = reader.u8("action/method")
        return cls(
            action=_enum_or_int(LockAction, bits(packed, 0, 4)),
            method=_enum_or_int(LockMethod, bits(packed, 4, 4)),
            key_id=_enum_or_int(KeyId, reader.u32("key id")),
            timestamp=reader.u32("timestamp"),
        )


@dataclasses.dataclass(frozen=True)
class Flooding(MiBeaconPayload):
    detected: bool

    @classmethod
    def decode(cls, reader: ByteReader) -> Flooding:
        return cls(reader.u8("flooding") != 0)


@dataclasses.dataclass(frozen=True)
class SmokeAlarm(MiBeaconPayload):
    detected: bool

    @classmethod
    def decode(cls, reader: ByteReader) -> SmokeAlarm:
        return cls(reader.u8("smoke alarm") != 0)


@dataclasses.dataclass(frozen=True)
class GasLeak(MiBeaconPayload):
    detected: bool

    @classmethod
    def decode(cls, reader: ByteReader) -> GasLeak:
        return cls(reader.u8("gas leak") != 0)


@dataclasses.dataclass(frozen=True)
class MovingWithLight(MiBeaconPayload):
    illuminance: int

    @classmethod
    def decode(cls, reader: ByteReader) -> MovingWithLight:
        return cls(reader.u24("illuminance"))


@dataclasses.dataclass(frozen=True)
class Toothbrush(MiBeaconPayload):
    """Toothbrush session.

    The optional second byte is a counter while brushing and the score once
    brushing has finished.
    """

    state: ToothbrushState | int
    value: int | None = None

    @classmethod
    def decode(cls, reader: ByteReader) -> Toothbrush:
        state = _enum_or_int(ToothbrushState, reader.u8("toothbrush state"))
        value = None if reader.at_end else reader.u8("toothbrush value")
        return cls(state, value)


# Attributes (0x1000 - 0x1FFF)


@dataclasses.dataclass(frozen=True)
class Button(MiBeaconPayload):
    index: int
    event: ButtonEvent | int

    @classmethod
    def decode(cls, reader: ByteReader) -> Button:
        return cls(
            index=reader.u16("button index"),
            event=_enum_or_int(ButtonEvent, reader.u8("button event")),
        )


@dataclasses.dataclass(frozen=True)
class Temperature(MiBeaconPayload):
    decicelsius: int

    @classmethod
    def decode(cls, reader: ByteReader) -> Temperature:
        return cls(reader.i16("temperature"))


@dataclasses.dataclass(frozen=True)
class PowerAndTemperature(MiBeaconPayload):
    power: int
    temperature: int

    @classmethod
    def decode(cls, reader: ByteReader) -> PowerAndTemperature:
        return cls(reader.u8("power"), reader.u8("temperature"))


@dataclasses.dataclass(frozen=True)
class Humidity(MiBeaconPayload):
    permille: int

    @classmethod
    def decode(cls, reader: ByteReader) -> Humidity:
        return cls(reader.u16("humidity"))


@dataclasses.dataclass(frozen=True)
class Illuminance(MiBeaconPayload):
    lux: int

    @classmethod
    def decode(cls, reader: ByteReader) -> Illuminance:
        return cls(reader.u24("illuminance"))


@dataclasses.dataclass(frozen=True)
class Moisture(MiBeaconPayload):
    percent: int

    @classmethod
    def decode(cls, reader: ByteReader) -> Moisture:
        return cls(reader.u8("moisture"))


@dataclasses.dataclass(frozen=True)
class Conductivity(MiBeaconPayload):
    microsiemens_per_cm: int

    @classmethod
    def decode(cls, reader: ByteReader) -> Conductivity:
        return cls(reader.u16("conductivity"))


@dataclasses.dataclass(frozen=True)
class Battery(MiBeaconPayload):
    percent: int

    @classmethod
    def decode(cls, reader: ByteReader) -> Battery:
        return cls(reader.u8("battery"))


@dataclasses.dataclass(frozen=True)
class TemperatureAndHumidity(MiBeaconPayload):
    decicelsius: int
    permille: int

    @classmethod
    def decode(cls, reader: ByteReader) -> TemperatureAndHumidity:
        return cls(reader.i16("temperature"), reader.u16("humidity"))


@dataclasses.dataclass(frozen=True)
class LockState(MiBeaconPayload):
    """Bolt positions of a smart lock (``True`` means extended)."""

    latch_bolt: bool
    dead_bolt: bool
    oblique_bolt: bool
    child_lock: bool
    reserved: int

    @classmethod
    def decode(cls, reader: ByteReader) -> LockState:
        value = reader.u8("lock state")
        return cls(
            latch_bolt=bit(value, 0),
            dead_bolt=bit(value, 1),
            oblique_bolt=bit(value, 2),
            child_lock=bit(value, 3),
            reserved=bits(value, 4, 4),
        )

    @property
    def locked(self) -> bool:
        return self.latch_bolt or self.dead_bolt


@dataclasses.dataclass(frozen=True)
class FormaldehydeConcentration(MiBeaconPayload):
    """Formaldehyde in 0.01 mg/m³ steps."""

    value: int

    @classmethod
    def decode(cls, reader: ByteReader) -> FormaldehydeConcentration:
        return cls(reader.u16("formaldehyde"))


@dataclasses.dataclass(frozen=True)
class Power(MiBeaconPayload):
    on: bool

    @classmethod
    def decode(cls, reader: ByteReader) -> Power:
        return cls(reader.u8("power") != 0)


@dataclasses.dataclass(frozen=True)
class Consumable(MiBeaconPayload):
    percent: int

    @classmethod
    def decode(cls, reader: ByteReader) -> Consumable:
        return cls(reader.u8("consumable"))


@dataclasses.dataclass(frozen=True)
class MoistureDetected(MiBeaconPayload):
    detected: bool

    @classmethod
    def decode(cls, reader: ByteReader) -> MoistureDetected:
        return cls(reader.u8("moisture detected") != 0)


@dataclasses.dataclass(frozen=True)
class SmokeDetected(MiBeaconPayload):
    detected: bool

    @classmethod
    def decode(cls, reader: ByteReader) -> SmokeDetected:
        return cls(reader.u8("smoke detected") != 0)


@dataclasses.dataclass(frozen=True)
class TimeWithoutMotion(MiBeaconPayload):
    seconds: int

    @classmethod
    def decode(cls, reader: ByteReader) -> TimeWithoutMotion:
        return cls(reader.u32("time without motion"))


@dataclasses.dataclass(frozen=True)
class LightIntensity(MiBeaconPayload):
    strong: bool

    @classmethod
    def decode(cls, reader: ByteReader) -> LightIntensity:
        return cls(reader.u8("light intensity") != 0)


@dataclasses.dataclass(frozen=True)
class Opening(MiBeaconPayload):
    state: OpeningState | int

    @classmethod
    def decode(cls, reader: ByteReader) -> Opening:
        return cls(_enum_or_int(OpeningState, reader.u8("opening")))


@dataclasses.dataclass(frozen=True)
class NoMotionTimeout(MiBeaconPayload):
    seconds: int

    @classmethod
    def decode(cls, reader: ByteReader) -> NoMotionTimeout:
        return cls(reader.u32("no motion timeout"))


@dataclasses.dataclass(frozen=True)
class PillowState(MiBeaconPayload):
    in_bed: bool

    @classmethod
    def decode(cls, reader: ByteReader) -> PillowState:
        return cls(reader.u8("pillow state") != 0)


@dataclasses.dataclass(frozen=True)
class FineFormaldehydeConcentration(MiBeaconPayload):
    """Formaldehyde in 0.001 mg/m³ steps."""

    value: int

    @classmethod
    def decode(cls, reader: ByteReader) -> FineFormaldehydeConcentration:
        return cls(reader.u16("formaldehyde"))


# Properties (0x4800 - 0x4FFF)


@dataclasses.dataclass(frozen=True)
class NoMotionDuration(MiBeaconPayload):
    seconds: int

    @classmethod
    def decode(cls, reader: ByteReader) -> NoMotionDuration:
        return cls(reader.u16("no motion duration"))


@dataclasses.dataclass(frozen=True)
class MotionWithIlluminance(MiBeaconPayload):
    lux: float

    @classmethod
    def decode(cls, reader: ByteReader) -> MotionWithIlluminance:
        return cls(reader.f32("illuminance"))


@dataclasses.dataclass(frozen=True)
class FloatTemperature(MiBeaconPayload):
    celsius: float

    @classmethod
    def decode(cls, reader: ByteReader) -> FloatTemperature:
        return cls(reader.f32("temperature"))


@dataclasses.dataclass(frozen=True)
class PercentHumidity(MiBeaconPayload):
    percent: int

    @classmethod
    def decode(cls, reader: ByteReader) -> PercentHumidity:
        return cls(reader.u8("humidity"))


@dataclasses.dataclass(frozen=True)
class FloatHumidity(MiBeaconPayload):
    percent: float

    @classmethod
    def decode(cls, reader: ByteReader) -> FloatHumidity:
        return cls(reader.f32("humidity"))


Decoder = Callable[[ByteReader], MiBeaconPayload]

# object id -> {valid payload length: decoder}
OBJECT_TYPES: Mapping[int, Mapping[int, Decoder]] = MappingProxyType(
    {
        0x0006: {5: Fingerprint.decode},
        0x0007: {1: DoorEvent.decode, 5: DoorEvent.decode},
        0x0008: {1: Armed.decode, 5: Armed.decode},
        0x0009: {1: Gesture.decode},
        0x000B: {9: LockEvent.decode},
        0x000C: {1: Flooding.decode},
        0x000D: {1: SmokeAlarm.decode},
        0x000E: {1: GasLeak.decode},
        0x000F: {3: MovingWithLight.decode},
        0x0010: {1: Toothbrush.decode, 2: Toothbrush.decode},
        0x1001: {3: Button.decode},
        0x1004: {2: Temperature.decode},
        0x1005: {2: PowerAndTemperature.decode},
        0x1006: {2: Humidity.decode},
        0x1007: {3: Illuminance.decode},
        0x1008: {1: Moisture.decode},
        0x1009: {2: Conductivity.decode},
        0x100A: {1: Battery.decode},
        0x100D: {4: TemperatureAndHumidity.decode},
        0x100E: {1: LockState.decode},
        0x1010: {2: FormaldehydeConcentration.decode},
        # 0x1012 is also documented as a 3 byte button payload; only the
        # power switch layout is decoded.
        0x1012: {1: Power.decode},
        0x1013: {1: Consumable.decode},
        0x1014: {1: MoistureDetected.decode},
        0x1015: {1: SmokeDetected.decode},
        0x1017: {4: TimeWithoutMotion.decode},
        0x1018: {1: LightIntensity.decode},
        0x1019: {1: Opening.decode},
        0x101B: {4: NoMotionTimeout.decode},
        0x101C: {1: PillowState.decode, 2: FineFormaldehydeConcentration.decode},
        0x4803: {1: Battery.decode},
        0x4818: {2: NoMotionDuration.decode},
        0x4A08: {4: MotionWithIlluminance.decode},
        0x4C01: {4: FloatTemperature.decode},
        0x4C02: {1: PercentHumidity.decode},
        0x4C03: {1: Battery.decode},
        0x4C08: {4: FloatHumidity.decode},
    }
)


def decode_payload(object_id: int, data: bytes) -> MiBeaconPayload:
    """Decode the payload of a single object.

    Raises :class:`DecodeFailed` when ``object_id`` is known but ``data`` does
    not have one of its valid lengths.
    """
    decoders = OBJECT_TYPES.get(object_id)
    if decoders is None:
        _LOGGER.debug("Unknown MiBeacon object 0x%04X: %s", object_id, data.hex())
        return RawPayload(bytes(data))
    decoder = decoders.get(len(data))
    if decoder is None:
        raise DecodeFailed(
            f"object 0x{object_id:04X}: invalid length {len(data)}, "
            f"expected {' or '.join(str(n) for n in sorted(decoders))}"
        )
    return decoder(ByteReader(data))
