"""MiBeacon service advertisement decoder.

A frame is a fixed header (frame control, device id, packet id), optional
header fields gated by frame control flags, and a stream of
``id (u16) | length (u8) | payload`` objects running to the end of the data.
"""
from __future__ import annotations

import dataclasses
import logging

from .bitfields import Capabilities, FrameControl, IoCapabilities
from .devices import DeviceEntry, device_id_to_type
from .errors import DecodeFailed
from .payloads import MiBeaconPayload, decode_payload
from .reader import ByteReader, to_mac
from .sensor import SensorEvent, payload_to_sensor_events

_LOGGER = logging.getLogger(__name__)

OBJECT_HEADER_SIZE = 3


@dataclasses.dataclass(frozen=True)
class MiBeaconObject:
    id: int
    length: int
    payload: MiBeaconPayload

    def sensor_events(self) -> tuple[SensorEvent, ...]:
        return payload_to_sensor_events(self.payload)


def decode_objects(data: bytes) -> tuple[MiBeaconObject, ...]:
    """Decode an object stream that must end exactly at the end of ``data``."""
    reader = ByteReader(data)
    objects = []
    while not reader.at_end:
        if reader.remaining < OBJECT_HEADER_SIZE:
            raise DecodeFailed(
                f"trailing {reader.remaining} byte(s) at offset {reader.offset} "
                "are too short for an object header"
            )
        object_id = reader.u16("object id")
        length = reader.u8("object length")
        payload = reader.read(length, f"object 0x{object_id:04X} payload")
        objects.append(MiBeaconObject(object_id, length, decode_payload(object_id, payload)))
    return tuple(objects)


@dataclasses.dataclass(frozen=True)
class MiBeaconServiceAdvertisement:
    frame_control: FrameControl
    device_id: int
    packet_id: int
    mac_address: bytes | None = None
    capabilities: Capabilities | None = None
    io_capabilities: IoCapabilities | None = None
    objects: tuple[MiBeaconObject, ...] = ()
    # Undecoded object data of encrypted frames
    encrypted_payload: bytes | None = None

    @classmethod
    def from_bytes(cls, data: bytes) -> MiBeaconServiceAdvertisement:
        """Decode a MiBeacon service data payload.

        Raises :class:`DecodeFailed` if any field is truncated or an object
        with a known id has an invalid length.
        """
        reader = ByteReader(data)
        frame_control = FrameControl.from_int(reader.u16("frame control"))
        device_id = reader.u16("device id")
        packet_id = reader.u8("packet id")

        mac_address = None
        if frame_control.mac_included:
            mac_address = reader.read(6, "mac address")

        capabilities = None
        io_capabilities = None
        if frame_control.capabilities_included:
            capabilities = Capabilities.from_int(reader.u8("capabilities"))
            if capabilities.io:
                io_capabilities = IoCapabilities.from_bytes(reader.read(2, "io capabilities"))

        objects: tuple[MiBeaconObject, ...] = ()
        encrypted_payload = None
        if frame_control.objects_included:
            if frame_control.encrypted:
                encrypted_payload = reader.rest()
                _LOGGER.debug(
                    "Not decrypting MiBeacon payload of device 0x%04X: %s",
                    device_id,
                    encrypted_payload.hex(),
                )
            else:
                objects = decode_objects(reader.rest())
        elif not reader.at_end:
            _LOGGER.debug(
                "Ignoring %d byte(s) after MiBeacon header without objects",
                reader.remaining,
            )

        return cls(
            frame_control=frame_control,
            device_id=device_id,
            packet_id=packet_id,
            mac_address=mac_address,
            capabilities=capabilities,
            io_capabilities=io_capabilities,
            objects=objects,
            encrypted_payload=encrypted_payload,
        )

    @property
    def device_type(self) -> DeviceEntry | None:
        """Get device type of advertisement sender."""
        return device_id_to_type(self.device_id)

    @property
    def mac(self) -> str | None:
        if self.mac_address is None:
            return None
        # transmitted in reverse order
        return to_mac(self.mac_address[::-1])

    def sensor_events(self) -> tuple[SensorEvent, ...]:
        """Sensor events of all objects, in object order."""
        return tuple(event for obj in self.objects for event in obj.sensor_events())
