"""Bit-packed header fields of the MiBeacon format.

Flags live at fixed offsets and are pulled out with plain mask/shift
accessors over the integer read from the wire.
"""
from __future__ import annotations

import dataclasses
from enum import IntEnum


def bit(value: int, index: int) -> bool:
    """Return bit ``index`` of ``value``."""
    return bool((value >> index) & 1)


def bits(value: int, offset: int, width: int) -> int:
    """Return the ``width`` bit wide field of ``value`` starting at ``offset``."""
    return (value >> offset) & ((1 << width) - 1)


class BondAbility(IntEnum):
    NONE = 0
    PRE_BIND = 1
    POST_BIND = 2
    COMBO = 3


@dataclasses.dataclass(frozen=True)
class FrameControl:
    """Frame control word.

    The two wire bytes form one 16 bit word with the first byte in the low
    bits: ``word = data[0] | data[1] << 8``.
    """

    request_timing: bool
    encrypted: bool
    mac_included: bool
    capabilities_included: bool
    objects_included: bool
    mesh: bool
    registered: bool
    solicited: bool
    auth_mode: int
    version: int

    @classmethod
    def from_int(cls, word: int) -> FrameControl:
        return cls(
            request_timing=bit(word, 0),
            encrypted=bit(word, 3),
            mac_included=bit(word, 4),
            capabilities_included=bit(word, 5),
            objects_included=bit(word, 6),
            mesh=bit(word, 7),
            registered=bit(word, 8),
            solicited=bit(word, 9),
            auth_mode=bits(word, 10, 2),
            version=bits(word, 12, 4),
        )


@dataclasses.dataclass(frozen=True)
class Capabilities:
    connectable: bool
    centralable: bool
    encryptable: bool
    bond_ability: BondAbility
    io: bool

    @classmethod
    def from_int(cls, value: int) -> Capabilities:
        return cls(
            connectable=bit(value, 0),
            centralable=bit(value, 1),
            encryptable=bit(value, 2),
            bond_ability=BondAbility(bits(value, 3, 2)),
            io=bit(value, 5),
        )


@dataclasses.dataclass(frozen=True)
class IoCapabilities:
    input_six_digits: bool
    input_six_letters: bool
    read_nfc_tag: bool
    recognize_qr_code: bool
    output_six_digits: bool
    output_six_letters: bool
    generate_nfc_tag: bool
    generate_qr_code: bool
    reserved: int

    @classmethod
    def from_bytes(cls, data: bytes) -> IoCapabilities:
        flags = data[0]
        return cls(
            input_six_digits=bit(flags, 0),
            input_six_letters=bit(flags, 1),
            read_nfc_tag=bit(flags, 2),
            recognize_qr_code=bit(flags, 3),
            output_six_digits=bit(flags, 4),
            output_six_letters=bit(flags, 5),
            generate_nfc_tag=bit(flags, 6),
            generate_qr_code=bit(flags, 7),
            reserved=data[1],
        )
