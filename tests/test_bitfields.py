"""Tests for header bitfield accessors."""
from mibeacon_ble.bitfields import (
    BondAbility,
    Capabilities,
    FrameControl,
    IoCapabilities,
    bit,
    bits,
)


def test_bit_and_bits():
    assert bit(0b1000, 3) is True
    assert bit(0b1000, 2) is False
    assert bits(0xF3C8, 12, 4) == 0xF
    assert bits(0b0110_0000, 5, 2) == 0b11


def test_frame_control_miflora():
    fc = FrameControl.from_int(0x2071)
    assert fc.request_timing is True
    assert fc.encrypted is False
    assert fc.mac_included is True
    assert fc.capabilities_included is True
    assert fc.objects_included is True
    assert fc.mesh is False
    assert fc.registered is False
    assert fc.solicited is False
    assert fc.auth_mode == 0
    assert fc.version == 2


def test_frame_control_high_byte_fields():
    fc = FrameControl.from_int(0x3CC8)
    assert fc.encrypted is True
    assert fc.mac_included is False
    assert fc.capabilities_included is False
    assert fc.objects_included is True
    assert fc.mesh is True
    assert fc.registered is False
    assert fc.solicited is False
    assert fc.auth_mode == 3
    assert fc.version == 3


def test_frame_control_registered_and_solicited():
    fc = FrameControl.from_int(0x0300)
    assert fc.registered is True
    assert fc.solicited is True
    assert fc.auth_mode == 0


def test_capabilities():
    caps = Capabilities.from_int(0x0D)
    assert caps.connectable is True
    assert caps.centralable is False
    assert caps.encryptable is True
    assert caps.bond_ability is BondAbility.PRE_BIND
    assert caps.io is False


def test_capabilities_with_io_and_combo_bond():
    caps = Capabilities.from_int(0x38)
    assert caps.bond_ability is BondAbility.COMBO
    assert caps.io is True
    assert caps.connectable is False


def test_io_capabilities():
    io = IoCapabilities.from_bytes(bytes([0b1001_0011, 0x07]))
    assert io.input_six_digits is True
    assert io.input_six_letters is True
    assert io.read_nfc_tag is False
    assert io.recognize_qr_code is False
    assert io.output_six_digits is True
    assert io.output_six_letters is False
    assert io.generate_nfc_tag is False
    assert io.generate_qr_code is True
    assert io.reserved == 0x07
