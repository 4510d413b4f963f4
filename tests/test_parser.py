"""Tests for the BluetoothData adapter."""
from home_assistant_bluetooth import BluetoothServiceInfo
from sensor_state_data import DeviceKey

from mibeacon_ble import MiBeaconBluetoothDeviceData
from mibeacon_ble.const import SERVICE_MIBEACON

ADDRESS = "C4:7C:8D:6A:3E:7A"


def _service_info(service_data: dict[str, bytes]) -> BluetoothServiceInfo:
    return BluetoothServiceInfo(
        name="Flower care",
        address=ADDRESS,
        rssi=-60,
        manufacturer_data={},
        service_data=service_data,
        service_uuids=list(service_data),
        source="local",
    )


def test_temperature_update():
    data = bytes.fromhex("71 20 98 00 B1 66 55 44 33 22 11 0D 04 10 02 EC 00")
    parser = MiBeaconBluetoothDeviceData()
    update = parser.update(_service_info({SERVICE_MIBEACON: data}))

    assert update.entity_values[DeviceKey(key="temperature", device_id=None)].native_value == 23.6
    assert update.devices[None].model == "HHCCJCY01"
    assert update.devices[None].manufacturer == "Xiaomi"
    assert parser.device is not None
    assert parser.last_service_info is not None


def test_binary_update():
    data = bytes.fromhex("71 20 98 00 02 66 55 44 33 22 11 0D 12 10 01 01")
    update = MiBeaconBluetoothDeviceData().update(_service_info({SERVICE_MIBEACON: data}))
    assert update.binary_entity_values[DeviceKey(key="power", device_id=None)].native_value is True


def test_malformed_advertisement_is_discarded():
    data = bytes.fromhex("71 20 98 00 03 66 55 44 33 22 11 0D 04 10 02 EC")
    parser = MiBeaconBluetoothDeviceData()
    update = parser.update(_service_info({SERVICE_MIBEACON: data}))
    assert DeviceKey(key="temperature", device_id=None) not in update.entity_values
    assert parser.last_service_info is None


def test_unhandled_service_is_skipped():
    parser = MiBeaconBluetoothDeviceData()
    parser.update(_service_info({"0000180f-0000-1000-8000-00805f9b34fb": b"\x64"}))
    assert parser.last_service_info is None
    assert parser.device is None


def test_repeated_packet_id_is_ignored():
    first = bytes.fromhex("71 20 98 00 07 66 55 44 33 22 11 0D 04 10 02 EC 00")
    repeat = bytes.fromhex("71 20 98 00 07 66 55 44 33 22 11 0D 04 10 02 00 01")
    parser = MiBeaconBluetoothDeviceData()
    parser.update(_service_info({SERVICE_MIBEACON: first}))
    update = parser.update(_service_info({SERVICE_MIBEACON: repeat}))
    assert parser.packet_id == 0x07
    value = update.entity_values.get(DeviceKey(key="temperature", device_id=None))
    assert value is None or value.native_value == 23.6
