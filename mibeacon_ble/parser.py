from __future__ import annotations

import logging

from bluetooth_sensor_state_data import BluetoothData
from home_assistant_bluetooth import BluetoothServiceInfo

from .devices import DeviceEntry
from .errors import DecodeFailed, UnhandledService
from .mibeacon import MiBeaconServiceAdvertisement
from .sensor import BinaryMeasurement, SensorEvent
from .service import ServiceAdvertisement, parse_service_advertisement

_LOGGER = logging.getLogger(__name__)


class MiBeaconBluetoothDeviceData(BluetoothData):
    """Data for Xiaomi MiBeacon and related Bluetooth devices."""

    def __init__(self) -> None:
        super().__init__()

        # The last service_info we saw that had a payload
        self.last_service_info: BluetoothServiceInfo | None = None

        self.device: DeviceEntry | None = None
        self.packet_id: int | None = None

    def _start_update(self, service_info: BluetoothServiceInfo) -> None:
        """Update from BLE advertisement data."""
        for uuid, data in service_info.service_data.items():
            try:
                advertisement = parse_service_advertisement(uuid, data)
            except UnhandledService:
                continue
            except DecodeFailed as err:
                _LOGGER.debug(
                    "Discarding advertisement from %s (%s): %s",
                    service_info.address,
                    data.hex(),
                    err,
                )
                continue
            if self._process_advertisement(service_info, advertisement):
                self.last_service_info = service_info

    def _process_advertisement(
        self, service_info: BluetoothServiceInfo, advertisement: ServiceAdvertisement
    ) -> bool:
        if isinstance(advertisement, MiBeaconServiceAdvertisement):
            if advertisement.packet_id == self.packet_id:
                # Devices repeat each frame several times
                return False
            self.packet_id = advertisement.packet_id

        device = advertisement.device_type
        if device is not None:
            self.device = device
            identifier = service_info.address.replace(":", "")[-4:]
            self.set_title(f"{device.name} {identifier} ({device.model})")
            self.set_device_name(f"{device.name} {identifier}")
            self.set_device_type(device.model)
            self.set_device_manufacturer(device.manufacturer)

        for event in advertisement.sensor_events():
            self._update_from_event(event)
        return True

    def _update_from_event(self, event: SensorEvent) -> None:
        key = str(event.kind)
        if isinstance(event, BinaryMeasurement):
            self.update_binary_sensor(
                key=key,
                native_value=event.value,
                device_class=event.kind,
            )
        else:
            self.update_sensor(
                key=key,
                native_unit_of_measurement=event.unit,
                native_value=event.value,
                device_class=event.kind,
            )
