from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True)
class DeviceEntry:
    name: str
    model: str
    manufacturer: str = "Xiaomi"


DEVICE_TYPES: dict[int, DeviceEntry] = {
    0x0098: DeviceEntry(
        name="Plant Sensor",
        model="HHCCJCY01",
    ),
    0x015D: DeviceEntry(
        name="Smart Flower Pot",
        model="HHCCPOT002",
        manufacturer="HHCC Plant Technology Co. Ltd",
    ),
    0x01AA: DeviceEntry(
        name="Temperature/Humidity Sensor",
        model="LYWSDCGQ",
    ),
    0x02DF: DeviceEntry(
        name="Formaldehyde Sensor",
        model="JQJCY01YM",
    ),
    0x0347: DeviceEntry(
        name="Temperature/Humidity Sensor",
        model="CGG1",
        manufacturer="Qingping",
    ),
    0x03BC: DeviceEntry(
        name="Grow Care Garden",
        model="GCLS002",
    ),
    0x045B: DeviceEntry(
        name="Temperature/Humidity Sensor",
        model="LYWSD02",
    ),
    0x055B: DeviceEntry(
        name="Temperature/Humidity Sensor",
        model="LYWSD03MMC",
    ),
    0x0576: DeviceEntry(
        name="Alarm Clock",
        model="CGD1",
        manufacturer="Qingping",
    ),
    0x066F: DeviceEntry(
        name="Temperature/Humidity Sensor",
        model="CGDK2",
        manufacturer="Qingping",
    ),
    0x0083: DeviceEntry(
        name="Smart Kettle",
        model="YM-K1501",
    ),
    0x0113: DeviceEntry(
        name="Smart Kettle",
        model="V-SK152",
        manufacturer="Viomi",
    ),
    0x0153: DeviceEntry(
        name="Remote Control",
        model="YLYK01YL",
        manufacturer="Yeelight",
    ),
    0x03B6: DeviceEntry(
        name="Dimmer Switch",
        model="YLKG07YL/YLKG08YL",
        manufacturer="Yeelight",
    ),
    0x0489: DeviceEntry(
        name="Electric Toothbrush",
        model="M1S-T500",
        manufacturer="Oclean",
    ),
    0x07F6: DeviceEntry(
        name="Night Light",
        model="MJYD02YL",
    ),
    0x0863: DeviceEntry(
        name="Flood Detector",
        model="SJWS01LM",
    ),
    0x0A8D: DeviceEntry(
        name="Motion Sensor",
        model="RTCGQ02LM",
    ),
}


def device_id_to_type(device_id: int) -> DeviceEntry | None:
    return DEVICE_TYPES.get(device_id)
