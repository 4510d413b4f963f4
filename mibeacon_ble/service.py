"""Service UUID dispatch."""
from __future__ import annotations

from enum import Enum
from typing import Union
from uuid import UUID

from .const import SERVICE_HHCCJCY10, SERVICE_MIBEACON, SERVICE_SCALE1, SERVICE_SCALE2
from .errors import UnhandledService
from .hhccjcy10 import HHCCJCY10ServiceAdvertisement
from .mibeacon import MiBeaconServiceAdvertisement
from .miscale import SCALE_V1, SCALE_V2, MiScaleServiceAdvertisement


class ServiceType(Enum):
    MIBEACON = "mibeacon"
    HHCCJCY10 = "hhccjcy10"
    SCALE_V1 = "scale_v1"
    SCALE_V2 = "scale_v2"


SERVICE_TYPES: dict[UUID, ServiceType] = {
    UUID(SERVICE_MIBEACON): ServiceType.MIBEACON,
    UUID(SERVICE_HHCCJCY10): ServiceType.HHCCJCY10,
    UUID(SERVICE_SCALE1): ServiceType.SCALE_V1,
    UUID(SERVICE_SCALE2): ServiceType.SCALE_V2,
}

ServiceAdvertisement = Union[
    MiBeaconServiceAdvertisement,
    HHCCJCY10ServiceAdvertisement,
    MiScaleServiceAdvertisement,
]


def service_uuid_to_type(uuid: UUID | str) -> ServiceType | None:
    """Map a service UUID (as :class:`UUID` or string) to its protocol."""
    if not isinstance(uuid, UUID):
        try:
            uuid = UUID(uuid)
        except ValueError:
            return None
    return SERVICE_TYPES.get(uuid)


def parse_service_advertisement(uuid: UUID | str, data: bytes) -> ServiceAdvertisement:
    """Decode the service data ``data`` advertised under ``uuid``.

    Raises :class:`UnhandledService` for unsupported UUIDs and
    :class:`DecodeFailed` for malformed data.
    """
    service_type = service_uuid_to_type(uuid)
    if service_type is ServiceType.MIBEACON:
        return MiBeaconServiceAdvertisement.from_bytes(data)
    if service_type is ServiceType.HHCCJCY10:
        return HHCCJCY10ServiceAdvertisement.from_bytes(data)
    if service_type is ServiceType.SCALE_V1:
        return MiScaleServiceAdvertisement.from_bytes(data, SCALE_V1)
    if service_type is ServiceType.SCALE_V2:
        return MiScaleServiceAdvertisement.from_bytes(data, SCALE_V2)
    raise UnhandledService(f"Unhandled service advertisement UUID {uuid}")


decode = parse_service_advertisement
