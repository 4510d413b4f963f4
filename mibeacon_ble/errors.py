"""Errors raised while decoding service advertisements."""


class MiBeaconError(Exception):
    """Base error for mibeacon_ble."""


class DecodeFailed(MiBeaconError):
    """Raised when a payload is truncated, malformed or has an invalid object length."""


class UnhandledService(MiBeaconError):
    """Raised when the service UUID does not belong to a supported protocol."""
