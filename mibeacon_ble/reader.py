from __future__ import annotations

import struct

from .errors import DecodeFailed


def to_mac(addr: bytes) -> str:
    """Return formatted MAC address."""
    return ":".join(f"{i:02X}" for i in addr)


class ByteReader:
    """Forward-only cursor over a byte string.

    Every read is bounds checked: asking for more bytes than remain raises
    :class:`DecodeFailed` instead of returning a short or padded value.
    """

    def __init__(self, data: bytes) -> None:
        self.data = bytes(data)
        self.offset = 0

    @property
    def remaining(self) -> int:
        return len(self.data) - self.offset

    @property
    def at_end(self) -> bool:
        return self.offset >= len(self.data)

    def read(self, size: int, field: str = "data") -> bytes:
        if size > self.remaining:
            raise DecodeFailed(
                f"{field}: need {size} byte(s) at offset {self.offset}, "
                f"only {self.remaining} left"
            )
        chunk = self.data[self.offset : self.offset + size]
        self.offset += size
        return chunk

    def rest(self) -> bytes:
        return self.read(self.remaining)

    def _unpack(self, fmt: str, field: str):
        return struct.unpack(fmt, self.read(struct.calcsize(fmt), field))[0]

    def u8(self, field: str = "u8") -> int:
        return self._unpack("<B", field)

    def u16(self, field: str = "u16") -> int:
        return self._unpack("<H", field)

    def i16(self, field: str = "i16") -> int:
        return self._unpack("<h", field)

    def u24(self, field: str = "u24") -> int:
        return int.from_bytes(self.read(3, field), "little")

    def u32(self, field: str = "u32") -> int:
        return self._unpack("<I", field)

    def f32(self, field: str = "f32") -> float:
        return self._unpack("<f", field)
