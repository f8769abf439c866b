"""Layout of the data kept in RTC user memory across reboots."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import ClassVar

# Base address of the user RTC memory.
RTCMEM_ADDR_BASE = 0x60001200
# Blocks reserved at the start of the user area, 4 bytes each.
RTCMEM_OFFSET = 32
RTCMEM_ADDR = RTCMEM_ADDR_BASE + RTCMEM_OFFSET * 4
RTCMEM_BLOCKS = 96

# Change this when modifying the layout.
RTCMEM_MAGIC = 0x45535075

_LAYOUT = struct.Struct("<IIIIQd")

if _LAYOUT.size > RTCMEM_BLOCKS * 4:
    raise RuntimeError("RTCMEM struct is too big")

# Size of the data in 4-byte blocks.
RTCMEM_SIZE = _LAYOUT.size // 4


@dataclass
class RtcmemData:
    """Values that survive a soft reboot."""

    magic: int = RTCMEM_MAGIC
    sys: int = 0
    relay: int = 0
    mqtt: int = 0
    light: int = 0
    energy: float = 0.0

    SIZE: ClassVar[int] = _LAYOUT.size

    def pack(self) -> bytes:
        """Serialise to the little-endian memory layout."""
        try:
            return _LAYOUT.pack(self.magic, self.sys, self.relay, self.mqtt,
                                self.light, self.energy)
        except struct.error as exc:
            raise ValueError(f"field out of range: {exc}") from None

    @classmethod
    def unpack(cls, data: bytes) -> "RtcmemData":
        """Read the memory layout back into a :class:`RtcmemData`."""
        if len(data) != _LAYOUT.size:
            raise ValueError(f"expected {_LAYOUT.size} bytes, got {len(data)}")
        return cls(*_LAYOUT.unpack(bytes(data)))

    def is_valid(self) -> bool:
        """Whether the memory holds data written by this layout."""
        return self.magic == RTCMEM_MAGIC