"""A ring-buffered stream into which input can be injected by hand."""

from __future__ import annotations

from typing import Callable, Optional, Union

WriteCallback = Callable[[int], None]


class StreamInjector:
    """Stream whose reads come from injected bytes and whose writes go to a callback.

    The ring buffer keeps no overflow guard: once the write position catches
    up with the read position the buffer appears empty again.
    """

    def __init__(self, buflen: int = 128) -> None:
        if not 1 <= buflen <= 255:
            raise ValueError(f"buffer length must be within 1..255, got {buflen}")
        self._buffer = bytearray(buflen)
        self._size = buflen
        self._write_pos = 0
        self._read_pos = 0
        self._callback: Optional[WriteCallback] = None

    def inject(self, data: Union[int, bytes, bytearray, str]) -> int:
        """Put a byte or a sequence of bytes into the read buffer; return the count."""
        if isinstance(data, int):
            data = bytes((data & 0xFF,))
        elif isinstance(data, str):
            data = data.encode("utf-8")
        for byte in data:
            self._buffer[self._write_pos] = byte
            self._write_pos = (self._write_pos + 1) % self._size
        return len(data)

    def on_write(self, callback: Optional[WriteCallback]) -> None:
        """Set the function that receives every written byte."""
        self._callback = callback

    def write(self, ch: int) -> int:
        """Pass one byte to the write callback, if any."""
        if self._callback is not None:
            self._callback(ch)
        return 1

    def read(self) -> Optional[int]:
        """Take the next byte, or return None when nothing is buffered."""
        if self._read_pos == self._write_pos:
            return None
        ch = self._buffer[self._read_pos]
        self._read_pos = (self._read_pos + 1) % self._size
        return ch

    def available(self) -> int:
        """Number of bytes waiting to be read."""
        return (self._write_pos - self._read_pos) % self._size

    def peek(self) -> Optional[int]:
        """Return the next byte without consuming it, or None when empty."""
        if self._read_pos == self._write_pos:
            return None
        return self._buffer[self._read_pos]

    def flush(self) -> None:
        """Discard everything waiting to be read."""
        self._read_pos = self._write_pos