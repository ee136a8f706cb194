"""Byte sinks - where a finished frame goes.

The transport itself (SPI bus, serial port, socket) belongs to the caller.
Anything with write(bytes) -> int works: an opened /dev/spidev device file,
a pyserial port, io.BytesIO.
"""

from typing import Callable, Optional, Protocol


class ByteSink(Protocol):
    """Accepts a whole frame; returns bytes accepted, raises OSError on failure."""

    def write(self, data: bytes) -> int: ...


class CallableSink:
    """Wrap any callable(frame) you already have (e.g. spi.writebytes).

    A callable returning None is taken to have accepted the whole frame.
    """

    def __init__(self, fn: Callable[[bytes], Optional[int]]):
        self.fn = fn

    def write(self, data: bytes) -> int:
        written = self.fn(data)
        return len(data) if written is None else written
