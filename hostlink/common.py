"""Shared value-type tags and millisecond timing helpers."""

from __future__ import annotations

import struct
import time
from enum import Enum

__all__ = ["ValueType", "get_time_ms", "delay_ms"]

_UINT32_MASK = 0xFFFFFFFF


class ValueType(Enum):
    """Tag describing the kind of element a container holds."""

    CHAR = "c"
    INT = "i"
    FLOAT = "f"
    DOUBLE = "d"
    POINTER = "P"
    STRING = "s"
    ERROR = ""

    def size(self) -> int:
        """Return the native storage size in bytes of one element of this type."""
        if self is ValueType.ERROR:
            return 0
        if self is ValueType.STRING:
            # Strings are held by reference, like a pointer to characters.
            return struct.calcsize("P")
        return struct.calcsize(self.value)


def get_time_ms() -> int:
    """Return a monotonic millisecond counter that wraps like an unsigned 32-bit value."""
    return int(time.monotonic() * 1000) & _UINT32_MASK


def delay_ms(ms: int) -> None:
    """Block the calling thread for ``ms`` milliseconds."""
    if ms < 0:
        raise ValueError("delay must not be negative")
    time.sleep(ms / 1000)