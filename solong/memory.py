"""Byte-buffer helpers: fill, zero, allocate, search, compare and copy."""

from __future__ import annotations

SIZE_MAX = 2**64 - 1


def _check_length(length: int, *buffers: object) -> None:
    if length < 0:
        raise ValueError("length must not be negative")
    for buf in buffers:
        if length > len(buf):  # type: ignore[arg-type]
            raise ValueError(f"length {length} exceeds buffer of size {len(buf)}")  # type: ignore[arg-type]


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Set the first ``length`` bytes of ``buffer`` to ``value`` (taken modulo 256)."""
    _check_length(length, buffer)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> bytearray:
    """Zero the first ``length`` bytes of ``buffer``."""
    return memset(buffer, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes.

    Raises MemoryError when the total would overflow a 64-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count and size > SIZE_MAX // count:
        raise MemoryError(f"cannot allocate {count} x {size} bytes")
    return bytearray(count * size)


def memchr(data: bytes | bytearray, value: int, length: int) -> int | None:
    """Return the index of the first byte equal to ``value`` within ``length`` bytes, or None."""
    _check_length(length, data)
    index = bytes(data[:length]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: bytes | bytearray, second: bytes | bytearray, length: int) -> int:
    """Compare ``length`` bytes; return the difference of the first unequal pair, else 0."""
    _check_length(length, first, second)
    for a, b in zip(first[:length], second[:length]):
        if a != b:
            return a - b
    return 0


def memcpy(dst: bytearray, src: bytes | bytearray, length: int) -> bytearray:
    """Copy ``length`` bytes from ``src`` into the start of ``dst``."""
    _check_length(length, dst, src)
    dst[:length] = src[:length]
    return dst


def memmove(buffer: bytearray, dst_offset: int, src_offset: int, length: int) -> bytearray:
    """Copy ``length`` bytes within ``buffer``; the regions may overlap."""
    if dst_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    if length < 0:
        raise ValueError("length must not be negative")
    end = max(dst_offset, src_offset) + length
    if end > len(buffer):
        raise ValueError(f"range ending at {end} exceeds buffer of size {len(buffer)}")
    buffer[dst_offset:dst_offset + length] = bytes(buffer[src_offset:src_offset + length])
    return buffer