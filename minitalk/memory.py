"""Byte-buffer helpers: fill, search, compare and copy.

Buffers are ``bytearray`` (or any writable bytes-like object) for the
functions that write, and any bytes-like object for those that only read.
Lengths that run past the end of a buffer raise ``ValueError`` instead of
touching memory that is not there.
"""

from typing import Optional

SIZE_MAX = 2**64 - 1


def _check_length(length: int, *buffers) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    for buffer in buffers:
        if length > len(buffer):
            raise ValueError(f"length {length} exceeds buffer size {len(buffer)}")


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes with ``value`` truncated to a byte."""
    _check_length(length, buffer)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> None:
    """Zero the first ``length`` bytes."""
    memset(buffer, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes.

    Raises ``OverflowError`` where the product does not fit in a size_t.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size and count > SIZE_MAX // size:
        raise OverflowError(f"{count} * {size} bytes is too large")
    return bytearray(count * size)


def memchr(data, value: int, length: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` within ``length`` bytes, or None."""
    _check_length(length, data)
    index = bytes(data[:length]).find(bytes([value & 0xFF]))
    return None if index < 0 else index


def memcmp(first, second, length: int) -> int:
    """Compare ``length`` bytes; return the difference at the first mismatch, else 0."""
    _check_length(length, first, second)
    for a, b in zip(bytes(first[:length]), bytes(second[:length])):
        if a != b:
            return a - b
    return 0


def memcpy(dst, src, length: int):
    """Copy ``length`` bytes of ``src`` to the start of ``dst`` and return ``dst``.

    With both buffers absent, returns None.
    """
    if dst is None and src is None:
        return None
    _check_length(length, dst, src)
    dst[:length] = bytes(src[:length])
    return dst


def memmove(buffer: bytearray, dst_offset: int, src_offset: int, length: int) -> bytearray:
    """Copy ``length`` bytes within one buffer; the regions may overlap."""
    if dst_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_length(length, buffer)
    if max(dst_offset, src_offset) + length > len(buffer):
        raise ValueError("region runs past the end of the buffer")
    buffer[dst_offset:dst_offset + length] = bytes(buffer[src_offset:src_offset + length])
    return buffer