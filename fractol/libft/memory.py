"""Byte-buffer helpers: filling, zeroing, searching, comparing and copying."""

from __future__ import annotations


def _check_range(buffer, offset, length, what):
    if length < 0 or offset < 0 or offset + length > len(buffer):
        raise ValueError(
            f"{what} range [{offset}, {offset + length}) does not fit in "
            f"a buffer of {len(buffer)} bytes"
        )


def memset(buffer, value, length):
    """Fill the first ``length`` bytes of ``buffer`` with ``value`` (low 8 bits)."""
    _check_range(buffer, 0, length, "fill")
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer, length):
    """Zero the first ``length`` bytes of ``buffer``."""
    return memset(buffer, 0, length)


def calloc(count, size):
    """A new zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(data, value, length):
    """Index of the first byte equal to ``value`` within ``length`` bytes, or None."""
    target = value & 0xFF
    index = bytes(data[:length]).find(bytes([target]))
    return None if index < 0 else index


def memcmp(first, second, length):
    """Difference of the first unequal bytes within ``length``, or 0 if none differ."""
    for a, b in zip(first[:length], second[:length]):
        if a != b:
            return a - b
    return 0


def memcpy(dst, src, length):
    """Copy ``length`` bytes from ``src`` to the start of ``dst``."""
    _check_range(dst, 0, length, "destination")
    _check_range(src, 0, length, "source")
    dst[:length] = bytes(src[:length])
    return dst


def memmove(buffer, dst_offset, src_offset, length):
    """Copy ``length`` bytes within ``buffer``; overlapping regions are handled."""
    _check_range(buffer, dst_offset, length, "destination")
    _check_range(buffer, src_offset, length, "source")
    buffer[dst_offset:dst_offset + length] = bytes(
        buffer[src_offset:src_offset + length]
    )
    return buffer