"""Minimal printf-style formatting with the %c %s %p %d %i %u %x %X %% conversions."""

from __future__ import annotations

import sys

_UINT32_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def _int32(value):
    value = int(value) & _UINT32_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _uint32(value):
    return int(value) & _UINT32_MASK


def _char(value):
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _string(value):
    return "(null)" if value is None else str(value)


def _pointer(value):
    if value is None:
        address = 0
    elif isinstance(value, int):
        address = value & _POINTER_MASK
    else:
        address = id(value)
    return "0x" + format(address, "x")


_CONVERSIONS = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": lambda value: str(_int32(value)),
    "i": lambda value: str(_int32(value)),
    "u": lambda value: str(_uint32(value)),
    "x": lambda value: format(_uint32(value), "x"),
    "X": lambda value: format(_uint32(value), "X"),
}


def _convert(spec, args):
    if spec == "%":
        return "%"
    conversion = _CONVERSIONS.get(spec)
    if conversion is None:
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    return conversion(value)


def _pieces(fmt, args):
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            # A lone trailing percent sign is written as it is.
            yield "%"
        else:
            yield _convert(spec, remaining)


def sprintf(fmt, *args):
    """The formatted text; unknown conversions produce nothing."""
    return "".join(_pieces(fmt, args))


def printf_to(stream, fmt, *args):
    """Write the formatted text to ``stream`` (stdout if None); return its length."""
    text = sprintf(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)