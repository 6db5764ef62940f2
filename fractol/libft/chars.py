"""ASCII character classification, case conversion and integer formatting."""

from __future__ import annotations


def _code(c):
    """The character code of ``c``, given as an int or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def is_digit(c):
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alpha(c):
    """True for the ASCII letters A-Z and a-z."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_alnum(c):
    """True for ASCII letters and digits."""
    return is_digit(c) or is_alpha(c)


def is_ascii(c):
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c):
    """True for the printable ASCII codes 32 to 126."""
    return 32 <= _code(c) < 127


def _convert(c, low, high, shift):
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += shift
    return chr(code) if isinstance(c, str) else code


def to_lower(c):
    """ASCII upper-case letters lowered; everything else unchanged."""
    return _convert(c, "A", "Z", 32)


def to_upper(c):
    """ASCII lower-case letters raised; everything else unchanged."""
    return _convert(c, "a", "z", -32)


def itoa(n):
    """The decimal text of an integer, with a leading minus when negative."""
    return str(int(n))