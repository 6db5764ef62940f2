"""Writing characters, strings and integers to a text stream."""

from __future__ import annotations

import sys


def _target(stream):
    return sys.stdout if stream is None else stream


def put_char(c, stream=None):
    """Write one character; an integer is written as the character of its low byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        ch = c
    else:
        ch = chr(int(c) & 0xFF)
    _target(stream).write(ch)


def put_str(s, stream=None):
    """Write a string."""
    _target(stream).write(s)


def put_endl(s, stream=None):
    """Write a string followed by a newline."""
    target = _target(stream)
    target.write(s)
    target.write("\n")


def put_nbr(n, stream=None):
    """Write the decimal text of an integer."""
    _target(stream).write(str(int(n)))