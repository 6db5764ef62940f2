"""Reading XPM images from string lists or files."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from fractol.mlx.colors import NO_COLOR, lookup_color
from fractol.mlx.wordtab import find, find_outside_quotes, split_words

TRANSPARENT = 0xFF000000
_NAME_BUFFER = 63
_HEX_NUMBER = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]+)")
_DECIMAL = re.compile(r"\s*([+-]?\d+)")
_LONG_MAX = 2 ** 63 - 1


class XpmError(ValueError):
    """Raised for XPM data that cannot be turned into an image."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: rows of 0xAARRGGBB pixel values, top to bottom."""

    width: int
    height: int
    pixels: tuple


def _int32(value):
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _atoi(text):
    match = _DECIMAL.match(text)
    return int(match.group(1)) if match else 0


def text_to_rgb(name, extra=None):
    """The colour a colour-table entry names: ``#hex``, or a colour name.

    A second word ``extra`` is joined to the name with a space. Unknown
    names give 0; the name "none" gives -1.
    """
    if name.startswith("#"):
        match = _HEX_NUMBER.match(name, 1)
        if not match:
            return 0
        value = min(int(match.group(2), 16), _LONG_MAX)
        if match.group(1) == "-":
            value = -value
        return _int32(value)
    if extra is not None:
        name = f"{name} {extra}"[:_NAME_BUFFER]
    colour = lookup_color(name)
    return 0 if colour is None else colour


def _blank(text, start, count):
    end = min(start + max(count, 0), len(text))
    return text[:start] + " " * (end - start) + text[end:]


def strip_comments(text):
    """``text`` with C comments outside quoted strings overwritten by spaces."""
    size = len(text)
    while (begin := find_outside_quotes(text, "/*", size)) != -1:
        end = find(text[begin + 2:], "*/", size - begin - 2)
        text = _blank(text, begin, end + 4)
    while (begin := find_outside_quotes(text, "//", size)) != -1:
        end = find(text[begin + 2:], "\n", size - begin - 2)
        text = _blank(text, begin, end + 3)
    return text


def quoted_lines(text):
    """Yield the contents of successive double-quoted strings in ``text``."""
    pos = 0
    while True:
        start = text.find('"', pos)
        if start < 0:
            return
        end = text.find('"', start + 1)
        if end < 0:
            return
        yield text[start + 1:end]
        pos = end + 1


def _colour_entry(words):
    try:
        index = words.index("c")
    except ValueError:
        raise XpmError("colour entry has no 'c' key") from None
    if index + 1 >= len(words):
        raise XpmError("colour entry has no colour after 'c'")
    extra = words[index + 2] if index + 2 < len(words) else None
    return text_to_rgb(words[index + 1], extra)


def _pixel(colour):
    return TRANSPARENT if colour == NO_COLOR else colour & 0xFFFFFFFF


def parse_xpm(lines):
    """Decode an XPM image from its header, colour and pixel lines."""
    rows = iter(lines)

    def next_line():
        try:
            return next(rows)
        except StopIteration:
            raise XpmError("unexpected end of XPM data") from None

    header = split_words(next_line())
    if len(header) < 4:
        raise XpmError("incomplete XPM header")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("invalid XPM header")

    # Short keys go in a direct table where later entries win; longer keys
    # are searched in a list where the first matching entry wins.
    later_wins = cpp <= 2
    table = {}
    for _ in range(ncolors):
        line = next_line()
        if len(line) < cpp:
            raise XpmError("colour entry shorter than its key")
        key = line[:cpp]
        colour = _colour_entry(split_words(line[cpp:]))
        if later_wins or key not in table:
            table[key] = colour

    pixels = []
    for _ in range(height):
        line = next_line()
        if len(line) < width * cpp:
            raise XpmError("pixel row shorter than the image width")
        pixels.append(tuple(
            _pixel(table.get(line[k:k + cpp], 0))
            for k in range(0, width * cpp, cpp)
        ))
    return XpmImage(width, height, tuple(pixels))


def xpm_to_image(xpm_data):
    """Decode an XPM image given as a sequence of strings."""
    return parse_xpm(xpm_data)


def xpm_file_to_image(path):
    """Decode an XPM image from a file in its C-source form."""
    text = Path(path).read_text(encoding="latin-1")
    return parse_xpm(quoted_lines(strip_comments(text)))