"""NUL-aware string helpers: searching, copying, joining, trimming and splitting."""

from __future__ import annotations

from itertools import zip_longest

_NUL = "\0"


def _as_char(c):
    """``c`` as a one-character string; integers are truncated to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def _check_not_negative(**values):
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must not be negative, got {value}")


def strlen(s):
    """Number of characters in ``s``."""
    return len(s)


def strchr(s, c):
    """Index of the first ``c`` in ``s``, or None.

    Searching for the NUL character never finds anything, and a missing
    string (None) gives None.
    """
    if s is None:
        return None
    ch = _as_char(c)
    if ch == _NUL:
        return None
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s, c):
    """Index of the last ``c`` in ``s``, or None.

    The terminator counts as part of the string, so searching for NUL
    gives the length of ``s``.
    """
    ch = _as_char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strdup(s):
    """A copy of ``s``."""
    return "".join(s)


def strjoin(first, second):
    """``first`` followed by ``second``; a missing (None) part counts as empty."""
    return (first or "") + (second or "")


def strlcpy(src, size):
    """Copy ``src`` into a buffer of ``size`` characters.

    Returns the text that fits (at most ``size - 1`` characters, leaving room
    for the terminator) and the full length of ``src``, so truncation shows
    as a returned length of at least ``size``.
    """
    _check_not_negative(size=size)
    return src[:max(size - 1, 0)], len(src)


def strlcat(dst, src, size):
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length it tried to create. When
    ``dst`` already fills the buffer it is left alone and the returned
    length is ``size + len(src)``.
    """
    _check_not_negative(size=size)
    if len(dst) >= size and dst:
        return dst, size + len(src)
    room = max(size - len(dst) - 1, 0)
    return dst + src[:room], len(dst) + len(src)


def strncmp(first, second, n):
    """Compare at most ``n`` characters; the difference of the first mismatch.

    Comparison stops at the end of either string, where the terminator
    takes part as a character of code 0.
    """
    _check_not_negative(n=n)
    for a, b in zip_longest(first[:n], second[:n], fillvalue=_NUL):
        if a != b or a == _NUL:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack, needle, length):
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0; otherwise None when absent.
    """
    _check_not_negative(length=length)
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def substr(s, start, length):
    """At most ``length`` characters of ``s`` from ``start``; empty past the end."""
    _check_not_negative(start=start, length=length)
    if start >= len(s) or length == 0:
        return ""
    return s[start:start + length]


def strtrim(s, charset):
    """``s`` with characters of ``charset`` removed from both ends."""
    if not s:
        return ""
    if not charset:
        return strdup(s)
    return s.strip(charset)


def split(s, sep):
    """The non-empty pieces of ``s`` between occurrences of ``sep``."""
    ch = _as_char(sep)
    if ch == _NUL:
        return [s] if s else []
    return [piece for piece in s.split(ch) if piece]


def strmapi(s, func):
    """A new string made of ``func(index, char)`` for every character of ``s``."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(s, func):
    """Call ``func(index, char)`` for every item of the mutable sequence ``s``.

    Where ``func`` returns something other than None, that value replaces
    the character in place.
    """
    for index, ch in enumerate(s):
        result = func(index, ch)
        if result is not None:
            s[index] = result