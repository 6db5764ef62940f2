"""Substring search and word splitting used by the XPM reader."""

from __future__ import annotations

import re

_WORD_SEPARATORS = re.compile(r"[ \t]+")


def _until_nul(text):
    return text.split("\0", 1)[0]


def find(text, needle, length):
    """Index of ``needle`` in ``text``, or -1.

    Gives -1 straight away when ``needle`` is longer than ``length``; the
    search itself stops at the first NUL character.
    """
    if not needle:
        raise ValueError("needle must not be empty")
    if len(needle) > length:
        return -1
    return _until_nul(text).find(needle)


def find_outside_quotes(text, needle, length):
    """Like :func:`find`, but skipping matches inside double-quoted spans."""
    if not needle:
        raise ValueError("needle must not be empty")
    if len(needle) > length:
        return -1
    text = _until_nul(text)
    inside = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            inside = not inside
        if not inside and text.startswith(needle, pos):
            return pos
    return -1


def split_words(text):
    """The words of ``text`` separated by spaces and tabs, up to the first NUL."""
    return [word for word in _WORD_SEPARATORS.split(_until_nul(text)) if word]