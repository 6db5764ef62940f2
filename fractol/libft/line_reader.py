"""Reading a stream one line at a time through a small fixed-size buffer."""

from __future__ import annotations

import os

BUFFER_SIZE = 10


class LineReader:
    """Yields the lines of a file object or file descriptor, newlines kept.

    Text is pulled in chunks of ``buffer_size``; whatever follows a returned
    line is kept for the next call.  Works with text and binary sources.
    """

    def __init__(self, source, buffer_size=BUFFER_SIZE):
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        if isinstance(source, int):
            if source < 0:
                raise ValueError(f"invalid file descriptor {source}")
            self._read = lambda size: os.read(source, size)
        else:
            self._read = source.read
        self._buffer_size = buffer_size
        self._pending = None

    @staticmethod
    def _newline(text):
        return b"\n" if isinstance(text, (bytes, bytearray)) else "\n"

    def next_line(self):
        """The next line including its newline, the unterminated tail, or None at end."""
        pending = self._pending
        try:
            while pending is None or self._newline(pending) not in pending:
                chunk = self._read(self._buffer_size)
                if not chunk:
                    break
                pending = chunk if pending is None else pending + chunk
        except OSError:
            self._pending = None
            raise
        if not pending:
            self._pending = None
            return None
        cut = pending.find(self._newline(pending))
        if cut < 0:
            self._pending = None
            return pending
        self._pending = pending[cut + 1:]
        return pending[:cut + 1]

    def __iter__(self):
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line