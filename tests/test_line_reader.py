import io
import os

import pytest

from fractol.libft.line_reader import LineReader


def test_lines_keep_newlines_and_tail():
    reader = LineReader(io.StringIO("hello\nworld"))
    assert reader.next_line() == "hello\n"
    assert reader.next_line() == "world"
    assert reader.next_line() is None


def test_empty_source_gives_none():
    assert LineReader(io.StringIO("")).next_line() is None


def test_iteration_reassembles_text():
    text = "short\na much longer line than the buffer\n\nend\n"
    lines = list(LineReader(io.StringIO(text)))
    assert "".join(lines) == text
    assert lines == text.splitlines(keepends=True)


@pytest.mark.parametrize("size", [1, 3, 10, 64])
def test_buffer_size_does_not_change_lines(size):
    text = "one\ntwo\nthree\n"
    assert list(LineReader(io.StringIO(text), size)) == text.splitlines(keepends=True)


def test_bytes_source():
    reader = LineReader(io.BytesIO(b"ab\ncd\n"))
    assert list(reader) == [b"ab\n", b"cd\n"]


def test_file_descriptor(tmp_path):
    path = tmp_path / "data.txt"
    path.write_bytes(b"first\nsecond\n")
    fd = os.open(path, os.O_RDONLY)
    try:
        assert list(LineReader(fd)) == [b"first\n", b"second\n"]
    finally:
        os.close(fd)


def test_negative_descriptor_rejected():
    with pytest.raises(ValueError):
        LineReader(-1)


def test_zero_buffer_rejected():
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), 0)


def test_read_error_propagates_and_drops_pending():
    class Failing:
        def __init__(self):
            self.calls = 0

        def read(self, size):
            self.calls += 1
            if self.calls == 1:
                return "partial"
            raise OSError("read failed")

    source = Failing()
    reader = LineReader(source)
    with pytest.raises(OSError):
        reader.next_line()
    with pytest.raises(OSError):
        reader.next_line()
    assert source.calls == 3