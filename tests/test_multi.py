import os

import pytest

from nextline.multi import MultiLineReader, get_next_line
from nextline.reader import BUFFER_SIZE


@pytest.fixture
def pipe_of():
    opened = []

    def make(data: bytes) -> int:
        read_end, write_end = os.pipe()
        os.write(write_end, data)
        os.close(write_end)
        opened.append(read_end)
        return read_end

    yield make
    for fd in opened:
        try:
            os.close(fd)
        except OSError:
            pass


def drain(reader, fd):
    lines = []
    while (line := reader.read_line(fd)) is not None:
        lines.append(line)
    return lines


@pytest.mark.parametrize("size", [1, 4, BUFFER_SIZE, 500])
def test_terminated_lines_all_returned(pipe_of, size):
    data = b"one\ntwo\n\nthree " + b"q" * 120 + b"\n"
    reader = MultiLineReader(size)
    assert drain(reader, pipe_of(data)) == data.splitlines(keepends=True)


def test_unterminated_tail_is_withheld(pipe_of):
    fd = pipe_of(b"kept\ntail")
    reader = MultiLineReader()
    assert reader.read_line(fd) == b"kept\n"
    assert reader.read_line(fd) is None
    assert reader.read_line(fd) is None
    assert fd in reader


def test_interleaved_descriptors_stay_separate(pipe_of):
    first = b"a1\na2\na3\n"
    second = b"b1\nb2\nb3\n"
    fd_a = pipe_of(first)
    fd_b = pipe_of(second)
    reader = MultiLineReader(2)
    got_a, got_b = [], []
    for _ in range(3):
        got_a.append(reader.read_line(fd_a))
        got_b.append(reader.read_line(fd_b))
    assert got_a == first.splitlines(keepends=True)
    assert got_b == second.splitlines(keepends=True)


def test_discard_forgets_descriptor(pipe_of):
    fd = pipe_of(b"x\ny\n")
    reader = MultiLineReader()
    assert reader.read_line(fd) == b"x\n"
    assert fd in reader
    reader.discard(fd)
    assert fd not in reader


def test_discard_unknown_descriptor_is_harmless():
    reader = MultiLineReader()
    reader.discard(99)
    assert 99 not in reader


def test_empty_input(pipe_of):
    fd = pipe_of(b"")
    reader = MultiLineReader()
    assert reader.read_line(fd) is None


def test_read_error_drops_state(pipe_of):
    fd = pipe_of(b"partial")
    reader = MultiLineReader()
    assert reader.read_line(fd) is None
    os.close(fd)
    with pytest.raises(OSError):
        reader.read_line(fd)
    assert fd not in reader


def test_negative_fd_rejected():
    with pytest.raises(ValueError):
        MultiLineReader().read_line(-1)


@pytest.mark.parametrize("size", [0, -1])
def test_bad_buffer_size_rejected(size):
    with pytest.raises(ValueError):
        MultiLineReader(size)


def test_module_get_next_line(pipe_of):
    data = b"left\nright\n"
    fd = pipe_of(data)
    lines = []
    while (line := get_next_line(fd)) is not None:
        lines.append(line)
    assert lines == data.splitlines(keepends=True)


def test_module_get_next_line_negative_fd():
    with pytest.raises(ValueError):
        get_next_line(-7)