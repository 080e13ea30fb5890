import os

import pytest

from minishell.lines import LineReader


def _fd_with(tmp_path, data: bytes) -> int:
    path = tmp_path / "input.txt"
    path.write_bytes(data)
    return os.open(path, os.O_RDONLY)


@pytest.fixture
def opened(tmp_path):
    fds = []

    def make(data: bytes) -> int:
        fd = _fd_with(tmp_path, data)
        fds.append(fd)
        return fd

    yield make
    for fd in fds:
        os.close(fd)


def test_lines_keep_newlines(opened):
    reader = LineReader(opened(b"a\nb\nc"))
    assert list(reader) == ["a\n", "b\n", "c"]


def test_read_line_returns_none_at_end(opened):
    reader = LineReader(opened(b"only\n"))
    assert reader.read_line() == "only\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_empty_input_has_no_lines(opened):
    assert list(LineReader(opened(b""))) == []


@pytest.mark.parametrize("size", [1, 2, 3, 7, 64, 4096])
def test_round_trip_for_any_buffer_size(opened, size):
    data = "first line\nsecond\n\nlast without newline"
    reader = LineReader(opened(data.encode()), size)
    lines = list(reader)
    assert "".join(lines) == data
    assert all(line.endswith("\n") for line in lines[:-1])
    assert lines[2] == "\n"


def test_pipe_input():
    read_end, write_end = os.pipe()
    try:
        os.write(write_end, b"x\ny\n")
        os.close(write_end)
        assert list(LineReader(read_end, 5)) == ["x\n", "y\n"]
    finally:
        os.close(read_end)


def test_accepts_object_with_fileno(tmp_path):
    path = tmp_path / "f.txt"
    path.write_bytes(b"one\ntwo\n")
    with open(path, "rb") as handle:
        assert LineReader(handle).read_line() == "one\n"


def test_utf8_split_across_reads(opened):
    text = "héllo wörld\n"
    assert list(LineReader(opened(text.encode()), 1)) == [text]


def test_negative_descriptor_rejected():
    with pytest.raises(ValueError):
        LineReader(-1)


def test_descriptor_beyond_limit_rejected():
    with pytest.raises(ValueError):
        LineReader(1024)


def test_buffer_size_must_be_positive(opened):
    with pytest.raises(ValueError):
        LineReader(opened(b"a"), 0)


def test_closed_descriptor_raises_oserror(tmp_path):
    fd = _fd_with(tmp_path, b"data\n")
    reader = LineReader(fd)
    os.close(fd)
    with pytest.raises(OSError):
        reader.read_line()