import io

import pytest

from fdfmap.lines import LineReader, read_lines


class _RecordingStream(io.StringIO):
    def __init__(self, text):
        super().__init__(text)
        self.sizes = []

    def read(self, size=-1):
        self.sizes.append(size)
        return super().read(size)


SAMPLES = [
    "",
    "single",
    "one\n",
    "one\ntwo\nthree",
    "one\ntwo\nthree\n",
    "\n\n\n",
    "0 0 1 2\n3 4 5 6\n" * 20,
    "a very long line that is clearly longer than most buffers\nshort\n",
]


@pytest.mark.parametrize("text", SAMPLES)
@pytest.mark.parametrize("size", [1, 2, 3, 32, 1000])
def test_lines_join_back_to_input(text, size):
    lines = list(read_lines(io.StringIO(text), size))
    assert "".join(lines) == text
    assert lines == text.splitlines(keepends=True)


@pytest.mark.parametrize("text", SAMPLES)
def test_each_line_has_at_most_one_trailing_newline(text):
    lines = list(LineReader(io.StringIO(text), 4))
    for line in lines[:-1]:
        assert line.endswith("\n")
        assert line.count("\n") == 1
    for line in lines:
        assert line
        assert "\n" not in line[:-1]


def test_read_line_sequence():
    reader = LineReader(io.StringIO("ab\ncd\nef"), 2)
    assert reader.read_line() == "ab\n"
    assert reader.read_line() == "cd\n"
    assert reader.read_line() == "ef"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_empty_stream_gives_none():
    reader = LineReader(io.StringIO(""))
    assert reader.read_line() is None
    assert list(reader) == []


def test_blank_lines_are_kept():
    assert list(read_lines(io.StringIO("\n\nx\n"), 1)) == ["\n", "\n", "x\n"]


def test_binary_stream_gives_bytes():
    lines = list(read_lines(io.BytesIO(b"10 20\n30 40\n"), 3))
    assert lines == [b"10 20\n", b"30 40\n"]


def test_reads_use_buffer_size():
    stream = _RecordingStream("first line\nsecond line\n")
    list(LineReader(stream, 5))
    assert stream.sizes
    assert set(stream.sizes) == {5}


def test_reads_only_what_is_needed():
    stream = io.StringIO("ab\ncd\nef\n")
    reader = LineReader(stream, 1)
    assert reader.read_line() == "ab\n"
    assert stream.tell() == len("ab\n")


def test_default_buffer_size_handles_long_lines():
    text = "x" * 100 + "\n" + "y" * 70
    assert list(read_lines(io.StringIO(text))) == ["x" * 100 + "\n", "y" * 70]


@pytest.mark.parametrize("size", [0, -1])
def test_invalid_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("a\n"), size)


def test_iteration_continues_after_partial_reads():
    reader = LineReader(io.StringIO("a\nb\nc\n"), 2)
    assert reader.read_line() == "a\n"
    assert list(reader) == ["b\n", "c\n"]