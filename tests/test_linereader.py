import io

import pytest

from pushswap.linereader import LineReader

TEXT = "sa\npb\n\nrra\nrrr"


@pytest.mark.parametrize("size", [1, 2, 3, 5, 1048])
def test_lines_match_splitlines(size):
    reader = LineReader(io.StringIO(TEXT), size)
    assert list(reader) == TEXT.splitlines(keepends=True)


@pytest.mark.parametrize("size", [1, 4, 1048])
def test_bytes_stream(size):
    data = TEXT.encode()
    reader = LineReader(io.BytesIO(data), size)
    assert list(reader) == data.splitlines(keepends=True)


def test_readline_sequence_and_exhaustion():
    reader = LineReader(io.StringIO("ra\nrb"), 2)
    assert reader.readline() == "ra\n"
    assert reader.readline() == "rb"
    assert reader.readline() is None
    assert reader.readline() is None


def test_blank_line_is_returned_as_newline():
    reader = LineReader(io.StringIO("\nsa\n"), 8)
    assert reader.readline() == "\n"
    assert reader.readline() == "sa\n"
    assert reader.readline() is None


def test_empty_stream_gives_none():
    assert LineReader(io.StringIO("")).readline() is None
    assert list(LineReader(io.StringIO(""))) == []


def test_trailing_newline_does_not_add_empty_line():
    content = "pa\npb\n"
    assert list(LineReader(io.StringIO(content), 3)) == content.splitlines(keepends=True)


def test_joined_lines_reproduce_stream():
    content = "one\ntwo\n\nthree\n" * 50
    reader = LineReader(io.StringIO(content), 7)
    assert "".join(reader) == content


@pytest.mark.parametrize("size", [0, -1])
def test_buffer_size_must_be_positive(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO(TEXT), size)