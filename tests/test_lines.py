import io

import pytest

from pushswap.lines import LineReader


def test_next_line_reports_terminated_lines():
    reader = LineReader(io.StringIO("ab\ncd"))
    assert reader.next_line() == ("ab", True)
    assert reader.next_line() == ("cd", False)


def test_after_end_keeps_returning_empty():
    reader = LineReader(io.StringIO("x\n"))
    assert reader.next_line() == ("x", True)
    assert reader.next_line() == ("", False)
    assert reader.next_line() == ("", False)


def test_iteration_ends_with_trailing_remainder():
    assert list(LineReader(io.StringIO("sa\npb\n"))) == ["sa", "pb", ""]


def test_empty_stream_yields_single_empty_line():
    assert list(LineReader(io.StringIO(""))) == [""]


@pytest.mark.parametrize(
    "text",
    ["", "\n", "one", "one\ntwo", "ra\nrb\nrr\n", "\n\nmiddle\n\n", "x" * 2500 + "\ny"],
)
@pytest.mark.parametrize("size", [1, 2, 3, 1000])
def test_join_round_trip(text, size):
    lines = list(LineReader(io.StringIO(text), size))
    assert "\n".join(lines) == text


def test_small_buffer_matches_default():
    text = "pa\npb\nrra\nrrb\n"
    assert list(LineReader(io.StringIO(text), 1)) == list(LineReader(io.StringIO(text)))


def test_lines_never_contain_newline():
    for line in LineReader(io.StringIO("a\nbb\n\nccc"), 2):
        assert "\n" not in line


@pytest.mark.parametrize("size", [0, -1])
def test_bad_buffer_size_raises(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("a"), size)


def test_read_error_propagates():
    class Broken:
        def read(self, n):
            raise OSError("read failed")

    reader = LineReader(Broken())
    with pytest.raises(OSError):
        reader.next_line()