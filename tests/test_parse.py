import pytest

from pushswap.parse import ParseError, is_number, parse_args, parse_long


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  -17", -17),
        ("+5", 5),
        ("0007", 7),
        ("12abc", 12),
        ("", 0),
    ],
)
def test_parse_long(text, expected):
    assert parse_long(text) == expected


@pytest.mark.parametrize("text", ["123", "-4", "0"])
def test_is_number_accepts(text):
    assert is_number(text) is True


@pytest.mark.parametrize("text", ["", None, "+4", "4a", " 4", "1.5"])
def test_is_number_rejects(text):
    assert is_number(text) is False


def test_parse_args_keeps_order():
    assert parse_args(["3", "1", "2"]) == [3, 1, 2]


def test_parse_args_empty():
    assert parse_args([]) == []


def test_parse_args_int_limits():
    assert parse_args(["2147483647", "-2147483648"]) == [2147483647, -2147483648]


def test_parse_args_rejects_overflow():
    with pytest.raises(ParseError):
        parse_args(["2147483648"])


@pytest.mark.parametrize("arg", ["abc", "+3", "", "1 2"])
def test_parse_args_rejects_non_numbers(arg):
    with pytest.raises(ParseError):
        parse_args(["1", arg])


def test_parse_args_rejects_duplicates():
    with pytest.raises(ParseError):
        parse_args(["5", "3", "5"])


def test_parse_args_duplicates_after_leading_zeros():
    with pytest.raises(ValueError):
        parse_args(["7", "007"])