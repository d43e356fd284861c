import pytest

from ext_helpers_lib.exceptions import InvalidArgumentError, OutOfRangeError
from ext_helpers_lib.utils.strings import (
    from_bytes,
    to_bytes,
    to_title_case,
    truncate,
)


def test_to_bytes_uses_two_bytes_per_char():
    assert to_bytes("ab") == b"a\x00b\x00"
    assert to_bytes("") == b""


def test_from_bytes_reverses_to_bytes():
    text = "Rudy James ąę"

    assert from_bytes(to_bytes(text)) == text
    assert from_bytes(b"") == ""


def test_from_bytes_ignores_trailing_odd_byte():
    assert from_bytes(b"a\x00b") == "a"


@pytest.mark.parametrize("func", [to_bytes, from_bytes, to_title_case])
def test_none_is_rejected(func):
    with pytest.raises(InvalidArgumentError):
        func(None)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("hello world", "Hello World"),
        ("hELLO wORLD", "Hello World"),
        ("the NASA space programme", "The NASA Space Programme"),
        ("don't stop-me now", "Don't Stop-Me Now"),
        ("", ""),
    ],
)
def test_to_title_case(text, expected):
    assert to_title_case(text) == expected


def test_truncate():
    assert truncate("abcdef", 3) == "abc"
    assert truncate("ab", 5) == "ab"
    assert truncate("", 2) == ""


@pytest.mark.parametrize("length", [0, -3])
def test_truncate_rejects_non_positive_length(length):
    with pytest.raises(OutOfRangeError):
        truncate("abc", length)
