"""
Text helpers: raw code-unit conversions, title casing and truncation.
"""

import re

from ext_helpers_lib.exceptions import InvalidArgumentError, OutOfRangeError

# A word is a run of letters, optionally joined by apostrophes (don't, O'Neil)
_WORD_REGEX = re.compile(r"[^\W\d_]+(?:'[^\W\d_]+)*")


def to_bytes(text: str) -> bytes:
    """
    Return the UTF-16-LE code units of *text* (two bytes per character).

    This is a raw memory view of the string, not a text encoding choice;
    use :meth:`str.encode` for interchange.
    """
    if text is None:
        raise InvalidArgumentError("Text must not be None", param_name="text")
    if not text:
        return b""
    return text.encode("utf-16-le", errors="surrogatepass")


def from_bytes(data: bytes) -> str:
    """
    Inverse of :func:`to_bytes`.  A trailing odd byte is ignored.
    """
    if data is None:
        raise InvalidArgumentError("Data must not be None", param_name="data")
    if not data:
        return ""
    usable = len(data) - len(data) % 2
    return bytes(data[:usable]).decode("utf-16-le", errors="surrogatepass")


def to_title_case(text: str) -> str:
    """
    Capitalise the first letter of every word and lower-case the rest.

    Words written entirely in upper case are treated as acronyms and kept.

    >>> to_title_case("the NASA space programme")
    'The NASA Space Programme'
    """
    if text is None:
        raise InvalidArgumentError("Text must not be None", param_name="text")
    if not text:
        return text

    def _title(match: re.Match) -> str:
        word = match.group(0)
        if word.isupper():
            return word
        return word[:1].upper() + word[1:].lower()

    return _WORD_REGEX.sub(_title, text)


def truncate(text: str, length: int) -> str:
    """
    Return at most the first *length* characters of *text*.

    Raises
    ------
    OutOfRangeError
        If *length* is not strictly positive.
    """
    if text is None:
        raise InvalidArgumentError("Text must not be None", param_name="text")
    if length <= 0:
        raise OutOfRangeError(
            "Length must be greater than 0", param_name="length", value=length
        )
    return text[:length]
