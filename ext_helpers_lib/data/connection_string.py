"""
Connection string handling.

A connection string is a ``;``-separated list of ``key=value`` pairs, e.g.
``Server=db;Database=app;User Id=svc;Password=secret;``.  Keys are
case-insensitive.  Values containing ``;`` (or surrounding whitespace) are
written in single or double quotes; a quote character inside a quoted value is
doubled.
"""

from typing import Dict, Iterator, List, Optional, Tuple

from ext_helpers_lib.exceptions import InvalidArgumentError

PASSWORD_KEYS = ("Password", "Pwd")


class ConnectionStringBuilder:
    """
    Ordered, case-insensitive view of a connection string.

    >>> builder = ConnectionStringBuilder("Server=db;Password=secret")
    >>> builder.remove_keys("password")
    >>> str(builder)
    'Server=db'
    """

    def __init__(self, connection_string: Optional[str] = None):
        # lower-cased key -> (original key, value)
        self._entries: Dict[str, Tuple[str, str]] = {}
        if connection_string:
            for key, value in self._parse(connection_string):
                self[key] = value

    @staticmethod
    def _parse(connection_string: str) -> Iterator[Tuple[str, str]]:
        text = connection_string
        pos = 0
        length = len(text)
        while pos < length:
            eq = text.find("=", pos)
            if eq < 0:
                if text[pos:].strip(" ;"):
                    raise InvalidArgumentError(
                        f"Malformed connection string near {text[pos:]!r}",
                        param_name="connection_string",
                    )
                return
            key = text[pos:eq].strip(" ;")
            if not key:
                raise InvalidArgumentError(
                    "Connection string contains an empty key",
                    param_name="connection_string",
                )

            pos = eq + 1
            while pos < length and text[pos] == " ":
                pos += 1
            if pos < length and text[pos] in ("'", '"'):
                value, pos = ConnectionStringBuilder._read_quoted(text, pos)
                end = text.find(";", pos)
                pos = length if end < 0 else end + 1
            else:
                end = text.find(";", pos)
                end = length if end < 0 else end
                value = text[pos:end].strip()
                pos = end + 1
            yield key, value

    @staticmethod
    def _read_quoted(text: str, pos: int) -> Tuple[str, int]:
        quote = text[pos]
        pos += 1
        chars: List[str] = []
        while pos < len(text):
            ch = text[pos]
            if ch == quote:
                if pos + 1 < len(text) and text[pos + 1] == quote:
                    chars.append(quote)
                    pos += 2
                    continue
                return "".join(chars), pos + 1
            chars.append(ch)
            pos += 1
        raise InvalidArgumentError(
            "Unterminated quoted value in connection string",
            param_name="connection_string",
        )

    @staticmethod
    def _render_value(value: str) -> str:
        needs_quotes = (
            ";" in value
            or value != value.strip()
            or value[:1] in ("'", '"')
        )
        if not needs_quotes:
            return value
        return '"' + value.replace('"', '""') + '"'

    def __setitem__(self, key: str, value: str) -> None:
        self._entries[key.lower()] = (key, value)

    def __getitem__(self, key: str) -> str:
        return self._entries[key.lower()][1]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def keys(self) -> List[str]:
        return [original for original, _ in self._entries.values()]

    def remove(self, key: str) -> bool:
        return self._entries.pop(key.lower(), None) is not None

    def remove_keys(self, *keys: str) -> None:
        """
        Remove every key in *keys*; keys that are not present are ignored.

        Raises
        ------
        InvalidArgumentError
            When no keys are given.
        """
        if not keys:
            raise InvalidArgumentError(
                "At least one key is required", param_name="keys"
            )
        for key in keys:
            if key in self:
                self.remove(key)

    @property
    def connection_string(self) -> str:
        return ";".join(
            f"{key}={self._render_value(value)}"
            for key, value in self._entries.values()
        )

    def __str__(self) -> str:
        return self.connection_string

    def __repr__(self) -> str:
        return f"ConnectionStringBuilder(keys={self.keys()!r})"


def strip_password_from_connection_string(connection_string: str) -> str:
    """
    Remove ``Password`` / ``Pwd`` entries (any case) from *connection_string*.

    ``None`` and the empty string are returned unchanged.
    """
    if not connection_string:
        return connection_string
    builder = ConnectionStringBuilder(connection_string)
    builder.remove_keys(*PASSWORD_KEYS)
    return str(builder)
