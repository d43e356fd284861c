"""
JSON serialization helpers built on pydantic.

Any value pydantic understands (models, dataclasses, ``datetime``,
``Decimal``, ``UUID``, nested containers, ...) can be written with
:func:`to_json` / :func:`serialize_to_json_stream` and read back into a typed
value with :func:`deserialize`.
"""

import io
from typing import Any, Callable, IO, Optional, Type, TypeVar, Union

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_json as _core_to_json

from ext_helpers_lib.exceptions import InvalidArgumentError, SerializationError

T = TypeVar("T")

EXECUTABLE_SIGNATURE = b"MZ"


def to_json(obj: Any, fallback: Optional[Callable[[Any], Any]] = None) -> str:
    """
    Serialize *obj* to a JSON string.  Strings are returned unchanged.

    *fallback* is called for values pydantic cannot serialize (e.g. ``repr``);
    without it such values raise :class:`SerializationError`.
    """
    if obj is None:
        raise InvalidArgumentError("Object must not be None", param_name="obj")
    if isinstance(obj, str):
        return obj
    return _dump_bytes(obj, fallback=fallback).decode("utf-8")


def _dump_bytes(obj: Any, fallback: Optional[Callable[[Any], Any]] = None) -> bytes:
    try:
        return _core_to_json(obj, fallback=fallback)
    except PydanticSerializationError as exc:
        raise SerializationError(
            f"Cannot serialize {type(obj).__name__} to JSON: {exc}"
        ) from exc


def serialize_to_json_stream(obj: Any, stream: IO) -> IO:
    """
    Write *obj* as JSON into *stream* and rewind it to position ``0``.

    Binary streams receive UTF-8 bytes, text streams receive ``str``.

    Returns
    -------
    IO
        The same *stream* instance.
    """
    if obj is None:
        raise InvalidArgumentError("Object must not be None", param_name="obj")
    if stream is None:
        raise InvalidArgumentError("Stream must not be None", param_name="stream")

    payload = _dump_bytes(obj)
    if isinstance(stream, io.TextIOBase):
        stream.write(payload.decode("utf-8"))
    else:
        stream.write(payload)
    stream.flush()
    stream.seek(0)
    return stream


def deserialize(stream: IO, target_type: Union[Type[T], Any] = Any) -> T:
    """
    Read the whole *stream* and validate its JSON content as *target_type*.

    Parameters
    ----------
    stream : IO
        Binary or text stream positioned at the start of the JSON document.
    target_type : type, default ``Any``
        Target type (pydantic model, dataclass, ``List[int]``, ...).  With
        ``Any`` plain ``dict`` / ``list`` / scalar data is returned.

    Raises
    ------
    SerializationError
        If the content is not valid JSON or does not fit *target_type*.
    """
    if stream is None:
        raise InvalidArgumentError("Stream must not be None", param_name="stream")

    content = stream.read()
    try:
        return TypeAdapter(target_type).validate_json(content)
    except ValidationError as exc:
        raise SerializationError(f"Cannot deserialize JSON stream: {exc}") from exc


def is_executable(stream: IO) -> bool:
    """
    Check whether *stream* starts with the ``MZ`` (DOS / PE) signature.

    The stream is rewound before reading; it must be binary and seekable.
    """
    if stream is None:
        raise InvalidArgumentError("Stream must not be None", param_name="stream")
    stream.seek(0)
    first_bytes = stream.read(len(EXECUTABLE_SIGNATURE))
    return first_bytes == EXECUTABLE_SIGNATURE
