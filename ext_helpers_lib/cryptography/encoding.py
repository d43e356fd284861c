"""
Base64 helpers for text values.

Kept for backwards compatibility only; new code should call :mod:`base64`
directly, e.g. ``base64.b64encode(text.encode("utf-8")).decode("ascii")``.
"""

import base64
import binascii
import warnings

from ext_helpers_lib.exceptions import InvalidArgumentError, SerializationError


def base64_encode(decoded: str, encoding: str = "utf-8") -> str:
    """Encode *decoded* text to Base64.  Empty text is returned unchanged."""
    warnings.warn(
        "base64_encode is deprecated, use base64.b64encode directly",
        DeprecationWarning,
        stacklevel=2,
    )
    if decoded is None:
        raise InvalidArgumentError("Value must not be None", param_name="decoded")
    if not decoded:
        return decoded
    return base64.b64encode(decoded.encode(encoding)).decode("ascii")


def base64_decode(encoded: str, encoding: str = "utf-8") -> str:
    """
    Decode Base64 *encoded* text.  Empty text is returned unchanged.

    Raises
    ------
    SerializationError
        If *encoded* is not valid Base64 or the bytes cannot be decoded
        with *encoding*.
    """
    warnings.warn(
        "base64_decode is deprecated, use base64.b64decode directly",
        DeprecationWarning,
        stacklevel=2,
    )
    if encoded is None:
        raise InvalidArgumentError("Value must not be None", param_name="encoded")
    if not encoded:
        return encoded
    try:
        return base64.b64decode(encoded, validate=True).decode(encoding)
    except (binascii.Error, UnicodeDecodeError) as exc:
        raise SerializationError(f"Invalid Base64 input: {exc}") from exc
