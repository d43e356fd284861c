"""
Salted key derivation
=====================

PBKDF2-HMAC based hashing of text secrets.  The public API consists of:

* :func:`generate_salt` - cryptographically secure random salt.
* :func:`derive_key` - deterministic PBKDF2 digest for a given salt,
  returned as Base64 text.
* :func:`hash_secret` - convenience wrapper that generates a fresh salt and
  returns ``(digest, salt)``.
* :func:`verify_secret` - constant-time comparison of a secret against a
  previously stored digest.

The iteration count can never go below
:data:`~ext_helpers_lib.core.constants.MIN_PBKDF2_ITERATIONS`; a lower value
is refused instead of being silently raised.
"""

import base64
import hmac
import logging
import secrets
from enum import Enum
from typing import Optional, Tuple, Union

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from ext_helpers_lib.core import constants
from ext_helpers_lib.exceptions import InvalidArgumentError, OutOfRangeError

logger = logging.getLogger(__name__)


class HashAlgorithm(str, Enum):
    """Digest algorithms accepted by :func:`derive_key`."""

    SHA1 = "SHA1"
    SHA256 = "SHA256"
    SHA384 = "SHA384"
    SHA512 = "SHA512"


_HASHES = {
    HashAlgorithm.SHA1: hashes.SHA1,
    HashAlgorithm.SHA256: hashes.SHA256,
    HashAlgorithm.SHA384: hashes.SHA384,
    HashAlgorithm.SHA512: hashes.SHA512,
}


def _resolve_algorithm(
    algorithm: Optional[Union[HashAlgorithm, str]],
) -> HashAlgorithm:
    if algorithm is None:
        algorithm = constants.HASH_ALGORITHM
    if isinstance(algorithm, HashAlgorithm):
        return algorithm
    try:
        return HashAlgorithm(str(algorithm).strip().upper().replace("-", ""))
    except ValueError:
        raise InvalidArgumentError(
            f"Unsupported hash algorithm: {algorithm!r}", param_name="algorithm"
        ) from None


def generate_salt(size: Optional[int] = None) -> bytes:
    """
    Generate a cryptographically secure random salt.

    Parameters
    ----------
    size : int, optional
        Length of the salt in bytes.  Defaults to
        :data:`~ext_helpers_lib.core.constants.SALT_SIZE` (32).

    Returns
    -------
    bytes
        ``size`` bytes read from the operating system CSPRNG.

    Raises
    ------
    InvalidArgumentError
        If *size* is not an integer.
    OutOfRangeError
        If *size* is less than or equal to zero.
    """
    if size is None:
        size = constants.SALT_SIZE
    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidArgumentError("Salt size must be an integer", param_name="size")
    if size <= 0:
        raise OutOfRangeError(
            "Salt size must be greater than 0", param_name="size", value=size
        )
    return secrets.token_bytes(size)


def derive_key(
    secret: str,
    salt: bytes,
    iterations: Optional[int] = None,
    algorithm: Optional[Union[HashAlgorithm, str]] = None,
) -> str:
    """
    Derive a PBKDF2 digest of *secret* using the given *salt*.

    Parameters
    ----------
    secret : str
        Non-empty text to hash.  It is encoded as UTF-8.
    salt : bytes
        Non-empty salt.
    iterations : int, optional
        Number of PBKDF2 rounds, at least ``100_000``.  Defaults to
        :data:`~ext_helpers_lib.core.constants.PBKDF2_ITERATIONS`.
    algorithm : HashAlgorithm | str, optional
        Underlying HMAC digest.  Defaults to ``SHA256``.

    Returns
    -------
    str
        Base64 encoding of the 32 derived bytes.

    Raises
    ------
    InvalidArgumentError
        If *secret* or *salt* is ``None`` or empty, or the algorithm is unknown.
    OutOfRangeError
        If *iterations* is below the hard minimum.
    """
    if secret is None:
        raise InvalidArgumentError("Secret must not be None", param_name="secret")
    if not isinstance(secret, str):
        raise InvalidArgumentError("Secret must be a string", param_name="secret")
    if not secret:
        raise InvalidArgumentError("Secret must not be empty", param_name="secret")
    if salt is None:
        raise InvalidArgumentError("Salt must not be None", param_name="salt")
    if not isinstance(salt, (bytes, bytearray, memoryview)):
        raise InvalidArgumentError("Salt must be bytes", param_name="salt")
    if not len(salt):
        raise InvalidArgumentError("Salt must not be empty", param_name="salt")

    if iterations is None:
        iterations = constants.PBKDF2_ITERATIONS
    if isinstance(iterations, bool) or not isinstance(iterations, int):
        raise InvalidArgumentError(
            "Iteration count must be an integer", param_name="iterations"
        )
    if iterations < constants.MIN_PBKDF2_ITERATIONS:
        raise OutOfRangeError(
            f"Iteration count must be >= {constants.MIN_PBKDF2_ITERATIONS:,}",
            param_name="iterations",
            value=iterations,
        )

    effective_algorithm = _resolve_algorithm(algorithm)
    logger.debug(
        "Deriving PBKDF2 key [algorithm=%s, iterations=%d, salt_len=%d]",
        effective_algorithm.value,
        iterations,
        len(salt),
    )
    kdf = PBKDF2HMAC(
        algorithm=_HASHES[effective_algorithm](),
        length=constants.DERIVED_KEY_LENGTH,
        salt=bytes(salt),
        iterations=iterations,
    )
    derived = kdf.derive(secret.encode("utf-8"))
    return base64.b64encode(derived).decode("ascii")


def hash_secret(
    secret: str,
    iterations: Optional[int] = None,
    algorithm: Optional[Union[HashAlgorithm, str]] = None,
) -> Tuple[str, bytes]:
    """
    Hash *secret* with a freshly generated salt.

    Returns
    -------
    Tuple[str, bytes]
        ``(digest, salt)`` - keep the salt to verify the secret later.
    """
    # validate before consuming entropy
    if secret is None:
        raise InvalidArgumentError("Secret must not be None", param_name="secret")
    if isinstance(secret, str) and not secret:
        raise InvalidArgumentError("Secret must not be empty", param_name="secret")

    salt = generate_salt()
    digest = derive_key(secret, salt, iterations=iterations, algorithm=algorithm)
    return digest, salt


def verify_secret(
    secret: str,
    digest: str,
    salt: bytes,
    iterations: Optional[int] = None,
    algorithm: Optional[Union[HashAlgorithm, str]] = None,
) -> bool:
    """
    Check whether *secret* hashes to *digest* with the given parameters.

    The comparison runs in constant time.
    """
    if not digest:
        raise InvalidArgumentError("Digest must not be empty", param_name="digest")
    expected = derive_key(secret, salt, iterations=iterations, algorithm=algorithm)
    return hmac.compare_digest(expected.encode("utf-8"), digest.encode("utf-8"))
