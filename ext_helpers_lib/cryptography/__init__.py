"""
Cryptography helpers: PBKDF2 salted hashing and (deprecated) Base64 text
encoding.
"""

from ext_helpers_lib.cryptography.hashing import (
    HashAlgorithm,
    generate_salt,
    derive_key,
    hash_secret,
    verify_secret,
)
from ext_helpers_lib.cryptography.encoding import base64_encode, base64_decode

__all__ = [
    "HashAlgorithm",
    "generate_salt",
    "derive_key",
    "hash_secret",
    "verify_secret",
    "base64_encode",
    "base64_decode",
]
