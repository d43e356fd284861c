from ext_helpers_lib.cryptography.hashing import (
    HashAlgorithm,
    generate_salt,
    derive_key,
    hash_secret,
    verify_secret,
)
from ext_helpers_lib.masking.core.masker import ObjectMasker, mask
from ext_helpers_lib.exceptions import (
    ExtHelpersError,
    InvalidArgumentError,
    OutOfRangeError,
    SerializationError,
)

__all__ = [
    "HashAlgorithm",
    "generate_salt",
    "derive_key",
    "hash_secret",
    "verify_secret",
    "ObjectMasker",
    "mask",
    "ExtHelpersError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "SerializationError",
]
