"""
PBKDF2 hashing command-line interface.

Hashes a secret given as an argument (or read from standard input) and prints
the Base64 digest together with the Base64 salt.  Passing ``--salt`` makes the
output reproducible, which is how a stored digest is checked by hand.

>>> ext-helpers-hash "my secret"
>>> echo -n "my secret" | ext-helpers-hash --salt c2FsdHNhbHQ= --iterations 200000
"""

import argparse
import base64
import binascii
import sys

from ext_helpers_lib.cryptography import HashAlgorithm, derive_key, hash_secret
from ext_helpers_lib.exceptions import ExtHelpersError
from ext_helpers_lib.utils.logger import prepare_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Hash a secret with PBKDF2 and a random (or given) salt."
    )
    parser.add_argument(
        "secret",
        nargs="?",
        default=None,
        help="Secret to hash (defaults to STDIN, trailing newline stripped).",
    )
    parser.add_argument(
        "--salt", default=None, help="Base64 salt; a random one is used if omitted."
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=None,
        help="PBKDF2 iteration count (minimum 100000).",
    )
    parser.add_argument(
        "--algorithm",
        default=None,
        choices=[a.value for a in HashAlgorithm],
        help="PBKDF2 digest algorithm (default: SHA256).",
    )
    parser.add_argument(
        "--log-level", default=None, help="Logging level (default: INFO)."
    )
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logger = prepare_logger("ext_helpers_lib", level=args.log_level)

    secret = args.secret
    if secret is None:
        secret = sys.stdin.read().rstrip("\r\n")

    try:
        if args.salt:
            salt = base64.b64decode(args.salt, validate=True)
            digest = derive_key(secret, salt, args.iterations, args.algorithm)
        else:
            digest, salt = hash_secret(secret, args.iterations, args.algorithm)
    except binascii.Error as exc:
        logger.error("Salt is not valid Base64: %s", exc)
        return 1
    except ExtHelpersError as exc:
        logger.error("Hashing failed: %s", exc)
        return 1

    print(f"digest: {digest}")
    print(f"salt: {base64.b64encode(salt).decode('ascii')}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
