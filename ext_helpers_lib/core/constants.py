"""
Constants and configuration for the ext-helpers library.

Tunable values are loaded from environment variables (prefixed with
``EXT_HELPERS_``), allowing the deployment environment to control behaviour
without code changes.  Hard security limits are plain module constants and
cannot be overridden from the environment.
"""

import os
import logging


class _DontChangeMe:
    MAIN_ENV_PREFIX = "EXT_HELPERS_"


# =============================================================================
# KEY DERIVATION
# =============================================================================
# Hard floor of PBKDF2 iterations, never lowered by configuration
MIN_PBKDF2_ITERATIONS = 100_000

# Size in bytes of every PBKDF2-derived key
DERIVED_KEY_LENGTH = 32

# Default number of PBKDF2 iterations; a value below the floor is kept so that
# derive_key refuses it
PBKDF2_ITERATIONS = int(
    os.environ.get(
        f"{_DontChangeMe.MAIN_ENV_PREFIX}PBKDF2_ITERATIONS", MIN_PBKDF2_ITERATIONS
    )
)
if PBKDF2_ITERATIONS < MIN_PBKDF2_ITERATIONS:
    logging.getLogger(__name__).warning(
        "%sPBKDF2_ITERATIONS=%d is below the minimum %d, key derivation "
        "with the default iteration count will be refused",
        _DontChangeMe.MAIN_ENV_PREFIX,
        PBKDF2_ITERATIONS,
        MIN_PBKDF2_ITERATIONS,
    )

# Default salt size (bytes) used when hashing with a generated salt
SALT_SIZE = int(os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}SALT_SIZE", 32))

# Default PBKDF2 digest algorithm
HASH_ALGORITHM = (
    os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}HASH_ALGORITHM", "SHA256")
    .strip()
    .upper()
)

# =============================================================================
# LOGGING
# =============================================================================
LOG_LEVEL = (
    os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}LOG_LEVEL", "INFO").strip().upper()
)

# =============================================================================
# HOSTING
# =============================================================================
# Thread pool size for running host initializers, 0 means executor default
INIT_MAX_WORKERS = int(
    os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}INIT_MAX_WORKERS", "0").strip()
)
if INIT_MAX_WORKERS <= 0:
    INIT_MAX_WORKERS = None
