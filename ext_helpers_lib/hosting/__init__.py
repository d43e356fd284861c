from ext_helpers_lib.hosting.initializer_interface import (
    HostInitializerI,
    AsyncHostInitializerI,
)
from ext_helpers_lib.hosting.host import initialize, initialize_async

__all__ = [
    "HostInitializerI",
    "AsyncHostInitializerI",
    "initialize",
    "initialize_async",
]
