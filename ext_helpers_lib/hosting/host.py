"""
Run host start-up initializers.

* :func:`initialize` runs synchronous initializers in a thread pool.
* :func:`initialize_async` awaits asynchronous initializers concurrently.

Both wait for every initializer to finish and re-raise the first exception
observed; there is no ordering, retry or error aggregation.
"""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Iterable, Optional

from ext_helpers_lib.core import constants
from ext_helpers_lib.exceptions import InvalidArgumentError
from ext_helpers_lib.hosting.initializer_interface import (
    HostInitializerI,
    AsyncHostInitializerI,
)

logger = logging.getLogger(__name__)


def initialize(
    initializers: Iterable[HostInitializerI],
    max_workers: Optional[int] = None,
) -> None:
    """
    Call ``initialize()`` on every initializer in parallel.

    Parameters
    ----------
    initializers : Iterable[HostInitializerI]
        Initializers to run.  An empty collection is a no-op.
    max_workers : int, optional
        Thread pool size.  Defaults to
        :data:`~ext_helpers_lib.core.constants.INIT_MAX_WORKERS`.
    """
    if initializers is None:
        raise InvalidArgumentError(
            "Initializers must not be None", param_name="initializers"
        )
    initializers = list(initializers)
    if not initializers:
        return

    logger.debug("Running %d host initializer(s)", len(initializers))
    with ThreadPoolExecutor(
        max_workers=max_workers or constants.INIT_MAX_WORKERS,
        thread_name_prefix="host-init",
    ) as executor:
        futures = [executor.submit(i.initialize) for i in initializers]
        for future in as_completed(futures):
            # the executor still waits for the remaining initializers
            future.result()


async def initialize_async(initializers: Iterable[AsyncHostInitializerI]) -> None:
    """
    Await ``initialize_async()`` of every initializer concurrently.
    """
    if initializers is None:
        raise InvalidArgumentError(
            "Initializers must not be None", param_name="initializers"
        )
    initializers = list(initializers)
    if not initializers:
        return

    logger.debug("Running %d async host initializer(s)", len(initializers))
    await asyncio.gather(*(i.initialize_async() for i in initializers))
