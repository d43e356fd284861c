"""
Build already-completed futures for callables with a return value.

Useful for stubbing: a proxy that intercepts a call can hand back a finished
future instead of running the real implementation.  Wrap the result with
:func:`asyncio.wrap_future` to await it from a coroutine.
"""

from concurrent.futures import Future
from typing import Any, Callable

from ext_helpers_lib.exceptions import InvalidArgumentError
from ext_helpers_lib.reflection.method_types import has_return_value


def create_task_result(func: Callable, result: Any) -> Future:
    """
    Return a :class:`concurrent.futures.Future` completed with *result*.

    Raises
    ------
    InvalidArgumentError
        If *func* is ``None`` or declares no return value (``-> None``).
    """
    if func is None:
        raise InvalidArgumentError("Callable must not be None", param_name="func")
    if not has_return_value(func):
        raise InvalidArgumentError(
            f"{getattr(func, '__qualname__', func)!s} has no return value",
            param_name="func",
        )
    future: Future = Future()
    future.set_result(result)
    return future
