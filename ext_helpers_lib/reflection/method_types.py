"""
Classification of callables by their synchronicity and return value.
"""

import inspect
from enum import Enum
from typing import Any, Callable

from ext_helpers_lib.exceptions import InvalidArgumentError

_NO_RETURN_ANNOTATIONS = (None, type(None), "None")


class MethodTypeOptions(Enum):
    SYNC_ACTION = "sync_action"
    SYNC_FUNCTION = "sync_function"
    ASYNC_ACTION = "async_action"
    ASYNC_FUNCTION = "async_function"


def _signature(func: Callable) -> inspect.Signature:
    if func is None:
        raise InvalidArgumentError("Callable must not be None", param_name="func")
    try:
        return inspect.signature(func)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(
            f"Cannot inspect the signature of {func!r}: {exc}", param_name="func"
        ) from exc


def has_return_value(func: Callable) -> bool:
    """
    ``False`` when *func* is annotated to return ``None``, ``True`` otherwise
    (unannotated callables may return a value).
    """
    return _signature(func).return_annotation not in _NO_RETURN_ANNOTATIONS


def is_async(func: Callable) -> bool:
    if func is None:
        raise InvalidArgumentError("Callable must not be None", param_name="func")
    return inspect.iscoroutinefunction(func)


def is_async_with_result(func: Callable) -> bool:
    return is_async(func) and has_return_value(func)


def is_concrete_class(cls: Any) -> bool:
    """
    ``True`` for classes that can be instantiated: not abstract, not a
    :class:`typing.Protocol`.
    """
    if cls is None:
        raise InvalidArgumentError("Class must not be None", param_name="cls")
    if not inspect.isclass(cls):
        return False
    return not inspect.isabstract(cls) and not getattr(cls, "_is_protocol", False)


def get_method_type(func: Callable) -> MethodTypeOptions:
    if is_async(func):
        if has_return_value(func):
            return MethodTypeOptions.ASYNC_FUNCTION
        return MethodTypeOptions.ASYNC_ACTION
    if has_return_value(func):
        return MethodTypeOptions.SYNC_FUNCTION
    return MethodTypeOptions.SYNC_ACTION
