"""
Reflection helpers: callable classification, cached method lookup and
invocation formatting.
"""

from ext_helpers_lib.reflection.method_types import (
    MethodTypeOptions,
    get_method_type,
    has_return_value,
    is_async,
    is_async_with_result,
    is_concrete_class,
)
from ext_helpers_lib.reflection.methods import (
    get_method_from_string,
    method_signature,
    to_invocation_string,
)

__all__ = [
    "MethodTypeOptions",
    "get_method_type",
    "has_return_value",
    "is_async",
    "is_async_with_result",
    "is_concrete_class",
    "get_method_from_string",
    "method_signature",
    "to_invocation_string",
]
