"""
Method lookup and invocation formatting.

Both helpers keep process-wide caches guarded by a lock; entries are only
ever added (insert-if-absent), never evicted.
"""

import inspect
import logging
import threading
from typing import Any, Callable, Dict, List, Optional, Tuple

from ext_helpers_lib.exceptions import InvalidArgumentError
from ext_helpers_lib.serialization.json_utils import to_json

logger = logging.getLogger(__name__)

_LOCK = threading.Lock()

# (function, is bound method) -> (parameter names, format template)
_METHOD_TEMPLATES: Dict[Any, Tuple[List[str], str]] = {}

# class -> public methods as (signature text, callable)
_TYPE_METHODS: Dict[type, List[Tuple[str, Callable]]] = {}

# (class, signature text) -> callable
_METHODS: Dict[Tuple[type, str], Callable] = {}


def method_signature(name: str, func: Callable) -> str:
    """
    Text form used to look methods up, e.g. ``greet(self, name: str) -> str``.
    """
    return f"{name}{inspect.signature(func)}"


def _public_methods(cls: type) -> List[Tuple[str, Callable]]:
    with _LOCK:
        cached = _TYPE_METHODS.get(cls)
    if cached is not None:
        return cached

    methods = []
    for name, member in inspect.getmembers(cls, callable):
        if name.startswith("_") or inspect.isclass(member):
            continue
        try:
            methods.append((method_signature(name, member), member))
        except (TypeError, ValueError):
            # builtins without an introspectable signature
            continue

    with _LOCK:
        return _TYPE_METHODS.setdefault(cls, methods)


def get_method_from_string(cls: type, signature: str) -> Optional[Callable]:
    """
    Find the public method of *cls* whose :func:`method_signature` equals
    *signature*.

    Returns
    -------
    Callable | None
        The method as found on the class, or ``None`` when nothing matches.
    """
    if cls is None:
        raise InvalidArgumentError("Class must not be None", param_name="cls")
    if not signature:
        raise InvalidArgumentError(
            "Method signature is required", param_name="signature"
        )

    key = (cls, signature)
    with _LOCK:
        if key in _METHODS:
            return _METHODS[key]

    result = next(
        (member for text, member in _public_methods(cls) if text == signature),
        None,
    )
    if result is not None:
        with _LOCK:
            result = _METHODS.setdefault(key, result)
    return result


def _type_name(annotation: Any) -> str:
    if annotation is inspect.Parameter.empty:
        return "Any"
    if isinstance(annotation, str):
        return annotation
    if isinstance(annotation, type):
        return f"{annotation.__module__}.{annotation.__qualname__}"
    return repr(annotation)


def _escape(text: str) -> str:
    return text.replace("{", "{{").replace("}", "}}")


def _build_template(func: Callable) -> Tuple[List[str], str]:
    target = inspect.unwrap(func)
    qualified = f"{target.__module__}.{target.__qualname__}"
    parameters = list(inspect.signature(func).parameters.values())
    arguments = ", ".join(
        f"{_escape(_type_name(p.annotation))} {_escape(p.name)} : {{{idx}}}"
        for idx, p in enumerate(parameters)
    )
    return [p.name for p in parameters], f"{_escape(qualified)}({arguments})"


def _format_value(value: Any) -> str:
    if value is None or isinstance(value, (bool, int, float)):
        return str(value)
    if isinstance(value, str):
        return f'"{value}"'
    return to_json(value, fallback=repr)


def to_invocation_string(func: Callable, *parameter_values: Any) -> str:
    """
    Render a call of *func* with *parameter_values* for diagnostics.

    >>> def greet(name: str, times: int): ...
    >>> to_invocation_string(greet, "Rudy", 2)  # doctest: +SKIP
    'module.greet(builtins.str name : "Rudy", builtins.int times : 2)'

    Strings are quoted, numbers, booleans and ``None`` are written verbatim,
    anything else is rendered as JSON.
    """
    if func is None:
        raise InvalidArgumentError("Callable must not be None", param_name="func")

    # bound methods omit self, so they get their own template
    key = (getattr(func, "__func__", func), inspect.ismethod(func))
    with _LOCK:
        cached = _METHOD_TEMPLATES.get(key)
    if cached is None:
        cached = _build_template(func)
        with _LOCK:
            cached = _METHOD_TEMPLATES.setdefault(key, cached)
        logger.debug("Cached invocation template for %r", key)

    names, template = cached
    if len(parameter_values) < len(names):
        raise InvalidArgumentError(
            f"Expected {len(names)} parameter values, got {len(parameter_values)}",
            param_name="parameter_values",
        )
    values = parameter_values[: len(names)]
    return template.format(*(_format_value(v) for v in values))
