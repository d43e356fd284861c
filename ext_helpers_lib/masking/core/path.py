"""
Path expressions addressing fields of a structured tree.

A path is a dotted sequence of field names, optionally prefixed with the
JSONPath root marker (``$`` / ``$.``).  Any field name may be followed by one
or more bracket selectors:

* ``[*]`` - every element of the sequence (or every value of the mapping),
* ``[n]`` - the element at index ``n`` (negative values count from the end).

A field name of ``*`` selects every value of a mapping.

Examples: ``Password``, ``Customer.Address.Street``, ``Items[*].Secret``,
``$.Rows[0].Cells[*]``.
"""

import re
from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Tuple

from ext_helpers_lib.exceptions import InvalidArgumentError
from ext_helpers_lib.masking.core.tree import MappingNode, TreeNode

_SEGMENT_REGEX = re.compile(r"^(?P<name>[^\[\]]*)(?P<selectors>(?:\[[^\[\]]*\])*)$")
_SELECTOR_REGEX = re.compile(r"\[([^\[\]]*)\]")


def _children(node: Any) -> Any:
    if isinstance(node, TreeNode):
        return node.children
    return node


class PathSegment(ABC):
    """
    A single step of a path.

    :meth:`select` receives a tree node and yields ``(key, child)`` pairs for
    every child addressed by the segment.  Nodes of the wrong kind yield
    nothing, so a path that runs into a scalar simply matches nothing.
    """

    @abstractmethod
    def select(self, node: Any) -> Iterable[Tuple[Any, Any]]:
        raise NotImplementedError


class FieldSegment(PathSegment):
    def __init__(self, name: str):
        self.name = name

    def select(self, node: Any) -> Iterable[Tuple[Any, Any]]:
        if isinstance(node, MappingNode):
            key = node.key_for(self.name)
            if key is not None:
                yield key, node.fields[key]
        elif isinstance(node, dict) and self.name in node:
            yield self.name, node[self.name]

    def __repr__(self) -> str:
        return f"FieldSegment({self.name!r})"


class AnyFieldSegment(PathSegment):
    def select(self, node: Any) -> Iterable[Tuple[Any, Any]]:
        node = _children(node)
        if isinstance(node, dict):
            yield from list(node.items())

    def __repr__(self) -> str:
        return "AnyFieldSegment()"


class WildcardSegment(PathSegment):
    def select(self, node: Any) -> Iterable[Tuple[Any, Any]]:
        node = _children(node)
        if isinstance(node, list):
            yield from list(enumerate(node))
        elif isinstance(node, dict):
            yield from list(node.items())

    def __repr__(self) -> str:
        return "WildcardSegment()"


class IndexSegment(PathSegment):
    def __init__(self, index: int):
        self.index = index

    def select(self, node: Any) -> Iterable[Tuple[Any, Any]]:
        node = _children(node)
        if not isinstance(node, list):
            return
        idx = self.index if self.index >= 0 else len(node) + self.index
        if 0 <= idx < len(node):
            yield idx, node[idx]

    def __repr__(self) -> str:
        return f"IndexSegment({self.index})"


def parse_path(path: str) -> List[PathSegment]:
    """
    Split *path* into a list of :class:`PathSegment` objects.

    Raises
    ------
    InvalidArgumentError
        When the path is empty or malformed.
    """
    if not isinstance(path, str) or not path.strip():
        raise InvalidArgumentError(
            f"Mask path must be a non-empty string, got {path!r}", param_name="paths"
        )

    expression = path.strip()
    if expression.startswith("$"):
        expression = expression[1:]
        if expression.startswith("."):
            expression = expression[1:]
    if not expression:
        raise InvalidArgumentError(
            f"Mask path {path!r} does not address any field", param_name="paths"
        )

    segments: List[PathSegment] = []
    for position, raw in enumerate(expression.split(".")):
        match = _SEGMENT_REGEX.match(raw)
        if match is None:
            raise InvalidArgumentError(
                f"Malformed segment {raw!r} in mask path {path!r}", param_name="paths"
            )
        name = match.group("name").strip()
        selectors = _SELECTOR_REGEX.findall(match.group("selectors"))

        # only the very first segment may start directly with a selector
        if not name and (position > 0 or not selectors):
            raise InvalidArgumentError(
                f"Empty segment in mask path {path!r}", param_name="paths"
            )
        if name == "*":
            segments.append(AnyFieldSegment())
        elif name:
            segments.append(FieldSegment(name))

        for selector in selectors:
            segments.append(_parse_selector(selector.strip(), path))
    return segments


def _parse_selector(selector: str, path: str) -> PathSegment:
    if selector == "*":
        return WildcardSegment()
    try:
        return IndexSegment(int(selector))
    except ValueError:
        raise InvalidArgumentError(
            f"Unsupported selector [{selector}] in mask path {path!r}",
            param_name="paths",
        ) from None


def resolve_path(tree: Any, segments: List[PathSegment]) -> List[Tuple[Any, Any]]:
    """
    Resolve *segments* against *tree*.

    Returns
    -------
    List[Tuple[Any, Any]]
        ``(container, key)`` pairs, one per matched node, such that
        ``container[key]`` is the addressed value.  Empty when nothing
        matches.
    """
    locations: List[Tuple[Any, Any]] = []

    def _walk(node: Any, depth: int, parent: Any, key: Any) -> None:
        if depth == len(segments):
            locations.append((parent, key))
            return
        for child_key, child in segments[depth].select(node):
            _walk(child, depth + 1, _children(node), child_key)

    if segments:
        _walk(tree, 0, None, None)
    return locations
