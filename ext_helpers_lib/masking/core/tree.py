"""
Intermediate tree used by the masker.

:func:`to_tree` copies a structured value into container nodes that remember
the value they were built from:

* :class:`MappingNode` - pydantic models, dataclasses and ``dict`` values,
  keyed by field name (model aliases are accepted as lookup names),
* :class:`SequenceNode` - ``list``, ``tuple``, ``set`` and ``frozenset``.

Any other value is a leaf and is deep-copied.  :func:`from_tree` rebuilds the
value bottom-up with the original container kinds, so nodes the masker never
touched come back with their original types.  Models are re-validated by
field name and dataclasses through a :class:`pydantic.TypeAdapter`, which is
where a masked value that no longer fits its field is reported.
"""

import copy
import dataclasses
import functools
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, RootModel, TypeAdapter, ValidationError
from pydantic.errors import PydanticSchemaGenerationError

from ext_helpers_lib.exceptions import SerializationError


@functools.lru_cache(maxsize=256)
def _adapter_for(source_type: type) -> TypeAdapter:
    return TypeAdapter(source_type)


class TreeNode:
    """
    A container node; ``origin`` is the value the node was built from.
    """

    def __init__(self, origin: Any):
        self.origin = origin

    @property
    def children(self):
        raise NotImplementedError


class MappingNode(TreeNode):
    def __init__(
        self,
        origin: Any,
        fields: Dict[Any, Any],
        aliases: Optional[Dict[str, str]] = None,
    ):
        super().__init__(origin)
        self.fields = fields
        self.aliases = aliases or {}

    @property
    def children(self) -> Dict[Any, Any]:
        return self.fields

    def key_for(self, name: str) -> Optional[Any]:
        """
        Return the key stored under *name* or under the field *name* aliases.
        """
        if name in self.fields:
            return name
        key = self.aliases.get(name)
        if key is not None and key in self.fields:
            return key
        return None

    def __repr__(self) -> str:
        return f"MappingNode({type(self.origin).__name__}, {self.fields!r})"


class SequenceNode(TreeNode):
    def __init__(self, origin: Any, items: List[Any]):
        super().__init__(origin)
        self.items = items

    @property
    def children(self) -> List[Any]:
        return self.items

    def __repr__(self) -> str:
        return f"SequenceNode({type(self.origin).__name__}, {self.items!r})"


def _is_dataclass_instance(value: Any) -> bool:
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def to_tree(value: Any) -> Any:
    """
    Copy *value* into :class:`TreeNode` containers and deep-copied leaves.

    Raises
    ------
    SerializationError
        When a leaf cannot be copied.
    """
    if isinstance(value, BaseModel):
        return _model_node(value)
    if _is_dataclass_instance(value):
        return MappingNode(
            value,
            {
                f.name: to_tree(getattr(value, f.name))
                for f in dataclasses.fields(value)
            },
        )
    if isinstance(value, dict):
        return MappingNode(value, {k: to_tree(v) for k, v in value.items()})
    if isinstance(value, (list, tuple, set, frozenset)):
        return SequenceNode(value, [to_tree(v) for v in value])
    try:
        return copy.deepcopy(value)
    except (TypeError, copy.Error) as exc:
        raise SerializationError(
            f"Cannot copy value of type {type(value).__name__}: {exc}"
        ) from exc


def _model_node(model: BaseModel) -> MappingNode:
    model_fields = type(model).model_fields
    fields = {name: to_tree(getattr(model, name)) for name in model_fields}
    for name, value in (model.model_extra or {}).items():
        fields[name] = to_tree(value)

    aliases = {}
    for name, info in model_fields.items():
        for alias in (info.alias, info.serialization_alias, info.validation_alias):
            if isinstance(alias, str) and alias != name:
                aliases[alias] = name
    return MappingNode(model, fields, aliases)


def from_tree(node: Any) -> Any:
    """
    Rebuild the value held by *node* with the kinds of the original values.

    Raises
    ------
    SerializationError
        When a rebuilt model or dataclass rejects its (masked) fields.
    """
    if isinstance(node, MappingNode):
        fields = {key: from_tree(child) for key, child in node.fields.items()}
        origin = node.origin
        if isinstance(origin, BaseModel):
            return _rebuild_model(origin, fields)
        if _is_dataclass_instance(origin):
            return _rebuild_dataclass(origin, fields)
        rebuilt = copy.copy(origin)
        rebuilt.clear()
        rebuilt.update(fields)
        return rebuilt

    if isinstance(node, SequenceNode):
        items = [from_tree(child) for child in node.items]
        origin = node.origin
        if isinstance(origin, list):
            rebuilt = copy.copy(origin)
            rebuilt[:] = items
            return rebuilt
        # named tuples take their fields positionally
        if isinstance(origin, tuple) and hasattr(origin, "_fields"):
            return type(origin)(*items)
        return type(origin)(items)

    return node


def _rebuild_model(origin: BaseModel, fields: Dict[str, Any]) -> BaseModel:
    model_type = type(origin)
    try:
        if isinstance(origin, RootModel):
            rebuilt = model_type.model_validate(fields["root"])
        else:
            rebuilt = model_type.model_validate(fields, by_name=True)
    except ValidationError as exc:
        raise SerializationError(
            f"Masked tree does not fit {model_type.__name__}: {exc}"
        ) from exc

    object.__setattr__(
        rebuilt, "__pydantic_fields_set__", set(origin.model_fields_set)
    )
    if origin.__pydantic_private__:
        object.__setattr__(
            rebuilt, "__pydantic_private__", copy.deepcopy(origin.__pydantic_private__)
        )
    return rebuilt


def _rebuild_dataclass(origin: Any, fields: Dict[str, Any]) -> Any:
    dataclass_type = type(origin)
    declared = dataclasses.fields(origin)
    init_fields = {f.name: fields[f.name] for f in declared if f.init}
    try:
        rebuilt = _adapter_for(dataclass_type).validate_python(init_fields)
    except PydanticSchemaGenerationError as exc:
        raise SerializationError(
            f"Cannot rebuild {dataclass_type.__name__}: {exc}"
        ) from exc
    except ValidationError as exc:
        raise SerializationError(
            f"Masked tree does not fit {dataclass_type.__name__}: {exc}"
        ) from exc

    for f in declared:
        if not f.init:
            object.__setattr__(rebuilt, f.name, fields[f.name])
    return rebuilt
