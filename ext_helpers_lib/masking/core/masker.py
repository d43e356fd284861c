"""
ObjectMasker module
===================

Provides the :class:`ObjectMasker` class - a thin orchestration layer that
resets path-addressed fields of an arbitrary structured value to the default
value of their runtime kind.  The masking is done on an intermediate tree
(see :mod:`ext_helpers_lib.masking.core.tree`):

1. the source is copied into mapping / sequence nodes that remember the
   original container and object types,
2. every path expression is resolved against the tree and each matched node
   is replaced using the first
   :class:`~ext_helpers_lib.masking.core.rule_interface.MaskRuleI` that
   accepts it,
3. the tree is rebuilt bottom-up; pydantic models and dataclasses are
   re-validated by field name.

The source object itself is never modified.
"""

import logging
from typing import Any, List, Optional, Sequence, TypeVar, Union

from ext_helpers_lib.exceptions import InvalidArgumentError, SerializationError
from ext_helpers_lib.masking.core.path import parse_path, resolve_path
from ext_helpers_lib.masking.core.rule_interface import MaskRuleI
from ext_helpers_lib.masking.core.tree import TreeNode, from_tree, to_tree
from ext_helpers_lib.masking.rules import (
    TextRule,
    NumberRule,
    DateTimeRule,
    DateRule,
    TimeRule,
    DurationRule,
    ContainerRule,
)

T = TypeVar("T")

logger = logging.getLogger(__name__)


class ObjectMasker:
    """
    Masks fields of structured values addressed by path expressions.

    Attributes
    ----------
    rules : List[MaskRuleI]
        Ordered rule set; the first rule whose :meth:`MaskRuleI.matches`
        accepts a value decides its replacement.  Values accepted by no rule
        are left unchanged.
    """

    ALL_MASK_RULES = [
        TextRule(),
        NumberRule(),
        DateTimeRule(),
        DateRule(),
        TimeRule(),
        DurationRule(),
        ContainerRule(),
    ]

    def __init__(
        self,
        rules: Optional[List[MaskRuleI]] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialise the masker with an optional custom rule set.

        Parameters
        ----------
        rules : List[MaskRuleI] | None
            An ordered collection of rule objects.  When ``None`` (the
            default), the class uses :data:`ALL_MASK_RULES`; an empty list
            masks nothing.
        logger : logging.Logger | None
            Logger used for diagnostic output.
        """
        self.rules = rules if rules is not None else self.ALL_MASK_RULES
        self._logger = logger or logging.getLogger(__name__)

    def mask(self, source: T, paths: Union[Sequence[str], str]) -> T:
        """
        Return a copy of *source* with every field addressed by *paths*
        reset to its default value.

        Parameters
        ----------
        source : Any
            A pydantic model, dataclass, ``dict``, ``list``, ``tuple`` or set.
            Nested values of other types are treated as leaves.
        paths : Sequence[str] | str
            Path expressions, see :mod:`ext_helpers_lib.masking.core.path`.
            A single string is treated as one path.

        Returns
        -------
        Any
            A new value of the same type as *source*.

        Raises
        ------
        InvalidArgumentError
            If *source* is ``None``, *paths* is ``None`` or empty, or a path
            is malformed.
        SerializationError
            If *source* cannot be converted to a tree, or the masked tree
            cannot be converted back to the type of *source*.
        """
        if source is None:
            raise InvalidArgumentError("Source must not be None", param_name="source")
        if paths is None:
            raise InvalidArgumentError("Paths must not be None", param_name="paths")
        if isinstance(paths, str):
            paths = [paths]
        paths = list(paths)
        if not paths:
            raise InvalidArgumentError(
                "At least one mask path is required", param_name="paths"
            )
        parsed = [(path, parse_path(path)) for path in paths]

        tree = self._to_tree(source)

        for path, segments in parsed:
            locations = resolve_path(tree, segments)
            if not locations:
                self._logger.debug("Mask path %r matched nothing", path)
                continue
            for container, key in locations:
                container[key] = self._masked_value(container[key])
            self._logger.debug("Mask path %r matched %d node(s)", path, len(locations))

        return from_tree(tree)

    def _masked_value(self, value: Any) -> Any:
        for rule in self.rules:
            if rule.matches(value):
                return rule.default(value)
        return value

    @staticmethod
    def _to_tree(source: Any) -> TreeNode:
        tree = to_tree(source)
        if not isinstance(tree, TreeNode):
            raise SerializationError(
                f"Cannot convert {type(source).__name__} to a structured tree"
            )
        return tree


_DEFAULT_MASKER = ObjectMasker()


def mask(source: T, paths: Union[Sequence[str], str]) -> T:
    """
    Mask *source* with the default :class:`ObjectMasker`.

    >>> mask({"user": "jan", "age": 32}, ["age"])
    {'user': 'jan', 'age': 0}
    """
    return _DEFAULT_MASKER.mask(source, paths)
