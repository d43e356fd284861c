"""
Rule that masks whole sequences and nested objects.
"""

from typing import Any

from ext_helpers_lib.masking.core.rule_interface import MaskRuleI
from ext_helpers_lib.masking.core.tree import TreeNode


class ContainerRule(MaskRuleI):
    """
    Replaces a sequence, mapping or nested object node of the tree with
    ``None``.
    """

    def matches(self, value: Any) -> bool:
        return isinstance(value, (TreeNode, list, tuple, set, frozenset, dict))

    def default(self, value: Any) -> Any:
        return None
