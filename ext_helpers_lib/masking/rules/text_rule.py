"""
Rule that masks text values.
"""

from enum import Enum
from typing import Any

from ext_helpers_lib.masking.core.rule_interface import MaskRuleI


class TextRule(MaskRuleI):
    """
    Replaces any string with the empty string.
    """

    def matches(self, value: Any) -> bool:
        return isinstance(value, str) and not isinstance(value, Enum)

    def default(self, value: Any) -> Any:
        return ""
