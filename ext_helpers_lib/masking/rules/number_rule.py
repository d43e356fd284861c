"""
Rule that masks integer, floating point and decimal values.
"""

from decimal import Decimal
from enum import Enum
from typing import Any

from ext_helpers_lib.masking.core.rule_interface import MaskRuleI


class NumberRule(MaskRuleI):
    """
    Replaces numbers with zero of the same kind.

    ``bool`` is an ``int`` subclass in Python but is not treated as a number
    here; booleans (and enum members) are left unchanged.
    """

    def matches(self, value: Any) -> bool:
        if isinstance(value, (bool, Enum)):
            return False
        return isinstance(value, (int, float, Decimal))

    def default(self, value: Any) -> Any:
        if isinstance(value, Decimal):
            return Decimal(0)
        if isinstance(value, float):
            return 0.0
        return 0
