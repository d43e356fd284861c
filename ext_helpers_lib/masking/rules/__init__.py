"""
Package that contains concrete masking rule implementations.
"""

from ext_helpers_lib.masking.rules.text_rule import TextRule
from ext_helpers_lib.masking.rules.number_rule import NumberRule
from ext_helpers_lib.masking.rules.temporal_rule import (
    DateTimeRule,
    DateRule,
    TimeRule,
    DurationRule,
)
from ext_helpers_lib.masking.rules.container_rule import ContainerRule

__all__ = [
    "TextRule",
    "NumberRule",
    "DateTimeRule",
    "DateRule",
    "TimeRule",
    "DurationRule",
    "ContainerRule",
]
