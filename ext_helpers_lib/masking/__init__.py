"""
Top-level package for structured value masking.

The public API consists of:
- ObjectMasker / mask (core)
- MaskRuleI (interface)
- parse_path (path expressions)
"""

from ext_helpers_lib.masking.core.masker import ObjectMasker, mask
from ext_helpers_lib.masking.core.path import parse_path
from ext_helpers_lib.masking.core.rule_interface import MaskRuleI

__all__ = ["ObjectMasker", "mask", "parse_path", "MaskRuleI"]
