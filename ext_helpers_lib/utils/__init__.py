from ext_helpers_lib.utils.enums import DescribedEnum, get_description
from ext_helpers_lib.utils.strings import (
    to_bytes,
    from_bytes,
    to_title_case,
    truncate,
)

__all__ = [
    "DescribedEnum",
    "get_description",
    "to_bytes",
    "from_bytes",
    "to_title_case",
    "truncate",
]
