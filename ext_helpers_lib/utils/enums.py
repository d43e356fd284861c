"""
Enumerations carrying a human readable description.

>>> class Status(DescribedEnum):
...     ACTIVE = 1, "Currently active"
...     RETIRED = 2
>>> get_description(Status.ACTIVE)
'Currently active'
>>> get_description(Status.RETIRED)
'RETIRED'
"""

from enum import Enum
from typing import Any, Optional


class DescribedEnum(Enum):
    """
    Enum base class whose members may declare a description.

    Members are written as ``NAME = value, "description"``; a member
    declared as ``NAME = value`` has no description.
    """

    def __new__(cls, value: Any, description: Optional[str] = None):
        obj = object.__new__(cls)
        obj._value_ = value
        obj.description = description
        return obj


def get_description(member: Any) -> Optional[str]:
    """
    Return the description of an enum member.

    Falls back to the member name when no description was declared, and
    returns ``None`` when *member* is not an enum member at all.
    """
    if not isinstance(member, Enum):
        return None
    description = getattr(member, "description", None)
    if isinstance(description, str) and description:
        return description
    return member.name
