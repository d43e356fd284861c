from enum import Enum

from ext_helpers_lib.utils.enums import DescribedEnum, get_description


class Status(DescribedEnum):
    ACTIVE = 1, "Currently active"
    RETIRED = 2


class Plain(Enum):
    ONE = 1


def test_description_is_returned_when_declared():
    assert get_description(Status.ACTIVE) == "Currently active"
    assert Status.ACTIVE.value == 1
    assert Status(1) is Status.ACTIVE


def test_name_is_returned_without_description():
    assert get_description(Status.RETIRED) == "RETIRED"
    assert get_description(Plain.ONE) == "ONE"


def test_non_member_returns_none():
    assert get_description(1) is None
    assert get_description(None) is None
