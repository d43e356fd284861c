import dataclasses
import datetime
from decimal import Decimal
from typing import List, NamedTuple, Optional

import pytest
from pydantic import BaseModel, Field, PrivateAttr, RootModel

from ext_helpers_lib.exceptions import InvalidArgumentError, SerializationError
from ext_helpers_lib.masking import ObjectMasker, mask
from ext_helpers_lib.masking.rules import TextRule


class Inner(BaseModel):
    Value1: str


class Sample(BaseModel):
    Value1: str
    Value2: int
    Value3: datetime.datetime
    Value4: datetime.timedelta
    Value5: List[Inner]


class OptionalItems(BaseModel):
    name: str
    items: Optional[List[Inner]] = None


class Credentials(BaseModel):
    user: str
    secret: str = Field(alias="Secret")


class Excluded(BaseModel):
    user: str
    token: str = Field(default="default", exclude=True)


class SerializationAliased(BaseModel):
    user: str
    secret: str = Field(serialization_alias="Secret")


class WithPrivate(BaseModel):
    user: str
    _session: str = PrivateAttr(default="")


class Point(NamedTuple):
    x: int
    y: int


@dataclasses.dataclass
class Address:
    street: str
    number: int


@dataclasses.dataclass
class Customer:
    name: str
    active: bool
    balance: float
    address: Address


def _sample() -> Sample:
    return Sample(
        Value1="MyPassword",
        Value2=32,
        Value3=datetime.datetime(2024, 5, 17, 12, 30),
        Value4=datetime.timedelta(hours=5),
        Value5=[Inner(Value1="a"), Inner(Value1="b")],
    )


def test_mask_resets_addressed_fields_to_defaults():
    masked = mask(_sample(), ["Value2", "Value3", "Value4", "Value5[*].Value1"])

    assert isinstance(masked, Sample)
    assert masked.Value1 == "MyPassword"
    assert masked.Value2 == 0
    assert masked.Value3 == datetime.datetime.min
    assert masked.Value4 == datetime.timedelta(0)
    assert [i.Value1 for i in masked.Value5] == ["", ""]


def test_mask_does_not_modify_source():
    source = _sample()
    original = source.model_copy(deep=True)

    mask(source, ["Value1", "Value5[*].Value1"])

    assert source == original


def test_unmatched_path_is_ignored():
    source = _sample()

    assert mask(source, ["DoesNotExist", "Value5[*].Missing"]) == source


def test_single_path_string_is_accepted():
    assert mask(_sample(), "Value1").Value1 == ""


def test_paths_are_resolved_independently():
    masked = mask(_sample(), ["Missing", "Value2", "Value5[7].Value1"])

    assert masked.Value2 == 0
    assert [i.Value1 for i in masked.Value5] == ["a", "b"]


def test_mask_sequence_field_to_none():
    source = OptionalItems(name="x", items=[Inner(Value1="a")])

    assert mask(source, ["items"]).items is None


def test_mask_sequence_that_does_not_accept_none_fails():
    with pytest.raises(SerializationError):
        mask(_sample(), ["Value5"])


def test_mask_accepts_field_name_and_alias():
    source = Credentials(user="jan", Secret="hunter2")

    for path in ("secret", "Secret"):
        masked = mask(source, [path])
        assert masked.secret == ""
        assert masked.user == "jan"


def test_mask_keeps_excluded_field():
    masked = mask(Excluded(user="u", token="real"), ["user"])

    assert masked.user == ""
    assert masked.token == "real"


def test_mask_excluded_field_by_name():
    assert mask(Excluded(user="u", token="real"), ["token"]).token == ""


def test_mask_keeps_field_with_serialization_alias():
    masked = mask(SerializationAliased(user="u", secret="s"), ["user"])

    assert masked == SerializationAliased(user="", secret="s")
    assert mask(SerializationAliased(user="u", secret="s"), ["Secret"]).secret == ""


def test_mask_keeps_private_attributes_and_fields_set():
    source = WithPrivate(user="u")
    source._session = "abc"

    masked = mask(source, ["user"])

    assert masked._session == "abc"
    assert masked.model_fields_set == {"user"}


def test_mask_dataclass():
    source = Customer(
        name="Jan", active=True, balance=12.5, address=Address("Main", 7)
    )

    masked = mask(source, ["name", "active", "balance", "address.number"])

    assert masked == Customer(
        name="", active=True, balance=0.0, address=Address("Main", 0)
    )
    assert source.name == "Jan"


def test_mask_dict_kinds():
    source = {
        "text": "secret",
        "count": 3,
        "ratio": 0.5,
        "amount": Decimal("9.99"),
        "flag": True,
        "day": datetime.date(2024, 1, 2),
        "at": datetime.time(10, 15),
        "nested": {"a": 1},
        "nothing": None,
    }

    masked = mask(source, list(source))

    assert masked == {
        "text": "",
        "count": 0,
        "ratio": 0.0,
        "amount": Decimal(0),
        "flag": True,
        "day": datetime.date.min,
        "at": datetime.time.min,
        "nested": None,
        "nothing": None,
    }
    assert source["text"] == "secret"
    assert source["nested"] == {"a": 1}


def test_mask_keeps_timezone_of_aware_datetime():
    tz = datetime.timezone(datetime.timedelta(hours=2))
    source = {"at": datetime.datetime(2024, 1, 1, tzinfo=tz)}

    assert mask(source, ["at"])["at"] == datetime.datetime.min.replace(tzinfo=tz)


def test_mask_index_and_any_field_paths():
    source = {"rows": [1, 2, 3], "meta": {"x": "1", "y": 2}}

    masked = mask(source, ["$.rows[-1]", "meta.*"])

    assert masked == {"rows": [1, 2, 0], "meta": {"x": "", "y": 0}}


def test_mask_list_root():
    source = [{"token": "a"}, {"token": "b"}]

    assert mask(source, ["[*].token"]) == [{"token": ""}, {"token": ""}]


def test_mask_rejects_none_source():
    with pytest.raises(InvalidArgumentError) as exc_info:
        mask(None, ["Value1"])
    assert exc_info.value.param_name == "source"


@pytest.mark.parametrize("paths", [None, [], ()])
def test_mask_rejects_missing_paths(paths):
    with pytest.raises(InvalidArgumentError) as exc_info:
        mask(_sample(), paths)
    assert exc_info.value.param_name == "paths"


@pytest.mark.parametrize("path", ["", "a..b", "a[*", "a[x]", "a.[0]"])
def test_mask_rejects_malformed_paths(path):
    with pytest.raises(InvalidArgumentError):
        mask({"a": {"b": 1}}, [path])


def test_mask_unsupported_type_raises_serialization_error():
    class Opaque:
        pass

    with pytest.raises(SerializationError):
        mask(Opaque(), ["anything"])


def test_custom_rule_set():
    masker = ObjectMasker(rules=[TextRule()])

    assert masker.mask({"a": "x", "b": 5}, ["a", "b"]) == {"a": "", "b": 5}


def test_empty_rule_set_masks_nothing():
    masker = ObjectMasker(rules=[])

    assert masker.rules == []
    assert masker.mask({"a": "x", "b": 5}, ["a", "b"]) == {"a": "x", "b": 5}


def test_untouched_values_of_dict_keep_their_types():
    user = Inner(Value1="jan")
    source = {
        "coords": (1, 2),
        "point": Point(3, 4),
        "tags": {"a"},
        "frozen": frozenset({"b"}),
        "user": user,
        "address": Address("Main", 7),
        "secret": "x",
    }

    masked = mask(source, ["secret"])

    assert masked["secret"] == ""
    assert masked["coords"] == (1, 2)
    assert masked["point"] == Point(3, 4)
    assert isinstance(masked["point"], Point)
    assert masked["tags"] == {"a"}
    assert masked["frozen"] == frozenset({"b"})
    assert isinstance(masked["user"], Inner)
    assert masked["user"] == user
    assert masked["user"] is not user
    assert masked["address"] == Address("Main", 7)


def test_mask_inside_tuple_and_nested_model_of_dict():
    source = {"pairs": ((1, "a"), (2, "b")), "user": Inner(Value1="jan")}

    masked = mask(source, ["pairs[*][1]", "user.Value1"])

    assert masked == {"pairs": ((1, ""), (2, "")), "user": Inner(Value1="")}
    assert source["user"].Value1 == "jan"


def test_mask_whole_nested_model_of_dict():
    assert mask({"user": Inner(Value1="jan")}, ["user"]) == {"user": None}


def test_mask_root_model():
    Tokens = RootModel[List[str]]

    assert mask(Tokens(["a", "b"]), ["root[0]"]) == Tokens(["", "b"])
