"""
Rules that mask date, time and duration values.
"""

import datetime
from typing import Any

from ext_helpers_lib.masking.core.rule_interface import MaskRuleI


class DateTimeRule(MaskRuleI):
    """
    Replaces a timestamp with ``datetime.min``, keeping its timezone.
    """

    def matches(self, value: Any) -> bool:
        return isinstance(value, datetime.datetime)

    def default(self, value: Any) -> Any:
        return datetime.datetime.min.replace(tzinfo=value.tzinfo)


class DateRule(MaskRuleI):
    """
    Replaces a calendar date with ``date.min``.
    """

    def matches(self, value: Any) -> bool:
        # datetime is a date subclass, handled by DateTimeRule
        return isinstance(value, datetime.date) and not isinstance(
            value, datetime.datetime
        )

    def default(self, value: Any) -> Any:
        return datetime.date.min


class TimeRule(MaskRuleI):
    def matches(self, value: Any) -> bool:
        return isinstance(value, datetime.time)

    def default(self, value: Any) -> Any:
        return datetime.time.min.replace(tzinfo=value.tzinfo)


class DurationRule(MaskRuleI):
    """
    Replaces a duration with ``timedelta(0)``.
    """

    def matches(self, value: Any) -> bool:
        return isinstance(value, datetime.timedelta)

    def default(self, value: Any) -> Any:
        return datetime.timedelta(0)
