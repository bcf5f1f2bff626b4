"""Weekday value object - the seven fixed plan days."""

from enum import Enum
from typing import Optional


class Weekday(str, Enum):
    """Lowercase English weekday names, Monday first."""

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @classmethod
    def parse(cls, raw: object) -> Optional["Weekday"]:
        """Case-insensitive lookup, None for anything that is not a weekday.

        Example:
            >>> Weekday.parse("Monday")
            <Weekday.MONDAY: 'monday'>
        """
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            return None
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


DAY_NAMES = tuple(day.value for day in Weekday)
