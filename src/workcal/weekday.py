from __future__ import annotations

import datetime as dt
from enum import IntEnum
from typing import Any, Optional

import numpy as np


class Weekday(IntEnum):
    """
    Day of the week, numbered like ``datetime.date.weekday()``.

    The mapping is fixed and does not depend on the process locale.
    """

    MON = 0
    TUE = 1
    WED = 2
    THU = 3
    FRI = 4
    SAT = 5
    SUN = 6

    @classmethod
    def of(cls, date: dt.date) -> "Weekday":
        return cls(date.weekday())

    @classmethod
    def coerce(cls, value: Any) -> Optional["Weekday"]:
        """
        Map ``value`` onto a Weekday.

        Accepts a Weekday, an integer 0..6, or an English day name or its
        three-letter abbreviation in any case.  Anything else gives ``None``.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, (int, np.integer)) and not isinstance(value, bool):
            return cls(int(value)) if 0 <= value <= 6 else None
        if isinstance(value, str):
            return _NAMES.get(value.strip().lower())
        return None


_NAMES: dict[str, Weekday] = {}
for _day, _full in zip(
    Weekday,
    ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"),
):
    _NAMES[_full] = _day
    _NAMES[_full[:3]] = _day
del _day, _full

WORKWEEK: frozenset[Weekday] = frozenset(
    (Weekday.MON, Weekday.TUE, Weekday.WED, Weekday.THU, Weekday.FRI)
)


def weekmask(weekdays) -> list[int]:
    """Seven-element Mon..Sun mask, 1 where the weekday is active."""
    mask = [0] * 7
    for value in weekdays:
        day = Weekday.coerce(value)
        if day is not None:
            mask[day] = 1
    return mask
