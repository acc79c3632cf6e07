"""
workcal
~~~~~~~

Working-day arithmetic over a configurable set of active weekdays and
holiday dates.  A date is *active* when it falls on an active weekday and is
not a holiday; holidays always win.

Basic usage::

    import datetime as dt
    import workcal

    def setup(c):
        c.weekdays = {"mon", "tue", "wed", "thu", "fri"}
        c.holidays = {dt.date(2015, 1, 1), dt.date(2015, 12, 25)}

    workcal.configure(setup)
    workcal.is_active(dt.date(2015, 1, 2))          # → True
    workcal.days_after(5, dt.date(2015, 1, 1))      # → date(2015, 1, 8)

Without the shared configuration::

    from workcal import Calendar, Configuration, WORKWEEK

    cal = Calendar(Configuration(weekdays=WORKWEEK))
    cal.between(dt.date(2015, 1, 1), dt.date(2015, 1, 8))

Public API
----------
Calendar              Query object compiled from a Configuration.
Configuration         The ``weekdays``/``holidays`` record.
Weekday               Fixed Monday..Sunday enumeration.
configure / config    Edit / read the shared configuration.
CalendarError         Base exception for all calendar-related errors.
"""

from __future__ import annotations

from workcal._exceptions import (
    CalendarError,
    InvalidArgumentError,
    NoSuchAttributeError,
)
from workcal.calendar import (
    Calendar,
    between,
    count,
    days_after,
    days_before,
    is_active,
)
from workcal.configuration import Configuration, config, configure, reset
from workcal.weekday import WORKWEEK, Weekday

__all__ = [
    "Calendar",
    "CalendarError",
    "Configuration",
    "InvalidArgumentError",
    "NoSuchAttributeError",
    "WORKWEEK",
    "Weekday",
    "between",
    "config",
    "configure",
    "count",
    "days_after",
    "days_before",
    "is_active",
    "reset",
]
