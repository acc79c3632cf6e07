import datetime as dt
import logging
from typing import Any, Optional, Union

import numpy as np

from ._exceptions import CalendarError, InvalidArgumentError
from .configuration import Configuration, config
from .weekday import Weekday, weekmask

logger = logging.getLogger(__name__)

DateLike = Union[dt.date, str, np.datetime64]


def _to_day(value: DateLike) -> np.datetime64:
    if isinstance(value, dt.datetime):
        value = value.date()
    return np.datetime64(value, "D")


class Calendar:
    """
    Work calendar compiled from a Configuration.

    The weekday set and holidays are snapshotted into a numpy
    ``busdaycalendar``; editing the Configuration afterwards does not change
    an existing Calendar.
    """

    def __init__(self, configuration: Optional[Configuration] = None) -> None:
        if configuration is None:
            configuration = config()

        self._weekmask: list[int] = weekmask(configuration.weekdays)
        self._holidays: np.ndarray = np.unique(
            np.array(
                [_to_day(h) for h in configuration.holidays],
                dtype="datetime64[D]",
            )
        )

        # numpy refuses an all-zero weekmask; nothing is ever active then.
        self._busdaycal: Optional[np.busdaycalendar] = (
            np.busdaycalendar(weekmask=self._weekmask, holidays=self._holidays)
            if any(self._weekmask)
            else None
        )
        logger.debug("Built %r", self)

    # ── predicate ────────────────────────────────────────────────────────

    def is_active(self, date: Any) -> Union[bool, np.ndarray]:
        """
        True when ``date`` is not a holiday and falls on an active weekday.

        Array-likes of dates give a boolean array of the same shape.
        """
        if np.ndim(date) == 0:
            if self._busdaycal is None:
                return False
            return bool(np.is_busday(_to_day(date), busdaycal=self._busdaycal))

        days = np.asarray(date).astype("datetime64[D]")
        if self._busdaycal is None:
            return np.zeros(days.shape, dtype=bool)
        return np.is_busday(days, busdaycal=self._busdaycal)

    # ── offsets ──────────────────────────────────────────────────────────

    def days_before(self, count: int, date: DateLike) -> DateLike:
        """Step back from ``date`` until ``count`` active days have been passed."""
        return self._offset(count, date, forward=False)

    def days_after(self, count: int, date: DateLike) -> DateLike:
        """Step forward from ``date`` until ``count`` active days have been passed."""
        return self._offset(count, date, forward=True)

    def _offset(self, count: int, date: DateLike, forward: bool) -> DateLike:
        if count < 0:
            raise InvalidArgumentError(f"Count must be non-negative; got {count}.")
        if count == 0:
            return date
        if self._busdaycal is None:
            raise CalendarError(
                "No active weekdays configured; an active day can never be reached."
            )

        # Rolling against the direction of travel keeps the start date out of
        # the count.
        if forward:
            roll, offset = "backward", int(count)
        else:
            roll, offset = "forward", -int(count)
        result = np.busday_offset(
            _to_day(date), offset, roll=roll, busdaycal=self._busdaycal
        )
        return result.item()

    # ── ranges ───────────────────────────────────────────────────────────

    def between(self, start_date: DateLike, end_date: DateLike) -> list[dt.date]:
        """Active dates ``d`` with ``start_date <= d < end_date``, ascending."""
        start, end = self._check_range(start_date, end_date)
        if self._busdaycal is None:
            return []
        days = np.arange(start, end, dtype="datetime64[D]")
        return days[np.is_busday(days, busdaycal=self._busdaycal)].tolist()

    def count(self, start_date: DateLike, end_date: DateLike) -> int:
        """Number of active dates in ``[start_date, end_date)``."""
        start, end = self._check_range(start_date, end_date)
        if self._busdaycal is None:
            return 0
        return int(np.busday_count(start, end, busdaycal=self._busdaycal))

    @staticmethod
    def _check_range(
        start_date: DateLike, end_date: DateLike
    ) -> tuple[np.datetime64, np.datetime64]:
        start, end = _to_day(start_date), _to_day(end_date)
        if start > end:
            raise InvalidArgumentError(
                f"Start date {start} is after end date {end}."
            )
        return start, end

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def weekdays(self) -> frozenset[Weekday]:
        return frozenset(Weekday(i) for i, on in enumerate(self._weekmask) if on)

    @property
    def holidays(self) -> tuple[dt.date, ...]:
        return tuple(self._holidays.tolist())

    def __repr__(self) -> str:
        days = ",".join(d.name.lower() for d in sorted(self.weekdays))
        return f"Calendar(weekdays=[{days}], holidays={len(self._holidays)})"


# ── module-level queries against the shared configuration ──────────────────

def is_active(date: Any) -> Union[bool, np.ndarray]:
    return Calendar(config()).is_active(date)


def days_before(count: int, date: DateLike) -> DateLike:
    return Calendar(config()).days_before(count, date)


def days_after(count: int, date: DateLike) -> DateLike:
    return Calendar(config()).days_after(count, date)


def between(start_date: DateLike, end_date: DateLike) -> list[dt.date]:
    return Calendar(config()).between(start_date, end_date)


def count(start_date: DateLike, end_date: DateLike) -> int:
    return Calendar(config()).count(start_date, end_date)
