class CalendarError(Exception):
    """Base exception for all work-calendar errors."""


class InvalidArgumentError(CalendarError, ValueError):
    """A query was called with a negative count or a reversed date range."""


class NoSuchAttributeError(CalendarError, AttributeError):
    """A configuration field other than ``weekdays``/``holidays`` was set."""
