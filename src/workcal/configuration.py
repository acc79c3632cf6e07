from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from ._exceptions import NoSuchAttributeError

logger = logging.getLogger(__name__)


class Configuration:
    """
    Mutable record of the active weekdays and the holiday dates.

    Only ``weekdays`` and ``holidays`` can be set; any other attribute raises
    NoSuchAttributeError.  Values are not validated here: duplicates are
    harmless and unrecognised weekdays simply never match a date.
    """

    __slots__ = ("weekdays", "holidays")

    def __init__(self, weekdays: Any = None, holidays: Any = None) -> None:
        self.weekdays = set() if weekdays is None else weekdays
        self.holidays = set() if holidays is None else holidays

    def __setattr__(self, name: str, value: Any) -> None:
        if name not in self.__slots__:
            raise NoSuchAttributeError(
                f"Configuration has no attribute {name!r}; "
                f"expected one of {', '.join(self.__slots__)}."
            )
        object.__setattr__(self, name, value)

    def __repr__(self) -> str:
        return (
            f"Configuration(weekdays={self.weekdays!r}, "
            f"holidays={self.holidays!r})"
        )


# ── process-wide configuration ──────────────────────────────────────────────

_shared: Optional[Configuration] = None


def config() -> Configuration:
    """Return the shared configuration, creating an empty one on first use."""
    global _shared
    if _shared is None:
        _shared = Configuration()
    return _shared


def configure(callback: Callable[[Configuration], Any]) -> Configuration:
    """
    Hand the shared configuration to ``callback`` for editing.

    Basic usage::

        import workcal

        def setup(c):
            c.weekdays = {"mon", "tue", "wed", "thu", "fri"}
            c.holidays = {datetime.date(2015, 12, 25)}

        workcal.configure(setup)
    """
    cfg = config()
    callback(cfg)
    logger.debug("Configured %r", cfg)
    return cfg


def reset() -> Configuration:
    """Replace the shared configuration with a fresh, empty one."""
    global _shared
    _shared = Configuration()
    return _shared
