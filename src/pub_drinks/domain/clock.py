"""
Time sources.

Offer rules depend on the day of the week and the hour, so the current
moment is injected into a `Transaction` through a `TimeSource` rather than
read from the system clock directly. Tests and replays pass a
`FixedTimeSource`.

Weekday names come from a fixed English table, not `strftime("%A")`, so
results do not depend on the process locale.
"""

from datetime import datetime
from typing import Protocol

from pub_drinks.domain.models import DayAndHour

WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


class TimeSource(Protocol):
    """Interface for anything that can tell the current moment."""

    def now(self) -> datetime: ...


class SystemTimeSource:
    """Reads the local system clock."""

    def now(self) -> datetime:
        return datetime.now()


class FixedTimeSource:
    """Always returns the same instant. Hour granularity is all the rules need."""

    def __init__(self, year: int, month: int, day: int, hour: int = 0) -> None:
        self._moment = datetime(year, month, day, hour)

    @classmethod
    def at(cls, moment: datetime) -> "FixedTimeSource":
        return cls(moment.year, moment.month, moment.day, moment.hour)

    def now(self) -> datetime:
        return self._moment

    def __repr__(self) -> str:
        return f"FixedTimeSource({self._moment.isoformat()})"


def day_and_hour(moment: datetime) -> DayAndHour:
    """Weekday name and hour in the system's local time.

    Aware instants are converted to the local zone first; naive ones are
    already taken to be local wall-clock time.
    """
    if moment.tzinfo is not None:
        moment = moment.astimezone()
    return DayAndHour(day=WEEKDAY_NAMES[moment.weekday()], hour=moment.hour)
