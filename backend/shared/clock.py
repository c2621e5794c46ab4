"""
Time sources.

Services and the scheduler never call datetime.now() directly; they receive
a Clock so that "today" can be pinned in tests and in one-off sweep runs.
"""

from datetime import date, datetime, timedelta, tzinfo
from typing import Optional, Protocol, runtime_checkable

from dateutil import tz


@runtime_checkable
class Clock(Protocol):
    """Source of the current local time."""

    def now(self) -> datetime:
        """Current timezone-aware local datetime."""
        ...

    def today(self) -> date:
        """Current local calendar date."""
        ...


class SystemClock:
    """Wall clock in the shelter's timezone."""

    def __init__(self, timezone: str = "UTC"):
        zone = tz.gettz(timezone)
        if zone is None:
            raise ValueError(f"Unknown timezone: {timezone}")
        self._zone: tzinfo = zone

    @property
    def zone(self) -> tzinfo:
        return self._zone

    def now(self) -> datetime:
        return datetime.now(self._zone)

    def today(self) -> date:
        return self.now().date()


class FixedClock:
    """
    Clock frozen at a given moment.

    Use advance() to move it forward; the scheduler tests and
    run_sweeps.py --date rely on this.
    """

    def __init__(self, moment: datetime, zone: Optional[tzinfo] = None):
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=zone or tz.UTC)
        self._moment = moment

    def now(self) -> datetime:
        return self._moment

    def today(self) -> date:
        return self._moment.date()

    def set(self, moment: datetime) -> None:
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=self._moment.tzinfo)
        self._moment = moment

    def advance(self, **kwargs: float) -> None:
        """Move forward by a timedelta expressed as keyword arguments."""
        self._moment = self._moment + timedelta(**kwargs)

    @classmethod
    def on(cls, day: date, hour: int = 12, minute: int = 0) -> "FixedClock":
        """Clock pinned to a calendar date at the given local time (UTC)."""
        return cls(datetime(day.year, day.month, day.day, hour, minute, tzinfo=tz.UTC))
