"""
Closed date intervals.

An adoption is active on every day of [adoption_date, trial_end_date],
both ends included. "Active on D" is the overlap test against [D, D].
"""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class DateInterval:
    """Closed interval of calendar days."""

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError(f"Interval ends before it starts: {self.start} > {self.end}")

    @classmethod
    def on(cls, day: date) -> "DateInterval":
        """Single-day interval [day, day]."""
        return cls(day, day)

    def overlaps(self, other: "DateInterval") -> bool:
        """[a1, b1] and [a2, b2] overlap iff a1 <= b2 and a2 <= b1."""
        return self.start <= other.end and other.start <= self.end

    def contains(self, day: date) -> bool:
        return self.overlaps(DateInterval.on(day))

    @property
    def days(self) -> int:
        """Number of calendar days covered."""
        return (self.end - self.start).days + 1
