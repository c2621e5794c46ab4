"""
Report module interface.
"""

from datetime import date
from typing import Optional, Protocol, runtime_checkable

from .models import Report


@runtime_checkable
class IReportRepository(Protocol):
    """Report lookup for one species partition."""

    def find_complete_reports_on(self, day: date) -> dict[int, date]:
        """
        Complete reports filed for day.

        Returns:
            Mapping of adoption ID to report date
        """
        ...

    def find_latest_report(
        self, adoption_id: int, on_or_before: Optional[date] = None
    ) -> Optional[Report]:
        """
        Most recent report for an adoption, complete or not.

        Reports dated after on_or_before, when given, are ignored.
        """
        ...
