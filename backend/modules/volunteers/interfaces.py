"""
Volunteer module interface.
"""

from datetime import datetime
from typing import Protocol, runtime_checkable

from .models import VolunteerAlert


@runtime_checkable
class IVolunteerAlertRepository(Protocol):
    """Queue of alerts for shelter staff."""

    def save(self, user_id: int, created_at: datetime, message: str) -> VolunteerAlert:
        """Store a new alert and return it with its ID."""
        ...

    def find_all(self) -> list[VolunteerAlert]:
        """All alerts, oldest first."""
        ...
