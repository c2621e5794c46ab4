"""
Volunteer alert repositories.
"""

import itertools
import threading
from datetime import datetime
from typing import Any

from shared.repository import BaseRepository
from .models import VolunteerAlert


class InMemoryVolunteerAlertRepository:
    """Alerts kept in a list."""

    def __init__(self):
        self._alerts: list[VolunteerAlert] = []
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def save(self, user_id: int, created_at: datetime, message: str) -> VolunteerAlert:
        with self._lock:
            alert = VolunteerAlert(
                id=next(self._ids),
                user_id=user_id,
                created_at=created_at,
                message=message,
            )
            self._alerts.append(alert)
            return alert

    def find_all(self) -> list[VolunteerAlert]:
        with self._lock:
            return list(self._alerts)


class SupabaseVolunteerAlertRepository(BaseRepository[VolunteerAlert]):
    """Alerts in the `volunteer_alerts` table."""

    TABLE = "volunteer_alerts"

    def save(self, user_id: int, created_at: datetime, message: str) -> VolunteerAlert:
        result = (
            self._db.table(self.TABLE)
            .insert(
                {
                    "user_id": user_id,
                    "created_at": created_at.isoformat(),
                    "message": message,
                }
            )
            .execute()
        )
        return self._map_to_alert(result.data[0])

    def find_all(self) -> list[VolunteerAlert]:
        result = self._db.table(self.TABLE).select("*").order("created_at").execute()
        return [self._map_to_alert(row) for row in result.data]

    def _map_to_alert(self, row: dict[str, Any]) -> VolunteerAlert:
        return VolunteerAlert(
            id=row["id"],
            user_id=row["user_id"],
            created_at=self._parse_datetime(row["created_at"]),
            message=row["message"],
        )
