"""
Report repositories.

- InMemoryReportRepository: list storage, reports added by the caller
- SupabaseReportRepository: the `reports` table, one instance per species
"""

import itertools
from datetime import date
from typing import Any, Optional

from supabase import Client

from modules.shelters.models import Species
from shared.repository import BaseRepository
from .models import Report


class InMemoryReportRepository:
    """Reports of one species kept in memory."""

    def __init__(self, species: Species):
        self.species = species
        self._reports: list[Report] = []
        self._ids = itertools.count(1)

    def add(
        self,
        adoption_id: int,
        report_date: date,
        photo: Optional[str] = None,
        text: Optional[str] = None,
    ) -> Report:
        report = Report(
            id=next(self._ids),
            species=self.species,
            adoption_id=adoption_id,
            report_date=report_date,
            photo=photo,
            text=text,
        )
        self._reports.append(report)
        return report

    def find_complete_reports_on(self, day: date) -> dict[int, date]:
        return {
            r.adoption_id: r.report_date
            for r in self._reports
            if r.report_date == day and r.is_complete
        }

    def find_latest_report(
        self, adoption_id: int, on_or_before: Optional[date] = None
    ) -> Optional[Report]:
        reports = [
            r for r in self._reports
            if r.adoption_id == adoption_id
            and (on_or_before is None or r.report_date <= on_or_before)
        ]
        if not reports:
            return None
        return max(reports, key=lambda r: (r.report_date, r.id))


class SupabaseReportRepository(BaseRepository[Report]):
    """Reports of one species in the `reports` table."""

    TABLE = "reports"

    def __init__(self, db: Client, species: Species) -> None:
        super().__init__(db)
        self.species = species

    def find_complete_reports_on(self, day: date) -> dict[int, date]:
        result = (
            self._db.table(self.TABLE)
            .select("*")
            .eq("species", self.species.value)
            .eq("report_date", day.isoformat())
            .not_.is_("photo", "null")
            .not_.is_("text", "null")
            .execute()
        )
        reports = [self._map_to_report(row) for row in result.data]
        # Empty strings pass the NULL filters
        return {r.adoption_id: r.report_date for r in reports if r.is_complete}

    def find_latest_report(
        self, adoption_id: int, on_or_before: Optional[date] = None
    ) -> Optional[Report]:
        query = (
            self._db.table(self.TABLE)
            .select("*")
            .eq("species", self.species.value)
            .eq("adoption_id", adoption_id)
        )
        if on_or_before is not None:
            query = query.lte("report_date", on_or_before.isoformat())
        result = query.order("report_date", desc=True).order("id", desc=True).limit(1).execute()
        if not result.data:
            return None
        return self._map_to_report(result.data[0])

    def _map_to_report(self, row: dict[str, Any]) -> Report:
        return Report(
            id=row["id"],
            species=self.species,
            adoption_id=row["adoption_id"],
            report_date=self._parse_date(row["report_date"]),
            photo=row.get("photo"),
            text=row.get("text"),
        )
