"""
Reports module.

Read-only lookup of daily care reports.

Public API:
- IReportRepository: Per-species report lookup
- Report: Daily report record
"""

from .interfaces import IReportRepository
from .models import Report
from .repository import InMemoryReportRepository, SupabaseReportRepository

__all__ = [
    "IReportRepository",
    "Report",
    "InMemoryReportRepository",
    "SupabaseReportRepository",
]
