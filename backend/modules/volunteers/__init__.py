"""
Volunteers module.

Escalation queue for shelter staff.

Public API:
- IVolunteerAlertRepository: Alert queue
- VolunteerAlert: Queued alert
"""

from .interfaces import IVolunteerAlertRepository
from .models import VolunteerAlert, VolunteerAlertListResponse
from .repository import InMemoryVolunteerAlertRepository, SupabaseVolunteerAlertRepository

__all__ = [
    "IVolunteerAlertRepository",
    "VolunteerAlert",
    "VolunteerAlertListResponse",
    "InMemoryVolunteerAlertRepository",
    "SupabaseVolunteerAlertRepository",
]
