"""
Volunteer alert endpoints.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_volunteer_alerts
from modules.volunteers.interfaces import IVolunteerAlertRepository
from modules.volunteers.models import VolunteerAlertListResponse

router = APIRouter()


@router.get("", response_model=VolunteerAlertListResponse)
async def list_alerts(
    alerts: IVolunteerAlertRepository = Depends(get_volunteer_alerts),
) -> VolunteerAlertListResponse:
    """List alerts raised for adopters who stopped sending reports."""
    items = alerts.find_all()
    return VolunteerAlertListResponse(alerts=items, total=len(items))
