"""
Volunteer module data models.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class VolunteerAlert(BaseModel):
    """
    A message queued for shelter staff.

    Created by the report compliance sweep when an adopter stops reporting;
    volunteers review the queue and follow up in person.
    """

    id: int = Field(..., description="Alert ID")
    user_id: int = Field(..., description="Adopter the alert is about")
    created_at: datetime = Field(..., description="When the alert was raised")
    message: str = Field(..., description="Alert text")


class VolunteerAlertListResponse(BaseModel):
    """API response for the alert queue."""

    alerts: list[VolunteerAlert] = Field(..., description="Alerts, oldest first")
    total: int = Field(..., description="Number of alerts")
