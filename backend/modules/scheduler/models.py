"""
Scheduler module data models.
"""

from datetime import date
from enum import Enum

from pydantic import BaseModel, Field


class SweepKind(str, Enum):
    """The two daily sweeps."""

    REPORT_COMPLIANCE = "report-compliance"  # Missing report reminders/escalation
    TRIAL_COMPLETION = "trial-completion"    # Congratulate trials ending today


class SweepResult(BaseModel):
    """Counters from one sweep run across both shelters."""

    sweep: SweepKind = Field(..., description="Which sweep ran")
    run_date: date = Field(..., description="The 'today' the sweep ran for")
    checked: int = Field(default=0, description="Adoptions examined")
    compliant: int = Field(default=0, description="Adoptions with a complete report today")
    reminders_sent: int = Field(default=0, description="Report reminders delivered")
    alerts_created: int = Field(default=0, description="Volunteer alerts raised")
    congratulations_sent: int = Field(default=0, description="Congratulations delivered")
    delivery_failures: int = Field(default=0, description="Best-effort messages not delivered")
    errors: int = Field(default=0, description="Adoptions skipped because of an error")
