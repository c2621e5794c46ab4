"""
Adoption module data models.

One Adoption model serves both shelters; `species` says which partition a
record lives in.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from modules.shelters.models import Species
from .intervals import DateInterval


class NewAdoption(BaseModel):
    """An adoption about to be stored (no ID yet)."""

    species: Species = Field(..., description="Shelter partition")
    user_id: int = Field(..., description="Adopter user ID")
    pet_id: int = Field(..., description="Adopted pet ID")
    adoption_date: date = Field(..., description="Day the pet was adopted")
    trial_end_date: date = Field(..., description="Last day of the trial period")
    trial_extension_days: int = Field(
        default=0,
        description="Cumulative days the trial was extended by",
    )

    @model_validator(mode="after")
    def _trial_ends_after_adoption(self):
        if self.trial_end_date < self.adoption_date:
            raise ValueError("trial_end_date must not precede adoption_date")
        return self

    @property
    def window(self) -> DateInterval:
        """Active window [adoption_date, trial_end_date]."""
        return DateInterval(self.adoption_date, self.trial_end_date)

    def is_active_on(self, day: date) -> bool:
        return self.window.contains(day)


class Adoption(NewAdoption):
    """A stored adoption."""

    id: int = Field(..., description="Adoption ID, unique within its species")


class CreateAdoptionRequest(BaseModel):
    """Request to register an adoption."""

    user_id: int = Field(..., description="Adopter user ID")
    pet_id: int = Field(..., description="Pet ID within the shelter")
    trial_end_date: date = Field(..., description="Last day of the trial period")


class TrialDateUpdateRequest(BaseModel):
    """Request to move the end of a trial period."""

    trial_end_date: date = Field(..., description="New last day of the trial period")


class ActiveAdoptionResponse(BaseModel):
    """API response for a user's active adoption lookup."""

    user_id: int = Field(..., description="User ID")
    on_date: date = Field(..., description="Reference date")
    adoption: Optional[Adoption] = Field(None, description="Active adoption, if any")
