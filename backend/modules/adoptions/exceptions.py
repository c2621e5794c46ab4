"""
Adoption module exceptions.

These exceptions are raised by the adoption module and can be caught
by API route handlers to return appropriate HTTP responses.
"""

from datetime import date
from typing import Optional

from shared.exceptions import ConflictError, NotFoundError, ValidationError


class AdoptionNotFoundError(NotFoundError):
    """Raised when an adoption doesn't exist in the given shelter."""

    def __init__(self, species: str, adoption_id: int):
        super().__init__(
            f"Adoption with id {adoption_id} for shelter {species} not found",
            code="ADOPTION_NOT_FOUND",
            details={"species": species, "adoption_id": adoption_id},
        )


class UserOrPetBusyError(ConflictError):
    """
    Raised when the user or the pet already has an adoption whose
    window overlaps the requested one in the same shelter.
    """

    def __init__(
        self,
        species: str,
        user_id: Optional[int] = None,
        pet_id: Optional[int] = None,
        conflicting_adoption_id: Optional[int] = None,
    ):
        if user_id is not None:
            subject = f"User {user_id}"
        elif pet_id is not None:
            subject = f"Pet {pet_id}"
        else:
            subject = "User or pet"
        super().__init__(
            f"{subject} already has an active trial period in the {species} shelter",
            code="USER_OR_PET_BUSY",
            details={"species": species},
        )
        if user_id is not None:
            self.details["user_id"] = user_id
        if pet_id is not None:
            self.details["pet_id"] = pet_id
        if conflicting_adoption_id is not None:
            self.details["conflicting_adoption_id"] = conflicting_adoption_id


class InvalidTrialDateError(ValidationError):
    """Raised when a trial end date falls before the window it closes."""

    def __init__(self, trial_end_date: date, earliest: date):
        super().__init__(
            f"Invalid trial end date: {trial_end_date}. Must be on or after {earliest}",
            code="INVALID_TRIAL_DATE",
            details={
                "trial_end_date": trial_end_date.isoformat(),
                "earliest": earliest.isoformat(),
            },
        )
