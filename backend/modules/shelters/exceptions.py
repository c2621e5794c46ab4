"""
Shelter module exceptions.
"""

from typing import Any

from shared.exceptions import NotFoundError


class ShelterNotFoundError(NotFoundError):
    """Raised when a species/shelter identifier is not recognised."""

    def __init__(self, shelter: Any):
        super().__init__(
            f"Shelter not found: {shelter}",
            code="SHELTER_NOT_FOUND",
            details={"shelter": str(shelter)},
        )


class UserNotFoundError(NotFoundError):
    """Raised when a user doesn't exist."""

    def __init__(self, user_id: int):
        super().__init__(
            f"User with id {user_id} not found",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class PetNotFoundError(NotFoundError):
    """Raised when a pet doesn't exist in the given shelter."""

    def __init__(self, species: str, pet_id: int):
        super().__init__(
            f"Pet with id {pet_id} not found in {species} shelter",
            code="PET_NOT_FOUND",
            details={"species": species, "pet_id": pet_id},
        )
