"""
Adoption module interfaces.

IAdoptionRepository is implemented once and instantiated per species.
The scheduler and the API depend on IAdoptionService.
"""

from datetime import date
from typing import Any, Optional, Protocol, runtime_checkable

from modules.shelters.models import User
from .models import Adoption, NewAdoption


@runtime_checkable
class IAdoptionRepository(Protocol):
    """
    Adoption store for one species partition.

    Window queries treat [adoption_date, trial_end_date] as a closed
    interval. The two *_if_free writes must check and write atomically:
    no other write for the same user or pet may land in between.
    """

    def get_by_id(self, adoption_id: int) -> Optional[Adoption]:
        ...

    def find_all(self) -> list[Adoption]:
        ...

    def delete_by_id(self, adoption_id: int) -> None:
        ...

    def find_overlapping_for_user(
        self,
        user_id: int,
        start: date,
        end: date,
        exclude_id: Optional[int] = None,
    ) -> list[Adoption]:
        """Adoptions of the user whose window overlaps [start, end]."""
        ...

    def find_overlapping_for_pet(
        self,
        pet_id: int,
        start: date,
        end: date,
        exclude_id: Optional[int] = None,
    ) -> list[Adoption]:
        """Adoptions of the pet whose window overlaps [start, end]."""
        ...

    def find_active_on(self, day: date) -> list[Adoption]:
        """Adoptions whose window contains day."""
        ...

    def find_active_for_user_on(self, user_id: int, day: date) -> list[Adoption]:
        ...

    def find_trial_ending_on_or_after(self, day: date) -> list[Adoption]:
        """Adoptions with trial_end_date >= day."""
        ...

    def find_trial_ending_on(self, day: date) -> list[Adoption]:
        """Adoptions with trial_end_date == day."""
        ...

    def insert_if_free(self, adoption: NewAdoption) -> Adoption:
        """
        Store a new adoption unless its user or pet is busy.

        Raises:
            UserOrPetBusyError: If an overlapping window exists
        """
        ...

    def update_trial_end_if_free(
        self,
        adoption_id: int,
        trial_end_date: date,
        trial_extension_days: int,
    ) -> Adoption:
        """
        Move the end of a trial unless the new window collides.

        Raises:
            AdoptionNotFoundError: If the adoption is gone
            UserOrPetBusyError: If the new window overlaps another adoption
        """
        ...


@runtime_checkable
class IAdoptionService(Protocol):
    """
    Interface for adoption lifecycle operations.

    Every operation taking `species` validates it before touching a store.
    """

    async def create_adoption(
        self,
        species: Any,
        user_id: int,
        pet_id: int,
        trial_end_date: date,
    ) -> Adoption:
        """
        Register an adoption starting today.

        The adopter is congratulated best-effort: a failed delivery is
        logged and the adoption is still returned.

        Raises:
            ShelterNotFoundError: If the shelter is unknown
            UserNotFoundError: If the user doesn't exist
            PetNotFoundError: If the pet doesn't exist
            InvalidTrialDateError: If trial_end_date is before today
            UserOrPetBusyError: If the user or the pet is in another trial
        """
        ...

    async def get_adoption(self, species: Any, adoption_id: int) -> Adoption:
        """
        Raises:
            ShelterNotFoundError: If the shelter is unknown
            AdoptionNotFoundError: If the adoption doesn't exist
        """
        ...

    async def set_trial_date(
        self,
        species: Any,
        adoption_id: int,
        trial_end_date: date,
    ) -> Adoption:
        """
        Move the end of a trial period.

        The adopter must be told first; if that fails nothing is saved.

        Raises:
            ShelterNotFoundError: If the shelter is unknown
            AdoptionNotFoundError: If the adoption doesn't exist
            InvalidTrialDateError: If the date precedes the adoption date
            UserOrPetBusyError: If the new window overlaps another adoption
            DeliveryFailedError: If the adopter could not be notified
        """
        ...

    async def delete_adoption(self, species: Any, adoption_id: int) -> Adoption:
        """
        Remove an adoption and return it as it was.

        Raises:
            ShelterNotFoundError: If the shelter is unknown
            AdoptionNotFoundError: If the adoption doesn't exist
        """
        ...

    async def get_all_adoptions(self, species: Any) -> list[Adoption]:
        ...

    async def get_all_active_adoptions(self, species: Any) -> list[Adoption]:
        """Adoptions whose window contains today."""
        ...

    async def get_active_adoption(self, user: User, day: date) -> Optional[Adoption]:
        """
        The user's adoption active on day, looked up in the user's shelter.

        Returns None if there is none or the user has no shelter.
        """
        ...

    async def warning_user(self, user_id: int) -> None:
        """
        Tell an adopter their reports are not detailed enough.

        Raises:
            UserNotFoundError: If the user doesn't exist
            DeliveryFailedError: If the message could not be delivered
        """
        ...
