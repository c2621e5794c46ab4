"""
Adoption lifecycle service.

Creates, reads, extends and removes adoptions while keeping at most one
active trial per user and per pet within each shelter.
"""

import logging
from datetime import date
from typing import Any, Optional

from modules.notifications import DeliveryPolicy, INotificationGateway, notify
from modules.shelters.models import User
from modules.shelters.partitions import SpeciesPartitions
from modules.shelters.service import ShelterDirectory
from shared.clock import Clock
from .exceptions import AdoptionNotFoundError, InvalidTrialDateError, UserOrPetBusyError
from .interfaces import IAdoptionRepository
from .models import Adoption, NewAdoption

logger = logging.getLogger(__name__)


ADOPTION_CONGRATULATION = (
    "{name}, congratulations on adopting a pet from our shelter! "
    "Your trial period runs until {trial_end_date}."
)
TRIAL_DATE_CHANGED = (
    "ATTENTION!!! Your trial period has been extended by {days} days, "
    "until {trial_end_date}."
)
TRIAL_DATE_SHORTENED = (
    "ATTENTION!!! Your trial period has been shortened by {days} days "
    "and now ends on {trial_end_date}."
)
REPORT_QUALITY_WARNING = (
    "Dear adopter, we noticed that your daily reports are not as detailed as "
    "they should be. Please take this task more seriously. Otherwise the "
    "shelter volunteers will have to check the animal's living conditions "
    "in person."
)


class AdoptionService:
    """
    Adoption lifecycle operations for both shelters.

    Creation only congratulates the adopter best-effort; changing a trial
    date and warning an adopter require delivery to succeed.
    """

    def __init__(
        self,
        directory: ShelterDirectory,
        adoptions: SpeciesPartitions[IAdoptionRepository],
        notifier: INotificationGateway,
        clock: Clock,
    ):
        """
        Args:
            directory: User and pet lookup
            adoptions: Adoption store per species
            notifier: Message transport to adopters
            clock: Source of "today"
        """
        self._directory = directory
        self._adoptions = adoptions
        self._notifier = notifier
        self._clock = clock

    def _store(self, species: Any) -> IAdoptionRepository:
        return self._adoptions.get(self._directory.check_shelter(species))

    def _ensure_free(
        self,
        store: IAdoptionRepository,
        species: str,
        user_id: int,
        pet_id: int,
        start: date,
        end: date,
        exclude_id: Optional[int] = None,
    ) -> None:
        """Fail fast before notifying; the store re-checks on write."""
        busy = store.find_overlapping_for_user(user_id, start, end, exclude_id)
        if busy:
            raise UserOrPetBusyError(
                species, user_id=user_id, conflicting_adoption_id=busy[0].id
            )
        busy = store.find_overlapping_for_pet(pet_id, start, end, exclude_id)
        if busy:
            raise UserOrPetBusyError(
                species, pet_id=pet_id, conflicting_adoption_id=busy[0].id
            )

    async def create_adoption(
        self,
        species: Any,
        user_id: int,
        pet_id: int,
        trial_end_date: date,
    ) -> Adoption:
        """Register an adoption starting today."""
        shelter = self._directory.check_shelter(species)
        user = self._directory.get_user(user_id)
        pet = self._directory.get_pet(shelter, pet_id)

        today = self._clock.today()
        if trial_end_date < today:
            raise InvalidTrialDateError(trial_end_date, today)

        store = self._adoptions.get(shelter)
        self._ensure_free(store, shelter.value, user.id, pet.id, today, trial_end_date)
        adoption = store.insert_if_free(
            NewAdoption(
                species=shelter,
                user_id=user.id,
                pet_id=pet.id,
                adoption_date=today,
                trial_end_date=trial_end_date,
            )
        )
        logger.info(
            f"User {user.id} adopted {shelter.value} {pet.id} "
            f"(adoption {adoption.id}, trial until {trial_end_date})"
        )

        await notify(
            self._notifier,
            user,
            ADOPTION_CONGRATULATION.format(
                name=user.name or "Dear adopter",
                trial_end_date=trial_end_date.isoformat(),
            ),
            DeliveryPolicy.BEST_EFFORT,
        )
        return adoption

    async def get_adoption(self, species: Any, adoption_id: int) -> Adoption:
        """Get an adoption by ID."""
        shelter = self._directory.check_shelter(species)
        adoption = self._adoptions.get(shelter).get_by_id(adoption_id)
        if adoption is None:
            raise AdoptionNotFoundError(shelter.value, adoption_id)
        return adoption

    async def set_trial_date(
        self,
        species: Any,
        adoption_id: int,
        trial_end_date: date,
    ) -> Adoption:
        """Move the end of a trial period, telling the adopter first."""
        shelter = self._directory.check_shelter(species)
        store = self._adoptions.get(shelter)
        adoption = await self.get_adoption(shelter, adoption_id)

        if trial_end_date < adoption.adoption_date:
            raise InvalidTrialDateError(trial_end_date, adoption.adoption_date)
        self._ensure_free(
            store,
            shelter.value,
            adoption.user_id,
            adoption.pet_id,
            adoption.adoption_date,
            trial_end_date,
            exclude_id=adoption.id,
        )

        days = (trial_end_date - adoption.trial_end_date).days
        user = self._directory.get_user(adoption.user_id)
        template = TRIAL_DATE_CHANGED if days >= 0 else TRIAL_DATE_SHORTENED
        # Nothing is saved unless the adopter was told
        await notify(
            self._notifier,
            user,
            template.format(days=abs(days), trial_end_date=trial_end_date.isoformat()),
            DeliveryPolicy.FATAL,
        )

        updated = store.update_trial_end_if_free(
            adoption.id,
            trial_end_date,
            adoption.trial_extension_days + days,
        )
        logger.info(
            f"Trial of {shelter.value} adoption {adoption.id} moved by {days} days "
            f"to {trial_end_date}"
        )
        return updated

    async def delete_adoption(self, species: Any, adoption_id: int) -> Adoption:
        """Remove an adoption, returning the deleted record."""
        shelter = self._directory.check_shelter(species)
        adoption = await self.get_adoption(shelter, adoption_id)
        self._adoptions.get(shelter).delete_by_id(adoption_id)
        logger.info(f"Deleted {shelter.value} adoption {adoption_id}")
        return adoption

    async def get_all_adoptions(self, species: Any) -> list[Adoption]:
        return self._store(species).find_all()

    async def get_all_active_adoptions(self, species: Any) -> list[Adoption]:
        return self._store(species).find_active_on(self._clock.today())

    async def get_active_adoption(self, user: User, day: date) -> Optional[Adoption]:
        """The adoption active on day in the user's shelter, if any."""
        if user.shelter is None:
            return None
        found = self._adoptions.get(user.shelter).find_active_for_user_on(user.id, day)
        if not found:
            return None
        if len(found) > 1:
            logger.warning(
                f"User {user.id} has {len(found)} active {user.shelter.value} adoptions on {day}"
            )
        return found[0]

    async def warning_user(self, user_id: int) -> None:
        """Send the report-quality warning to an adopter."""
        user = self._directory.get_user(user_id)
        await notify(self._notifier, user, REPORT_QUALITY_WARNING, DeliveryPolicy.FATAL)
        logger.info(f"Sent report quality warning to user {user_id}")
