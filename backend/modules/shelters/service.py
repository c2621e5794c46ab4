"""
Shelter directory.

Resolves shelters and looks up the users and pets an adoption refers to,
turning absent records into NotFound errors.
"""

from typing import Any

from .exceptions import PetNotFoundError, UserNotFoundError
from .interfaces import IPetRepository, IUserRepository
from .models import Pet, Species, User
from .partitions import SpeciesPartitions, resolve_species


class ShelterDirectory:
    """Validated access to users and per-species pets."""

    def __init__(
        self,
        users: IUserRepository,
        pets: SpeciesPartitions[IPetRepository],
    ):
        self._users = users
        self._pets = pets

    def check_shelter(self, shelter: Any) -> Species:
        """
        Validate a shelter identifier before any store is touched.

        Raises:
            ShelterNotFoundError: If the shelter is unknown
        """
        return resolve_species(shelter)

    def get_user(self, user_id: int) -> User:
        """
        Raises:
            UserNotFoundError: If the user doesn't exist
        """
        user = self._users.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def get_pet(self, species: Any, pet_id: int) -> Pet:
        """
        Raises:
            ShelterNotFoundError: If the shelter is unknown
            PetNotFoundError: If the pet doesn't exist in that shelter
        """
        resolved = resolve_species(species)
        pet = self._pets.get(resolved).get_by_id(pet_id)
        if pet is None:
            raise PetNotFoundError(resolved.value, pet_id)
        return pet
