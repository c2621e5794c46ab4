"""
Shelters module.

Species partitioning plus lookup of the users and pets adoptions refer to.

Public API:
- Species, User, Pet: Shelter data models
- SpeciesPartitions, resolve_species: Species-to-store dispatch
- ShelterDirectory: Validated user/pet lookup
- Shelter exceptions: ShelterNotFoundError, UserNotFoundError, PetNotFoundError
"""

from .models import Species, User, Pet
from .partitions import SpeciesPartitions, resolve_species
from .interfaces import IUserRepository, IPetRepository
from .exceptions import ShelterNotFoundError, UserNotFoundError, PetNotFoundError
from .repository import (
    InMemoryUserRepository,
    InMemoryPetRepository,
    SupabaseUserRepository,
    SupabasePetRepository,
)
from .service import ShelterDirectory

__all__ = [
    # Models
    "Species",
    "User",
    "Pet",
    # Dispatch
    "SpeciesPartitions",
    "resolve_species",
    # Interfaces
    "IUserRepository",
    "IPetRepository",
    # Exceptions
    "ShelterNotFoundError",
    "UserNotFoundError",
    "PetNotFoundError",
    # Repositories
    "InMemoryUserRepository",
    "InMemoryPetRepository",
    "SupabaseUserRepository",
    "SupabasePetRepository",
    # Service
    "ShelterDirectory",
]
