"""
Adoptions module.

Adoption lifecycle with one active trial per user and per pet in each shelter.

Public API:
- IAdoptionService: Interface for lifecycle operations
- IAdoptionRepository: Per-species adoption store
- Adoption, NewAdoption: Adoption records
- DateInterval: Closed date window with overlap test
- Adoption exceptions: AdoptionNotFoundError, UserOrPetBusyError, InvalidTrialDateError
"""

from .interfaces import IAdoptionService, IAdoptionRepository
from .intervals import DateInterval
from .models import (
    Adoption,
    NewAdoption,
    CreateAdoptionRequest,
    TrialDateUpdateRequest,
    ActiveAdoptionResponse,
)
from .exceptions import (
    AdoptionNotFoundError,
    UserOrPetBusyError,
    InvalidTrialDateError,
)
from .repository import InMemoryAdoptionRepository, SupabaseAdoptionRepository
from .service import AdoptionService

__all__ = [
    # Interfaces
    "IAdoptionService",
    "IAdoptionRepository",
    # Models
    "DateInterval",
    "Adoption",
    "NewAdoption",
    "CreateAdoptionRequest",
    "TrialDateUpdateRequest",
    "ActiveAdoptionResponse",
    # Exceptions
    "AdoptionNotFoundError",
    "UserOrPetBusyError",
    "InvalidTrialDateError",
    # Repositories
    "InMemoryAdoptionRepository",
    "SupabaseAdoptionRepository",
    # Service
    "AdoptionService",
]
