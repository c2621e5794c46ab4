"""
Shelter module interfaces.

User and pet records are owned by the bot's catalog screens; this backend
only needs to look them up.
"""

from typing import Optional, Protocol, runtime_checkable

from .models import Pet, User


@runtime_checkable
class IUserRepository(Protocol):
    """Lookup of adopters and volunteers."""

    def get_by_id(self, user_id: int) -> Optional[User]:
        """Return the user, or None if absent."""
        ...


@runtime_checkable
class IPetRepository(Protocol):
    """Lookup of pets within one species partition."""

    def get_by_id(self, pet_id: int) -> Optional[Pet]:
        """Return the pet, or None if absent."""
        ...
