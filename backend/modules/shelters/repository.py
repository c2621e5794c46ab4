"""
User and pet repositories.

In-memory implementations back local runs and tests; the Supabase
implementations read the `users` and `pets` tables.
"""

from typing import Any, Iterable, Optional

from supabase import Client

from shared.repository import BaseRepository
from .models import Pet, Species, User


class InMemoryUserRepository:
    """Users kept in a dict."""

    def __init__(self, users: Iterable[User] = ()):
        self._users: dict[int, User] = {u.id: u for u in users}

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._users.get(user_id)

    def add(self, user: User) -> User:
        self._users[user.id] = user
        return user


class InMemoryPetRepository:
    """Pets of one species kept in a dict."""

    def __init__(self, species: Species, pets: Iterable[Pet] = ()):
        self.species = species
        self._pets: dict[int, Pet] = {}
        for pet in pets:
            self.add(pet)

    def get_by_id(self, pet_id: int) -> Optional[Pet]:
        return self._pets.get(pet_id)

    def add(self, pet: Pet) -> Pet:
        if pet.species != self.species:
            raise ValueError(
                f"Cannot store a {pet.species.value} in the {self.species.value} partition"
            )
        self._pets[pet.id] = pet
        return pet


class SupabaseUserRepository(BaseRepository[User]):
    """Users from the `users` table."""

    def get_by_id(self, user_id: int) -> Optional[User]:
        result = self._db.table("users").select("*").eq("id", user_id).execute()
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def _map_to_user(self, row: dict[str, Any]) -> User:
        return User(
            id=row["id"],
            name=row.get("name") or "",
            chat_id=row.get("chat_id"),
            shelter=Species(row["shelter"]) if row.get("shelter") else None,
        )


class SupabasePetRepository(BaseRepository[Pet]):
    """Pets of one species from the `pets` table."""

    def __init__(self, db: Client, species: Species) -> None:
        super().__init__(db)
        self.species = species

    def get_by_id(self, pet_id: int) -> Optional[Pet]:
        result = (
            self._db.table("pets")
            .select("*")
            .eq("species", self.species.value)
            .eq("id", pet_id)
            .execute()
        )
        if not result.data:
            return None
        row = result.data[0]
        return Pet(id=row["id"], species=self.species, name=row.get("name") or "")
