"""
Adoption repositories.

- InMemoryAdoptionRepository: dict storage guarded by a lock
- SupabaseAdoptionRepository: the `adoptions` table, one instance per species

Both implement IAdoptionRepository for a single species partition.
"""

import itertools
import threading
from datetime import date
from typing import Any, Callable, Optional

from supabase import Client, PostgrestAPIError

from modules.shelters.models import Species
from shared.repository import BaseRepository
from .exceptions import AdoptionNotFoundError, UserOrPetBusyError
from .intervals import DateInterval
from .models import Adoption, NewAdoption

# SQLSTATE raised by the btree_gist exclusion constraints on `adoptions`
EXCLUSION_VIOLATION = "23P01"


class InMemoryAdoptionRepository:
    """
    Adoptions of one species kept in memory.

    A single lock covers every read and write, so the overlap check inside
    insert_if_free / update_trial_end_if_free cannot interleave with
    another write.
    """

    def __init__(self, species: Species):
        self.species = species
        self._adoptions: dict[int, Adoption] = {}
        self._ids = itertools.count(1)
        self._lock = threading.RLock()

    def get_by_id(self, adoption_id: int) -> Optional[Adoption]:
        with self._lock:
            return self._adoptions.get(adoption_id)

    def find_all(self) -> list[Adoption]:
        with self._lock:
            return sorted(self._adoptions.values(), key=lambda a: a.id)

    def delete_by_id(self, adoption_id: int) -> None:
        with self._lock:
            self._adoptions.pop(adoption_id, None)

    def _filter(self, predicate: Callable[[Adoption], bool]) -> list[Adoption]:
        with self._lock:
            return [a for a in self.find_all() if predicate(a)]

    def find_overlapping_for_user(
        self,
        user_id: int,
        start: date,
        end: date,
        exclude_id: Optional[int] = None,
    ) -> list[Adoption]:
        window = DateInterval(start, end)
        return self._filter(
            lambda a: a.user_id == user_id and a.id != exclude_id and a.window.overlaps(window)
        )

    def find_overlapping_for_pet(
        self,
        pet_id: int,
        start: date,
        end: date,
        exclude_id: Optional[int] = None,
    ) -> list[Adoption]:
        window = DateInterval(start, end)
        return self._filter(
            lambda a: a.pet_id == pet_id and a.id != exclude_id and a.window.overlaps(window)
        )

    def find_active_on(self, day: date) -> list[Adoption]:
        return self._filter(lambda a: a.is_active_on(day))

    def find_active_for_user_on(self, user_id: int, day: date) -> list[Adoption]:
        return self._filter(lambda a: a.user_id == user_id and a.is_active_on(day))

    def find_trial_ending_on_or_after(self, day: date) -> list[Adoption]:
        return self._filter(lambda a: a.trial_end_date >= day)

    def find_trial_ending_on(self, day: date) -> list[Adoption]:
        return self._filter(lambda a: a.trial_end_date == day)

    def _check_free(
        self,
        user_id: int,
        pet_id: int,
        start: date,
        end: date,
        exclude_id: Optional[int] = None,
    ) -> None:
        busy = self.find_overlapping_for_user(user_id, start, end, exclude_id)
        if busy:
            raise UserOrPetBusyError(
                self.species.value, user_id=user_id, conflicting_adoption_id=busy[0].id
            )
        busy = self.find_overlapping_for_pet(pet_id, start, end, exclude_id)
        if busy:
            raise UserOrPetBusyError(
                self.species.value, pet_id=pet_id, conflicting_adoption_id=busy[0].id
            )

    def insert_if_free(self, adoption: NewAdoption) -> Adoption:
        if adoption.species != self.species:
            raise ValueError(
                f"Cannot store a {adoption.species.value} adoption in the "
                f"{self.species.value} partition"
            )
        with self._lock:
            self._check_free(
                adoption.user_id,
                adoption.pet_id,
                adoption.adoption_date,
                adoption.trial_end_date,
            )
            stored = Adoption(id=next(self._ids), **adoption.model_dump())
            self._adoptions[stored.id] = stored
            return stored

    def update_trial_end_if_free(
        self,
        adoption_id: int,
        trial_end_date: date,
        trial_extension_days: int,
    ) -> Adoption:
        with self._lock:
            current = self._adoptions.get(adoption_id)
            if current is None:
                raise AdoptionNotFoundError(self.species.value, adoption_id)
            self._check_free(
                current.user_id,
                current.pet_id,
                current.adoption_date,
                trial_end_date,
                exclude_id=adoption_id,
            )
            updated = current.model_copy(
                update={
                    "trial_end_date": trial_end_date,
                    "trial_extension_days": trial_extension_days,
                }
            )
            self._adoptions[adoption_id] = updated
            return updated


class SupabaseAdoptionRepository(BaseRepository[Adoption]):
    """
    Adoptions of one species in the `adoptions` table.

    Atomicity of the *_if_free writes comes from the per-species exclusion
    constraints in migrations/001_adoptions.sql; a violation surfaces as
    UserOrPetBusyError.
    """

    TABLE = "adoptions"

    def __init__(self, db: Client, species: Species) -> None:
        super().__init__(db)
        self.species = species

    def _query(self):
        return self._db.table(self.TABLE).select("*").eq("species", self.species.value)

    def _fetch(self, query) -> list[Adoption]:
        result = query.order("id").execute()
        return [self._map_to_adoption(row) for row in result.data]

    def get_by_id(self, adoption_id: int) -> Optional[Adoption]:
        result = self._query().eq("id", adoption_id).execute()
        if not result.data:
            return None
        return self._map_to_adoption(result.data[0])

    def find_all(self) -> list[Adoption]:
        return self._fetch(self._query())

    def delete_by_id(self, adoption_id: int) -> None:
        (
            self._db.table(self.TABLE)
            .delete()
            .eq("species", self.species.value)
            .eq("id", adoption_id)
            .execute()
        )

    def _overlapping(
        self,
        column: str,
        value: int,
        start: date,
        end: date,
        exclude_id: Optional[int],
    ) -> list[Adoption]:
        query = (
            self._query()
            .eq(column, value)
            .lte("adoption_date", end.isoformat())
            .gte("trial_end_date", start.isoformat())
        )
        if exclude_id is not None:
            query = query.neq("id", exclude_id)
        return self._fetch(query)

    def find_overlapping_for_user(
        self,
        user_id: int,
        start: date,
        end: date,
        exclude_id: Optional[int] = None,
    ) -> list[Adoption]:
        return self._overlapping("user_id", user_id, start, end, exclude_id)

    def find_overlapping_for_pet(
        self,
        pet_id: int,
        start: date,
        end: date,
        exclude_id: Optional[int] = None,
    ) -> list[Adoption]:
        return self._overlapping("pet_id", pet_id, start, end, exclude_id)

    def find_active_on(self, day: date) -> list[Adoption]:
        return self._fetch(
            self._query()
            .lte("adoption_date", day.isoformat())
            .gte("trial_end_date", day.isoformat())
        )

    def find_active_for_user_on(self, user_id: int, day: date) -> list[Adoption]:
        return self._overlapping("user_id", user_id, day, day, None)

    def find_trial_ending_on_or_after(self, day: date) -> list[Adoption]:
        return self._fetch(self._query().gte("trial_end_date", day.isoformat()))

    def find_trial_ending_on(self, day: date) -> list[Adoption]:
        return self._fetch(self._query().eq("trial_end_date", day.isoformat()))

    def insert_if_free(self, adoption: NewAdoption) -> Adoption:
        if adoption.species != self.species:
            raise ValueError(
                f"Cannot store a {adoption.species.value} adoption in the "
                f"{self.species.value} partition"
            )
        data = {
            "species": self.species.value,
            "user_id": adoption.user_id,
            "pet_id": adoption.pet_id,
            "adoption_date": adoption.adoption_date.isoformat(),
            "trial_end_date": adoption.trial_end_date.isoformat(),
            "trial_extension_days": adoption.trial_extension_days,
        }
        try:
            result = self._db.table(self.TABLE).insert(data).execute()
        except PostgrestAPIError as e:
            if e.code == EXCLUSION_VIOLATION:
                raise UserOrPetBusyError(
                    self.species.value, user_id=adoption.user_id, pet_id=adoption.pet_id
                ) from e
            raise
        return self._map_to_adoption(result.data[0])

    def update_trial_end_if_free(
        self,
        adoption_id: int,
        trial_end_date: date,
        trial_extension_days: int,
    ) -> Adoption:
        try:
            result = (
                self._db.table(self.TABLE)
                .update(
                    {
                        "trial_end_date": trial_end_date.isoformat(),
                        "trial_extension_days": trial_extension_days,
                    }
                )
                .eq("species", self.species.value)
                .eq("id", adoption_id)
                .execute()
            )
        except PostgrestAPIError as e:
            if e.code == EXCLUSION_VIOLATION:
                raise UserOrPetBusyError(self.species.value) from e
            raise
        if not result.data:
            raise AdoptionNotFoundError(self.species.value, adoption_id)
        return self._map_to_adoption(result.data[0])

    def _map_to_adoption(self, row: dict[str, Any]) -> Adoption:
        return Adoption(
            id=row["id"],
            species=Species(row.get("species", self.species.value)),
            user_id=row["user_id"],
            pet_id=row["pet_id"],
            adoption_date=self._parse_date(row["adoption_date"]),
            trial_end_date=self._parse_date(row["trial_end_date"]),
            trial_extension_days=row.get("trial_extension_days") or 0,
        )
