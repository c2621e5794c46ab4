"""Tests for adoption repositories."""

import threading

import pytest
from unittest.mock import MagicMock
from datetime import date, timedelta
from supabase import PostgrestAPIError

from modules.adoptions.exceptions import AdoptionNotFoundError, UserOrPetBusyError
from modules.adoptions.models import NewAdoption
from modules.adoptions.repository import (
    EXCLUSION_VIOLATION,
    InMemoryAdoptionRepository,
    SupabaseAdoptionRepository,
)
from modules.shelters.models import Species


START = date(2024, 3, 1)


def new_adoption(
    user_id: int = 1,
    pet_id: int = 10,
    start: date = START,
    days: int = 30,
    species: Species = Species.DOG,
) -> NewAdoption:
    """Helper to create an unsaved adoption."""
    return NewAdoption(
        species=species,
        user_id=user_id,
        pet_id=pet_id,
        adoption_date=start,
        trial_end_date=start + timedelta(days=days),
    )


def create_mock_adoption_data(
    adoption_id: int = 1,
    user_id: int = 1,
    pet_id: int = 10,
    species: str = "dog",
) -> dict:
    """Helper to create a row as PostgREST returns it."""
    return {
        "id": adoption_id,
        "species": species,
        "user_id": user_id,
        "pet_id": pet_id,
        "adoption_date": "2024-03-01",
        "trial_end_date": "2024-03-31",
        "trial_extension_days": None,
    }


class TestInMemoryAdoptionRepository:

    def test_insert_assigns_ids(self):
        repo = InMemoryAdoptionRepository(Species.DOG)

        first = repo.insert_if_free(new_adoption(user_id=1, pet_id=10))
        second = repo.insert_if_free(new_adoption(user_id=2, pet_id=11))

        assert (first.id, second.id) == (1, 2)
        assert repo.find_all() == [first, second]
        assert repo.get_by_id(2) == second

    def test_insert_wrong_species(self):
        repo = InMemoryAdoptionRepository(Species.DOG)

        with pytest.raises(ValueError):
            repo.insert_if_free(new_adoption(species=Species.CAT))

    def test_insert_overlap_for_user(self):
        repo = InMemoryAdoptionRepository(Species.DOG)
        existing = repo.insert_if_free(new_adoption(user_id=1, pet_id=10))

        with pytest.raises(UserOrPetBusyError) as exc_info:
            repo.insert_if_free(new_adoption(user_id=1, pet_id=11, start=START + timedelta(days=30)))

        assert exc_info.value.details["user_id"] == 1
        assert exc_info.value.details["conflicting_adoption_id"] == existing.id
        assert repo.find_all() == [existing]

    def test_insert_overlap_for_pet(self):
        repo = InMemoryAdoptionRepository(Species.DOG)
        repo.insert_if_free(new_adoption(user_id=1, pet_id=10))

        with pytest.raises(UserOrPetBusyError) as exc_info:
            repo.insert_if_free(new_adoption(user_id=2, pet_id=10))

        assert exc_info.value.details["pet_id"] == 10

    def test_insert_after_window(self):
        repo = InMemoryAdoptionRepository(Species.DOG)
        repo.insert_if_free(new_adoption(user_id=1, pet_id=10, days=30))

        later = repo.insert_if_free(new_adoption(user_id=2, pet_id=10, start=START + timedelta(days=31)))

        assert later.id == 2

    def test_queries(self):
        repo = InMemoryAdoptionRepository(Species.DOG)
        a = repo.insert_if_free(new_adoption(user_id=1, pet_id=10, days=5))
        b = repo.insert_if_free(new_adoption(user_id=2, pet_id=11, days=20))

        day = START + timedelta(days=10)
        assert repo.find_active_on(day) == [b]
        assert repo.find_active_for_user_on(1, START) == [a]
        assert repo.find_active_for_user_on(1, day) == []
        assert repo.find_trial_ending_on_or_after(START + timedelta(days=5)) == [a, b]
        assert repo.find_trial_ending_on(START + timedelta(days=20)) == [b]
        assert repo.find_overlapping_for_pet(10, START, START, exclude_id=a.id) == []

    def test_update_trial_end(self):
        repo = InMemoryAdoptionRepository(Species.DOG)
        a = repo.insert_if_free(new_adoption())

        updated = repo.update_trial_end_if_free(a.id, START + timedelta(days=44), 14)

        assert updated.trial_end_date == START + timedelta(days=44)
        assert updated.trial_extension_days == 14
        assert repo.get_by_id(a.id) == updated

    def test_update_into_other_window(self):
        repo = InMemoryAdoptionRepository(Species.DOG)
        a = repo.insert_if_free(new_adoption(user_id=1, pet_id=10, days=5))
        repo.insert_if_free(new_adoption(user_id=2, pet_id=10, start=START + timedelta(days=10)))

        with pytest.raises(UserOrPetBusyError):
            repo.update_trial_end_if_free(a.id, START + timedelta(days=10), 5)

        assert repo.get_by_id(a.id) == a

    def test_update_missing(self):
        repo = InMemoryAdoptionRepository(Species.DOG)

        with pytest.raises(AdoptionNotFoundError):
            repo.update_trial_end_if_free(42, START, 0)

    def test_delete(self):
        repo = InMemoryAdoptionRepository(Species.DOG)
        a = repo.insert_if_free(new_adoption())

        repo.delete_by_id(a.id)
        repo.delete_by_id(a.id)

        assert repo.get_by_id(a.id) is None

    def test_concurrent_inserts_for_one_pet(self):
        """Racing threads can't both claim the same pet."""
        repo = InMemoryAdoptionRepository(Species.DOG)
        barrier = threading.Barrier(8)
        outcomes = []

        def adopt(user_id: int) -> None:
            barrier.wait()
            try:
                repo.insert_if_free(new_adoption(user_id=user_id, pet_id=10))
                outcomes.append("ok")
            except UserOrPetBusyError:
                outcomes.append("busy")

        threads = [threading.Thread(target=adopt, args=(u,)) for u in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert outcomes.count("ok") == 1
        assert outcomes.count("busy") == 7
        assert len(repo.find_all()) == 1


class TestSupabaseAdoptionRepository:

    def test_get_by_id(self):
        """Should filter by species and map the row."""
        mock_db = MagicMock()
        repo = SupabaseAdoptionRepository(mock_db, Species.DOG)
        query = mock_db.table.return_value.select.return_value
        query.eq.return_value.eq.return_value.execute.return_value.data = [
            create_mock_adoption_data()
        ]

        adoption = repo.get_by_id(1)

        assert adoption.id == 1
        assert adoption.species == Species.DOG
        assert adoption.adoption_date == date(2024, 3, 1)
        assert adoption.trial_end_date == date(2024, 3, 31)
        assert adoption.trial_extension_days == 0
        mock_db.table.assert_called_with("adoptions")
        query.eq.assert_called_with("species", "dog")

    def test_get_by_id_not_found(self):
        mock_db = MagicMock()
        repo = SupabaseAdoptionRepository(mock_db, Species.CAT)
        query = mock_db.table.return_value.select.return_value
        query.eq.return_value.eq.return_value.execute.return_value.data = []

        assert repo.get_by_id(1) is None

    def test_overlap_query_uses_closed_bounds(self):
        """adoption_date <= end and trial_end_date >= start."""
        mock_db = MagicMock()
        repo = SupabaseAdoptionRepository(mock_db, Species.DOG)
        filtered = mock_db.table.return_value.select.return_value.eq.return_value.eq.return_value
        lte = filtered.lte
        gte = lte.return_value.gte
        gte.return_value.neq.return_value.order.return_value.execute.return_value.data = [
            create_mock_adoption_data(adoption_id=3)
        ]

        found = repo.find_overlapping_for_pet(10, date(2024, 3, 5), date(2024, 4, 5), exclude_id=7)

        assert [a.id for a in found] == [3]
        filtered.eq.assert_not_called()
        mock_db.table.return_value.select.return_value.eq.return_value.eq.assert_called_with(
            "pet_id", 10
        )
        lte.assert_called_with("adoption_date", "2024-04-05")
        gte.assert_called_with("trial_end_date", "2024-03-05")
        gte.return_value.neq.assert_called_with("id", 7)

    def test_insert(self):
        mock_db = MagicMock()
        repo = SupabaseAdoptionRepository(mock_db, Species.DOG)
        mock_db.table.return_value.insert.return_value.execute.return_value.data = [
            create_mock_adoption_data(adoption_id=5)
        ]

        adoption = repo.insert_if_free(new_adoption())

        assert adoption.id == 5
        payload = mock_db.table.return_value.insert.call_args[0][0]
        assert payload["species"] == "dog"
        assert payload["adoption_date"] == "2024-03-01"
        assert payload["trial_end_date"] == "2024-03-31"

    def test_insert_exclusion_violation(self):
        """The exclusion constraint surfaces as a conflict."""
        mock_db = MagicMock()
        repo = SupabaseAdoptionRepository(mock_db, Species.DOG)
        mock_db.table.return_value.insert.return_value.execute.side_effect = PostgrestAPIError(
            {
                "code": EXCLUSION_VIOLATION,
                "message": "conflicting key value violates exclusion constraint",
            }
        )

        with pytest.raises(UserOrPetBusyError) as exc_info:
            repo.insert_if_free(new_adoption(user_id=1, pet_id=10))

        assert exc_info.value.details["species"] == "dog"

    def test_insert_other_database_error(self):
        mock_db = MagicMock()
        repo = SupabaseAdoptionRepository(mock_db, Species.DOG)
        mock_db.table.return_value.insert.return_value.execute.side_effect = PostgrestAPIError(
            {"code": "23503", "message": "foreign key violation"}
        )

        with pytest.raises(PostgrestAPIError):
            repo.insert_if_free(new_adoption())

    def test_update_not_found(self):
        mock_db = MagicMock()
        repo = SupabaseAdoptionRepository(mock_db, Species.DOG)
        update = mock_db.table.return_value.update
        update.return_value.eq.return_value.eq.return_value.execute.return_value.data = []

        with pytest.raises(AdoptionNotFoundError):
            repo.update_trial_end_if_free(42, date(2024, 4, 14), 14)

        assert update.call_args[0][0] == {
            "trial_end_date": "2024-04-14",
            "trial_extension_days": 14,
        }

    def test_update_exclusion_violation(self):
        mock_db = MagicMock()
        repo = SupabaseAdoptionRepository(mock_db, Species.DOG)
        update = mock_db.table.return_value.update
        update.return_value.eq.return_value.eq.return_value.execute.side_effect = (
            PostgrestAPIError({"code": EXCLUSION_VIOLATION, "message": "conflict"})
        )

        with pytest.raises(UserOrPetBusyError):
            repo.update_trial_end_if_free(1, date(2024, 4, 14), 14)
