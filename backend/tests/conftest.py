"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
a frozen clock, seeded in-memory stores for both shelters and the services
wired on top of them.
"""

import pytest
from datetime import date, timedelta

from api.dependencies import reset_container
from modules.adoptions.models import Adoption, NewAdoption
from modules.adoptions.repository import InMemoryAdoptionRepository
from modules.adoptions.service import AdoptionService
from modules.notifications.gateway import InMemoryNotificationGateway
from modules.reports.repository import InMemoryReportRepository
from modules.scheduler.sweeps import DailySweeps
from modules.shelters.models import Pet, Species, User
from modules.shelters.partitions import SpeciesPartitions
from modules.shelters.repository import InMemoryPetRepository, InMemoryUserRepository
from modules.shelters.service import ShelterDirectory
from modules.volunteers.repository import InMemoryVolunteerAlertRepository
from shared.clock import FixedClock


TODAY = date(2024, 3, 10)


def _store_adoption(
    stores: SpeciesPartitions,
    species: Species,
    user_id: int,
    pet_id: int,
    start: date,
    end: date,
) -> Adoption:
    """Put an adoption straight into a store, bypassing the service."""
    return stores.get(species).insert_if_free(
        NewAdoption(
            species=species,
            user_id=user_id,
            pet_id=pet_id,
            adoption_date=start,
            trial_end_date=end,
        )
    )


@pytest.fixture(autouse=True)
def reset_container_singleton():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def clock(today: date) -> FixedClock:
    return FixedClock.on(today)


@pytest.fixture
def users() -> InMemoryUserRepository:
    """Two dog-shelter adopters, one cat-shelter adopter, one without a shelter."""
    return InMemoryUserRepository(
        [
            User(id=1, name="Anna", shelter=Species.DOG),
            User(id=2, name="Boris", shelter=Species.DOG),
            User(id=3, name="Clara", shelter=Species.CAT),
            User(id=4, name="Dmitry"),
        ]
    )


@pytest.fixture
def pets() -> SpeciesPartitions:
    """Pet IDs deliberately repeat across species."""
    return SpeciesPartitions(
        {
            Species.DOG: InMemoryPetRepository(
                Species.DOG,
                [
                    Pet(id=10, species=Species.DOG, name="Rex"),
                    Pet(id=11, species=Species.DOG, name="Bim"),
                ],
            ),
            Species.CAT: InMemoryPetRepository(
                Species.CAT,
                [
                    Pet(id=10, species=Species.CAT, name="Murka"),
                    Pet(id=20, species=Species.CAT, name="Tom"),
                ],
            ),
        }
    )


@pytest.fixture
def directory(users, pets) -> ShelterDirectory:
    return ShelterDirectory(users=users, pets=pets)


@pytest.fixture
def adoption_stores() -> SpeciesPartitions:
    return SpeciesPartitions({s: InMemoryAdoptionRepository(s) for s in Species})


@pytest.fixture
def report_stores() -> SpeciesPartitions:
    return SpeciesPartitions({s: InMemoryReportRepository(s) for s in Species})


@pytest.fixture
def alerts() -> InMemoryVolunteerAlertRepository:
    return InMemoryVolunteerAlertRepository()


@pytest.fixture
def notifier() -> InMemoryNotificationGateway:
    return InMemoryNotificationGateway()


@pytest.fixture
def adoption_service(directory, adoption_stores, notifier, clock) -> AdoptionService:
    return AdoptionService(
        directory=directory,
        adoptions=adoption_stores,
        notifier=notifier,
        clock=clock,
    )


@pytest.fixture
def sweeps(directory, adoption_stores, report_stores, alerts, notifier, clock) -> DailySweeps:
    return DailySweeps(
        directory=directory,
        adoptions=adoption_stores,
        reports=report_stores,
        alerts=alerts,
        notifier=notifier,
        clock=clock,
    )


@pytest.fixture
def days_ago(today):
    """Date n days before today."""
    return lambda n: today - timedelta(days=n)


@pytest.fixture
def days_ahead(today):
    """Date n days after today."""
    return lambda n: today + timedelta(days=n)


@pytest.fixture
def add_adoption(adoption_stores):
    """Store an adoption directly: add_adoption(species, user_id, pet_id, start, end)."""
    return lambda *args: _store_adoption(adoption_stores, *args)
