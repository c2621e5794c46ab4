"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file picks the concrete implementations from settings:
in-memory or Supabase stores, Telegram or in-memory notifications.
"""

import logging
from typing import TYPE_CHECKING, Optional

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.adoptions.interfaces import IAdoptionRepository, IAdoptionService
    from modules.notifications.interfaces import INotificationGateway
    from modules.reports.interfaces import IReportRepository
    from modules.scheduler.sweeps import DailySweeps
    from modules.scheduler.timer import SweepScheduler
    from modules.shelters.interfaces import IPetRepository, IUserRepository
    from modules.shelters.partitions import SpeciesPartitions
    from modules.shelters.service import ShelterDirectory
    from modules.volunteers.interfaces import IVolunteerAlertRepository
    from shared.clock import Clock

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings
        self._clock: "Clock | None" = None
        self._notifier: "INotificationGateway | None" = None
        self._users: "IUserRepository | None" = None
        self._pets: "SpeciesPartitions[IPetRepository] | None" = None
        self._adoption_stores: "SpeciesPartitions[IAdoptionRepository] | None" = None
        self._report_stores: "SpeciesPartitions[IReportRepository] | None" = None
        self._alerts: "IVolunteerAlertRepository | None" = None
        self._directory: "ShelterDirectory | None" = None
        self._adoption_service: "IAdoptionService | None" = None
        self._sweeps: "DailySweeps | None" = None
        self._scheduler: "SweepScheduler | None" = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def uses_supabase(self) -> bool:
        return self.settings.storage_backend == "supabase"

    @property
    def clock(self) -> "Clock":
        """Get the shelter-local clock."""
        if self._clock is None:
            from shared.clock import SystemClock
            self._clock = SystemClock(self.settings.timezone)
        return self._clock

    @property
    def notifier(self) -> "INotificationGateway":
        """Get the notification gateway (Telegram when a bot token is set)."""
        if self._notifier is None:
            from modules.notifications.gateway import (
                InMemoryNotificationGateway,
                TelegramNotificationGateway,
            )
            if self.settings.telegram_bot_token:
                self._notifier = TelegramNotificationGateway(
                    bot_token=self.settings.telegram_bot_token,
                    api_url=self.settings.telegram_api_url,
                    timeout=self.settings.notification_timeout,
                )
            else:
                logger.warning("TELEGRAM_BOT_TOKEN not set, messages are kept in memory")
                self._notifier = InMemoryNotificationGateway()
        return self._notifier

    @property
    def users(self) -> "IUserRepository":
        if self._users is None:
            if self.uses_supabase:
                from modules.shelters.repository import SupabaseUserRepository
                from shared.database import get_supabase_client
                self._users = SupabaseUserRepository(get_supabase_client())
            else:
                from modules.shelters.repository import InMemoryUserRepository
                self._users = InMemoryUserRepository()
        return self._users

    @property
    def pets(self) -> "SpeciesPartitions[IPetRepository]":
        if self._pets is None:
            from modules.shelters.models import Species
            from modules.shelters.partitions import SpeciesPartitions
            if self.uses_supabase:
                from modules.shelters.repository import SupabasePetRepository
                from shared.database import get_supabase_client
                db = get_supabase_client()
                self._pets = SpeciesPartitions(
                    {s: SupabasePetRepository(db, s) for s in Species}
                )
            else:
                from modules.shelters.repository import InMemoryPetRepository
                self._pets = SpeciesPartitions({s: InMemoryPetRepository(s) for s in Species})
        return self._pets

    @property
    def adoption_stores(self) -> "SpeciesPartitions[IAdoptionRepository]":
        """Get the per-species adoption stores."""
        if self._adoption_stores is None:
            from modules.shelters.models import Species
            from modules.shelters.partitions import SpeciesPartitions
            if self.uses_supabase:
                from modules.adoptions.repository import SupabaseAdoptionRepository
                from shared.database import get_supabase_client
                db = get_supabase_client()
                self._adoption_stores = SpeciesPartitions(
                    {s: SupabaseAdoptionRepository(db, s) for s in Species}
                )
            else:
                from modules.adoptions.repository import InMemoryAdoptionRepository
                self._adoption_stores = SpeciesPartitions(
                    {s: InMemoryAdoptionRepository(s) for s in Species}
                )
        return self._adoption_stores

    @property
    def report_stores(self) -> "SpeciesPartitions[IReportRepository]":
        """Get the per-species report lookups."""
        if self._report_stores is None:
            from modules.shelters.models import Species
            from modules.shelters.partitions import SpeciesPartitions
            if self.uses_supabase:
                from modules.reports.repository import SupabaseReportRepository
                from shared.database import get_supabase_client
                db = get_supabase_client()
                self._report_stores = SpeciesPartitions(
                    {s: SupabaseReportRepository(db, s) for s in Species}
                )
            else:
                from modules.reports.repository import InMemoryReportRepository
                self._report_stores = SpeciesPartitions(
                    {s: InMemoryReportRepository(s) for s in Species}
                )
        return self._report_stores

    @property
    def alerts(self) -> "IVolunteerAlertRepository":
        """Get the volunteer alert queue."""
        if self._alerts is None:
            if self.uses_supabase:
                from modules.volunteers.repository import SupabaseVolunteerAlertRepository
                from shared.database import get_supabase_client
                self._alerts = SupabaseVolunteerAlertRepository(get_supabase_client())
            else:
                from modules.volunteers.repository import InMemoryVolunteerAlertRepository
                self._alerts = InMemoryVolunteerAlertRepository()
        return self._alerts

    @property
    def directory(self) -> "ShelterDirectory":
        if self._directory is None:
            from modules.shelters.service import ShelterDirectory
            self._directory = ShelterDirectory(users=self.users, pets=self.pets)
        return self._directory

    @property
    def adoptions(self) -> "IAdoptionService":
        """Get the adoption lifecycle service."""
        if self._adoption_service is None:
            from modules.adoptions.service import AdoptionService
            self._adoption_service = AdoptionService(
                directory=self.directory,
                adoptions=self.adoption_stores,
                notifier=self.notifier,
                clock=self.clock,
            )
        return self._adoption_service

    @property
    def sweeps(self) -> "DailySweeps":
        if self._sweeps is None:
            from modules.scheduler.sweeps import DailySweeps
            self._sweeps = DailySweeps(
                directory=self.directory,
                adoptions=self.adoption_stores,
                reports=self.report_stores,
                alerts=self.alerts,
                notifier=self.notifier,
                clock=self.clock,
                report_deadline=self.settings.report_deadline,
                escalation_days=self.settings.missed_report_escalation_days,
            )
        return self._sweeps

    @property
    def scheduler(self) -> "SweepScheduler":
        """Get the daily sweep scheduler."""
        if self._scheduler is None:
            from modules.scheduler.timer import SweepScheduler
            self._scheduler = SweepScheduler(
                sweeps=self.sweeps,
                clock=self.clock,
                compliance_at=self.settings.compliance_sweep_time,
                completion_at=self.settings.completion_sweep_time,
            )
        return self._scheduler

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self.__init__(self._settings)


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def set_container(container: ServiceContainer) -> None:
    """Install a preconfigured container (tests, one-off scripts)."""
    global _container
    _container = container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_clock() -> "Clock":
    """FastAPI dependency for the clock."""
    return get_container().clock


def get_shelter_directory() -> "ShelterDirectory":
    """FastAPI dependency for user/pet lookup."""
    return get_container().directory


def get_adoption_service() -> "IAdoptionService":
    """FastAPI dependency for the adoption service."""
    return get_container().adoptions


def get_volunteer_alerts() -> "IVolunteerAlertRepository":
    """FastAPI dependency for the volunteer alert queue."""
    return get_container().alerts


def get_scheduler() -> "SweepScheduler":
    """FastAPI dependency for the sweep scheduler."""
    return get_container().scheduler
