"""
Daily sweeps over active adoptions.

Report compliance (evening): adopters without a complete report today get
a reminder, or, after more than `escalation_days` days of silence, a
volunteer alert is raised instead.

Trial completion (late evening): adopters whose trial ends today are
congratulated. Nothing is modified; a volunteer who wants a longer trial
must move the date before this sweep runs.

Each shelter is swept independently and each adoption on its own: a
failure on one record is logged and the sweep moves on.
"""

import logging
from datetime import date
from typing import Optional

from modules.adoptions.interfaces import IAdoptionRepository
from modules.adoptions.models import Adoption
from modules.notifications import DeliveryPolicy, INotificationGateway, notify
from modules.reports.interfaces import IReportRepository
from modules.shelters.partitions import SpeciesPartitions
from modules.shelters.service import ShelterDirectory
from modules.volunteers.interfaces import IVolunteerAlertRepository
from shared.clock import Clock
from shared.exceptions import ShelterError
from .models import SweepKind, SweepResult

logger = logging.getLogger(__name__)


REPORT_REMINDER = "ATTENTION!!! Please send your daily report before {deadline}."
MISSING_REPORTS_ALERT = (
    "ATTENTION!!! This adopter has not sent a daily report for more than {days} days"
)
TRIAL_COMPLETED = (
    "Congratulations!!! You have successfully completed the trial period. "
    "All the best to you and your pet."
)


class DailySweeps:
    """The report compliance and trial completion sweeps."""

    def __init__(
        self,
        directory: ShelterDirectory,
        adoptions: SpeciesPartitions[IAdoptionRepository],
        reports: SpeciesPartitions[IReportRepository],
        alerts: IVolunteerAlertRepository,
        notifier: INotificationGateway,
        clock: Clock,
        report_deadline: str = "21:00",
        escalation_days: int = 2,
    ):
        """
        Args:
            directory: User lookup for adopters
            adoptions: Adoption store per species
            reports: Report lookup per species
            alerts: Volunteer alert queue
            notifier: Message transport to adopters
            clock: Source of "today" and alert timestamps
            report_deadline: Time of day quoted in reminders
            escalation_days: Days without a report after which volunteers
                             are alerted instead of the adopter
        """
        self._directory = directory
        self._adoptions = adoptions
        self._reports = reports
        self._alerts = alerts
        self._notifier = notifier
        self._clock = clock
        self._report_deadline = report_deadline
        self._escalation_days = escalation_days

    async def run(self, kind: SweepKind, today: Optional[date] = None) -> SweepResult:
        if kind is SweepKind.REPORT_COMPLIANCE:
            return await self.run_report_compliance(today)
        return await self.run_trial_completion(today)

    async def run_report_compliance(self, today: Optional[date] = None) -> SweepResult:
        """Remind or escalate for every active adoption without a complete report today."""
        today = today or self._clock.today()
        result = SweepResult(sweep=SweepKind.REPORT_COMPLIANCE, run_date=today)

        for species, store in self._adoptions.items():
            reports = self._reports.get(species)
            try:
                active = store.find_trial_ending_on_or_after(today)
                reported_today = reports.find_complete_reports_on(today)
            except Exception:
                result.errors += 1
                logger.exception(f"Cannot load {species.value} adoptions for {today}")
                continue

            for adoption in active:
                if adoption.adoption_date > today:
                    # Started after the swept day (backfilled run)
                    continue
                result.checked += 1
                if adoption.id in reported_today:
                    # Skip only this adoption; the rest of the shelter is still checked
                    result.compliant += 1
                    continue
                try:
                    await self._handle_missing_report(adoption, reports, today, result)
                except ShelterError as e:
                    result.errors += 1
                    logger.error(
                        f"Report check failed for {species.value} adoption {adoption.id}: "
                        f"{e.message}"
                    )
                except Exception:
                    result.errors += 1
                    logger.exception(
                        f"Report check failed for {species.value} adoption {adoption.id}"
                    )

        logger.info(
            f"Report compliance sweep for {today}: {result.checked} checked, "
            f"{result.compliant} compliant, {result.reminders_sent} reminded, "
            f"{result.alerts_created} escalated"
        )
        return result

    async def _handle_missing_report(
        self,
        adoption: Adoption,
        reports: IReportRepository,
        today: date,
        result: SweepResult,
    ) -> None:
        latest = reports.find_latest_report(adoption.id, on_or_before=today)
        last_report_date = latest.report_date if latest else adoption.adoption_date
        days_since_last_report = (today - last_report_date).days

        if days_since_last_report > self._escalation_days:
            self._alerts.save(
                user_id=adoption.user_id,
                created_at=self._clock.now(),
                message=MISSING_REPORTS_ALERT.format(days=self._escalation_days),
            )
            result.alerts_created += 1
            logger.warning(
                f"User {adoption.user_id} has not reported for {days_since_last_report} days "
                f"({adoption.species.value} adoption {adoption.id}), volunteers alerted"
            )
            return

        user = self._directory.get_user(adoption.user_id)
        delivered = await notify(
            self._notifier,
            user,
            REPORT_REMINDER.format(deadline=self._report_deadline),
            DeliveryPolicy.BEST_EFFORT,
        )
        if delivered:
            result.reminders_sent += 1
        else:
            result.delivery_failures += 1

    async def run_trial_completion(self, today: Optional[date] = None) -> SweepResult:
        """Congratulate every adopter whose trial ends today."""
        today = today or self._clock.today()
        result = SweepResult(sweep=SweepKind.TRIAL_COMPLETION, run_date=today)

        for species, store in self._adoptions.items():
            try:
                ending = store.find_trial_ending_on(today)
            except Exception:
                result.errors += 1
                logger.exception(f"Cannot load {species.value} adoptions ending {today}")
                continue
            for adoption in ending:
                result.checked += 1
                try:
                    await self._congratulate(adoption, result)
                except ShelterError as e:
                    result.errors += 1
                    logger.error(
                        f"Cannot congratulate {species.value} adoption {adoption.id}: {e.message}"
                    )
                except Exception:
                    result.errors += 1
                    logger.exception(
                        f"Cannot congratulate {species.value} adoption {adoption.id}"
                    )

        logger.info(
            f"Trial completion sweep for {today}: "
            f"{result.congratulations_sent} congratulated"
        )
        return result

    async def _congratulate(self, adoption: Adoption, result: SweepResult) -> None:
        user = self._directory.get_user(adoption.user_id)
        delivered = await notify(
            self._notifier, user, TRIAL_COMPLETED, DeliveryPolicy.BEST_EFFORT
        )
        if delivered:
            result.congratulations_sent += 1
        else:
            result.delivery_failures += 1
