"""
Wall-clock triggers for the daily sweeps.

Each DailyTrigger owns one asyncio task that sleeps until its time of day,
runs its job to completion, then computes the next run. A job therefore
never overlaps itself; manual runs go through the same lock.
"""

import asyncio
import logging
from datetime import datetime, time, timedelta, timezone
from typing import Awaitable, Callable, Optional, TypeVar

from shared.clock import Clock
from .models import SweepKind, SweepResult
from .sweeps import DailySweeps

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DailyTrigger:
    """Runs a coroutine once a day at a fixed local time."""

    def __init__(
        self,
        name: str,
        at: time,
        job: Callable[[], Awaitable[T]],
        clock: Clock,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """
        Args:
            name: Label for logs
            at: Local time of day to fire
            job: Coroutine function to run
            clock: Source of the current local time
            sleep: Awaitable sleep, replaceable in tests
        """
        self.name = name
        self.at = at
        self._job = job
        self._clock = clock
        self._sleep = sleep
        self._lock = asyncio.Lock()
        self._task: Optional[asyncio.Task] = None

    def next_run_after(self, now: datetime) -> datetime:
        """First firing time strictly after now."""
        candidate = now.replace(
            hour=self.at.hour,
            minute=self.at.minute,
            second=self.at.second,
            microsecond=0,
        )
        if candidate <= now:
            candidate += timedelta(days=1)
        return candidate

    def seconds_until_next_run(self, now: datetime) -> float:
        """Real time to sleep, measured in UTC so DST changes are counted."""
        next_run = self.next_run_after(now)
        return (next_run.astimezone(timezone.utc) - now.astimezone(timezone.utc)).total_seconds()

    async def run_once(self) -> T:
        """Run the job now, waiting if a run is already in progress."""
        async with self._lock:
            return await self._job()

    async def run_forever(self) -> None:
        while True:
            now = self._clock.now()
            next_run = self.next_run_after(now)
            logger.debug(f"{self.name}: next run at {next_run.isoformat()}")
            await self._sleep(self.seconds_until_next_run(now))
            try:
                await self.run_once()
            except asyncio.CancelledError:
                raise
            except Exception:
                # Keep the schedule alive; tomorrow's run is independent
                logger.exception(f"{self.name}: run failed")

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.is_running:
            return
        self._task = asyncio.create_task(self.run_forever(), name=self.name)
        logger.info(f"{self.name}: scheduled daily at {self.at.strftime('%H:%M')}")

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None


class SweepScheduler:
    """Owns the triggers for both daily sweeps."""

    def __init__(
        self,
        sweeps: DailySweeps,
        clock: Clock,
        compliance_at: time = time(21, 1),
        completion_at: time = time(23, 1),
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.sweeps = sweeps
        self.triggers: dict[SweepKind, DailyTrigger] = {
            SweepKind.REPORT_COMPLIANCE: DailyTrigger(
                SweepKind.REPORT_COMPLIANCE.value,
                compliance_at,
                sweeps.run_report_compliance,
                clock,
                sleep,
            ),
            SweepKind.TRIAL_COMPLETION: DailyTrigger(
                SweepKind.TRIAL_COMPLETION.value,
                completion_at,
                sweeps.run_trial_completion,
                clock,
                sleep,
            ),
        }

    def start(self) -> None:
        for trigger in self.triggers.values():
            trigger.start()

    async def stop(self) -> None:
        for trigger in self.triggers.values():
            await trigger.stop()

    async def run_now(self, kind: SweepKind) -> SweepResult:
        """Run a sweep immediately, serialized with its scheduled runs."""
        return await self.triggers[kind].run_once()
