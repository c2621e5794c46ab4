"""
Scheduler endpoints.

Lets operators run a daily sweep on demand, e.g. after an outage.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_scheduler
from modules.scheduler.models import SweepKind, SweepResult
from modules.scheduler.timer import SweepScheduler

router = APIRouter()


@router.post("/{sweep}/run", response_model=SweepResult)
async def run_sweep(
    sweep: SweepKind,
    scheduler: SweepScheduler = Depends(get_scheduler),
) -> SweepResult:
    """
    Run a sweep for today.

    Waits for a scheduled run of the same sweep to finish first.
    """
    return await scheduler.run_now(sweep)
