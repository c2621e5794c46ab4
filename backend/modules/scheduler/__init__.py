"""
Scheduler module.

Daily report compliance and trial completion sweeps, and the wall-clock
triggers that run them.

Public API:
- DailySweeps: The two sweeps
- DailyTrigger, SweepScheduler: Timers
- SweepKind, SweepResult: Sweep identifiers and counters
"""

from .models import SweepKind, SweepResult
from .sweeps import DailySweeps
from .timer import DailyTrigger, SweepScheduler

__all__ = [
    "SweepKind",
    "SweepResult",
    "DailySweeps",
    "DailyTrigger",
    "SweepScheduler",
]
