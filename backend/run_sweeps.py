#!/usr/bin/env python3
"""
Run the daily sweeps once, outside the API process.

Usage:
    uv run python run_sweeps.py                                # Both sweeps for today
    uv run python run_sweeps.py --sweep report-compliance      # One sweep
    uv run python run_sweeps.py --date 2024-03-01              # Sweep as if it were that day

Configuration:
    Uses the same environment as the API. Set STORAGE_BACKEND=supabase to
    sweep the real database; the default in-memory store is empty.
"""

import argparse
import asyncio
import logging
import sys
from datetime import date

from rich.console import Console
from rich.table import Table

from api.dependencies import get_container
from modules.scheduler.models import SweepKind, SweepResult

console = Console()


def parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Not an ISO date: {value}")


def show_results(results: list[SweepResult]) -> None:
    """Print sweep counters as a table."""
    table = Table(title="Sweep results")
    table.add_column("Counter", style="cyan")
    for result in results:
        table.add_column(f"{result.sweep.value}\n{result.run_date}", justify="right")

    counters = [name for name in SweepResult.model_fields if name not in ("sweep", "run_date")]
    for name in counters:
        table.add_row(name.replace("_", " "), *[str(getattr(r, name)) for r in results])

    console.print(table)


async def run(kinds: list[SweepKind], today: date | None) -> list[SweepResult]:
    sweeps = get_container().sweeps
    return [await sweeps.run(kind, today) for kind in kinds]


def main():
    parser = argparse.ArgumentParser(description="Run daily adoption sweeps")
    parser.add_argument(
        "--sweep",
        choices=[k.value for k in SweepKind] + ["all"],
        default="all",
        help="Which sweep to run",
    )
    parser.add_argument("--date", type=parse_date, help="Run as if today were this date")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log every message sent")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    container = get_container()
    if not container.uses_supabase:
        console.print(
            "[yellow]Warning:[/yellow] STORAGE_BACKEND is 'memory'; there is nothing to sweep."
        )

    kinds = list(SweepKind) if args.sweep == "all" else [SweepKind(args.sweep)]

    try:
        results = asyncio.run(run(kinds, args.date))
    except RuntimeError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    show_results(results)


if __name__ == "__main__":
    main()
