# src/search/scheduler.py — v1
"""Fixed-frequency asyncio scheduler for the search indexing job."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable

from readmekit.config.durations import parse_duration
from readmekit.logging.context import set_job_context

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchSchedule:
    """Run every `frequency` seconds, each run bounded by `timeout`."""

    frequency: float = 3600.0
    timeout: float = 3600.0
    initial_delay: float = 3.0

    @classmethod
    def from_strings(
        cls, frequency: str, timeout: str, initial_delay: str
    ) -> SearchSchedule:
        return cls(
            frequency=parse_duration(frequency),
            timeout=parse_duration(timeout),
            initial_delay=parse_duration(initial_delay),
        )


async def _sleep_or_stop(shutdown_event: asyncio.Event, seconds: float) -> bool:
    """Wait up to seconds. Returns True if shutdown was requested."""
    try:
        await asyncio.wait_for(shutdown_event.wait(), timeout=seconds)
        return True
    except asyncio.TimeoutError:
        return False


async def run_on_schedule(
    task: Callable[[], Awaitable[object]],
    schedule: SearchSchedule,
    shutdown_event: asyncio.Event,
    name: str = "readme-search-index",
) -> int:
    """Run task repeatedly until shutdown_event is set.

    A run that fails or exceeds the timeout is logged; the next run still
    happens on schedule.

    Returns:
        Number of runs started.
    """
    set_job_context(name)
    logger.info(
        "Scheduler started (frequency=%ss, timeout=%ss)",
        schedule.frequency,
        schedule.timeout,
    )

    runs = 0
    if await _sleep_or_stop(shutdown_event, schedule.initial_delay):
        return runs

    while not shutdown_event.is_set():
        runs += 1
        try:
            await asyncio.wait_for(task(), timeout=schedule.timeout)
        except asyncio.TimeoutError:
            logger.error("Run %d timed out after %ss", runs, schedule.timeout)
        except Exception as e:
            logger.error("Run %d failed: %s", runs, e, exc_info=True)

        if await _sleep_or_stop(shutdown_event, schedule.frequency):
            break

    logger.info("Scheduler stopped after %d runs.", runs)
    return runs
