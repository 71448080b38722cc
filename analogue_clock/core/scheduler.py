"""Periodic tick scheduling for open clock views."""

from __future__ import annotations

from typing import Awaitable, Callable, Dict

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from .logging import get_logger

logger = get_logger("core.scheduler")


class ClockScheduler:
    """
    Owns the interval jobs that drive clock views.

    Jobs must be coroutine functions: the asyncio executor runs them on the
    event loop itself, so a view's angle state is only ever touched from one
    thread.
    """

    def __init__(self) -> None:
        self._scheduler = AsyncIOScheduler()
        self._jobs: Dict[str, str] = {}  # name -> job_id

    @property
    def running(self) -> bool:
        return self._scheduler.running

    async def start(self) -> None:
        """Start the scheduler."""
        if not self._scheduler.running:
            self._scheduler.start()
            logger.info("Scheduler started")

    async def stop(self) -> None:
        """Stop the scheduler and drop every job."""
        if self._scheduler.running:
            self._scheduler.shutdown(wait=True)
            logger.info("Scheduler stopped")
        self._jobs.clear()
        # An AsyncIOScheduler stays bound to the loop it first started on
        self._scheduler = AsyncIOScheduler()

    def schedule_interval(
        self,
        job_name: str,
        callback: Callable[[], Awaitable[None]],
        interval_seconds: float,
    ) -> None:
        """
        Run a coroutine callback every interval_seconds.

        A job already registered under job_name is replaced. Late runs are
        coalesced into one, and a run never overlaps the previous one.

        Args:
            job_name: Unique job name (one per view)
            callback: Coroutine function to run
            interval_seconds: Period in seconds
        """
        if job_name in self._jobs:
            self._scheduler.remove_job(self._jobs[job_name])

        job = self._scheduler.add_job(
            callback,
            IntervalTrigger(seconds=interval_seconds),
            id=job_name,
            name=job_name,
            replace_existing=True,
            coalesce=True,
            max_instances=1,
        )

        self._jobs[job_name] = job.id
        logger.info(f"Scheduled job: {job_name} every {interval_seconds}s")

    def remove_job(self, job_name: str) -> None:
        """Remove a scheduled job. Unknown names are ignored."""
        job_id = self._jobs.pop(job_name, None)
        if job_id is None:
            return
        if self._scheduler.get_job(job_id):
            self._scheduler.remove_job(job_id)
        logger.info(f"Removed job: {job_name}")

    def has_job(self, job_name: str) -> bool:
        return job_name in self._jobs

    def list_jobs(self) -> Dict[str, str]:
        """List all scheduled jobs with their next run time."""
        result = {}
        for name, job_id in self._jobs.items():
            job = self._scheduler.get_job(job_id)
            if job:
                next_run = job.next_run_time
                result[name] = next_run.isoformat() if next_run else "paused"
        return result
