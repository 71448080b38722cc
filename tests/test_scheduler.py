"""Tests for the APScheduler-backed tick scheduler."""

import asyncio

from analogue_clock.core.scheduler import ClockScheduler


def test_schedule_list_and_remove() -> None:
    async def scenario():
        scheduler = ClockScheduler()
        await scheduler.start()

        async def tick():
            pass

        scheduler.schedule_interval("analogue-clock:abc", tick, 1.0)
        jobs = scheduler.list_jobs()
        present = scheduler.has_job("analogue-clock:abc")
        scheduler.remove_job("analogue-clock:abc")
        scheduler.remove_job("analogue-clock:abc")
        remaining = scheduler.list_jobs()
        gone = not scheduler.has_job("analogue-clock:abc")
        await scheduler.stop()
        return jobs, remaining, present, gone

    jobs, remaining, present, gone = asyncio.run(scenario())

    assert list(jobs) == ["analogue-clock:abc"]
    assert remaining == {}
    assert present
    assert gone


def test_rescheduling_replaces_job() -> None:
    async def scenario():
        scheduler = ClockScheduler()
        await scheduler.start()

        async def tick():
            pass

        scheduler.schedule_interval("clock", tick, 1.0)
        scheduler.schedule_interval("clock", tick, 2.0)
        jobs = scheduler.list_jobs()
        await scheduler.stop()
        return jobs

    assert list(asyncio.run(scenario())) == ["clock"]


def test_interval_job_runs_on_event_loop() -> None:
    async def scenario():
        scheduler = ClockScheduler()
        await scheduler.start()
        ran = asyncio.Event()
        loops = []

        async def tick():
            loops.append(asyncio.get_running_loop())
            ran.set()

        scheduler.schedule_interval("fast", tick, 0.05)
        await asyncio.wait_for(ran.wait(), timeout=5)
        scheduler.remove_job("fast")
        await scheduler.stop()
        return loops[0] is asyncio.get_running_loop()

    assert asyncio.run(scenario())


def test_stop_allows_restart_on_new_loop() -> None:
    scheduler = ClockScheduler()

    async def cycle():
        await scheduler.start()
        running = scheduler.running
        await scheduler.stop()
        return running

    assert asyncio.run(cycle())
    assert asyncio.run(cycle())
    assert not scheduler.running
