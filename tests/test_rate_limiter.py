"""
Tests for the shared RateLimiter: concurrency cap, start spacing, FIFO order,
failure isolation.
"""

from __future__ import annotations

import asyncio
import time

import pytest

from honeypot_checker.ratelimit import RateLimiter


class FakeClock:
    """Monotonic clock advanced only by the fake sleep."""

    def __init__(self) -> None:
        self.now = 100.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds
        await asyncio.sleep(0)


def test_invalid_config():
    with pytest.raises(ValueError, match="max_concurrent"):
        RateLimiter(min_time_ms=300, max_concurrent=0)
    with pytest.raises(ValueError, match="min_time_ms"):
        RateLimiter(min_time_ms=-1, max_concurrent=5)


def test_defaults():
    limiter = RateLimiter()
    assert limiter.min_time_sec == pytest.approx(0.3)
    assert limiter.max_concurrent == 5
    assert limiter.running == 0
    assert limiter.queued == 0


def test_returns_task_result():
    async def run():
        limiter = RateLimiter(min_time_ms=0, max_concurrent=2)

        async def task():
            return 42

        return await limiter.schedule(task)

    assert asyncio.run(run()) == 42


def test_max_concurrent_never_exceeded():
    """12 tasks with max_concurrent=3: never more than 3 running at once."""
    active = 0
    peak = 0

    async def run():
        nonlocal active, peak
        limiter = RateLimiter(min_time_ms=0, max_concurrent=3)

        def make_task(i: int):
            async def task():
                nonlocal active, peak
                active += 1
                peak = max(peak, active)
                assert limiter.running <= 3
                await asyncio.sleep(0.01)
                active -= 1
                return i

            return task

        results = await asyncio.gather(*(limiter.schedule(make_task(i)) for i in range(12)))
        return results, limiter

    results, limiter = asyncio.run(run())
    assert results == list(range(12))
    assert peak == 3
    assert limiter.running == 0


def test_start_spacing_with_fake_clock():
    """Consecutive starts are exactly min_time apart under a fake clock."""
    clock = FakeClock()
    starts: list[float] = []

    async def run():
        limiter = RateLimiter(min_time_ms=300, max_concurrent=5, clock=clock, sleep=clock.sleep)

        async def task():
            starts.append(clock())

        await asyncio.gather(*(limiter.schedule(task) for _ in range(4)))

    asyncio.run(run())
    assert len(starts) == 4
    gaps = [b - a for a, b in zip(starts, starts[1:])]
    assert all(gap >= 0.3 - 1e-9 for gap in gaps)
    assert clock.sleeps == [pytest.approx(0.3)] * 3


def test_start_spacing_real_time():
    """Real clock: starts separated by at least the configured spacing (small tolerance)."""
    starts: list[float] = []

    async def run():
        limiter = RateLimiter(min_time_ms=40, max_concurrent=5)

        async def task():
            starts.append(time.monotonic())

        await asyncio.gather(*(limiter.schedule(task) for _ in range(4)))

    asyncio.run(run())
    gaps = [b - a for a, b in zip(starts, starts[1:])]
    assert all(gap >= 0.035 for gap in gaps)


def test_fifo_order():
    """Tasks start in submission order."""
    order: list[int] = []

    async def run():
        limiter = RateLimiter(min_time_ms=0, max_concurrent=1)

        def make_task(i: int):
            async def task():
                order.append(i)
                await asyncio.sleep(0)

            return task

        await asyncio.gather(*(limiter.schedule(make_task(i)) for i in range(6)))

    asyncio.run(run())
    assert order == [0, 1, 2, 3, 4, 5]


def test_failure_does_not_affect_others():
    """A failing task raises to its caller only; the slot is released."""

    async def run():
        limiter = RateLimiter(min_time_ms=0, max_concurrent=1)

        async def ok():
            return "ok"

        async def boom():
            raise RuntimeError("boom")

        results = await asyncio.gather(
            limiter.schedule(ok),
            limiter.schedule(boom),
            limiter.schedule(ok),
            return_exceptions=True,
        )
        after = await limiter.schedule(ok)
        return results, after, limiter

    results, after, limiter = asyncio.run(run())
    assert results[0] == "ok"
    assert isinstance(results[1], RuntimeError)
    assert results[2] == "ok"
    assert after == "ok"
    assert limiter.running == 0
    assert limiter.queued == 0
