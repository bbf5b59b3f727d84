"""
Admission control for outbound calls.

One RateLimiter instance is shared by every client in the process. It caps the
number of tasks running at once and enforces a minimum spacing between the
starts of consecutive tasks. Admission is a single FIFO queue with no
priorities; the limiter knows nothing about what a task does.
"""

from __future__ import annotations

import asyncio
import time
from typing import Any, Awaitable, Callable, TypeVar

T = TypeVar("T")

DEFAULT_MIN_TIME_MS = 300
DEFAULT_MAX_CONCURRENT = 5


class RateLimiter:
    """
    Min spacing between task starts plus a max-concurrency cap.

    Usage:
        limiter = RateLimiter(min_time_ms=300, max_concurrent=5)
        result = await limiter.schedule(lambda: client.get(url))

    A failing task re-raises to its own caller; its slot is released and
    other tasks are unaffected.
    """

    def __init__(
        self,
        min_time_ms: float = DEFAULT_MIN_TIME_MS,
        max_concurrent: int = DEFAULT_MAX_CONCURRENT,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        if min_time_ms < 0:
            raise ValueError("min_time_ms must be >= 0")
        if max_concurrent < 1:
            raise ValueError("max_concurrent must be >= 1")
        self._interval = min_time_ms / 1000.0
        self._max_concurrent = max_concurrent
        self._clock = clock
        self._sleep = sleep
        # asyncio.Lock wakes waiters in arrival order: this is the FIFO queue
        self._admission = asyncio.Lock()
        self._slots = asyncio.Semaphore(max_concurrent)
        self._last_start: float | None = None
        self._running = 0
        self._queued = 0

    @property
    def min_time_sec(self) -> float:
        return self._interval

    @property
    def max_concurrent(self) -> int:
        return self._max_concurrent

    @property
    def running(self) -> int:
        """Tasks currently executing."""
        return self._running

    @property
    def queued(self) -> int:
        """Tasks waiting for admission."""
        return self._queued

    async def _wait_for_spacing(self) -> None:
        if self._last_start is None:
            return
        remaining = self._interval - (self._clock() - self._last_start)
        if remaining > 0:
            await self._sleep(remaining)

    async def _admit(self) -> None:
        """Take a concurrency slot and honor start spacing, in submission order."""
        self._queued += 1
        try:
            async with self._admission:
                await self._slots.acquire()
                try:
                    await self._wait_for_spacing()
                except BaseException:
                    self._slots.release()
                    raise
                self._last_start = self._clock()
        finally:
            self._queued -= 1

    async def schedule(self, task: Callable[[], Awaitable[T]]) -> T:
        """Run task once admitted; return its result or raise its error."""
        await self._admit()
        self._running += 1
        try:
            return await task()
        finally:
            self._running -= 1
            self._slots.release()
