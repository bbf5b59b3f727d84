"""
Per-call timeout and retry-with-backoff for outbound calls.

Each data source carries its own RetryPolicy. Every attempt is admitted by the
shared rate limiter and bounded by the policy timeout. Only TransportError is
retried; not-found and validation errors are final.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, TypeVar

from honeypot_checker.checker_logging import get_logger
from honeypot_checker.core.exceptions import TransportError
from honeypot_checker.ratelimit import RateLimiter

logger = get_logger(__name__)

T = TypeVar("T")

DEFAULT_TIMEOUT_SEC = 10.0
DEFAULT_BASE_DELAY_SEC = 0.5
DEFAULT_MAX_DELAY_SEC = 8.0


@dataclass(frozen=True)
class RetryPolicy:
    """
    Timeout and retry settings for one data source.

    max_retries: Extra attempts after the first (0 = no retries).
    timeout_sec: Upper bound for a single attempt.
    base_delay_sec / max_delay_sec: Exponential backoff between attempts.
    """

    max_retries: int = 0
    timeout_sec: float = DEFAULT_TIMEOUT_SEC
    base_delay_sec: float = DEFAULT_BASE_DELAY_SEC
    max_delay_sec: float = DEFAULT_MAX_DELAY_SEC

    def __post_init__(self) -> None:
        if self.max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        if self.timeout_sec <= 0:
            raise ValueError("timeout_sec must be positive")

    def delay_for(self, attempt: int) -> float:
        """Backoff before retry number `attempt` (1-based)."""
        return min(self.base_delay_sec * (2 ** (attempt - 1)), self.max_delay_sec)


async def call_with_retry(
    operation: Callable[[], Awaitable[T]],
    *,
    limiter: RateLimiter,
    policy: RetryPolicy,
    source: str,
    log: Any = None,
    sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
) -> T:
    """
    Run operation through the limiter with a timeout, retrying TransportError.

    A timed-out attempt is reported as TransportError. The last TransportError
    is re-raised once attempts are exhausted.
    """
    log = log or logger
    attempts = policy.max_retries + 1

    async def _attempt() -> T:
        try:
            return await asyncio.wait_for(operation(), timeout=policy.timeout_sec)
        except asyncio.TimeoutError as e:
            raise TransportError(
                f"{source} call timed out after {policy.timeout_sec}s", source=source
            ) from e

    for attempt in range(1, attempts + 1):
        try:
            return await limiter.schedule(_attempt)
        except TransportError as e:
            if attempt >= attempts:
                raise
            delay = policy.delay_for(attempt)
            log.warning(
                "outbound_call_retry",
                source=source,
                attempt=attempt,
                max_attempts=attempts,
                delay_sec=delay,
                error=str(e),
            )
            await sleep(delay)
    raise AssertionError("unreachable")
