"""
Tests for per-call timeout and retry-with-backoff (core.retry.call_with_retry).
"""

from __future__ import annotations

import asyncio
from unittest.mock import MagicMock

import pytest

from honeypot_checker.core.exceptions import TokenNotFound, TransportError
from honeypot_checker.core.retry import RetryPolicy, call_with_retry
from honeypot_checker.ratelimit import RateLimiter


class FlakyOperation:
    """Fails with the given errors in order, then returns 'ok'."""

    def __init__(self, errors: list[Exception]) -> None:
        self.errors = list(errors)
        self.calls = 0

    async def __call__(self) -> str:
        self.calls += 1
        if self.errors:
            raise self.errors.pop(0)
        return "ok"


def _run(operation, policy: RetryPolicy, delays: list[float] | None = None, log=None):
    async def fake_sleep(seconds: float) -> None:
        if delays is not None:
            delays.append(seconds)

    async def run():
        limiter = RateLimiter(min_time_ms=0, max_concurrent=5)
        return await call_with_retry(
            operation,
            limiter=limiter,
            policy=policy,
            source="test",
            log=log or MagicMock(),
            sleep=fake_sleep,
        )

    return asyncio.run(run())


def test_policy_validation():
    with pytest.raises(ValueError, match="max_retries"):
        RetryPolicy(max_retries=-1)
    with pytest.raises(ValueError, match="timeout_sec"):
        RetryPolicy(timeout_sec=0)


def test_delay_for_is_exponential_and_capped():
    policy = RetryPolicy(base_delay_sec=0.5, max_delay_sec=3.0)
    assert policy.delay_for(1) == 0.5
    assert policy.delay_for(2) == 1.0
    assert policy.delay_for(3) == 2.0
    assert policy.delay_for(4) == 3.0


def test_no_retry_by_default():
    """Default policy: a single TransportError is final."""
    op = FlakyOperation([TransportError("down")])
    with pytest.raises(TransportError, match="down"):
        _run(op, RetryPolicy())
    assert op.calls == 1


def test_retries_transport_error_then_succeeds():
    delays: list[float] = []
    log = MagicMock()
    op = FlakyOperation([TransportError("a"), TransportError("b")])
    result = _run(op, RetryPolicy(max_retries=2, base_delay_sec=0.5), delays, log)
    assert result == "ok"
    assert op.calls == 3
    assert delays == [0.5, 1.0]
    assert log.warning.call_count == 2
    assert log.warning.call_args_list[0].args[0] == "outbound_call_retry"


def test_gives_up_after_max_retries():
    op = FlakyOperation([TransportError("1"), TransportError("2"), TransportError("3")])
    with pytest.raises(TransportError, match="2"):
        _run(op, RetryPolicy(max_retries=1), [])
    assert op.calls == 2


def test_not_found_is_not_retried():
    op = FlakyOperation([TokenNotFound("doesnotexist")])
    with pytest.raises(TokenNotFound):
        _run(op, RetryPolicy(max_retries=3), [])
    assert op.calls == 1


def test_timeout_becomes_transport_error():
    """A hung call is cut off at timeout_sec and reported as TransportError."""

    async def hang():
        await asyncio.sleep(5)

    with pytest.raises(TransportError, match="timed out") as excinfo:
        _run(hang, RetryPolicy(timeout_sec=0.02))
    assert excinfo.value.source == "test"
