"""
Pytest fixtures for honeypot checker tests.

Mocked Solana RPC (AsyncMock methods returning MagicMock(value=...)), a
counting RateLimiter, a captured logger, and a FastAPI TestClient with the
orchestrator dependency overridden.
"""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from honeypot_checker.ratelimit import RateLimiter

VALID_ADDRESS = "9QCfNuQuxct1Xk9ytFYgxc5fThmTzL4pHQnSjjrVUrka"
SYSTEM_PROGRAM = "11111111111111111111111111111111"
TOKEN_PROGRAM = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"


class CountingRateLimiter(RateLimiter):
    """RateLimiter that counts scheduled tasks."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.scheduled = 0

    async def schedule(self, task):
        self.scheduled += 1
        return await super().schedule(task)


def sig_item(signature: str, err: Any = None) -> MagicMock:
    """getSignaturesForAddress result item (solders-like attributes)."""
    return MagicMock(signature=signature, err=err)


def make_rpc(
    *,
    account: Any = None,
    signatures: list[Any] | None = None,
    account_error: Exception | None = None,
    signatures_error: Exception | None = None,
) -> MagicMock:
    """Mock solana-py AsyncClient with get_account_info / get_signatures_for_address."""
    rpc = MagicMock()
    rpc.get_account_info = AsyncMock(
        return_value=MagicMock(value=account), side_effect=account_error
    )
    rpc.get_signatures_for_address = AsyncMock(
        return_value=MagicMock(value=signatures if signatures is not None else []),
        side_effect=signatures_error,
    )
    rpc.close = AsyncMock()
    return rpc


@pytest.fixture
def limiter():
    """Limiter with no spacing so tests run fast; counts scheduled attempts."""
    return CountingRateLimiter(min_time_ms=0, max_concurrent=5)


@pytest.fixture
def mock_log():
    """Injected logger; assert on .info/.warning/.error calls."""
    return MagicMock()


@pytest.fixture
def fake_orchestrator():
    orchestrator = MagicMock()
    orchestrator.analyze = AsyncMock()
    orchestrator.aclose = AsyncMock()
    return orchestrator


@pytest.fixture
def client(fake_orchestrator):
    """FastAPI TestClient with get_orchestrator overridden (lifespan not run)."""
    from fastapi.testclient import TestClient

    from honeypot_checker.api_server.server import app, get_orchestrator

    app.dependency_overrides[get_orchestrator] = lambda: fake_orchestrator
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
