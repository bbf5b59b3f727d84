"""
Application settings and environment configuration.

Responsibilities:
- Load configuration from environment variables and .env files.
- Validate numeric settings and provide defaults for optional ones.
- Expose typed settings (RPC URL, market API, limiter, timeouts, retries,
  API host/port) for the clients, orchestrator and adapters.
"""

from __future__ import annotations

import functools
import os
from dataclasses import dataclass

from honeypot_checker.config.env import (
    get_coingecko_api_key,
    get_coingecko_api_url,
    get_solana_rpc_url,
    load_checker_env,
)

DEFAULT_RATE_LIMIT_MIN_TIME_MS = 300
DEFAULT_RATE_LIMIT_MAX_CONCURRENT = 5
DEFAULT_TIMEOUT_SEC = 10.0
DEFAULT_MAX_RETRIES = 0
DEFAULT_RETRY_BASE_DELAY_SEC = 0.5
DEFAULT_RETRY_MAX_DELAY_SEC = 8.0
DEFAULT_API_HOST = "0.0.0.0"
DEFAULT_API_PORT = 8000


@dataclass(frozen=True)
class Settings:
    """Typed settings; built from env by get_settings()."""

    solana_rpc_url: str
    coingecko_api_url: str
    coingecko_api_key: str | None = None
    rate_limit_min_time_ms: int = DEFAULT_RATE_LIMIT_MIN_TIME_MS
    rate_limit_max_concurrent: int = DEFAULT_RATE_LIMIT_MAX_CONCURRENT
    chain_timeout_sec: float = DEFAULT_TIMEOUT_SEC
    chain_max_retries: int = DEFAULT_MAX_RETRIES
    market_timeout_sec: float = DEFAULT_TIMEOUT_SEC
    market_max_retries: int = DEFAULT_MAX_RETRIES
    retry_base_delay_sec: float = DEFAULT_RETRY_BASE_DELAY_SEC
    retry_max_delay_sec: float = DEFAULT_RETRY_MAX_DELAY_SEC
    api_host: str = DEFAULT_API_HOST
    api_port: int = DEFAULT_API_PORT


def _env_int(name: str, default: int, *, minimum: int = 0) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


def _env_float(name: str, default: float, *, minimum: float = 0.0) -> float:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


def load_settings() -> Settings:
    """Build Settings from the current environment (uncached)."""
    load_checker_env()
    return Settings(
        solana_rpc_url=get_solana_rpc_url(),
        coingecko_api_url=get_coingecko_api_url(),
        coingecko_api_key=get_coingecko_api_key(),
        rate_limit_min_time_ms=_env_int("RATE_LIMIT_MIN_TIME_MS", DEFAULT_RATE_LIMIT_MIN_TIME_MS),
        rate_limit_max_concurrent=_env_int(
            "RATE_LIMIT_MAX_CONCURRENT", DEFAULT_RATE_LIMIT_MAX_CONCURRENT, minimum=1
        ),
        chain_timeout_sec=_env_float("CHAIN_TIMEOUT_SEC", DEFAULT_TIMEOUT_SEC, minimum=0.1),
        chain_max_retries=_env_int("CHAIN_MAX_RETRIES", DEFAULT_MAX_RETRIES),
        market_timeout_sec=_env_float("MARKET_TIMEOUT_SEC", DEFAULT_TIMEOUT_SEC, minimum=0.1),
        market_max_retries=_env_int("MARKET_MAX_RETRIES", DEFAULT_MAX_RETRIES),
        retry_base_delay_sec=_env_float("RETRY_BASE_DELAY_SEC", DEFAULT_RETRY_BASE_DELAY_SEC),
        retry_max_delay_sec=_env_float("RETRY_MAX_DELAY_SEC", DEFAULT_RETRY_MAX_DELAY_SEC),
        api_host=(os.getenv("API_HOST") or "").strip() or DEFAULT_API_HOST,
        api_port=_env_int("API_PORT", DEFAULT_API_PORT, minimum=1),
    )


@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Return the current application settings (cached after first call).

    Returns:
        Settings with solana_rpc_url, coingecko_api_url, limiter, timeout and
        retry values, api_host and api_port. Call get_settings.cache_clear()
        after changing the environment.
    """
    return load_settings()
