"""
CoinGecko market data client.

get_token_market_info(symbol) queries /coins/markets with vs_currency=usd and
ids=<lowercase symbol>. Zero entries → TokenNotFound; HTTP, network, timeout
or malformed payload → TransportError. Every attempt is admitted by the
shared RateLimiter.
"""

from __future__ import annotations

from typing import Any

import httpx

from honeypot_checker.checker_logging import get_logger
from honeypot_checker.config.env import COINGECKO_API_URL
from honeypot_checker.core.exceptions import TokenNotFound, TransportError, ValidationError
from honeypot_checker.core.retry import RetryPolicy, call_with_retry
from honeypot_checker.market_client.models import TokenMarketInfo
from honeypot_checker.ratelimit import RateLimiter

logger = get_logger(__name__)

SOURCE = "coingecko"
VS_CURRENCY = "usd"
API_KEY_HEADER = "x-cg-demo-api-key"


def normalize_symbol(symbol: str) -> str:
    """Lowercase and strip a symbol; ValidationError when empty."""
    if not isinstance(symbol, str) or not symbol.strip():
        raise ValidationError("symbol must be a non-empty string")
    return symbol.strip().lower()


class CoinGeckoMarketClient:
    """Async market data client; http_client may be injected (e.g. httpx.MockTransport in tests)."""

    def __init__(
        self,
        base_url: str = COINGECKO_API_URL,
        *,
        limiter: RateLimiter,
        retry_policy: RetryPolicy | None = None,
        api_key: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        log: Any = None,
    ) -> None:
        if not base_url.strip():
            raise ValueError("base_url must be non-empty")
        self._base_url = base_url.strip().rstrip("/")
        self._policy = retry_policy or RetryPolicy()
        self._limiter = limiter
        self._log = log or logger
        headers = {"Accept": "application/json"}
        if api_key:
            headers[API_KEY_HEADER] = api_key
        self._headers = headers
        self._http = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(self._policy.timeout_sec)
        )

    async def _get_markets(self, ids: str) -> Any:
        try:
            resp = await self._http.get(
                f"{self._base_url}/coins/markets",
                params={"vs_currency": VS_CURRENCY, "ids": ids},
                headers=self._headers,
            )
            resp.raise_for_status()
            return resp.json()
        except httpx.HTTPStatusError as e:
            raise TransportError(
                f"CoinGecko returned HTTP {e.response.status_code}", source=SOURCE
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(f"CoinGecko request failed: {e}", source=SOURCE) from e
        except ValueError as e:
            raise TransportError("CoinGecko returned invalid JSON", source=SOURCE) from e

    async def get_token_market_info(self, symbol: str) -> TokenMarketInfo:
        """Return price and market cap for symbol (case-insensitive)."""
        ids = normalize_symbol(symbol)
        try:
            data = await call_with_retry(
                lambda: self._get_markets(ids),
                limiter=self._limiter,
                policy=self._policy,
                source=SOURCE,
                log=self._log,
            )
        except TransportError as e:
            self._log.error("coingecko_request_failed", symbol=ids, error=str(e))
            raise
        if not isinstance(data, list):
            self._log.error("coingecko_unexpected_payload", symbol=ids, payload_type=type(data).__name__)
            raise TransportError("CoinGecko returned an unexpected payload", source=SOURCE)
        if not data:
            self._log.info("coingecko_token_not_found", symbol=ids)
            raise TokenNotFound(ids)
        try:
            info = TokenMarketInfo.from_coingecko(data[0])
        except (ValueError, AttributeError) as e:
            raise TransportError(f"CoinGecko listing malformed: {e}", source=SOURCE) from e
        self._log.debug(
            "coingecko_market_fetched",
            symbol=ids,
            price=str(info.price),
            market_cap=str(info.market_cap),
        )
        return info

    async def close(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "CoinGeckoMarketClient":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()
