"""
Analysis orchestrator: fan-out fetch, fan-in join, risk evaluation.

analyze(address, symbol) issues the account, signature and market fetches
concurrently (each outbound attempt admitted by the shared RateLimiter the
clients hold), waits for all three, and either returns a complete
AnalysisReport or raises AnalysisFailed. No state is kept between calls.

Failure policy is fail-fast aggregate: the first fetch error decides the
outcome, in-flight siblings are allowed to settle so the limiter's slot
accounting stays correct, their results are discarded, and every underlying
cause is logged. Callers only see the generic AnalysisFailed; its cause
attribute keeps the specific error.
"""

from __future__ import annotations

import asyncio
from typing import Any

from honeypot_checker.analysis_engine.models import REPORT_TRANSACTIONS_LIMIT, AnalysisReport
from honeypot_checker.analysis_engine.risk import classify_ownership, evaluate_honeypot_risk
from honeypot_checker.checker_logging import bind_request, get_logger
from honeypot_checker.config.settings import Settings, get_settings
from honeypot_checker.core.exceptions import AnalysisFailed, ValidationError
from honeypot_checker.core.retry import RetryPolicy
from honeypot_checker.market_client import CoinGeckoMarketClient, normalize_symbol
from honeypot_checker.ratelimit import RateLimiter
from honeypot_checker.solana_client import SolanaChainClient
from honeypot_checker.utils.address import parse_address

logger = get_logger(__name__)


class AnalysisOrchestrator:
    """
    Coordinates the chain and market clients for one analysis at a time.

    Clients (and through them the shared limiter) and the logger are injected;
    use from_settings() to build the production wiring.
    """

    def __init__(
        self,
        chain_client: Any,
        market_client: Any,
        *,
        log: Any = None,
    ) -> None:
        self._chain = chain_client
        self._market = market_client
        self._log = log or logger

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        *,
        limiter: RateLimiter | None = None,
        log: Any = None,
    ) -> "AnalysisOrchestrator":
        """Build clients around one shared RateLimiter from settings (env by default)."""
        settings = settings or get_settings()
        limiter = limiter or RateLimiter(
            min_time_ms=settings.rate_limit_min_time_ms,
            max_concurrent=settings.rate_limit_max_concurrent,
        )
        chain = SolanaChainClient(
            settings.solana_rpc_url,
            limiter=limiter,
            retry_policy=RetryPolicy(
                max_retries=settings.chain_max_retries,
                timeout_sec=settings.chain_timeout_sec,
                base_delay_sec=settings.retry_base_delay_sec,
                max_delay_sec=settings.retry_max_delay_sec,
            ),
            log=log,
        )
        market = CoinGeckoMarketClient(
            settings.coingecko_api_url,
            limiter=limiter,
            retry_policy=RetryPolicy(
                max_retries=settings.market_max_retries,
                timeout_sec=settings.market_timeout_sec,
                base_delay_sec=settings.retry_base_delay_sec,
                max_delay_sec=settings.retry_max_delay_sec,
            ),
            api_key=settings.coingecko_api_key,
            log=log,
        )
        return cls(chain, market, log=log)

    async def analyze(self, address: str, symbol: str) -> AnalysisReport:
        """
        Run one analysis for (address, symbol).

        Raises:
            ValidationError: address or symbol malformed (no network call made).
            AnalysisFailed: any of the three fetches failed; .cause holds the first error.
        """
        if not isinstance(address, str) or not address.strip():
            raise ValidationError("address must be a non-empty string")
        address = address.strip()
        parse_address(address)
        symbol = normalize_symbol(symbol)

        log = bind_request(address, symbol, self._log)
        log.info("analysis_started")
        fetches: dict[str, asyncio.Future[Any]] = {
            "account_info": asyncio.ensure_future(self._chain.get_account_info(address)),
            "transactions": asyncio.ensure_future(self._chain.get_recent_transactions(address)),
            "market": asyncio.ensure_future(self._market.get_token_market_info(symbol)),
        }
        try:
            done, pending = await asyncio.wait(
                fetches.values(), return_when=asyncio.FIRST_EXCEPTION
            )
        except asyncio.CancelledError:
            for task in fetches.values():
                task.cancel()
            await asyncio.gather(*fetches.values(), return_exceptions=True)
            raise

        first_error = next(
            (
                task.exception()
                for task in fetches.values()
                if task in done and task.exception() is not None
            ),
            None,
        )
        if first_error is not None:
            if pending:
                await asyncio.gather(*pending, return_exceptions=True)
            for name, task in fetches.items():
                exc = task.exception()
                if exc is not None:
                    log.error(
                        "analysis_fetch_failed",
                        fetch=name,
                        error_type=type(exc).__name__,
                        error=str(exc),
                    )
            log.error("analysis_failed", cause=type(first_error).__name__)
            raise AnalysisFailed(cause=first_error) from first_error

        account_info = fetches["account_info"].result()
        transactions = fetches["transactions"].result()
        market = fetches["market"].result()

        report = AnalysisReport(
            honeypot_verdict=evaluate_honeypot_risk(account_info, transactions),
            ownership=classify_ownership(account_info),
            market=market,
            recent_transactions=tuple(transactions[:REPORT_TRANSACTIONS_LIMIT]),
        )
        log.info(
            "analysis_completed",
            honeypot_verdict=report.honeypot_verdict.value,
            ownership=report.ownership.kind.value,
            transaction_count=len(transactions),
        )
        return report

    async def aclose(self) -> None:
        """Close both clients."""
        await asyncio.gather(self._chain.close(), self._market.close())
