"""
Solana chain data client: account state and recent signatures.

Responsibilities:
- Validate addresses before any network call.
- getAccountInfo → AccountInfo (owner program id, lamports).
- getSignaturesForAddress (limit 10) → TransactionRecord list, newest first.
- Route every RPC attempt through the shared RateLimiter with a per-call
  timeout; map node/transport failures to TransportError.

No internal state beyond the RPC connection; both calls are side-effect free.
"""

from __future__ import annotations

from typing import Any

from solana.rpc.async_api import AsyncClient
from solana.rpc.commitment import Confirmed

from honeypot_checker.checker_logging import get_logger
from honeypot_checker.core.exceptions import (
    AccountNotFound,
    HoneypotCheckerError,
    TransportError,
)
from honeypot_checker.core.retry import RetryPolicy, call_with_retry
from honeypot_checker.ratelimit import RateLimiter
from honeypot_checker.solana_client.models import AccountInfo, TransactionRecord
from honeypot_checker.utils.address import parse_address

logger = get_logger(__name__)

RECENT_TRANSACTIONS_LIMIT = 10
SOURCE = "solana_rpc"


def _short(address: str) -> str:
    return address[:8] + "..." if len(address) > 8 else address


class SolanaChainClient:
    """
    Async Solana RPC client for the analysis pipeline.

    The RPC connection (solana-py AsyncClient) may be injected; otherwise one
    is created for rpc_url with confirmed commitment.
    """

    def __init__(
        self,
        rpc_url: str | None = None,
        *,
        limiter: RateLimiter,
        retry_policy: RetryPolicy | None = None,
        rpc_client: Any = None,
        log: Any = None,
    ) -> None:
        self._policy = retry_policy or RetryPolicy()
        if rpc_client is None:
            if not rpc_url or not rpc_url.strip():
                raise ValueError("rpc_url must be non-empty when rpc_client is not given")
            rpc_client = AsyncClient(
                rpc_url.strip(), commitment=Confirmed, timeout=self._policy.timeout_sec
            )
        self._rpc = rpc_client
        self._limiter = limiter
        self._log = log or logger

    async def _call(self, method: str, address: str, operation: Any) -> Any:
        """Run one RPC operation with limiter, timeout and retry; wrap transport failures."""

        async def _guarded() -> Any:
            try:
                return await operation()
            except HoneypotCheckerError:
                raise
            except Exception as e:
                raise TransportError(
                    f"Solana RPC {method} failed: {e}", source=SOURCE
                ) from e

        try:
            return await call_with_retry(
                _guarded,
                limiter=self._limiter,
                policy=self._policy,
                source=SOURCE,
                log=self._log,
            )
        except TransportError as e:
            self._log.error(
                "solana_rpc_failed",
                method=method,
                address=_short(address),
                error=str(e),
            )
            raise

    async def get_account_info(self, address: str) -> AccountInfo:
        """Return owner and balance for address; AccountNotFound if the node has no account."""
        pubkey = parse_address(address)
        resp = await self._call(
            "getAccountInfo", address, lambda: self._rpc.get_account_info(pubkey)
        )
        value = getattr(resp, "value", None)
        if value is None:
            self._log.info("solana_account_not_found", address=_short(address))
            raise AccountNotFound(address)
        info = AccountInfo(owner=str(value.owner), balance=int(value.lamports))
        self._log.debug(
            "solana_account_fetched",
            address=_short(address),
            owner=info.owner,
            balance=info.balance,
        )
        return info

    async def get_recent_transactions(self, address: str) -> list[TransactionRecord]:
        """Return up to 10 most recent signatures, newest first; empty list if no history."""
        pubkey = parse_address(address)
        resp = await self._call(
            "getSignaturesForAddress",
            address,
            lambda: self._rpc.get_signatures_for_address(
                pubkey, limit=RECENT_TRANSACTIONS_LIMIT
            ),
        )
        items = getattr(resp, "value", None) or []
        records = [
            TransactionRecord.from_signature_info(item)
            for item in list(items)[:RECENT_TRANSACTIONS_LIMIT]
        ]
        self._log.debug(
            "solana_signatures_fetched",
            address=_short(address),
            signature_count=len(records),
        )
        return records

    async def close(self) -> None:
        await self._rpc.close()

    async def __aenter__(self) -> "SolanaChainClient":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()
