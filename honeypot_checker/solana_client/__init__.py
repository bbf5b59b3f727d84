"""
Solana chain data client package.

Resolves an address to account metadata (owner, balance) and to a bounded
window of recent transaction signatures with their status.
"""

from honeypot_checker.solana_client.client import (
    RECENT_TRANSACTIONS_LIMIT,
    SolanaChainClient,
)
from honeypot_checker.solana_client.models import (
    AccountInfo,
    TransactionRecord,
    TransactionStatus,
)

__all__ = [
    "RECENT_TRANSACTIONS_LIMIT",
    "AccountInfo",
    "SolanaChainClient",
    "TransactionRecord",
    "TransactionStatus",
]
