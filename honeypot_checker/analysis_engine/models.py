"""
Data models for analysis output.

AnalysisReport is built once per request, only after every fetch succeeded,
and is consumed by the API and CLI adapters.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from honeypot_checker.analysis_engine.risk import HoneypotVerdict, OwnershipClassification
from honeypot_checker.market_client.models import TokenMarketInfo
from honeypot_checker.solana_client.models import TransactionRecord

REPORT_TRANSACTIONS_LIMIT = 5


@dataclass(frozen=True)
class AnalysisReport:
    honeypot_verdict: HoneypotVerdict
    ownership: OwnershipClassification
    market: TokenMarketInfo
    recent_transactions: tuple[TransactionRecord, ...] = ()

    def __post_init__(self) -> None:
        if len(self.recent_transactions) > REPORT_TRANSACTIONS_LIMIT:
            raise ValueError(
                f"recent_transactions holds at most {REPORT_TRANSACTIONS_LIMIT} records"
            )

    def to_dict(self) -> dict[str, Any]:
        return {
            "honeypot_verdict": self.honeypot_verdict.value,
            "ownership": self.ownership.to_dict(),
            "market": self.market.to_dict(),
            "recent_transactions": [tx.to_dict() for tx in self.recent_transactions],
        }
