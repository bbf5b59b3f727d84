"""
Data models for chain client output.

AccountInfo and TransactionRecord are immutable once returned; they are
consumed by the risk evaluator and report assembly.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class TransactionStatus(str, Enum):
    CONFIRMED = "confirmed"
    FAILED = "failed"


@dataclass(frozen=True)
class AccountInfo:
    """Account state from getAccountInfo: owner program id and balance in lamports."""

    owner: str
    balance: int


@dataclass(frozen=True)
class TransactionRecord:
    """
    One recent signature referencing an address.

    status is FAILED when the transaction recorded an execution error.
    """

    id: str
    status: TransactionStatus

    @classmethod
    def from_signature_info(cls, item: Any) -> "TransactionRecord":
        """Build from a getSignaturesForAddress result item (solders object or RPC dict)."""
        if isinstance(item, dict):
            signature = item["signature"]
            err = item.get("err")
        else:
            signature = item.signature
            err = getattr(item, "err", None)
        status = TransactionStatus.FAILED if err is not None else TransactionStatus.CONFIRMED
        return cls(id=str(signature), status=status)

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "status": self.status.value}
