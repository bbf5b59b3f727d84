"""
Rule-based honeypot and ownership heuristics.

Pure functions over value types; no I/O, deterministic. The honeypot check is
advisory: an address with no observed outgoing activity is a weak signal for
contracts that accept funds but never release them, and false positives are
expected.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from honeypot_checker.solana_client.models import (
    AccountInfo,
    TransactionRecord,
    TransactionStatus,
)
from honeypot_checker.utils.address import SYSTEM_PROGRAM_ID


class HoneypotVerdict(str, Enum):
    HIGH_RISK = "high_risk"
    NONE_DETECTED = "none_detected"


class OwnershipKind(str, Enum):
    UNKNOWN = "unknown"
    CENTRALIZED = "centralized"
    DISTRIBUTED = "distributed"


@dataclass(frozen=True)
class OwnershipClassification:
    kind: OwnershipKind
    owner_id: str | None = None

    @classmethod
    def unknown(cls) -> "OwnershipClassification":
        return cls(OwnershipKind.UNKNOWN)

    @classmethod
    def centralized(cls, owner_id: str) -> "OwnershipClassification":
        return cls(OwnershipKind.CENTRALIZED, owner_id)

    @classmethod
    def distributed(cls, owner_id: str) -> "OwnershipClassification":
        return cls(OwnershipKind.DISTRIBUTED, owner_id)

    def to_dict(self) -> dict[str, str | None]:
        return {"kind": self.kind.value, "owner_id": self.owner_id}


def is_incoming_only(tx: TransactionRecord) -> bool:
    """
    Whether a transaction shows no outgoing activity.

    Signatures carry only confirmed/failed, not direction, so this is a coarse
    proxy: a transaction that did not confirm moved nothing out.
    """
    return tx.status is TransactionStatus.FAILED


def evaluate_honeypot_risk(
    account_info: AccountInfo | None,
    transactions: Sequence[TransactionRecord],
) -> HoneypotVerdict:
    """
    HIGH_RISK when the account is absent, there is no history, or every
    transaction is incoming-only; NONE_DETECTED otherwise.
    """
    if account_info is None or not transactions:
        return HoneypotVerdict.HIGH_RISK
    if all(is_incoming_only(tx) for tx in transactions):
        return HoneypotVerdict.HIGH_RISK
    return HoneypotVerdict.NONE_DETECTED


def classify_ownership(account_info: AccountInfo | None) -> OwnershipClassification:
    """Unknown without account; centralized when owned by the System Program; else distributed."""
    if account_info is None:
        return OwnershipClassification.unknown()
    if account_info.owner == SYSTEM_PROGRAM_ID:
        return OwnershipClassification.centralized(account_info.owner)
    return OwnershipClassification.distributed(account_info.owner)
