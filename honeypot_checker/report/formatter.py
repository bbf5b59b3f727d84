"""
Human-readable rendering of an AnalysisReport for the API summary and CLI.

Presentation only: currency symbols and grouping separators are applied here,
the report itself keeps Decimal values.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from honeypot_checker.analysis_engine.models import AnalysisReport
from honeypot_checker.analysis_engine.risk import (
    HoneypotVerdict,
    OwnershipClassification,
    OwnershipKind,
)
from honeypot_checker.solana_client.models import TransactionRecord

VERDICT_LABELS = {
    HoneypotVerdict.HIGH_RISK: "⚠️ High Risk",
    HoneypotVerdict.NONE_DETECTED: "✅ No Honeypot Detected",
}
NO_TRANSACTIONS = "No recent transactions."


def format_verdict(verdict: HoneypotVerdict) -> str:
    return VERDICT_LABELS[verdict]


def format_ownership(ownership: OwnershipClassification) -> str:
    if ownership.kind is OwnershipKind.CENTRALIZED:
        return "🚨 Centralized Ownership"
    if ownership.kind is OwnershipKind.DISTRIBUTED:
        return f"✅ Owner: {ownership.owner_id}"
    return "❓ Unknown"


def format_price(price: Decimal) -> str:
    """$ plus the provider's digits, e.g. $0.00002134."""
    return f"${price:f}"


def format_market_cap(market_cap: Decimal) -> str:
    """$ with thousands separators, e.g. $1,234,567."""
    if market_cap == market_cap.to_integral_value():
        return f"${market_cap:,.0f}"
    return f"${market_cap:,f}"


def format_transactions(transactions: Sequence[TransactionRecord]) -> str:
    if not transactions:
        return NO_TRANSACTIONS
    return "\n".join(f"{i}. TxID: {tx.id}" for i, tx in enumerate(transactions, start=1))


def format_report(report: AnalysisReport) -> str:
    """Render the full report as plain text."""
    market = report.market
    lines = [
        "🧾 Token Analysis:",
        f"- Honeypot Risk: {format_verdict(report.honeypot_verdict)}",
        f"- Ownership: {format_ownership(report.ownership)}",
        "- Token Details:",
        f"    Name: {market.display_name}",
        f"    Symbol: {market.symbol}",
        f"    Price: {format_price(market.price)}",
        f"    Market Cap: {format_market_cap(market.market_cap)}",
        "- Recent Transactions:",
    ]
    lines.extend(f"    {line}" for line in format_transactions(report.recent_transactions).splitlines())
    return "\n".join(lines)
