"""
Tests for plain-text report rendering (report.formatter).
"""

from __future__ import annotations

from decimal import Decimal

from conftest import SYSTEM_PROGRAM, TOKEN_PROGRAM
from honeypot_checker.analysis_engine import (
    AnalysisReport,
    HoneypotVerdict,
    OwnershipClassification,
)
from honeypot_checker.market_client import TokenMarketInfo
from honeypot_checker.report import (
    format_market_cap,
    format_price,
    format_report,
    format_transactions,
)
from honeypot_checker.report.formatter import format_ownership, format_verdict
from honeypot_checker.solana_client import TransactionRecord, TransactionStatus

MARKET = TokenMarketInfo(
    display_name="Solana", symbol="sol", price=Decimal("142.37"), market_cap=Decimal("66871234567")
)


def test_format_price():
    assert format_price(Decimal("142.37")) == "$142.37"
    assert format_price(Decimal("2.134E-5")) == "$0.00002134"


def test_format_market_cap_grouping():
    assert format_market_cap(Decimal("1234567")) == "$1,234,567"
    assert format_market_cap(Decimal("66871234567")) == "$66,871,234,567"
    assert format_market_cap(Decimal("1406000000.5")) == "$1,406,000,000.5"
    assert format_market_cap(Decimal("0")) == "$0"


def test_format_transactions():
    txs = [
        TransactionRecord("sigA", TransactionStatus.CONFIRMED),
        TransactionRecord("sigB", TransactionStatus.FAILED),
    ]
    assert format_transactions(txs) == "1. TxID: sigA\n2. TxID: sigB"
    assert format_transactions([]) == "No recent transactions."


def test_verdict_and_ownership_labels():
    assert format_verdict(HoneypotVerdict.HIGH_RISK) == "⚠️ High Risk"
    assert format_verdict(HoneypotVerdict.NONE_DETECTED) == "✅ No Honeypot Detected"
    assert format_ownership(OwnershipClassification.unknown()) == "❓ Unknown"
    assert format_ownership(OwnershipClassification.centralized(SYSTEM_PROGRAM)) == "🚨 Centralized Ownership"
    assert format_ownership(OwnershipClassification.distributed(TOKEN_PROGRAM)) == f"✅ Owner: {TOKEN_PROGRAM}"


def test_format_report():
    report = AnalysisReport(
        honeypot_verdict=HoneypotVerdict.NONE_DETECTED,
        ownership=OwnershipClassification.distributed(TOKEN_PROGRAM),
        market=MARKET,
        recent_transactions=(TransactionRecord("sigA", TransactionStatus.CONFIRMED),),
    )
    text = format_report(report)
    assert "- Honeypot Risk: ✅ No Honeypot Detected" in text
    assert f"- Ownership: ✅ Owner: {TOKEN_PROGRAM}" in text
    assert "Name: Solana" in text
    assert "Symbol: sol" in text
    assert "Price: $142.37" in text
    assert "Market Cap: $66,871,234,567" in text
    assert "1. TxID: sigA" in text


def test_format_report_without_transactions():
    report = AnalysisReport(
        honeypot_verdict=HoneypotVerdict.HIGH_RISK,
        ownership=OwnershipClassification.centralized(SYSTEM_PROGRAM),
        market=MARKET,
    )
    text = format_report(report)
    assert "⚠️ High Risk" in text
    assert "🚨 Centralized Ownership" in text
    assert text.endswith("No recent transactions.")
