"""Text rendering of analysis reports."""

from honeypot_checker.report.formatter import (
    format_market_cap,
    format_price,
    format_report,
    format_transactions,
)

__all__ = ["format_market_cap", "format_price", "format_report", "format_transactions"]
