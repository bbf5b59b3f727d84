"""
Application-level exceptions.

Domain errors with stable codes and human-readable messages, used by the
clients, the orchestrator, and the API/CLI adapters.
"""

from __future__ import annotations

ANALYSIS_FAILED_MESSAGE = "Analysis failed. Check the token address and symbol."


class HoneypotCheckerError(Exception):
    """Base class for all honeypot checker errors."""

    code = "error"


class ValidationError(HoneypotCheckerError):
    """Malformed address or symbol, detected before any network call."""

    code = "validation_error"


class TransportError(HoneypotCheckerError):
    """Chain node or market provider unreachable, timing out, or returning an error."""

    code = "transport_error"

    def __init__(self, message: str, *, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source


class AccountNotFound(HoneypotCheckerError):
    """The chain node reports no account for the address."""

    code = "account_not_found"

    def __init__(self, address: str) -> None:
        super().__init__(f"Account not found: {address}")
        self.address = address


class TokenNotFound(HoneypotCheckerError):
    """The market provider returned no listing for the symbol."""

    code = "token_not_found"

    def __init__(self, symbol: str) -> None:
        super().__init__(f"Token not found: {symbol}")
        self.symbol = symbol


class AnalysisFailed(HoneypotCheckerError):
    """
    Aggregate failure of the fan-out fetch.

    The message is generic for callers; cause keeps the specific error
    for logs and tests.
    """

    code = "analysis_failed"

    def __init__(self, cause: BaseException | None = None) -> None:
        super().__init__(ANALYSIS_FAILED_MESSAGE)
        self.cause = cause
