"""
FastAPI server: HTTP interface over the analysis pipeline.

Exposes GET /analyze/{address}?symbol=<symbol> returning the honeypot verdict,
ownership classification, market data and recent transactions, and GET /health.
The orchestrator (and its shared rate limiter) is built once in the lifespan.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any

from fastapi import Depends, FastAPI, HTTPException, Query, Request
from pydantic import BaseModel, Field

from honeypot_checker import __version__
from honeypot_checker.analysis_engine import AnalysisOrchestrator, AnalysisReport
from honeypot_checker.checker_logging import get_logger
from honeypot_checker.config import get_settings
from honeypot_checker.config.env import mask_url
from honeypot_checker.core.exceptions import AnalysisFailed, ValidationError
from honeypot_checker.report import format_report

logger = get_logger(__name__)


# -----------------------------------------------------------------------------
# Response models
# -----------------------------------------------------------------------------

class OwnershipResponse(BaseModel):
    kind: str = Field(..., description="unknown | centralized | distributed")
    owner_id: str | None = Field(None, description="Owner program id (base58) when known")


class MarketResponse(BaseModel):
    name: str
    symbol: str
    price: str = Field(..., description="USD price as a decimal string")
    market_cap: str = Field(..., description="USD market cap as a decimal string")


class TransactionResponse(BaseModel):
    id: str = Field(..., description="Transaction signature")
    status: str = Field(..., description="confirmed | failed")


class AnalysisResponse(BaseModel):
    """GET /analyze/{address} response."""

    address: str = Field(..., description="Analyzed address (base58)")
    honeypot_verdict: str = Field(..., description="high_risk | none_detected")
    ownership: OwnershipResponse
    market: MarketResponse
    recent_transactions: list[TransactionResponse] = Field(default_factory=list)
    summary: str = Field(..., description="Formatted plain-text report")

    @classmethod
    def from_report(cls, address: str, report: AnalysisReport) -> "AnalysisResponse":
        data = report.to_dict()
        return cls(address=address, summary=format_report(report), **data)


# -----------------------------------------------------------------------------
# Lifespan and dependency
# -----------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the orchestrator once; close its clients on shutdown."""
    settings = get_settings()
    orchestrator = AnalysisOrchestrator.from_settings(settings)
    app.state.orchestrator = orchestrator
    logger.info(
        "api_started",
        rpc_url=mask_url(settings.solana_rpc_url),
        rate_limit_min_time_ms=settings.rate_limit_min_time_ms,
        rate_limit_max_concurrent=settings.rate_limit_max_concurrent,
    )
    try:
        yield
    finally:
        await orchestrator.aclose()
        logger.info("api_stopped")


def get_orchestrator(request: Request) -> Any:
    """Dependency: the process-wide orchestrator built in lifespan."""
    orchestrator = getattr(request.app.state, "orchestrator", None)
    if orchestrator is None:
        raise HTTPException(status_code=503, detail="Analyzer not ready")
    return orchestrator


# -----------------------------------------------------------------------------
# App and routes
# -----------------------------------------------------------------------------

app = FastAPI(
    title="Honeypot Checker API",
    description="Shallow honeypot and ownership risk assessment for Solana tokens.",
    version=__version__,
    lifespan=lifespan,
)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/analyze/{address}", response_model=AnalysisResponse)
async def analyze_token(
    address: str,
    symbol: str = Query(..., min_length=1, max_length=128, description="Market symbol/id, e.g. solana"),
    orchestrator: Any = Depends(get_orchestrator),
):
    """
    Analyze a token address/symbol pair. 400 on malformed input, 502 when any
    upstream fetch failed (the generic message only; the cause is logged).
    """
    try:
        report = await orchestrator.analyze(address, symbol)
    except ValidationError as e:
        logger.info("analyze_rejected", address=address[:16], symbol=symbol, error=str(e))
        raise HTTPException(status_code=400, detail=str(e)) from e
    except AnalysisFailed as e:
        logger.warning(
            "analyze_failed",
            address=address[:16],
            symbol=symbol,
            cause=type(e.cause).__name__ if e.cause else None,
        )
        raise HTTPException(status_code=502, detail=str(e)) from e
    return AnalysisResponse.from_report(address.strip(), report)
