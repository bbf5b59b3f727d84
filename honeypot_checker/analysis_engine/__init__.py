"""
Analysis engine package: risk heuristics and the analysis pipeline.

Consumes account state, recent signatures and market data, applies the
honeypot and ownership rules, and produces an AnalysisReport.
"""

from honeypot_checker.analysis_engine.models import (
    REPORT_TRANSACTIONS_LIMIT,
    AnalysisReport,
)
from honeypot_checker.analysis_engine.orchestrator import AnalysisOrchestrator
from honeypot_checker.analysis_engine.risk import (
    HoneypotVerdict,
    OwnershipClassification,
    OwnershipKind,
    classify_ownership,
    evaluate_honeypot_risk,
    is_incoming_only,
)

__all__ = [
    "REPORT_TRANSACTIONS_LIMIT",
    "AnalysisOrchestrator",
    "AnalysisReport",
    "HoneypotVerdict",
    "OwnershipClassification",
    "OwnershipKind",
    "classify_ownership",
    "evaluate_honeypot_risk",
    "is_incoming_only",
]
