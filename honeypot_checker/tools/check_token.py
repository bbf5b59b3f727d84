"""
Run one honeypot analysis from the command line.

Usage:
    python -m honeypot_checker.tools.check_token <TOKEN_ADDRESS> <TOKEN_SYMBOL> [--json]

Exit codes: 0 report printed, 1 analysis failed, 2 invalid address/symbol,
3 invalid configuration (e.g. RATE_LIMIT_MAX_CONCURRENT=0).
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Sequence

from honeypot_checker.analysis_engine import AnalysisOrchestrator, AnalysisReport
from honeypot_checker.checker_logging import get_logger
from honeypot_checker.config import get_settings
from honeypot_checker.core.exceptions import AnalysisFailed, ValidationError
from honeypot_checker.report import format_report

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_ANALYSIS_FAILED = 1
EXIT_INVALID_INPUT = 2
EXIT_CONFIG_ERROR = 3


async def run_check(address: str, symbol: str) -> AnalysisReport:
    orchestrator = AnalysisOrchestrator.from_settings()
    try:
        return await orchestrator.analyze(address, symbol)
    finally:
        await orchestrator.aclose()


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Analyze a Solana token for honeypot and ownership risk")
    ap.add_argument("address", help="Token address (base58)")
    ap.add_argument("symbol", help="Market symbol/id, e.g. solana")
    ap.add_argument("--json", action="store_true", help="Print the report as JSON")
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        get_settings()
    except ValueError as e:
        print(f"❌ Error: invalid configuration: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    try:
        report = asyncio.run(run_check(args.address, args.symbol))
    except ValidationError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    except AnalysisFailed as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return EXIT_ANALYSIS_FAILED

    if args.json:
        print(json.dumps({"address": args.address.strip(), **report.to_dict()}, indent=2))
    else:
        print(format_report(report))
    logger.info("check_token_done", address=args.address, symbol=args.symbol)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
