"""
Honeypot Checker: shallow risk assessment for Solana tokens.

Fetches account state, recent transaction signatures and market data for an
(address, symbol) pair concurrently behind a shared rate limiter, evaluates a
honeypot heuristic and ownership classification, and returns a report.
Modular layout: clients, rate limiter, analysis engine, and thin adapters
(API server, CLI) around them.
"""

__version__ = "0.1.0"
