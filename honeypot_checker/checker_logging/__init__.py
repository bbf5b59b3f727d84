"""
Structured logging for the honeypot checker.

JSON logs with timestamp, event_type, and request context (address, symbol).
Use get_logger() in all modules for aggregation-friendly output.
"""

from honeypot_checker.checker_logging.logger import bind_request, get_logger

__all__ = ["bind_request", "get_logger"]
