"""Shared rate limiter for all outbound calls."""

from honeypot_checker.ratelimit.limiter import RateLimiter

__all__ = ["RateLimiter"]
