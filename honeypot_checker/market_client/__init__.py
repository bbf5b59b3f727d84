"""
Market data client package.

Resolves a token symbol to current price and market capitalization.
"""

from honeypot_checker.market_client.client import CoinGeckoMarketClient, normalize_symbol
from honeypot_checker.market_client.models import TokenMarketInfo

__all__ = ["CoinGeckoMarketClient", "TokenMarketInfo", "normalize_symbol"]
