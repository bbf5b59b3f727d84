"""Market data models."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any


def to_decimal(value: Any) -> Decimal:
    """Parse a provider number via str() so floats keep their printed digits; None → 0."""
    if value is None:
        return Decimal("0")
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError) as e:
        raise ValueError(f"not a number: {value!r}") from e


@dataclass(frozen=True)
class TokenMarketInfo:
    """Current market listing for a token symbol. Re-fetched for every request."""

    display_name: str
    symbol: str
    price: Decimal
    market_cap: Decimal

    @classmethod
    def from_coingecko(cls, entry: dict[str, Any]) -> "TokenMarketInfo":
        """Build from one /coins/markets entry."""
        return cls(
            display_name=str(entry.get("name") or ""),
            symbol=str(entry.get("symbol") or ""),
            price=to_decimal(entry.get("current_price")),
            market_cap=to_decimal(entry.get("market_cap")),
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self.display_name,
            "symbol": self.symbol,
            "price": str(self.price),
            "market_cap": str(self.market_cap),
        }
