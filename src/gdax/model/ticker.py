"""
Product ticker model.

A tick is a snapshot of the last trade together with the current best bid
and ask and the 24 hour volume.
"""

from pydantic import Field

from src.gdax.model.types import Count, RFC3339Time, StrFloat, WireRecord


class Tick(WireRecord):
    """Latest trade snapshot returned by ``GET /products/{product}/ticker``."""

    trade_id: Count
    price: StrFloat = Field(description="Last trade price")
    size: StrFloat = Field(description="Last trade size")
    bid: StrFloat
    ask: StrFloat
    volume: StrFloat = Field(description="24 hour volume in base currency")
    time: RFC3339Time

    @property
    def spread(self) -> float:
        """Calculate bid-ask spread."""
        return self.ask - self.bid

    @property
    def mid_price(self) -> float:
        """Calculate mid price between bid and ask."""
        return (self.bid + self.ask) / 2
