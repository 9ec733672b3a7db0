"""
Historic trade model.
"""

from typing import Annotated

from pydantic import BeforeValidator, Field, PlainSerializer

from src.gdax.enums import Side
from src.gdax.model.types import Count, RFC3339Time, StrFloat, WireRecord

# Side decoded case-insensitively and always encoded as "buy" / "sell"
WireSide = Annotated[
    Side,
    BeforeValidator(Side.from_wire),
    PlainSerializer(Side.to_wire, return_type=str, when_used="json"),
]


class Trade(WireRecord):
    """
    Executed trade returned by ``GET /products/{product}/trades``.

    ``side`` is the maker order side.
    """

    time: RFC3339Time
    trade_id: Count
    price: StrFloat
    size: StrFloat
    side: WireSide = Field(description="Trade side (buy or sell)")

    @property
    def value(self) -> float:
        """Calculate trade value (price * size)."""
        return self.price * self.size

    @property
    def is_buy(self) -> bool:
        """Check if this is a buy trade."""
        return self.side == Side.BUY

    @property
    def is_sell(self) -> bool:
        """Check if this is a sell trade."""
        return self.side == Side.SELL
