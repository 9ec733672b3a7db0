"""
Enums for the GDAX public market-data API.

This module defines the small closed vocabularies that appear on the wire:
the side of a trade and the detail level of an order book request.
"""

from __future__ import annotations

import enum
from typing import Any

# =============================================================================
# TRADE ENUMS
# =============================================================================


class Side(str, enum.Enum):
    """
    Direction of a trade, buy or sell.

    The exchange sends the side as a lowercase string. Decoding is
    case-insensitive; encoding always emits the canonical lowercase form.
    """

    BUY = "buy"
    SELL = "sell"

    def __str__(self) -> str:
        """Return the display name (``Buy`` or ``Sell``)."""
        return self.name.title()

    def to_wire(self) -> str:
        """Encode the side as its canonical wire string."""
        return _SIDE_TO_WIRE[self]

    @classmethod
    def from_wire(cls, value: Any) -> Side:
        """
        Decode a side from its wire representation.

        Args:
            value: Raw JSON value (e.g., "buy", "SELL", "Buy")

        Returns:
            The matching Side

        Raises:
            ValueError: If the value is not a string or names no side

        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(
                f"side must be a string, got {type(value).__name__}: {value!r}"
            )

        side = _WIRE_TO_SIDE.get(value.lower())
        if side is None:
            raise ValueError(f"side must be either `buy` or `sell`: {value}")
        return side


_SIDE_TO_WIRE: dict[Side, str] = {Side.BUY: "buy", Side.SELL: "sell"}
_WIRE_TO_SIDE: dict[str, Side] = {wire: side for side, wire in _SIDE_TO_WIRE.items()}


# =============================================================================
# ORDER BOOK ENUMS
# =============================================================================


class BookLevel(int, enum.Enum):
    """
    Order book detail levels accepted by the book endpoint.

    Levels 1 and 2 return aggregated price levels, level 3 returns
    every open order.
    """

    BEST = 1  # Only the best bid and ask
    TOP_50 = 2  # Top 50 aggregated bids and asks
    FULL = 3  # Full non-aggregated order book
