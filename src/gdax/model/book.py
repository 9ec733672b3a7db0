"""
Order book snapshots.

The book endpoint returns the same envelope at every detail level; only the
shape of each entry changes. Levels 1 and 2 aggregate orders per price level,
level 3 lists every open order with its id. A single generic ``OrderBook``
covers all three.
"""

from typing import Generic, TypeVar

from pydantic import Field

from src.gdax.model.types import (
    Count,
    PositionalRecord,
    StrFloat,
    StrUUID,
    WireRecord,
)


class PriceLevel(PositionalRecord):
    """Price and size common to every book entry."""

    price: StrFloat
    size: StrFloat


class BookEntry(PriceLevel):
    """
    Aggregated price level (book levels 1 and 2).

    Wire form: ``["price", "size", num_orders]``.
    """

    num_orders: Count = Field(description="Orders aggregated at this price")


class FullBookEntry(PriceLevel):
    """
    Single open order (book level 3).

    Wire form: ``["price", "size", "order_id"]``.
    """

    order_id: StrUUID


EntryT = TypeVar("EntryT", bound=PriceLevel)


class OrderBook(WireRecord, Generic[EntryT]):
    """
    Order book snapshot parameterized over its entry shape.

    Bids are ordered best (highest) first and asks best (lowest) first,
    exactly as the exchange sends them.
    """

    sequence: Count = Field(description="Snapshot sequence number")
    bids: list[EntryT]
    asks: list[EntryT]

    @property
    def best_bid(self) -> float | None:
        """Get the best bid price."""
        return self.bids[0].price if self.bids else None

    @property
    def best_ask(self) -> float | None:
        """Get the best ask price."""
        return self.asks[0].price if self.asks else None

    @property
    def spread(self) -> float | None:
        """Get the spread between best ask and best bid."""
        if self.best_bid is None or self.best_ask is None:
            return None
        return self.best_ask - self.best_bid

    @property
    def mid_price(self) -> float | None:
        """Get the mid price."""
        if self.best_bid is None or self.best_ask is None:
            return None
        return (self.best_bid + self.best_ask) / 2
