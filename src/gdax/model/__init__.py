"""GDAX market data models."""

from src.gdax.model.book import BookEntry, FullBookEntry, OrderBook, PriceLevel
from src.gdax.model.candle import Candle
from src.gdax.model.product import Product
from src.gdax.model.ticker import Tick
from src.gdax.model.trade import Trade

__all__ = [
    "BookEntry",
    "Candle",
    "FullBookEntry",
    "OrderBook",
    "PriceLevel",
    "Product",
    "Tick",
    "Trade",
]
