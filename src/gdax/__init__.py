"""Typed client for the GDAX public market-data API."""

__version__ = "0.1.0"

from src.gdax.client import PublicClient  # noqa: E402
from src.gdax.config import ClientConfig  # noqa: E402
from src.gdax.enums import BookLevel, Side  # noqa: E402
from src.gdax.errors import (  # noqa: E402
    ApiError,
    DecodeError,
    GdaxError,
    TransportError,
)
from src.gdax.model import (  # noqa: E402
    BookEntry,
    Candle,
    FullBookEntry,
    OrderBook,
    Product,
    Tick,
    Trade,
)

__all__ = [
    "ApiError",
    "BookEntry",
    "BookLevel",
    "Candle",
    "ClientConfig",
    "DecodeError",
    "FullBookEntry",
    "GdaxError",
    "OrderBook",
    "Product",
    "PublicClient",
    "Side",
    "Tick",
    "Trade",
    "TransportError",
    "__version__",
]
