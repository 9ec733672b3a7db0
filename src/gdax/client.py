"""
Synchronous client for the GDAX public market-data REST API.

Every operation is a single blocking GET followed by decoding the body into
the matching model. There are no retries, no caching and no rate limiting;
timeouts are the transport's concern and come from ``ClientConfig``.
"""

import logging
from datetime import datetime, timedelta
from types import TracebackType
from typing import TypeVar

import requests
from pydantic import TypeAdapter, ValidationError

from src.gdax import endpoints
from src.gdax.config import ClientConfig
from src.gdax.endpoints import EndpointRequest
from src.gdax.enums import BookLevel
from src.gdax.errors import ApiError, DecodeError, TransportError
from src.gdax.model import (
    BookEntry,
    Candle,
    FullBookEntry,
    OrderBook,
    Product,
    Tick,
    Trade,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Response decoders
_PRODUCTS = TypeAdapter(list[Product])
_BOOK = TypeAdapter(OrderBook[BookEntry])
_FULL_BOOK = TypeAdapter(OrderBook[FullBookEntry])
_CANDLES = TypeAdapter(list[Candle])
_TICK = TypeAdapter(Tick)
_TRADES = TypeAdapter(list[Trade])


class PublicClient:
    """
    Client for the public (unauthenticated) market-data endpoints.

    The client holds one ``requests.Session`` that is reused, but never
    mutated, by its calls. Sharing a client across threads is only as safe
    as sharing the session.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        session: requests.Session | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            config: Client settings; read from the environment when omitted
            session: HTTP session to use; a new one is created when omitted

        """
        self.config = config or ClientConfig()
        self._owns_session = session is None
        self.session = session or requests.Session()

    @property
    def base_url(self) -> str:
        """Get the API base URL."""
        return self.config.base_url

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "PublicClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _get_and_decode(self, request: EndpointRequest, decoder: TypeAdapter[T]) -> T:
        """
        Perform a GET and decode the response body.

        Args:
            request: Endpoint path and query parameters
            decoder: Type adapter for the expected response shape

        Returns:
            Decoded response

        Raises:
            TransportError: If the request could not be completed
            ApiError: If the response status is not 2xx
            DecodeError: If the body does not match the expected shape

        """
        url = request.url(self.base_url)
        logger.debug(f"GET {url}")

        try:
            response = self.session.get(
                url,
                headers={
                    "Accept": "application/json",
                    "User-Agent": self.config.user_agent,
                },
                timeout=self.config.timeout,
            )
        except requests.RequestException as e:
            logger.warning(f"Request to {url} failed: {e}")
            raise TransportError(url, e) from e

        if not 200 <= response.status_code < 300:
            logger.warning(f"API error {response.status_code} for {url}")
            raise ApiError(url, response.status_code, response.reason or "")

        try:
            return decoder.validate_json(response.content)
        except ValidationError as e:
            error = DecodeError.from_validation_error(url, e)
            logger.warning(str(error))
            raise error from e

    def get_products(self) -> list[Product]:
        """List the products available for trading."""
        return self._get_and_decode(endpoints.products(), _PRODUCTS)

    def get_best_order(self, product: str) -> OrderBook[BookEntry]:
        """Get the best bid and ask for a product (book level 1)."""
        return self._get_and_decode(
            endpoints.order_book(product, BookLevel.BEST), _BOOK
        )

    def get_top50_orders(self, product: str) -> OrderBook[BookEntry]:
        """Get the top 50 aggregated bids and asks (book level 2)."""
        return self._get_and_decode(
            endpoints.order_book(product, BookLevel.TOP_50), _BOOK
        )

    def get_full_book(self, product: str) -> OrderBook[FullBookEntry]:
        """Get every open order for a product (book level 3)."""
        return self._get_and_decode(
            endpoints.order_book(product, BookLevel.FULL), _FULL_BOOK
        )

    def get_historic_rates(
        self,
        product: str,
        start_time: datetime,
        end_time: datetime,
        granularity: timedelta,
    ) -> list[Candle]:
        """
        Get historic rates (candles) for a product.

        Args:
            product: Product symbol (e.g., "ETH-USD")
            start_time: Start of the range (timezone-aware)
            end_time: End of the range (timezone-aware)
            granularity: Candle width

        Returns:
            Candles as returned by the exchange

        """
        request = endpoints.candles(product, start_time, end_time, granularity)
        return self._get_and_decode(request, _CANDLES)

    def get_product_ticker(self, product: str) -> Tick:
        """Get the latest tick for a product."""
        return self._get_and_decode(endpoints.ticker(product), _TICK)

    def get_trades(self, product: str) -> list[Trade]:
        """Get the latest trades for a product."""
        return self._get_and_decode(endpoints.trades(product), _TRADES)
