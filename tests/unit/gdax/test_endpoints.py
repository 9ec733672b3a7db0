"""Tests for endpoint and query construction."""

from datetime import UTC, datetime, timedelta, timezone
from urllib.parse import parse_qs, urlparse

import pytest
from pydantic import ValidationError

from src.gdax import endpoints
from src.gdax.endpoints import EndpointRequest, to_rfc3339
from src.gdax.enums import BookLevel

BASE = "https://api.gdax.com"


class TestPaths:
    """Test the path and query of each operation."""

    def test_products(self) -> None:
        """Products have no query string."""
        assert endpoints.products().url(BASE) == "https://api.gdax.com/products"

    @pytest.mark.parametrize(
        ("level", "query"),
        [
            (BookLevel.BEST, "level=1"),
            (BookLevel.TOP_50, "level=2"),
            (BookLevel.FULL, "level=3"),
        ],
    )
    def test_order_book_levels(self, level: BookLevel, query: str) -> None:
        """Each detail level maps to its numeric query value."""
        url = urlparse(endpoints.order_book("ETH-USD", level).url(BASE))

        assert url.path == "/products/ETH-USD/book"
        assert url.query == query

    def test_ticker(self) -> None:
        """Ticker path embeds the product."""
        assert (
            endpoints.ticker("BTC-EUR").url(BASE)
            == "https://api.gdax.com/products/BTC-EUR/ticker"
        )

    def test_trades(self) -> None:
        """Trades path embeds the product."""
        assert (
            endpoints.trades("LTC-BTC").url(BASE)
            == "https://api.gdax.com/products/LTC-BTC/trades"
        )

    def test_product_inserted_verbatim(self) -> None:
        """Product symbols are not escaped."""
        assert endpoints.ticker("ETH-USD").path == "/products/ETH-USD/ticker"

    def test_base_url_trailing_slash(self) -> None:
        """A trailing slash on the base does not double up."""
        url = endpoints.products().url("http://127.0.0.1:8080/")

        assert url == "http://127.0.0.1:8080/products"


class TestCandles:
    """Test historic rate query construction."""

    def test_query_parameters(self) -> None:
        """Start and end are RFC3339, granularity is whole seconds."""
        request = endpoints.candles(
            "ETH-USD",
            datetime(2017, 1, 1, tzinfo=UTC),
            datetime(2017, 1, 2, tzinfo=UTC),
            timedelta(hours=1),
        )
        url = urlparse(request.url(BASE))

        assert url.path == "/products/ETH-USD/candles"
        assert parse_qs(url.query) == {
            "start": ["2017-01-01T00:00:00+00:00"],
            "end": ["2017-01-02T00:00:00+00:00"],
            "granularity": ["3600"],
        }

    def test_offset_is_escaped(self) -> None:
        """The '+' of the UTC offset is percent-encoded."""
        request = endpoints.candles(
            "ETH-USD",
            datetime(2017, 1, 1, tzinfo=UTC),
            datetime(2017, 1, 2, tzinfo=UTC),
            timedelta(minutes=1),
        )

        assert "%2B00%3A00" in request.query
        assert "+" not in request.query

    @pytest.mark.parametrize(
        ("granularity", "seconds"),
        [
            (timedelta(minutes=1), "60"),
            (timedelta(minutes=5), "300"),
            (timedelta(days=1), "86400"),
            (timedelta(seconds=90, milliseconds=900), "90"),
        ],
    )
    def test_granularity_whole_seconds(
        self, granularity: timedelta, seconds: str
    ) -> None:
        """Granularity is truncated to whole seconds."""
        request = endpoints.candles(
            "ETH-USD",
            datetime(2017, 1, 1, tzinfo=UTC),
            datetime(2017, 1, 2, tzinfo=UTC),
            granularity,
        )

        assert request.params["granularity"] == seconds


class TestTimestamps:
    """Test RFC3339 formatting of query timestamps."""

    def test_converts_to_utc(self) -> None:
        """Aware timestamps in other zones are converted to UTC."""
        plus_two = timezone(timedelta(hours=2))

        assert (
            to_rfc3339(datetime(2017, 1, 1, 2, 0, tzinfo=plus_two))
            == "2017-01-01T00:00:00+00:00"
        )

    def test_keeps_microseconds(self) -> None:
        """Sub-second precision is preserved."""
        value = datetime(2017, 1, 1, 0, 0, 0, 250000, tzinfo=UTC)

        assert to_rfc3339(value) == "2017-01-01T00:00:00.250000+00:00"

    def test_naive_rejected(self) -> None:
        """Naive datetimes are ambiguous and rejected."""
        with pytest.raises(ValueError, match="timezone-aware"):
            endpoints.candles(
                "ETH-USD",
                datetime(2017, 1, 1),
                datetime(2017, 1, 2, tzinfo=UTC),
                timedelta(minutes=1),
            )


class TestEndpointRequest:
    """Test the request value type."""

    def test_no_query_without_params(self) -> None:
        """No '?' is appended when there are no parameters."""
        assert EndpointRequest(path="/products").url(BASE).endswith("/products")

    def test_is_immutable(self) -> None:
        """Requests are frozen values."""
        request = endpoints.products()

        with pytest.raises(ValidationError):
            request.path = "/other"  # type: ignore[misc]
