"""
Endpoint and query construction for the public market-data API.

Each builder returns an ``EndpointRequest`` holding the path and query
parameters of one operation; the client joins it with its configured base
URL. Product symbols are inserted into the path as given.
"""

from datetime import UTC, datetime, timedelta
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, Field

from src.gdax.enums import BookLevel


class EndpointRequest(BaseModel):
    """Path and query parameters of a single GET request."""

    path: str
    params: dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @property
    def query(self) -> str:
        """Percent-encoded query string, without the leading '?'."""
        return urlencode(self.params)

    def url(self, base_url: str) -> str:
        """
        Build the absolute URL for this request.

        Args:
            base_url: API base (e.g., "https://api.gdax.com")

        Returns:
            Base URL joined with the path and query string

        """
        url = base_url.rstrip("/") + self.path
        if self.params:
            url += "?" + self.query
        return url


def to_rfc3339(value: datetime) -> str:
    """
    Format an aware datetime as an RFC3339 timestamp in UTC.

    Raises:
        ValueError: If the datetime has no timezone

    """
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError(f"timestamp must be timezone-aware: {value!r}")
    return value.astimezone(UTC).isoformat()


def products() -> EndpointRequest:
    """List all products."""
    return EndpointRequest(path="/products")


def order_book(product: str, level: BookLevel) -> EndpointRequest:
    """Order book snapshot for a product at the given detail level."""
    return EndpointRequest(
        path=f"/products/{product}/book",
        params={"level": str(int(level))},
    )


def candles(
    product: str,
    start: datetime,
    end: datetime,
    granularity: timedelta,
) -> EndpointRequest:
    """
    Historic rates for a product.

    Args:
        product: Product symbol (e.g., "ETH-USD")
        start: Start of the range (timezone-aware)
        end: End of the range (timezone-aware)
        granularity: Bucket width; sent as whole seconds

    Returns:
        Request for the candles endpoint

    """
    return EndpointRequest(
        path=f"/products/{product}/candles",
        params={
            "start": to_rfc3339(start),
            "end": to_rfc3339(end),
            "granularity": str(int(granularity.total_seconds())),
        },
    )


def ticker(product: str) -> EndpointRequest:
    """Latest tick for a product."""
    return EndpointRequest(path=f"/products/{product}/ticker")


def trades(product: str) -> EndpointRequest:
    """Latest trades for a product."""
    return EndpointRequest(path=f"/products/{product}/trades")
