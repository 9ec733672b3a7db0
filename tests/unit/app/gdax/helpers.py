"""Test helpers for GDAX client tests."""

import json
from pathlib import Path
from typing import Any
from unittest.mock import Mock

import requests

from src.gdax.client import PublicClient
from src.gdax.config import ClientConfig

TEST_BASE_URL = "https://api.example.test"


def load_fixture(filename: str) -> Any:
    """
    Load a JSON fixture file.

    Args:
        filename: Relative path from fixtures directory

    Returns:
        Parsed JSON data

    Example:
        products = load_fixture("gdax/products.json")
    """
    fixtures_dir = Path(__file__).parent.parent.parent.parent / "fixtures"
    fixture_path = fixtures_dir / filename

    with fixture_path.open() as f:
        return json.load(f)


def make_response(
    status_code: int = 200,
    body: Any = None,
    reason: str = "",
) -> requests.Response:
    """
    Build a ``requests.Response`` without touching the network.

    Args:
        status_code: HTTP status to report
        body: Raw bytes, or any JSON-serializable value
        reason: HTTP reason phrase

    """
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    if body is None:
        response._content = b""
    elif isinstance(body, bytes):
        response._content = body
    else:
        response._content = json.dumps(body).encode()
    return response


class ClientBuilder:
    """Builder for a PublicClient backed by a mock session."""

    def __init__(self) -> None:
        """Initialize with a 200 empty-list response."""
        self.session = Mock(spec=requests.Session)
        self.session.get.return_value = make_response(200, [])
        self._base_url = TEST_BASE_URL

    def with_base_url(self, base_url: str) -> "ClientBuilder":
        """Set the API base URL."""
        self._base_url = base_url
        return self

    def responding(
        self, status_code: int = 200, body: Any = None, reason: str = ""
    ) -> "ClientBuilder":
        """Make every GET return the given response."""
        self.session.get.return_value = make_response(status_code, body, reason)
        return self

    def responding_with_fixture(self, filename: str) -> "ClientBuilder":
        """Make every GET return a fixture as a 200 response."""
        return self.responding(200, load_fixture(filename))

    def raising(self, error: Exception) -> "ClientBuilder":
        """Make every GET raise the given transport exception."""
        self.session.get.side_effect = error
        return self

    def build(self) -> PublicClient:
        """Build the client."""
        config = ClientConfig(base_url=self._base_url, timeout=5.0)
        return PublicClient(config=config, session=self.session)


def requested_url(session: Mock) -> str:
    """Return the URL passed to the last ``session.get`` call."""
    return session.get.call_args.args[0]
