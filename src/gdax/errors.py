"""
Error taxonomy for the GDAX public client.

Every failure surfaced by the client is one of three disjoint kinds:

- ``ApiError``: the request completed but the exchange answered with a
  non-success status. The body is never decoded.
- ``TransportError``: the request could not be completed (DNS, connection,
  TLS, timeout). The transport's own exception is kept as-is.
- ``DecodeError``: a response body arrived but did not match the expected
  shape, or a field failed its conversion.
"""

from typing import Any

from pydantic import ValidationError

_MAX_INPUT_REPR = 200


class GdaxError(Exception):
    """Base class for all client errors."""

    def __init__(self, message: str, url: str) -> None:
        """
        Initialize the error.

        Args:
            message: Human-readable description
            url: Request URL that produced the error

        """
        super().__init__(message)
        self.url = url


class ApiError(GdaxError):
    """Exchange returned a non-2xx HTTP status."""

    def __init__(self, url: str, status_code: int, reason: str = "") -> None:
        """
        Initialize the API error.

        Args:
            url: Request URL
            status_code: HTTP status code returned
            reason: HTTP reason phrase, if any

        """
        message = f"HTTP {status_code}"
        if reason:
            message += f" {reason}"
        super().__init__(f"{message} for {url}", url)
        self.status_code = status_code
        self.reason = reason


class TransportError(GdaxError):
    """Request could not be completed by the HTTP transport."""

    def __init__(self, url: str, original: Exception) -> None:
        """
        Initialize the transport error.

        Args:
            url: Request URL
            original: Exception raised by the transport

        """
        super().__init__(f"request to {url} failed: {original}", url)
        self.original = original


class DecodeError(GdaxError):
    """Response body did not decode into the expected model."""

    def __init__(self, url: str, errors: list[dict[str, Any]]) -> None:
        """
        Initialize the decode error.

        Args:
            url: Request URL
            errors: Field-level errors, each with ``loc``, ``msg`` and ``input``

        """
        super().__init__(
            f"could not decode response from {url}: {_summary(errors)}", url
        )
        self.errors = errors

    @classmethod
    def from_validation_error(cls, url: str, error: ValidationError) -> "DecodeError":
        """Build a decode error from a pydantic ValidationError."""
        errors = [
            {"loc": e["loc"], "msg": e["msg"], "input": e.get("input")}
            for e in error.errors(include_url=False)
        ]
        return cls(url, errors)

    @property
    def fields(self) -> list[str]:
        """Dotted locations of the failing fields."""
        return [_location(e["loc"]) for e in self.errors]


def _location(loc: tuple[Any, ...]) -> str:
    return ".".join(str(part) for part in loc) or "<root>"


def _summary(errors: list[dict[str, Any]]) -> str:
    if not errors:
        return "unknown error"

    first = errors[0]
    raw = repr(first["input"])
    if len(raw) > _MAX_INPUT_REPR:
        raw = raw[: _MAX_INPUT_REPR - 3] + "..."
    summary = f"{_location(first['loc'])}: {first['msg']} (input={raw})"
    if len(errors) > 1:
        summary += f" and {len(errors) - 1} more error(s)"
    return summary
