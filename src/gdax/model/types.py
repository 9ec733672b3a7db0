"""
Field decoders shared by the GDAX market-data models.

The exchange transmits most decimal quantities as JSON strings so that no
precision is lost in transit. This module provides the single reusable rule
that turns those strings into numbers, plus the UUID and timestamp decoders
and the frozen base model every record builds on.

Candle prices are the exception: they arrive as native JSON numbers and use
the strict aliases below instead of ``StrFloat``.
"""

import re
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Annotated, Any, TypeVar
from uuid import UUID

from pydantic import (
    AfterValidator,
    AwareDatetime,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    Strict,
    model_validator,
)

T = TypeVar("T")

_UUID_PATTERN = re.compile(
    r"(?:[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
    r"|[0-9a-fA-F]{32})",
    re.ASCII,
)

# Plain decimal or exponent literal, or the nan / inf spellings
_DECIMAL_PATTERN = re.compile(
    r"[+-]?(?:(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?|inf|infinity|nan)",
    re.IGNORECASE | re.ASCII,
)

_RFC3339_PATTERN = re.compile(
    r"\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}:\d{2}(?:\.\d+)?(?:[Zz]|[+-]\d{2}:\d{2})",
    re.ASCII,
)


def from_str(parse: Callable[[str], T], expected: str) -> Callable[[Any], T]:
    """
    Build a decoder for a value that travels as a JSON string.

    Args:
        parse: Conversion from the raw string to the target type
        expected: Human-readable name of the expected value, used in errors

    Returns:
        A validator function suitable for ``BeforeValidator``

    """

    def decode(value: Any) -> T:
        if not isinstance(value, str):
            raise ValueError(
                f"expected {expected} encoded as a string, "
                f"got {type(value).__name__}: {value!r}"
            )
        try:
            return parse(value)
        except ValueError as e:
            raise ValueError(f"could not parse {expected} from {value!r}") from e

    return decode


def parse_decimal(value: str) -> float:
    """
    Parse a decimal string the way the exchange formats it.

    ``float()`` on its own also takes surrounding whitespace and digit-group
    underscores, neither of which is a valid number on the wire.
    """
    if not _DECIMAL_PATTERN.fullmatch(value):
        raise ValueError(f"malformed decimal string: {value!r}")
    return float(value)


def parse_uuid(value: str) -> UUID:
    """
    Parse a UUID in hyphenated or simple (32 hex digit) form.

    ``uuid.UUID`` alone tolerates braces, URN prefixes and hyphens in any
    position, so the layout is checked first.
    """
    if not _UUID_PATTERN.fullmatch(value):
        raise ValueError(f"badly formed UUID string: {value!r}")
    return UUID(value)


def expect_rfc3339(value: Any) -> str:
    """Reject anything but an RFC3339 string before pydantic parses it."""
    if not isinstance(value, str):
        raise ValueError(
            f"expected an RFC3339 timestamp string, "
            f"got {type(value).__name__}: {value!r}"
        )
    # pydantic alone would also take epoch seconds and dates without a time
    if not _RFC3339_PATTERN.fullmatch(value):
        raise ValueError(f"not an RFC3339 timestamp: {value!r}")
    return value


def to_utc(value: datetime) -> datetime:
    """Normalise an aware datetime to UTC."""
    return value.astimezone(UTC)


# Decimal quantity sent as a JSON string, decoded to float
StrFloat = Annotated[
    float, BeforeValidator(from_str(parse_decimal, "a decimal number"))
]

# UUID sent as a JSON string
StrUUID = Annotated[UUID, BeforeValidator(from_str(parse_uuid, "a UUID"))]

# RFC3339 timestamp with an explicit offset, normalised to UTC
RFC3339Time = Annotated[
    AwareDatetime, BeforeValidator(expect_rfc3339), AfterValidator(to_utc)
]

# Native JSON numbers; strings are rejected
NumberFloat = Annotated[float, Strict()]
Count = Annotated[int, Strict(), Field(ge=0)]


class WireRecord(BaseModel):
    """Immutable base for records decoded from API responses."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class PositionalRecord(WireRecord):
    """
    Record that also decodes from a JSON array.

    The book and candle endpoints send each entry as an array holding the
    field values in declaration order. The object form is accepted as well.
    """

    @model_validator(mode="before")
    @classmethod
    def decode_positional(cls, data: Any) -> Any:
        """Map an array payload onto the declared fields."""
        if isinstance(data, list | tuple):
            names = list(cls.model_fields)
            if len(data) != len(names):
                raise ValueError(
                    f"expected an array of {len(names)} elements "
                    f"({', '.join(names)}), got {len(data)}"
                )
            return dict(zip(names, data, strict=True))
        return data
