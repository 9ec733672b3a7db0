"""
Product (trading pair) model.

Products describe the currency pairs listed on the exchange together with
their order size limits.
"""

from pydantic import Field, model_validator

from src.gdax.model.types import StrFloat, WireRecord


class Product(WireRecord):
    """Trading pair metadata returned by ``GET /products``."""

    id: str = Field(description="Product symbol (e.g., 'ETH-USD')")
    base_currency: str
    quote_currency: str
    base_min_size: StrFloat = Field(description="Minimum order size in base currency")
    base_max_size: StrFloat = Field(description="Maximum order size in base currency")
    quote_increment: StrFloat = Field(description="Minimum quote price increment")
    display_name: str

    @model_validator(mode="after")
    def check_size_bounds(self) -> "Product":
        """Ensure the minimum order size does not exceed the maximum."""
        # negated so that a NaN bound also fails
        if not self.base_min_size <= self.base_max_size:
            raise ValueError(
                f"base_min_size ({self.base_min_size}) exceeds "
                f"base_max_size ({self.base_max_size})"
            )
        return self

    @property
    def symbol(self) -> str:
        """Alias for the product id."""
        return self.id
