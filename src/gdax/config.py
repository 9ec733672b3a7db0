"""
Client configuration using Pydantic Settings.

Settings are read from ``GDAX_``-prefixed environment variables, so the
client can be pointed at a mock server without code changes.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.gdax import __version__

PUBLIC_API_URL = "https://api.gdax.com"


class ClientConfig(BaseSettings):
    """Public REST client configuration."""

    model_config = SettingsConfigDict(env_prefix="GDAX_")

    # Endpoint
    base_url: str = Field(
        default=PUBLIC_API_URL,
        min_length=1,
        description="Base URL of the public REST API",
    )

    # Transport settings
    timeout: float = Field(
        default=30.0,
        gt=0.0,
        description="Transport timeout in seconds for connect and read",
    )
    user_agent: str = Field(
        default=f"gdax-public-client/{__version__}",
        description="User-Agent header sent with every request",
    )

    log_level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )


# Global config instance
config = ClientConfig()
