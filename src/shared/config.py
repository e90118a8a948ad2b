"""Runtime configuration for the extension.

Settings are read from environment variables and an optional ``.env`` file.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Extension settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: str = Field(default="development", description="development, staging or production")
    log_level: str = "INFO"
    log_format: Literal["console", "json", ""] = ""

    payment_gateway: Literal["braintree", "fake"] = Field(
        default="braintree",
        description="Gateway adapter used to serve requests",
    )

    braintree_environment: Literal["sandbox", "production"] = "sandbox"
    braintree_merchant_id: str = ""
    braintree_public_key: str = ""
    braintree_private_key: str = ""
    braintree_merchant_account: str | None = Field(
        default=None,
        description="Merchant account used when a request does not name one",
    )
    braintree_autocapture: bool = Field(
        default=False,
        description="Submit sales for settlement immediately",
    )

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """Load settings from the environment (cached)."""
    return Settings()
