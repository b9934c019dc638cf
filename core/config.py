"""Application configuration.

Loaded once per process from environment variables (a local .env file is
read first via python-dotenv). POSTGRES_URL is required; everything else
has a default.
"""

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

# Config field -> environment variable
_ENV_VARS = {
    "valkey_url": "VALKEY_URL",
    "listing_path": "INVOICES_LISTING_PATH",
    "strict_not_found": "INVOICES_STRICT_NOT_FOUND",
    "view_cache_ttl_seconds": "VIEW_CACHE_TTL_SECONDS",
    "log_level": "LOG_LEVEL",
}

_config_instance: "AppConfig | None" = None


class AppConfig(BaseModel):
    """Process-wide settings for the invoice dashboard."""

    postgres_url: str = Field(
        ...,
        description="PostgreSQL connection string",
        min_length=1,
    )
    valkey_url: str = Field(
        default="redis://localhost:6379/0",
        description="Valkey/Redis URL for the view cache",
    )
    listing_path: str = Field(
        default="/dashboard/invoices",
        description="Invoice listing view: revalidated after mutations and used as redirect target",
        pattern=r"^/",
    )
    strict_not_found: bool = Field(
        default=False,
        description="Raise NotFoundError when update/delete match no invoice instead of a silent no-op",
    )
    view_cache_ttl_seconds: int = Field(
        default=300,
        description="Lifetime of a memoized view",
        ge=1,
        le=86400,
    )
    log_level: str = Field(
        default="INFO",
        description="Root logging level",
    )

    @classmethod
    def from_env(cls) -> "AppConfig":
        """
        Build config from environment variables.

        Raises:
            ValueError: If POSTGRES_URL is missing
            pydantic.ValidationError: If a variable holds an invalid value
        """
        postgres_url = os.getenv("POSTGRES_URL")
        if not postgres_url:
            raise ValueError("POSTGRES_URL environment variable is required")

        values = {"postgres_url": postgres_url}
        for field, env_var in _ENV_VARS.items():
            value = os.getenv(env_var)
            if value is not None:
                values[field] = value

        return cls(**values)


def get_config() -> AppConfig:
    """Process-wide config, read from the environment on first call."""
    global _config_instance
    if _config_instance is None:
        load_dotenv()
        _config_instance = AppConfig.from_env()
        logger.info("Configuration loaded")
    return _config_instance


def reset_config() -> None:
    """Drop the cached config so the next get_config() re-reads the environment."""
    global _config_instance
    _config_instance = None
