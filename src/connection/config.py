"""Connection configuration."""

import logging
from typing import Optional

from pydantic import BaseModel, Field

from src.utils.env_utils import parse_bool_env, parse_str_env

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "connectToDbUrl.com"


class ConnectionConfig(BaseModel):
    """Connection configuration from environment variables."""

    database_url: str = Field(
        default_factory=lambda: parse_str_env("DATABASE_URL", DEFAULT_DATABASE_URL),
        description="Url bound by acquire() when the caller passes none",
    )

    reject_empty_url: bool = Field(
        default_factory=lambda: parse_bool_env("CONNECTION_REJECT_EMPTY_URL", False),
        description="Refuse to create a connection for an empty or blank url",
    )


# Global config instance (singleton)
_config: Optional[ConnectionConfig] = None


def get_connection_config() -> ConnectionConfig:
    """Get connection configuration."""
    global _config
    if _config is None:
        _config = ConnectionConfig()
        logger.debug(
            f"Connection config loaded: url={_config.database_url}, "
            f"reject_empty_url={_config.reject_empty_url}"
        )
    return _config


def reset_connection_config() -> None:
    """Reset the config singleton (for testing)."""
    global _config
    _config = None
