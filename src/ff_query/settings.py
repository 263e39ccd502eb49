"""
Settings for ff-query, read from FF_QUERY_* environment variables.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class QuerySettings(BaseSettings):
    """Process-wide ff-query settings."""

    model_config = SettingsConfigDict(env_prefix="FF_QUERY_", extra="ignore")

    debug: bool = Field(
        default=False,
        description="Log every rendered query with its bind values interpolated",
    )
    log_format: Literal["console", "json", "null"] = Field(
        default="console", description="Logger used when a query has none injected"
    )
    log_colors: bool = Field(default=True, description="Colored console output")


@lru_cache
def get_settings() -> QuerySettings:
    """Get the cached settings instance."""
    return QuerySettings()


def reset_settings() -> None:
    """Drop cached settings so the environment is read again."""
    get_settings.cache_clear()
