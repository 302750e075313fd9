"""Pagination settings loaded from environment variables via Pydantic."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class PagerSettings(BaseSettings):
    """Central configuration for pagination defaults."""

    model_config = {"env_prefix": "PAGER_", "case_sensitive": False}

    # Page size
    per_page: int = 10
    per_page_max: int = 1000

    # Links
    window_limit: int = 5
    numerate_first_last: bool = False
    link_class_name: str = "pagination"

    # Query parameters the rendering caller reads and writes
    start_key: str = "s"
    stop_key: str = "ss"
    argument_separator: str = "&"

    # Logging
    log_level: str = "INFO"


def get_settings() -> PagerSettings:
    """Return a freshly loaded settings instance."""
    return PagerSettings()
