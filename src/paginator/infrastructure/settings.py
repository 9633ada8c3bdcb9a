"""Paginator settings loaded from environment variables via Pydantic."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class PaginatorSettings(BaseSettings):
    """Process-wide defaults applied when a request omits page settings."""

    model_config = {"env_prefix": "PAGINATOR_", "case_sensitive": False}

    # Page sizing
    default_items_per_page: int = 20
    max_items_per_page: int = 100

    # Page window
    default_max_pages_to_show: int = 10

    # Logging
    service_name: str = "paginator"
    log_level: str = "INFO"


def get_settings() -> PaginatorSettings:
    """Return a freshly loaded settings object."""
    return PaginatorSettings()
