"""Dependency injection container for pagination services.

Wires settings into the domain validators and the application service,
exposing factory functions for callers that want a shared instance.
"""

from __future__ import annotations

from application.schemas.pagination import LinkOptions
from application.services.pagination_service import PaginationService
from domain.services.request_validator import RequestValidator
from infrastructure.observability.logging_config import get_logger, setup_logging
from infrastructure.settings import PagerSettings, get_settings

logger = get_logger(__name__)


class ServiceContainer:
    """Central DI container that owns all service instances."""

    def __init__(
        self,
        settings: PagerSettings | None = None,
        configure_logging: bool = False,
    ) -> None:
        self._settings = settings or get_settings()

        if configure_logging:
            setup_logging(self._settings.log_level)

        # Domain services
        self.request_validator = RequestValidator()

        # Application services
        self.link_options = LinkOptions.from_settings(self._settings)
        self.pagination_service = PaginationService(
            options=self.link_options,
            validator=self.request_validator,
            default_per_page=self._settings.per_page,
            default_per_page_max=self._settings.per_page_max,
        )

        logger.info(
            "ServiceContainer initialized",
            per_page=self._settings.per_page,
            window_limit=self._settings.window_limit,
        )

    @property
    def settings(self) -> PagerSettings:
        return self._settings


# Module-level singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Return the global container singleton."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """Reset the global container (for testing)."""
    global _container
    _container = None


def get_pagination_service() -> PaginationService:
    return get_container().pagination_service
