"""Tests for infrastructure.settings and infrastructure.container."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from structlog.testing import capture_logs

from application.services.pagination_service import PaginationService
from infrastructure.container import (
    ServiceContainer,
    get_container,
    get_pagination_service,
    reset_container,
)
from infrastructure.settings import PagerSettings, get_settings


@pytest.fixture(autouse=True)
def _fresh_container() -> Iterator[None]:
    reset_container()
    yield
    reset_container()


class TestPagerSettings:
    def test_defaults(self) -> None:
        settings = PagerSettings()
        assert settings.per_page == 10
        assert settings.per_page_max == 1000
        assert settings.window_limit == 5
        assert settings.numerate_first_last is False
        assert settings.link_class_name == "pagination"
        assert settings.start_key == "s"
        assert settings.stop_key == "ss"
        assert settings.argument_separator == "&"
        assert settings.log_level == "INFO"

    def test_reads_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PAGER_WINDOW_LIMIT", "9")
        monkeypatch.setenv("PAGER_NUMERATE_FIRST_LAST", "true")
        settings = get_settings()
        assert settings.window_limit == 9
        assert settings.numerate_first_last is True

    def test_env_names_are_case_insensitive(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("pager_per_page", "25")
        assert get_settings().per_page == 25


class TestServiceContainer:
    def test_wires_service_from_settings(self) -> None:
        container = ServiceContainer(settings=PagerSettings(per_page=20, window_limit=3))
        assert isinstance(container.pagination_service, PaginationService)
        assert container.link_options.window_limit == 3

        state = container.pagination_service.paginate(page=1, total_records=100)
        assert state.per_page == 20
        assert state.total_pages == 5

    def test_logs_initialization(self) -> None:
        with capture_logs() as logs:
            ServiceContainer(settings=PagerSettings(per_page=15))
        events = [entry for entry in logs if entry["event"] == "ServiceContainer initialized"]
        assert len(events) == 1
        assert events[0]["per_page"] == 15
        assert events[0]["log_level"] == "info"

    def test_exposes_settings(self) -> None:
        settings = PagerSettings()
        assert ServiceContainer(settings=settings).settings is settings

    def test_singleton(self) -> None:
        assert get_container() is get_container()

    def test_reset(self) -> None:
        first = get_container()
        reset_container()
        assert get_container() is not first

    def test_service_factory(self) -> None:
        assert get_pagination_service() is get_container().pagination_service
