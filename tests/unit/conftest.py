"""Shared fixtures for unit tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure src is importable
sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from application.schemas.pagination import LinkOptions
from application.services.pagination_service import PaginationService
from domain.models.pagination import PaginationState
from domain.services.request_validator import RequestValidator
from domain.services.window_selector import CenteredWindowSelector, WindowSelector


@pytest.fixture
def ten_page_state() -> PaginationState:
    """95 records at 10 per page: ten pages, the last one partial."""
    return PaginationState(page=1, per_page=10).paginate(95)


@pytest.fixture
def selector() -> WindowSelector:
    return WindowSelector()


@pytest.fixture
def centered_selector() -> CenteredWindowSelector:
    return CenteredWindowSelector()


@pytest.fixture
def request_validator() -> RequestValidator:
    return RequestValidator()


@pytest.fixture
def link_options() -> LinkOptions:
    return LinkOptions()


@pytest.fixture
def pagination_service(link_options: LinkOptions) -> PaginationService:
    return PaginationService(options=link_options)
