"""Shared fixtures for unit tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure src is importable
sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from paginator.domain.models.pagination import PaginationSettings, PaginationState
from paginator.infrastructure.adapters import InMemoryPageSource
from paginator.infrastructure.settings import PaginatorSettings

URL_PATTERN = "/staff/search/(:page)/(:rows)/(:search)/(:sort)/"


@pytest.fixture
def url_pattern() -> str:
    return URL_PATTERN


@pytest.fixture
def small_state() -> PaginationState:
    """100 items, 10 per page, page 5: fits in the default window."""
    return PaginationState(
        PaginationSettings(
            total_items=100,
            items_per_page=10,
            current_page_number=5,
            max_pages_to_show=10,
            url_pattern="/list/(:page)/",
        )
    )


@pytest.fixture
def large_state() -> PaginationState:
    """1000 items, 10 per page, page 50: needs the sliding window."""
    return PaginationState(
        PaginationSettings(
            total_items=1000,
            items_per_page=10,
            current_page_number=50,
            max_pages_to_show=10,
            url_pattern="/list/(:page)/",
        )
    )


@pytest.fixture
def empty_state() -> PaginationState:
    return PaginationState(PaginationSettings(total_items=0, items_per_page=10))


@pytest.fixture
def paginator_settings() -> PaginatorSettings:
    return PaginatorSettings(
        default_items_per_page=10,
        max_items_per_page=50,
        default_max_pages_to_show=7,
    )


@pytest.fixture
def page_source() -> InMemoryPageSource[int]:
    return InMemoryPageSource(range(1, 96))
