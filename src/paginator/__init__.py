"""Pagination metadata and page-window navigation for server-side list views."""

from paginator.domain.exceptions import InvalidArgumentError, InvalidStateError, PaginationError
from paginator.domain.models import (
    BASE_PAGE,
    NAVIGATION_ELLIPSIS,
    PAGE_PLACEHOLDER,
    ROWS_PLACEHOLDER,
    SEARCH_PLACEHOLDER,
    SORT_PLACEHOLDER,
    PageDescriptor,
    PaginationSettings,
    PaginationState,
)

__version__ = "1.0.0"

__all__ = [
    "BASE_PAGE",
    "NAVIGATION_ELLIPSIS",
    "PAGE_PLACEHOLDER",
    "ROWS_PLACEHOLDER",
    "SEARCH_PLACEHOLDER",
    "SORT_PLACEHOLDER",
    "InvalidArgumentError",
    "InvalidStateError",
    "PageDescriptor",
    "PaginationError",
    "PaginationSettings",
    "PaginationState",
]
