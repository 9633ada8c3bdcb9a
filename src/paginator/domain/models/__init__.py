from paginator.domain.models.page import (
    BASE_PAGE,
    ELLIPSIS_PAGE,
    NAVIGATION_ELLIPSIS,
    PAGE_PLACEHOLDER,
    ROWS_PLACEHOLDER,
    SEARCH_PLACEHOLDER,
    SORT_PLACEHOLDER,
    PageDescriptor,
)
from paginator.domain.models.pagination import (
    PaginationSettings,
    PaginationState,
    coerce_settings,
    page_limit_offset,
)

__all__ = [
    "BASE_PAGE",
    "ELLIPSIS_PAGE",
    "NAVIGATION_ELLIPSIS",
    "PAGE_PLACEHOLDER",
    "ROWS_PLACEHOLDER",
    "SEARCH_PLACEHOLDER",
    "SORT_PLACEHOLDER",
    "PageDescriptor",
    "PaginationSettings",
    "PaginationState",
    "coerce_settings",
    "page_limit_offset",
]
