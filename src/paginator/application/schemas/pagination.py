"""Pagination helpers for paginated list queries.

Provides a ``PaginationParams`` value object that enforces sensible page /
size defaults and upper bounds, and a generic ``PaginatedResponse``
container that pairs one page of items with its ``PaginationState``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar

from paginator.domain.models.page import BASE_PAGE, DEFAULT_ITEMS_PER_PAGE, PageDescriptor
from paginator.domain.models.pagination import PaginationState

T = TypeVar("T")

_MAX_SIZE: int = 100


@dataclass(frozen=True)
class PaginationParams:
    """Immutable pagination request parameters.

    ``page`` is 1-based.  ``size`` is clamped to [1, ``max_size``].
    ``sort`` and ``search`` feed the ``(:sort)`` / ``(:search)``
    placeholders of the link pattern when present.
    """

    page: int = BASE_PAGE
    size: int = DEFAULT_ITEMS_PER_PAGE
    sort: Optional[str] = None
    search: Optional[str] = None
    max_size: int = _MAX_SIZE

    def __post_init__(self) -> None:
        # frozen=True requires object.__setattr__ for validation fixups
        object.__setattr__(self, "page", max(BASE_PAGE, int(self.page)))
        object.__setattr__(self, "size", max(1, min(int(self.size), self.max_size)))

    @property
    def offset(self) -> int:
        """Zero-based offset suitable for SQL ``OFFSET`` clauses."""
        return (self.page - 1) * self.size


@dataclass
class PaginatedResponse(Generic[T]):
    """Generic wrapper returned by paginated list operations."""

    state: PaginationState
    items: List[T] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.state.total_items

    @property
    def page(self) -> int:
        return self.state.current_page_number

    @property
    def pages(self) -> int:
        """Total number of pages (0 for an empty result set)."""
        return self.state.page_count

    @property
    def has_next(self) -> bool:
        return self.state.get_next_page() is not None

    @property
    def has_previous(self) -> bool:
        return self.state.get_prev_page() is not None

    @property
    def page_links(self) -> list[PageDescriptor]:
        return self.state.render_as_array()
