"""
Pydantic v2 response schemas for pagination metadata.

``PaginationMeta`` is the JSON rendition of a ``PaginationState``: the
scalar navigation values plus the page window, for hosts that render
navigation client-side.
"""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from paginator.domain.models.page import PageDescriptor
from paginator.domain.models.pagination import PaginationState


class PageLink(BaseModel):
    """One entry of the page window."""

    model_config = ConfigDict(from_attributes=True)

    page_number: Union[int, str] = Field(..., description="Page number, or the ellipsis label.")
    page_url: Optional[str] = Field(default=None, description="Link target; null for ellipsis.")
    is_current_page: bool = Field(default=False)
    is_ellipsis: bool = Field(default=False)

    @classmethod
    def from_descriptor(cls, descriptor: PageDescriptor) -> PageLink:
        return cls.model_validate(descriptor)


class PaginationMeta(BaseModel):
    """Pagination metadata for one rendered list."""

    page: int = Field(..., description="Current page number (1-indexed).")
    page_size: int = Field(..., description="Items per page.")
    total_items: int = Field(..., description="Total number of items.")
    total_pages: int = Field(..., description="Total number of pages.")
    offset: int = Field(..., description="Zero-based offset of the first item on the page.")
    first_item: Optional[int] = Field(default=None, description="1-based index of the first item shown.")
    last_item: Optional[int] = Field(default=None, description="1-based index of the last item shown.")
    prev_page: Optional[int] = None
    next_page: Optional[int] = None
    prev_url: Optional[str] = None
    next_url: Optional[str] = None
    pages: list[PageLink] = Field(default_factory=list)

    @classmethod
    def from_state(cls, state: PaginationState) -> PaginationMeta:
        offset = state.get_page_offset()
        return cls(
            page=state.current_page_number,
            page_size=state.items_per_page,
            total_items=state.total_items,
            total_pages=state.page_count,
            offset=offset,
            first_item=state.get_current_page_first_item(),
            last_item=state.get_current_page_last_item(),
            prev_page=state.get_prev_page(),
            next_page=state.get_next_page(),
            prev_url=state.get_prev_url(),
            next_url=state.get_next_url(),
            pages=[PageLink.from_descriptor(page) for page in state.render_as_array()],
        )
