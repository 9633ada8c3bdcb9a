from __future__ import annotations

import logging
from typing import Callable, Optional

from paginator.domain.models.page import BASE_PAGE, ELLIPSIS_PAGE, PageDescriptor

logger = logging.getLogger(__name__)

PageUrlFactory = Callable[[int], Optional[str]]


def sliding_range(page_count: int, current_page: int, max_pages_to_show: int) -> tuple[int, int]:
    """Return the inclusive ``(start, end)`` block rendered between the first and last page."""
    number_adjacents = (max_pages_to_show - 3) // 2

    if current_page + number_adjacents > page_count:
        sliding_start = page_count - max_pages_to_show + 2
    else:
        sliding_start = current_page - number_adjacents
    sliding_start = max(sliding_start, 2)

    sliding_end = min(sliding_start + max_pages_to_show - 3, page_count - 1)
    return sliding_start, sliding_end


def build_page_window(
    page_count: int,
    current_page: int,
    max_pages_to_show: int,
    page_url: PageUrlFactory,
) -> list[PageDescriptor]:
    """Collapse ``1..page_count`` into at most *max_pages_to_show* page entries.

    Page 1 and the last page are always present once ellipsis mode kicks
    in; collapsed runs are represented by :data:`ELLIPSIS_PAGE`.
    """

    def _page(number: int) -> PageDescriptor:
        return PageDescriptor(
            page_number=number,
            page_url=page_url(number),
            is_current_page=number == current_page,
        )

    if page_count <= 1:
        return []

    if page_count <= max_pages_to_show:
        return [_page(number) for number in range(BASE_PAGE, page_count + 1)]

    sliding_start, sliding_end = sliding_range(page_count, current_page, max_pages_to_show)
    logger.debug(
        "Sliding window %d..%d of %d pages (current=%d)",
        sliding_start,
        sliding_end,
        page_count,
        current_page,
    )

    pages = [_page(BASE_PAGE)]
    if sliding_start > 2:
        pages.append(ELLIPSIS_PAGE)
    pages.extend(_page(number) for number in range(sliding_start, sliding_end + 1))
    if sliding_end < page_count - 1:
        pages.append(ELLIPSIS_PAGE)
    pages.append(_page(page_count))
    return pages
