from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Optional, Union

BASE_PAGE: int = 1

DEFAULT_ITEMS_PER_PAGE: int = 20
DEFAULT_MAX_PAGES_TO_SHOW: int = 10
MIN_PAGES_TO_SHOW: int = 3

PAGE_PLACEHOLDER: str = "(:page)"
ROWS_PLACEHOLDER: str = "(:rows)"
SORT_PLACEHOLDER: str = "(:sort)"
SEARCH_PLACEHOLDER: str = "(:search)"

NAVIGATION_ELLIPSIS: str = "· · ·"
NAVIGATION_ARROW_PREV: str = "❮ Prev"
NAVIGATION_ARROW_NEXT: str = "Next ❯"
TITLE_PREV: str = "Select the previous page"
TITLE_NEXT: str = "Select the next page"


@dataclass(frozen=True)
class PageDescriptor:
    """One entry of a rendered page window.

    ``page_number`` holds :data:`NAVIGATION_ELLIPSIS` instead of a number
    when the descriptor stands for a run of collapsed pages.
    """

    page_number: Union[int, str]
    page_url: Optional[str] = None
    is_current_page: bool = False

    @property
    def is_ellipsis(self) -> bool:
        return self.page_number == NAVIGATION_ELLIPSIS

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


ELLIPSIS_PAGE = PageDescriptor(page_number=NAVIGATION_ELLIPSIS, page_url=None, is_current_page=False)
