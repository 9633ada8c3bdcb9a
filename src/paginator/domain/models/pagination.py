"""
Pagination state for a bounded, counted result set.

``PaginationState`` owns the page-related settings of one request
(total count, page size, active page, window width, link pattern) and
derives everything a template needs from them: page count, SQL
offset, previous/next links, first/last item of the current page, and
the windowed list of page descriptors.

Typical use::

    state = PaginationState(
        PaginationSettings(
            total_items=1082,
            items_per_page=20,
            current_page_number=5,
            url_pattern="/staff/edit-search/page-(:page)/show-(:rows)/(:sort)/",
            sort_pattern="lastname-firstname",
            is_items_per_page_used=True,
            is_sort_pattern_used=True,
        )
    )
    offset, limit = state.get_limit_per_page_offset()
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from paginator.domain.exceptions import InvalidArgumentError, InvalidStateError
from paginator.domain.models.page import (
    BASE_PAGE,
    DEFAULT_ITEMS_PER_PAGE,
    DEFAULT_MAX_PAGES_TO_SHOW,
    MIN_PAGES_TO_SHOW,
    PageDescriptor,
)
from paginator.domain.services.page_window import build_page_window
from paginator.domain.services.url_builder import build_page_url

logger = logging.getLogger(__name__)

LimitOffsetStrategy = Callable[["PaginationState", Optional[int]], tuple[int, int]]
OverridePerPageOffset = Callable[[Optional[int]], Any]


# ---------------------------------------------------------------------------
# Settings bundle
# ---------------------------------------------------------------------------


class PaginationSettings(BaseModel):
    """Typed settings bundle accepted by :class:`PaginationState`.

    Every field is optional; only the fields that were actually supplied
    are applied. Unknown keys are ignored and the camelCase names used by
    older front controllers (``itemsPerPage``, ``totalRecordCount`` ...)
    are accepted as aliases.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    total_items: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("total_items", "totalItems", "totalRecordCount"),
    )
    items_per_page: Optional[int] = Field(
        default=None, validation_alias=AliasChoices("items_per_page", "itemsPerPage")
    )
    current_page_number: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("current_page_number", "currentPageNumber"),
    )
    max_pages_to_show: Optional[int] = Field(
        default=None, validation_alias=AliasChoices("max_pages_to_show", "maxPagesToShow")
    )
    url_pattern: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("url_pattern", "urlPattern")
    )
    sort_pattern: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("sort_pattern", "sortPattern")
    )
    search_pattern: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("search_pattern", "searchPattern")
    )
    is_url_pattern_used: Optional[bool] = Field(
        default=None,
        validation_alias=AliasChoices("is_url_pattern_used", "isUrlPatternUsed"),
    )
    is_items_per_page_used: Optional[bool] = Field(
        default=None,
        validation_alias=AliasChoices("is_items_per_page_used", "isItemsPerPageUsed"),
    )
    is_sort_pattern_used: Optional[bool] = Field(
        default=None,
        validation_alias=AliasChoices("is_sort_pattern_used", "isSortPatternUsed"),
    )
    is_search_pattern_used: Optional[bool] = Field(
        default=None,
        validation_alias=AliasChoices("is_search_pattern_used", "isSearchPatternUsed"),
    )

    @field_validator(
        "total_items", "items_per_page", "current_page_number", "max_pages_to_show", mode="before"
    )
    @classmethod
    def _truncate_numbers(cls, value: Any) -> Any:
        # "7.9" and 7.9 both become 7, matching an integer cast.
        if isinstance(value, str):
            text = value.strip()
            try:
                return int(text)
            except ValueError:
                value = float(text)
        if isinstance(value, float):
            try:
                return int(value)
            except OverflowError as exc:
                raise ValueError(f"{value!r} is not a finite number") from exc
        return value

    def supplied(self) -> dict[str, Any]:
        """Return only the fields the caller actually set to a value."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


SettingsInput = Union[PaginationSettings, Mapping[str, Any], None]


def coerce_settings(settings: SettingsInput = None, **overrides: Any) -> PaginationSettings:
    """Merge *settings* and keyword *overrides* into a :class:`PaginationSettings`."""
    if isinstance(settings, PaginationSettings):
        data: dict[str, Any] = settings.supplied()
    else:
        data = dict(settings or {})
    data.update(overrides)
    return PaginationSettings.model_validate(data)


# ---------------------------------------------------------------------------
# Limit/offset strategies
# ---------------------------------------------------------------------------


def page_limit_offset(state: PaginationState, page_number: Optional[int] = None) -> tuple[int, int]:
    """Default strategy: the ``(offset, limit)`` pair of *page_number*.

    ``None`` means the current page.
    """
    offset = state.get_page_offset()
    if page_number is None:
        return offset, state.items_per_page
    page = max(int(page_number), BASE_PAGE)
    return (page - BASE_PAGE) * state.items_per_page, state.items_per_page


_DEFAULT_STRATEGY: Any = object()


# ---------------------------------------------------------------------------
# State
# ---------------------------------------------------------------------------


class PaginationState:
    """Pagination settings plus derived values for one result set.

    Business rules enforced after every mutation:

    - ``items_per_page`` is never < 1 once normalized (0 is clamped to 1),
    - ``max_pages_to_show`` is never < 3,
    - ``current_page_number`` is never < 1 nor beyond ``page_count``.

    Negative totals and negative page sizes are rejected with
    :class:`InvalidArgumentError` before anything is mutated.
    """

    def __init__(
        self,
        settings: SettingsInput = None,
        *,
        limit_offset_strategy: Optional[LimitOffsetStrategy] = _DEFAULT_STRATEGY,
        **overrides: Any,
    ) -> None:
        self._total_items: int = 0
        self._items_per_page: int = DEFAULT_ITEMS_PER_PAGE
        self._current_page_number: int = BASE_PAGE
        self._max_pages_to_show: int = DEFAULT_MAX_PAGES_TO_SHOW
        self._page_count: int = 0
        self._page_offset: int = 0
        self._url_pattern: str = ""
        self._sort_pattern: str = ""
        self._search_pattern: str = ""
        self._is_url_pattern_used: bool = True
        self._is_items_per_page_used: bool = False
        self._is_sort_pattern_used: bool = False
        self._is_search_pattern_used: bool = False

        self._limit_offset_strategy: Optional[LimitOffsetStrategy] = (
            page_limit_offset
            if limit_offset_strategy is _DEFAULT_STRATEGY
            else limit_offset_strategy
        )

        self._load(coerce_settings(settings, **overrides))

    def __repr__(self) -> str:
        return (
            f"PaginationState(total_items={self._total_items}, "
            f"items_per_page={self._items_per_page}, "
            f"current_page_number={self.current_page_number}, "
            f"page_count={self._page_count})"
        )

    # -- helpers ----------------------------------------------------------

    @staticmethod
    def _validate(values: Mapping[str, Any]) -> None:
        total_items = values.get("total_items")
        if total_items is not None and total_items < 0:
            raise InvalidArgumentError("total_items", total_items, "must not be negative")
        items_per_page = values.get("items_per_page")
        if items_per_page is not None and items_per_page < 0:
            raise InvalidArgumentError("items_per_page", items_per_page, "must not be negative")
        max_pages = values.get("max_pages_to_show")
        if max_pages is not None and max_pages < MIN_PAGES_TO_SHOW:
            raise InvalidArgumentError(
                "max_pages_to_show", max_pages, f"cannot be less than {MIN_PAGES_TO_SHOW}"
            )

    def _load(self, settings: PaginationSettings) -> None:
        """Validate, apply, then re-derive page count and current page."""
        values = settings.supplied()
        self._validate(values)
        for name, value in values.items():
            setattr(self, f"_{name}", value)
        self._update_page_count()
        self._normalize_page_counts()

    def _update_page_count(self) -> None:
        if self._items_per_page == 0:
            self._page_count = 0
        else:
            self._page_count = -(-self._total_items // self._items_per_page)

    def _normalize_page_counts(self) -> None:
        if self._current_page_number > self._page_count or self._current_page_number < BASE_PAGE:
            if self._current_page_number != BASE_PAGE:
                logger.debug(
                    "Current page %d outside 1..%d, reset to %d",
                    self._current_page_number,
                    self._page_count,
                    BASE_PAGE,
                )
            self._current_page_number = BASE_PAGE
        if self._items_per_page < 1:
            self._items_per_page = BASE_PAGE

    def _update_page_offset(self) -> None:
        self._normalize_page_counts()
        self._page_offset = abs(
            self._current_page_number * self._items_per_page - self._items_per_page
        )

    def _link_url(self, page_number: int) -> Optional[str]:
        # Page entries and prev/next links share this rule.
        if not (self._is_url_pattern_used and self._url_pattern):
            return None
        return self.get_page_url(page_number)

    # -- settings ---------------------------------------------------------

    def recalculate(self, settings: SettingsInput = None, **overrides: Any) -> None:
        """Apply a subset of settings and re-run the full normalization.

        Raises
        ------
        InvalidStateError
            If no limit/offset strategy has been wired yet.
        InvalidArgumentError
            If a supplied value breaks a business rule; nothing is changed.
        """
        if self._limit_offset_strategy is None:
            raise InvalidStateError(
                "limit/offset strategy not found, set it using set_limit_offset_strategy()"
            )
        self._load(coerce_settings(settings, **overrides))

    def set_limit_offset_strategy(self, strategy: LimitOffsetStrategy) -> None:
        self._limit_offset_strategy = strategy

    def set_max_pages_to_show(self, max_pages_to_show: int) -> None:
        max_pages_to_show = int(max_pages_to_show)
        if max_pages_to_show < MIN_PAGES_TO_SHOW:
            raise InvalidArgumentError(
                "max_pages_to_show",
                max_pages_to_show,
                f"cannot be less than {MIN_PAGES_TO_SHOW}",
            )
        self._max_pages_to_show = max_pages_to_show

    def set_items_per_page(self, items_per_page: int) -> None:
        items_per_page = int(items_per_page)
        self._validate({"items_per_page": items_per_page})
        self._items_per_page = items_per_page
        self._update_page_count()

    def set_total_items(self, total_items: int) -> None:
        total_items = int(total_items)
        self._validate({"total_items": total_items})
        self._total_items = total_items
        self._update_page_count()

    def set_current_page_number(self, current_page_number: Optional[int] = None) -> None:
        if current_page_number is not None:
            self._current_page_number = int(current_page_number)
        self._normalize_page_counts()

    def set_url_pattern(self, url_pattern: str) -> None:
        self._url_pattern = url_pattern

    # -- read access ------------------------------------------------------

    @property
    def total_items(self) -> int:
        return self._total_items

    @property
    def items_per_page(self) -> int:
        return self._items_per_page

    @property
    def page_count(self) -> int:
        return self._page_count

    def get_num_pages(self) -> int:
        return self._page_count

    @property
    def current_page_number(self) -> int:
        if self._current_page_number > self._page_count:
            return BASE_PAGE
        return self._current_page_number

    @property
    def max_pages_to_show(self) -> int:
        return self._max_pages_to_show

    @property
    def url_pattern(self) -> str:
        return self._url_pattern

    @property
    def sort_pattern(self) -> str:
        return self._sort_pattern

    @property
    def search_pattern(self) -> str:
        return self._search_pattern

    # -- derived queries --------------------------------------------------

    def get_page_offset(self) -> int:
        """Zero-based offset of the current page; re-validates state first."""
        self._update_page_offset()
        return self._page_offset

    def get_next_page(self) -> Optional[int]:
        current = self.current_page_number
        return current + 1 if current < self._page_count else None

    def get_prev_page(self) -> Optional[int]:
        current = self.current_page_number
        return current - 1 if current > BASE_PAGE else None

    def get_page_url(self, page_number: int) -> str:
        return build_page_url(
            self._url_pattern,
            int(page_number),
            items_per_page=self._items_per_page if self._is_items_per_page_used else None,
            sort_pattern=(self._sort_pattern or "") if self._is_sort_pattern_used else None,
            search_pattern=(self._search_pattern or "") if self._is_search_pattern_used else None,
        )

    def get_next_url(self) -> Optional[str]:
        next_page = self.get_next_page()
        return self._link_url(next_page) if next_page is not None else None

    def get_prev_url(self) -> Optional[str]:
        prev_page = self.get_prev_page()
        return self._link_url(prev_page) if prev_page is not None else None

    def get_current_page_first_item(self) -> Optional[int]:
        first = (self.current_page_number - 1) * self._items_per_page + 1
        return None if first > self._total_items else first

    def get_current_page_last_item(self) -> Optional[int]:
        first = self.get_current_page_first_item()
        if first is None:
            return None
        return min(first + self._items_per_page - 1, self._total_items)

    def get_limit_per_page_offset(
        self,
        override_per_page_offset: Optional[OverridePerPageOffset] = None,
        new_page: Optional[int] = None,
    ) -> Any:
        """Return ``(offset, items_per_page)`` for a LIMIT/OFFSET clause.

        When *override_per_page_offset* is given the state is still
        normalized, then the override's result for *new_page* is returned
        unchanged.
        """
        offset = self.get_page_offset()
        if override_per_page_offset is not None:
            return override_per_page_offset(new_page)
        return offset, self._items_per_page

    def limit_offset_for_page(self, page_number: Optional[int] = None) -> tuple[int, int]:
        """Run the wired limit/offset strategy for *page_number*."""
        if self._limit_offset_strategy is None:
            raise InvalidStateError(
                "limit/offset strategy not found, set it using set_limit_offset_strategy()"
            )
        return self._limit_offset_strategy(self, page_number)

    def render_as_array(self) -> list[PageDescriptor]:
        """Ordered page descriptors for the navigation window."""
        return build_page_window(
            self._page_count,
            self.current_page_number,
            self._max_pages_to_show,
            self._link_url,
        )
