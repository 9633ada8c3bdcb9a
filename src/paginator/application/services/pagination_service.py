"""Application service that builds pagination states for list views.

``PaginationService`` sits between the web layer and the domain. It
turns request parameters into a normalized ``PaginationState`` using the
configured process-wide defaults, and drives a record source through the
state's LIMIT/OFFSET pair without knowing how that source is stored.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Protocol, TypeVar

from paginator.application.schemas.pagination import PaginatedResponse, PaginationParams
from paginator.domain.models.pagination import PaginationSettings, PaginationState
from paginator.infrastructure.settings import PaginatorSettings, get_settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Port interfaces (dependency-inversion)
# ---------------------------------------------------------------------------

class PageSource(Protocol[T]):
    """Port: a counted record set that can return one LIMIT/OFFSET window."""

    def count(self) -> int: ...

    def list_page(self, offset: int, limit: int) -> tuple[list[T], int]: ...


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------

class PaginationService:
    """Creates pagination states and paginated responses."""

    def __init__(self, settings: Optional[PaginatorSettings] = None) -> None:
        self._settings = settings or get_settings()

    # -- helpers ----------------------------------------------------------

    def _params(self, params: Optional[PaginationParams]) -> PaginationParams:
        if params is None:
            return PaginationParams(
                size=self._settings.default_items_per_page,
                max_size=self._settings.max_items_per_page,
            )
        if params.max_size != self._settings.max_items_per_page:
            return PaginationParams(
                page=params.page,
                size=params.size,
                sort=params.sort,
                search=params.search,
                max_size=self._settings.max_items_per_page,
            )
        return params

    # -- public API -------------------------------------------------------

    def build_state(
        self,
        total_items: int,
        params: Optional[PaginationParams] = None,
        **options: Any,
    ) -> PaginationState:
        """Return a normalized state for *total_items* records.

        *options* are extra ``PaginationSettings`` fields (``url_pattern``,
        ``is_items_per_page_used`` ...); they win over anything derived
        from *params*.
        """
        params = self._params(params)
        data: dict[str, Any] = {
            "total_items": total_items,
            "items_per_page": params.size,
            "current_page_number": params.page,
            "max_pages_to_show": self._settings.default_max_pages_to_show,
        }
        if params.sort is not None:
            data["sort_pattern"] = params.sort
            data["is_sort_pattern_used"] = True
        if params.search is not None:
            data["search_pattern"] = params.search
            data["is_search_pattern_used"] = True
        data.update(options)

        state = PaginationState(PaginationSettings.model_validate(data))
        if state.current_page_number != params.page:
            logger.info(
                "Requested page %d outside 1..%d, showing page %d",
                params.page,
                state.page_count,
                state.current_page_number,
            )
        return state

    def paginate(
        self,
        source: PageSource[T],
        params: Optional[PaginationParams] = None,
        **options: Any,
    ) -> PaginatedResponse[T]:
        """Count *source*, fetch the current page and wrap both."""
        state = self.build_state(source.count(), params, **options)
        offset, limit = state.get_limit_per_page_offset()
        items, total = source.list_page(offset, limit)
        if total != state.total_items:
            # The source changed between count() and list_page().
            logger.warning(
                "Record count moved from %d to %d while paginating", state.total_items, total
            )
            state.set_total_items(total)
        return PaginatedResponse(state=state, items=items)
