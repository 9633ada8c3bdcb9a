"""
Markup renderers for pagination navigation.

Two views are provided over the same ``PaginationState``:

- :class:`CompactPaginationRenderer` -- previous button, a ``<select>``
  over the page window, next button.
- :class:`FullPaginationRenderer` -- a ``<ul>`` list with one item per
  window entry between previous and next links.

Both render Jinja2 templates shipped in ``templates/pagination``; hosts
may pass their own ``Environment`` to override them.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from paginator.domain.models.page import (
    NAVIGATION_ARROW_NEXT,
    NAVIGATION_ARROW_PREV,
    NAVIGATION_ELLIPSIS,
    TITLE_NEXT,
    TITLE_PREV,
)
from paginator.domain.models.pagination import PaginationState
from paginator.presentation.schemas import PaginationMeta

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates" / "pagination"


def get_environment() -> Environment:
    """Return a Jinja2 environment loading the bundled pagination templates."""
    return Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def build_context(state: PaginationState) -> dict[str, Any]:
    """Template variables shared by both views."""
    meta = PaginationMeta.from_state(state)
    return {
        "meta": meta,
        "pages": meta.pages,
        "page_count": meta.total_pages,
        "current_page": meta.page,
        "prev_page": meta.prev_page,
        "next_page": meta.next_page,
        "prev_url": meta.prev_url,
        "next_url": meta.next_url,
        "arrow_prev": NAVIGATION_ARROW_PREV,
        "arrow_next": NAVIGATION_ARROW_NEXT,
        "title_prev": TITLE_PREV,
        "title_next": TITLE_NEXT,
        "ellipsis": NAVIGATION_ELLIPSIS,
    }


class PaginationRenderer:
    """Renders a pagination state through one template."""

    template_name: str = ""

    def __init__(self, env: Optional[Environment] = None) -> None:
        self.env = env or get_environment()

    def render(self, state: PaginationState, **extra: Any) -> str:
        context = build_context(state)
        context.update(extra)
        logger.debug("Rendering %s for %r", self.template_name, state)
        return self.env.get_template(self.template_name).render(**context).strip()


class CompactPaginationRenderer(PaginationRenderer):
    template_name = "compact.html"


class FullPaginationRenderer(PaginationRenderer):
    template_name = "full.html"


def render_as_json(state: PaginationState) -> str:
    """Serialize *state* as ``PaginationMeta`` JSON."""
    return PaginationMeta.from_state(state).model_dump_json()


class PaginationMarkup:
    """Lazy markup for a state; ``str()`` gives the compact view.

    Jinja2 and MarkupSafe call ``__html__`` so the instance can be dropped
    straight into a host template without ``|safe``.
    """

    def __init__(
        self,
        state: PaginationState,
        renderer: Optional[PaginationRenderer] = None,
    ) -> None:
        self.state = state
        self.renderer = renderer or CompactPaginationRenderer()

    def __str__(self) -> str:
        return self.renderer.render(self.state)

    def __html__(self) -> str:
        return str(self)
