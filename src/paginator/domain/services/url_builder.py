"""
Page-link construction from SEO-friendly URL patterns.

A pattern such as ``/staff/search/(:page)/(:rows)/(:search)/(:sort)/``
carries up to four placeholders. The page placeholder is always filled;
the others are filled when a value is supplied and removed together with
their trailing ``/`` otherwise::

    >>> build_page_url("/list/(:page)/(:rows)/", 3)
    '/list/3/'
    >>> build_page_url("/list/(:page)/(:rows)/", 3, items_per_page=25)
    '/list/3/25/'
"""

from __future__ import annotations

import re
from typing import Optional

from paginator.domain.models.page import (
    PAGE_PLACEHOLDER,
    ROWS_PLACEHOLDER,
    SEARCH_PLACEHOLDER,
    SORT_PLACEHOLDER,
)

_PLACEHOLDER_RE = re.compile(
    "("
    + "|".join(
        re.escape(token)
        for token in (PAGE_PLACEHOLDER, ROWS_PLACEHOLDER, SORT_PLACEHOLDER, SEARCH_PLACEHOLDER)
    )
    + ")(/?)"
)


def build_page_url(
    url_pattern: str,
    page_number: int,
    *,
    items_per_page: Optional[int] = None,
    sort_pattern: Optional[str] = None,
    search_pattern: Optional[str] = None,
) -> str:
    """Substitute every placeholder of *url_pattern* in a single pass.

    Inserted values are never rescanned, so a sort or search value that
    happens to contain placeholder text comes out verbatim.

    Parameters
    ----------
    url_pattern:
        Pattern containing any of the four placeholder tokens.
    page_number:
        Value for ``(:page)``; always substituted.
    items_per_page, sort_pattern, search_pattern:
        Values for ``(:rows)``, ``(:sort)`` and ``(:search)``. ``None``
        strips the placeholder and its trailing separator.
    """
    values: dict[str, Optional[str]] = {
        PAGE_PLACEHOLDER: str(int(page_number)),
        ROWS_PLACEHOLDER: None if items_per_page is None else str(int(items_per_page)),
        SORT_PLACEHOLDER: sort_pattern,
        SEARCH_PLACEHOLDER: search_pattern,
    }

    def _substitute(match: re.Match[str]) -> str:
        token, separator = match.group(1), match.group(2)
        value = values[token]
        if value is None:
            return ""
        return value + separator

    return _PLACEHOLDER_RE.sub(_substitute, url_pattern)
