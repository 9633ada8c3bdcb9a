"""Adapter implementations bridging infrastructure to application-layer ports.

The SQL counterpart lives in :mod:`paginator.infrastructure.database.query`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InMemoryPageSource(Generic[T]):
    """Synchronous in-memory record source for wiring validation and tests.

    Mirrors the ``(items, total)`` contract of a repository list method so
    callers can swap it for a database-backed source.
    """

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._items: list[T] = list(items or [])

    def count(self) -> int:
        return len(self._items)

    def list_page(self, offset: int = 0, limit: int = 20) -> tuple[list[T], int]:
        page = self._items[offset : offset + limit]
        logger.debug("Sliced %d of %d items at offset %d", len(page), len(self._items), offset)
        return page, len(self._items)
