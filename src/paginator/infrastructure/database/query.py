"""
LIMIT/OFFSET shaping for SQLAlchemy ``Select`` statements.

Nothing here executes a statement; callers hand the shaped ``Select``
to their own session.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import Select, func, select

from paginator.domain.models.pagination import PaginationState


def apply_limit_offset(stmt: Select[Any], state: PaginationState) -> Select[Any]:
    """Return *stmt* restricted to the current page of *state*."""
    offset, limit = state.get_limit_per_page_offset()
    return stmt.offset(offset).limit(limit)


def count_statement(stmt: Select[Any]) -> Select[Any]:
    """Return a ``SELECT count(*)`` over *stmt* for feeding ``total_items``."""
    return select(func.count()).select_from(stmt.order_by(None).subquery())
