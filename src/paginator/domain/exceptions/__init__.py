from paginator.domain.exceptions.pagination_exceptions import (
    InvalidArgumentError,
    InvalidStateError,
    PaginationError,
)

__all__ = [
    "InvalidArgumentError",
    "InvalidStateError",
    "PaginationError",
]
