from __future__ import annotations

from typing import Any


class PaginationError(Exception):
    """Base class for all pagination exceptions.

    Carries HTTP-mapping metadata so a web host can produce RFC 9457
    Problem Details without knowing exception internals.
    """

    def __init__(
        self,
        detail: str = "",
        *,
        title: str = "Pagination Error",
        status_code: int = 400,
        error_type: str = "about:blank",
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.title = title
        self.status_code = status_code
        self.error_type = error_type


class InvalidArgumentError(PaginationError, ValueError):
    def __init__(self, argument: str = "", value: Any = None, reason: str = "") -> None:
        self.argument = argument
        self.value = value
        self.reason = reason
        super().__init__(
            detail=f"Invalid value for {argument}: {value!r} ({reason})",
            title="Invalid Pagination Argument",
            status_code=422,
            error_type="urn:paginator:problems:invalid-argument",
        )


class InvalidStateError(PaginationError, RuntimeError):
    def __init__(self, reason: str = "") -> None:
        self.reason = reason
        super().__init__(
            detail=f"Pagination state is not usable: {reason}",
            title="Invalid Pagination State",
            status_code=500,
            error_type="urn:paginator:problems:invalid-state",
        )
