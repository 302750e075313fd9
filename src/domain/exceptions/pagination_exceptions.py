from __future__ import annotations


class DomainError(Exception):
    """Base class for all domain-layer exceptions.

    Carries HTTP-mapping metadata so a presentation layer can produce
    RFC 9457 Problem Details without knowing exception internals.
    """

    def __init__(
        self,
        detail: str = "",
        *,
        title: str = "Domain Error",
        status_code: int = 400,
        error_type: str = "about:blank",
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.title = title
        self.status_code = status_code
        self.error_type = error_type


class InvalidPaginationStateError(DomainError):
    def __init__(self, operation: str = "generate links") -> None:
        self.operation = operation
        super().__init__(
            detail=f"Cannot {operation} before paginate() has been called",
            title="Invalid Pagination State",
            status_code=500,
            error_type="https://pagination-core.example/problems/invalid-state",
        )
