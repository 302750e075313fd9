from domain.exceptions.pagination_exceptions import (
    DomainError,
    InvalidPaginationStateError,
)

__all__ = [
    "DomainError",
    "InvalidPaginationStateError",
]
