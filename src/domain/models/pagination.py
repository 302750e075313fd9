from __future__ import annotations

import math
from typing import Any

PER_PAGE: int = 10
PER_PAGE_MAX: int = 1000


class PaginationState:
    """Numeric pagination inputs and the totals derived from them.

    Every setter normalizes instead of rejecting: negative values are
    folded through ``abs`` and page sizes are clamped to the ceiling.
    Derived fields stay ``None`` until :meth:`paginate` is called.
    """

    def __init__(
        self,
        page: int = 1,
        per_page: int = PER_PAGE,
        per_page_max: int = PER_PAGE_MAX,
    ) -> None:
        self._page = 1
        self._per_page = PER_PAGE
        self._per_page_max = PER_PAGE_MAX
        self._total_records: int | None = None
        self._total_pages: int | None = None
        self._prev_page: int | None = None
        self._next_page: int | None = None

        # Ceiling first so the initial per-page is clamped against it.
        self.set_per_page_max(per_page_max).set_per_page(per_page).set_page(page)

    def __repr__(self) -> str:
        return (
            f"PaginationState(page={self._page}, per_page={self._per_page}, "
            f"total_pages={self._total_pages}, total_records={self._total_records})"
        )

    # ------------------------------------------------------------------
    # Inputs
    # ------------------------------------------------------------------

    def set_page(self, page: int) -> PaginationState:
        self._page = max(1, abs(page))
        return self

    def set_per_page(self, per_page: int) -> PaginationState:
        per_page = abs(per_page) or PER_PAGE
        self._per_page = min(self._per_page_max, per_page)
        return self

    def set_per_page_max(self, per_page_max: int) -> PaginationState:
        """Set the page-size ceiling; an already stored per-page is kept."""
        self._per_page_max = max(1, abs(per_page_max))
        return self

    @property
    def page(self) -> int:
        return self._page

    @property
    def per_page(self) -> int:
        return self._per_page

    @property
    def per_page_max(self) -> int:
        return self._per_page_max

    # ------------------------------------------------------------------
    # Derived totals
    # ------------------------------------------------------------------

    def paginate(self, total_records: int) -> PaginationState:
        """Freeze totals for *total_records*; calling again recomputes all."""
        self._total_records = abs(total_records)
        self._total_pages = 1
        if self._total_records > 1:
            self._total_pages = math.ceil(self._total_records / self._per_page)

        self._prev_page = self._page - 1 if self._page - 1 >= 1 else None
        self._next_page = self._page + 1 if self._page + 1 <= self._total_pages else None
        return self

    @property
    def is_paginated(self) -> bool:
        return self._total_pages is not None

    @property
    def total_records(self) -> int | None:
        return self._total_records

    @property
    def total_pages(self) -> int | None:
        return self._total_pages

    @property
    def prev_page(self) -> int | None:
        return self._prev_page

    @property
    def next_page(self) -> int | None:
        return self._next_page

    @property
    def offset(self) -> int:
        """Zero-based offset suitable for SQL ``OFFSET`` clauses."""
        return (self._page - 1) * self._per_page

    @property
    def limit(self) -> int:
        return self._per_page

    def to_dict(self) -> dict[str, Any]:
        return {
            "page": self._page,
            "per_page": self._per_page,
            "prev_page": self._prev_page,
            "next_page": self._next_page,
            "total_pages": self._total_pages,
            "total_records": self._total_records,
        }
