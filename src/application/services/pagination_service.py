"""Application service exposing the pagination entry points.

``PaginationService`` sits between an HTTP-handling caller and the domain
layer. The caller extracts raw values from its request and passes them in
explicitly; the service never reads request state, never redirects and
never renders markup.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from domain.models.links import LinkDescriptor
from domain.models.pagination import PER_PAGE, PER_PAGE_MAX, PaginationState
from domain.services.request_validator import RequestValidator, ValidationResult
from domain.services.window_selector import CenteredWindowSelector, WindowSelector

from application.schemas.pagination import LinkOptions
from application.schemas.responses import (
    LinkDescriptorSchema,
    PaginationEnvelope,
    PaginationSummary,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestValidation:
    page: ValidationResult
    per_page: ValidationResult

    @property
    def ok(self) -> bool:
        return self.page.ok and self.per_page.ok


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------


class PaginationService:
    """Builds pagination states and the link descriptors rendered from them."""

    def __init__(
        self,
        options: Optional[LinkOptions] = None,
        validator: Optional[RequestValidator] = None,
        default_per_page: int = PER_PAGE,
        default_per_page_max: int = PER_PAGE_MAX,
    ) -> None:
        self._options = options or LinkOptions()
        self._validator = validator or RequestValidator()
        self._default_per_page = default_per_page
        self._default_per_page_max = default_per_page_max

    @property
    def options(self) -> LinkOptions:
        return self._options

    # ------------------------------------------------------------------
    # Bounds
    # ------------------------------------------------------------------

    def paginate(
        self,
        page: int = 1,
        per_page: Optional[int] = None,
        per_page_max: Optional[int] = None,
        total_records: int = 0,
    ) -> PaginationState:
        state = PaginationState(
            page=page,
            per_page=per_page if per_page is not None else self._default_per_page,
            per_page_max=per_page_max if per_page_max is not None else self._default_per_page_max,
        ).paginate(total_records)

        logger.debug(
            "Paginated %d records: page=%d per_page=%d total_pages=%d",
            state.total_records,
            state.page,
            state.per_page,
            state.total_pages,
        )
        return state

    # ------------------------------------------------------------------
    # Links
    # ------------------------------------------------------------------

    def select_window(
        self,
        state: PaginationState,
        window_limit: Optional[int] = None,
        options: Optional[LinkOptions] = None,
    ) -> list[LinkDescriptor]:
        opts = options or self._options
        if opts.center:
            return CenteredWindowSelector(opts.labels, opts.numerate_first_last).select(state)

        selector = WindowSelector(opts.labels, opts.numerate_first_last, opts.window_limit)
        return selector.select(state, window_limit)

    def build_envelope(
        self,
        state: PaginationState,
        window_limit: Optional[int] = None,
        options: Optional[LinkOptions] = None,
    ) -> PaginationEnvelope:
        opts = options or self._options
        links = self.select_window(state, window_limit, opts)
        return PaginationEnvelope(
            pagination=PaginationSummary.from_state(state),
            links=[LinkDescriptorSchema.from_descriptor(link) for link in links],
            css_class=opts.css_class,
        )

    # ------------------------------------------------------------------
    # Request validation
    # ------------------------------------------------------------------

    def validate_request(
        self,
        raw_page: int | str | None,
        raw_per_page: int | str | None,
        total_pages: int,
        per_page_max: Optional[int] = None,
    ) -> RequestValidation:
        ceiling = per_page_max if per_page_max is not None else self._default_per_page_max
        result = RequestValidation(
            page=self._validator.validate_page(raw_page, total_pages),
            per_page=self._validator.validate_per_page(raw_per_page, ceiling),
        )
        if not result.ok:
            logger.info(
                "Pagination request needs correction: page=%s (%s) per_page=%s (%s)",
                raw_page,
                result.page.status.value,
                raw_per_page,
                result.per_page.status.value,
            )
        return result
