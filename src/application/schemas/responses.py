"""
Pydantic v2 response schemas for pagination results.

These are the JSON-friendly snapshots handed to whatever transport the
caller uses; they carry no behavior of their own.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from domain.exceptions import InvalidPaginationStateError
from domain.models.links import LinkDescriptor
from domain.models.pagination import PaginationState

# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class LinkKindSchema(str, Enum):
    FIRST = "first"
    PREV = "prev"
    PAGE = "page"
    NEXT = "next"
    LAST = "last"


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class PaginationSummary(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "examples": [
                {
                    "limit": 10,
                    "offset": 40,
                    "current": 5,
                    "total_pages": 10,
                    "total_records": 95,
                    "prev_page": 4,
                    "next_page": 6,
                    "has_prev": True,
                    "has_next": True,
                }
            ]
        },
    )

    limit: int = Field(..., ge=1)
    offset: int = Field(..., ge=0)
    current: int = Field(..., ge=0, description="Current page; 0 when there are no records.")
    total_pages: int = Field(..., ge=0)
    total_records: int = Field(..., ge=0)
    prev_page: Optional[int] = None
    next_page: Optional[int] = None
    has_prev: bool = False
    has_next: bool = False

    @classmethod
    def from_state(cls, state: PaginationState, *, no_empty: bool = True) -> PaginationSummary:
        """Snapshot a paginated state.

        With ``no_empty`` an empty result set reports ``current=0`` and
        ``total_pages=0`` rather than a single empty page. A state that was
        never paginated has no totals to report and is rejected.
        """
        if not state.is_paginated:
            raise InvalidPaginationStateError("summarize pagination")

        total_records = state.total_records or 0
        total_pages = state.total_pages or 0
        current = state.page
        if no_empty and not total_records:
            current = 0
            total_pages = 0

        return cls(
            limit=state.limit,
            offset=state.offset,
            current=current,
            total_pages=total_pages,
            total_records=total_records,
            prev_page=state.prev_page if current else None,
            next_page=state.next_page if current else None,
            has_prev=current - 1 > 0,
            has_next=bool(current) and current < total_pages,
        )


class LinkDescriptorSchema(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: LinkKindSchema
    target_page: int = Field(..., ge=1)
    label: str
    current: bool = False
    rel: Optional[str] = None

    @classmethod
    def from_descriptor(cls, descriptor: LinkDescriptor) -> LinkDescriptorSchema:
        return cls(
            kind=LinkKindSchema(descriptor.kind.value),
            target_page=descriptor.target_page,
            label=descriptor.label,
            current=descriptor.current,
            rel=descriptor.rel,
        )


class PaginationEnvelope(BaseModel):
    pagination: PaginationSummary
    links: list[LinkDescriptorSchema] = Field(default_factory=list)
    css_class: str = "pagination"
