"""Selection of the visible page links for a paginated state.

The numbered run is always ``min(window_limit, total_pages)`` long. Near
either boundary the run slides inward instead of being truncated, so the
current page drifts off-centre rather than the window shrinking.
"""

from __future__ import annotations

import math

from domain.exceptions import InvalidPaginationStateError
from domain.models.links import LinkDescriptor, LinkKind, LinkLabels
from domain.models.pagination import PaginationState

DEFAULT_WINDOW_LIMIT: int = 5


def compute_window(current_page: int, total_pages: int, window_limit: int) -> range:
    """Return the contiguous run of page numbers to expose around *current_page*."""
    total_pages = max(1, total_pages)
    limit = min(max(1, abs(window_limit)), total_pages)
    current = min(max(1, current_page), total_pages)

    half = math.ceil(limit / 2)
    start = current - (half - 1)
    if start < 1:
        start = 1
    if start + limit - 1 > total_pages:
        start = max(1, total_pages - limit + 1)

    return range(start, min(start + limit, total_pages + 1))


def _require_total_pages(state: PaginationState) -> int:
    if state.total_pages is None:
        raise InvalidPaginationStateError()
    return state.total_pages


class _BoundaryMarkers:
    """Builds the first/prev and next/last descriptor pairs."""

    def __init__(self, labels: LinkLabels, numerate_first_last: bool) -> None:
        self._labels = labels
        self._numerate_first_last = numerate_first_last

    def leading(self, current: int) -> list[LinkDescriptor]:
        if current <= 1:
            return []
        first_label = "1" if self._numerate_first_last else self._labels.first
        return [
            LinkDescriptor(LinkKind.FIRST, 1, first_label, rel="first"),
            LinkDescriptor(LinkKind.PREV, current - 1, self._labels.prev, rel="prev"),
        ]

    def trailing(self, current: int, total_pages: int) -> list[LinkDescriptor]:
        if current >= total_pages:
            return []
        last_label = str(total_pages) if self._numerate_first_last else self._labels.last
        return [
            LinkDescriptor(LinkKind.NEXT, current + 1, self._labels.next, rel="next"),
            LinkDescriptor(LinkKind.LAST, total_pages, last_label, rel="last"),
        ]


class WindowSelector:
    """Produces ``first, prev, [page...], next, last`` descriptors."""

    def __init__(
        self,
        labels: LinkLabels | None = None,
        numerate_first_last: bool = False,
        window_limit: int = DEFAULT_WINDOW_LIMIT,
    ) -> None:
        self._markers = _BoundaryMarkers(labels or LinkLabels(), numerate_first_last)
        self._window_limit = window_limit

    def select(
        self,
        state: PaginationState,
        window_limit: int | None = None,
    ) -> list[LinkDescriptor]:
        total_pages = _require_total_pages(state)
        if total_pages <= 1:
            return [LinkDescriptor(LinkKind.PAGE, 1, "1", current=True)]

        limit = window_limit if window_limit is not None else self._window_limit
        current = min(state.page, total_pages)

        links = self._markers.leading(current)
        for number in compute_window(current, total_pages, limit):
            rel = None
            if number == current - 1:
                rel = "prev"
            elif number == current + 1:
                rel = "next"
            links.append(
                LinkDescriptor(
                    LinkKind.PAGE,
                    number,
                    str(number),
                    current=number == current,
                    rel=rel,
                )
            )
        links.extend(self._markers.trailing(current, total_pages))
        return links


class CenteredWindowSelector:
    """Compact ``first, prev, Page N, next, last`` navigation."""

    def __init__(
        self,
        labels: LinkLabels | None = None,
        numerate_first_last: bool = False,
    ) -> None:
        self._labels = labels or LinkLabels()
        self._markers = _BoundaryMarkers(self._labels, numerate_first_last)

    def select(self, state: PaginationState) -> list[LinkDescriptor]:
        total_pages = _require_total_pages(state)
        current = min(state.page, total_pages)

        links = self._markers.leading(current)
        links.append(
            LinkDescriptor(
                LinkKind.PAGE,
                current,
                f"{self._labels.page} {current}",
                current=True,
            )
        )
        links.extend(self._markers.trailing(current, total_pages))
        return links
