"""Pagination value objects shared by the application layer.

Provides the typed ``LinkOptions`` struct that configures link selection
and a generic ``PaginatedResponse`` container pairing fetched items with
the state that bounded the fetch.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, List, TypeVar

from domain.models.links import LinkLabels
from domain.models.pagination import PaginationState
from domain.services.window_selector import DEFAULT_WINDOW_LIMIT

if TYPE_CHECKING:
    from infrastructure.settings import PagerSettings

T = TypeVar("T")


@dataclass(frozen=True)
class LinkOptions:
    """Immutable link-selection options.

    ``start_key``, ``stop_key``, ``link_class_name`` and
    ``argument_separator`` are not used by the selectors themselves; they
    travel with the options so the rendering caller can build hrefs and
    markup. ``window_limit`` is normalized to at least 1.
    """

    start_key: str = "s"
    stop_key: str = "ss"
    window_limit: int = DEFAULT_WINDOW_LIMIT
    numerate_first_last: bool = False
    link_class_name: str = "pagination"
    argument_separator: str = "&"
    center: bool = False
    labels: LinkLabels = field(default_factory=LinkLabels)

    def __post_init__(self) -> None:
        # frozen=True requires object.__setattr__ for validation fixups
        object.__setattr__(self, "window_limit", max(1, abs(self.window_limit)))

    @property
    def css_class(self) -> str:
        if self.center:
            return f"{self.link_class_name} center"
        return self.link_class_name

    @classmethod
    def from_settings(cls, settings: PagerSettings, **overrides: object) -> LinkOptions:
        values: dict[str, object] = {
            "start_key": settings.start_key,
            "stop_key": settings.stop_key,
            "window_limit": settings.window_limit,
            "numerate_first_last": settings.numerate_first_last,
            "link_class_name": settings.link_class_name,
            "argument_separator": settings.argument_separator,
        }
        values.update(overrides)
        return cls(**values)  # type: ignore[arg-type]


@dataclass
class PaginatedResponse(Generic[T]):
    """Generic wrapper returned by paginated list operations."""

    items: List[T] = field(default_factory=list)
    state: PaginationState = field(default_factory=lambda: PaginationState().paginate(0))

    @property
    def page(self) -> int:
        return self.state.page

    @property
    def size(self) -> int:
        return self.state.per_page

    @property
    def total(self) -> int:
        return self.state.total_records or 0

    @property
    def pages(self) -> int:
        """Total number of pages (at least 1)."""
        return self.state.total_pages or 1

    @property
    def has_next(self) -> bool:
        return self.state.next_page is not None

    @property
    def has_previous(self) -> bool:
        return self.state.prev_page is not None
