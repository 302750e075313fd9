from __future__ import annotations

import enum
from dataclasses import dataclass


class LinkKind(enum.Enum):
    FIRST = "first"
    PREV = "prev"
    PAGE = "page"
    NEXT = "next"
    LAST = "last"


BOUNDARY_KINDS: frozenset[LinkKind] = frozenset(
    {LinkKind.FIRST, LinkKind.PREV, LinkKind.NEXT, LinkKind.LAST}
)


@dataclass(frozen=True)
class LinkDescriptor:
    kind: LinkKind
    target_page: int
    label: str = ""
    current: bool = False
    rel: str | None = None

    @property
    def is_boundary(self) -> bool:
        return self.kind in BOUNDARY_KINDS


@dataclass(frozen=True)
class LinkLabels:
    """Display text for boundary markers and the centered page label."""

    page: str = "Page"
    first: str = "«"
    prev: str = "‹"
    next: str = "›"
    last: str = "»"
