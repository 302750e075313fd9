from domain.models.links import BOUNDARY_KINDS, LinkDescriptor, LinkKind, LinkLabels
from domain.models.pagination import PER_PAGE, PER_PAGE_MAX, PaginationState

__all__ = [
    "BOUNDARY_KINDS",
    "PER_PAGE",
    "PER_PAGE_MAX",
    "LinkDescriptor",
    "LinkKind",
    "LinkLabels",
    "PaginationState",
]
