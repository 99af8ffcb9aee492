"""Page container returned by paginated list operations."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PaginationMeta:
    """Pagination metadata for one page of results."""

    total: int
    total_pages: int
    current_page: int
    per_page: int
    prev: int | None
    next: int | None


@dataclass(frozen=True)
class PaginatedResult(Generic[T]):
    """A page of items plus metadata."""

    data: list[T]
    meta: PaginationMeta
