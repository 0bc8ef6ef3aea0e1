"""Query primitives for catalog reads.

Category filters, text search and pagination are resolved here into
MongoDB predicates so the store never compares against the "All"
sentinel more than once.
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from mongomart.catalog.exceptions import InvalidPaginationError
from mongomart.catalog.models import ALL_CATEGORIES

T = TypeVar("T")


# ============================================================================
# Category Filter
# ============================================================================


@dataclass(frozen=True)
class AllCategories:
    """Matches every item, including uncategorized ones."""

    def to_query(self) -> dict[str, Any]:
        """Resolve to a MongoDB predicate."""
        return {}

    def __str__(self) -> str:
        return ALL_CATEGORIES


@dataclass(frozen=True)
class ByCategory:
    """Matches items whose category equals ``label`` exactly.

    Attributes:
        label: Category label (case-sensitive).
    """

    label: str

    def to_query(self) -> dict[str, Any]:
        """Resolve to a MongoDB predicate."""
        return {"category": self.label}

    def __str__(self) -> str:
        return self.label


CategoryFilter = AllCategories | ByCategory


def parse_category(category: "str | CategoryFilter") -> CategoryFilter:
    """Turn a category label into a filter.

    Args:
        category: A label, the "All" sentinel, or an existing filter.

    Returns:
        AllCategories for "All", ByCategory otherwise.
    """
    if isinstance(category, (AllCategories, ByCategory)):
        return category
    if category == ALL_CATEGORIES:
        return AllCategories()
    return ByCategory(category)


# ============================================================================
# Text Search
# ============================================================================


@dataclass(frozen=True)
class TextSearch:
    """Free-text match against the item text index.

    Attributes:
        query: Search terms as typed by the user.
    """

    query: str

    @property
    def is_blank(self) -> bool:
        """Whether there is nothing to search for."""
        return not self.query.strip()

    def to_query(self) -> dict[str, Any]:
        """Resolve to a ``$text`` predicate."""
        return {"$text": {"$search": self.query}}


# ============================================================================
# Pagination
# ============================================================================


@dataclass(frozen=True)
class PaginationParams:
    """Skip/limit pagination.

    Attributes:
        page: Page number (0-based).
        page_size: Items per page.
    """

    page: int = 0
    page_size: int = 5

    def __post_init__(self) -> None:
        if self.page < 0 or self.page_size <= 0:
            raise InvalidPaginationError(self.page, self.page_size)

    @property
    def offset(self) -> int:
        """Number of matching documents to skip."""
        return self.page * self.page_size

    @property
    def limit(self) -> int:
        """Get limit (alias for page_size)."""
        return self.page_size


@dataclass
class PaginatedResult(Generic[T]):
    """Paginated result container.

    Attributes:
        items: Items on this page.
        total: Total count of matches.
        page: Current page (0-based).
        page_size: Items per page.
    """

    items: list[T]
    total: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        """Calculate total pages."""
        return (self.total + self.page_size - 1) // self.page_size

    @property
    def has_next(self) -> bool:
        """Check if there's a next page."""
        return self.page + 1 < self.total_pages

    @property
    def has_prev(self) -> bool:
        """Check if there's a previous page."""
        return self.page > 0
