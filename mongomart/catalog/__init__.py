"""Product Catalog.

Category facets, paginated listing, text search, item lookup and review
appends over the MongoDB ``item`` collection.
"""

from mongomart.catalog.exceptions import (
    CatalogError,
    InvalidPaginationError,
    InvalidReviewError,
)
from mongomart.catalog.generator import GeneratorConfig, ItemGenerator, sample_item
from mongomart.catalog.models import ALL_CATEGORIES, CategoryCount, Item, Review
from mongomart.catalog.queries import (
    AllCategories,
    ByCategory,
    CategoryFilter,
    PaginatedResult,
    PaginationParams,
    TextSearch,
    parse_category,
)
from mongomart.catalog.repository import ItemRepository
from mongomart.catalog.store import CatalogStore, ReviewAppendResult

__all__ = [
    # Models
    "ALL_CATEGORIES",
    "CategoryCount",
    "Item",
    "Review",
    # Queries
    "AllCategories",
    "ByCategory",
    "CategoryFilter",
    "PaginatedResult",
    "PaginationParams",
    "TextSearch",
    "parse_category",
    # Repository
    "ItemRepository",
    # Store
    "CatalogStore",
    "ReviewAppendResult",
    # Generator
    "GeneratorConfig",
    "ItemGenerator",
    "sample_item",
    # Errors
    "CatalogError",
    "InvalidPaginationError",
    "InvalidReviewError",
]
