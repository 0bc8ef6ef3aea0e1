"""Catalog exceptions.

Errors raised by the catalog layer itself. Store failures are not wrapped:
driver exceptions (``pymongo.errors.PyMongoError``) reach the caller as-is.
"""

from typing import Any


class CatalogError(Exception):
    """Base class for catalog errors.

    Allows callers to catch everything the catalog layer raises on its own
    account, as opposed to driver-level failures.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize catalog error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidPaginationError(CatalogError):
    """Raised when page or page size is out of range."""

    def __init__(self, page: int, page_size: int) -> None:
        """Initialize invalid pagination error.

        Args:
            page: Requested 0-based page.
            page_size: Requested items per page.
        """
        super().__init__(
            f"Invalid pagination page={page} page_size={page_size}: "
            "page must be >= 0 and page_size must be > 0",
            details={"page": page, "page_size": page_size},
        )


class InvalidReviewError(CatalogError):
    """Raised when review fields fail validation."""

    def __init__(self, item_id: Any, errors: list[dict[str, Any]]) -> None:
        """Initialize invalid review error.

        Args:
            item_id: Item the review was meant for.
            errors: Validation errors as reported by pydantic.
        """
        super().__init__(
            f"Invalid review for item {item_id!r}",
            details={"item_id": item_id, "errors": errors},
        )
