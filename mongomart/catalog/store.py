"""Catalog store.

High-level façade used by route handlers: category facets, paginated
listing, text search, single-item lookup, related items and review
appends. Results come back as plain models.
"""

from dataclasses import dataclass
from typing import Any

import structlog
from motor.motor_asyncio import AsyncIOMotorDatabase
from pydantic import ValidationError

from mongomart.catalog.exceptions import InvalidReviewError
from mongomart.catalog.models import ALL_CATEGORIES, CategoryCount, Item, Review
from mongomart.catalog.queries import (
    CategoryFilter,
    PaginatedResult,
    PaginationParams,
    TextSearch,
    parse_category,
)
from mongomart.catalog.repository import ItemRepository
from mongomart.infrastructure.config import Settings, settings as default_settings

logger = structlog.get_logger()

DEFAULT_COLLECTION = "item"
RELATED_ITEMS_LIMIT = 4
ITEMS_PER_PAGE = 5


@dataclass(frozen=True)
class ReviewAppendResult:
    """Outcome of an add_review call.

    Attributes:
        review: The review that was sent to the store.
        matched_count: Items matched by id (0 or 1).
        modified_count: Items actually modified (0 or 1).
    """

    review: Review
    matched_count: int
    modified_count: int

    @property
    def applied(self) -> bool:
        """Whether the review landed on an item."""
        return self.modified_count > 0


class CatalogStore:
    """Data-access façade over the ``item`` collection.

    Holds nothing but the collection handle and page defaults; every call is a single
    request/response against MongoDB (the combined ``list_items`` and
    ``search`` views issue two).

    Example usage:
        store = CatalogStore(client["mongomart"])
        categories = await store.get_categories()
        page = await store.get_items("Apparel", page=0, items_per_page=5)
    """

    def __init__(
        self,
        database: AsyncIOMotorDatabase,
        collection_name: str = DEFAULT_COLLECTION,
        items_per_page: int = ITEMS_PER_PAGE,
        related_items_limit: int = RELATED_ITEMS_LIMIT,
    ) -> None:
        """Initialize store with a connected database.

        Args:
            database: Motor database handle, already connected.
            collection_name: Name of the item collection.
            items_per_page: Page size used when a call does not give one.
            related_items_limit: Size of the related-items sample.
        """
        self.database = database
        self.items_per_page = items_per_page
        self.related_items_limit = related_items_limit
        self.repository = ItemRepository(database[collection_name])

    @classmethod
    def from_settings(
        cls,
        database: AsyncIOMotorDatabase,
        config: Settings | None = None,
    ) -> "CatalogStore":
        """Create a store configured from application settings.

        Args:
            database: Motor database handle, already connected.
            config: Settings to use. Defaults to the module-level settings.

        Returns:
            Configured store.
        """
        config = config or default_settings
        return cls(
            database,
            collection_name=config.item_collection,
            items_per_page=config.items_per_page,
            related_items_limit=config.related_items_limit,
        )

    def _page_size(self, items_per_page: int | None) -> int:
        return self.items_per_page if items_per_page is None else items_per_page

    async def get_categories(self) -> list[CategoryCount]:
        """Get per-category item counts headed by the "All" total.

        Items without a category are left out of every row, including
        "All", which is the sum of the per-category counts.

        Returns:
            ``[All, *categories]`` with categories sorted by label.
        """
        rows = await self.repository.category_counts()
        categories = [CategoryCount(label=row["_id"], count=row["num"]) for row in rows]
        total = sum(c.count for c in categories)
        return [CategoryCount(label=ALL_CATEGORIES, count=total), *categories]

    async def get_items(
        self,
        category: str | CategoryFilter,
        page: int,
        items_per_page: int | None = None,
    ) -> list[Item]:
        """Get one page of items in a category.

        No sort is applied; order is the store's natural order.

        Args:
            category: Category label, "All", or a CategoryFilter.
            page: Page number (0-based).
            items_per_page: Page size; the store default when None.

        Returns:
            At most ``items_per_page`` items; empty past the last page.
        """
        pagination = PaginationParams(
            page=page,
            page_size=self._page_size(items_per_page),
        )
        query = parse_category(category).to_query()
        documents = await self.repository.find_page(query, pagination)
        return [Item.from_document(doc) for doc in documents]

    async def get_num_items(self, category: str | CategoryFilter) -> int:
        """Count items in a category, using the same filter as get_items."""
        return await self.repository.count(parse_category(category).to_query())

    async def search_items(
        self,
        query: str,
        page: int,
        items_per_page: int | None = None,
    ) -> list[Item]:
        """Get one page of text-search matches.

        Matches against the text index over title, slogan and description.
        Results are not sorted by relevance.

        Args:
            query: Free-text search terms.
            page: Page number (0-based).
            items_per_page: Page size; the store default when None.

        Returns:
            Matching items; empty for a blank or non-matching query.
        """
        pagination = PaginationParams(
            page=page,
            page_size=self._page_size(items_per_page),
        )
        search = TextSearch(query)
        if search.is_blank:
            return []
        documents = await self.repository.find_page(search.to_query(), pagination)
        return [Item.from_document(doc) for doc in documents]

    async def get_num_search_items(self, query: str) -> int:
        """Count text-search matches, using the same predicate as search_items."""
        search = TextSearch(query)
        if search.is_blank:
            return 0
        return await self.repository.count(search.to_query())

    async def get_item(self, item_id: Any) -> Item | None:
        """Get an item by id.

        Args:
            item_id: Item identifier.

        Returns:
            Item if found, None otherwise.
        """
        document = await self.repository.find_by_id(item_id)
        if document is None:
            return None
        return Item.from_document(document)

    async def get_related_items(self, limit: int | None = None) -> list[Item]:
        """Get a few items to show alongside another one.

        Placeholder recommendation: an unfiltered, unordered sample.

        Args:
            limit: Maximum items to return; the store default when None.

        Returns:
            At most ``limit`` catalog items.
        """
        if limit is None:
            limit = self.related_items_limit
        documents = await self.repository.sample(limit)
        return [Item.from_document(doc) for doc in documents]

    async def add_review(
        self,
        item_id: Any,
        comment: str,
        name: str,
        stars: int,
    ) -> ReviewAppendResult:
        """Append a review to an item.

        The review is pushed atomically onto the item's ``reviews`` array.
        An unknown ``item_id`` is not an error: nothing is written and the
        result reports zero matches.

        Args:
            item_id: Item identifier.
            comment: Review text.
            name: Reviewer name.
            stars: Star rating (0-5).

        Returns:
            Append outcome with match/modify counts.

        Raises:
            InvalidReviewError: If the review fields fail validation.
        """
        try:
            review = Review.create(name=name, comment=comment, stars=stars)
        except ValidationError as e:
            raise InvalidReviewError(item_id, e.errors(include_url=False)) from e

        result = await self.repository.push_review(item_id, review.to_document())

        logger.info(
            "Review appended" if result.modified_count else "Review target not found",
            item_id=item_id,
            stars=stars,
            matched_count=result.matched_count,
        )

        return ReviewAppendResult(
            review=review,
            matched_count=result.matched_count,
            modified_count=result.modified_count,
        )

    async def list_items(
        self,
        category: str | CategoryFilter,
        page: int,
        items_per_page: int | None = None,
    ) -> PaginatedResult[Item]:
        """Get a page of items in a category together with the total.

        The page and the count are separate reads and may observe
        different data if a write lands in between.
        """
        items = await self.get_items(category, page, items_per_page)
        total = await self.get_num_items(category)
        return PaginatedResult(
            items=items,
            total=total,
            page=page,
            page_size=self._page_size(items_per_page),
        )

    async def search(
        self,
        query: str,
        page: int,
        items_per_page: int | None = None,
    ) -> PaginatedResult[Item]:
        """Get a page of search matches together with the total."""
        items = await self.search_items(query, page, items_per_page)
        total = await self.get_num_search_items(query)
        return PaginatedResult(
            items=items,
            total=total,
            page=page,
            page_size=self._page_size(items_per_page),
        )
