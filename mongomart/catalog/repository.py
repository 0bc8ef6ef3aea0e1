"""Item repository for MongoDB operations.

Each method issues exactly one request against the ``item`` collection
and returns raw documents. Mapping into models happens in the store.
"""

from typing import Any

import structlog
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError
from pymongo.results import UpdateResult

from mongomart.catalog.queries import PaginationParams

logger = structlog.get_logger()

CATEGORY_COUNTS_PIPELINE: list[dict[str, Any]] = [
    {"$match": {"category": {"$ne": None}}},
    {"$group": {"_id": "$category", "num": {"$sum": 1}}},
    {"$sort": {"_id": 1}},
]


class ItemRepository:
    """Repository for item documents.

    Driver errors are logged and re-raised unchanged; no retries.

    Example usage:
        repo = ItemRepository(database["item"])
        docs = await repo.find_page({"category": "Apparel"}, PaginationParams(0, 5))
    """

    def __init__(self, collection: AsyncIOMotorCollection) -> None:
        """Initialize repository with the item collection.

        Args:
            collection: Motor collection holding item documents.
        """
        self.collection = collection

    async def find_page(
        self,
        query: dict[str, Any],
        pagination: PaginationParams,
    ) -> list[dict[str, Any]]:
        """Find one page of matching documents in natural order.

        Args:
            query: MongoDB predicate.
            pagination: Skip/limit parameters.

        Returns:
            Up to ``pagination.limit`` documents.
        """
        logger.debug(
            "Finding items",
            query=query,
            offset=pagination.offset,
            limit=pagination.limit,
        )
        try:
            cursor = self.collection.find(
                query,
                skip=pagination.offset,
                limit=pagination.limit,
            )
            return await cursor.to_list(length=pagination.limit)
        except PyMongoError as e:
            logger.error("MongoDB error finding items", query=query, error=str(e))
            raise

    async def count(self, query: dict[str, Any]) -> int:
        """Count documents matching a predicate.

        Args:
            query: MongoDB predicate.

        Returns:
            Number of matching documents.
        """
        logger.debug("Counting items", query=query)
        try:
            return await self.collection.count_documents(query)
        except PyMongoError as e:
            logger.error("MongoDB error counting items", query=query, error=str(e))
            raise

    async def category_counts(self) -> list[dict[str, Any]]:
        """Count items per non-null category, sorted by label.

        Returns:
            Rows shaped ``{"_id": <category>, "num": <count>}``.
        """
        logger.debug("Aggregating category counts")
        try:
            cursor = self.collection.aggregate(CATEGORY_COUNTS_PIPELINE)
            return await cursor.to_list(length=None)
        except PyMongoError as e:
            logger.error("MongoDB error aggregating categories", error=str(e))
            raise

    async def find_by_id(self, item_id: Any) -> dict[str, Any] | None:
        """Get a document by ``_id``.

        Args:
            item_id: Item identifier.

        Returns:
            Document if found, None otherwise.
        """
        logger.debug("Fetching item", item_id=item_id)
        try:
            return await self.collection.find_one({"_id": item_id})
        except PyMongoError as e:
            logger.error("MongoDB error fetching item", item_id=item_id, error=str(e))
            raise

    async def sample(self, limit: int) -> list[dict[str, Any]]:
        """Get up to ``limit`` documents with no filter or ordering.

        Args:
            limit: Maximum documents to return.

        Returns:
            Documents in natural order.
        """
        logger.debug("Sampling items", limit=limit)
        try:
            cursor = self.collection.find({}, limit=limit)
            return await cursor.to_list(length=limit)
        except PyMongoError as e:
            logger.error("MongoDB error sampling items", limit=limit, error=str(e))
            raise

    async def push_review(
        self,
        item_id: Any,
        review: dict[str, Any],
    ) -> UpdateResult:
        """Append a review document to an item's ``reviews`` array.

        Uses a single ``$push`` update, never an upsert, so concurrent
        appends to the same item are all kept.

        Args:
            item_id: Item identifier.
            review: Embedded review document.

        Returns:
            Driver update result (``matched_count`` is 0 for unknown ids).
        """
        logger.debug("Pushing review", item_id=item_id)
        try:
            return await self.collection.update_one(
                {"_id": item_id},
                {"$push": {"reviews": review}},
            )
        except PyMongoError as e:
            logger.error("MongoDB error adding review", item_id=item_id, error=str(e))
            raise
