"""MongoDB connection and provisioning.

Provides the motor client factory plus the one-off index setup the
catalog's text search depends on. Nothing here runs per request.
"""

import structlog
from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)
from pymongo import ASCENDING, TEXT
from pymongo.errors import PyMongoError

from mongomart.infrastructure.config import Settings, settings as default_settings

logger = structlog.get_logger()

TEXT_INDEX_NAME = "item_text_index"
TEXT_INDEX_FIELDS = ("title", "slogan", "description")
CATEGORY_INDEX_NAME = "item_category_index"


def create_client(config: Settings | None = None) -> AsyncIOMotorClient:
    """Create an async MongoDB client.

    The driver connects lazily; no I/O happens here.

    Args:
        config: Settings to use. Defaults to the module-level settings.

    Returns:
        Motor client.
    """
    config = config or default_settings
    return AsyncIOMotorClient(
        config.mongodb_url,
        serverSelectionTimeoutMS=config.server_selection_timeout_ms,
    )


def get_database(
    client: AsyncIOMotorClient,
    config: Settings | None = None,
) -> AsyncIOMotorDatabase:
    """Select the configured catalog database."""
    config = config or default_settings
    return client[config.mongodb_database]


async def ping(database: AsyncIOMotorDatabase) -> bool:
    """Check that the server answers.

    Args:
        database: Database handle.

    Returns:
        True if the server replied ok, False on any driver error.
    """
    try:
        reply = await database.command({"ping": 1})
    except PyMongoError as e:
        logger.warning("MongoDB ping failed", database=database.name, error=str(e))
        return False
    return bool(reply.get("ok"))


async def ensure_indexes(collection: AsyncIOMotorCollection) -> list[str]:
    """Create the indexes the catalog queries rely on.

    Creates a single text index spanning title, slogan and description
    (MongoDB allows one text index per collection) and an ascending index
    on category. Safe to call repeatedly.

    Args:
        collection: The item collection.

    Returns:
        Names of the ensured indexes.
    """
    text_index = await collection.create_index(
        [(field, TEXT) for field in TEXT_INDEX_FIELDS],
        name=TEXT_INDEX_NAME,
    )
    category_index = await collection.create_index(
        [("category", ASCENDING)],
        name=CATEGORY_INDEX_NAME,
    )
    logger.info(
        "Catalog indexes ensured",
        collection=collection.name,
        indexes=[text_index, category_index],
    )
    return [text_index, category_index]
