"""Sample catalog generator with deterministic seeding.

Produces item documents for development and test databases. The catalog
layer never creates items itself; this is what the seeding script uses.
"""

import random
from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Any, Iterator

import structlog
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import DESCENDING

from mongomart.catalog.models import Item

logger = structlog.get_logger()


# ============================================================================
# Constants
# ============================================================================

# Categories in the sample store
CATEGORIES = [
    "Apparel",
    "Books",
    "Electronics",
    "Kitchen",
    "Office",
    "Stickers",
    "Swag",
    "Umbrellas",
]

# Price ranges by category (in cents)
PRICE_RANGES: dict[str, tuple[int, int]] = {
    "Apparel": (999, 5999),
    "Books": (1499, 4999),
    "Electronics": (1999, 14999),
    "Kitchen": (499, 2999),
    "Office": (199, 1999),
    "Stickers": (99, 499),
    "Umbrellas": (1499, 3999),
    "default": (499, 2999),
}

# Nouns per category used in titles
NOUNS: dict[str, list[str]] = {
    "Apparel": ["Hooded Sweatshirt", "T-shirt", "Track Jacket", "Beanie", "Socks"],
    "Books": ["Definitive Guide", "Cookbook", "Handbook", "Field Manual"],
    "Electronics": ["USB Stick", "Phone Case", "Power Bank", "Earbuds"],
    "Kitchen": ["Coffee Mug", "Water Bottle", "Travel Tumbler", "Coaster Set"],
    "Office": ["Notebook", "Pen", "Desk Mat", "Lanyard"],
    "Stickers": ["Leaf Sticker", "Logo Sticker", "Sticker Pack"],
    "Umbrellas": ["Umbrella", "Golf Umbrella", "Compact Umbrella"],
    "default": ["Keychain", "Tote Bag", "Pin"],
}

ADJECTIVES = [
    "Gray", "Green", "Classic", "Vintage", "Premium", "Compact",
    "Oversized", "Striped", "Limited Edition", "Essential",
]

SLOGANS = [
    "Made of 100% cotton",
    "Built to last",
    "A developer favorite",
    "Show your stack",
    "Ships in recycled packaging",
    "Now with more leaf",
]


def sample_item() -> Item:
    """Get the canonical demo item.

    Returns:
        A single Apparel item with no reviews.
    """
    return Item(
        id=1,
        title="Gray Hooded Sweatshirt",
        description="The top hooded sweatshirt we offer",
        slogan="Made of 100% cotton",
        stars=0,
        category="Apparel",
        img_url="/img/products/hoodie.jpg",
        price=Decimal("29.99"),
        reviews=[],
    )


# ============================================================================
# Generator Configuration
# ============================================================================


@dataclass
class GeneratorConfig:
    """Configuration for item generation.

    Attributes:
        seed: Random seed for reproducibility.
        items_per_category: Number of items per category.
        categories: Category labels to generate items for.
        uncategorized: Extra items with a null category.
        start_id: First integer ``_id`` handed out.
    """

    seed: int = 42
    items_per_category: int = 5
    categories: list[str] = field(default_factory=lambda: list(CATEGORIES))
    uncategorized: int = 0
    start_id: int = 1

    @classmethod
    def small(cls) -> "GeneratorConfig":
        """Create config for a small catalog (~25 items)."""
        return cls(seed=42, items_per_category=3, uncategorized=1)

    @classmethod
    def full(cls) -> "GeneratorConfig":
        """Create config for a full catalog (~100 items)."""
        return cls(seed=42, items_per_category=12, uncategorized=4)


# ============================================================================
# Item Generator
# ============================================================================


class ItemGenerator:
    """Generates item catalogs with deterministic seeding.

    Items get sequential integer ids starting at ``config.start_id``.

    Example usage:
        generator = ItemGenerator(GeneratorConfig.small())
        documents = [item.to_document() for item in generator.generate()]
    """

    def __init__(self, config: GeneratorConfig) -> None:
        """Initialize generator with configuration.

        Args:
            config: Generator configuration.
        """
        self.config = config
        self.rng = random.Random(config.seed)
        self._item_counter = config.start_id - 1

    @property
    def expected_count(self) -> int:
        """Number of items generate() will yield."""
        return (
            len(self.config.categories) * self.config.items_per_category
            + self.config.uncategorized
        )

    def _generate_price(self, category: str | None) -> Decimal:
        low, high = PRICE_RANGES.get(category or "default", PRICE_RANGES["default"])
        cents = self.rng.randint(low, high)
        # Prices end in .99
        cents = cents - cents % 100 + 99
        return Decimal(cents) / 100

    def _generate_item(self, category: str | None) -> Item:
        """Generate a single item.

        Args:
            category: Category label, or None for an uncategorized item.

        Returns:
            Generated item.
        """
        self._item_counter += 1
        noun = self.rng.choice(NOUNS.get(category or "default", NOUNS["default"]))
        adjective = self.rng.choice(ADJECTIVES)
        title = f"{adjective} {noun}"
        slug = title.lower().replace(" ", "-")

        return Item(
            id=self._item_counter,
            title=title,
            description=f"The {title.lower()} from the MongoMart store",
            slogan=self.rng.choice(SLOGANS),
            category=category,
            price=self._generate_price(category),
            img_url=f"/img/products/{slug}.jpg",
            stars=self.rng.randint(0, 5),
            reviews=[],
        )

    def generate(self) -> Iterator[Item]:
        """Generate the catalog.

        Yields:
            Items, grouped by category, uncategorized ones last.
        """
        for category in self.config.categories:
            for _ in range(self.config.items_per_category):
                yield self._generate_item(category)
        for _ in range(self.config.uncategorized):
            yield self._generate_item(None)

    def generate_list(self) -> list[Item]:
        """Generate the catalog as a list."""
        return list(self.generate())


# ============================================================================
# Seeding
# ============================================================================


async def next_item_id(collection: AsyncIOMotorCollection) -> int:
    """Get the first free integer ``_id`` in the collection.

    Only numeric ids are considered; documents keyed by ObjectId or
    strings never collide with generated integer ids.

    Args:
        collection: The item collection.

    Returns:
        One past the highest numeric ``_id``, or 1 for an empty collection.
    """
    cursor = collection.find(
        {"_id": {"$gte": 0}},
        projection={"_id": 1},
        sort=[("_id", DESCENDING)],
        limit=1,
    )
    documents = await cursor.to_list(length=1)
    if not documents:
        return 1
    return int(documents[0]["_id"]) + 1


async def seed_catalog(
    collection: AsyncIOMotorCollection,
    config: GeneratorConfig,
    clear_existing: bool = True,
) -> dict[str, Any]:
    """Load a generated catalog into the item collection.

    When existing items are kept, generated ids continue after the
    highest numeric ``_id`` already stored.

    Args:
        collection: The item collection.
        config: Generator configuration; its ``start_id`` is ignored.
        clear_existing: Whether to delete existing items first.

    Returns:
        Seeding result with counts.
    """
    deleted = 0
    if clear_existing:
        result = await collection.delete_many({})
        deleted = result.deleted_count
        start_id = 1
    else:
        start_id = await next_item_id(collection)
    config = replace(config, start_id=start_id)

    items = ItemGenerator(config).generate_list()
    if items:
        await collection.insert_many([item.to_document() for item in items])

    logger.info(
        "Catalog seeded",
        collection=collection.name,
        deleted=deleted,
        items_created=len(items),
        first_id=config.start_id,
    )

    return {
        "deleted": deleted,
        "items_created": len(items),
        "first_id": config.start_id,
        "categories_used": len({i.category for i in items if i.category}),
    }
