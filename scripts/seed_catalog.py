#!/usr/bin/env python3
"""Seed item catalog script.

Provisions the catalog indexes (including the text index used by search)
and loads a deterministic sample catalog into the item collection.

Usage:
    python scripts/seed_catalog.py --mode small
    python scripts/seed_catalog.py --mode full --no-clear
"""

import argparse
import asyncio

import structlog

from mongomart.catalog.generator import GeneratorConfig, seed_catalog
from mongomart.infrastructure.config import settings
from mongomart.infrastructure.database import (
    create_client,
    ensure_indexes,
    get_database,
    ping,
)
from mongomart.infrastructure.logging import configure_logging

logger = structlog.get_logger()


async def seed(mode: str, clear: bool, seed_value: int | None) -> dict:
    """Seed the item collection.

    Args:
        mode: Catalog size (small/full).
        clear: Whether to delete existing items first.
        seed_value: Optional override for the generator seed.

    Returns:
        Seeding result.
    """
    config = GeneratorConfig.full() if mode == "full" else GeneratorConfig.small()
    if seed_value is not None:
        config.seed = seed_value

    client = create_client(settings)
    try:
        database = get_database(client, settings)
        if not await ping(database):
            raise SystemExit(f"MongoDB not reachable at {settings.mongodb_url}")

        collection = database[settings.item_collection]

        indexes = await ensure_indexes(collection)
        result = await seed_catalog(collection, config, clear_existing=clear)
        return {**result, "indexes": indexes}
    finally:
        client.close()


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Seed the MongoMart item catalog",
    )
    parser.add_argument(
        "--mode",
        choices=["small", "full"],
        default="small",
        help="Catalog size: small (~25 items) or full (~100 items)",
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Don't clear existing items before seeding",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for item generation",
    )

    args = parser.parse_args()

    configure_logging(settings.log_level, json=settings.log_json)

    result = asyncio.run(seed(args.mode, clear=not args.no_clear, seed_value=args.seed))
    logger.info("Seeding complete", mode=args.mode, **result)


if __name__ == "__main__":
    main()
