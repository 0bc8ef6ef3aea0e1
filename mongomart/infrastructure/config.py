"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Catalog settings loaded from ``MONGOMART_*`` environment variables."""

    # MongoDB
    mongodb_url: str = "mongodb://localhost:27017"
    mongodb_database: str = "mongomart"
    item_collection: str = "item"
    server_selection_timeout_ms: int = 5000

    # Catalog
    items_per_page: int = 5
    related_items_limit: int = 4

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    model_config = {
        "env_prefix": "MONGOMART_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
