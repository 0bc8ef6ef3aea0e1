"""Catalog document models.

Pydantic models for the ``item`` collection and the derived category
facet rows. Documents are mapped into these on the way out of the store.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Self

from bson import Decimal128
from pydantic import BaseModel, ConfigDict, Field, field_validator

ALL_CATEGORIES = "All"


class Review(BaseModel):
    """A review embedded in an item document.

    Reviews are owned by their item and are only ever appended.

    Attributes:
        name: Reviewer name.
        comment: Review text.
        stars: Star rating (0-5).
        date: Creation timestamp (UTC).
    """

    name: str
    comment: str
    stars: int = Field(..., ge=0, le=5)
    date: datetime

    @classmethod
    def create(cls, name: str, comment: str, stars: int) -> Self:
        """Create a review stamped with the current time.

        Args:
            name: Reviewer name.
            comment: Review text.
            stars: Star rating.

        Returns:
            New Review.

        Raises:
            pydantic.ValidationError: If a field is invalid.
        """
        return cls(
            name=name,
            comment=comment,
            stars=stars,
            date=datetime.now(timezone.utc),
        )

    def to_document(self) -> dict[str, Any]:
        """Convert to the embedded BSON shape."""
        return self.model_dump()


class Item(BaseModel):
    """Product document from the ``item`` collection.

    Attributes:
        id: Document ``_id``; any BSON value (int, str, ObjectId).
        title: Product title.
        description: Long description.
        slogan: Marketing line.
        category: Category label, or None when uncategorized.
        price: Price in major currency units.
        img_url: Image reference.
        stars: Star rating.
        reviews: Reviews in append order.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: Any = Field(..., alias="_id")
    title: str = ""
    description: str = ""
    slogan: str = ""
    category: str | None = None
    price: Decimal = Decimal("0")
    img_url: str = ""
    stars: float = 0
    reviews: list[Review] = Field(default_factory=list)

    @field_validator("price", mode="before")
    @classmethod
    def _decimal128_price(cls, value: Any) -> Any:
        """Unwrap BSON Decimal128 prices."""
        if isinstance(value, Decimal128):
            return value.to_decimal()
        return value

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> Self:
        """Build an item from a raw store document.

        Args:
            document: Document as returned by the driver.

        Returns:
            Item instance.
        """
        return cls.model_validate(document)

    def to_document(self) -> dict[str, Any]:
        """Convert back to the stored shape, keyed by ``_id``."""
        document = self.model_dump(by_alias=True)
        document["price"] = float(self.price)
        return document

    @property
    def review_count(self) -> int:
        """Number of reviews."""
        return len(self.reviews)

    @property
    def average_review_stars(self) -> float | None:
        """Mean review rating, or None without reviews."""
        if not self.reviews:
            return None
        return sum(r.stars for r in self.reviews) / len(self.reviews)


class CategoryCount(BaseModel):
    """Number of items carrying one category label.

    The label ``"All"`` is synthetic: its count is the sum over every
    real category and it never exists on a stored item.
    """

    model_config = ConfigDict(frozen=True)

    label: str
    count: int

    @property
    def is_all(self) -> bool:
        """Whether this is the synthetic total row."""
        return self.label == ALL_CATEGORIES
