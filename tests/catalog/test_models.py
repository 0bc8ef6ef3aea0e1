"""Tests for catalog models."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest
from bson import Decimal128, ObjectId
from pydantic import ValidationError

from mongomart.catalog.models import CategoryCount, Item, Review


class TestReview:
    """Tests for Review."""

    def test_create_stamps_time(self) -> None:
        """New reviews carry the current UTC time."""
        before = datetime.now(timezone.utc)
        review = Review.create(name="Ada", comment="Lovely", stars=4)
        after = datetime.now(timezone.utc)

        assert before <= review.date <= after
        assert review.date.tzinfo is not None

    def test_to_document(self) -> None:
        """Reviews serialize to the embedded shape."""
        review = Review.create(name="Ada", comment="Lovely", stars=4)
        document = review.to_document()

        assert set(document) == {"name", "comment", "stars", "date"}
        assert document["stars"] == 4

    @pytest.mark.parametrize("stars", [-1, 6])
    def test_stars_range(self, stars: int) -> None:
        """Stars must be between 0 and 5."""
        with pytest.raises(ValidationError):
            Review.create(name="Ada", comment="x", stars=stars)


class TestItem:
    """Tests for Item."""

    def test_from_document(self, item_doc) -> None:
        """Documents map onto items by _id."""
        item = Item.from_document(item_doc(5, "Books", price=12.5))

        assert item.id == 5
        assert item.category == "Books"
        assert item.price == Decimal("12.5")

    def test_decimal128_price(self, item_doc) -> None:
        """BSON Decimal128 prices map to Decimal."""
        item = Item.from_document(item_doc(1, price=Decimal128("29.99")))

        assert item.price == Decimal("29.99")

    def test_object_id(self, item_doc) -> None:
        """ObjectId identifiers are kept as-is."""
        oid = ObjectId()
        assert Item.from_document(item_doc(oid)).id == oid

    def test_sparse_document(self) -> None:
        """Missing fields fall back to defaults."""
        item = Item.from_document({"_id": 1, "extra": "ignored"})

        assert item.title == ""
        assert item.category is None
        assert item.reviews == []

    def test_reviews_keep_order(self, item_doc) -> None:
        """Embedded reviews keep their stored order."""
        reviews = [
            {"name": "A", "comment": "first", "stars": 5, "date": datetime(2024, 1, 1)},
            {"name": "B", "comment": "second", "stars": 1, "date": datetime(2024, 1, 2)},
        ]
        item = Item.from_document(item_doc(1, reviews=reviews))

        assert [r.comment for r in item.reviews] == ["first", "second"]
        assert item.review_count == 2
        assert item.average_review_stars == 3

    def test_no_reviews_average(self, item_doc) -> None:
        """Average rating is None without reviews."""
        assert Item.from_document(item_doc(1)).average_review_stars is None

    def test_to_document(self) -> None:
        """Items serialize back keyed by _id."""
        item = Item(id=3, title="Mug", price=Decimal("4.99"))
        document = item.to_document()

        assert document["_id"] == 3
        assert document["price"] == 4.99
        assert "id" not in document


class TestCategoryCount:
    """Tests for CategoryCount."""

    def test_is_all(self) -> None:
        """Only the All row is the synthetic total."""
        assert CategoryCount(label="All", count=3).is_all
        assert not CategoryCount(label="Apparel", count=3).is_all

    def test_frozen(self) -> None:
        """Rows are immutable."""
        row = CategoryCount(label="Books", count=1)
        with pytest.raises(ValidationError):
            row.count = 2
