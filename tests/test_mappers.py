"""Tests for conversions between domain models and API schemas."""
from datetime import date

from bookstore_api.app import mappers
from bookstore_api.app.models import Book, Category
from bookstore_api.app.schemas.book import BookAdd, BookEdit
from bookstore_api.app.schemas.category import CategoryEdit


def test_book_to_result_includes_category_name():
    """Test that the category name is flattened into the result."""
    book = Book(
        id=3,
        name="Dune",
        author="Frank Herbert",
        description="",
        value=10.0,
        publish_date=date(1965, 8, 1),
        category_id=1,
        category=Category(id=1, name="Fiction"),
    )

    result = mappers.book_to_result(book)

    assert result.id == 3
    assert result.category_name == "Fiction"
    assert result.publish_date == date(1965, 8, 1)


def test_book_to_result_without_loaded_category():
    """Test that a missing category leaves category_name empty."""
    book = Book(
        id=3,
        name="Dune",
        author="Frank Herbert",
        description="",
        value=10.0,
        publish_date=date(1965, 8, 1),
        category_id=1,
    )

    assert mappers.book_to_result(book).category_name is None


def test_book_from_add_has_no_id():
    """Test that creation payloads map to unsaved books."""
    data = BookAdd(
        category_id=1,
        name="Dune",
        author="Frank Herbert",
        value=10,
        publish_date="1965-08-01",
    )

    book = mappers.book_from_add(data)

    assert book.id is None
    assert book.description == ""
    assert book.publish_date == date(1965, 8, 1)


def test_book_from_edit_keeps_id():
    """Test that edit payloads keep their id."""
    data = BookEdit(
        id=7,
        category_id=1,
        name="Dune",
        author="Frank Herbert",
        value=10,
        publish_date="1965-08-01",
    )

    assert mappers.book_from_edit(data).id == 7


def test_category_round_trip_through_edit():
    """Test mapping a category edit payload and back to a result."""
    category = mappers.category_from_edit(CategoryEdit(id=2, name="History"))

    assert category == Category(id=2, name="History")
    assert mappers.category_to_result(category).model_dump() == {"id": 2, "name": "History"}
