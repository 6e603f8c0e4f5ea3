"""Tests for the book and category repositories."""
import asyncio

import pytest

from bookstore_api.app.core.exceptions import NotFoundError
from bookstore_api.app.models import Category


def test_get_all_on_empty_store(book_repository, category_repository):
    """Test that an empty store yields empty lists."""
    assert asyncio.run(book_repository.get_all()) == []
    assert asyncio.run(category_repository.get_all()) == []


def test_get_all_books_includes_category(book_repository, dune):
    """Test that loaded books carry their category."""
    books = asyncio.run(book_repository.get_all())

    assert len(books) == 1
    assert books[0].name == "Dune"
    assert books[0].category is not None
    assert books[0].category.name == "Fiction"


def test_get_all_keeps_insertion_order(book_repository, fiction, make_book):
    """Test that books come back in the order they were stored."""
    for name in ["Dune", "Emma", "Ulysses"]:
        asyncio.run(book_repository.add(make_book(name=name, category_id=fiction.id)))

    assert [b.name for b in asyncio.run(book_repository.get_all())] == ["Dune", "Emma", "Ulysses"]


def test_get_by_id_absent_returns_none(book_repository, category_repository):
    """Test that unknown ids give None without raising."""
    assert asyncio.run(book_repository.get_by_id(99)) is None
    assert asyncio.run(category_repository.get_by_id(99)) is None


def test_ids_beyond_64_bits_are_absent(book_repository, category_repository, dune, make_book):
    """Test that lookups and writes with an oversized id report a missing row."""
    huge = 2 ** 70

    assert asyncio.run(category_repository.get_by_id(huge)) is None
    assert asyncio.run(book_repository.get_by_id(huge)) is None
    assert asyncio.run(book_repository.remove(make_book(id=huge))) is False
    assert asyncio.run(category_repository.remove(Category(id=huge, name="Ghost"))) is False

    with pytest.raises(NotFoundError):
        asyncio.run(book_repository.update(make_book(id=huge, name="Ghost")))
    with pytest.raises(NotFoundError):
        asyncio.run(category_repository.update(Category(id=huge, name="Ghost")))

    assert [b.id for b in asyncio.run(book_repository.get_all())] == [dune.id]


def test_add_populates_id(book_repository, fiction, make_book):
    """Test that add returns the stored book with its new id."""
    book = asyncio.run(book_repository.add(make_book(category_id=fiction.id)))

    assert book.id == 1
    assert book.category == fiction


def test_get_by_category(book_repository, dune):
    """Test filtering books by category id."""
    books = asyncio.run(book_repository.get_by_category(1))

    assert [b.id for b in books] == [1]
    assert asyncio.run(book_repository.get_by_category(2)) == []


def test_update_book(book_repository, dune):
    """Test that update overwrites the stored fields."""
    dune.value = 12.5
    dune.description = "Second edition"
    asyncio.run(book_repository.update(dune))

    stored = asyncio.run(book_repository.get_by_id(dune.id))
    assert stored.value == 12.5
    assert stored.description == "Second edition"


def test_update_absent_book_raises_and_does_not_insert(book_repository, dune, make_book):
    """Test that updating an unknown id fails without creating a row."""
    before = len(asyncio.run(book_repository.get_all()))

    with pytest.raises(NotFoundError):
        asyncio.run(book_repository.update(make_book(id=99, name="Ghost")))

    assert len(asyncio.run(book_repository.get_all())) == before


def test_update_absent_category_raises(category_repository):
    """Test that updating an unknown category raises NotFoundError."""
    with pytest.raises(NotFoundError):
        asyncio.run(category_repository.update(Category(id=5, name="Ghost")))


def test_remove_reports_whether_a_row_was_deleted(book_repository, dune):
    """Test that remove returns True once and False afterwards."""
    assert asyncio.run(book_repository.remove(dune)) is True
    assert asyncio.run(book_repository.remove(dune)) is False
    assert asyncio.run(book_repository.get_by_id(dune.id)) is None


def test_search_book_with_category(book_repository, category_repository, fiction, make_book):
    """Test searching text fields and category names together."""
    history = asyncio.run(category_repository.add(Category(name="History")))
    asyncio.run(book_repository.add(make_book(name="Dune", category_id=fiction.id)))
    asyncio.run(book_repository.add(
        make_book(name="SPQR", author="Mary Beard", description="Ancient Rome", category_id=history.id)
    ))
    asyncio.run(book_repository.add(
        make_book(name="History of Rome", author="Livy", description="", category_id=fiction.id)
    ))

    books = asyncio.run(book_repository.search_book_with_category("history"))

    # SPQR matches through its category, the third book through its name.
    assert [b.name for b in books] == ["SPQR", "History of Rome"]


def test_search_book_with_category_without_duplicates(book_repository, category_repository, make_book):
    """Test that a book matching on several fields is returned once."""
    poetry = asyncio.run(category_repository.add(Category(name="Poetry")))
    asyncio.run(book_repository.add(
        make_book(name="Poetry in Motion", description="poetry", category_id=poetry.id)
    ))

    assert len(asyncio.run(book_repository.search_book_with_category("POETRY"))) == 1
