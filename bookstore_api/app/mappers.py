"""
Conversions between domain models and API schemas.

The functions here are pure: they build new objects and never touch
storage.  Only the API handlers call them.
"""

from typing import Iterable, List

from .models import Book, Category
from .schemas.book import BookAdd, BookEdit, BookResult
from .schemas.category import CategoryAdd, CategoryEdit, CategoryResult


def category_to_result(category: Category) -> CategoryResult:
    return CategoryResult(id=category.id, name=category.name)


def categories_to_result(categories: Iterable[Category]) -> List[CategoryResult]:
    return [category_to_result(c) for c in categories]


def category_from_add(data: CategoryAdd) -> Category:
    return Category(name=data.name)


def category_from_edit(data: CategoryEdit) -> Category:
    return Category(id=data.id, name=data.name)


def book_to_result(book: Book) -> BookResult:
    """Flatten a book and the name of its category into ``BookResult``."""
    return BookResult(
        id=book.id,
        category_id=book.category_id,
        category_name=book.category.name if book.category is not None else None,
        name=book.name,
        author=book.author,
        description=book.description,
        value=book.value,
        publish_date=book.publish_date,
    )


def books_to_result(books: Iterable[Book]) -> List[BookResult]:
    return [book_to_result(b) for b in books]


def book_from_add(data: BookAdd) -> Book:
    return Book(
        name=data.name,
        author=data.author,
        description=data.description,
        value=data.value,
        publish_date=data.publish_date,
        category_id=data.category_id,
    )


def book_from_edit(data: BookEdit) -> Book:
    book = book_from_add(data)
    book.id = data.id
    return book
