"""Shared fixtures: stores, repositories, services and an API client."""
import asyncio
from datetime import date

import pytest
from fastapi.testclient import TestClient

from bookstore_api.app.core.db import SQLiteStore
from bookstore_api.app.core.memory_store import InMemoryStore
from bookstore_api.app.main import create_app
from bookstore_api.app.models import Book, Category
from bookstore_api.app.repositories import BookRepository, CategoryRepository
from bookstore_api.app.services import BookService, CategoryService


@pytest.fixture(params=["memory", "sqlite"])
def store(request, tmp_path):
    """Every store-backed test runs against both backends."""
    if request.param == "memory":
        return InMemoryStore()
    return SQLiteStore(str(tmp_path / "bookstore-test.db")).init()


@pytest.fixture
def book_repository(store):
    return BookRepository(store)


@pytest.fixture
def category_repository(store):
    return CategoryRepository(store)


@pytest.fixture
def book_service(book_repository, category_repository):
    return BookService(book_repository, category_repository)


@pytest.fixture
def category_service(category_repository, book_repository):
    return CategoryService(category_repository, book_repository)


@pytest.fixture
def make_book():
    """Build an unsaved book; keyword arguments override the defaults."""
    def _make_book(**overrides):
        fields = {
            "name": "Dune",
            "author": "Frank Herbert",
            "description": "Desert planet, spice and politics",
            "value": 39.9,
            "publish_date": date(1965, 8, 1),
            "category_id": 1,
        }
        fields.update(overrides)
        return Book(**fields)
    return _make_book


@pytest.fixture
def fiction(category_repository):
    """Category{id: 1, name: "Fiction"} stored before the test runs."""
    return asyncio.run(category_repository.add(Category(name="Fiction")))


@pytest.fixture
def dune(book_repository, fiction, make_book):
    """Book{id: 1, name: "Dune", category_id: 1} stored before the test runs."""
    return asyncio.run(book_repository.add(make_book(category_id=fiction.id)))


@pytest.fixture
def client(store):
    app = create_app(store=store)
    with TestClient(app) as test_client:
        yield test_client
