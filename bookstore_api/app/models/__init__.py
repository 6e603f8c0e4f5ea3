"""
Domain models.

These are the objects the repository and service layers exchange.
They are plain dataclasses with no knowledge of storage or of the API
schemas; ``mappers`` converts them to and from the transfer shapes.
"""

from .book import Book
from .category import Category

__all__ = ["Book", "Category"]
