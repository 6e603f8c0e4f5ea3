"""
Repository layer.

One repository per entity translates domain operations into ``Store``
calls.  Repositories are the only code allowed to read or write the
store; services receive them through their constructors.
"""

from .book_repository import BookRepository
from .category_repository import CategoryRepository

__all__ = ["BookRepository", "CategoryRepository"]
