"""
Service layer.

Services hold the business rules (validation, referential checks,
delete guards) on top of the repositories.  The API handlers only ever
call services; services receive their repositories as constructor
arguments.

The referential checks are a read followed by a separate write.  The
two store calls are not atomic, so a concurrent request may change the
store in between (for instance delete a category right after a book
was validated against it).  This is a known gap of the current design.
"""

from .book_service import BookService
from .category_service import CategoryService

__all__ = ["BookService", "CategoryService"]
