"""
Error taxonomy shared by the repository and service layers.

Services raise these exceptions for expected, caller-recoverable
conditions; the API handlers translate them into HTTP responses.
Failures coming from the storage engine itself (e.g.
``sqlite3.Error``) are not wrapped and propagate as is.
"""


class CatalogError(Exception):
    """Base class for expected catalog failures."""


class NotFoundError(CatalogError):
    """The requested entity does not exist."""


class ValidationFailedError(CatalogError):
    """Input is malformed or references an entity that does not exist."""


class OperationRejectedError(CatalogError):
    """A business rule forbids the requested operation."""
