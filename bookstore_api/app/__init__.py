"""
Application package initializer.

The application is organised in layers: ``api`` (HTTP handlers),
``services`` (business rules), ``repositories`` (data access),
``core`` (configuration, logging, storage) plus the ``models``,
``schemas`` and ``mappers`` that carry data between them.
"""

from .main import app  # noqa: F401
