"""
Main entrypoint for the Bookstore API.

This module assembles the FastAPI application: it sets up logging,
builds the object graph (store, repositories, services) and includes
the versioned routers.  ``create_app`` does the work and the module
instantiates it once as ``app`` so it can be served with::

    uvicorn bookstore_api.app.main:app --reload

Components are wired by explicit constructor injection; pass a ``Store``
to ``create_app`` to run the application against a different backend.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import SQLiteStore, get_database_path
from .core.logging_config import setup_logging
from .core.memory_store import InMemoryStore
from .core.store import Store
from .repositories import BookRepository, CategoryRepository
from .services import BookService, CategoryService


def build_store() -> Store:
    """Create the store selected by ``settings.storage_backend``."""
    if settings.storage_backend == "memory":
        return InMemoryStore()
    if settings.storage_backend == "sqlite":
        return SQLiteStore(get_database_path(settings.database_url))
    raise ValueError(f"Unsupported storage backend: {settings.storage_backend!r}")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Apply migrations at startup.  This creates the database file if
    # it does not exist yet.
    if isinstance(app.state.store, SQLiteStore):
        app.state.store.init()
    yield


def create_app(store: Optional[Store] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[Store]
        Backend for the repositories.  When omitted the store configured
        in ``settings`` is used.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.state.store = store if store is not None else build_store()
    book_repository = BookRepository(app.state.store)
    category_repository = CategoryRepository(app.state.store)
    app.state.book_service = BookService(book_repository, category_repository)
    app.state.category_service = CategoryService(category_repository, book_repository)

    app.include_router(v1_router, prefix="/api/v1")

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Malformed payloads are reported as 400, like every other
        # rejected request.
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_errors(exc)},
        )

    @app.get("/")
    def health_check():
        return {"status": "ok"}

    return app


def jsonable_errors(exc: RequestValidationError) -> list:
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]


app = create_app()
