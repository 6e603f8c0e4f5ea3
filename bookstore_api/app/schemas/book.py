"""
Pydantic schemas for books.

``BookBase`` holds the fields shared by every shape.  ``BookAdd`` is
the creation payload, ``BookEdit`` adds the ``id`` that must match the
request path on updates, and ``BookResult`` is what the API returns,
including the name of the book's category.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


class BookBase(BaseModel):
    category_id: int = Field(..., examples=[1])
    name: str = Field(..., min_length=2, max_length=150, examples=["Dune"])
    author: str = Field(..., min_length=2, max_length=150, examples=["Frank Herbert"])
    description: str = Field("", max_length=350, examples=["Desert planet, spice and politics"])
    value: float = Field(..., ge=0, examples=[39.9])
    publish_date: date = Field(..., examples=["1965-08-01"])


class BookAdd(BookBase):
    """Schema for creating a book."""


class BookEdit(BookBase):
    """Schema for updating a book."""

    id: int


class BookResult(BaseModel):
    """Schema for reading a book from the API."""

    id: int
    category_id: int
    category_name: Optional[str] = None
    name: str
    author: str
    description: str
    value: float
    publish_date: date

    model_config = {
        "from_attributes": True,
    }
