"""
Pydantic schemas for categories.
"""

from pydantic import BaseModel, Field


class CategoryAdd(BaseModel):
    """Schema for creating a category."""

    name: str = Field(..., min_length=2, max_length=150, examples=["Fiction"])


class CategoryEdit(BaseModel):
    """Schema for updating a category.

    ``id`` must match the id in the request path.
    """

    id: int
    name: str = Field(..., min_length=2, max_length=150, examples=["Science Fiction"])


class CategoryResult(BaseModel):
    """Schema for reading a category from the API."""

    id: int
    name: str

    model_config = {
        "from_attributes": True,
    }
