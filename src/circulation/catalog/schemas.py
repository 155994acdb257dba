"""Pydantic schemas for catalog input."""

from pydantic import BaseModel, Field


class BookCreate(BaseModel):
    """Schema for adding a book to the catalog."""

    title: str = Field(..., min_length=1, max_length=500)
    author: str = Field(..., min_length=1, max_length=200)
    identifier: str = Field(..., min_length=1, max_length=50)

    model_config = {"str_strip_whitespace": True}
