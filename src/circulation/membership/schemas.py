"""Pydantic schemas for membership input."""

from pydantic import BaseModel, Field


class MemberCreate(BaseModel):
    """Schema for registering a member."""

    name: str = Field(..., min_length=1, max_length=200)
    member_id: int

    model_config = {"str_strip_whitespace": True}
