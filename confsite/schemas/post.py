"""Pydantic schemas for news posts and SG notes."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from confsite.models.post import PostType


class PostCreate(BaseModel):
    """Schema for publishing a post."""

    title: str = Field(..., min_length=1, max_length=300)
    content: str = Field(..., min_length=1)
    type: PostType


class PostUpdate(BaseModel):
    """Schema for editing a post."""

    title: str | None = Field(None, min_length=1, max_length=300)
    content: str | None = Field(None, min_length=1)


class PostResponse(BaseModel):
    """Schema for post response."""

    id: UUID
    title: str
    content: str
    type: PostType
    created_at: datetime

    model_config = {"from_attributes": True}
