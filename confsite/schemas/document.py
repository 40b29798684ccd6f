"""Pydantic schemas for downloadable documents."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class DocumentCreate(BaseModel):
    """Schema for adding a document link."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    url: str = Field(..., min_length=1, max_length=1000)


class DocumentUpdate(BaseModel):
    """Schema for updating a document link."""

    title: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    url: str | None = Field(None, min_length=1, max_length=1000)


class DocumentResponse(BaseModel):
    """Schema for document response."""

    id: UUID
    title: str
    description: str
    url: str
    position: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
