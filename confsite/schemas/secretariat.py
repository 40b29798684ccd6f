"""Pydantic schemas for secretariat members."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from confsite.schemas.common import optional_image_url


class SecretariatMemberCreate(BaseModel):
    """Schema for adding a secretariat member."""

    name: str = Field(..., min_length=2, max_length=200)
    role: str = Field(..., min_length=2, max_length=200)
    bio: str = ""
    image_url: str = ""

    @field_validator("image_url")
    @classmethod
    def validate_image_url(cls, v: str) -> str:
        return optional_image_url(v)


class SecretariatMemberUpdate(BaseModel):
    """Schema for updating a secretariat member."""

    name: str | None = Field(None, min_length=2, max_length=200)
    role: str | None = Field(None, min_length=2, max_length=200)
    bio: str | None = None
    image_url: str | None = None

    @field_validator("image_url")
    @classmethod
    def validate_image_url(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return optional_image_url(v)


class SecretariatMemberResponse(BaseModel):
    """Schema for secretariat member response."""

    id: UUID
    name: str
    role: str
    bio: str
    image_url: str
    position: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
