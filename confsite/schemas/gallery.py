"""Pydantic schemas for gallery items."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from confsite.models.gallery import DisplayStyle, MediaType
from confsite.schemas.common import convert_google_drive_link, require_http_url


class GalleryItemCreate(BaseModel):
    """Schema for adding media to the gallery.

    The dashboard sends a single ``url``; it is stored as the image or the
    video URL depending on ``media_type``.
    """

    title: str = Field(..., min_length=2, max_length=200)
    description: str | None = None
    media_type: MediaType = MediaType.IMAGE
    display: DisplayStyle = DisplayStyle.STANDARD
    column_span: int = Field(1, ge=1, le=2)
    url: str = Field(..., min_length=1, max_length=1000)

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        return require_http_url(convert_google_drive_link(v.strip()))


class GalleryItemUpdate(BaseModel):
    """Schema for updating a gallery item."""

    title: str | None = Field(None, min_length=2, max_length=200)
    description: str | None = None
    media_type: MediaType | None = None
    display: DisplayStyle | None = None
    column_span: int | None = Field(None, ge=1, le=2)
    url: str | None = Field(None, min_length=1, max_length=1000)

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return require_http_url(convert_google_drive_link(v.strip()))


class GalleryItemResponse(BaseModel):
    """Schema for gallery item response."""

    id: UUID
    title: str
    description: str | None
    media_type: MediaType
    image_url: str | None
    video_url: str | None
    url: str | None
    display: DisplayStyle
    column_span: int
    position: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class GalleryItemPublicResponse(BaseModel):
    """Schema for public gallery item response."""

    id: UUID
    title: str
    description: str | None
    media_type: MediaType
    url: str | None
    display: DisplayStyle
    column_span: int

    model_config = {"from_attributes": True}
