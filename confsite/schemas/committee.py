"""Pydantic schemas for committees."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from confsite.schemas.common import optional_image_url


class ChairInfo(BaseModel):
    """Committee chair as entered in the dashboard."""

    name: str = Field("", max_length=200)
    bio: str = ""
    image_url: str = ""

    @field_validator("image_url")
    @classmethod
    def validate_image_url(cls, v: str) -> str:
        return optional_image_url(v)


def clean_topics(topics: list[str]) -> list[str]:
    """Strip topics and drop blank entries."""
    return [topic.strip() for topic in topics if topic and topic.strip()]


class CommitteeCreate(BaseModel):
    """Schema for creating a committee."""

    name: str = Field(..., min_length=1, max_length=200)
    chair: ChairInfo = Field(default_factory=ChairInfo)
    topics: list[str] = Field(default_factory=list)
    background_guide_url: str = Field("", max_length=1000)

    @field_validator("topics")
    @classmethod
    def validate_topics(cls, v: list[str]) -> list[str]:
        return clean_topics(v)


class CommitteeUpdate(BaseModel):
    """Schema for updating a committee."""

    name: str | None = Field(None, min_length=1, max_length=200)
    chair: ChairInfo | None = None
    topics: list[str] | None = None
    background_guide_url: str | None = Field(None, max_length=1000)

    @field_validator("topics")
    @classmethod
    def validate_topics(cls, v: list[str] | None) -> list[str] | None:
        if v is None:
            return v
        return clean_topics(v)


class ChairResponse(BaseModel):
    name: str
    bio: str
    image_url: str


class CommitteeResponse(BaseModel):
    """Schema for committee response."""

    id: UUID
    name: str
    chair: ChairResponse
    topics: list[str]
    background_guide_url: str
    created_at: datetime

    model_config = {"from_attributes": True}
