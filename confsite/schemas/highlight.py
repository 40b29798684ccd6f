"""Pydantic schemas for home page highlights."""

from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from confsite.models.highlight import HighlightIcon


class HighlightCreate(BaseModel):
    """Schema for adding a highlight. Unknown icon names fall back to HelpCircle."""

    icon: HighlightIcon = HighlightIcon.HELP_CIRCLE
    title: str = Field(..., min_length=1, max_length=200)
    description: str = ""

    @field_validator("icon", mode="before")
    @classmethod
    def resolve_icon(cls, v: object) -> HighlightIcon:
        return HighlightIcon.resolve(v if isinstance(v, str) else None)


class HighlightUpdate(BaseModel):
    """Schema for updating a highlight."""

    icon: HighlightIcon | None = None
    title: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None

    @field_validator("icon", mode="before")
    @classmethod
    def resolve_icon(cls, v: object) -> HighlightIcon | None:
        if v is None:
            return None
        return HighlightIcon.resolve(v if isinstance(v, str) else None)


class HighlightResponse(BaseModel):
    """Schema for highlight response."""

    id: UUID
    icon: HighlightIcon
    title: str
    description: str
    position: int

    model_config = {"from_attributes": True}
