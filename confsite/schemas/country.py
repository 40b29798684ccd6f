"""Pydantic schemas for the country matrix."""

from uuid import UUID

from pydantic import BaseModel, Field

from confsite.models.country import CountryStatus


class CountryCreate(BaseModel):
    """Schema for adding a country to a committee."""

    name: str = Field(..., min_length=1, max_length=200)
    committee: str = Field(..., min_length=1, max_length=200)
    status: CountryStatus = CountryStatus.AVAILABLE


class CountryStatusUpdate(BaseModel):
    """Schema for assigning or releasing a country."""

    status: CountryStatus


class CountryResponse(BaseModel):
    """Schema for country response."""

    id: UUID
    name: str
    committee: str
    status: CountryStatus

    model_config = {"from_attributes": True}
