"""Pydantic schemas for the conference schedule."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class ScheduleDayCreate(BaseModel):
    """Schema for adding a day."""

    title: str = Field(..., min_length=1, max_length=200)
    date: str = Field("", max_length=100)


class ScheduleDayUpdate(BaseModel):
    """Schema for updating a day."""

    title: str | None = Field(None, min_length=1, max_length=200)
    date: str | None = Field(None, max_length=100)


class ScheduleDayResponse(BaseModel):
    """Schema for schedule day response."""

    id: UUID
    title: str
    date: str
    position: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ScheduleEventCreate(BaseModel):
    """Schema for adding an event to a day."""

    time: str = Field(..., min_length=1, max_length=100)
    title: str = Field(..., min_length=3, max_length=200)
    description: str = ""
    location: str = Field("", max_length=200)


class ScheduleEventUpdate(BaseModel):
    """Schema for updating an event. Setting day_id moves it to the end of that day."""

    day_id: UUID | None = None
    time: str | None = Field(None, min_length=1, max_length=100)
    title: str | None = Field(None, min_length=3, max_length=200)
    description: str | None = None
    location: str | None = Field(None, max_length=200)


class ScheduleEventResponse(BaseModel):
    """Schema for schedule event response."""

    id: UUID
    day_id: UUID
    time: str
    title: str
    description: str
    location: str
    position: int

    model_config = {"from_attributes": True}


class ScheduleDayWithEvents(BaseModel):
    """A day with its events in display order."""

    id: UUID
    title: str
    date: str
    position: int
    events: list[ScheduleEventResponse]
