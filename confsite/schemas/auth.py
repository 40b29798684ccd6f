"""Pydantic schemas for authentication."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field, model_validator


class AdminUserCreate(BaseModel):
    """Schema for creating a dashboard account."""

    email: EmailStr
    password: str = Field(..., min_length=8, max_length=100)


class AdminLogin(BaseModel):
    """Schema for admin login."""

    email: EmailStr
    password: str


class AdminUserResponse(BaseModel):
    """Schema for admin user response."""

    id: UUID
    email: str
    is_active: bool
    created_at: datetime

    model_config = {"from_attributes": True}


class ChangePasswordRequest(BaseModel):
    """Schema for changing the current user's password."""

    current_password: str = Field(..., min_length=6)
    new_password: str = Field(..., min_length=8, max_length=100)
    confirm_password: str

    @model_validator(mode="after")
    def passwords_match(self) -> "ChangePasswordRequest":
        if self.new_password != self.confirm_password:
            raise ValueError("New passwords do not match")
        return self
