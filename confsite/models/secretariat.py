"""Secretariat member model."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from confsite.models.base import Base, PositionMixin, TimestampMixin, UUIDMixin


class SecretariatMember(Base, UUIDMixin, TimestampMixin, PositionMixin):
    """Member of the organizing team shown on the secretariat page."""

    __tablename__ = "secretariat_members"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    role: Mapped[str] = mapped_column(String(200), nullable=False)
    bio: Mapped[str] = mapped_column(Text, nullable=False, default="")
    image_url: Mapped[str] = mapped_column(String(1000), nullable=False, default="")
