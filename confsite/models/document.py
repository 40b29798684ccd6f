"""Downloadable document model."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from confsite.models.base import Base, PositionMixin, TimestampMixin, UUIDMixin


class DownloadableDocument(Base, UUIDMixin, TimestampMixin, PositionMixin):
    """Handbook, background guide or other file linked from the documents page."""

    __tablename__ = "downloadable_documents"

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    url: Mapped[str] = mapped_column(String(1000), nullable=False)
