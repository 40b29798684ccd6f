"""Committee model."""

from typing import Any

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from confsite.models.base import Base, JSONType, TimestampMixin, UUIDMixin


class Committee(Base, UUIDMixin, TimestampMixin):
    """Debate committee with its chair and agenda topics."""

    __tablename__ = "committees"

    name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    chair_name: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    chair_bio: Mapped[str] = mapped_column(Text, nullable=False, default="")
    chair_image_url: Mapped[str] = mapped_column(String(1000), nullable=False, default="")
    topics: Mapped[list[Any]] = mapped_column(JSONType, nullable=False, default=list)
    background_guide_url: Mapped[str] = mapped_column(String(1000), nullable=False, default="")

    @property
    def chair(self) -> dict[str, str]:
        """Chair details as a nested object."""
        return {
            "name": self.chair_name,
            "bio": self.chair_bio,
            "image_url": self.chair_image_url,
        }
