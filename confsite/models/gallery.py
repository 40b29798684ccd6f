"""Gallery item model."""

import enum

from sqlalchemy import Enum, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from confsite.models.base import Base, PositionMixin, TimestampMixin, UUIDMixin


class MediaType(str, enum.Enum):
    """Kind of media a gallery item shows."""

    IMAGE = "image"
    VIDEO = "video"


class DisplayStyle(str, enum.Enum):
    """Aspect ratio used to frame a gallery item."""

    LANDSCAPE = "16:9"
    STANDARD = "4:3"
    SQUARE = "1:1"
    PORTRAIT = "3:4"
    TALL = "9:16"
    CLASSIC_PORTRAIT = "2:3"
    CIRCLE = "circle"


class GalleryItem(Base, UUIDMixin, TimestampMixin, PositionMixin):
    """Single image or video on the gallery page."""

    __tablename__ = "gallery_items"

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    media_type: Mapped[MediaType] = mapped_column(
        Enum(MediaType, name="media_type_enum", values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=MediaType.IMAGE,
    )
    image_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    video_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    display: Mapped[DisplayStyle] = mapped_column(
        Enum(DisplayStyle, name="display_style_enum", values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=DisplayStyle.STANDARD,
    )
    column_span: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    @property
    def url(self) -> str | None:
        """URL of the media the item actually shows."""
        if self.media_type == MediaType.VIDEO:
            return self.video_url
        return self.image_url
