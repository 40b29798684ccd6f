"""Post model for news and Secretary-General notes."""

import enum

from sqlalchemy import Enum, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from confsite.models.base import Base, TimestampMixin, UUIDMixin


class PostType(str, enum.Enum):
    """Where a post is listed."""

    NEWS = "news"
    SG_NOTE = "sg-note"


class Post(Base, UUIDMixin, TimestampMixin):
    """Rich-text article."""

    __tablename__ = "posts"

    title: Mapped[str] = mapped_column(String(300), nullable=False)
    # HTML produced by the dashboard editor
    content: Mapped[str] = mapped_column(Text, nullable=False)
    type: Mapped[PostType] = mapped_column(
        Enum(PostType, name="post_type_enum", values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        index=True,
    )
