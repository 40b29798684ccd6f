"""Keyed site content documents (page copy and site configuration)."""

import enum
from typing import Any

from sqlalchemy import Enum
from sqlalchemy.orm import Mapped, mapped_column

from confsite.models.base import Base, JSONType, TimestampMixin, UUIDMixin


class ContentKey(str, enum.Enum):
    """Singleton documents editable from the dashboard."""

    HOME_PAGE = "home_page"
    ABOUT_PAGE = "about_page"
    REGISTRATION_PAGE = "registration_page"
    DOCUMENTS_PAGE = "documents_page"
    GALLERY_PAGE = "gallery_page"
    SITE_CONFIG = "site_config"


class SiteContent(Base, UUIDMixin, TimestampMixin):
    """One JSON document per content key."""

    __tablename__ = "site_content"

    key: Mapped[ContentKey] = mapped_column(
        Enum(ContentKey, name="content_key_enum", values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        unique=True,
        index=True,
    )
    data: Mapped[dict[str, Any]] = mapped_column(JSONType, nullable=False, default=dict)
