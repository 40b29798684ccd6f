"""Conference highlight model and its icon vocabulary."""

import enum

from sqlalchemy import Enum, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from confsite.models.base import Base, PositionMixin, TimestampMixin, UUIDMixin


class HighlightIcon(str, enum.Enum):
    """Icons a highlight card can show. Values are the frontend icon names."""

    CALENDAR = "Calendar"
    MAP_PIN = "MapPin"
    USERS = "Users"
    GLOBE = "Globe"
    AWARD = "Award"
    TROPHY = "Trophy"
    MIC = "Mic"
    BOOK_OPEN = "BookOpen"
    CLOCK = "Clock"
    STAR = "Star"
    LANDMARK = "Landmark"
    HANDSHAKE = "Handshake"
    GAVEL = "Gavel"
    HELP_CIRCLE = "HelpCircle"

    @classmethod
    def resolve(cls, name: str | None) -> "HighlightIcon":
        """Map an icon name to a known icon, falling back to HELP_CIRCLE.

        Matching ignores case, dashes and underscores, so "map-pin",
        "MAP_PIN" and "MapPin" all resolve to the same icon.
        """
        if isinstance(name, cls):
            return name
        if not name:
            return cls.HELP_CIRCLE
        key = name.replace("-", "").replace("_", "").replace(" ", "").lower()
        for icon in cls:
            if icon.value.lower() == key:
                return icon
        return cls.HELP_CIRCLE


class Highlight(Base, UUIDMixin, TimestampMixin, PositionMixin):
    """Key fact card on the home page (dates, location, ...)."""

    __tablename__ = "highlights"

    icon: Mapped[HighlightIcon] = mapped_column(
        Enum(HighlightIcon, name="highlight_icon_enum", values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=HighlightIcon.HELP_CIRCLE,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
