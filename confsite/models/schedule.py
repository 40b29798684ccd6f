"""Schedule day and event models."""

import uuid

from sqlalchemy import ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from confsite.models.base import Base, PositionMixin, TimestampMixin, UUIDMixin


class ScheduleDay(Base, UUIDMixin, TimestampMixin, PositionMixin):
    """A conference day grouping schedule events."""

    __tablename__ = "schedule_days"

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    # Free text as shown on the site, e.g. "January 30, 2025"
    date: Mapped[str] = mapped_column(String(100), nullable=False, default="")


class ScheduleEvent(Base, UUIDMixin, TimestampMixin, PositionMixin):
    """A timetable entry; ordered within its day."""

    __tablename__ = "schedule_events"

    day_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("schedule_days.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    time: Mapped[str] = mapped_column(String(100), nullable=False)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    location: Mapped[str] = mapped_column(String(200), nullable=False, default="")
