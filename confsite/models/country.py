"""Country matrix model."""

import enum

from sqlalchemy import Enum, String
from sqlalchemy.orm import Mapped, mapped_column

from confsite.models.base import Base, TimestampMixin, UUIDMixin


class CountryStatus(str, enum.Enum):
    """Whether a delegation has been handed out."""

    AVAILABLE = "Available"
    ASSIGNED = "Assigned"


class Country(Base, UUIDMixin, TimestampMixin):
    """A country seat within a committee."""

    __tablename__ = "countries"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    # Committee name as displayed, not a foreign key
    committee: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    status: Mapped[CountryStatus] = mapped_column(
        Enum(CountryStatus, name="country_status_enum", values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=CountryStatus.AVAILABLE,
    )
