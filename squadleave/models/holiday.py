"""Holiday model."""

import datetime as dt

from sqlalchemy import Date, Enum as SQLEnum, String
from sqlalchemy.orm import Mapped, mapped_column

from squadleave.models.base import Base, RecordMixin
from squadleave.shared.enums import HolidayLocation


class Holiday(Base, RecordMixin):
    """
    A holiday observed on one calendar date at one location.

    Several holidays may share a date when they belong to different regions.

    Attributes:
        id: Opaque identifier
        date: Calendar date
        name: Display name
        location: Region where it is observed
    """

    __tablename__ = "holidays"

    date: Mapped[dt.date] = mapped_column(Date, index=True, nullable=False)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    location: Mapped[HolidayLocation] = mapped_column(
        SQLEnum(HolidayLocation),
        default=HolidayLocation.GLOBAL,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Holiday {self.date}: {self.name} ({self.location})>"
