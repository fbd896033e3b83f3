"""Pydantic schemas for holidays."""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field, computed_field

from squadleave.shared.enums import HolidayLocation, get_location_label


class HolidayBase(BaseModel):
    """Common holiday fields."""

    date: dt.date
    name: str = Field(..., min_length=1, max_length=200)
    location: HolidayLocation = Field(default=HolidayLocation.GLOBAL)


class HolidayCreate(HolidayBase):
    """Schema for creating a holiday."""

    pass


class HolidayUpsert(HolidayBase):
    """Schema for bulk upsert; an existing id replaces that record."""

    id: str = Field(..., min_length=1, max_length=36)


class HolidayResponse(HolidayBase):
    """Holiday as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: str

    @computed_field
    @property
    def location_label(self) -> str:
        """Display name of the location."""
        return get_location_label(self.location.value)


class SeedRequest(BaseModel):
    """Years to seed with the standard regional calendars."""

    years: list[int] = Field(..., min_length=1, description="Target years")


class SeedResponse(BaseModel):
    """Seeding result."""

    years: list[int]
    added: int


class ImportResponse(BaseModel):
    """CSV import result."""

    imported: int
