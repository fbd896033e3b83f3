"""Pydantic schemas for calendar and coverage views."""

from datetime import date

from pydantic import BaseModel, ConfigDict

from squadleave.shared.enums import CoverageLevel, HolidayLocation, RequestType, Specialty


class HolidayMarker(BaseModel):
    name: str
    location: HolidayLocation


class CalendarDayResponse(BaseModel):
    """One column of the month calendar."""

    model_config = ConfigDict(from_attributes=True)

    day: date
    count: int
    level: CoverageLevel
    is_weekend: bool
    holiday: HolidayMarker | None = None


class DayCellResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    request_id: str | None = None
    request_type: RequestType | None = None
    holiday_name: str | None = None


class EmployeeRowResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    employee_id: str
    name: str
    cells: list[DayCellResponse]


class MonthCalendarResponse(BaseModel):
    """Capacity heatmap and per-employee grid for one month."""

    model_config = ConfigDict(from_attributes=True)

    year: int
    month: int
    specialty: Specialty
    capacity_limit: int
    days: list[CalendarDayResponse]
    rows: list[EmployeeRowResponse]


class OverviewDay(BaseModel):
    day: date
    count: int
    level: CoverageLevel


class YearOverviewResponse(BaseModel):
    """Twelve months of daily coverage for one specialty."""

    year: int
    specialty: Specialty
    months: dict[int, list[OverviewDay]]
