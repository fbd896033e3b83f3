"""Pydantic schemas for leave requests."""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from squadleave.shared.enums import RejectReason, RequestType, Specialty
from squadleave.shared.validators import blank_to_none, coerce_iso_date


class LeaveRequestCreate(BaseModel):
    """
    Submission payload.

    Every field is optional at this level: missing or unreadable values are
    reported by the validator as a missing-fields rejection.
    """

    employee_id: str | None = Field(None, description="Employee id")
    start_date: date | None = Field(None, description="First day, inclusive")
    end_date: date | None = Field(None, description="Last day, inclusive")
    type: RequestType = Field(default=RequestType.VACATION, description="Kind of leave")
    externally_logged: bool = Field(default=False, description="Mirrored into the HR system")
    notes: str | None = Field(None, max_length=2000)

    @field_validator("employee_id", "notes", mode="before")
    @classmethod
    def empty_as_none(cls, v: Any) -> Any:
        return blank_to_none(v)

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def lenient_date(cls, v: Any) -> date | None:
        """Unparsable dates become None."""
        try:
            return coerce_iso_date(v)
        except ValueError:
            return None


class LeaveRequestResponse(BaseModel):
    """Stored leave request."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    employee_id: str
    start_date: date
    end_date: date
    type: RequestType
    externally_logged: bool
    notes: str | None = None
    calendar_days: int
    created_at: datetime | None = None


class ExternalLoggingUpdate(BaseModel):
    """Toggle for the external HR system flag."""

    externally_logged: bool


class RejectionDetail(BaseModel):
    """Body returned when a submission is refused."""

    reason: RejectReason
    message: str
    conflicting_request_id: str | None = None
    offending_date: date | None = None
    specialty: Specialty | None = None
    capacity_limit: int | None = None


class CoverageDay(BaseModel):
    """Vacation count of a specialty on one day."""

    day: date
    count: int


class PreflightResponse(BaseModel):
    """Dry-run decision with the team's coverage over the interval."""

    accepted: bool
    rejection: RejectionDetail | None = None
    specialty: Specialty | None = None
    coverage: list[CoverageDay] = Field(default_factory=list)
