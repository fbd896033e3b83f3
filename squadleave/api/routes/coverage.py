"""Capacity and calendar routes for managers."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, HTTPException, Path, Query, status
from sqlalchemy.orm import Session

from squadleave.api.dependencies import AppSettings, CurrentUser, DBSession
from squadleave.core.config import Settings
from squadleave.models.employee import Employee
from squadleave.models.holiday import Holiday
from squadleave.models.leave_request import LeaveRequest
from squadleave.schemas.coverage import MonthCalendarResponse, OverviewDay, YearOverviewResponse
from squadleave.schemas.leave_request import CoverageDay
from squadleave.services.coverage_service import daily_coverage, month_calendar, year_overview
from squadleave.shared.constants import MAX_COVERAGE_SPAN_DAYS
from squadleave.shared.enums import Specialty

router = APIRouter(prefix="/coverage", tags=["coverage"])


def build_month_calendar(
    db: Session,
    settings: Settings,
    year: int,
    month: int,
    specialty: Specialty,
) -> MonthCalendarResponse:
    """Month heatmap from the current database snapshot."""
    calendar = month_calendar(
        year,
        month,
        specialty,
        db.query(Employee).all(),
        db.query(LeaveRequest).all(),
        db.query(Holiday).all(),
        capacity_limit=settings.capacity_limit,
        warning_level=settings.capacity_warning_level,
    )
    return MonthCalendarResponse.model_validate(calendar)


def build_year_overview(
    db: Session,
    settings: Settings,
    year: int,
    specialty: Specialty,
) -> YearOverviewResponse:
    """Twelve-month coverage from the current database snapshot."""
    overview = year_overview(
        year,
        specialty,
        db.query(Employee).all(),
        db.query(LeaveRequest).all(),
        capacity_limit=settings.capacity_limit,
        warning_level=settings.capacity_warning_level,
    )
    return YearOverviewResponse(
        year=year,
        specialty=specialty,
        months={
            month: [OverviewDay(day=day, count=count, level=level) for day, count, level in days]
            for month, days in overview.items()
        },
    )


@router.get("", response_model=list[CoverageDay])
async def get_daily_coverage(
    db: DBSession,
    current_user: CurrentUser,
    specialty: Specialty = Query(..., description="Team"),
    start: date = Query(..., description="First day"),
    end: date = Query(..., description="Last day"),
):
    """Vacation count of a specialty for every day of an interval."""
    if start > end:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Start date cannot be after end date",
        )
    if (end - start).days + 1 > MAX_COVERAGE_SPAN_DAYS:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Interval cannot exceed {MAX_COVERAGE_SPAN_DAYS} days",
        )
    coverage = daily_coverage(
        start, end, specialty, db.query(LeaveRequest).all(), db.query(Employee).all()
    )
    return [CoverageDay(day=day, count=count) for day, count in coverage]


@router.get("/calendar/{year}/{month}", response_model=MonthCalendarResponse)
async def get_month_calendar(
    year: Annotated[int, Path(ge=1900, le=2200)],
    month: int,
    db: DBSession,
    settings: AppSettings,
    current_user: CurrentUser,
    specialty: Specialty = Query(..., description="Team"),
):
    """Capacity heatmap and per-employee grid of one month."""
    if not 1 <= month <= 12:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail="Month must be 1-12")
    return build_month_calendar(db, settings, year, month, specialty)
