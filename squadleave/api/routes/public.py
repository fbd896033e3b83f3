"""Read-only views available without logging in."""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Path, Query, status

from squadleave.api.dependencies import AppSettings, DBSession
from squadleave.api.routes.coverage import build_month_calendar, build_year_overview
from squadleave.schemas.coverage import MonthCalendarResponse, YearOverviewResponse
from squadleave.schemas.holiday import HolidayResponse
from squadleave.services.holiday_service import HolidayService
from squadleave.shared.enums import Specialty

router = APIRouter(prefix="/public", tags=["public"])


@router.get("/calendar/{year}/{month}", response_model=MonthCalendarResponse)
async def public_month_calendar(
    year: Annotated[int, Path(ge=1900, le=2200)],
    month: int,
    db: DBSession,
    settings: AppSettings,
    specialty: Specialty = Query(Specialty.DC_IA, description="Team"),
):
    """Month heatmap of a team."""
    if not 1 <= month <= 12:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail="Month must be 1-12")
    return build_month_calendar(db, settings, year, month, specialty)


@router.get("/overview/{year}", response_model=YearOverviewResponse)
async def public_year_overview(
    year: Annotated[int, Path(ge=1900, le=2200)],
    db: DBSession,
    settings: AppSettings,
    specialty: Specialty = Query(Specialty.DC_IA, description="Team"),
):
    """Daily coverage of a team for a whole year."""
    return build_year_overview(db, settings, year, specialty)


@router.get("/holidays", response_model=list[HolidayResponse])
async def public_holidays(db: DBSession, year: int | None = Query(None, ge=1900, le=2200)):
    """Registered holidays, all locations."""
    return HolidayService(db).list_holidays(year=year)
