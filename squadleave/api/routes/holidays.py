"""Holiday administration routes."""

from fastapi import APIRouter, File, HTTPException, Query, UploadFile, status

from squadleave.api.dependencies import CurrentUser, DBSession, HolidaySvc
from squadleave.models.holiday import Holiday
from squadleave.schemas.holiday import (
    HolidayCreate,
    HolidayResponse,
    HolidayUpsert,
    ImportResponse,
    SeedRequest,
    SeedResponse,
)
from squadleave.services.import_service import holidays_from_csv
from squadleave.shared.exceptions import HolidayNotFoundError, ImportFormatError

router = APIRouter(prefix="/holidays", tags=["holidays"])


@router.get("", response_model=list[HolidayResponse])
async def list_holidays(
    service: HolidaySvc,
    year: int | None = Query(None, ge=1900, le=2200, description="Only this year"),
):
    """List holidays ordered by date."""
    return service.list_holidays(year=year)


@router.post("", response_model=HolidayResponse, status_code=status.HTTP_201_CREATED)
async def create_holiday(
    data: HolidayCreate,
    db: DBSession,
    service: HolidaySvc,
    current_user: CurrentUser,
):
    """Add a single holiday."""
    holiday = service.create_holiday(data.date, data.name, data.location)
    db.commit()
    db.refresh(holiday)
    return holiday


@router.delete("/{holiday_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_holiday(
    holiday_id: str,
    db: DBSession,
    service: HolidaySvc,
    current_user: CurrentUser,
):
    """Delete a holiday."""
    try:
        service.delete_holiday(holiday_id)
    except HolidayNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    db.commit()


@router.post("/seed", response_model=SeedResponse)
async def seed_holidays(
    data: SeedRequest,
    db: DBSession,
    service: HolidaySvc,
    current_user: CurrentUser,
):
    """
    Load the standard regional calendars (Brazil, São Paulo, Belo Horizonte,
    Mexico, Madrid) for the given years.

    Holidays already present for the same date and location are skipped.
    """
    added = service.seed_region(data.years)
    db.commit()
    return SeedResponse(years=data.years, added=added)


@router.post("/import", response_model=ImportResponse)
async def import_holidays(
    db: DBSession,
    service: HolidaySvc,
    current_user: CurrentUser,
    file: UploadFile = File(..., description="CSV with date,name,location columns"),
):
    """Import holidays from a CSV file."""
    content = (await file.read()).decode("utf-8", errors="replace")
    try:
        holidays = holidays_from_csv(content)
    except ImportFormatError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    count = service.bulk_upsert(holidays)
    db.commit()
    return ImportResponse(imported=count)


@router.put("/bulk", response_model=ImportResponse)
async def bulk_upsert_holidays(
    items: list[HolidayUpsert],
    db: DBSession,
    service: HolidaySvc,
    current_user: CurrentUser,
):
    """Insert or replace holidays by id."""
    count = service.bulk_upsert(Holiday(**item.model_dump()) for item in items)
    db.commit()
    return ImportResponse(imported=count)
