"""Yearly vacation reports."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Path, Query

from squadleave.api.dependencies import CurrentUser, DBSession
from squadleave.models.employee import Employee
from squadleave.models.holiday import Holiday
from squadleave.models.leave_request import LeaveRequest
from squadleave.schemas.report import EmployeeReportRowResponse, VacationPeriodResponse, YearReportResponse
from squadleave.services.report_service import employee_report, specialty_totals, vacation_periods

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/{year}", response_model=YearReportResponse)
async def year_report(
    year: Annotated[int, Path(ge=1900, le=2200)],
    db: DBSession,
    current_user: CurrentUser,
    active_only: bool = Query(False, description="Only active employees"),
):
    """
    Vacation business days per employee and per specialty, plus every
    vacation starting in the year listed by start date.

    A vacation counts toward the year it starts in, even when it ends in
    the next one. Holidays are excluded by date, whatever their location.
    """
    query = db.query(Employee)
    if active_only:
        query = query.filter(Employee.active.is_(True))
    employees = query.order_by(Employee.name).all()
    requests = db.query(LeaveRequest).all()
    holidays = db.query(Holiday).all()

    return YearReportResponse(
        year=year,
        employees=[
            EmployeeReportRowResponse.model_validate(row)
            for row in employee_report(employees, requests, holidays, year)
        ],
        specialty_totals=specialty_totals(employees, requests, holidays, year),
        periods=[
            VacationPeriodResponse.model_validate(row)
            for row in vacation_periods(employees, requests, holidays, year)
        ],
    )


@router.get("", response_model=YearReportResponse)
async def current_year_report(db: DBSession, current_user: CurrentUser):
    """Report for the current year."""
    return await year_report(date.today().year, db, current_user, active_only=False)
