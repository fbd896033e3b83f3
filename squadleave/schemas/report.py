"""Pydantic schemas for reports and the dashboard."""

from datetime import date

from pydantic import BaseModel, ConfigDict

from squadleave.schemas.leave_request import LeaveRequestResponse
from squadleave.shared.enums import Specialty


class EmployeeReportRowResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    employee_id: str
    name: str
    specialty: Specialty
    business_days: int
    vacation_count: int


class VacationPeriodResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    request_id: str
    employee_id: str
    name: str
    specialty: Specialty
    start_date: date
    end_date: date
    business_days: int
    externally_logged: bool


class YearReportResponse(BaseModel):
    """Yearly vacation report."""

    year: int
    employees: list[EmployeeReportRowResponse]
    specialty_totals: dict[Specialty, int]
    periods: list[VacationPeriodResponse] = []


class DashboardResponse(BaseModel):
    """Key indicators of current leave activity."""

    model_config = ConfigDict(from_attributes=True)

    today: date
    active_employees: int
    vacations_today: list[LeaveRequestResponse]
    vacations_this_month: list[LeaveRequestResponse]
    upcoming_days_off: list[LeaveRequestResponse]
    open_sick_leaves: list[LeaveRequestResponse]
    pending_external_logging: list[LeaveRequestResponse]
