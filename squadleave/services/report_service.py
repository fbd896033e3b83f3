"""Yearly vacation statistics per employee and per specialty."""

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Iterable, List, Optional, Sequence

from squadleave.services.calendar_service import CalendarService, as_date
from squadleave.shared.enums import RequestType, Specialty


@dataclass
class EmployeeReportRow:
    """
    One line of the yearly vacation report.

    Attributes:
        employee_id: Employee identifier
        name: Display name
        specialty: Employee's team
        business_days: Vacation business days attributed to the year
        vacation_count: Number of vacations starting in the year
    """

    employee_id: str
    name: str
    specialty: Specialty
    business_days: int
    vacation_count: int


@dataclass
class VacationPeriodRow:
    """
    One vacation in the detailed period report.

    Attributes:
        request_id: Leave request identifier
        employee_id: Employee identifier
        name: Employee display name
        specialty: Employee's team
        start_date: First day of the vacation
        end_date: Last day of the vacation
        business_days: Weekdays in the interval that are not holidays
        externally_logged: Whether the vacation was mirrored into the HR system
    """

    request_id: str
    employee_id: str
    name: str
    specialty: Specialty
    start_date: date
    end_date: date
    business_days: int
    externally_logged: bool


def _vacations_started_in(employee_id: str, requests: Iterable[Any], year: int) -> List[Any]:
    # Attribution by start date only: a December-January vacation belongs wholly to its start year
    first, last = CalendarService.year_bounds(date(year, 1, 1))
    return [
        r for r in requests
        if r.employee_id == employee_id
        and r.type == RequestType.VACATION
        and first <= as_date(r.start_date) <= last
    ]


def yearly_business_days(employee: Any, requests: Iterable[Any], holidays: Iterable[Any], year: int) -> int:
    """
    Sums vacation business days of one employee for a year.

    Args:
        employee: Employee record
        requests: All leave requests
        holidays: Holidays excluded from the count (matched by date only)
        year: Report year

    Returns:
        Total business days of vacations whose start date is in the year
    """
    holiday_list = list(holidays)
    return sum(
        CalendarService.business_day_count(r.start_date, r.end_date, holiday_list)
        for r in _vacations_started_in(employee.id, requests, year)
    )


def specialty_totals(
    employees: Sequence[Any],
    requests: Sequence[Any],
    holidays: Sequence[Any],
    year: int,
) -> Dict[Specialty, int]:
    """
    Groups yearly business days by specialty.

    Every specialty held by at least one employee is present, with 0 when
    nobody in it took vacation.
    """
    totals: Dict[Specialty, int] = {}
    for employee in employees:
        specialty = Specialty(employee.specialty)
        totals[specialty] = totals.get(specialty, 0) + yearly_business_days(
            employee, requests, holidays, year
        )
    return totals


def employee_report(
    employees: Sequence[Any],
    requests: Sequence[Any],
    holidays: Sequence[Any],
    year: int,
) -> List[EmployeeReportRow]:
    """Per-employee vacation totals, highest business-day count first."""
    rows = [
        EmployeeReportRow(
            employee_id=employee.id,
            name=employee.name,
            specialty=Specialty(employee.specialty),
            business_days=yearly_business_days(employee, requests, holidays, year),
            vacation_count=len(_vacations_started_in(employee.id, requests, year)),
        )
        for employee in employees
    ]
    rows.sort(key=lambda row: (-row.business_days, row.name))
    return rows


def vacation_periods(
    employees: Sequence[Any],
    requests: Sequence[Any],
    holidays: Sequence[Any],
    year: Optional[int] = None,
) -> List[VacationPeriodRow]:
    """
    Lists vacations one by one, earliest start first.

    Args:
        employees: Employees to report on; vacations of anyone else are skipped
        requests: All leave requests
        holidays: Holidays excluded from the business-day count
        year: Keep only vacations starting in this year, all when None

    Returns:
        One row per vacation
    """
    by_id = {employee.id: employee for employee in employees}
    holiday_list = list(holidays)
    vacations = [r for r in requests if r.type == RequestType.VACATION]
    if year is not None:
        vacations = [r for r in vacations if as_date(r.start_date).year == year]

    rows = []
    for request in sorted(vacations, key=lambda r: (as_date(r.start_date), r.id)):
        employee = by_id.get(request.employee_id)
        if employee is None:
            continue
        rows.append(
            VacationPeriodRow(
                request_id=request.id,
                employee_id=employee.id,
                name=employee.name,
                specialty=Specialty(employee.specialty),
                start_date=as_date(request.start_date),
                end_date=as_date(request.end_date),
                business_days=CalendarService.business_day_count(
                    request.start_date, request.end_date, holiday_list
                ),
                externally_logged=bool(request.externally_logged),
            )
        )
    return rows
