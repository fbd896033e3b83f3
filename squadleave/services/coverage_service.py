"""Coverage model: per-day, per-specialty vacation occupancy."""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from squadleave.services.calendar_service import CalendarService, as_date
from squadleave.services.holiday_service import HolidayRegistry
from squadleave.shared.constants import DEFAULT_CAPACITY_LIMIT, DEFAULT_CAPACITY_WARNING_LEVEL
from squadleave.shared.enums import CoverageLevel, RequestType, Specialty


def _specialty_members(specialty: Specialty, employees: Iterable[Any]) -> set[str]:
    return {e.id for e in employees if e.specialty == specialty}


def _vacations_of(member_ids: set[str], requests: Iterable[Any]) -> List[Tuple[date, date]]:
    return [
        (as_date(r.start_date), as_date(r.end_date))
        for r in requests
        if r.type == RequestType.VACATION and r.employee_id in member_ids
    ]


def concurrency_count(
    day: date,
    specialty: Specialty,
    requests: Iterable[Any],
    employees: Iterable[Any],
) -> int:
    """
    Counts vacations of one specialty covering a day.

    Only Vacation requests count; day offs and sick leaves never consume
    capacity. Requests whose employee does not resolve are ignored.

    Args:
        day: Calendar day
        specialty: Team to count
        requests: Current leave requests
        employees: Current employees

    Returns:
        Number of vacations whose inclusive interval contains the day
    """
    members = _specialty_members(specialty, employees)
    return sum(1 for start, end in _vacations_of(members, requests) if start <= day <= end)


def daily_coverage(
    start: date,
    end: date,
    specialty: Specialty,
    requests: Iterable[Any],
    employees: Iterable[Any],
) -> List[Tuple[date, int]]:
    """
    Applies concurrency_count to every day of an inclusive range.

    Returns:
        (day, count) pairs in date order, empty when start is after end
    """
    members = _specialty_members(specialty, employees)
    vacations = _vacations_of(members, requests)
    return [
        (day, sum(1 for v_start, v_end in vacations if v_start <= day <= v_end))
        for day in CalendarService.days_in_interval(start, end)
    ]


def coverage_level(
    count: int,
    capacity_limit: int = DEFAULT_CAPACITY_LIMIT,
    warning_level: int = DEFAULT_CAPACITY_WARNING_LEVEL,
) -> CoverageLevel:
    """Heatmap bucket for a vacation count."""
    if count >= capacity_limit:
        return CoverageLevel.FULL
    if count >= warning_level:
        return CoverageLevel.ATTENTION
    return CoverageLevel.OK


@dataclass
class DayCell:
    """What one employee has on one day of the calendar grid."""

    request_id: Optional[str] = None
    request_type: Optional[RequestType] = None
    holiday_name: Optional[str] = None


@dataclass
class CalendarDay:
    """
    One column of the month calendar.

    Attributes:
        day: Calendar date
        count: Vacations of the specialty on that day
        level: Heatmap bucket
        is_weekend: Saturday or Sunday
        holiday: Name and location of a registered holiday, if any
    """

    day: date
    count: int
    level: CoverageLevel
    is_weekend: bool
    holiday: Optional[dict] = None


@dataclass
class EmployeeRow:
    """One employee's line in the month calendar."""

    employee_id: str
    name: str
    cells: List[DayCell] = field(default_factory=list)


@dataclass
class MonthCalendar:
    """Month grid for one specialty."""

    year: int
    month: int
    specialty: Specialty
    capacity_limit: int
    days: List[CalendarDay]
    rows: List[EmployeeRow]


def month_calendar(
    year: int,
    month: int,
    specialty: Specialty,
    employees: Sequence[Any],
    requests: Sequence[Any],
    holidays: Iterable[Any],
    capacity_limit: int = DEFAULT_CAPACITY_LIMIT,
    warning_level: int = DEFAULT_CAPACITY_WARNING_LEVEL,
) -> MonthCalendar:
    """
    Builds the capacity heatmap and per-employee grid for one month.

    Holidays are shown regardless of the viewer's or employee's location.
    A cell shows the employee's request when one covers the day, otherwise
    the holiday name on weekdays.
    """
    registry = HolidayRegistry(holidays)
    month_days = CalendarService.month_days(year, month)
    first, last = month_days[0], month_days[-1]

    days = []
    for day, count in daily_coverage(first, last, specialty, requests, employees):
        holiday = registry.holiday_on(day)
        days.append(CalendarDay(
            day=day,
            count=count,
            level=coverage_level(count, capacity_limit, warning_level),
            is_weekend=CalendarService.is_weekend(day),
            holiday={"name": holiday.name, "location": holiday.location} if holiday else None,
        ))

    rows = []
    members = sorted((e for e in employees if e.specialty == specialty), key=lambda e: e.name)
    for employee in members:
        own = [
            r for r in requests
            if r.employee_id == employee.id
            and as_date(r.start_date) <= last and as_date(r.end_date) >= first
        ]
        row = EmployeeRow(employee_id=employee.id, name=employee.name)
        for calendar_day in days:
            cell = DayCell()
            request = next(
                (r for r in own if as_date(r.start_date) <= calendar_day.day <= as_date(r.end_date)),
                None,
            )
            if request is not None:
                cell.request_id = request.id
                cell.request_type = request.type
            elif calendar_day.holiday and not calendar_day.is_weekend:
                cell.holiday_name = calendar_day.holiday["name"]
            row.cells.append(cell)
        rows.append(row)

    return MonthCalendar(
        year=year,
        month=month,
        specialty=specialty,
        capacity_limit=capacity_limit,
        days=days,
        rows=rows,
    )


def year_overview(
    year: int,
    specialty: Specialty,
    employees: Sequence[Any],
    requests: Sequence[Any],
    capacity_limit: int = DEFAULT_CAPACITY_LIMIT,
    warning_level: int = DEFAULT_CAPACITY_WARNING_LEVEL,
) -> dict[int, List[Tuple[date, int, CoverageLevel]]]:
    """
    Daily coverage for the twelve months of a year.

    Returns:
        Month number mapped to (day, count, level) triples
    """
    overview: dict[int, List[Tuple[date, int, CoverageLevel]]] = {}
    coverage = daily_coverage(date(year, 1, 1), date(year, 12, 31), specialty, requests, employees)
    for day, count in coverage:
        overview.setdefault(day.month, []).append(
            (day, count, coverage_level(count, capacity_limit, warning_level))
        )
    return overview
