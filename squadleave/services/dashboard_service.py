"""Key indicators for the management dashboard."""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, List, Sequence

from squadleave.services.calendar_service import CalendarService, as_date
from squadleave.shared.enums import RequestType


@dataclass
class DashboardStats:
    """
    Snapshot of current leave activity.

    Attributes:
        today: Reference day
        active_employees: Employees flagged active
        vacations_today: Vacations covering today
        vacations_this_month: Vacations overlapping the current month, by start date
        upcoming_days_off: Day offs starting today or later
        open_sick_leaves: Sick leaves ending today or later
        pending_external_logging: Vacations not yet mirrored into the HR system
    """

    today: date
    active_employees: int
    vacations_today: List[Any] = field(default_factory=list)
    vacations_this_month: List[Any] = field(default_factory=list)
    upcoming_days_off: List[Any] = field(default_factory=list)
    open_sick_leaves: List[Any] = field(default_factory=list)
    pending_external_logging: List[Any] = field(default_factory=list)


def dashboard_stats(today: date, employees: Sequence[Any], requests: Sequence[Any]) -> DashboardStats:
    """
    Computes dashboard indicators relative to a reference day.

    Args:
        today: Reference day
        employees: All employees
        requests: All leave requests

    Returns:
        DashboardStats
    """
    month_start, month_end = CalendarService.month_bounds(today)
    by_start = sorted(requests, key=lambda r: as_date(r.start_date))

    def of_type(request_type: RequestType) -> List[Any]:
        return [r for r in by_start if r.type == request_type]

    vacations = of_type(RequestType.VACATION)

    return DashboardStats(
        today=today,
        active_employees=sum(1 for e in employees if e.active),
        vacations_today=[
            r for r in vacations
            if as_date(r.start_date) <= today <= as_date(r.end_date)
        ],
        vacations_this_month=[
            r for r in vacations
            if as_date(r.start_date) <= month_end and as_date(r.end_date) >= month_start
        ],
        upcoming_days_off=[
            r for r in of_type(RequestType.DAY_OFF) if as_date(r.start_date) >= today
        ],
        open_sick_leaves=[
            r for r in of_type(RequestType.SICK_LEAVE) if as_date(r.end_date) >= today
        ],
        pending_external_logging=[r for r in vacations if not r.externally_logged],
    )
