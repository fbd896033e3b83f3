"""Calendar arithmetic: day intervals, weekends, month/year bounds, business days."""

import calendar
from datetime import date, timedelta
from typing import Any, Iterable, List, Tuple

from squadleave.shared.constants import WEEKEND_DAYS
from squadleave.shared.validators import coerce_iso_date


def as_date(value: Any) -> date:
    """
    Accepts a date or an ISO "YYYY-MM-DD" string.

    Raises:
        ValueError: If the value is empty or not a valid date
    """
    parsed = coerce_iso_date(value)
    if parsed is None:
        raise ValueError("Date is required")
    return parsed


class CalendarService:
    """
    Pure date utilities shared by the coverage model, validator and reports.

    Every method is a static function of its arguments.
    """

    @staticmethod
    def days_in_interval(start: date, end: date) -> List[date]:
        """
        Enumerates every calendar day between two dates, both inclusive.

        Args:
            start: First day
            end: Last day

        Returns:
            Ordered list of days, empty when start is after end

        Example:
            >>> CalendarService.days_in_interval(date(2025, 1, 30), date(2025, 2, 1))
            [date(2025, 1, 30), date(2025, 1, 31), date(2025, 2, 1)]
        """
        if start > end:
            return []
        return [start + timedelta(days=offset) for offset in range((end - start).days + 1)]

    @staticmethod
    def is_weekend(d: date) -> bool:
        """True on Saturday and Sunday."""
        return d.weekday() in WEEKEND_DAYS

    @staticmethod
    def month_bounds(d: date) -> Tuple[date, date]:
        """Returns the first and last day of the month containing d."""
        last_day = calendar.monthrange(d.year, d.month)[1]
        return d.replace(day=1), d.replace(day=last_day)

    @staticmethod
    def year_bounds(d: date) -> Tuple[date, date]:
        """Returns January 1st and December 31st of d's year."""
        return date(d.year, 1, 1), date(d.year, 12, 31)

    @staticmethod
    def holiday_dates(holidays: Iterable[Any]) -> set[date]:
        """
        Collapses holidays to the set of their dates.

        Accepts Holiday-like objects (with a ``date`` attribute), dates or
        ISO strings. Location is ignored.
        """
        dates = set()
        for holiday in holidays:
            value = holiday if isinstance(holiday, (date, str)) else holiday.date
            dates.add(as_date(value))
        return dates

    @staticmethod
    def business_day_count(start: date | str, end: date | str, holidays: Iterable[Any]) -> int:
        """
        Counts weekdays in an inclusive interval that are not holidays.

        A holiday matches by date only, whatever its location. This is a
        simplification used for aggregate statistics, not for calendar
        display.

        Args:
            start: First day
            end: Last day
            holidays: Holiday records, dates or ISO strings

        Returns:
            Number of business days, 0 when start is after end

        Example:
            >>> CalendarService.business_day_count(date(2025, 1, 1), date(2025, 1, 7), [date(2025, 1, 1)])
            4
        """
        start, end = as_date(start), as_date(end)
        if start > end:
            return 0

        holiday_set = CalendarService.holiday_dates(holidays)
        return sum(
            1
            for day in CalendarService.days_in_interval(start, end)
            if not CalendarService.is_weekend(day) and day not in holiday_set
        )

    @staticmethod
    def month_days(year: int, month: int) -> List[date]:
        """All days of a month."""
        first, last = CalendarService.month_bounds(date(year, month, 1))
        return CalendarService.days_in_interval(first, last)
