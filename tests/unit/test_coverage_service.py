"""Unit tests for the coverage model and calendar views."""

from datetime import date

import pytest

from squadleave.services.coverage_service import (
    concurrency_count,
    coverage_level,
    daily_coverage,
    month_calendar,
    year_overview,
)
from squadleave.shared.enums import CoverageLevel, HolidayLocation, RequestType, Specialty


@pytest.fixture
def team(make_employee):
    return [
        make_employee("1", name="Ana"),
        make_employee("2", name="Bruno"),
        make_employee("3", name="Carla"),
        make_employee("6", Specialty.DC_UX, name="Fábio"),
    ]


@pytest.fixture
def requests(make_request):
    return [
        make_request("1", date(2025, 6, 1), date(2025, 6, 5), id="a"),
        make_request("2", date(2025, 6, 4), date(2025, 6, 10), id="b"),
        make_request("3", date(2025, 6, 4), date(2025, 6, 4), RequestType.SICK_LEAVE, id="c"),
        make_request("6", date(2025, 6, 4), date(2025, 6, 4), id="d"),
        make_request("99", date(2025, 6, 4), date(2025, 6, 4), id="orphan"),
    ]


class TestConcurrencyCount:
    """Tests for concurrency_count."""

    def test_counts_only_vacations_of_specialty(self, team, requests):
        assert concurrency_count(date(2025, 6, 4), Specialty.DC_IA, requests, team) == 2

    def test_other_specialty(self, team, requests):
        assert concurrency_count(date(2025, 6, 4), Specialty.DC_UX, requests, team) == 1

    def test_inclusive_endpoints(self, team, requests):
        assert concurrency_count(date(2025, 6, 5), Specialty.DC_IA, requests, team) == 2
        assert concurrency_count(date(2025, 6, 10), Specialty.DC_IA, requests, team) == 1
        assert concurrency_count(date(2025, 6, 11), Specialty.DC_IA, requests, team) == 0

    def test_empty_specialty(self, team, requests):
        assert concurrency_count(date(2025, 6, 4), Specialty.DC_FULL, requests, team) == 0


class TestDailyCoverage:
    def test_range(self, team, requests):
        coverage = daily_coverage(date(2025, 6, 3), date(2025, 6, 6), Specialty.DC_IA, requests, team)
        assert coverage == [
            (date(2025, 6, 3), 1),
            (date(2025, 6, 4), 2),
            (date(2025, 6, 5), 2),
            (date(2025, 6, 6), 1),
        ]

    def test_inverted_range_empty(self, team, requests):
        assert daily_coverage(date(2025, 6, 6), date(2025, 6, 3), Specialty.DC_IA, requests, team) == []


class TestCoverageLevel:
    @pytest.mark.parametrize("count,level", [
        (0, CoverageLevel.OK),
        (2, CoverageLevel.OK),
        (3, CoverageLevel.ATTENTION),
        (4, CoverageLevel.FULL),
        (7, CoverageLevel.FULL),
    ])
    def test_default_thresholds(self, count, level):
        assert coverage_level(count) == level


class TestMonthCalendar:
    """Tests for month_calendar."""

    def test_days_and_rows(self, team, requests, make_holiday):
        holidays = [make_holiday(date(2025, 6, 19), "Corpus Christi", HolidayLocation.BR)]
        calendar = month_calendar(2025, 6, Specialty.DC_IA, team, requests, holidays)

        assert len(calendar.days) == 30
        assert [row.name for row in calendar.rows] == ["Ana", "Bruno", "Carla"]

        june_4 = calendar.days[3]
        assert june_4.count == 2
        assert june_4.level == CoverageLevel.OK

        june_19 = calendar.days[18]
        assert june_19.holiday == {"name": "Corpus Christi", "location": HolidayLocation.BR}

    def test_cells_show_requests_and_weekday_holidays(self, team, requests, make_holiday):
        holidays = [
            make_holiday(date(2025, 6, 19), "Corpus Christi", HolidayLocation.BR),
            make_holiday(date(2025, 6, 21), "Saturday holiday", HolidayLocation.MAD),
        ]
        calendar = month_calendar(2025, 6, Specialty.DC_IA, team, requests, holidays)
        carla = calendar.rows[2]

        assert carla.cells[3].request_type == RequestType.SICK_LEAVE
        assert carla.cells[18].holiday_name == "Corpus Christi"
        # 2025-06-21 is a Saturday
        assert carla.cells[20].holiday_name is None

    def test_full_level(self, make_employee, make_request):
        team = [make_employee(str(i)) for i in range(1, 5)]
        requests = [make_request(str(i), date(2025, 6, 2), date(2025, 6, 2)) for i in range(1, 5)]
        calendar = month_calendar(2025, 6, Specialty.DC_IA, team, requests, [])
        assert calendar.days[1].level == CoverageLevel.FULL


class TestYearOverview:
    def test_twelve_months(self, team, requests):
        overview = year_overview(2025, Specialty.DC_IA, team, requests)
        assert sorted(overview) == list(range(1, 13))
        assert len(overview[2]) == 28
        day, count, level = overview[6][3]
        assert (day, count, level) == (date(2025, 6, 4), 2, CoverageLevel.OK)
