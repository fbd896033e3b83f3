"""Unit tests for the holiday registry and seeding."""

from datetime import date

import pytest

from squadleave.models.holiday import Holiday
from squadleave.services.holiday_service import (
    DEFAULT_HOLIDAY_TEMPLATES,
    HolidayRegistry,
    HolidayService,
    HolidayTemplate,
    resolve_template_date,
)
from squadleave.shared.enums import HolidayLocation
from squadleave.shared.exceptions import HolidayNotFoundError


def _template(key: str) -> HolidayTemplate:
    return next(t for t in DEFAULT_HOLIDAY_TEMPLATES if t.key == key)


class TestResolveTemplateDate:
    """Tests for resolve_template_date."""

    def test_fixed_date(self):
        assert resolve_template_date(_template("br_tiradentes"), 2025) == date(2025, 4, 21)

    def test_good_friday_from_easter(self):
        # Easter 2025 is April 20
        assert resolve_template_date(_template("br_good_friday"), 2025) == date(2025, 4, 18)

    def test_carnival_from_easter(self):
        assert resolve_template_date(_template("br_carnival_mon"), 2025) == date(2025, 3, 3)
        assert resolve_template_date(_template("br_carnival_tue"), 2025) == date(2025, 3, 4)

    def test_corpus_christi_from_easter(self):
        assert resolve_template_date(_template("br_corpus_christi"), 2026) == date(2026, 6, 4)

    def test_override_wins(self):
        assert resolve_template_date(_template("mex_juarez"), 2025) == date(2025, 3, 17)
        assert resolve_template_date(_template("mex_revolution"), 2026) == date(2026, 11, 16)

    def test_no_override_falls_back_to_fixed_date(self):
        assert resolve_template_date(_template("mex_juarez"), 2027) == date(2027, 3, 18)


class TestHolidayRegistry:
    """Tests for HolidayRegistry lookups."""

    def test_holiday_on_returns_none_for_plain_day(self, make_holiday):
        registry = HolidayRegistry([make_holiday(date(2025, 1, 1))])
        assert registry.holiday_on(date(2025, 1, 2)) is None

    def test_holiday_shown_regardless_of_location(self, make_holiday):
        registry = HolidayRegistry([make_holiday(date(2025, 5, 2), "Comunidad", HolidayLocation.MAD)])
        holiday = registry.holiday_on(date(2025, 5, 2), HolidayLocation.SP)
        assert holiday is not None
        assert holiday.location == HolidayLocation.MAD

    def test_prefers_requested_location(self, make_holiday):
        registry = HolidayRegistry([
            make_holiday(date(2025, 1, 1), "Año Nuevo", HolidayLocation.MEX),
            make_holiday(date(2025, 1, 1), "Confraternização", HolidayLocation.BR),
        ])
        assert registry.holiday_on(date(2025, 1, 1), HolidayLocation.BR).name == "Confraternização"

    def test_prefers_global_over_other_regions(self, make_holiday):
        registry = HolidayRegistry([
            make_holiday(date(2025, 12, 25), "Navidad", HolidayLocation.MEX),
            make_holiday(date(2025, 12, 25), "Christmas", HolidayLocation.GLOBAL),
        ])
        assert registry.holiday_on(date(2025, 12, 25), HolidayLocation.SP).name == "Christmas"

    def test_between_is_ordered(self, make_holiday):
        registry = HolidayRegistry([
            make_holiday(date(2025, 3, 1)),
            make_holiday(date(2025, 1, 1)),
            make_holiday(date(2026, 1, 1)),
        ])
        assert [h.date for h in registry.between(date(2025, 1, 1), date(2025, 12, 31))] == [
            date(2025, 1, 1),
            date(2025, 3, 1),
        ]


class TestSeedRegion:
    """Tests for seeding regional calendars."""

    def test_seed_is_idempotent(self):
        registry = HolidayRegistry()
        first = registry.seed_region([2025, 2026])
        second = registry.seed_region([2025, 2026])

        assert len(first) > 0
        assert second == []
        assert len(registry.holidays) == len(first)

    def test_seed_one_entry_per_location(self):
        template = HolidayTemplate("shared", 12, 24, "Nochebuena", (HolidayLocation.MEX, HolidayLocation.MAD))
        added = HolidayRegistry().seed_region(2025, [template])
        assert {h.location for h in added} == {HolidayLocation.MEX, HolidayLocation.MAD}
        assert all(h.date == date(2025, 12, 24) for h in added)

    def test_seed_skips_existing_pair(self, make_holiday):
        existing = make_holiday(date(2025, 4, 21), "Tiradentes", HolidayLocation.BR)
        added = HolidayRegistry([existing]).seed_region(2025, [_template("br_tiradentes")])
        assert added == []

    def test_same_date_other_location_is_added(self, make_holiday):
        existing = make_holiday(date(2025, 1, 1), "Año Nuevo", HolidayLocation.MEX)
        added = HolidayRegistry([existing]).seed_region(2025, [_template("br_new_year")])
        assert len(added) == 1
        assert added[0].location == HolidayLocation.BR


class TestHolidayService:
    """Database-backed holiday administration."""

    def test_seed_twice_adds_nothing_second_time(self, db_session):
        service = HolidayService(db_session)
        added = service.seed_region([2025])
        db_session.commit()

        assert added > 0
        assert service.seed_region([2025]) == 0
        assert db_session.query(Holiday).count() == added

    def test_list_by_year(self, db_session):
        service = HolidayService(db_session)
        service.create_holiday(date(2025, 1, 1), "Ano Novo", HolidayLocation.BR)
        service.create_holiday(date(2026, 1, 1), "Ano Novo", HolidayLocation.BR)
        db_session.commit()

        assert [h.date.year for h in service.list_holidays(year=2025)] == [2025]
        assert len(service.list_holidays()) == 2

    def test_delete_unknown_raises(self, db_session):
        with pytest.raises(HolidayNotFoundError):
            HolidayService(db_session).delete_holiday("missing")
