"""Holiday registry, regional calendar templates and seeding."""

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Iterable, List, Optional, Sequence

import structlog
from dateutil.easter import easter
from sqlalchemy.orm import Session

from squadleave.models.base import new_id
from squadleave.models.holiday import Holiday
from squadleave.services.calendar_service import as_date
from squadleave.shared.enums import HolidayLocation
from squadleave.shared.exceptions import HolidayNotFoundError

logger = structlog.get_logger(__name__)

L = HolidayLocation


@dataclass(frozen=True)
class HolidayTemplate:
    """
    Recipe for one holiday, repeated every year.

    Attributes:
        key: Stable identifier used by the override table
        month: Month for fixed-date holidays
        day: Day of month for fixed-date holidays
        name: Display name
        locations: Regions where it is observed
        easter_offset: Days relative to Easter Sunday for moveable feasts
    """

    key: str
    month: int
    day: int
    name: str
    locations: tuple[HolidayLocation, ...] = field(default=(L.GLOBAL,))
    easter_offset: Optional[int] = None


# Standard regional calendars: Brazil (national), São Paulo, Belo Horizonte,
# Mexico and Madrid. month/day of moveable feasts is the fallback only.
DEFAULT_HOLIDAY_TEMPLATES: tuple[HolidayTemplate, ...] = (
    # Brazil
    HolidayTemplate("br_new_year", 1, 1, "Confraternização Universal", (L.BR,)),
    HolidayTemplate("br_carnival_mon", 2, 12, "Carnaval", (L.BR,), easter_offset=-48),
    HolidayTemplate("br_carnival_tue", 2, 13, "Carnaval", (L.BR,), easter_offset=-47),
    HolidayTemplate("br_good_friday", 3, 29, "Paixão de Cristo", (L.BR,), easter_offset=-2),
    HolidayTemplate("br_tiradentes", 4, 21, "Tiradentes", (L.BR,)),
    HolidayTemplate("br_labour", 5, 1, "Dia do Trabalho", (L.BR,)),
    HolidayTemplate("br_corpus_christi", 5, 30, "Corpus Christi", (L.BR,), easter_offset=60),
    HolidayTemplate("br_independence", 9, 7, "Independência do Brasil", (L.BR,)),
    HolidayTemplate("br_aparecida", 10, 12, "Nossa Sra. Aparecida", (L.BR,)),
    HolidayTemplate("br_all_souls", 11, 2, "Finados", (L.BR,)),
    HolidayTemplate("br_republic", 11, 15, "Proclamação da República", (L.BR,)),
    HolidayTemplate("br_black_consciousness", 11, 20, "Dia da Consciência Negra", (L.BR,)),
    HolidayTemplate("br_christmas", 12, 25, "Natal", (L.BR,)),
    # São Paulo
    HolidayTemplate("sp_anniversary", 1, 25, "Aniversário de SP", (L.SP,)),
    HolidayTemplate("sp_revolution", 7, 9, "Revolução Constitucionalista", (L.SP,)),
    # Belo Horizonte
    HolidayTemplate("bh_assumption", 8, 15, "Assunção de Nossa Senhora", (L.BH,)),
    HolidayTemplate("bh_immaculate", 12, 8, "Imaculada Conceição", (L.BH,)),
    # Mexico
    HolidayTemplate("mex_new_year", 1, 1, "Año Nuevo", (L.MEX,)),
    HolidayTemplate("mex_constitution", 2, 5, "Día de la Constitución", (L.MEX,)),
    HolidayTemplate("mex_juarez", 3, 18, "Natalicio de Benito Juárez", (L.MEX,)),
    HolidayTemplate("mex_labour", 5, 1, "Día del Trabajo", (L.MEX,)),
    HolidayTemplate("mex_independence", 9, 16, "Día de la Independencia", (L.MEX,)),
    HolidayTemplate("mex_revolution", 11, 18, "Día de la Revolución", (L.MEX,)),
    HolidayTemplate("mex_christmas", 12, 25, "Navidad", (L.MEX,)),
    # Madrid
    HolidayTemplate("mad_new_year", 1, 1, "Año Nuevo", (L.MAD,)),
    HolidayTemplate("mad_epiphany", 1, 6, "Epifanía del Señor", (L.MAD,)),
    HolidayTemplate("mad_holy_thursday", 3, 28, "Jueves Santo", (L.MAD,), easter_offset=-3),
    HolidayTemplate("mad_good_friday", 3, 29, "Viernes Santo", (L.MAD,), easter_offset=-2),
    HolidayTemplate("mad_labour", 5, 1, "Fiesta del Trabajo", (L.MAD,)),
    HolidayTemplate("mad_community", 5, 2, "Fiesta de la Comunidad de Madrid", (L.MAD,)),
    HolidayTemplate("mad_san_isidro", 5, 15, "San Isidro", (L.MAD,)),
    HolidayTemplate("mad_santiago", 7, 25, "Santiago Apóstol", (L.MAD,)),
    HolidayTemplate("mad_assumption", 8, 15, "Asunción de la Virgen", (L.MAD,)),
    HolidayTemplate("mad_national", 10, 12, "Fiesta Nacional de España", (L.MAD,)),
    HolidayTemplate("mad_all_saints", 11, 1, "Todos los Santos", (L.MAD,)),
    HolidayTemplate("mad_constitution", 12, 6, "Día de la Constitución Española", (L.MAD,)),
    HolidayTemplate("mad_immaculate", 12, 8, "Inmaculada Concepción", (L.MAD,)),
    HolidayTemplate("mad_christmas", 12, 25, "Natividad del Señor", (L.MAD,)),
)

# Manual per-year dates. They win over Easter arithmetic and fixed dates.
# Mexico observes Juárez on the third Monday of March and the Revolution on
# the third Monday of November.
HOLIDAY_DATE_OVERRIDES: dict[tuple[int, str], date] = {
    (2025, "mex_juarez"): date(2025, 3, 17),
    (2025, "mex_revolution"): date(2025, 11, 17),
    (2026, "mex_juarez"): date(2026, 3, 16),
    (2026, "mex_revolution"): date(2026, 11, 16),
}


def resolve_template_date(template: HolidayTemplate, year: int) -> date:
    """
    Computes the concrete date of a template holiday in a year.

    Order: manual override, then Easter offset, then the fixed month/day.

    Args:
        template: Holiday recipe
        year: Target year

    Returns:
        The holiday date
    """
    override = HOLIDAY_DATE_OVERRIDES.get((year, template.key))
    if override is not None:
        return override
    if template.easter_offset is not None:
        return easter(year) + timedelta(days=template.easter_offset)
    return date(year, template.month, template.day)


class HolidayRegistry:
    """
    In-memory view over a collection of holidays.

    Lookups never filter out a holiday because of the viewer's location:
    any registered holiday on a date is shown on every calendar.
    """

    def __init__(self, holidays: Iterable[Holiday] = ()):
        self.holidays: List[Holiday] = list(holidays)

    def holiday_on(self, day: date, location: HolidayLocation | None = None) -> Holiday | None:
        """
        Finds a holiday registered on a date.

        A holiday at the requested location, then a GLOBAL one, is preferred
        when several share the date; otherwise the first registered holiday
        on that date is returned.

        Args:
            day: Calendar date
            location: Viewer's location, used only to pick among same-day holidays

        Returns:
            Matching holiday or None
        """
        same_day = [h for h in self.holidays if as_date(h.date) == day]
        if not same_day:
            return None
        for preferred in (location, HolidayLocation.GLOBAL):
            if preferred is None:
                continue
            for holiday in same_day:
                if holiday.location == preferred:
                    return holiday
        return same_day[0]

    def contains(self, day: date, location: HolidayLocation) -> bool:
        """True if a holiday with exactly this date and location exists."""
        return any(
            as_date(h.date) == day and h.location == location
            for h in self.holidays
        )

    def between(self, start: date, end: date) -> List[Holiday]:
        """Holidays inside an inclusive interval, ordered by date."""
        return sorted(
            (h for h in self.holidays if start <= as_date(h.date) <= end),
            key=lambda h: as_date(h.date),
        )

    def seed_region(
        self,
        years: int | Sequence[int],
        templates: Sequence[HolidayTemplate] = DEFAULT_HOLIDAY_TEMPLATES,
    ) -> List[Holiday]:
        """
        Adds one holiday per template location for each year.

        A (date, location) pair that already exists is skipped, so running
        the same seeding again adds nothing.

        Args:
            years: Target year or years
            templates: Holiday recipes

        Returns:
            Newly created Holiday records, also appended to the registry
        """
        if isinstance(years, int):
            years = [years]

        added: List[Holiday] = []
        for year in years:
            for template in templates:
                holiday_date = resolve_template_date(template, year)
                for location in template.locations:
                    if self.contains(holiday_date, location):
                        continue
                    holiday = Holiday(id=new_id(), date=holiday_date, name=template.name, location=location)
                    self.holidays.append(holiday)
                    added.append(holiday)

        return added


class HolidayService:
    """
    Holiday administration backed by the database.
    """

    def __init__(self, db: Session):
        self.db = db

    def list_holidays(self, year: int | None = None) -> List[Holiday]:
        """All holidays ordered by date, optionally limited to one year."""
        query = self.db.query(Holiday)
        if year is not None:
            query = query.filter(Holiday.date >= date(year, 1, 1), Holiday.date <= date(year, 12, 31))
        return query.order_by(Holiday.date, Holiday.location).all()

    def registry(self) -> HolidayRegistry:
        """Registry over the current holiday table."""
        return HolidayRegistry(self.db.query(Holiday).all())

    def create_holiday(self, holiday_date: date, name: str, location: HolidayLocation) -> Holiday:
        """Inserts a single holiday."""
        holiday = Holiday(date=holiday_date, name=name, location=location)
        self.db.add(holiday)
        self.db.flush()
        logger.info("holiday_created", holiday_id=holiday.id, date=str(holiday_date), location=location.value)
        return holiday

    def delete_holiday(self, holiday_id: str) -> None:
        """
        Deletes a holiday.

        Raises:
            HolidayNotFoundError: If the id is unknown
        """
        holiday = self.db.get(Holiday, holiday_id)
        if holiday is None:
            raise HolidayNotFoundError(f"Holiday '{holiday_id}' was not found")
        self.db.delete(holiday)
        logger.info("holiday_deleted", holiday_id=holiday_id)

    def bulk_upsert(self, holidays: Iterable[Holiday]) -> int:
        """Inserts or replaces holidays by id, returning how many were written."""
        count = 0
        for holiday in holidays:
            self.db.merge(holiday)
            count += 1
        self.db.flush()
        logger.info("holidays_upserted", count=count)
        return count

    def seed_region(
        self,
        years: int | Sequence[int],
        templates: Sequence[HolidayTemplate] = DEFAULT_HOLIDAY_TEMPLATES,
    ) -> int:
        """
        Seeds the standard regional calendars for the given years.

        Returns:
            Number of holidays added (0 when everything already exists)
        """
        added = self.registry().seed_region(years, templates)
        self.db.add_all(added)
        self.db.flush()
        logger.info("holidays_seeded", years=years, added=len(added))
        return len(added)
