"""CSV import of employees and holidays."""

import csv
import io
from typing import Dict, List, Tuple

import structlog

from squadleave.models.base import new_id
from squadleave.models.employee import Employee
from squadleave.models.holiday import Holiday
from squadleave.shared.constants import DEFAULT_EMPLOYEE_NAME, DEFAULT_HOLIDAY_NAME
from squadleave.shared.enums import HolidayLocation, Specialty
from squadleave.shared.exceptions import ImportFormatError
from squadleave.shared.validators import coerce_iso_date

logger = structlog.get_logger(__name__)

_SPECIALTY_ALIASES: Dict[str, Specialty] = {
    "DC-IA": Specialty.DC_IA,
    "DC IA": Specialty.DC_IA,
    "IA": Specialty.DC_IA,
    "DC-UX": Specialty.DC_UX,
    "DC UX": Specialty.DC_UX,
    "UX": Specialty.DC_UX,
    "DC FULL": Specialty.DC_FULL,
    "DC-FULL": Specialty.DC_FULL,
    "DCFULL": Specialty.DC_FULL,
    "FULL": Specialty.DC_FULL,
}


def _numbered_rows(content: str) -> List[Tuple[int, Dict[str, str]]]:
    reader = csv.reader(io.StringIO(content.lstrip("\ufeff")))
    header = next(reader, None)
    if not header:
        return []
    keys = [h.strip() for h in header]

    rows = []
    for cells in reader:
        if len(cells) < len(keys):
            continue
        rows.append((reader.line_num, {key: cells[i].strip() for i, key in enumerate(keys)}))
    return rows


def parse_csv(content: str) -> List[Dict[str, str]]:
    """
    Reads comma-separated text with a header line into dicts.

    Values are stripped. Lines with fewer cells than the header are
    skipped, extra cells are ignored.

    Args:
        content: CSV text

    Returns:
        One dict per data row, keyed by the stripped header names
    """
    return [row for _, row in _numbered_rows(content)]


def resolve_specialty(value: str | None) -> Specialty:
    """
    Maps loosely written team names to a Specialty.

    Exact aliases first ("DC IA", "ux", "dc-full"...), then substrings
    IA, UX, FULL. Anything else falls back to DC-IA.
    """
    if not value:
        return Specialty.DC_IA
    normalized = value.strip().upper()
    if normalized in _SPECIALTY_ALIASES:
        return _SPECIALTY_ALIASES[normalized]
    for marker, specialty in (("IA", Specialty.DC_IA), ("UX", Specialty.DC_UX), ("FULL", Specialty.DC_FULL)):
        if marker in normalized:
            return specialty
    return Specialty.DC_IA


def employees_from_csv(content: str) -> List[Employee]:
    """
    Builds employees from a ``name,specialty`` CSV.

    Raises:
        ImportFormatError: If the file has no data rows
    """
    rows = parse_csv(content)
    if not rows:
        raise ImportFormatError("The file is empty or has no data rows")

    employees = [
        Employee(
            id=new_id(),
            name=row.get("name") or DEFAULT_EMPLOYEE_NAME,
            specialty=resolve_specialty(row.get("specialty")),
            active=True,
        )
        for row in rows
    ]
    logger.info("employees_parsed", count=len(employees))
    return employees


def holidays_from_csv(content: str) -> List[Holiday]:
    """
    Builds holidays from a ``date,name,location`` CSV.

    Unknown or missing locations become GLOBAL, a missing name becomes
    the generic holiday name.

    Raises:
        ImportFormatError: If the file has no data rows or a date is invalid
    """
    rows = _numbered_rows(content)
    if not rows:
        raise ImportFormatError("The file is empty or has no data rows")

    known_locations = {location.value for location in HolidayLocation}
    holidays = []
    for line_number, row in rows:
        try:
            holiday_date = coerce_iso_date(row.get("date"))
        except ValueError as exc:
            raise ImportFormatError(f"Line {line_number}: {exc}") from exc
        if holiday_date is None:
            raise ImportFormatError(f"Line {line_number}: date is required")

        location = (row.get("location") or "").upper()
        holidays.append(Holiday(
            id=new_id(),
            date=holiday_date,
            name=row.get("name") or DEFAULT_HOLIDAY_NAME,
            location=HolidayLocation(location) if location in known_locations else HolidayLocation.GLOBAL,
        ))

    logger.info("holidays_parsed", count=len(holidays))
    return holidays
