"""Shared validators for Pydantic models and services."""

from datetime import date, datetime
from typing import Any

from squadleave.shared.constants import ISO_DATE_FORMAT


def coerce_iso_date(value: Any) -> date | None:
    """
    Converts an ISO calendar date string to a date.

    Empty strings and None become None so that missing dates can be
    reported as a typed rejection instead of a parse error.

    Args:
        value: date, datetime, "YYYY-MM-DD" string or None

    Returns:
        The parsed date or None

    Raises:
        ValueError: If the string is not a valid YYYY-MM-DD date
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        return datetime.strptime(text, ISO_DATE_FORMAT).date()
    except ValueError as exc:
        raise ValueError(f"Invalid date '{text}', expected YYYY-MM-DD") from exc


def normalize_email(value: str) -> str:
    """Trims and lower-cases an e-mail address."""
    return (value or "").strip().lower()


def blank_to_none(value: Any) -> Any:
    """Turns empty or whitespace-only strings into None."""
    if isinstance(value, str) and not value.strip():
        return None
    return value
