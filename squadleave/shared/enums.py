"""Enumerations for SquadLeave.

All system-wide enums are defined here.
"""
from enum import Enum


# Mapping dictionaries for UI labels
REQUEST_TYPE_LABELS: dict[str, str] = {
    "vacation": "Férias",
    "day_off": "Folga Avulsa",
    "sick_leave": "Licença Médica",
}

LOCATION_LABELS: dict[str, str] = {
    "GLOBAL": "Global",
    "BR": "Brasil",
    "SP": "São Paulo",
    "BH": "Belo Horizonte",
    "MEX": "México",
    "MAD": "Madrid",
}


def get_request_type_label(value: str) -> str:
    """Get Portuguese label for request type value."""
    return REQUEST_TYPE_LABELS.get(value, value)


def get_location_label(value: str) -> str:
    """Get display label for holiday location value."""
    return LOCATION_LABELS.get(value, value)


class Specialty(str, Enum):
    """Team classification that scopes the concurrency cap."""
    DC_IA = "DC-IA"
    DC_UX = "DC-UX"
    DC_FULL = "DC Full"


class RequestType(str, Enum):
    """Kind of leave."""
    VACATION = "vacation"              # Férias, counts toward capacity
    DAY_OFF = "day_off"                # Folga avulsa
    SICK_LEAVE = "sick_leave"          # Licença médica


class HolidayLocation(str, Enum):
    """Where a holiday is observed."""
    GLOBAL = "GLOBAL"
    BR = "BR"                          # Brazil, national
    SP = "SP"                          # São Paulo
    BH = "BH"                          # Belo Horizonte
    MEX = "MEX"                        # Mexico
    MAD = "MAD"                        # Madrid


class RejectReason(str, Enum):
    """Why a proposed leave request was refused."""
    MISSING_FIELDS = "missing_fields"
    INVERTED_RANGE = "inverted_range"
    UNRESOLVED_EMPLOYEE = "unresolved_employee"
    OVERLAPS_EXISTING_REQUEST = "overlaps_existing_request"
    CAPACITY_EXCEEDED = "capacity_exceeded"


class CoverageLevel(str, Enum):
    """Heatmap bucket for a day's vacation count."""
    OK = "ok"
    ATTENTION = "attention"
    FULL = "full"
