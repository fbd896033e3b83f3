"""SquadLeave constants."""

from squadleave.shared.enums import RejectReason

# ISO calendar date, fixed width so string comparison follows date order
ISO_DATE_FORMAT = "%Y-%m-%d"

# Weekdays (0 = Monday, 6 = Sunday)
WEEKEND_DAYS = {5, 6}  # Saturday, Sunday

# Maximum number of people of one specialty on vacation on the same day
DEFAULT_CAPACITY_LIMIT = 4

# Heatmap turns yellow at this many simultaneous vacations
DEFAULT_CAPACITY_WARNING_LEVEL = 3

# Longest interval served by the daily coverage endpoint
MAX_COVERAGE_SPAN_DAYS = 366

# CSV import fallbacks
DEFAULT_EMPLOYEE_NAME = "Sem Nome"
DEFAULT_HOLIDAY_NAME = "Feriado"

# Default user-facing text per rejection reason. Placeholders are filled by
# validation_service.describe_outcome().
REJECT_MESSAGES = {
    "pt": {
        RejectReason.MISSING_FIELDS: "Preencha todos os campos obrigatórios.",
        RejectReason.INVERTED_RANGE: "A data final não pode ser anterior à data inicial.",
        RejectReason.UNRESOLVED_EMPLOYEE: "Funcionário não encontrado.",
        RejectReason.OVERLAPS_EXISTING_REQUEST: (
            'Conflito de datas! Este funcionário já possui um registro de "{request_type}" '
            "neste período ({start} a {end})."
        ),
        RejectReason.CAPACITY_EXCEEDED: (
            "Capacidade excedida para {specialty} no dia {day}. "
            "Máximo de {limit} pessoas de férias simultaneamente."
        ),
    },
    "en": {
        RejectReason.MISSING_FIELDS: "Please fill in all required fields.",
        RejectReason.INVERTED_RANGE: "The end date cannot be before the start date.",
        RejectReason.UNRESOLVED_EMPLOYEE: "Employee not found.",
        RejectReason.OVERLAPS_EXISTING_REQUEST: (
            'Date conflict! This employee already has a "{request_type}" record '
            "in this period ({start} to {end})."
        ),
        RejectReason.CAPACITY_EXCEEDED: (
            "Capacity exceeded for {specialty} on {day}. "
            "At most {limit} people may be on vacation at the same time."
        ),
    },
}

# English labels for request types, used by the "en" messages
REQUEST_TYPE_LABELS_EN = {
    "vacation": "Vacation",
    "day_off": "Day off",
    "sick_leave": "Sick leave",
}
