"""Custom exceptions for SquadLeave."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from squadleave.services.validation_service import ValidationOutcome


class SquadLeaveError(Exception):
    """Base class for every error raised by the system."""

    pass


class ValidationError(SquadLeaveError):
    """Raised when input data is malformed."""

    pass


class EmployeeNotFoundError(SquadLeaveError):
    """Raised when an employee id does not resolve."""

    pass


class RequestNotFoundError(SquadLeaveError):
    """Raised when a leave request id does not resolve."""

    pass


class HolidayNotFoundError(SquadLeaveError):
    """Raised when a holiday id does not resolve."""

    pass


class ImportFormatError(SquadLeaveError):
    """Raised when an uploaded CSV cannot be interpreted."""

    pass


class AuthenticationError(SquadLeaveError):
    """Raised when credentials are rejected."""

    pass


class LeaveRequestRejected(SquadLeaveError):
    """
    Raised by the submission workflow when the validator rejects a request.

    Attributes:
        outcome: The rejecting ValidationOutcome
    """

    def __init__(self, outcome: "ValidationOutcome", message: str | None = None):
        self.outcome = outcome
        super().__init__(message or outcome.reason.value)
