"""Leave request submission workflow backed by the database."""

from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Tuple

import structlog
from sqlalchemy.orm import Session

from squadleave.core.config import Settings, get_settings
from squadleave.models.employee import Employee
from squadleave.models.leave_request import LeaveRequest
from squadleave.services.calendar_service import as_date
from squadleave.services.coverage_service import daily_coverage
from squadleave.services.validation_service import (
    LeaveProposal,
    ValidationOutcome,
    ValidationService,
    describe_outcome,
)
from squadleave.shared.enums import RejectReason, RequestType, Specialty
from squadleave.shared.exceptions import LeaveRequestRejected, RequestNotFoundError

logger = structlog.get_logger(__name__)


@dataclass
class Preflight:
    """
    Dry-run result for a proposal.

    Attributes:
        outcome: What submit would decide
        message: Default rejection text, empty on acceptance
        specialty: Employee's team when the employee resolves
        coverage: (day, vacation count) for the proposed interval
    """

    outcome: ValidationOutcome
    message: str
    specialty: Optional[Specialty]
    coverage: List[Tuple[date, int]]


class RequestService:
    """
    Validates and records leave requests.

    Every submission reloads the full current snapshot of employees and
    requests before validating. Races between concurrent submissions are
    not resolved here.
    """

    def __init__(self, db: Session, settings: Optional[Settings] = None):
        """
        Args:
            db: Database session
            settings: Application settings, defaults to the cached instance
        """
        self.db = db
        self.settings = settings or get_settings()

    def load_snapshot(self) -> Tuple[List[Employee], List[LeaveRequest]]:
        """Current employees and requests."""
        employees = self.db.query(Employee).all()
        requests = self.db.query(LeaveRequest).all()
        return employees, requests

    def evaluate(self, proposal: LeaveProposal) -> ValidationOutcome:
        """Runs the validator against the current snapshot without writing."""
        employees, requests = self.load_snapshot()
        return ValidationService.validate(
            proposal,
            requests,
            employees,
            capacity_limit=self.settings.capacity_limit,
        )

    def submit(self, proposal: LeaveProposal) -> LeaveRequest:
        """
        Validates and persists a leave request.

        Args:
            proposal: Submitted request

        Returns:
            The stored LeaveRequest

        Raises:
            LeaveRequestRejected: If any rule fails
        """
        outcome = self.evaluate(proposal)
        if outcome.rejected:
            message = describe_outcome(outcome, self.settings.message_language)
            logger.info(
                "leave_request_refused",
                reason=outcome.reason.value,
                employee_id=proposal.employee_id,
            )
            raise LeaveRequestRejected(outcome, message)

        accepted = outcome.request
        request = LeaveRequest(
            employee_id=accepted.employee_id,
            start_date=accepted.start_date,
            end_date=accepted.end_date,
            type=accepted.type,
            externally_logged=accepted.externally_logged,
            notes=accepted.notes,
        )
        self.db.add(request)
        self.db.flush()
        logger.info(
            "leave_request_created",
            request_id=request.id,
            employee_id=request.employee_id,
            request_type=RequestType(request.type).value,
            start_date=str(request.start_date),
            end_date=str(request.end_date),
        )
        return request

    def preflight(self, proposal: LeaveProposal) -> Preflight:
        """
        Tells what submit would decide and shows the team's coverage.

        Coverage is empty when the employee or the dates are unusable.
        """
        outcome = self.evaluate(proposal)
        employee = self.db.get(Employee, proposal.employee_id) if proposal.employee_id else None
        coverage: List[Tuple[date, int]] = []
        specialty = None
        if employee is not None:
            specialty = employee.specialty
            if outcome.reason not in (RejectReason.MISSING_FIELDS, RejectReason.INVERTED_RANGE):
                employees, requests = self.load_snapshot()
                coverage = daily_coverage(
                    as_date(proposal.start_date),
                    as_date(proposal.end_date),
                    employee.specialty,
                    requests,
                    employees,
                )
        return Preflight(
            outcome=outcome,
            message=describe_outcome(outcome, self.settings.message_language),
            specialty=specialty,
            coverage=coverage,
        )

    def get_request(self, request_id: str) -> LeaveRequest:
        """
        Raises:
            RequestNotFoundError: If the id is unknown
        """
        request = self.db.get(LeaveRequest, request_id)
        if request is None:
            raise RequestNotFoundError(f"Leave request '{request_id}' was not found")
        return request

    def delete(self, request_id: str) -> None:
        """Removes a request. Editing is done as delete plus a new submission."""
        request = self.get_request(request_id)
        self.db.delete(request)
        self.db.flush()
        logger.info("leave_request_deleted", request_id=request_id)

    def list_requests(
        self,
        employee_id: str | None = None,
        request_type: RequestType | None = None,
    ) -> List[LeaveRequest]:
        """Requests ordered by start date, optionally filtered."""
        query = self.db.query(LeaveRequest)
        if employee_id is not None:
            query = query.filter(LeaveRequest.employee_id == employee_id)
        if request_type is not None:
            query = query.filter(LeaveRequest.type == request_type)
        return query.order_by(LeaveRequest.start_date, LeaveRequest.id).all()

    def set_externally_logged(self, request_id: str, value: bool) -> LeaveRequest:
        """
        Marks a vacation as mirrored into the external HR system.

        The flag stays False for day offs and sick leaves.
        """
        request = self.get_request(request_id)
        request.externally_logged = bool(value) and request.type == RequestType.VACATION
        self.db.flush()
        logger.info(
            "leave_request_external_flag",
            request_id=request_id,
            externally_logged=request.externally_logged,
        )
        return request

