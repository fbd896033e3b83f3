"""Leave request validation: personal overlap and specialty capacity rules."""

import dataclasses
from dataclasses import dataclass
from datetime import date
from typing import Any, Optional, Sequence

import structlog

from squadleave.services.calendar_service import CalendarService, as_date
from squadleave.services.coverage_service import concurrency_count
from squadleave.shared.constants import (
    DEFAULT_CAPACITY_LIMIT,
    REJECT_MESSAGES,
    REQUEST_TYPE_LABELS_EN,
)
from squadleave.shared.enums import RejectReason, RequestType, Specialty, get_request_type_label

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class LeaveProposal:
    """
    A leave request submitted for validation, not yet persisted.

    Any field may be missing; the validator reports that as a rejection.
    """

    employee_id: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    type: RequestType = RequestType.VACATION
    externally_logged: bool = False
    notes: Optional[str] = None


@dataclass(frozen=True)
class ValidationOutcome:
    """
    Result of validating one proposal.

    Attributes:
        accepted: True when the request may be persisted
        reason: Single authoritative rejection reason (first failing rule)
        request: Normalized proposal, set on acceptance
        conflicting_request: Existing request that overlaps, for overlap rejections
        offending_date: First day at capacity, for capacity rejections
        specialty: Specialty whose cap was reached
        capacity_limit: Cap in force during validation
    """

    accepted: bool
    reason: Optional[RejectReason] = None
    request: Optional[LeaveProposal] = None
    conflicting_request: Any = None
    offending_date: Optional[date] = None
    specialty: Optional[Specialty] = None
    capacity_limit: int = DEFAULT_CAPACITY_LIMIT

    @classmethod
    def accept(cls, request: LeaveProposal, capacity_limit: int = DEFAULT_CAPACITY_LIMIT) -> "ValidationOutcome":
        return cls(accepted=True, request=request, capacity_limit=capacity_limit)

    @classmethod
    def reject(cls, reason: RejectReason, **details: Any) -> "ValidationOutcome":
        return cls(accepted=False, reason=reason, **details)

    @property
    def rejected(self) -> bool:
        return not self.accepted


class ValidationService:
    """
    Decides whether a proposed leave request can be recorded.

    Rules, checked in order, first failure wins:
    - employee, start and end date are present
    - start is not after end
    - no existing request of the same employee overlaps (any type)
    - the employee exists
    - for vacations, the specialty is below its cap on every day

    The decision is a pure function of its arguments: nothing is cached or
    mutated, and each submission is evaluated against a fresh snapshot.
    """

    @staticmethod
    def validate(
        proposal: LeaveProposal,
        existing_requests: Sequence[Any],
        employees: Sequence[Any],
        capacity_limit: int = DEFAULT_CAPACITY_LIMIT,
    ) -> ValidationOutcome:
        """
        Validates a proposal against the current requests and employees.

        Args:
            proposal: Request being submitted
            existing_requests: Every persisted request, before adding the proposal
            employees: Every known employee
            capacity_limit: Max simultaneous vacations per specialty

        Returns:
            Accept with the normalized request, or Reject with one reason
        """
        try:
            start = as_date(proposal.start_date) if proposal.start_date else None
            end = as_date(proposal.end_date) if proposal.end_date else None
        except ValueError:
            start = end = None

        # Rule 1: required fields
        if not proposal.employee_id or start is None or end is None:
            return ValidationService._rejected(RejectReason.MISSING_FIELDS, proposal)

        # Rule 2: range sanity
        if start > end:
            return ValidationService._rejected(RejectReason.INVERTED_RANGE, proposal)

        # Rule 3: no overlap with the employee's own requests
        conflict = ValidationService.find_overlap(proposal.employee_id, start, end, existing_requests)
        if conflict is not None:
            return ValidationService._rejected(
                RejectReason.OVERLAPS_EXISTING_REQUEST,
                proposal,
                conflicting_request=conflict,
            )

        # Rule 4: the employee resolves, needed for the specialty lookup
        employee = next((e for e in employees if e.id == proposal.employee_id), None)
        if employee is None:
            return ValidationService._rejected(RejectReason.UNRESOLVED_EMPLOYEE, proposal)

        # Rule 5: specialty capacity, vacations only
        if proposal.type == RequestType.VACATION:
            offending = ValidationService.find_capacity_breach(
                start, end, employee.specialty, existing_requests, employees, capacity_limit
            )
            if offending is not None:
                return ValidationService._rejected(
                    RejectReason.CAPACITY_EXCEEDED,
                    proposal,
                    offending_date=offending,
                    specialty=employee.specialty,
                    capacity_limit=capacity_limit,
                )

        normalized = dataclasses.replace(
            proposal,
            start_date=start,
            end_date=end,
            externally_logged=proposal.externally_logged if proposal.type == RequestType.VACATION else False,
        )
        return ValidationOutcome.accept(normalized, capacity_limit)

    @staticmethod
    def find_overlap(
        employee_id: str,
        start: date,
        end: date,
        existing_requests: Sequence[Any],
    ) -> Any:
        """
        Returns the first request of the employee sharing a day with [start, end].

        Touching endpoints count as overlap. Request type is irrelevant.
        """
        for request in existing_requests:
            if request.employee_id != employee_id:
                continue
            if start <= as_date(request.end_date) and end >= as_date(request.start_date):
                return request
        return None

    @staticmethod
    def find_capacity_breach(
        start: date,
        end: date,
        specialty: Specialty,
        existing_requests: Sequence[Any],
        employees: Sequence[Any],
        capacity_limit: int = DEFAULT_CAPACITY_LIMIT,
    ) -> Optional[date]:
        """
        Returns the first day on which the specialty is already at its cap.

        Counts are taken on the existing requests only, before the proposal
        is added.
        """
        for day in CalendarService.days_in_interval(start, end):
            if concurrency_count(day, specialty, existing_requests, employees) >= capacity_limit:
                return day
        return None

    @staticmethod
    def _rejected(reason: RejectReason, proposal: LeaveProposal, **details: Any) -> ValidationOutcome:
        logger.debug(
            "leave_request_rejected",
            reason=reason.value,
            employee_id=proposal.employee_id,
            start_date=str(proposal.start_date),
            end_date=str(proposal.end_date),
            request_type=RequestType(proposal.type).value,
        )
        return ValidationOutcome.reject(reason, **details)


def describe_outcome(outcome: ValidationOutcome, language: str = "pt") -> str:
    """
    Default user-facing text for a rejection.

    Args:
        outcome: Rejected outcome
        language: "pt" or "en"

    Returns:
        Message text, empty for accepted outcomes
    """
    if outcome.accepted:
        return ""

    template = REJECT_MESSAGES.get(language, REJECT_MESSAGES["pt"])[outcome.reason]

    if outcome.reason == RejectReason.OVERLAPS_EXISTING_REQUEST:
        conflict = outcome.conflicting_request
        type_value = RequestType(conflict.type).value
        label = REQUEST_TYPE_LABELS_EN.get(type_value, type_value) if language == "en" \
            else get_request_type_label(type_value)
        return template.format(
            request_type=label,
            start=as_date(conflict.start_date).strftime("%d/%m"),
            end=as_date(conflict.end_date).strftime("%d/%m"),
        )

    if outcome.reason == RejectReason.CAPACITY_EXCEEDED:
        return template.format(
            specialty=Specialty(outcome.specialty).value,
            day=outcome.offending_date.strftime("%d/%m/%Y"),
            limit=outcome.capacity_limit,
        )

    return template
