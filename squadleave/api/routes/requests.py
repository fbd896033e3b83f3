"""Leave request routes."""

from fastapi import APIRouter, HTTPException, Query, status

from squadleave.api.dependencies import CurrentUser, DBSession, RequestSvc
from squadleave.schemas.leave_request import (
    CoverageDay,
    ExternalLoggingUpdate,
    LeaveRequestCreate,
    LeaveRequestResponse,
    PreflightResponse,
    RejectionDetail,
)
from squadleave.services.validation_service import LeaveProposal, ValidationOutcome
from squadleave.shared.enums import RejectReason, RequestType
from squadleave.shared.exceptions import LeaveRequestRejected, RequestNotFoundError

router = APIRouter(prefix="/requests", tags=["requests"])

# HTTP status per rejection reason
REJECTION_STATUS: dict[RejectReason, int] = {
    RejectReason.MISSING_FIELDS: status.HTTP_422_UNPROCESSABLE_ENTITY,
    RejectReason.INVERTED_RANGE: status.HTTP_422_UNPROCESSABLE_ENTITY,
    RejectReason.UNRESOLVED_EMPLOYEE: status.HTTP_404_NOT_FOUND,
    RejectReason.OVERLAPS_EXISTING_REQUEST: status.HTTP_409_CONFLICT,
    RejectReason.CAPACITY_EXCEEDED: status.HTTP_409_CONFLICT,
}


def rejection_detail(outcome: ValidationOutcome, message: str) -> RejectionDetail:
    """Structured body describing a rejection."""
    conflict = outcome.conflicting_request
    return RejectionDetail(
        reason=outcome.reason,
        message=message,
        conflicting_request_id=conflict.id if conflict is not None else None,
        offending_date=outcome.offending_date,
        specialty=outcome.specialty,
        capacity_limit=outcome.capacity_limit if outcome.reason == RejectReason.CAPACITY_EXCEEDED else None,
    )


def _proposal(data: LeaveRequestCreate) -> LeaveProposal:
    return LeaveProposal(**data.model_dump())


@router.get("", response_model=list[LeaveRequestResponse])
async def list_requests(
    service: RequestSvc,
    employee_id: str | None = Query(None, description="Filter by employee"),
    type: RequestType | None = Query(None, description="Filter by request type"),
):
    """List leave requests ordered by start date."""
    return service.list_requests(employee_id=employee_id, request_type=type)


@router.post("", response_model=LeaveRequestResponse, status_code=status.HTTP_201_CREATED)
async def submit_request(
    data: LeaveRequestCreate,
    db: DBSession,
    service: RequestSvc,
    current_user: CurrentUser,
):
    """
    Submit a leave request.

    Rules, first failure wins:
    - employee, start and end date are required (422)
    - start must not be after end (422)
    - the employee must exist (404)
    - no overlap with the employee's own requests, any type (409)
    - vacations only: the specialty must be below its daily cap (409)
    """
    try:
        request = service.submit(_proposal(data))
    except LeaveRequestRejected as e:
        raise HTTPException(
            status_code=REJECTION_STATUS[e.outcome.reason],
            detail=rejection_detail(e.outcome, str(e)).model_dump(mode="json"),
        )
    db.commit()
    db.refresh(request)
    return request


@router.post("/preflight", response_model=PreflightResponse)
async def preflight_request(data: LeaveRequestCreate, service: RequestSvc):
    """Check a request without saving it and show the team's coverage."""
    result = service.preflight(_proposal(data))
    return PreflightResponse(
        accepted=result.outcome.accepted,
        rejection=rejection_detail(result.outcome, result.message) if result.outcome.rejected else None,
        specialty=result.specialty,
        coverage=[CoverageDay(day=day, count=count) for day, count in result.coverage],
    )


@router.patch("/{request_id}/external-logging", response_model=LeaveRequestResponse)
async def set_external_logging(
    request_id: str,
    data: ExternalLoggingUpdate,
    db: DBSession,
    service: RequestSvc,
    current_user: CurrentUser,
):
    """Mark a vacation as entered in the HR system. Ignored for other types."""
    try:
        request = service.set_externally_logged(request_id, data.externally_logged)
    except RequestNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    db.commit()
    db.refresh(request)
    return request


@router.delete("/{request_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_request(
    request_id: str,
    db: DBSession,
    service: RequestSvc,
    current_user: CurrentUser,
):
    """Delete a leave request."""
    try:
        service.delete(request_id)
    except RequestNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    db.commit()
