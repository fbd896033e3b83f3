"""Dashboard route."""

from datetime import date

from fastapi import APIRouter, Query

from squadleave.api.dependencies import CurrentUser, DBSession
from squadleave.models.employee import Employee
from squadleave.models.leave_request import LeaveRequest
from squadleave.schemas.report import DashboardResponse
from squadleave.services.dashboard_service import dashboard_stats

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    db: DBSession,
    current_user: CurrentUser,
    today: date | None = Query(None, description="Reference day, defaults to today"),
):
    """Current leave activity: who is away, upcoming day offs, open sick leaves."""
    stats = dashboard_stats(
        today or date.today(),
        db.query(Employee).all(),
        db.query(LeaveRequest).all(),
    )
    return DashboardResponse.model_validate(stats)
