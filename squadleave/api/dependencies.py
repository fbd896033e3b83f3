"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from squadleave.core.config import Settings, get_settings
from squadleave.core.database import get_db
from squadleave.core.dependencies import get_access_policy, get_current_user
from squadleave.schemas.auth import TokenData
from squadleave.services.access_policy import AccessPolicy
from squadleave.services.employee_service import EmployeeService
from squadleave.services.holiday_service import HolidayService
from squadleave.services.request_service import RequestService


def get_employee_service(db: Annotated[Session, Depends(get_db)]) -> EmployeeService:
    return EmployeeService(db)


def get_holiday_service(db: Annotated[Session, Depends(get_db)]) -> HolidayService:
    return HolidayService(db)


def get_request_service(
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> RequestService:
    """
    Dependency for RequestService.

    Args:
        db: Database session
        settings: Application settings (capacity limit, message language)

    Returns:
        RequestService bound to the session
    """
    return RequestService(db, settings)


# Typed aliases
DBSession = Annotated[Session, Depends(get_db)]
AppSettings = Annotated[Settings, Depends(get_settings)]
CurrentUser = Annotated[TokenData, Depends(get_current_user)]
Policy = Annotated[AccessPolicy, Depends(get_access_policy)]
EmployeeSvc = Annotated[EmployeeService, Depends(get_employee_service)]
HolidaySvc = Annotated[HolidayService, Depends(get_holiday_service)]
RequestSvc = Annotated[RequestService, Depends(get_request_service)]
