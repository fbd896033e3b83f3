"""Employee management routes."""

from fastapi import APIRouter, File, HTTPException, Query, UploadFile, status

from squadleave.api.dependencies import CurrentUser, DBSession, EmployeeSvc
from squadleave.models.employee import Employee
from squadleave.schemas.employee import (
    EmployeeCreate,
    EmployeeListResponse,
    EmployeeResponse,
    EmployeeUpsert,
)
from squadleave.schemas.holiday import ImportResponse
from squadleave.services.import_service import employees_from_csv
from squadleave.shared.exceptions import EmployeeNotFoundError, ImportFormatError, ValidationError

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("", response_model=EmployeeListResponse)
async def list_employees(
    service: EmployeeSvc,
    active: bool | None = Query(None, description="Filter by active flag"),
):
    """List employees ordered by name."""
    items = service.list_employees(active=active)
    return EmployeeListResponse(
        items=[EmployeeResponse.model_validate(e) for e in items],
        total=len(items),
    )


@router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
async def create_employee(
    data: EmployeeCreate,
    db: DBSession,
    service: EmployeeSvc,
    current_user: CurrentUser,
):
    """Add an employee."""
    try:
        employee = service.create_employee(data.name, data.specialty, data.active)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    db.commit()
    db.refresh(employee)
    return employee


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(
    employee_id: str,
    db: DBSession,
    service: EmployeeSvc,
    current_user: CurrentUser,
):
    """Delete an employee and all of their leave requests."""
    try:
        service.delete_employee(employee_id)
    except EmployeeNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    db.commit()


@router.put("/bulk", response_model=ImportResponse)
async def bulk_upsert_employees(
    items: list[EmployeeUpsert],
    db: DBSession,
    service: EmployeeSvc,
    current_user: CurrentUser,
):
    """Insert or replace employees by id."""
    employees = [Employee(**item.model_dump(exclude_none=True)) for item in items]
    count = service.bulk_upsert(employees)
    db.commit()
    return ImportResponse(imported=count)


@router.post("/import", response_model=ImportResponse)
async def import_employees(
    db: DBSession,
    service: EmployeeSvc,
    current_user: CurrentUser,
    file: UploadFile = File(..., description="CSV with name,specialty columns"),
):
    """Import employees from a CSV file."""
    content = (await file.read()).decode("utf-8", errors="replace")
    try:
        employees = employees_from_csv(content)
    except ImportFormatError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    count = service.bulk_upsert(employees)
    db.commit()
    return ImportResponse(imported=count)
