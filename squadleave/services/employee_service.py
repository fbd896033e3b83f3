"""Employee administration."""

from typing import Any, Iterable, List

import structlog
from sqlalchemy.orm import Session

from squadleave.models.employee import Employee
from squadleave.models.leave_request import LeaveRequest
from squadleave.shared.enums import Specialty
from squadleave.shared.exceptions import EmployeeNotFoundError, ValidationError

logger = structlog.get_logger(__name__)


class EmployeeService:
    """
    Create, delete and list team members.

    Services flush but do not commit; the caller owns the transaction.
    """

    def __init__(self, db: Session):
        """
        Args:
            db: Database session
        """
        self.db = db

    def list_employees(self, active: bool | None = None) -> List[Employee]:
        """Employees ordered by name, optionally filtered by the active flag."""
        query = self.db.query(Employee)
        if active is not None:
            query = query.filter(Employee.active == active)
        return query.order_by(Employee.name).all()

    def get_employee(self, employee_id: str) -> Employee:
        """
        Raises:
            EmployeeNotFoundError: If the id is unknown
        """
        employee = self.db.get(Employee, employee_id)
        if employee is None:
            raise EmployeeNotFoundError(f"Employee '{employee_id}' was not found")
        return employee

    def create_employee(self, name: str, specialty: Specialty, active: bool = True) -> Employee:
        """
        Adds an employee.

        Args:
            name: Display name, required
            specialty: Team
            active: Whether the employee is active

        Returns:
            The new Employee

        Raises:
            ValidationError: If the name is blank
        """
        name = (name or "").strip()
        if not name:
            raise ValidationError("Employee name is required")

        employee = Employee(name=name, specialty=specialty, active=active)
        self.db.add(employee)
        self.db.flush()
        logger.info("employee_created", employee_id=employee.id, specialty=Specialty(specialty).value)
        return employee

    def delete_employee(self, employee_id: str) -> None:
        """
        Removes an employee together with all of their leave requests.

        Raises:
            EmployeeNotFoundError: If the id is unknown
        """
        employee = self.get_employee(employee_id)
        request_count = (
            self.db.query(LeaveRequest)
            .filter(LeaveRequest.employee_id == employee_id)
            .delete(synchronize_session="fetch")
        )
        self.db.delete(employee)
        self.db.flush()
        logger.info("employee_deleted", employee_id=employee_id, requests_removed=request_count)

    def bulk_upsert(self, employees: Iterable[Any]) -> int:
        """Inserts or replaces employees by id, returning how many were written."""
        count = 0
        for employee in employees:
            self.db.merge(employee)
            count += 1
        self.db.flush()
        logger.info("employees_upserted", count=count)
        return count
