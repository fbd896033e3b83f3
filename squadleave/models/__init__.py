"""ORM models."""

from squadleave.models.base import Base, RecordMixin, new_id

from squadleave.models.employee import Employee
from squadleave.models.leave_request import LeaveRequest
from squadleave.models.holiday import Holiday

__all__ = [
    "Base",
    "RecordMixin",
    "new_id",
    "Employee",
    "LeaveRequest",
    "Holiday",
]
