"""Employee model."""

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Enum as SQLEnum, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from squadleave.models.base import Base, RecordMixin
from squadleave.shared.enums import Specialty

if TYPE_CHECKING:
    from squadleave.models.leave_request import LeaveRequest


class Employee(Base, RecordMixin):
    """
    Team member whose leave is tracked.

    Attributes:
        id: Opaque identifier
        name: Display name
        specialty: Team the employee belongs to (scopes the capacity cap)
        active: Whether the employee is currently active
    """

    __tablename__ = "employees"

    name: Mapped[str] = mapped_column(String(200), index=True, nullable=False)
    specialty: Mapped[Specialty] = mapped_column(SQLEnum(Specialty), nullable=False)
    active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    # Relationships
    requests: Mapped[list["LeaveRequest"]] = relationship(
        back_populates="employee",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="LeaveRequest.start_date",
    )

    def __repr__(self) -> str:
        return f"<Employee {self.id}: {self.name} ({self.specialty})>"
