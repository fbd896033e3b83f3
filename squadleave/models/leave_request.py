"""Leave request model."""

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Date, Enum as SQLEnum, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from squadleave.models.base import Base, RecordMixin
from squadleave.shared.enums import RequestType

if TYPE_CHECKING:
    from squadleave.models.employee import Employee


class LeaveRequest(Base, RecordMixin):
    """
    A vacation, day off or sick leave over an inclusive calendar-day interval.

    Requests are never edited in place: an edit is a delete followed by a
    new submission.

    Attributes:
        id: Opaque identifier
        employee_id: Owner of the request
        start_date: First day, inclusive
        end_date: Last day, inclusive
        type: Vacation, day off or sick leave
        externally_logged: Vacation mirrored into the external HR system
        notes: Free text
    """

    __tablename__ = "leave_requests"

    employee_id: Mapped[str] = mapped_column(
        ForeignKey("employees.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    type: Mapped[RequestType] = mapped_column(SQLEnum(RequestType), nullable=False)
    externally_logged: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Relationships
    employee: Mapped["Employee"] = relationship(back_populates="requests")

    @property
    def calendar_days(self) -> int:
        """Number of calendar days in the interval."""
        return (self.end_date - self.start_date).days + 1

    def __repr__(self) -> str:
        return f"<LeaveRequest {self.id}: {self.type} {self.start_date} - {self.end_date}>"
