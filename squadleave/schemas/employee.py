"""Pydantic schemas for employees."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from squadleave.shared.enums import Specialty


class EmployeeBase(BaseModel):
    """Common employee fields."""

    name: str = Field(..., min_length=1, max_length=200, description="Display name")
    specialty: Specialty = Field(..., description="Team (DC-IA, DC-UX, DC Full)")
    active: bool = Field(default=True, description="Whether the employee is active")

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v


class EmployeeCreate(EmployeeBase):
    """Schema for creating an employee."""

    pass


class EmployeeUpsert(EmployeeBase):
    """Schema for bulk upsert; an existing id replaces that record."""

    id: str | None = Field(None, max_length=36)


class EmployeeResponse(EmployeeBase):
    """Employee as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    created_at: datetime | None = None


class EmployeeListResponse(BaseModel):
    """List of employees."""

    items: list[EmployeeResponse]
    total: int
