"""Declarative base and the columns every leave record shares."""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def new_id() -> str:
    """Generates an opaque record id."""
    return str(uuid.uuid4())


class Base(DeclarativeBase):
    pass


class RecordMixin:
    """
    Identity and bookkeeping columns of employees, requests and holidays.

    Ids are opaque strings. A missing id is generated on insert; a given one
    is kept, so bulk upserts replace records by the id they were exported with.

    Attributes:
        id: Opaque identifier
        created_at: When the record was stored; for a request, its submission time
        updated_at: Last in-place change, e.g. the external-logging flag of a vacation
    """

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
