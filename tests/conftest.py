"""Pytest configuration and shared fixtures."""

from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from squadleave.core.config import Settings, get_settings
from squadleave.core.database import get_db
from squadleave.core.dependencies import get_access_policy
from squadleave.core.security import create_access_token, get_password_hash
from squadleave.models import Base, Employee, Holiday, LeaveRequest
from squadleave.services.access_policy import AccessPolicy
from squadleave.shared.enums import HolidayLocation, RequestType, Specialty

MANAGER_EMAIL = "lead@example.com"
MANAGER_PASSWORD = "correct-horse"


@pytest.fixture
def make_employee():
    """
    Factory for detached Employee records.

    Returns:
        Callable building an Employee
    """
    def _make(id: str, specialty: Specialty = Specialty.DC_IA, name: str | None = None, active: bool = True):
        return Employee(id=id, name=name or f"Employee {id}", specialty=specialty, active=active)

    return _make


@pytest.fixture
def make_request():
    """
    Factory for detached LeaveRequest records.

    Returns:
        Callable building a LeaveRequest
    """
    counter = {"n": 0}

    def _make(
        employee_id: str,
        start: date,
        end: date,
        type: RequestType = RequestType.VACATION,
        externally_logged: bool = False,
        id: str | None = None,
    ):
        counter["n"] += 1
        return LeaveRequest(
            id=id or f"req-{counter['n']}",
            employee_id=employee_id,
            start_date=start,
            end_date=end,
            type=type,
            externally_logged=externally_logged,
        )

    return _make


@pytest.fixture
def make_holiday():
    """Factory for detached Holiday records."""
    def _make(day: date, name: str = "Feriado", location: HolidayLocation = HolidayLocation.GLOBAL):
        return Holiday(id=f"hol-{day.isoformat()}-{location.value}", date=day, name=name, location=location)

    return _make


@pytest.fixture
def engine():
    """In-memory SQLite engine shared across connections."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    """
    Database session for tests.

    Yields:
        SQLAlchemy session
    """
    TestingSessionLocal = sessionmaker(
        autocommit=False, autoflush=False, bind=engine, expire_on_commit=False
    )
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def test_settings():
    """Settings with the default capacity and Portuguese messages."""
    return Settings(
        database_url="sqlite://",
        capacity_limit=4,
        capacity_warning_level=3,
        message_language="pt",
        access_whitelist=[MANAGER_EMAIL],
    )


@pytest.fixture
def access_policy():
    """Policy accepting the test manager with a bcrypt-hashed password."""
    return AccessPolicy(
        whitelist=[MANAGER_EMAIL],
        password_hash=get_password_hash(MANAGER_PASSWORD),
    )


@pytest.fixture
def sample_employees(db_session):
    """
    Four DC-IA analysts, one extra DC-IA analyst and one DC-UX designer.

    Returns:
        Dict of Employee by id
    """
    employees = [
        Employee(id="1", name="Ana", specialty=Specialty.DC_IA, active=True),
        Employee(id="2", name="Bruno", specialty=Specialty.DC_IA, active=True),
        Employee(id="3", name="Carla", specialty=Specialty.DC_IA, active=True),
        Employee(id="4", name="Diego", specialty=Specialty.DC_IA, active=True),
        Employee(id="5", name="Elisa", specialty=Specialty.DC_IA, active=True),
        Employee(id="6", name="Fábio", specialty=Specialty.DC_UX, active=True),
    ]
    db_session.add_all(employees)
    db_session.commit()
    return {e.id: e for e in employees}


@pytest.fixture
def client(db_session, test_settings, access_policy):
    """
    TestClient bound to the test database.

    The lifespan is not entered, so no file database is created.
    """
    from squadleave.main import app

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_access_policy] = lambda: access_policy

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    """Bearer token for the test manager."""
    token = create_access_token({"sub": MANAGER_EMAIL})
    return {"Authorization": f"Bearer {token}"}
