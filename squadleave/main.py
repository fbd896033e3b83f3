"""FastAPI application."""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from squadleave import __version__
from squadleave.api.routes import auth, coverage, dashboard, employees, holidays, public, reports, requests
from squadleave.core.config import get_settings
from squadleave.core.database import init_db
from squadleave.core.logging import setup_logging

settings = get_settings()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown events."""
    setup_logging()
    init_db()
    if settings.master_password:
        logger.warning("master_password_enabled", whitelisted=len(settings.access_whitelist))
    logger.info("application_started", name=settings.app_name, capacity_limit=settings.capacity_limit)
    yield
    logger.info("application_stopped")


app = FastAPI(
    title="SquadLeave API",
    description="""
    Leave scheduling for specialty teams.

    ## Features

    * **Requests**: Vacations, day offs and sick leaves with overlap and capacity checks.
    * **Coverage**: Daily vacation counts per specialty with a heatmap.
    * **Holidays**: Regional calendars (Brazil, São Paulo, Belo Horizonte, Mexico, Madrid).
    * **Reports**: Yearly vacation business days per employee and specialty.

    ## Authorization

    Write endpoints use JWT (Bearer token).
    1. Get a token from `/api/auth/login` with a whitelisted e-mail.
    2. Send `Authorization: Bearer <token>` with each request.

    Endpoints under `/api/public` are read-only and need no token.
    """,
    version=__version__,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes
app.include_router(auth.router, prefix="/api")
app.include_router(employees.router, prefix="/api")
app.include_router(requests.router, prefix="/api")
app.include_router(holidays.router, prefix="/api")
app.include_router(coverage.router, prefix="/api")
app.include_router(reports.router, prefix="/api")
app.include_router(dashboard.router, prefix="/api")
app.include_router(public.router, prefix="/api")


@app.get("/")
async def root():
    """API root."""
    return {
        "name": settings.app_name,
        "version": __version__,
        "status": "running",
    }


@app.get("/health")
async def health_check():
    """Health check."""
    return {"status": "healthy"}


def serve() -> None:
    """Runs the API with uvicorn using host/port from settings."""
    import uvicorn

    uvicorn.run(
        "squadleave.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )


if __name__ == "__main__":
    serve()
