"""Course Enrollment API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - /health and /register are public; /students, /courses, /enrollments require a bearer token
    - Global error handlers map EnrollmentError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database manager and identity verifier built in the lifespan and kept on app.state

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Seeding is a separate ASGI app (app/seed_main.py): operational tool, not part of the user API
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import courses, enrollments, health, registration, students
from app.config import get_settings
from app.infrastructure.database import init_db
from app.infrastructure.identity import build_identity_verifier
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.db_manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    app.state.identity_verifier = build_identity_verifier(settings)
    logger.info(f"{app.title} started")
    yield
    await app.state.db_manager.dispose()
    logger.info(f"{app.title} shutting down")


app = FastAPI(
    title="Course Enrollment API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(registration.router)
app.include_router(students.router)
app.include_router(courses.router)
app.include_router(enrollments.router)

register_error_handlers(app)
