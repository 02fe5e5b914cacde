"""Seed Entry Point - standalone ASGI app exposing only POST /seed-courses.

Run once against an empty database, e.g. `uvicorn app.seed_main:seed_app`.
Shares lifespan, configuration, and error envelope with the main API.
"""

from fastapi import FastAPI

from app.api.error_handlers import register_error_handlers
from app.api.routes import seed
from app.main import lifespan

seed_app = FastAPI(
    title="Course Enrollment Seeder", version="1.0.0", lifespan=lifespan,
)
seed_app.include_router(seed.router)
register_error_handlers(seed_app)
