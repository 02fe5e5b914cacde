"""Seed Route - POST /seed-courses, served only by the operational seed app (app/seed_main.py).

Invariants:
    - POST only (other methods -> 405 from the router)
    - Non-empty catalog -> 400 SEED_ALREADY_APPLIED, nothing written
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.database import get_db
from app.schemas.enrollment import SeedResponse
from app.services.course_seeder import CourseSeeder

router = APIRouter(tags=["seed"])


@router.post("/seed-courses", response_model=SeedResponse)
async def seed_courses(db: AsyncSession = Depends(get_db)):
    """Insert the fixture catalog into an empty courses table."""
    courses = await CourseSeeder(db).seed()
    return SeedResponse(
        success=True,
        message=f"Successfully seeded {len(courses)} courses!",
        courses=courses,
    )
