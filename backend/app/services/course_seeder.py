"""Seed Utility - one-time bulk insert of the course catalog fixtures.

Invariants:
    - Any existing course -> SeedAlreadyAppliedError, zero writes
    - Fixtures are written as one batch in one transaction (all or nothing)
    - A concurrent second seed collides on the unique course code and is reported the same way
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.course_catalog import SAMPLE_COURSES, describe_course
from app.core.errors import SeedAlreadyAppliedError
from app.models.course import Course

logger = logging.getLogger(__name__)


class CourseSeeder:
    """Operational bootstrap for an empty catalog."""

    def __init__(self, db: AsyncSession, fixtures: tuple[dict, ...] = SAMPLE_COURSES):
        self.db = db
        self.fixtures = fixtures

    async def seed(self) -> list[str]:
        """Insert every fixture. Returns 'CODE: Name' lines for the response."""
        result = await self.db.execute(select(Course.id).limit(1))
        if result.first() is not None:
            raise SeedAlreadyAppliedError()

        self.db.add_all([Course(**fixture) for fixture in self.fixtures])
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise SeedAlreadyAppliedError()

        logger.info(f"Successfully seeded {len(self.fixtures)} courses")
        return [describe_course(fixture) for fixture in self.fixtures]
