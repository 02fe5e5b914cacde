"""Course Accessor - list and fetch courses with computed availableSlots.

Invariants:
    - Read-only: capacity accounting belongs to the enrollment workflow
    - available_slots = capacity - enrolled_count, computed at read time, not clamped
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.enforce_access import available_slots
from app.core.errors import ResourceNotFoundError
from app.models.course import Course
from app.schemas.course import CourseResponse

logger = logging.getLogger(__name__)


def to_course_response(course: Course) -> CourseResponse:
    return CourseResponse(
        id=course.id,
        code=course.code,
        name=course.name,
        description=course.description,
        credits=course.credits,
        capacity=course.capacity,
        enrolled_count=course.enrolled_count,
        instructor=course.instructor,
        schedule=course.schedule,
        semester=course.semester,
        created_at=course.created_at,
        updated_at=course.updated_at,
        available_slots=available_slots(course.capacity, course.enrolled_count),
    )


class CourseService:
    """Course catalog reads."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> list[CourseResponse]:
        result = await self.db.execute(
            select(Course)
            .order_by(Course.code)
            .execution_options(populate_existing=True),
        )
        return [to_course_response(c) for c in result.scalars().all()]

    async def get_by_id(self, course_id: str) -> CourseResponse:
        course = await self.db.get(Course, course_id, populate_existing=True)
        if course is None:
            raise ResourceNotFoundError("Course", course_id)
        return to_course_response(course)
