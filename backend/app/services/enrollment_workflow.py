"""Enrollment Workflow - enroll, drop, and list a student's active enrollments.

Invariants:
    - enroll: student exists -> course exists -> capacity -> not already enrolled ->
      write enrollment -> increment counter, all in ONE transaction
    - The increment is conditional (enrolled_count < capacity): concurrent enrolls can never
      push a course over capacity; a lost race rolls back and re-runs the whole sequence
    - Duplicate detection reads the deterministic key directly; a concurrent insert of the
      same key surfaces as IntegrityError -> AlreadyEnrolledError
    - drop: status flip (only from enrolled) and counter decrement (only above zero) commit together
    - list_for_student returns status == enrolled only (dropped/completed are history)

Design Decisions:
    - Conditional UPDATE over SELECT ... FOR UPDATE: same statement works on PostgreSQL and SQLite,
      and the database evaluates the precondition atomically
    - Re-enroll after drop reuses the keyed row: history is one row per pair, status tracks the latest state
"""

import logging

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import (
    EnrollmentId, EnrollmentStatus, SubjectId, make_enrollment_id,
)
from app.core.enforce_access import (
    check_course_capacity,
    check_enrollment_active,
    check_enrollment_owner,
    check_not_already_enrolled,
    check_owner,
)
from app.core.errors import (
    AlreadyEnrolledError,
    CourseFullError,
    EnrollmentNotActiveError,
    InvalidRequestError,
    ResourceNotFoundError,
    StudentNotRegisteredError,
)
from app.models.course import Course
from app.models.enrollment import Enrollment
from app.models.student import Student

logger = logging.getLogger(__name__)


class EnrollmentWorkflow:
    """Capacity-safe enroll/drop for the authenticated student."""

    def __init__(self, db: AsyncSession, max_attempts: int = 3):
        self.db = db
        self.max_attempts = max(1, max_attempts)

    async def enroll(self, subject_id: SubjectId, course_id: str) -> EnrollmentId:
        """Enroll the subject in course_id. Returns the enrollment id."""
        if not course_id:
            raise InvalidRequestError(
                "Missing required fields: courseId", field="courseId",
            )
        enrollment_id = make_enrollment_id(subject_id, course_id)

        for attempt in range(1, self.max_attempts + 1):
            if await self._try_enroll(subject_id, course_id, enrollment_id):
                logger.info(
                    "Enrolled successfully",
                    extra={
                        "student_id": subject_id, "course_id": course_id,
                        "enrollment_id": enrollment_id, "attempt": attempt,
                    },
                )
                return enrollment_id
            logger.warning(
                "Capacity precondition changed during enroll, retrying",
                extra={"course_id": course_id, "attempt": attempt},
            )
        raise CourseFullError(course_id)

    async def _try_enroll(
        self, student_id: str, course_id: str, enrollment_id: EnrollmentId,
    ) -> bool:
        """One transactional attempt. False means the counter update lost a race."""
        student = await self.db.get(Student, student_id)
        if student is None:
            raise StudentNotRegisteredError(student_id)

        course = await self.db.get(Course, course_id, populate_existing=True)
        if course is None:
            raise ResourceNotFoundError("Course", course_id)

        error = check_course_capacity(
            course_id, course.capacity, course.enrolled_count,
        )
        if error:
            raise error

        existing = await self.db.get(
            Enrollment, enrollment_id, populate_existing=True,
        )
        error = check_not_already_enrolled(
            enrollment_id, existing.status if existing else None,
        )
        if error:
            raise error

        try:
            if existing is None:
                self.db.add(Enrollment(
                    id=enrollment_id,
                    student_id=student_id,
                    course_id=course_id,
                    course_name=course.name,
                    course_code=course.code,
                    status=EnrollmentStatus.ENROLLED.value,
                ))
                await self.db.flush()
            else:
                reactivated = await self.db.execute(
                    update(Enrollment)
                    .where(Enrollment.id == enrollment_id)
                    .where(Enrollment.status != EnrollmentStatus.ENROLLED.value)
                    .values(
                        status=EnrollmentStatus.ENROLLED.value,
                        course_name=course.name,
                        course_code=course.code,
                        enrolled_at=func.now(),
                        dropped_at=None,
                    )
                    .execution_options(synchronize_session=False),
                )
                if reactivated.rowcount != 1:
                    await self.db.rollback()
                    raise AlreadyEnrolledError(enrollment_id)

            claimed = await self.db.execute(
                update(Course)
                .where(Course.id == course_id)
                .where(Course.enrolled_count < Course.capacity)
                .values(enrolled_count=Course.enrolled_count + 1)
                .execution_options(synchronize_session=False),
            )
            if claimed.rowcount != 1:
                await self.db.rollback()
                return False

            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise AlreadyEnrolledError(enrollment_id)
        return True

    async def drop(self, subject_id: SubjectId, enrollment_id: str) -> None:
        """Mark the subject's enrollment dropped and release its seat."""
        enrollment = await self.db.get(
            Enrollment, enrollment_id, populate_existing=True,
        )
        if enrollment is None:
            raise ResourceNotFoundError("Enrollment", enrollment_id)

        error = (
            check_enrollment_owner(subject_id, enrollment.student_id)
            or check_enrollment_active(enrollment_id, enrollment.status)
        )
        if error:
            raise error

        dropped = await self.db.execute(
            update(Enrollment)
            .where(Enrollment.id == enrollment_id)
            .where(Enrollment.status == EnrollmentStatus.ENROLLED.value)
            .values(
                status=EnrollmentStatus.DROPPED.value,
                dropped_at=func.now(),
            )
            .execution_options(synchronize_session=False),
        )
        if dropped.rowcount != 1:
            # A concurrent drop got there first
            await self.db.rollback()
            raise EnrollmentNotActiveError(
                enrollment_id, EnrollmentStatus.DROPPED.value,
            )

        released = await self.db.execute(
            update(Course)
            .where(Course.id == enrollment.course_id)
            .where(Course.enrolled_count > 0)
            .values(enrolled_count=Course.enrolled_count - 1)
            .execution_options(synchronize_session=False),
        )
        if released.rowcount != 1:
            logger.warning(
                "Course counter not decremented (missing course or already zero)",
                extra={"course_id": enrollment.course_id, "enrollment_id": enrollment_id},
            )

        await self.db.commit()
        logger.info(
            "Course dropped",
            extra={
                "student_id": subject_id, "course_id": enrollment.course_id,
                "enrollment_id": enrollment_id,
            },
        )

    async def list_for_student(
        self, subject_id: SubjectId, requested_id: str,
    ) -> list[Enrollment]:
        error = check_owner(
            subject_id, requested_id, action="access", resource="enrollments",
        )
        if error:
            raise error

        result = await self.db.execute(
            select(Enrollment)
            .where(Enrollment.student_id == requested_id)
            .where(Enrollment.status == EnrollmentStatus.ENROLLED.value)
            .order_by(Enrollment.enrolled_at, Enrollment.id)
            .execution_options(populate_existing=True),
        )
        return list(result.scalars().all())
