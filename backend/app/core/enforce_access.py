"""Access & Capacity Rules - pure checks behind every student and enrollment operation.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Return the error to raise on violation, None on success
    - Ownership compares the verified subject id with the path/record owner, nothing else

Design Decisions:
    - Return errors instead of raising: services decide when to raise, tests assert without pytest.raises
"""

from app.core.domain_types import EnrollmentStatus
from app.core.errors import (
    AlreadyEnrolledError,
    CourseFullError,
    EnrollmentNotActiveError,
    ForbiddenError,
)


def check_owner(
    subject_id: str,
    requested_id: str,
    action: str = "access",
    resource: str = "data",
) -> ForbiddenError | None:
    """A subject may only read or write its own student data."""
    if subject_id != requested_id:
        return ForbiddenError(
            f"Forbidden - Cannot {action} other student's {resource}",
        )
    return None


def check_enrollment_owner(
    subject_id: str, enrollment_student_id: str,
) -> ForbiddenError | None:
    if subject_id != enrollment_student_id:
        return ForbiddenError("Forbidden - Cannot drop other student's enrollment")
    return None


def check_course_capacity(
    course_id: str, capacity: int, enrolled_count: int,
) -> CourseFullError | None:
    """No new enrollment once enrolled_count has reached capacity."""
    if enrolled_count >= capacity:
        return CourseFullError(course_id)
    return None


def check_not_already_enrolled(
    enrollment_id: str, status: str | None,
) -> AlreadyEnrolledError | None:
    """status is None when no record exists for the pair yet."""
    if status == EnrollmentStatus.ENROLLED:
        return AlreadyEnrolledError(enrollment_id)
    return None


def check_enrollment_active(
    enrollment_id: str, status: str,
) -> EnrollmentNotActiveError | None:
    """Only an active enrollment can be dropped."""
    if status != EnrollmentStatus.ENROLLED:
        return EnrollmentNotActiveError(enrollment_id, status)
    return None


def available_slots(capacity: int | None, enrolled_count: int | None) -> int:
    # Not clamped: a negative value would expose corrupted counters.
    return (capacity or 0) - (enrolled_count or 0)
