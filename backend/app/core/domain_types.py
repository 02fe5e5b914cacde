"""Domain Types - identity types and enrollment lifecycle states.

Invariants:
    - SubjectId is the identity-service subject; a StudentId always equals the SubjectId that registered it
    - EnrollmentId is deterministic: f"{student_id}_{course_id}" (at most one record per pair)
    - EnrollmentStatus is the only source of valid status strings

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: serializes to JSON and compares equal to the stored column value
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

SubjectId = NewType("SubjectId", str)
StudentId = NewType("StudentId", str)
CourseId = NewType("CourseId", str)
EnrollmentId = NewType("EnrollmentId", str)


# ─── Enums ───────────────────────────────────────────────────────

class EnrollmentStatus(str, Enum):
    """Enrollment lifecycle. Records are never deleted, only transitioned."""
    ENROLLED = "enrolled"
    DROPPED = "dropped"
    COMPLETED = "completed"


def make_enrollment_id(student_id: str, course_id: str) -> EnrollmentId:
    """Composite key for the (student, course) pair."""
    return EnrollmentId(f"{student_id}_{course_id}")
