"""Enrollment Schemas - enroll request, enrollment records, and seed results.

Invariants:
    - EnrollRequest.course_id is required and non-blank (missing -> 400)
    - The enrolling student is never taken from the body: it is the verified subject
"""

from datetime import datetime

from pydantic import Field, field_validator

from app.core.domain_types import EnrollmentStatus
from app.schemas.base import CamelModel


class EnrollRequest(CamelModel):
    """POST /enrollments/enroll body."""
    course_id: str = Field(min_length=1)

    @field_validator("course_id")
    @classmethod
    def strip_course_id(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("courseId cannot be empty or whitespace")
        return v


class EnrollResponse(CamelModel):
    message: str
    enrollment_id: str


class EnrollmentResponse(CamelModel):
    id: str
    student_id: str
    course_id: str
    course_name: str | None = None
    course_code: str | None = None
    status: EnrollmentStatus
    enrolled_at: datetime | None = None
    dropped_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class EnrollmentListResponse(CamelModel):
    enrollments: list[EnrollmentResponse]


class SeedResponse(CamelModel):
    """POST /seed-courses result."""
    success: bool
    message: str
    courses: list[str]
