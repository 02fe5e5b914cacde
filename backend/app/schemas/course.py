"""Course Schemas - read-only course views with computed availability."""

from datetime import datetime

from app.schemas.base import CamelModel


class CourseResponse(CamelModel):
    id: str
    code: str
    name: str
    description: str | None = None
    credits: int
    capacity: int
    enrolled_count: int
    instructor: str | None = None
    schedule: str | None = None
    semester: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    available_slots: int


class CourseListResponse(CamelModel):
    courses: list[CourseResponse]
