"""Enrollment ORM - links one student to one course with a lifecycle status.

Invariants:
    - id == f"{student_id}_{course_id}": at most one row per pair, reused on re-enroll
    - status in {enrolled, dropped, completed}; rows are never deleted
    - course_name/course_code are a snapshot taken at enroll time

Design Decisions:
    - Deterministic primary key: duplicate enroll races collide on the key instead of
      needing a separate unique index
"""

from datetime import datetime

from sqlalchemy import String, DateTime, ForeignKey, CheckConstraint, func
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base, TimestampMixin


class Enrollment(TimestampMixin, Base):
    """Student-course enrollment record (kept for history)."""
    __tablename__ = "enrollments"
    __table_args__ = (
        CheckConstraint(
            "status IN ('enrolled', 'dropped', 'completed')",
            name="ck_enrollments_status",
        ),
    )

    id: Mapped[str] = mapped_column(String(200), primary_key=True)
    student_id: Mapped[str] = mapped_column(
        String(128), ForeignKey("students.id"), nullable=False, index=True,
    )
    course_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("courses.id"), nullable=False, index=True,
    )
    course_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    course_code: Mapped[str | None] = mapped_column(String(20), nullable=True)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="enrolled",
    )
    enrolled_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, server_default=func.now(),
    )
    dropped_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
