"""Course ORM - catalog entry with capacity accounting.

Invariants:
    - 0 <= enrolled_count <= capacity (CHECK constraints, also held by the enroll/drop updates)
    - enrolled_count is only mutated by the enrollment workflow
    - code is unique

Design Decisions:
    - String UUID primary key: opaque generated id, same shape on SQLite and PostgreSQL
"""

import uuid

from sqlalchemy import String, Text, Integer, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base, TimestampMixin


class Course(TimestampMixin, Base):
    """Course offered for enrollment."""
    __tablename__ = "courses"
    __table_args__ = (
        CheckConstraint("capacity >= 0", name="ck_courses_capacity_nonnegative"),
        CheckConstraint("enrolled_count >= 0", name="ck_courses_enrolled_nonnegative"),
        CheckConstraint("enrolled_count <= capacity", name="ck_courses_within_capacity"),
    )

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4()),
    )
    code: Mapped[str] = mapped_column(String(20), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    credits: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    capacity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    enrolled_count: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    instructor: Mapped[str | None] = mapped_column(String(200), nullable=True)
    schedule: Mapped[str | None] = mapped_column(String(200), nullable=True)
    semester: Mapped[str | None] = mapped_column(String(50), nullable=True)
