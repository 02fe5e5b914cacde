"""Initial schema - students, courses, enrollments.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        "students",
        sa.Column("id", sa.String(128), primary_key=True),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("ic_number", sa.Text, nullable=True),
        sa.Column("phone_number", sa.Text, nullable=True),
        sa.Column("address", sa.Text, nullable=True),
        sa.Column("emergency_contact", sa.Text, nullable=True),
        sa.Column("date_of_birth", sa.String(32), nullable=True),
        sa.Column("program", sa.String(200), nullable=True),
        sa.Column("enrollment_year", sa.Integer, nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "courses",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("code", sa.String(20), nullable=False, unique=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("credits", sa.Integer, nullable=False, server_default="0"),
        sa.Column("capacity", sa.Integer, nullable=False, server_default="0"),
        sa.Column("enrolled_count", sa.Integer, nullable=False, server_default="0"),
        sa.Column("instructor", sa.String(200), nullable=True),
        sa.Column("schedule", sa.String(200), nullable=True),
        sa.Column("semester", sa.String(50), nullable=True),
        *_timestamps(),
        sa.CheckConstraint("capacity >= 0", name="ck_courses_capacity_nonnegative"),
        sa.CheckConstraint("enrolled_count >= 0", name="ck_courses_enrolled_nonnegative"),
        sa.CheckConstraint("enrolled_count <= capacity", name="ck_courses_within_capacity"),
    )

    op.create_table(
        "enrollments",
        sa.Column("id", sa.String(200), primary_key=True),
        sa.Column("student_id", sa.String(128), sa.ForeignKey("students.id"), nullable=False),
        sa.Column("course_id", sa.String(36), sa.ForeignKey("courses.id"), nullable=False),
        sa.Column("course_name", sa.String(200), nullable=True),
        sa.Column("course_code", sa.String(20), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="enrolled"),
        sa.Column("enrolled_at", sa.DateTime(timezone=True), nullable=True, server_default=sa.func.now()),
        sa.Column("dropped_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.CheckConstraint(
            "status IN ('enrolled', 'dropped', 'completed')",
            name="ck_enrollments_status",
        ),
    )
    op.create_index("ix_enrollments_student_id", "enrollments", ["student_id"])
    op.create_index("ix_enrollments_course_id", "enrollments", ["course_id"])


def downgrade() -> None:
    op.drop_index("ix_enrollments_course_id", table_name="enrollments")
    op.drop_index("ix_enrollments_student_id", table_name="enrollments")
    op.drop_table("enrollments")
    op.drop_table("courses")
    op.drop_table("students")
