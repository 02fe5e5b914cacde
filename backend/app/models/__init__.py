"""ORM Models - SQLAlchemy declarative models for students, courses, and enrollments.

Invariants:
    - All models inherit from Base (db/base.py)
    - Three tables mirror the three document collections: students, courses, enrollments

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all/autogenerate
"""

from app.models.student import Student  # noqa: F401
from app.models.course import Course  # noqa: F401
from app.models.enrollment import Enrollment  # noqa: F401
