"""Student Accessor - register, read own profile, update own profile.

Invariants:
    - register() never overwrites: an existing id (or a concurrent insert of it) -> 409
    - get_own/update_own check ownership BEFORE touching the database (403 leaks no existence info)
    - update_own never changes id, email, or timestamps supplied by the caller
    - updated_at is refreshed by the database on every successful update, even an empty patch
"""

import logging

from sqlalchemy import func, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import StudentId, SubjectId
from app.core.enforce_access import check_owner
from app.core.errors import (
    ResourceNotFoundError,
    StudentAlreadyRegisteredError,
)
from app.models.student import Student

logger = logging.getLogger(__name__)

IMMUTABLE_FIELDS = frozenset({"id", "uid", "email", "created_at", "updated_at"})


class StudentService:
    """Self-service access to student records."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def register(self, subject_id: str, profile: dict) -> StudentId:
        """Create the student record keyed by the identity subject id."""
        existing = await self.db.get(Student, subject_id)
        if existing is not None:
            raise StudentAlreadyRegisteredError(subject_id)

        fields = {k: v for k, v in profile.items() if k not in {"id", "uid"}}
        self.db.add(Student(id=subject_id, **fields))
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise StudentAlreadyRegisteredError(subject_id)

        logger.info("Student registered", extra={"student_id": subject_id})
        return StudentId(subject_id)

    async def get_own(self, subject_id: SubjectId, requested_id: str) -> Student:
        error = check_owner(subject_id, requested_id, action="access")
        if error:
            raise error
        return await self._get_or_404(requested_id)

    async def update_own(
        self, subject_id: SubjectId, requested_id: str, patch: dict,
    ) -> None:
        error = check_owner(subject_id, requested_id, action="update")
        if error:
            raise error
        await self._get_or_404(requested_id)

        values = {k: v for k, v in patch.items() if k not in IMMUTABLE_FIELDS}
        # Explicit so an empty patch still refreshes the stamp
        values["updated_at"] = func.now()
        await self.db.execute(
            update(Student)
            .where(Student.id == requested_id)
            .values(**values)
            .execution_options(synchronize_session=False),
        )
        await self.db.commit()
        logger.info(
            f"Student updated: {sorted(k for k in values if k != 'updated_at')}",
            extra={"student_id": requested_id},
        )

    async def _get_or_404(self, student_id: str) -> Student:
        student = await self.db.get(Student, student_id, populate_existing=True)
        if student is None:
            raise ResourceNotFoundError("Student", student_id)
        return student
