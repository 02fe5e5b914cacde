"""Student Routes - self-service profile read and update (bearer required).

Invariants:
    - Path id must equal the verified subject id (403 otherwise, regardless of payload)
    - PUT applies only fields present in the body; email is never changed
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import get_current_subject, require_own_student
from app.core.domain_types import SubjectId
from app.infrastructure.database import get_db
from app.schemas.base import MessageResponse
from app.schemas.student import StudentResponse, StudentUpdate
from app.services.student_service import StudentService

router = APIRouter(
    prefix="/students", tags=["students"],
    dependencies=[Depends(get_current_subject)],
)


@router.get("/{student_id}", response_model=StudentResponse)
async def get_student(
    student_id: str,
    subject_id: SubjectId = Depends(require_own_student),
    db: AsyncSession = Depends(get_db),
):
    student = await StudentService(db).get_own(subject_id, student_id)
    return StudentResponse.model_validate(student)


@router.put("/{student_id}", response_model=MessageResponse)
async def update_student(
    student_id: str,
    body: StudentUpdate,
    subject_id: SubjectId = Depends(require_own_student),
    db: AsyncSession = Depends(get_db),
):
    await StudentService(db).update_own(
        subject_id, student_id, body.model_dump(exclude_unset=True),
    )
    return MessageResponse(message="Student updated successfully")
