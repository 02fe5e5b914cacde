"""Enrollment Routes - enroll, list own enrollments, drop (bearer required).

Invariants:
    - The enrolling/dropping student is always the verified subject, never a body field
    - Routes only translate HTTP <-> EnrollmentWorkflow; all checks live in the workflow
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import get_current_subject
from app.config import Settings, get_settings
from app.core.domain_types import SubjectId
from app.infrastructure.database import get_db
from app.schemas.base import MessageResponse
from app.schemas.enrollment import (
    EnrollmentListResponse,
    EnrollmentResponse,
    EnrollRequest,
    EnrollResponse,
)
from app.services.enrollment_workflow import EnrollmentWorkflow

router = APIRouter(
    prefix="/enrollments", tags=["enrollments"],
    dependencies=[Depends(get_current_subject)],
)


def get_workflow(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> EnrollmentWorkflow:
    return EnrollmentWorkflow(db, max_attempts=settings.enroll_max_attempts)


@router.post(
    "/enroll", response_model=EnrollResponse,
    status_code=status.HTTP_201_CREATED,
)
async def enroll(
    body: EnrollRequest,
    subject_id: SubjectId = Depends(get_current_subject),
    workflow: EnrollmentWorkflow = Depends(get_workflow),
):
    enrollment_id = await workflow.enroll(subject_id, body.course_id)
    return EnrollResponse(
        message="Enrolled successfully", enrollment_id=enrollment_id,
    )


@router.get("/student/{student_id}", response_model=EnrollmentListResponse)
async def list_student_enrollments(
    student_id: str,
    subject_id: SubjectId = Depends(get_current_subject),
    workflow: EnrollmentWorkflow = Depends(get_workflow),
):
    """Active (status == enrolled) enrollments of the caller."""
    enrollments = await workflow.list_for_student(subject_id, student_id)
    return EnrollmentListResponse(
        enrollments=[EnrollmentResponse.model_validate(e) for e in enrollments],
    )


@router.delete("/{enrollment_id}", response_model=MessageResponse)
async def drop_enrollment(
    enrollment_id: str,
    subject_id: SubjectId = Depends(get_current_subject),
    workflow: EnrollmentWorkflow = Depends(get_workflow),
):
    await workflow.drop(subject_id, enrollment_id)
    return MessageResponse(message="Course dropped successfully")
